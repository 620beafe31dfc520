r"""
Command-line interface for perf-harness.

    perf-harness run /tmp/perf 10 hdfs:///perfdata/deletions/* -w my_suite.workloads
    perf-harness list -w my_suite.workloads
"""

from perf_harness.cli.main import app, main

__all__ = [
    "app",
    "main",
]
