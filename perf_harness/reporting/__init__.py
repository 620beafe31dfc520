r"""
Statistics aggregation and report rendering.

    from perf_harness.reporting import ReportGenerator, aggregate

    stats = aggregate(result.samples)
    print(ReportGenerator().render(outcome.results))
"""

from perf_harness.reporting.formats import ReportGenerator, timezone_tag
from perf_harness.reporting.stats import aggregate, median_value, whole_seconds

__all__ = [
    "ReportGenerator",
    "aggregate",
    "median_value",
    "timezone_tag",
    "whole_seconds",
]
