r"""
perf-harness: repeated-execution benchmark harness.

Runs a registry of named workloads a fixed number of times each,
in descending name order, and reports min/max/mean/median per workload
plus a single summary line for dashboards and regression scripts.

    from perf_harness import WorkloadRegistry, RunCoordinator, ReportGenerator

    registry = WorkloadRegistry()
    registry.register("line_count", count_lines)

    outcome = RunCoordinator().run(registry, 10)
    print(ReportGenerator().render(outcome.results))
"""

from perf_harness.errors import (
    DuplicateNameError,
    EmptySampleSetError,
    HarnessError,
    InvalidRunCountError,
    WorkloadModuleError,
)
from perf_harness.reporting import ReportGenerator, aggregate
from perf_harness.runner import CoordinatorConfig, RunCoordinator, open_environment
from perf_harness.types import AggregateReport, AggregateStats, DurationSample, Workload, WorkloadResult
from perf_harness.workloads import WorkloadRegistry

__all__ = [
    "AggregateReport",
    "AggregateStats",
    "CoordinatorConfig",
    "DuplicateNameError",
    "DurationSample",
    "EmptySampleSetError",
    "HarnessError",
    "InvalidRunCountError",
    "ReportGenerator",
    "RunCoordinator",
    "Workload",
    "WorkloadModuleError",
    "WorkloadRegistry",
    "WorkloadResult",
    "aggregate",
    "open_environment",
]

__version__ = "0.1.0"
