r"""
Workload discovery.

Workloads are registered explicitly, either by calling
WorkloadRegistry.register or from a workload module's
register_workloads(registry, config) hook.

    from perf_harness.workloads import WorkloadRegistry

    registry = WorkloadRegistry()

    @registry.workload("df_line_count")
    def df_line_count() -> None:
        ...
"""

from perf_harness.workloads.base import WorkloadRegistry
from perf_harness.workloads.loader import REGISTER_HOOK, load_workload_module

__all__ = [
    "REGISTER_HOOK",
    "WorkloadRegistry",
    "load_workload_module",
]
