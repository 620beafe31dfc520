r"""
Workload registry.

    from perf_harness.workloads.base import WorkloadRegistry

    registry = WorkloadRegistry()
    registry.register("rdd_line_count", run_rdd_line_count)
    for workload in registry.list_all():
        ...
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from perf_harness.errors import DuplicateNameError
from perf_harness.types import Workload

__all__ = ["WorkloadRegistry"]


class WorkloadRegistry:
    """Registry of named workloads.

    Populated once at startup and read-only afterwards.
    """

    def __init__(self) -> None:
        self._workloads: dict[str, Workload] = {}

    def register(self, name: str, body: Callable[[], Any], *, description: str = "") -> Workload:
        """Register a workload body under a unique name.

        Raises:
            DuplicateNameError: If the name is already registered.
        """
        if name in self._workloads:
            raise DuplicateNameError(name)
        workload = Workload(name=name, body=body, description=description)
        self._workloads[name] = workload
        return workload

    def workload(self, name: str, *, description: str = "") -> Any:
        """Decorator to register a workload function."""

        def decorator(body: Callable[[], Any]) -> Callable[[], Any]:
            self.register(name, body, description=description)
            return body

        return decorator

    def get(self, name: str) -> Workload | None:
        """Get workload by name."""
        return self._workloads.get(name)

    def list_all(self) -> list[Workload]:
        """All workloads in run order (descending by name)."""
        return [self._workloads[name] for name in self.names()]

    def names(self) -> list[str]:
        """Registered names in run order."""
        return sorted(self._workloads, reverse=True)

    def __len__(self) -> int:
        return len(self._workloads)

    def __contains__(self, name: object) -> bool:
        return name in self._workloads

    def __iter__(self) -> Iterator[Workload]:
        return iter(self.list_all())
