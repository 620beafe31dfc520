r"""
Protocol definitions for harness collaborators.

The workload environment is acquired before the first workload
runs and released after the last one completes.

    from perf_harness.protocols import WorkloadEnvironment

    class SessionEnvironment:
        def open(self) -> None: ...
        def close(self) -> None: ...
"""

from typing import Protocol, runtime_checkable

__all__ = ["WorkloadEnvironment"]


@runtime_checkable
class WorkloadEnvironment(Protocol):
    """Protocol for the resource shared by all workload bodies."""

    def open(self) -> None:
        """Acquire the environment."""
        ...

    def close(self) -> None:
        """Release the environment."""
        ...
