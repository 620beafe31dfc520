r"""
Exceptions raised by the harness.

    from perf_harness.errors import HarnessError

    try:
        coordinator.run(registry, run_count)
    except HarnessError as e:
        ...
"""

__all__ = [
    "HarnessError",
    "DuplicateNameError",
    "InvalidRunCountError",
    "EmptySampleSetError",
    "WorkloadModuleError",
]


class HarnessError(Exception):
    """Base class for all harness errors."""


class DuplicateNameError(HarnessError, ValueError):
    """A workload with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Workload '{name}' is already registered")
        self.name = name


class InvalidRunCountError(HarnessError, ValueError):
    """Run count is negative or not an integer."""

    def __init__(self, value: object, *, workload: str | None = None) -> None:
        target = f" for workload '{workload}'" if workload else ""
        super().__init__(f"Invalid run count {value!r}{target}: expected a non-negative integer")
        self.value = value
        self.workload = workload


class EmptySampleSetError(HarnessError, ValueError):
    """Aggregation was attempted over zero samples."""

    def __init__(self) -> None:
        super().__init__("Cannot aggregate an empty sample set")


class WorkloadModuleError(HarnessError, ImportError):
    """Workload module could not be imported or has no registration hook."""
