r"""
Core types for the benchmark harness.

    from perf_harness.types import DurationSample, WorkloadResult

    result = WorkloadResult(workload_name="line_count", samples=(DurationSample(2_000_000_000),))
    print(result.durations)  # [2]
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import IntEnum, auto
from typing import Any

__all__ = [
    "RunStatus",
    "Workload",
    "DurationSample",
    "WorkloadResult",
    "AggregateStats",
    "AggregateReport",
]

NS_PER_SECOND = 1_000_000_000


class RunStatus(IntEnum):
    """Outcome of a single workload run."""

    SUCCESS = auto()
    FAILED = auto()


@dataclass(frozen=True, slots=True)
class Workload:
    """A named, repeatable unit of work.

    Attributes:
        name: Unique, stable identifier.
        body: Zero-argument callable; its return value is ignored.
        description: Human-readable description.
    """

    name: str
    body: Callable[[], Any]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.description:
            doc = (getattr(self.body, "__doc__", None) or "").strip()
            object.__setattr__(self, "description", doc.splitlines()[0] if doc else self.name)


@dataclass(frozen=True, slots=True)
class DurationSample:
    """One measured duration of a single workload run.

    Attributes:
        elapsed_ns: Elapsed wall-clock time in nanoseconds.
        error: Error message if the run raised.
    """

    elapsed_ns: int
    error: str | None = None

    def __post_init__(self) -> None:
        if self.elapsed_ns < 0:
            msg = f"Duration cannot be negative: {self.elapsed_ns}ns"
            raise ValueError(msg)

    @property
    def status(self) -> RunStatus:
        return RunStatus.FAILED if self.error is not None else RunStatus.SUCCESS

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return self.elapsed_ns / NS_PER_SECOND

    @property
    def whole_seconds(self) -> int:
        """Elapsed time in seconds with the fractional part discarded."""
        return self.elapsed_ns // NS_PER_SECOND


@dataclass(frozen=True, slots=True)
class WorkloadResult:
    """All samples collected for one workload, in run order.

    Attributes:
        workload_name: Name of the workload.
        samples: Samples in the order the runs happened.
    """

    workload_name: str
    samples: tuple[DurationSample, ...] = ()

    @property
    def count(self) -> int:
        return len(self.samples)

    @property
    def failure_count(self) -> int:
        """Number of runs that raised."""
        return sum(1 for s in self.samples if s.status == RunStatus.FAILED)

    @property
    def durations(self) -> list[int]:
        """Whole-second durations in run order."""
        return [s.whole_seconds for s in self.samples]


@dataclass(frozen=True, slots=True)
class AggregateStats:
    """Aggregate statistics over one workload's samples, in whole seconds.

    Attributes:
        min: Shortest run.
        max: Longest run.
        mean: Floor of the arithmetic mean.
        median: Middle value; floor of the two middle values' mean for even counts.
        count: Number of samples aggregated.
    """

    min: int
    max: int
    mean: int
    median: int
    count: int


@dataclass(frozen=True, slots=True)
class AggregateReport:
    """Aggregates for every reported workload plus the summary line.

    Attributes:
        per_workload: Workload name to its aggregate statistics.
        summary_line: Single machine-parsable summary line.
    """

    per_workload: Mapping[str, AggregateStats] = field(default_factory=dict)
    summary_line: str = ""
