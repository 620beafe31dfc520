r"""
Run coordinator for repeated workload execution.

    from perf_harness.runner import RunCoordinator

    coordinator = RunCoordinator()
    outcome = coordinator.run(registry, 10)
    for name, result in outcome.results.items():
        print(name, result.durations)
"""

import gc
import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from perf_harness.config import parse_run_count
from perf_harness.runner.timing import Clock, measure
from perf_harness.types import DurationSample, Workload, WorkloadResult
from perf_harness.workloads.base import WorkloadRegistry

__all__ = ["CoordinatorConfig", "CoordinatorResult", "ProgressCallback", "RunCoordinator"]

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, str], None]


@dataclass
class CoordinatorConfig:
    """Configuration for a coordinated run.

    Attributes:
        workloads: Names of workloads to run (None = all registered).
        continue_on_error: Keep running after a workload body raises.
        collect_garbage: Run gc.collect() between runs, outside the timed region.
    """

    workloads: list[str] | None = None
    continue_on_error: bool = True
    collect_garbage: bool = True


@dataclass
class CoordinatorResult:
    """Results from one coordinated run.

    Attributes:
        results: Workload name to its collected samples, in run order.
        started_at: Timestamp when the run started.
        completed_at: Timestamp when the run completed.
    """

    results: dict[str, WorkloadResult] = field(default_factory=dict)
    started_at: float = 0.0
    completed_at: float = 0.0

    @property
    def duration_seconds(self) -> float:
        """Total duration in seconds."""
        return self.completed_at - self.started_at

    @property
    def failure_count(self) -> int:
        """Number of failed runs across all workloads."""
        return sum(r.failure_count for r in self.results.values())


class RunCoordinator:
    """Runs every workload of a registry a fixed number of times.

    Runs are strictly sequential: one body finishes before the next
    run starts, and one workload's runs finish before the next workload.
    """

    def __init__(self, *, config: CoordinatorConfig | None = None, clock: Clock = time.perf_counter_ns) -> None:
        self._config = config or CoordinatorConfig()
        self._clock = clock
        self._progress_callback: ProgressCallback | None = None

    def set_progress_callback(self, callback: ProgressCallback) -> None:
        """Set callback for progress updates."""
        self._progress_callback = callback

    def run(
        self,
        registry: WorkloadRegistry,
        run_count: int,
        *,
        run_counts: Mapping[str, int] | None = None,
    ) -> CoordinatorResult:
        """Run all workloads and collect their samples.

        Args:
            registry: Workloads to run.
            run_count: Runs per workload; 0 skips the workload entirely.
            run_counts: Per-workload overrides of run_count.

        Returns:
            CoordinatorResult keyed by workload name.

        Raises:
            InvalidRunCountError: If any run count is negative or not an integer.
        """
        default_count = parse_run_count(run_count)
        overrides = {name: parse_run_count(count) for name, count in (run_counts or {}).items()}
        for name in overrides:
            if name not in registry:
                logger.warning("Run count override for unknown workload '%s' ignored", name)

        outcome = CoordinatorResult(started_at=time.time())

        for workload in self._resolve_workloads(registry):
            count = overrides.get(workload.name, default_count)
            if count == 0:
                logger.info("Skipping perf suite %s, runCount=0", workload.name)
                continue
            outcome.results[workload.name] = self._run_workload(workload, count)

        outcome.completed_at = time.time()
        return outcome

    def _resolve_workloads(self, registry: WorkloadRegistry) -> list[Workload]:
        """Resolve workloads to run, in registry order."""
        workloads = registry.list_all()
        selected = self._config.workloads
        if selected is None:
            return workloads

        for name in selected:
            if name not in registry:
                logger.warning("Unknown workload '%s' requested, skipping", name)
        return [w for w in workloads if w.name in selected]

    def _run_workload(self, workload: Workload, count: int) -> WorkloadResult:
        """Run one workload count times and return its samples."""
        samples: list[DurationSample] = []

        for index in range(count):
            logger.info("Starting perf suite %s, runCount=%d", workload.name, count - index)
            if self._progress_callback:
                self._progress_callback(workload.name, index, "running")

            timed = measure(workload.body, clock=self._clock)
            if self._config.collect_garbage:
                gc.collect()

            if timed.error is None:
                samples.append(DurationSample(elapsed_ns=timed.elapsed_ns))
            else:
                samples.append(DurationSample(elapsed_ns=timed.elapsed_ns, error=str(timed.error)))
                logger.error(
                    "Perf suite %s failed on run %d of %d after %.3fs",
                    workload.name,
                    index + 1,
                    count,
                    timed.elapsed_seconds,
                    exc_info=timed.error,
                )

            if self._progress_callback:
                self._progress_callback(workload.name, index, "success" if timed.ok else "failed")

            if timed.error is not None and not self._config.continue_on_error:
                raise timed.error

        return WorkloadResult(workload_name=workload.name, samples=tuple(samples))
