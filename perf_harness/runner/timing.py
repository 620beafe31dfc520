r"""
Timing utilities for workload runs.

    from perf_harness.runner.timing import Timer, measure

    outcome = measure(run_rdd_line_count)
    if outcome.error is not None:
        ...
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from perf_harness.types import NS_PER_SECOND

__all__ = ["Clock", "Timer", "TimerResult", "measure"]

Clock = Callable[[], int]


@dataclass
class TimerResult:
    """Result from a timing measurement.

    Attributes:
        elapsed_ns: Elapsed time in nanoseconds, up to return or failure.
        error: Exception raised by the timed function, if any.
    """

    elapsed_ns: int
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return self.elapsed_ns / NS_PER_SECOND


class Timer:
    """Context manager for timing code blocks.

        with Timer() as t:
            do_something()
        print(f"Elapsed: {t.elapsed_seconds}s")
    """

    def __init__(self, *, clock: Clock = time.perf_counter_ns) -> None:
        self._clock = clock
        self._start: int = 0
        self._end: int = 0

    def __enter__(self) -> "Timer":
        self._start = self._clock()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self._end = self._clock()

    @property
    def elapsed_ns(self) -> int:
        """Elapsed time in nanoseconds."""
        return self._end - self._start

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return self.elapsed_ns / NS_PER_SECOND


def measure(func: Callable[[], Any], *, clock: Clock = time.perf_counter_ns) -> TimerResult:
    """Invoke a function once and measure its duration.

    Exceptions raised by the function are captured in the result
    together with the time elapsed up to the failure.

    Args:
        func: Function to call (no arguments).
        clock: Monotonic nanosecond clock.

    Returns:
        TimerResult with elapsed time and captured error.
    """
    timer = Timer(clock=clock)
    try:
        with timer:
            func()
    except Exception as e:
        return TimerResult(elapsed_ns=max(timer.elapsed_ns, 0), error=e)
    return TimerResult(elapsed_ns=max(timer.elapsed_ns, 0))
