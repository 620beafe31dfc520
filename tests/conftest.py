r"""
Shared pytest fixtures for perf-harness tests.
"""

import sys
from collections.abc import Callable, Iterable

import pytest

from perf_harness.types import NS_PER_SECOND
from perf_harness.workloads import WorkloadRegistry


class FakeClock:
    """Nanosecond clock that only moves when a workload body advances it."""

    def __init__(self) -> None:
        self.now_ns = 0

    def __call__(self) -> int:
        return self.now_ns

    def advance(self, seconds: float) -> None:
        self.now_ns += int(seconds * NS_PER_SECOND)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def timed_body(fake_clock: FakeClock) -> Callable[..., Callable[[], None]]:
    """Factory for bodies taking the given durations, one per call.

    Runs listed in fail_on (1-based) raise after advancing the clock.
    """

    def factory(durations: Iterable[float], *, fail_on: Iterable[int] = ()) -> Callable[[], None]:
        remaining = iter(durations)
        failing = set(fail_on)
        calls = 0

        def body() -> None:
            nonlocal calls
            calls += 1
            fake_clock.advance(next(remaining))
            if calls in failing:
                raise RuntimeError(f"run {calls} failed")

        return body

    return factory


@pytest.fixture
def abc_registry() -> WorkloadRegistry:
    """Registry with workloads registered out of order."""
    registry = WorkloadRegistry()
    for name in ("b", "a", "c"):
        registry.register(name, lambda: None)
    return registry


WORKLOAD_MODULE_NAME = "perf_harness_test_workloads"


@pytest.fixture
def workload_module(tmp_path, monkeypatch):
    """Write a workload module to an importable location and return its name."""

    def write(source: str) -> str:
        (tmp_path / f"{WORKLOAD_MODULE_NAME}.py").write_text(source)
        return WORKLOAD_MODULE_NAME

    monkeypatch.syspath_prepend(str(tmp_path))
    sys.modules.pop(WORKLOAD_MODULE_NAME, None)
    yield write
    sys.modules.pop(WORKLOAD_MODULE_NAME, None)
