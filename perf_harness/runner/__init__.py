r"""
Workload execution and timing.

Runs each registered workload a fixed number of times, strictly
sequentially, inside an acquired workload environment.

    from perf_harness.runner import RunCoordinator, open_environment

    with open_environment(environment):
        outcome = RunCoordinator().run(registry, 10)
"""

from perf_harness.runner.coordinator import CoordinatorConfig, CoordinatorResult, RunCoordinator
from perf_harness.runner.environment import NullEnvironment, StagingEnvironment, open_environment
from perf_harness.runner.timing import Timer, TimerResult, measure

__all__ = [
    "CoordinatorConfig",
    "CoordinatorResult",
    "NullEnvironment",
    "RunCoordinator",
    "StagingEnvironment",
    "Timer",
    "TimerResult",
    "measure",
    "open_environment",
]
