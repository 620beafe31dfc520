r"""
Scoped acquisition of the workload environment.

    from perf_harness.runner.environment import StagingEnvironment, open_environment

    with open_environment(StagingEnvironment(Path("/tmp/perf"))):
        outcome = coordinator.run(registry, 10)
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from perf_harness.config import DEFAULT_APP_NAME
from perf_harness.protocols import WorkloadEnvironment

__all__ = ["NullEnvironment", "StagingEnvironment", "open_environment"]

logger = logging.getLogger(__name__)


class NullEnvironment:
    """Environment with nothing to acquire."""

    def open(self) -> None:
        pass

    def close(self) -> None:
        pass


class StagingEnvironment:
    """Environment backed by a local working/staging directory.

    The directory is created on open if it does not exist.
    """

    def __init__(self, local_dir: Path, *, app_name: str = DEFAULT_APP_NAME) -> None:
        self._local_dir = Path(local_dir)
        self._app_name = app_name
        self._opened = False

    @property
    def local_dir(self) -> Path:
        return self._local_dir

    @property
    def app_name(self) -> str:
        return self._app_name

    @property
    def opened(self) -> bool:
        """Whether the environment is currently open."""
        return self._opened

    def open(self) -> None:
        self._local_dir.mkdir(parents=True, exist_ok=True)
        self._opened = True
        logger.info("Opened environment '%s' at %s", self._app_name, self._local_dir)

    def close(self) -> None:
        self._opened = False
        logger.info("Closed environment '%s'", self._app_name)


@contextmanager
def open_environment(environment: WorkloadEnvironment) -> Iterator[WorkloadEnvironment]:
    """Open an environment and guarantee it is closed on exit.

    Args:
        environment: Environment to acquire.

    Yields:
        The opened environment.
    """
    environment.open()
    try:
        yield environment
    finally:
        environment.close()
