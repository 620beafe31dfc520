r"""
Harness configuration and environment lookup.

Settings come from the command line first, then from
PERF_HARNESS_* environment variables (a .env file is honoured).

    from perf_harness.config import HarnessConfig, get_env

    config = HarnessConfig.from_args("/tmp/perf", "10", "file:///data/deletions")
    module = get_env("WORKLOADS")
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from perf_harness.errors import InvalidRunCountError

# Look for .env in current dir, then next to the package
_env_file = Path(".env")
if not _env_file.exists():
    _env_file = Path(__file__).parent.parent / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

__all__ = [
    "DEFAULT_APP_NAME",
    "ENV_PREFIX",
    "HarnessConfig",
    "get_env",
    "parse_run_count",
]

ENV_PREFIX = "PERF_HARNESS_"

DEFAULT_APP_NAME = "perf suite - Python"


def get_env(key: str, *, default: str | None = None) -> str | None:
    """Get environment variable with PERF_HARNESS_ prefix.

    Args:
        key: Variable name without prefix (e.g., "WORKLOADS").
        default: Default value if not set.

    Returns:
        Environment variable value or default.
    """
    return os.environ.get(f"{ENV_PREFIX}{key}", default)


def parse_run_count(value: str | int) -> int:
    """Parse a run count argument.

    Args:
        value: Raw value, usually a command-line string.

    Returns:
        Run count as a non-negative integer.

    Raises:
        InvalidRunCountError: If the value is not an integer or is negative.
    """
    if isinstance(value, bool):
        raise InvalidRunCountError(value)
    if isinstance(value, int):
        count = value
    else:
        try:
            count = int(value.strip())
        except (AttributeError, ValueError):
            raise InvalidRunCountError(value) from None
    if count < 0:
        raise InvalidRunCountError(value)
    return count


@dataclass(frozen=True, slots=True)
class HarnessConfig:
    """Parsed harness arguments.

    Attributes:
        local_dir: Working/staging directory for the workload environment.
        run_count: Number of runs per workload.
        data_path: Data location handed to workloads.
        app_name: Application name reported to the environment.
    """

    local_dir: Path
    run_count: int
    data_path: str
    app_name: str = DEFAULT_APP_NAME

    @classmethod
    def from_args(cls, local_dir: str | Path, run_count: str | int, data_path: str) -> "HarnessConfig":
        """Build a config from the three positional arguments."""
        return cls(
            local_dir=Path(local_dir),
            run_count=parse_run_count(run_count),
            data_path=data_path,
            app_name=get_env("APP_NAME", default=DEFAULT_APP_NAME) or DEFAULT_APP_NAME,
        )
