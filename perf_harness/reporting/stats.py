r"""
Aggregate statistics over whole-second durations.

Durations are truncated to whole seconds before any statistic is
computed; mean and even-count medians are floored.

    from perf_harness.reporting.stats import aggregate

    stats = aggregate([1, 2, 3, 4])
    assert stats.median == 2
"""

from collections.abc import Sequence

from perf_harness.errors import EmptySampleSetError
from perf_harness.types import AggregateStats, DurationSample

__all__ = ["aggregate", "median_value", "whole_seconds"]


def whole_seconds(sample: DurationSample | int | float) -> int:
    """Duration in whole seconds, fractional part discarded."""
    if isinstance(sample, DurationSample):
        return sample.whole_seconds
    if sample < 0:
        msg = f"Duration cannot be negative: {sample}"
        raise ValueError(msg)
    return int(sample)


def median_value(values: Sequence[int]) -> int:
    """Median of integer values, floored for even counts.

    Raises:
        EmptySampleSetError: If values is empty.
    """
    if not values:
        raise EmptySampleSetError()

    ordered = sorted(values)
    n = len(ordered)
    if n % 2 == 0:
        return (ordered[n // 2] + ordered[n // 2 - 1]) // 2
    return ordered[(n - 1) // 2]


def aggregate(samples: Sequence[DurationSample | int | float]) -> AggregateStats:
    """Compute min/max/mean/median over samples.

    Args:
        samples: Durations as DurationSample objects or numbers of seconds.

    Returns:
        AggregateStats in whole seconds.

    Raises:
        EmptySampleSetError: If samples is empty.
    """
    if not samples:
        raise EmptySampleSetError()

    values = [whole_seconds(s) for s in samples]
    return AggregateStats(
        min=min(values),
        max=max(values),
        mean=sum(values) // len(values),
        median=median_value(values),
        count=len(values),
    )
