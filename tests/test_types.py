r"""
Tests for perf_harness.types module.
"""

import pytest

from perf_harness.types import DurationSample, RunStatus, Workload, WorkloadResult


class TestRunStatus:
    def test_status_values(self):
        assert RunStatus.SUCCESS.value == 1
        assert RunStatus.FAILED.value == 2


class TestWorkload:
    def test_description_from_docstring(self):
        def rdd_line_count():
            """Count lines through the RDD API.

            Longer explanation.
            """

        workload = Workload(name="rdd_line_count", body=rdd_line_count)
        assert workload.description == "Count lines through the RDD API."

    def test_description_defaults_to_name(self):
        workload = Workload(name="noop", body=lambda: None)
        assert workload.description == "noop"

    def test_explicit_description(self):
        workload = Workload(name="noop", body=lambda: None, description="does nothing")
        assert workload.description == "does nothing"

    def test_workload_is_frozen(self):
        workload = Workload(name="noop", body=lambda: None)
        with pytest.raises(AttributeError):
            workload.name = "other"  # type: ignore[misc]


class TestDurationSample:
    def test_conversions(self):
        sample = DurationSample(elapsed_ns=2_500_000_000)
        assert sample.elapsed_seconds == 2.5
        assert sample.whole_seconds == 2

    def test_fraction_is_truncated_not_rounded(self):
        assert DurationSample(elapsed_ns=1_999_999_999).whole_seconds == 1

    def test_negative_duration_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            DurationSample(elapsed_ns=-1)

    def test_status(self):
        assert DurationSample(elapsed_ns=0).status == RunStatus.SUCCESS
        assert DurationSample(elapsed_ns=0, error="boom").status == RunStatus.FAILED


class TestWorkloadResult:
    def test_durations_keep_run_order(self):
        result = WorkloadResult(
            workload_name="x",
            samples=(
                DurationSample(6_000_000_000),
                DurationSample(2_100_000_000),
                DurationSample(4_900_000_000, error="boom"),
            ),
        )
        assert result.durations == [6, 2, 4]
        assert result.count == 3
        assert result.failure_count == 1

    def test_empty_result(self):
        result = WorkloadResult(workload_name="x")
        assert result.count == 0
        assert result.durations == []
