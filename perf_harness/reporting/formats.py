r"""
Text report rendering.

Renders one detail line per workload, in run order (descending name),
followed by a single summary line whose median list is in ascending
name order.

    from perf_harness.reporting.formats import ReportGenerator

    print(ReportGenerator().render(outcome.results))
"""

import re
from collections.abc import Callable, Mapping
from datetime import datetime

from perf_harness.reporting.stats import aggregate
from perf_harness.types import AggregateReport, AggregateStats, WorkloadResult

__all__ = ["ReportGenerator", "timezone_tag"]

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def timezone_tag(now: datetime | None = None) -> str:
    """Abbreviated name of the local timezone.

    Multi-word zone names ("Pacific Standard Time") are reduced to
    their initials ("PST").
    """
    now = now or datetime.now()
    if now.tzinfo is None:
        now = now.astimezone()
    name = (now.tzname() or "").strip()
    if re.search(r"\s", name):
        return re.sub(r"(\w)\S*\s*", r"\1", name)
    return name


class ReportGenerator:
    """Renders per-workload aggregates and the summary line."""

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = datetime.now,
        tz_tag: str | None = None,
        language: str = "Python",
    ) -> None:
        self._clock = clock
        self._tz_tag = tz_tag
        self._language = language

    def build(self, results: Mapping[str, WorkloadResult]) -> AggregateReport:
        """Aggregate every workload and compose the summary line."""
        per_workload = {name: aggregate(results[name].samples) for name in self._run_order(results)}
        return AggregateReport(per_workload=per_workload, summary_line=self._summary_line(results, per_workload))

    def render(self, results: Mapping[str, WorkloadResult]) -> str:
        """Render the full report text."""
        report = self.build(results)
        lines = [
            self._detail_line(name, stats, results[name].durations) for name, stats in report.per_workload.items()
        ]
        lines.append(report.summary_line)
        return "\n".join(lines)

    def _run_order(self, results: Mapping[str, WorkloadResult]) -> list[str]:
        # Workloads never run produce no line
        return sorted((name for name, r in results.items() if r.count > 0), reverse=True)

    def _detail_line(self, name: str, stats: AggregateStats, durations: list[int]) -> str:
        runs = ",".join(str(d) for d in durations)
        return (
            f"{name}: min={stats.min},max={stats.max},mean={stats.mean},"
            f"median={stats.median},count={stats.count},[{runs}]"
        )

    def _summary_line(self, results: Mapping[str, WorkloadResult], per_workload: Mapping[str, AggregateStats]) -> str:
        now = self._clock()
        tz = self._tz_tag if self._tz_tag is not None else timezone_tag(now)

        # Run count of the first workload processed stands in for all of them
        first = next(iter(per_workload), None)
        run_count = results[first].count if first is not None else 0

        medians = "; ".join(f"{name}={per_workload[name].median}" for name in sorted(per_workload))
        return (
            f"{now.strftime(TIMESTAMP_FORMAT)} {tz} {self._language} version: "
            f"Run count = {run_count}, all median time costs[{len(per_workload)}] : {medians}"
        )
