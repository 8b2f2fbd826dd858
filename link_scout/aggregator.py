# File: link_scout/aggregator.py
"""link_scout.aggregator: summary of a finished check run for the file reports."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Iterable, List, Optional, TypedDict

from link_scout.crawler.models import CheckResult


class ResultInfo(TypedDict):
    """One checked URL as it appears in the reports."""

    url: str
    outcome: str
    status: Optional[int]
    error: Optional[str]


@dataclass(slots=True)
class CheckReport:
    """Checked URLs split by outcome, each list sorted by URL."""

    root_url: str = ""
    broken: List[ResultInfo] = field(default_factory=list)
    ok: List[ResultInfo] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.broken) + len(self.ok)

    def as_dict(self) -> dict:
        data = asdict(self)
        data["total"] = self.total
        return data


def _info(result: CheckResult) -> ResultInfo:
    return {
        "url": result.url,
        "outcome": result.outcome.value,
        "status": result.status,
        "error": result.error,
    }


def aggregate_results(results: Iterable[CheckResult], root_url: str = "") -> CheckReport:
    """Collect raw CheckResults into a CheckReport."""
    report = CheckReport(root_url=root_url)
    for result in sorted(results, key=lambda r: r.url):
        (report.ok if result.ok else report.broken).append(_info(result))
    return report
