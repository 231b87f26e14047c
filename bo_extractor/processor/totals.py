"""Project-level totals over extracted reports."""

from collections import Counter
from dataclasses import dataclass, field

from bo_extractor.processor.models import REPORT_STATUSES, Complexity, ExtractedReport


@dataclass(frozen=True)
class ReportTotals:
    count: int = 0
    days: float = 0.0
    actual_days: float = 0.0
    tables: int = 0
    simple: int = 0
    medium: int = 0
    complex: int = 0
    signed_off: int = 0
    by_status: dict[str, int] = field(default_factory=dict)


def summarize(reports: list[ExtractedReport]) -> ReportTotals:
    """Sum estimates and count reports per complexity tier and status.

    Unparseable ``actual_days`` entries count as zero.
    """
    complexities = Counter(r.complexity for r in reports)
    statuses = Counter(r.workflow.status for r in reports)
    return ReportTotals(
        count=len(reports),
        days=sum(r.days for r in reports),
        actual_days=sum(_parse_days(r.workflow.actual_days) for r in reports),
        tables=len({t for r in reports for t in r.tables}),
        simple=complexities[Complexity.SIMPLE],
        medium=complexities[Complexity.MEDIUM],
        complex=complexities[Complexity.COMPLEX],
        signed_off=sum(1 for r in reports if r.workflow.signed_off),
        by_status={status: statuses[status] for status in REPORT_STATUSES},
    )


def _parse_days(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        return 0.0
