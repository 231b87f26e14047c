from dataclasses import dataclass, field
from enum import Enum


class Complexity(str, Enum):
    """Coarse migration complexity tier."""

    SIMPLE = "Simple"
    MEDIUM = "Medium"
    COMPLEX = "Complex"


# Workflow statuses owned by the tracking system, in display order.
REPORT_STATUSES: dict[str, str] = {
    "not_started": "Not Started",
    "in_progress": "In Progress",
    "testing": "Testing",
    "complete": "Complete",
}


@dataclass(frozen=True)
class RawInput:
    """One uploaded report file. Lives only for one extraction call."""

    file_name: str
    content: bytes


@dataclass(frozen=True)
class FieldAlias:
    """A source column paired with its display label."""

    column: str
    alias: str


@dataclass
class ReportWorkflow:
    """Tracking fields; defaults only, never recomputed by the extractor."""

    status: str = "not_started"
    assigned_to: str = ""
    actual_days: str = ""
    notes: str = ""
    pbi_report_name: str = ""
    date_completed: str = ""
    signed_off: bool = False
    signed_off_by: str = ""
    signed_off_date: str = ""


@dataclass(frozen=True)
class ExtractedReport:
    """Structured description of one report definition file."""

    file_name: str
    sql: str
    field_aliases: tuple[FieldAlias, ...]
    parameters: tuple[str, ...]
    formulas: tuple[str, ...]
    tables: tuple[str, ...]
    has_vba: bool
    complexity: Complexity
    days: float
    workflow: ReportWorkflow = field(default_factory=ReportWorkflow, compare=False)


@dataclass(frozen=True)
class ExtractionError:
    """Per-file failure; no report is emitted for this file."""

    file_name: str
    error: str


@dataclass
class BatchResult:
    """Outcome of one submitted batch."""

    reports: list[ExtractedReport] = field(default_factory=list)
    errors: list[ExtractionError] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)

    @property
    def has_successes(self) -> bool:
        return bool(self.reports)

    @property
    def failed_file_names(self) -> list[str]:
        return [e.file_name for e in self.errors]
