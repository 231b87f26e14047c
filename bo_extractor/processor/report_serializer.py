from bo_extractor.processor.models import ExtractedReport, ExtractionError, FieldAlias


class ReportSerializer:
    """Converts extraction output to the tracking system's JSON payloads."""

    def serialize(self, report: ExtractedReport) -> dict[str, object]:
        """Transform an ExtractedReport into a camelCase, JSON-ready dict."""
        workflow = report.workflow
        return {
            "fileName": report.file_name,
            "sql": report.sql,
            "fieldAliases": [self._alias_to_dict(a) for a in report.field_aliases],
            "parameters": list(report.parameters),
            "formulas": list(report.formulas),
            "tables": list(report.tables),
            "hasVBA": report.has_vba,
            "complexity": report.complexity.value,
            "days": report.days,
            "status": workflow.status,
            "assignedTo": workflow.assigned_to,
            "actualDays": workflow.actual_days,
            "notes": workflow.notes,
            "pbiReportName": workflow.pbi_report_name,
            "dateCompleted": workflow.date_completed,
            "signedOff": workflow.signed_off,
            "signedOffBy": workflow.signed_off_by,
            "signedOffDate": workflow.signed_off_date,
        }

    def serialize_error(self, error: ExtractionError) -> dict[str, str]:
        return {"fileName": error.file_name, "error": error.error}

    def _alias_to_dict(self, alias: FieldAlias) -> dict[str, str]:
        return {"column": alias.column, "alias": alias.alias}
