"""Results writing domain exports."""

from .finding_rendering import (
    DEFAULT_SEVERITIES,
    build_reported_findings,
    format_report_line,
    reaches_severity,
    render_finding_message,
)
from .findings_report_writer import (
    FINDINGS_COLUMNS,
    FINDINGS_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    write_findings_workbook,
)
from .report_models import ReportedFinding, RunMetadata

__all__ = [
    "DEFAULT_SEVERITIES",
    "FINDINGS_COLUMNS",
    "FINDINGS_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "ReportedFinding",
    "RunMetadata",
    "build_reported_findings",
    "format_report_line",
    "reaches_severity",
    "render_finding_message",
    "write_findings_workbook",
]
