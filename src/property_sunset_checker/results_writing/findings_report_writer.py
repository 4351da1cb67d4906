"""Findings workbook writer service."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from property_sunset_checker.configuration.runtime_settings import Severity

from .report_models import ReportedFinding, RunMetadata

FINDINGS_SHEET_NAME = "Findings"
RUN_INFO_SHEET_NAME = "RunInfo"

FINDINGS_COLUMNS: tuple[str, ...] = (
    "Severity",
    "Check",
    "Location",
    "Property",
    "Kind",
    "Sunset",
    "Message",
)
_COLUMN_WIDTHS: tuple[int, ...] = (10, 44, 36, 30, 20, 12, 80)


def write_findings_workbook(
    output_path: Path | str,
    reported_findings: Sequence[ReportedFinding],
    run_metadata: RunMetadata,
) -> None:
    """Write the findings and run metadata into an xlsx workbook."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = FINDINGS_SHEET_NAME
    _write_findings_header(sheet)
    for row_number, reported in enumerate(reported_findings, start=2):
        _write_finding_row(sheet, row_number, reported)
    sheet.freeze_panes = "A2"

    _write_run_info_sheet(workbook, run_metadata, reported_findings)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)


def _write_findings_header(sheet) -> None:
    for column_index, (title, width) in enumerate(
        zip(FINDINGS_COLUMNS, _COLUMN_WIDTHS, strict=True), start=1
    ):
        sheet.cell(row=1, column=column_index, value=title)
        sheet.cell(row=1, column=column_index).style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column_index)].width = width


def _write_finding_row(sheet, row_number: int, reported: ReportedFinding) -> None:
    finding = reported.finding
    values = (
        reported.severity.value,
        reported.check_id,
        reported.location,
        finding.property_path,
        finding.kind.value,
        finding.sunset_date.isoformat() if finding.sunset_date else None,
        reported.message,
    )
    for column_index, value in enumerate(values, start=1):
        sheet.cell(row=row_number, column=column_index, value=value)


def _write_run_info_sheet(
    workbook,
    run_metadata: RunMetadata,
    reported_findings: Sequence[ReportedFinding],
) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    severity_counts = Counter(item.severity for item in reported_findings)
    entries = (
        ("run_start", run_metadata.run_start.isoformat()),
        ("diff_path", str(run_metadata.diff_path)),
        ("config_path", str(run_metadata.config_path) if run_metadata.config_path else "defaults"),
        ("output_path", str(run_metadata.output_path)),
        ("total", len(reported_findings)),
        *((severity.value, severity_counts.get(severity, 0)) for severity in Severity),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)
