"""Rendering of findings into reported, severity-tagged messages."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from property_sunset_checker.configuration.runtime_settings import Severity, SeverityConfig
from property_sunset_checker.findings.check_ids import check_id_for
from property_sunset_checker.findings.finding_models import (
    DeprecationFinding,
    FindingKind,
    ScopeKind,
)

from .report_models import ReportedFinding

DEFAULT_SEVERITIES: dict[FindingKind, Severity] = {
    FindingKind.DEPRECATED: Severity.INFO,
    FindingKind.SUNSET_MISSING: Severity.ERROR,
    FindingKind.SUNSET_UNPARSEABLE: Severity.ERROR,
    FindingKind.REACTIVATED: Severity.INFO,
}


def build_reported_findings(
    findings: Iterable[DeprecationFinding],
    severity_config: SeverityConfig | None = None,
) -> list[ReportedFinding]:
    """Attach check id, severity and message to each finding.

    Output is sorted by descending severity, then location and property path.
    """
    overrides = severity_config.overrides if severity_config else {}
    reported = []
    for finding in findings:
        check_id = check_id_for(finding)
        reported.append(
            ReportedFinding(
                finding=finding,
                check_id=check_id,
                severity=overrides.get(check_id, DEFAULT_SEVERITIES[finding.kind]),
                location=finding.scope.describe(),
                message=render_finding_message(finding),
            )
        )
    return sorted(
        reported,
        key=lambda item: (-item.severity.rank, item.location, item.finding.property_path),
    )


def render_finding_message(finding: DeprecationFinding) -> str:
    """Return a human-readable description of one finding."""
    subject = _describe_property(finding)
    if finding.kind == FindingKind.DEPRECATED:
        return f"{subject} deprecated with sunset date {finding.sunset_date.isoformat()}"
    if finding.kind == FindingKind.SUNSET_MISSING:
        return (
            f"{subject} deprecated without sunset date although stability level "
            f"'{finding.stability_level}' requires one"
        )
    if finding.kind == FindingKind.SUNSET_UNPARSEABLE:
        return f"{subject} deprecated with unparseable sunset date: {finding.parse_error}"
    return f"{subject} is no longer deprecated"


def format_report_line(reported: ReportedFinding) -> str:
    """Format one reported finding as a single text line."""
    return (
        f"{reported.severity.value.upper()} [{reported.check_id}] "
        f"{reported.location}: {reported.message}"
    )


def reaches_severity(reported_findings: Sequence[ReportedFinding], threshold: Severity) -> bool:
    """Return True when any finding is at or above the threshold."""
    return any(item.severity.rank >= threshold.rank for item in reported_findings)


def _describe_property(finding: DeprecationFinding) -> str:
    scope = finding.scope
    if scope.kind == ScopeKind.COMPONENT_SCHEMA:
        return f"property '{finding.property_path}' of schema '{scope.schema_name}'"
    if scope.kind == ScopeKind.REQUEST_BODY:
        return f"request property '{finding.property_path}'"
    return f"response property '{finding.property_path}'"
