"""Sunset check use-case service."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from property_sunset_checker.configuration import (
    ConfigurationError,
    default_configuration,
    load_configuration,
)
from property_sunset_checker.diff_tree import DiffDocumentError, load_diff_document
from property_sunset_checker.finding_aggregation import aggregate_findings
from property_sunset_checker.results_writing import (
    RunMetadata,
    build_reported_findings,
    reaches_severity,
    write_findings_workbook,
)

from .run_contracts import CheckArtifacts, CheckOutcome, CheckRequest


class CheckExecutionError(Exception):
    """Raised when a check run cannot be completed."""


def execute_sunset_check(request: CheckRequest) -> CheckOutcome:
    """Execute one sunset check run and return its outcome."""
    if request.max_workers <= 0:
        raise CheckExecutionError("max_workers must be greater than zero.")

    run_start = datetime.now(UTC)
    artifacts = _load_check_artifacts(request.diff_path, request.config_path)
    findings = aggregate_findings(
        artifacts.report,
        artifacts.configuration.policy,
        max_workers=request.max_workers,
    )
    reported_findings = build_reported_findings(findings, artifacts.configuration.severity)

    output_path = Path(request.output_path).resolve() if request.output_path else None
    if output_path is not None:
        try:
            write_findings_workbook(
                output_path,
                reported_findings,
                RunMetadata(
                    run_start=run_start,
                    diff_path=Path(request.diff_path).resolve(),
                    config_path=artifacts.configuration.path,
                    output_path=output_path,
                ),
            )
        except OSError as exc:
            raise CheckExecutionError(str(exc)) from exc

    failed = request.fail_on is not None and reaches_severity(reported_findings, request.fail_on)
    return CheckOutcome(
        reported_findings=tuple(reported_findings),
        output_path=output_path,
        failed=failed,
    )


def _load_check_artifacts(diff_path: str, config_path: str | None) -> CheckArtifacts:
    try:
        configuration = (
            load_configuration(config_path) if config_path else default_configuration()
        )
        report = load_diff_document(diff_path)
    except (ConfigurationError, DiffDocumentError, OSError) as exc:
        raise CheckExecutionError(str(exc)) from exc
    return CheckArtifacts(configuration=configuration, report=report)
