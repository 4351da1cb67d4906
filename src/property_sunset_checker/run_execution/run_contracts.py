"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from property_sunset_checker.configuration.runtime_settings import Configuration, Severity
from property_sunset_checker.diff_tree.diff_models import DiffReport
from property_sunset_checker.results_writing.report_models import ReportedFinding


@dataclass(frozen=True)
class CheckRequest:
    """Input contract for one sunset check run."""

    diff_path: str
    config_path: str | None = None
    output_path: str | None = None
    fail_on: Severity | None = None
    max_workers: int = 1


@dataclass(frozen=True)
class CheckOutcome:
    """Output contract for one completed check run."""

    reported_findings: tuple[ReportedFinding, ...]
    output_path: Path | None
    failed: bool


@dataclass(frozen=True)
class CheckArtifacts:
    """Loaded inputs required during a check run."""

    configuration: Configuration
    report: DiffReport
