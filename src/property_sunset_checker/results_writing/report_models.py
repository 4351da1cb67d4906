"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from property_sunset_checker.configuration.runtime_settings import Severity
from property_sunset_checker.findings.finding_models import DeprecationFinding


@dataclass(frozen=True)
class ReportedFinding:
    """A finding with its check id, severity and rendered message."""

    finding: DeprecationFinding
    check_id: str
    severity: Severity
    location: str
    message: str


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    diff_path: Path
    config_path: Path | None
    output_path: Path
