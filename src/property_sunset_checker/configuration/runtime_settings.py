"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType

DEFAULT_STABILITY_EXTENSION = "x-stability-level"
DEFAULT_SUNSET_EXTENSION = "x-sunset"
DEFAULT_MAX_DEPTH = 64
DEFAULT_GRACE_PERIOD_DAYS: Mapping[str, int] = MappingProxyType(
    {
        "draft": 0,
        "alpha": 0,
        "beta": 31,
        "stable": 180,
    }
)


class Severity(str, Enum):
    """Severity assigned to a reported finding."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANKS[self]


_SEVERITY_RANKS = {Severity.INFO: 0, Severity.WARNING: 1, Severity.ERROR: 2}


@dataclass(frozen=True)
class PolicyConfig:
    """Sunset policy: required grace period per stability level."""

    grace_period_days: Mapping[str, int] = field(
        default_factory=lambda: dict(DEFAULT_GRACE_PERIOD_DAYS)
    )
    stability_extension: str = DEFAULT_STABILITY_EXTENSION
    sunset_extension: str = DEFAULT_SUNSET_EXTENSION
    max_depth: int = DEFAULT_MAX_DEPTH

    def is_recognized(self, stability_level: str) -> bool:
        """Return True when the stability level has a configured grace period."""
        return stability_level in self.grace_period_days

    def grace_period_for(self, stability_level: str) -> int:
        """Return grace-period days for a recognized stability level."""
        return self.grace_period_days[stability_level]


@dataclass(frozen=True)
class SeverityConfig:
    """Severity overrides keyed by check id."""

    overrides: Mapping[str, Severity] = field(default_factory=dict)


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    policy: PolicyConfig
    severity: SeverityConfig
