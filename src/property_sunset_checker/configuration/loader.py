"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from property_sunset_checker.findings.check_ids import ALL_CHECK_IDS

from .runtime_settings import (
    DEFAULT_GRACE_PERIOD_DAYS,
    DEFAULT_MAX_DEPTH,
    DEFAULT_STABILITY_EXTENSION,
    DEFAULT_SUNSET_EXTENSION,
    Configuration,
    PolicyConfig,
    Severity,
    SeverityConfig,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration() -> Configuration:
    """Return the configuration used when no file is given."""
    return Configuration(path=None, policy=PolicyConfig(), severity=SeverityConfig())


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    policy = _parse_policy_section(parsed.get("policy"))
    severity = _parse_severity_section(parsed.get("severity"))
    return Configuration(path=path, policy=policy, severity=severity)


def _parse_policy_section(value: Any) -> PolicyConfig:
    section = _optional_mapping(value, "policy")
    levels_value = section.get("stability_levels")
    if levels_value is None:
        grace_period_days = dict(DEFAULT_GRACE_PERIOD_DAYS)
    else:
        levels = _optional_mapping(levels_value, "policy.stability_levels")
        if not levels:
            raise ConfigurationError("policy.stability_levels must not be empty.")
        grace_period_days = {
            _require_non_empty_string(level, "policy.stability_levels key"): (
                _require_non_negative_int(days, f"policy.stability_levels.{level}")
            )
            for level, days in levels.items()
        }
    stability_extension = _require_non_empty_string(
        section.get("stability_extension", DEFAULT_STABILITY_EXTENSION),
        "policy.stability_extension",
    )
    sunset_extension = _require_non_empty_string(
        section.get("sunset_extension", DEFAULT_SUNSET_EXTENSION), "policy.sunset_extension"
    )
    max_depth = _require_positive_int(
        section.get("max_depth", DEFAULT_MAX_DEPTH), "policy.max_depth"
    )
    return PolicyConfig(
        grace_period_days=grace_period_days,
        stability_extension=stability_extension,
        sunset_extension=sunset_extension,
        max_depth=max_depth,
    )


def _parse_severity_section(value: Any) -> SeverityConfig:
    section = _optional_mapping(value, "severity")
    overrides: dict[str, Severity] = {}
    for check_id, level in section.items():
        if check_id not in ALL_CHECK_IDS:
            raise ConfigurationError(f"severity: unknown check id '{check_id}'.")
        overrides[check_id] = _parse_severity(level, f"severity.{check_id}")
    return SeverityConfig(overrides=overrides)


def _parse_severity(value: Any, field_name: str) -> Severity:
    text = _require_non_empty_string(value, field_name).lower()
    try:
        return Severity(text)
    except ValueError as exc:
        allowed = ", ".join(level.value for level in Severity)
        raise ConfigurationError(f"{field_name} must be one of: {allowed}.") from exc


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
