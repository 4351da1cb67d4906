"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from property_sunset_checker.configuration.loader import (
    ConfigurationError,
    default_configuration,
    load_configuration,
)
from property_sunset_checker.configuration.runtime_settings import Severity


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_default_configuration_uses_standard_stability_levels() -> None:
    configuration = default_configuration()

    assert configuration.path is None
    assert dict(configuration.policy.grace_period_days) == {
        "draft": 0,
        "alpha": 0,
        "beta": 31,
        "stable": 180,
    }
    assert configuration.policy.stability_extension == "x-stability-level"
    assert configuration.policy.sunset_extension == "x-sunset"
    assert configuration.policy.max_depth == 64
    assert configuration.severity.overrides == {}


def test_loads_yaml_configuration_with_overrides(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "policy.yaml",
        """
policy:
  stability_levels:
    beta: 14
    stable: 30
  sunset_extension: x-removal-date
  max_depth: 10
severity:
  request-property-deprecated-sunset-missing: Warning
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert dict(configuration.policy.grace_period_days) == {"beta": 14, "stable": 30}
    assert configuration.policy.stability_extension == "x-stability-level"
    assert configuration.policy.sunset_extension == "x-removal-date"
    assert configuration.policy.max_depth == 10
    assert configuration.severity.overrides == {
        "request-property-deprecated-sunset-missing": Severity.WARNING
    }


def test_loads_json_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "policy.json",
        json.dumps({"policy": {"stability_levels": {"stable": 0}}}),
    )

    configuration = load_configuration(config_path)

    assert dict(configuration.policy.grace_period_days) == {"stable": 0}


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    configuration = load_configuration(_write_file(tmp_path / "policy.yaml", ""))

    assert configuration.policy.grace_period_days["stable"] == 180


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- just a list", "Configuration root must be a mapping"),
        ("policy: []", "Configuration section 'policy' must be a mapping"),
        ("policy: {stability_levels: {}}", "policy.stability_levels must not be empty"),
        ("policy: {stability_levels: {stable: -1}}", "must not be negative"),
        ("policy: {stability_levels: {stable: 'long'}}", "must be an integer"),
        ("policy: {stability_levels: {stable: true}}", "must be an integer"),
        ("policy: {max_depth: 0}", "policy.max_depth must be greater than zero"),
        ("policy: {sunset_extension: '  '}", "policy.sunset_extension must not be empty"),
        ("severity: {not-a-check: error}", "unknown check id 'not-a-check'"),
        ("severity: {property-deprecated: fatal}", "must be one of: info, warning, error"),
    ],
)
def test_rejects_invalid_configuration(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "policy.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


def test_missing_configuration_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")
