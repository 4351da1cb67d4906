"""Sunset policy evaluator tests."""

from __future__ import annotations

import logging
from datetime import date

import pytest
from property_sunset_checker.configuration.runtime_settings import PolicyConfig
from property_sunset_checker.findings.finding_models import AnalysisScope, FindingKind
from property_sunset_checker.sunset_policy import SunsetPolicyEvaluator

_SCOPE = AnalysisScope.component_schema("Pet")


def _evaluator(grace_period_days: dict[str, int] | None = None) -> SunsetPolicyEvaluator:
    return SunsetPolicyEvaluator(
        PolicyConfig(grace_period_days=grace_period_days or {"stable": 30, "draft": 0})
    )


def test_valid_sunset_yields_deprecated_finding_with_date() -> None:
    finding = _evaluator().evaluate_deprecation(
        _SCOPE, "age", {"x-stability-level": "stable", "x-sunset": "2026-12-31"}
    )

    assert finding is not None
    assert finding.kind == FindingKind.DEPRECATED
    assert finding.sunset_date == date(2026, 12, 31)
    assert finding.parse_error is None
    assert finding.stability_level == "stable"


def test_missing_sunset_with_grace_period_yields_sunset_missing() -> None:
    finding = _evaluator().evaluate_deprecation(_SCOPE, "age", {"x-stability-level": "stable"})

    assert finding is not None
    assert finding.kind == FindingKind.SUNSET_MISSING
    assert finding.sunset_date is None


def test_missing_sunset_without_grace_period_yields_nothing() -> None:
    finding = _evaluator().evaluate_deprecation(_SCOPE, "age", {"x-stability-level": "draft"})

    assert finding is None


def test_valid_sunset_is_reported_even_without_grace_period() -> None:
    finding = _evaluator().evaluate_deprecation(
        _SCOPE, "age", {"x-stability-level": "draft", "x-sunset": "2026-12-31"}
    )

    assert finding is not None
    assert finding.kind == FindingKind.DEPRECATED


def test_unparseable_sunset_carries_parse_error() -> None:
    finding = _evaluator().evaluate_deprecation(
        _SCOPE, "age", {"x-stability-level": "stable", "x-sunset": "not-a-date"}
    )

    assert finding is not None
    assert finding.kind == FindingKind.SUNSET_UNPARSEABLE
    assert finding.sunset_date is None
    assert "not-a-date" in finding.parse_error


def test_null_sunset_counts_as_missing() -> None:
    finding = _evaluator().evaluate_deprecation(
        _SCOPE, "age", {"x-stability-level": "stable", "x-sunset": None}
    )

    assert finding is not None
    assert finding.kind == FindingKind.SUNSET_MISSING


@pytest.mark.parametrize(
    "metadata",
    [
        None,
        {},
        {"x-sunset": "2026-12-31"},
        {"x-stability-level": "experimental", "x-sunset": "2026-12-31"},
        {"x-stability-level": 3},
    ],
)
def test_unrecognized_stability_level_yields_nothing(metadata) -> None:
    assert _evaluator().evaluate_deprecation(_SCOPE, "age", metadata) is None


def test_custom_extension_keys_are_honored() -> None:
    evaluator = SunsetPolicyEvaluator(
        PolicyConfig(
            grace_period_days={"ga": 90},
            stability_extension="x-maturity",
            sunset_extension="x-removal-date",
        )
    )

    finding = evaluator.evaluate_deprecation(
        _SCOPE, "age", {"x-maturity": "ga", "x-removal-date": "2027-03-01"}
    )

    assert finding is not None
    assert finding.sunset_date == date(2027, 3, 1)


def test_reactivation_is_reported_unconditionally() -> None:
    finding = _evaluator().evaluate_reactivation(_SCOPE, "age")

    assert finding.kind == FindingKind.REACTIVATED
    assert finding.property_path == "age"
    assert finding.stability_level is None


def test_suppressed_property_is_logged_at_debug_level(caplog) -> None:
    logger = logging.getLogger("tests.sunset_policy")
    evaluator = SunsetPolicyEvaluator(PolicyConfig(), logger=logger)

    with caplog.at_level(logging.DEBUG, logger="tests.sunset_policy"):
        evaluator.evaluate_deprecation(_SCOPE, "age", {})

    assert "without recognized stability level" in caplog.text
