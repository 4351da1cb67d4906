"""Sunset policy evaluation service."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from property_sunset_checker.configuration.runtime_settings import PolicyConfig
from property_sunset_checker.findings.finding_models import (
    AnalysisScope,
    DeprecationFinding,
    FindingKind,
)

from .sunset_dates import SunsetParseError, parse_sunset_date

_LOGGER = logging.getLogger("property_sunset_checker.sunset_policy")
_LOGGER.addHandler(logging.NullHandler())


class SunsetPolicyEvaluator:
    """Classifies deprecation-flag transitions into findings."""

    def __init__(self, policy: PolicyConfig, *, logger: logging.Logger | None = None) -> None:
        self._policy = policy
        self._logger = logger or _LOGGER

    @property
    def policy(self) -> PolicyConfig:
        return self._policy

    def evaluate_deprecation(
        self,
        scope: AnalysisScope,
        property_path: str,
        metadata: Mapping[str, object] | None,
    ) -> DeprecationFinding | None:
        """Return the finding for a newly deprecated property, if the policy yields one."""
        metadata = metadata or {}
        stability_level = self._read_stability_level(metadata)
        if stability_level is None:
            self._logger.debug(
                "%s: skipping deprecated property '%s' without recognized stability level",
                scope.describe(),
                property_path,
            )
            return None

        grace_period_days = self._policy.grace_period_for(stability_level)
        sunset_value = metadata.get(self._policy.sunset_extension)
        if sunset_value is None:
            if grace_period_days <= 0:
                return None
            return DeprecationFinding(
                scope=scope,
                property_path=property_path,
                kind=FindingKind.SUNSET_MISSING,
                stability_level=stability_level,
            )

        try:
            sunset_date = parse_sunset_date(sunset_value)
        except SunsetParseError as exc:
            return DeprecationFinding(
                scope=scope,
                property_path=property_path,
                kind=FindingKind.SUNSET_UNPARSEABLE,
                stability_level=stability_level,
                parse_error=str(exc),
            )
        return DeprecationFinding(
            scope=scope,
            property_path=property_path,
            kind=FindingKind.DEPRECATED,
            stability_level=stability_level,
            sunset_date=sunset_date,
        )

    def evaluate_reactivation(self, scope: AnalysisScope, property_path: str) -> DeprecationFinding:
        """Return the finding for a property that is no longer deprecated."""
        return DeprecationFinding(
            scope=scope,
            property_path=property_path,
            kind=FindingKind.REACTIVATED,
        )

    def _read_stability_level(self, metadata: Mapping[str, object]) -> str | None:
        value = metadata.get(self._policy.stability_extension)
        if not isinstance(value, str):
            return None
        stability_level = value.strip()
        if not self._policy.is_recognized(stability_level):
            return None
        return stability_level
