"""Deprecation finding entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class ScopeKind(str, Enum):
    """Kind of analysis scope a finding belongs to."""

    COMPONENT_SCHEMA = "component_schema"
    REQUEST_BODY = "request_body"
    RESPONSE_BODY = "response_body"


class FindingKind(str, Enum):
    """Outcome of evaluating one deprecation-flag transition."""

    DEPRECATED = "deprecated"
    SUNSET_MISSING = "sunset_missing"
    SUNSET_UNPARSEABLE = "sunset_unparseable"
    REACTIVATED = "reactivated"


@dataclass(frozen=True)
class AnalysisScope:
    """Where a property was found; also the deduplication boundary.

    The operation id is carried for display only and does not take part in
    equality, so two descriptions of the same operation body are one scope.
    """

    kind: ScopeKind
    schema_name: str | None = None
    method: str | None = None
    path: str | None = None
    status: str | None = None
    operation_id: str | None = field(default=None, compare=False)

    @staticmethod
    def component_schema(schema_name: str) -> AnalysisScope:
        return AnalysisScope(kind=ScopeKind.COMPONENT_SCHEMA, schema_name=schema_name)

    @staticmethod
    def request_body(method: str, path: str, operation_id: str | None = None) -> AnalysisScope:
        return AnalysisScope(
            kind=ScopeKind.REQUEST_BODY,
            method=method,
            path=path,
            operation_id=operation_id,
        )

    @staticmethod
    def response_body(
        method: str, path: str, status: str, operation_id: str | None = None
    ) -> AnalysisScope:
        return AnalysisScope(
            kind=ScopeKind.RESPONSE_BODY,
            method=method,
            path=path,
            status=status,
            operation_id=operation_id,
        )

    def describe(self) -> str:
        """Return a short human-readable location."""
        if self.kind == ScopeKind.COMPONENT_SCHEMA:
            return f"schema {self.schema_name}"
        operation = f"{self.method} {self.path}"
        if self.kind == ScopeKind.REQUEST_BODY:
            return f"{operation} request"
        return f"{operation} response {self.status}"


@dataclass(frozen=True)
class DeprecationFinding:
    """One classified deprecation event for one property in one scope."""

    scope: AnalysisScope
    property_path: str
    kind: FindingKind
    stability_level: str | None = None
    sunset_date: date | None = None
    parse_error: str | None = None


@dataclass(frozen=True)
class FindingKey:
    """Identity of a finding for deduplication purposes."""

    scope: AnalysisScope
    property_path: str
    kind: FindingKind

    @staticmethod
    def of(finding: DeprecationFinding) -> FindingKey:
        return FindingKey(
            scope=finding.scope,
            property_path=finding.property_path,
            kind=finding.kind,
        )
