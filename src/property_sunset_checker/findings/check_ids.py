"""Check ids identifying each scope and finding kind combination."""

from __future__ import annotations

from .finding_models import DeprecationFinding, FindingKind, ScopeKind

PROPERTY_DEPRECATED_ID = "property-deprecated"
PROPERTY_DEPRECATED_SUNSET_MISSING_ID = "property-deprecated-sunset-missing"
PROPERTY_DEPRECATED_SUNSET_PARSE_ID = "property-deprecated-sunset-parse"
PROPERTY_REACTIVATED_ID = "property-reactivated"

REQUEST_PROPERTY_DEPRECATED_ID = "request-property-deprecated"
REQUEST_PROPERTY_DEPRECATED_SUNSET_MISSING_ID = "request-property-deprecated-sunset-missing"
REQUEST_PROPERTY_DEPRECATED_SUNSET_PARSE_ID = "request-property-deprecated-sunset-parse"
REQUEST_PROPERTY_REACTIVATED_ID = "request-property-reactivated"

RESPONSE_PROPERTY_DEPRECATED_ID = "response-property-deprecated"
RESPONSE_PROPERTY_DEPRECATED_SUNSET_MISSING_ID = "response-property-deprecated-sunset-missing"
RESPONSE_PROPERTY_DEPRECATED_SUNSET_PARSE_ID = "response-property-deprecated-sunset-parse"
RESPONSE_PROPERTY_REACTIVATED_ID = "response-property-reactivated"

_CHECK_IDS: dict[tuple[ScopeKind, FindingKind], str] = {
    (ScopeKind.COMPONENT_SCHEMA, FindingKind.DEPRECATED): PROPERTY_DEPRECATED_ID,
    (ScopeKind.COMPONENT_SCHEMA, FindingKind.SUNSET_MISSING): (
        PROPERTY_DEPRECATED_SUNSET_MISSING_ID
    ),
    (ScopeKind.COMPONENT_SCHEMA, FindingKind.SUNSET_UNPARSEABLE): (
        PROPERTY_DEPRECATED_SUNSET_PARSE_ID
    ),
    (ScopeKind.COMPONENT_SCHEMA, FindingKind.REACTIVATED): PROPERTY_REACTIVATED_ID,
    (ScopeKind.REQUEST_BODY, FindingKind.DEPRECATED): REQUEST_PROPERTY_DEPRECATED_ID,
    (ScopeKind.REQUEST_BODY, FindingKind.SUNSET_MISSING): (
        REQUEST_PROPERTY_DEPRECATED_SUNSET_MISSING_ID
    ),
    (ScopeKind.REQUEST_BODY, FindingKind.SUNSET_UNPARSEABLE): (
        REQUEST_PROPERTY_DEPRECATED_SUNSET_PARSE_ID
    ),
    (ScopeKind.REQUEST_BODY, FindingKind.REACTIVATED): REQUEST_PROPERTY_REACTIVATED_ID,
    (ScopeKind.RESPONSE_BODY, FindingKind.DEPRECATED): RESPONSE_PROPERTY_DEPRECATED_ID,
    (ScopeKind.RESPONSE_BODY, FindingKind.SUNSET_MISSING): (
        RESPONSE_PROPERTY_DEPRECATED_SUNSET_MISSING_ID
    ),
    (ScopeKind.RESPONSE_BODY, FindingKind.SUNSET_UNPARSEABLE): (
        RESPONSE_PROPERTY_DEPRECATED_SUNSET_PARSE_ID
    ),
    (ScopeKind.RESPONSE_BODY, FindingKind.REACTIVATED): RESPONSE_PROPERTY_REACTIVATED_ID,
}

ALL_CHECK_IDS: frozenset[str] = frozenset(_CHECK_IDS.values())


def check_id_for(finding: DeprecationFinding) -> str:
    """Return the check id of a finding."""
    return _CHECK_IDS[(finding.scope.kind, finding.kind)]
