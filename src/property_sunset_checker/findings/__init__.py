"""Findings domain exports."""

from .check_ids import ALL_CHECK_IDS, check_id_for
from .finding_deduplicator import FindingDeduplicator
from .finding_models import (
    AnalysisScope,
    DeprecationFinding,
    FindingKey,
    FindingKind,
    ScopeKind,
)

__all__ = [
    "ALL_CHECK_IDS",
    "AnalysisScope",
    "DeprecationFinding",
    "FindingDeduplicator",
    "FindingKey",
    "FindingKind",
    "ScopeKind",
    "check_id_for",
]
