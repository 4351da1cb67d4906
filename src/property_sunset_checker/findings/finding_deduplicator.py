"""Scope-local deduplication of deprecation findings."""

from __future__ import annotations

from collections.abc import Iterator

from .finding_models import AnalysisScope, DeprecationFinding, FindingKey


class FindingDeduplicator:
    """Admits at most one finding per property and scope.

    One instance belongs to one scope walk. A property reached again through
    another composition branch or another media type is rejected whatever kind
    the second evaluation produced, so the deprecation outcomes of one property
    stay mutually exclusive and a reactivation never joins them.
    """

    def __init__(self) -> None:
        self._keys: set[FindingKey] = set()
        self._claimed: set[tuple[AnalysisScope, str]] = set()

    def admit(self, finding: DeprecationFinding) -> bool:
        """Record the finding and return True if its property is not yet reported."""
        claim = (finding.scope, finding.property_path)
        if claim in self._claimed:
            return False
        self._claimed.add(claim)
        self._keys.add(FindingKey.of(finding))
        return True

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator[FindingKey]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)
