"""Diff tree entities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class DeprecatedTransition:
    """Change of the `deprecated` flag between base and revision.

    Each side is `True`, `False` or `None` when the flag is absent.
    """

    from_value: bool | None
    to_value: bool | None

    @property
    def is_deprecation(self) -> bool:
        """Return True when the property became deprecated in the revision."""
        return self.to_value is True and not self.from_value

    @property
    def is_reactivation(self) -> bool:
        """Return True when a deprecated property is no longer deprecated."""
        return self.from_value is True and not self.to_value


@dataclass(frozen=True, eq=False)
class SchemaDiffNode:
    """Comparison of one schema fragment between base and revision.

    Nodes compare by identity: the same node may be referenced from several
    places in the tree and composition branches may lead back to an ancestor.
    """

    properties: Mapping[str, SchemaDiffNode] = field(default_factory=dict)
    all_of: Sequence[SchemaDiffNode] = ()
    one_of: Sequence[SchemaDiffNode] = ()
    any_of: Sequence[SchemaDiffNode] = ()
    deprecated_transition: DeprecatedTransition | None = None
    metadata: Mapping[str, object] = field(default_factory=dict)

    def composition_branches(self) -> tuple[SchemaDiffNode, ...]:
        """Return allOf, oneOf and anyOf branches in that order."""
        return (*(self.all_of or ()), *(self.one_of or ()), *(self.any_of or ()))


@dataclass(frozen=True)
class ContentDiff:
    """Modified media types of one request or response body."""

    media_types: Mapping[str, SchemaDiffNode | None] = field(default_factory=dict)


@dataclass(frozen=True)
class OperationDiff:
    """Modified parts of one operation."""

    operation_id: str | None = None
    request_body: ContentDiff | None = None
    responses: Mapping[str, ContentDiff] = field(default_factory=dict)


@dataclass(frozen=True)
class PathDiff:
    """Modified operations of one path, keyed by upper-case HTTP method."""

    operations: Mapping[str, OperationDiff] = field(default_factory=dict)


@dataclass(frozen=True)
class DiffReport:
    """Root of the diff tree handed over by the diff engine."""

    paths: Mapping[str, PathDiff] = field(default_factory=dict)
    component_schemas: Mapping[str, SchemaDiffNode] = field(default_factory=dict)
