"""Property traversal exports."""

from .traversal_engine import collect_property_findings, walk_schema_diff

__all__ = [
    "collect_property_findings",
    "walk_schema_diff",
]
