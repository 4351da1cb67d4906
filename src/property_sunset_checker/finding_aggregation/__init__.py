"""Finding aggregation exports."""

from .finding_aggregator import ScopeWalk, aggregate_findings, enumerate_scope_walks

__all__ = [
    "ScopeWalk",
    "aggregate_findings",
    "enumerate_scope_walks",
]
