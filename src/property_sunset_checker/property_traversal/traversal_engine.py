"""Schema diff traversal service."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from property_sunset_checker.diff_tree.diff_models import SchemaDiffNode
from property_sunset_checker.findings.finding_deduplicator import FindingDeduplicator
from property_sunset_checker.findings.finding_models import AnalysisScope, DeprecationFinding
from property_sunset_checker.sunset_policy.policy_evaluator import SunsetPolicyEvaluator

_LOGGER = logging.getLogger("property_sunset_checker.traversal")
_LOGGER.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class _TraversalContext:
    """Read-only context shared by every step of one scope walk."""

    scope: AnalysisScope
    evaluator: SunsetPolicyEvaluator
    deduplicator: FindingDeduplicator
    max_depth: int
    logger: logging.Logger


@dataclass
class _TraversalState:
    """Mutable collector for one scope walk."""

    findings: list[DeprecationFinding]
    active_node_ids: set[int]
    walked_depths: dict[tuple[int, str], int]


def walk_schema_diff(
    scope: AnalysisScope,
    root: SchemaDiffNode | None,
    evaluator: SunsetPolicyEvaluator,
    *,
    prefix: str = "",
    deduplicator: FindingDeduplicator | None = None,
    logger: logging.Logger | None = None,
) -> list[DeprecationFinding]:
    """Return the deprecation findings under one schema diff root."""
    return collect_property_findings(
        scope,
        (root,),
        evaluator,
        prefix=prefix,
        deduplicator=deduplicator,
        logger=logger,
    )


def collect_property_findings(
    scope: AnalysisScope,
    roots: Iterable[SchemaDiffNode | None],
    evaluator: SunsetPolicyEvaluator,
    *,
    prefix: str = "",
    deduplicator: FindingDeduplicator | None = None,
    logger: logging.Logger | None = None,
) -> list[DeprecationFinding]:
    """Walk several roots of one scope, e.g. the media types of one body.

    All roots share one deduplicator, so a property present in more than one
    root is reported once.
    """
    context = _TraversalContext(
        scope=scope,
        evaluator=evaluator,
        deduplicator=deduplicator if deduplicator is not None else FindingDeduplicator(),
        max_depth=evaluator.policy.max_depth,
        logger=logger or _LOGGER,
    )
    state = _TraversalState(findings=[], active_node_ids=set(), walked_depths={})
    for root in roots:
        if root is None:
            continue
        _walk(root, prefix=prefix, depth=0, context=context, state=state)
    return state.findings


def _walk(
    node: SchemaDiffNode,
    *,
    prefix: str,
    depth: int,
    context: _TraversalContext,
    state: _TraversalState,
) -> None:
    if depth > context.max_depth:
        context.logger.debug(
            "%s: maximum depth %d reached at '%s'",
            context.scope.describe(),
            context.max_depth,
            prefix,
        )
        return
    node_id = id(node)
    if node_id in state.active_node_ids:
        context.logger.debug(
            "%s: cyclic schema reference at '%s'", context.scope.describe(), prefix
        )
        return
    # A node already walked at this path yields the same properties again.
    walk_key = (node_id, prefix)
    walked_depth = state.walked_depths.get(walk_key)
    if walked_depth is not None and walked_depth <= depth:
        return
    state.walked_depths[walk_key] = depth

    state.active_node_ids.add(node_id)
    for name, child in (node.properties or {}).items():
        if child is None:
            continue
        child_path = name if not prefix else f"{prefix}.{name}"
        _inspect_transition(child, child_path, context=context, state=state)
        _walk(child, prefix=child_path, depth=depth + 1, context=context, state=state)

    # Composition branches describe the same entity, so the path does not grow.
    for branch in node.composition_branches():
        if branch is None:
            continue
        _walk(branch, prefix=prefix, depth=depth + 1, context=context, state=state)
    state.active_node_ids.discard(node_id)


def _inspect_transition(
    node: SchemaDiffNode,
    property_path: str,
    *,
    context: _TraversalContext,
    state: _TraversalState,
) -> None:
    transition = node.deprecated_transition
    if transition is None:
        return

    finding: DeprecationFinding | None = None
    if transition.is_deprecation:
        finding = context.evaluator.evaluate_deprecation(
            context.scope, property_path, node.metadata
        )
    elif transition.is_reactivation:
        finding = context.evaluator.evaluate_reactivation(context.scope, property_path)

    if finding is None:
        return
    if not context.deduplicator.admit(finding):
        context.logger.debug(
            "%s: '%s' already reported", context.scope.describe(), property_path
        )
        return
    state.findings.append(finding)
