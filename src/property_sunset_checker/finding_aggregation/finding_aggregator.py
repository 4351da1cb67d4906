"""Finding aggregation across all modified scopes."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from property_sunset_checker.configuration.runtime_settings import PolicyConfig
from property_sunset_checker.diff_tree.diff_models import ContentDiff, DiffReport, SchemaDiffNode
from property_sunset_checker.findings.finding_models import AnalysisScope, DeprecationFinding
from property_sunset_checker.property_traversal import collect_property_findings
from property_sunset_checker.sunset_policy import SunsetPolicyEvaluator

_LOGGER = logging.getLogger("property_sunset_checker.aggregation")
_LOGGER.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class ScopeWalk:
    """One analysis scope and the schema diff roots walked for it."""

    scope: AnalysisScope
    roots: tuple[SchemaDiffNode, ...]


def enumerate_scope_walks(report: DiffReport) -> list[ScopeWalk]:
    """List every modified scope of the diff report that has a schema diff."""
    walks: list[ScopeWalk] = []
    for path, path_diff in (report.paths or {}).items():
        if path_diff is None:
            continue
        for method, operation in (path_diff.operations or {}).items():
            if operation is None:
                continue
            request_roots = _content_roots(operation.request_body)
            if request_roots:
                walks.append(
                    ScopeWalk(
                        scope=AnalysisScope.request_body(method, path, operation.operation_id),
                        roots=request_roots,
                    )
                )
            for status, response in (operation.responses or {}).items():
                response_roots = _content_roots(response)
                if response_roots:
                    walks.append(
                        ScopeWalk(
                            scope=AnalysisScope.response_body(
                                method, path, status, operation.operation_id
                            ),
                            roots=response_roots,
                        )
                    )
    for schema_name, schema_diff in (report.component_schemas or {}).items():
        if schema_diff is None:
            continue
        walks.append(
            ScopeWalk(scope=AnalysisScope.component_schema(schema_name), roots=(schema_diff,))
        )
    return walks


def aggregate_findings(
    report: DiffReport,
    policy: PolicyConfig,
    *,
    max_workers: int = 1,
    logger: logging.Logger | None = None,
) -> list[DeprecationFinding]:
    """Collect deprecation findings for every modified scope of the report.

    Each scope is walked with its own deduplicator; results are concatenated
    without cross-scope deduplication. With `max_workers > 1` scopes are
    walked on a thread pool.
    """
    resolved_logger = logger or _LOGGER
    evaluator = SunsetPolicyEvaluator(policy, logger=logger)
    walks = enumerate_scope_walks(report)
    resolved_logger.debug("walking %d modified scopes", len(walks))

    def _walk_scope(walk: ScopeWalk) -> list[DeprecationFinding]:
        return collect_property_findings(
            walk.scope,
            walk.roots,
            evaluator,
            logger=logger,
        )

    if max_workers <= 1 or len(walks) <= 1:
        per_scope = [_walk_scope(walk) for walk in walks]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            per_scope = list(executor.map(_walk_scope, walks))

    findings = [finding for scope_findings in per_scope for finding in scope_findings]
    resolved_logger.debug("collected %d findings", len(findings))
    return findings


def _content_roots(content: ContentDiff | None) -> tuple[SchemaDiffNode, ...]:
    if content is None:
        return ()
    return tuple(
        schema for schema in (content.media_types or {}).values() if schema is not None
    )
