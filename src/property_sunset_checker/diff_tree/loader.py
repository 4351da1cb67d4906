"""Diff document loading service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .diff_models import (
    ContentDiff,
    DeprecatedTransition,
    DiffReport,
    OperationDiff,
    PathDiff,
    SchemaDiffNode,
)

_COMPOSITION_KEYS = ("allOf", "oneOf", "anyOf")


class DiffDocumentError(Exception):
    """Raised when a diff document cannot be turned into a diff tree."""


class _DiffDocumentLoader(yaml.SafeLoader):
    """Safe loader that keeps impossible unquoted dates as plain strings."""

    def construct_yaml_timestamp(self, node):
        try:
            return super().construct_yaml_timestamp(node)
        except ValueError:
            return self.construct_scalar(node)


_DiffDocumentLoader.add_constructor(
    "tag:yaml.org,2002:timestamp", _DiffDocumentLoader.construct_yaml_timestamp
)


def load_diff_document(diff_path: Path | str) -> DiffReport:
    """Load a YAML/JSON diff document from disk."""
    path = Path(diff_path)
    if not path.exists():
        raise DiffDocumentError(f"Diff document not found: {path}")
    return parse_diff_document(path.read_text(encoding="utf-8"))


def parse_diff_document(text: str) -> DiffReport:
    """Parse diff document text into a diff tree."""
    try:
        parsed = yaml.load(text, Loader=_DiffDocumentLoader)
    except yaml.YAMLError as exc:
        raise DiffDocumentError(f"Failed to parse diff document: {exc}") from exc
    return build_diff_report(parsed)


def build_diff_report(document: Any) -> DiffReport:
    """Build a diff tree from an already parsed document."""
    if document is None:
        return DiffReport()
    root = _require_mapping(document, "diff document")
    memo: dict[int, SchemaDiffNode] = {}

    paths = {
        str(path): _build_path_diff(item, f"paths.{path}", memo)
        for path, item in _optional_mapping(root.get("paths"), "paths").items()
    }
    components = _optional_mapping(root.get("components"), "components")
    schemas = {
        str(name): _build_node(node, f"components.schemas.{name}", memo)
        for name, node in _optional_mapping(
            components.get("schemas"), "components.schemas"
        ).items()
    }
    return DiffReport(paths=paths, component_schemas=schemas)


def _build_path_diff(value: Any, location: str, memo: dict[int, SchemaDiffNode]) -> PathDiff:
    section = _optional_mapping(value, location)
    operations = {
        str(method).upper(): _build_operation_diff(item, f"{location}.{method}", memo)
        for method, item in _optional_mapping(
            section.get("operations"), f"{location}.operations"
        ).items()
    }
    return PathDiff(operations=operations)


def _build_operation_diff(
    value: Any, location: str, memo: dict[int, SchemaDiffNode]
) -> OperationDiff:
    section = _optional_mapping(value, location)
    operation_id = section.get("operationId")
    if operation_id is not None and not isinstance(operation_id, str):
        raise DiffDocumentError(f"{location}.operationId must be a string.")
    request_body = section.get("requestBody")
    responses = {
        str(status): _build_content_diff(item, f"{location}.responses.{status}", memo)
        for status, item in _optional_mapping(
            section.get("responses"), f"{location}.responses"
        ).items()
    }
    return OperationDiff(
        operation_id=operation_id,
        request_body=(
            None
            if request_body is None
            else _build_content_diff(request_body, f"{location}.requestBody", memo)
        ),
        responses=responses,
    )


def _build_content_diff(
    value: Any, location: str, memo: dict[int, SchemaDiffNode]
) -> ContentDiff:
    section = _optional_mapping(value, location)
    media_types: dict[str, SchemaDiffNode | None] = {}
    for media_type, item in _optional_mapping(
        section.get("content"), f"{location}.content"
    ).items():
        media_section = _optional_mapping(item, f"{location}.content.{media_type}")
        schema = media_section.get("schema")
        media_types[str(media_type)] = (
            None
            if schema is None
            else _build_node(schema, f"{location}.content.{media_type}.schema", memo)
        )
    return ContentDiff(media_types=media_types)


def _build_node(value: Any, location: str, memo: dict[int, SchemaDiffNode]) -> SchemaDiffNode:
    # YAML aliases hand back the same object; recursive aliases refer to a node
    # that is still being built, so containers are registered before filling.
    if value is not None and id(value) in memo:
        return memo[id(value)]
    section = _optional_mapping(value, location)

    properties: dict[str, SchemaDiffNode] = {}
    branches: dict[str, list[SchemaDiffNode]] = {key: [] for key in _COMPOSITION_KEYS}
    node = SchemaDiffNode(
        properties=properties,
        all_of=branches["allOf"],
        one_of=branches["oneOf"],
        any_of=branches["anyOf"],
        deprecated_transition=_build_transition(
            section.get("deprecated"), f"{location}.deprecated"
        ),
        metadata=dict(_optional_mapping(section.get("extensions"), f"{location}.extensions")),
    )
    if value is not None:
        memo[id(value)] = node

    for name, child in _optional_mapping(
        section.get("properties"), f"{location}.properties"
    ).items():
        properties[str(name)] = _build_node(child, f"{location}.properties.{name}", memo)
    for key in _COMPOSITION_KEYS:
        for index, child in enumerate(_optional_sequence(section.get(key), f"{location}.{key}")):
            branches[key].append(_build_node(child, f"{location}.{key}[{index}]", memo))
    return node


def _build_transition(value: Any, location: str) -> DeprecatedTransition | None:
    if value is None:
        return None
    section = _require_mapping(value, location)
    from_value = _optional_bool(section.get("from"), f"{location}.from")
    to_value = _optional_bool(section.get("to"), f"{location}.to")
    if from_value == to_value:
        return None
    return DeprecatedTransition(from_value=from_value, to_value=to_value)


def _optional_bool(value: Any, field_name: str) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    raise DiffDocumentError(f"{field_name} must be a boolean.")


def _require_mapping(value: Any, location: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DiffDocumentError(f"{location} must be a mapping.")
    return value


def _optional_mapping(value: Any, location: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    return _require_mapping(value, location)


def _optional_sequence(value: Any, location: str) -> Sequence[Any]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise DiffDocumentError(f"{location} must be a list.")
    return value
