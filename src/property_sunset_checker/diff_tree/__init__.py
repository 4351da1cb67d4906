"""Diff tree domain exports."""

from .diff_models import (
    ContentDiff,
    DeprecatedTransition,
    DiffReport,
    OperationDiff,
    PathDiff,
    SchemaDiffNode,
)
from .loader import DiffDocumentError, build_diff_report, load_diff_document, parse_diff_document

__all__ = [
    "ContentDiff",
    "DeprecatedTransition",
    "DiffReport",
    "OperationDiff",
    "PathDiff",
    "SchemaDiffNode",
    "DiffDocumentError",
    "build_diff_report",
    "load_diff_document",
    "parse_diff_document",
]
