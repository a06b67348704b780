"""json-tree-diff - positional structural diff for JSON documents."""

from __future__ import annotations

from json_tree_diff.api import compare, compare_text, diff_values, is_identical
from json_tree_diff.comparator import JsonDiffer
from json_tree_diff.diff import (
    ArrayDiff,
    ArrayTailPolicy,
    DiffConfig,
    DiffResult,
    DiffType,
    FieldChange,
    Match,
    ObjectDiff,
    OneSided,
    ScalarMismatch,
    Side,
    compare_values,
)
from json_tree_diff.errors import InvalidInputShape, JsonParseError
from json_tree_diff.result import ComparisonResult
from json_tree_diff.value import equal, to_typed, to_untyped

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayDiff",
    "ArrayTailPolicy",
    "ComparisonResult",
    "DiffConfig",
    "DiffResult",
    "DiffType",
    "FieldChange",
    "InvalidInputShape",
    "JsonDiffer",
    "JsonParseError",
    "Match",
    "ObjectDiff",
    "OneSided",
    "ScalarMismatch",
    "Side",
    "compare",
    "compare_text",
    "compare_values",
    "diff_values",
    "equal",
    "is_identical",
    "to_typed",
    "to_untyped",
]
