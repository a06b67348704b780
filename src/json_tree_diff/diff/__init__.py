"""diff subpackage: the diff engine, its configuration and result types.

Import from this module (not from sub-modules directly) to stay on the stable
public interface.

Example::

    from json_tree_diff.diff import compare_values
    from json_tree_diff.value import to_typed

    result = compare_values(to_typed({"a": 1}), to_typed({"a": 2}))
    result.diff["a"]   # FieldChange(left=JsonNumber(1), right=JsonNumber(2))
"""

from __future__ import annotations

from json_tree_diff.diff.config import ArrayTailPolicy, DiffConfig
from json_tree_diff.diff.engine import DiffEngine, compare_values
from json_tree_diff.diff.result import (
    ArrayDiff,
    DiffResult,
    DiffType,
    FieldChange,
    Match,
    ObjectDiff,
    OneSided,
    ScalarMismatch,
    Side,
)

__all__ = [
    "ArrayDiff",
    "ArrayTailPolicy",
    "DiffConfig",
    "DiffEngine",
    "DiffResult",
    "DiffType",
    "FieldChange",
    "Match",
    "ObjectDiff",
    "OneSided",
    "ScalarMismatch",
    "Side",
    "compare_values",
]
