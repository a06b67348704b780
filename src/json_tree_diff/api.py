"""Public API functions for json-tree-diff.

This module provides the user-facing functions: compare, compare_text,
diff_values and is_identical.  Each call creates a fresh JsonDiffer (or
DiffEngine) so no state is shared between calls.
"""

from __future__ import annotations

from typing import Any

from json_tree_diff.comparator import JsonDiffer
from json_tree_diff.diff.config import DiffConfig
from json_tree_diff.diff.engine import compare_values
from json_tree_diff.diff.result import DiffResult
from json_tree_diff.result import ComparisonResult
from json_tree_diff.value.nodes import TypedValue

__all__ = ["compare", "compare_text", "diff_values", "is_identical"]


def compare(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> ComparisonResult:
    """Compare two plain JSON values and return a ComparisonResult.

    Args:
        left:   First JSON value (dict, list, str, int, float, bool, None).
        right:  Second JSON value.
        config: Comparison options.  Defaults to ``DiffConfig()`` when None.

    Returns:
        A ``ComparisonResult`` with the typed inputs, the diff tree and timing.
    """
    return JsonDiffer(config=config).compare(left, right)


def compare_text(
    left_text: str,
    right_text: str,
    config: DiffConfig | None = None,
) -> ComparisonResult:
    """Parse two JSON text documents and compare them.

    Raises:
        JsonParseError: If either document is not valid JSON.
    """
    return JsonDiffer(config=config).compare_text(left_text, right_text)


def diff_values(
    left: TypedValue,
    right: TypedValue,
    config: DiffConfig | None = None,
) -> DiffResult:
    """Diff two already-typed values.  Alias of ``diff.compare_values``."""
    return compare_values(left, right, config=config)


def is_identical(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> bool:
    """Return True if the two JSON values match everywhere.

    Object key order is ignored.  Array order is significant.
    """
    return compare(left, right, config=config).is_match
