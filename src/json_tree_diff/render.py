"""Presentation helpers over diff results.

Typed values are resolved back to plain Python data only here, at render time.
Everything returned is JSON-serialisable.

- render_diff:    the whole diff tree as nested dicts tagged with ``"type"``.
- partition_view: an object diff as ``left_only`` / ``matches`` / ``right_only``.
- changes_view:   an object diff's changed fields as ``{key: {left, right}}``.
- diff_sides:     an object diff's changed fields as two flat objects.
- format_json:    pretty-print a JSON text document.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from typing import Any

from json_tree_diff.comparator import parse_json
from json_tree_diff.diff.result import (
    ArrayDiff,
    DiffResult,
    Match,
    ObjectDiff,
    OneSided,
    ScalarMismatch,
)
from json_tree_diff.value.convert import to_untyped
from json_tree_diff.value.nodes import TypedValue

__all__ = [
    "changes_view",
    "diff_sides",
    "format_json",
    "partition_view",
    "render_diff",
]


def _resolve(fields: Mapping[str, TypedValue]) -> dict[str, Any]:
    return {key: to_untyped(val) for key, val in fields.items()}


def render_diff(diff: DiffResult) -> dict[str, Any]:
    """Render a diff result tree as plain nested data.

    Args:
        diff: Any diff result.

    Returns:
        A dict whose ``"type"`` is the ``DiffType`` value of ``diff``.  Array
        results carry ``items`` (rendered in turn) and ``right_tail``; object
        results carry the five partition mappings with values resolved to
        plain data.

    Raises:
        TypeError: If ``diff`` is not a diff result.
    """
    if not isinstance(diff, ArrayDiff):
        return _render_flat(diff)

    # Nested arrays are filled in from an explicit stack, not by recursion
    root = _open_array(diff)
    stack: list[tuple[Iterator[DiffResult], list[dict[str, Any]]]] = [
        (iter(diff.items), root["items"])
    ]
    while stack:
        children, target = stack[-1]
        item = next(children, None)
        if item is None:
            stack.pop()
            continue
        if isinstance(item, ArrayDiff):
            rendered = _open_array(item)
            stack.append((iter(item.items), rendered["items"]))
        else:
            rendered = _render_flat(item)
        target.append(rendered)
    return root


def _open_array(diff: ArrayDiff) -> dict[str, Any]:
    return {
        "type": diff.diff_type.value,
        "items": [],
        "right_tail": [to_untyped(val) for val in diff.right_tail],
    }


def _render_flat(diff: DiffResult) -> dict[str, Any]:
    if isinstance(diff, Match):
        return {"type": diff.diff_type.value, "value": to_untyped(diff.value)}

    if isinstance(diff, ScalarMismatch):
        return {
            "type": diff.diff_type.value,
            "left": to_untyped(diff.left),
            "right": to_untyped(diff.right),
        }

    if isinstance(diff, OneSided):
        return {
            "type": diff.diff_type.value,
            "side": diff.side.value,
            "value": to_untyped(diff.value),
        }

    if isinstance(diff, ObjectDiff):
        return {
            "type": diff.diff_type.value,
            "diff": changes_view(diff),
            "match": _resolve(diff.match),
            "distinct_left": _resolve(diff.distinct_left),
            "distinct_right": _resolve(diff.distinct_right),
            "diff_left": _resolve(diff.diff_left),
            "diff_right": _resolve(diff.diff_right),
        }

    raise TypeError(f"Unsupported diff result type: {type(diff)!r}")


def partition_view(diff: ObjectDiff) -> dict[str, dict[str, Any]]:
    """Return the keys of an object diff split into three plain objects."""
    return {
        "left_only": _resolve(diff.distinct_left),
        "matches": _resolve(diff.match),
        "right_only": _resolve(diff.distinct_right),
    }


def changes_view(diff: ObjectDiff) -> dict[str, dict[str, Any]]:
    """Return ``{key: {"left": ..., "right": ...}}`` for every changed key."""
    return {
        key: {"left": to_untyped(change.left), "right": to_untyped(change.right)}
        for key, change in diff.diff.items()
    }


def diff_sides(diff: ObjectDiff) -> tuple[dict[str, Any], dict[str, Any]]:
    """Return the changed keys as a (left object, right object) pair."""
    return _resolve(diff.diff_left), _resolve(diff.diff_right)


def format_json(text: str, indent: int = 4) -> str:
    """Parse a JSON document and re-serialise it with indentation.

    Key order and non-ASCII characters are preserved.

    Raises:
        JsonParseError: If ``text`` is not valid JSON.
    """
    return json.dumps(parse_json(text), indent=indent, ensure_ascii=False)
