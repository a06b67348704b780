"""Deep equality over typed values.

Arrays compare positionally: same length and pairwise equal at every index.
Objects compare by key set first, then field by field.  Scalars of the same
tag compare their payloads with Python equality, so ``1`` equals ``1.0`` but
``"1"`` never equals ``1`` (different tags).

Nested pairs are checked from a work list instead of by recursion, so
nesting depth is not limited by the interpreter's recursion limit.
"""

from __future__ import annotations

from json_tree_diff.value.nodes import JsonArray, JsonObject, TypedValue

__all__ = ["equal"]


def equal(a: TypedValue, b: TypedValue) -> bool:
    """Return True if two typed values are deeply equal."""
    pending: list[tuple[TypedValue, TypedValue]] = [(a, b)]
    while pending:
        left, right = pending.pop()
        if left.json_type != right.json_type:
            return False

        if isinstance(left, JsonObject) and isinstance(right, JsonObject):
            if left.fields.keys() != right.fields.keys():
                return False
            pending.extend((val, right.fields[key]) for key, val in left.fields.items())
        elif isinstance(left, JsonArray) and isinstance(right, JsonArray):
            if len(left.items) != len(right.items):
                return False
            pending.extend(zip(left.items, right.items, strict=True))
        elif left.value != right.value:  # type: ignore[union-attr]
            return False

    return True
