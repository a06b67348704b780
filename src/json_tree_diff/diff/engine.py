"""DiffEngine: positional structural diff of two typed JSON values.

Architecture:
- Type mismatch:   reported as ScalarMismatch, never raised.
- Scalar pairs:    Match if equal, else ScalarMismatch.
- Array pairs:     compared index by index; each shared index is diffed like a
                   top-level pair.  Indices past the shorter array become
                   OneSided entries, or land in ``ArrayDiff.right_tail`` for a
                   right tail under LEFT_INDICES.  There is no reordering or
                   alignment of elements.
- Object pairs:    one pass over the union of keys (left order, then right-only
                   keys in right order) filling five mappings in place.  A
                   changed field is stored as an opaque FieldChange pair; object
                   fields are never diffed recursively.

Presence of an object key is decided by membership only, so keys holding
``false``, ``0``, ``""`` or ``null`` are classified like any other key.
"""

from __future__ import annotations

from json_tree_diff.diff.config import ArrayTailPolicy, DiffConfig
from json_tree_diff.diff.result import (
    ArrayDiff,
    DiffResult,
    FieldChange,
    Match,
    ObjectDiff,
    OneSided,
    ScalarMismatch,
    Side,
)
from json_tree_diff.value.equality import equal
from json_tree_diff.value.nodes import JsonArray, JsonObject, TypedValue, is_scalar

__all__ = ["DiffEngine", "compare_values"]


class DiffEngine:
    """Compares typed JSON values and returns a diff result tree.

    The engine holds only its (immutable) configuration, so one instance may
    be shared freely between threads and calls.

    Example::

        from json_tree_diff.diff.engine import DiffEngine
        from json_tree_diff.value import to_typed

        engine = DiffEngine()
        result = engine.compare(to_typed([1, 2]), to_typed([1, 3]))
        # ArrayDiff(items=(Match(...), ScalarMismatch(...)))
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config if config is not None else DiffConfig()

    @property
    def config(self) -> DiffConfig:
        return self._config

    def compare(self, left: TypedValue, right: TypedValue) -> DiffResult:
        """Diff two typed values.

        Nested arrays are walked with an explicit stack of open arrays, so
        nesting depth is not limited by the interpreter's recursion limit.

        Args:
            left:  Left typed value.
            right: Right typed value.

        Returns:
            A ``Match``, ``ScalarMismatch``, ``ArrayDiff`` or ``ObjectDiff``.
        """
        stack: list[_OpenArray] = []
        pair: tuple[TypedValue, TypedValue] | None = (left, right)
        while True:
            assert pair is not None
            done = self._compare_flat(*pair)
            if done is None:
                stack.append(_OpenArray(*pair))  # type: ignore[arg-type]

            while stack:
                top = stack[-1]
                if done is not None:
                    top.items.append(done)
                pair = next(top.pairs, None)
                if pair is not None:
                    break
                done = stack.pop().close(self._config.array_tail)
            else:
                assert done is not None
                return done

    def _compare_flat(self, left: TypedValue, right: TypedValue) -> DiffResult | None:
        """Diff everything except an array pair, for which None is returned."""
        if left.json_type != right.json_type:
            return ScalarMismatch(left, right)

        if is_scalar(left):
            return self._compare_scalar(left, right)

        if isinstance(left, JsonObject) and isinstance(right, JsonObject):
            return self._compare_object(left, right)

        # Same tag, not scalar, not object: both are arrays
        # (JsonType has exactly 6 members)
        return None

    def _compare_scalar(self, left: TypedValue, right: TypedValue) -> DiffResult:
        if equal(left, right):
            return Match(left)
        return ScalarMismatch(left, right)

    def _compare_object(self, left: JsonObject, right: JsonObject) -> ObjectDiff:
        left_fields = left.fields
        right_fields = right.fields

        diff: dict[str, FieldChange] = {}
        match: dict[str, TypedValue] = {}
        distinct_left: dict[str, TypedValue] = {}
        distinct_right: dict[str, TypedValue] = {}
        diff_left: dict[str, TypedValue] = {}
        diff_right: dict[str, TypedValue] = {}

        # dict.fromkeys keeps first-seen order: left keys, then right-only keys
        all_keys = dict.fromkeys([*left_fields, *right_fields])

        for key in all_keys:
            if key not in left_fields:
                distinct_right[key] = right_fields[key]
                continue
            if key not in right_fields:
                distinct_left[key] = left_fields[key]
                continue

            left_val = left_fields[key]
            right_val = right_fields[key]
            if equal(left_val, right_val):
                match[key] = left_val
            else:
                diff[key] = FieldChange(left_val, right_val)
                diff_left[key] = left_val
                diff_right[key] = right_val

        return ObjectDiff(
            diff=diff,
            match=match,
            distinct_left=distinct_left,
            distinct_right=distinct_right,
            diff_left=diff_left,
            diff_right=diff_right,
        )


class _OpenArray:
    """An array pair whose shared positions are still being diffed."""

    __slots__ = ("items", "left", "pairs", "right")

    def __init__(self, left: JsonArray, right: JsonArray) -> None:
        self.left = left
        self.right = right
        self.pairs = zip(left.items, right.items)
        self.items: list[DiffResult] = []

    def close(self, policy: ArrayTailPolicy) -> ArrayDiff:
        shared = len(self.items)
        items = self.items
        items.extend(OneSided(Side.LEFT, val) for val in self.left.items[shared:])
        right_tail = self.right.items[shared:]
        if policy == ArrayTailPolicy.ONE_SIDED:
            items.extend(OneSided(Side.RIGHT, val) for val in right_tail)
            return ArrayDiff(tuple(items))
        return ArrayDiff(tuple(items), right_tail=right_tail)


def compare_values(
    left: TypedValue,
    right: TypedValue,
    config: DiffConfig | None = None,
) -> DiffResult:
    """Diff two typed values with a fresh ``DiffEngine``.

    Args:
        left:   Left typed value.
        right:  Right typed value.
        config: Engine options.  Defaults to ``DiffConfig()`` when None.

    Returns:
        The diff result tree.
    """
    return DiffEngine(config=config).compare(left, right)
