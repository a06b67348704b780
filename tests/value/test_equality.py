"""Tests for deep equality over typed values.

Includes regression tests for three defects in earlier designs:
- arrays considered equal when elements merely matched *some* other element
- objects compared only on their last key
- objects with equally-sized but different key sets considered equal
"""

from __future__ import annotations

import pytest

from json_tree_diff.value.convert import to_typed
from json_tree_diff.value.equality import equal


def eq(a: object, b: object) -> bool:
    return equal(to_typed(a), to_typed(b))


class TestScalars:
    def test_equal_strings(self) -> None:
        assert eq("a", "a") is True

    def test_different_strings(self) -> None:
        assert eq("a", "b") is False

    def test_int_equals_float_numerically(self) -> None:
        assert eq(1, 1.0) is True

    def test_string_never_equals_number(self) -> None:
        assert eq("1", 1) is False

    def test_boolean_never_equals_number(self) -> None:
        assert eq(True, 1) is False
        assert eq(False, 0) is False

    def test_null_equals_null(self) -> None:
        assert eq(None, None) is True

    def test_null_not_equal_false(self) -> None:
        assert eq(None, False) is False


class TestArrays:
    def test_same_order(self) -> None:
        assert eq([1, 2, 3], [1, 2, 3]) is True

    def test_different_length(self) -> None:
        assert eq([1, 2], [1, 2, 3]) is False

    def test_empty(self) -> None:
        assert eq([], []) is True

    def test_reordered_is_not_equal(self) -> None:
        assert eq([1, 2], [2, 1]) is False

    def test_multiplicity_matters(self) -> None:
        # Every left element equals some right element, but not positionally.
        assert eq([1, 1], [1, 2]) is False

    def test_nested(self) -> None:
        assert eq([[1], {"a": 2}], [[1], {"a": 2}]) is True
        assert eq([[1], {"a": 2}], [[1], {"a": 3}]) is False


class TestObjects:
    def test_key_order_is_ignored(self) -> None:
        assert eq({"a": 1, "b": 2}, {"b": 2, "a": 1}) is True

    def test_first_key_differs(self) -> None:
        # Only the last key matches; every key must be checked.
        assert eq({"a": 1, "b": 2}, {"a": 9, "b": 2}) is False

    def test_same_size_different_keys(self) -> None:
        assert eq({"a": 1}, {"b": 1}) is False

    def test_different_size(self) -> None:
        assert eq({"a": 1}, {"a": 1, "b": 2}) is False

    def test_empty(self) -> None:
        assert eq({}, {}) is True

    def test_falsy_values(self) -> None:
        doc = {"f": False, "z": 0, "s": "", "n": None}
        assert eq(doc, dict(doc)) is True


class TestTypeMismatch:
    @pytest.mark.parametrize(
        ("a", "b"),
        [({}, []), ([], None), ({"a": 1}, "a"), ([1], 1)],
    )
    def test_different_tags_never_equal(self, a: object, b: object) -> None:
        assert eq(a, b) is False


class TestDeepNesting:
    def test_deep_equal_arrays(self) -> None:
        left: object = [1]
        right: object = [1]
        for _ in range(900):
            left = [left]
            right = [right]
        assert eq(left, right) is True

    def test_deep_difference_at_the_bottom(self) -> None:
        left: object = {"v": 1}
        right: object = {"v": 2}
        for _ in range(900):
            left = [{"k": left}]
            right = [{"k": right}]
        assert eq(left, right) is False
