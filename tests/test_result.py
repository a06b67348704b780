"""Tests for ComparisonResult frozen dataclass.

Covers:
- Construction and field access
- Frozen (immutable) enforcement
- is_match delegates to the diff tree
- __all__ export
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_tree_diff.diff.result import Match, ScalarMismatch
from json_tree_diff.result import ComparisonResult
from json_tree_diff.value.nodes import JsonNumber


def make_result(**overrides: object) -> ComparisonResult:
    """Return a valid ComparisonResult, optionally overriding specific fields."""
    defaults: dict[str, object] = {
        "left": JsonNumber(1),
        "right": JsonNumber(1),
        "diff": Match(JsonNumber(1)),
        "computation_time_ms": 0.5,
    }
    defaults.update(overrides)
    return ComparisonResult(**defaults)  # type: ignore[arg-type]


class TestComparisonResult:
    def test_fields_accessible(self) -> None:
        result = make_result()
        assert result.left == JsonNumber(1)
        assert result.right == JsonNumber(1)
        assert result.diff == Match(JsonNumber(1))
        assert result.computation_time_ms == pytest.approx(0.5)

    def test_is_match_true(self) -> None:
        assert make_result().is_match is True

    def test_is_match_false(self) -> None:
        mismatch = ScalarMismatch(JsonNumber(1), JsonNumber(2))
        assert make_result(right=JsonNumber(2), diff=mismatch).is_match is False

    def test_frozen(self) -> None:
        result = make_result()
        with pytest.raises(FrozenInstanceError):
            result.computation_time_ms = 1.0  # type: ignore[misc]

    def test_equality(self) -> None:
        assert make_result() == make_result()

    def test_all_export(self) -> None:
        import json_tree_diff.result as mod

        assert mod.__all__ == ["ComparisonResult"]
