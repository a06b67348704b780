"""Integration tests for the json-tree-diff pytest plugin.

These tests verify that the assert_json_match fixture is auto-discovered via
the pytest11 entry point and behaves correctly.

NOTE: These tests require json-tree-diff to be installed (even in editable mode
via ``pip install -e .``).  The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_diff import DiffConfig


def test_fixture_passes_matching_docs(assert_json_match: Any) -> None:
    assert_json_match({"a": 1, "b": [1, 2]}, {"b": [1, 2], "a": 1})


def test_fixture_fails_changed_field(assert_json_match: Any) -> None:
    with pytest.raises(AssertionError, match=r'changed:    \{"a": \{"left": 1'):
        assert_json_match({"a": 1}, {"a": 2})


def test_fixture_lists_one_sided_keys(assert_json_match: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_json_match({"a": 1}, {"b": 1})
    message = str(exc_info.value)
    assert 'left_only:  {"a": 1}' in message
    assert 'right_only: {"b": 1}' in message


def test_fixture_fails_array_mismatch(assert_json_match: Any) -> None:
    with pytest.raises(AssertionError, match=r'"type": "one_sided"'):
        assert_json_match([1], [1, 2])


def test_fixture_custom_config(assert_json_match: Any) -> None:
    assert_json_match(
        {"x": None, "y": 1},
        {"y": 1},
        config=DiffConfig(null_equals_missing=True),
    )


def test_fixture_is_callable(assert_json_match: Any) -> None:
    assert callable(assert_json_match)
