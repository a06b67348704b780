"""pytest plugin for json-tree-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from json_tree_diff import DiffConfig, ObjectDiff, compare
from json_tree_diff.render import changes_view, partition_view, render_diff


def _failure_message(actual: Any, expected: Any, config: DiffConfig | None) -> str:
    result = compare(actual, expected, config=config)
    if result.is_match:
        return ""

    diff = result.diff
    if isinstance(diff, ObjectDiff):
        partition = partition_view(diff)
        detail = (
            f"  left_only:  {json.dumps(partition['left_only'])}\n"
            f"  right_only: {json.dumps(partition['right_only'])}\n"
            f"  changed:    {json.dumps(changes_view(diff))}"
        )
    else:
        detail = f"  diff: {json.dumps(render_diff(diff))}"

    return (
        "JSON documents do not match:\n"
        f"  actual:   {json.dumps(actual)}\n"
        f"  expected: {json.dumps(expected)}\n"
        f"{detail}"
    )


@pytest.fixture(scope="session")
def assert_json_match() -> Any:
    """Fixture that returns a callable structural JSON match asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh JsonDiffer per call).

    Usage in tests::

        def test_payload(assert_json_match):
            assert_json_match({"a": 1, "b": [1, 2]}, {"b": [1, 2], "a": 1})

        def test_changed(assert_json_match):
            with pytest.raises(AssertionError, match=r"changed:"):
                assert_json_match({"a": 1}, {"a": 2})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` when the documents differ anywhere.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two JSON documents match structurally.

        Raises:
            AssertionError: When any key or position differs, with a message
                listing the left-only, right-only and changed fields (for
                objects) or the rendered diff tree (otherwise).
        """
        message = _failure_message(actual, expected, config)
        if message:
            raise AssertionError(message)

    return _assert
