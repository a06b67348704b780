"""JsonDiffer: orchestrator that wires preprocessing, conversion and DiffEngine.

This is the wiring layer between the value model, the diff engine and the
public API.  It turns plain Python data (or JSON text) into typed values,
runs the engine and wraps the outcome in a ComparisonResult with timing.

Architecture:
- compare() starts a wall-clock timer, preprocesses both inputs, converts them
  with ``to_typed``, delegates to ``DiffEngine.compare`` and returns a
  ComparisonResult.
- compare_text() parses both documents with the standard ``json`` module first.
  A parse failure is re-raised as JsonParseError naming the failing side; the
  core never sees malformed text.
- null_equals_missing=True is implemented as a preprocessing step that strips
  None-valued keys from dicts before conversion.
"""

from __future__ import annotations

import json
import time
from typing import Any

from json_tree_diff.diff.config import DiffConfig
from json_tree_diff.diff.engine import DiffEngine
from json_tree_diff.errors import JsonParseError
from json_tree_diff.result import ComparisonResult
from json_tree_diff.value.convert import to_typed

__all__ = ["JsonDiffer", "parse_json"]


def parse_json(text: str, side: str | None = None) -> Any:
    """Parse a JSON text document into plain Python data.

    Args:
        text: The JSON document.
        side: Label used in the error message (``"left"`` or ``"right"``).

    Returns:
        The parsed value.

    Raises:
        JsonParseError: If ``text`` is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonParseError(
            exc.msg, side=side, lineno=exc.lineno, colno=exc.colno
        ) from exc


class JsonDiffer:
    """Orchestrator for structural JSON comparison.

    Example::

        from json_tree_diff.comparator import JsonDiffer

        differ = JsonDiffer()
        result = differ.compare({"a": 1, "b": 2}, {"b": 2, "c": 3})
        result.diff.distinct_left    # {"a": JsonNumber(1)}
        result.diff.distinct_right   # {"c": JsonNumber(3)}
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        """Initialise the differ.

        Args:
            config: Comparison options.  Defaults to ``DiffConfig()``.
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()
        self._engine = DiffEngine(config=self._config)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, left: Any, right: Any) -> ComparisonResult:
        """Compare two plain JSON values.

        Args:
            left:  First JSON value (dict, list, str, int, float, bool, None).
            right: Second JSON value.

        Returns:
            A ``ComparisonResult`` holding both typed values and the diff tree.

        Raises:
            InvalidInputShape: If either input is not JSON-shaped.
        """
        t0 = time.perf_counter()

        left_typed = to_typed(self._preprocess(left))
        right_typed = to_typed(self._preprocess(right))
        diff = self._engine.compare(left_typed, right_typed)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        return ComparisonResult(
            left=left_typed,
            right=right_typed,
            diff=diff,
            computation_time_ms=elapsed_ms,
        )

    def compare_text(self, left_text: str, right_text: str) -> ComparisonResult:
        """Parse two JSON documents and compare them.

        Raises:
            JsonParseError: If either document is malformed.  The left
                document is parsed first, so it is reported when both fail.
        """
        left = parse_json(left_text, side="left")
        right = parse_json(right_text, side="right")
        return self.compare(left, right)

    # ------------------------------------------------------------------
    # Preprocessing
    # ------------------------------------------------------------------

    def _preprocess(self, value: Any) -> Any:
        """Strip None-valued keys when null_equals_missing=True.

        Returns a new object; the input is never mutated.
        """
        if not self._config.null_equals_missing:
            return value

        if isinstance(value, dict):
            return {k: self._preprocess(v) for k, v in value.items() if v is not None}
        if isinstance(value, (list, tuple)):
            return [self._preprocess(item) for item in value]
        return value
