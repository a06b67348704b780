"""ComparisonResult dataclass for comparison output.

This module provides the result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_tree_diff.diff.result import DiffResult
from json_tree_diff.value.nodes import TypedValue

__all__ = ["ComparisonResult"]


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of a compare() call.

    Attributes:
        left:  Typed form of the left input (after preprocessing).
        right: Typed form of the right input (after preprocessing).
        diff:  Diff result tree describing how ``left`` relates to ``right``.
        computation_time_ms: Wall-clock duration of the comparison in
            milliseconds, conversion included.
    """

    left: TypedValue
    right: TypedValue
    diff: DiffResult
    computation_time_ms: float

    @property
    def is_match(self) -> bool:
        """True when the two inputs matched everywhere."""
        return self.diff.is_match
