"""DiffConfig and ArrayTailPolicy for diff engine configuration.

DiffConfig is a frozen (immutable) dataclass holding the engine options.
ArrayTailPolicy selects how array positions beyond the shorter array are
reported.  Arrays are always compared by position; no policy reorders or
aligns elements.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["ArrayTailPolicy", "DiffConfig"]


class ArrayTailPolicy(StrEnum):
    """How array indices present on only one side are reported.

    - ONE_SIDED:    One entry per index of the longer array.  Tail indices on
                    either side become ``OneSided`` entries.
    - LEFT_INDICES: One entry per index of the left array.  A left tail is
                    reported as ``OneSided`` entries; a right tail is dropped.
    """

    ONE_SIDED = auto()
    LEFT_INDICES = auto()


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for a comparison.

    Attributes:
        array_tail: Reporting policy for array indices missing on one side.
            Accepts an ``ArrayTailPolicy`` or its string value.
        null_equals_missing: When True, object entries whose value is JSON
            null are dropped from both inputs before conversion, so
            ``{"x": null}`` and ``{}`` compare as matching.  Default False.
    """

    array_tail: ArrayTailPolicy = ArrayTailPolicy.ONE_SIDED
    null_equals_missing: bool = False

    def __post_init__(self) -> None:
        try:
            policy = ArrayTailPolicy(self.array_tail)
        except ValueError:
            choices = ", ".join(p.value for p in ArrayTailPolicy)
            msg = f"array_tail must be one of {choices}, got {self.array_tail!r}"
            raise ValueError(msg) from None
        object.__setattr__(self, "array_tail", policy)
        if not isinstance(self.null_equals_missing, bool):
            msg = (
                "null_equals_missing must be a bool, "
                f"got {type(self.null_equals_missing).__name__}"
            )
            raise ValueError(msg)
