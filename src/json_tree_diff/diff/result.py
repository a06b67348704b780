"""Diff results: a closed variant describing how two typed values relate.

- Match           : both sides are deeply equal.
- ScalarMismatch  : unequal scalars, or values of different JSON types.
- ArrayDiff       : both sides are arrays; one nested result per position.
- ObjectDiff      : both sides are objects; keys partitioned five ways.
- OneSided        : an array position that exists on only one side.  Only
                    ever appears inside ``ArrayDiff.items``.

Each result carries an ``is_match`` property so a renderer can collapse fully
matching subtrees without walking them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType
from typing import ClassVar, TypeAlias

from json_tree_diff.value.nodes import TypedValue

__all__ = [
    "ArrayDiff",
    "DiffResult",
    "DiffType",
    "FieldChange",
    "Match",
    "ObjectDiff",
    "OneSided",
    "ScalarMismatch",
    "Side",
]


class DiffType(StrEnum):
    MATCH = auto()
    SCALAR_MISMATCH = auto()
    ARRAY = auto()
    OBJECT = auto()
    ONE_SIDED = auto()


class Side(StrEnum):
    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True, slots=True)
class Match:
    """Both inputs are deeply equal; ``value`` is the left one."""

    diff_type: ClassVar[DiffType] = DiffType.MATCH

    value: TypedValue

    @property
    def is_match(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ScalarMismatch:
    """Two unequal scalars, or two values whose JSON types differ."""

    diff_type: ClassVar[DiffType] = DiffType.SCALAR_MISMATCH

    left: TypedValue
    right: TypedValue

    @property
    def is_match(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class OneSided:
    """An array position present only on ``side``."""

    diff_type: ClassVar[DiffType] = DiffType.ONE_SIDED

    side: Side
    value: TypedValue

    @property
    def is_match(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class ArrayDiff:
    """Per-position results for two arrays.

    Attributes:
        items:      ``items[i]`` describes index ``i``.  Shared indices hold a
                    full nested result; indices beyond the shorter array hold
                    ``OneSided`` entries according to the configured tail policy.
        right_tail: Right-side values past the end of the left array that the
                    LEFT_INDICES policy leaves out of ``items``.  Always empty
                    under ONE_SIDED.
    """

    diff_type: ClassVar[DiffType] = DiffType.ARRAY

    items: tuple[DiffResult, ...]
    right_tail: tuple[TypedValue, ...] = ()

    @property
    def is_match(self) -> bool:
        # Work list rather than recursion: nested arrays may be very deep
        pending: list[ArrayDiff] = [self]
        while pending:
            node = pending.pop()
            if node.right_tail:
                return False
            for item in node.items:
                if isinstance(item, ArrayDiff):
                    pending.append(item)
                elif not item.is_match:
                    return False
        return True


@dataclass(frozen=True, slots=True)
class FieldChange:
    """The two values of an object key whose values differ."""

    left: TypedValue
    right: TypedValue


@dataclass(frozen=True, slots=True)
class ObjectDiff:
    """Field-by-field partition of two objects.

    Every key of either object lands in exactly one of ``distinct_left``,
    ``distinct_right``, ``match`` or ``diff``.  Changed values are stored as
    opaque ``FieldChange`` pairs and are not diffed further.  All six mappings
    are read-only views; plain dicts passed in are copied and wrapped.

    Attributes:
        diff:           Key -> FieldChange for keys whose values differ.
        match:          Key -> shared value for keys whose values are equal.
        distinct_left:  Keys present only in the left object.
        distinct_right: Keys present only in the right object.
        diff_left:      Key -> left value for every key in ``diff``.
        diff_right:     Key -> right value for every key in ``diff``.
    """

    diff_type: ClassVar[DiffType] = DiffType.OBJECT

    diff: Mapping[str, FieldChange] = field(default_factory=dict)
    match: Mapping[str, TypedValue] = field(default_factory=dict)
    distinct_left: Mapping[str, TypedValue] = field(default_factory=dict)
    distinct_right: Mapping[str, TypedValue] = field(default_factory=dict)
    diff_left: Mapping[str, TypedValue] = field(default_factory=dict)
    diff_right: Mapping[str, TypedValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in _OBJECT_DIFF_MAPPINGS:
            mapping = getattr(self, name)
            if not isinstance(mapping, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(mapping)))

    @property
    def is_match(self) -> bool:
        return not (self.diff or self.distinct_left or self.distinct_right)


_OBJECT_DIFF_MAPPINGS = (
    "diff",
    "match",
    "distinct_left",
    "distinct_right",
    "diff_left",
    "diff_right",
)

DiffResult: TypeAlias = Match | ScalarMismatch | ArrayDiff | ObjectDiff | OneSided
