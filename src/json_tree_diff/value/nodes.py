"""Typed JSON values: a closed variant over the six JSON shapes.

Each case is a frozen, slotted dataclass deriving from ``JsonValue`` and tagged
with a class-level ``JsonType``.  Container payloads are read-only: arrays hold
a tuple and objects hold a ``MappingProxyType`` over a private dict, so a typed
tree cannot be mutated after conversion.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum, auto
from types import MappingProxyType
from typing import ClassVar, TypeAlias

__all__ = [
    "JsonArray",
    "JsonBoolean",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonType",
    "JsonValue",
    "TypedValue",
    "is_scalar",
]


class JsonType(StrEnum):
    """Enumeration of the six JSON value shapes.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - STRING  -> "string"
    - NUMBER  -> "number"
    - BOOLEAN -> "boolean"
    - OBJECT  -> "object"
    - ARRAY   -> "array"
    """

    NULL = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    OBJECT = auto()
    ARRAY = auto()


@dataclass(frozen=True, slots=True)
class JsonValue:
    """Common base of the six typed value classes.  Never instantiated directly."""

    json_type: ClassVar[JsonType]


@dataclass(frozen=True, slots=True)
class JsonNull(JsonValue):
    json_type: ClassVar[JsonType] = JsonType.NULL

    value: None = None


@dataclass(frozen=True, slots=True)
class JsonString(JsonValue):
    json_type: ClassVar[JsonType] = JsonType.STRING

    value: str


@dataclass(frozen=True, slots=True)
class JsonNumber(JsonValue):
    json_type: ClassVar[JsonType] = JsonType.NUMBER

    value: int | float


@dataclass(frozen=True, slots=True)
class JsonBoolean(JsonValue):
    json_type: ClassVar[JsonType] = JsonType.BOOLEAN

    value: bool


@dataclass(frozen=True, slots=True)
class JsonObject(JsonValue):
    """A JSON object.

    Attributes:
        fields: Read-only mapping from key to typed value.  A plain dict passed
                to the constructor is copied and wrapped so later changes to
                the caller's dict cannot leak in.
    """

    json_type: ClassVar[JsonType] = JsonType.OBJECT

    fields: Mapping[str, TypedValue]

    def __post_init__(self) -> None:
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))


@dataclass(frozen=True, slots=True)
class JsonArray(JsonValue):
    """A JSON array.

    Attributes:
        items: Ordered tuple of typed values.  Any iterable passed to the
               constructor is materialised as a tuple.
    """

    json_type: ClassVar[JsonType] = JsonType.ARRAY

    items: tuple[TypedValue, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))


TypedValue: TypeAlias = (
    JsonNull | JsonString | JsonNumber | JsonBoolean | JsonObject | JsonArray
)

_SCALAR_TYPES = frozenset(
    {JsonType.NULL, JsonType.STRING, JsonType.NUMBER, JsonType.BOOLEAN}
)


def is_scalar(value: TypedValue) -> bool:
    """Return True for the four non-container cases."""
    return value.json_type in _SCALAR_TYPES
