"""Tests for the typed value classes and the JsonType StrEnum.

Verifies:
- JsonType has exactly 6 members with lowercase string values
- Each value class carries the matching class-level tag
- Values are frozen and slotted
- Containers are read-only after construction
- is_scalar splits the four scalar cases from the two containers
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from types import MappingProxyType

import pytest

from json_tree_diff.value.nodes import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonType,
    is_scalar,
)


class TestJsonType:
    def test_has_exactly_six_members(self) -> None:
        assert len(JsonType) == 6

    def test_values_are_lowercased(self) -> None:
        assert JsonType.NULL == "null"
        assert JsonType.STRING == "string"
        assert JsonType.NUMBER == "number"
        assert JsonType.BOOLEAN == "boolean"
        assert JsonType.OBJECT == "object"
        assert JsonType.ARRAY == "array"

    def test_members_are_str_instances(self) -> None:
        for member in JsonType:
            assert isinstance(member, str)


class TestTags:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (JsonNull(), JsonType.NULL),
            (JsonString("x"), JsonType.STRING),
            (JsonNumber(1), JsonType.NUMBER),
            (JsonBoolean(False), JsonType.BOOLEAN),
            (JsonObject({}), JsonType.OBJECT),
            (JsonArray(()), JsonType.ARRAY),
        ],
    )
    def test_tag_matches_class(self, value: object, expected: JsonType) -> None:
        assert value.json_type == expected  # type: ignore[attr-defined]

    def test_null_payload_defaults_to_none(self) -> None:
        assert JsonNull().value is None


class TestImmutability:
    def test_scalar_is_frozen(self) -> None:
        value = JsonNumber(1)
        with pytest.raises(FrozenInstanceError):
            value.value = 2  # type: ignore[misc]

    def test_uses_slots(self) -> None:
        assert hasattr(JsonString, "__slots__")
        with pytest.raises((AttributeError, TypeError)):
            JsonString("x").extra = 1  # type: ignore[attr-defined]

    def test_object_fields_are_read_only(self) -> None:
        obj = JsonObject({"a": JsonNumber(1)})
        assert isinstance(obj.fields, MappingProxyType)
        with pytest.raises(TypeError):
            obj.fields["b"] = JsonNumber(2)  # type: ignore[index]

    def test_object_copies_caller_dict(self) -> None:
        source = {"a": JsonNumber(1)}
        obj = JsonObject(source)
        source["b"] = JsonNumber(2)
        assert list(obj.fields) == ["a"]

    def test_array_items_become_tuple(self) -> None:
        arr = JsonArray([JsonNumber(1), JsonNumber(2)])  # type: ignore[arg-type]
        assert isinstance(arr.items, tuple)
        assert arr.items == (JsonNumber(1), JsonNumber(2))


class TestIsScalar:
    @pytest.mark.parametrize(
        "value",
        [JsonNull(), JsonString(""), JsonNumber(0), JsonBoolean(True)],
    )
    def test_scalars(self, value: object) -> None:
        assert is_scalar(value) is True  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [JsonObject({}), JsonArray(())])
    def test_containers(self, value: object) -> None:
        assert is_scalar(value) is False  # type: ignore[arg-type]
