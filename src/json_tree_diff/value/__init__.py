"""Value model subpackage: typed JSON values and the operations over them.

Re-exports the public API:
- JsonType and the six typed value classes (JsonNull, JsonString, JsonNumber,
  JsonBoolean, JsonObject, JsonArray), plus the TypedValue union alias
- to_typed / to_untyped: conversion from and to plain Python JSON data
- equal: deep equality
"""

from json_tree_diff.value.convert import JsonLike, to_typed, to_untyped
from json_tree_diff.value.equality import equal
from json_tree_diff.value.nodes import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonType,
    JsonValue,
    TypedValue,
    is_scalar,
)

__all__ = [
    "JsonArray",
    "JsonBoolean",
    "JsonLike",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonType",
    "JsonValue",
    "TypedValue",
    "equal",
    "is_scalar",
    "to_typed",
    "to_untyped",
]
