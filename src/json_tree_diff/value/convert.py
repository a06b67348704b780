"""Conversion between plain Python JSON values and typed values.

``to_typed`` dispatches over the shapes a JSON parser produces (``None``,
``str``, ``int``/``float``, ``bool``, ``list``, ``dict``).  The dispatch order
matters: bool MUST be checked before int because bool is a subclass of int in
Python (``isinstance(True, int)`` is True).

``to_untyped`` is the exact inverse.  Arrays come back as lists and objects as
dicts in their stored key order, so ``to_untyped(to_typed(x)) == x`` for any
parsed document.

Both walk containers with an explicit stack of open containers rather than
Python recursion, so any depth ``json.loads`` accepts converts without hitting
the interpreter's recursion limit.  Children are converted in order and the
container is built when its last child is done.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from json_tree_diff.errors import InvalidInputShape
from json_tree_diff.value.nodes import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    TypedValue,
)

__all__ = ["JsonLike", "to_typed", "to_untyped"]

# Type alias for plain JSON values as produced by json.loads
JsonLike = dict[str, Any] | list[Any] | str | int | float | bool | None

_END = object()


class _OpenRaw:
    """A plain list/dict whose children are still being converted."""

    __slots__ = ("children", "converted", "keys")

    def __init__(self, raw: list[Any] | tuple[Any, ...] | dict[Any, Any]) -> None:
        self.keys: list[str] | None = None
        if isinstance(raw, dict):
            for key in raw:
                if not isinstance(key, str):
                    raise InvalidInputShape(type(key), detail="object keys must be str")
            self.keys = list(raw)
            self.children: Iterator[Any] = iter(raw.values())
        else:
            self.children = iter(raw)
        self.converted: list[TypedValue] = []

    def close(self) -> TypedValue:
        if self.keys is None:
            return JsonArray(tuple(self.converted))
        return JsonObject(dict(zip(self.keys, self.converted, strict=True)))


def _scalar_to_typed(raw: Any) -> TypedValue:
    # CRITICAL: bool MUST be checked before int
    if isinstance(raw, bool):
        return JsonBoolean(raw)

    if raw is None:
        return JsonNull()

    if isinstance(raw, str):
        return JsonString(raw)

    if isinstance(raw, (int, float)):
        return JsonNumber(raw)

    raise InvalidInputShape(type(raw))


def to_typed(raw: Any) -> TypedValue:
    """Convert a plain JSON value into its typed representation.

    Args:
        raw: Any value a JSON parser can produce.  Tuples are accepted as
             arrays.

    Returns:
        The typed value, with every nested element and field converted.

    Raises:
        InvalidInputShape: If ``raw`` (or anything nested in it) is not a JSON
            shape, or an object key is not a string.
    """
    stack: list[_OpenRaw] = []
    node: Any = raw
    while True:
        done: TypedValue | None = None
        if isinstance(node, (list, tuple, dict)):
            stack.append(_OpenRaw(node))
        else:
            done = _scalar_to_typed(node)

        while stack:
            top = stack[-1]
            if done is not None:
                top.converted.append(done)
            node = next(top.children, _END)
            if node is not _END:
                break
            done = stack.pop().close()
        else:
            assert done is not None
            return done


class _OpenTyped:
    """A typed container whose children are still being resolved."""

    __slots__ = ("children", "keys", "resolved")

    def __init__(self, value: JsonObject | JsonArray) -> None:
        self.keys: list[str] | None = None
        if isinstance(value, JsonObject):
            self.keys = list(value.fields)
            self.children: Iterator[TypedValue] = iter(value.fields.values())
        else:
            self.children = iter(value.items)
        self.resolved: list[Any] = []

    def close(self) -> Any:
        if self.keys is None:
            return self.resolved
        return dict(zip(self.keys, self.resolved, strict=True))


def to_untyped(value: TypedValue) -> Any:
    """Convert a typed value back into plain Python data.

    Args:
        value: Any typed value.

    Returns:
        ``dict`` for objects, ``list`` for arrays, and the scalar payload
        (``None``, ``str``, ``int``/``float``, ``bool``) otherwise.
    """
    stack: list[_OpenTyped] = []
    node: Any = value
    while True:
        pending = isinstance(node, (JsonObject, JsonArray))
        done: Any = None
        if pending:
            stack.append(_OpenTyped(node))
        else:
            done = node.value

        while stack:
            top = stack[-1]
            if not pending:
                top.resolved.append(done)
            pending = False
            node = next(top.children, _END)
            if node is not _END:
                break
            done = stack.pop().close()
        else:
            return done
