"""Exception types raised by json-tree-diff.

Differences between two documents are never errors: they are returned as
diff results.  The exceptions here cover contract violations (a Python value
that is not JSON) and malformed JSON text handed to the text helpers.
"""

from __future__ import annotations

__all__ = ["InvalidInputShape", "JsonParseError"]


class InvalidInputShape(TypeError):
    """Raised by ``to_typed`` for a value outside the JSON shape set.

    Attributes:
        value_type: The Python type that could not be classified.
    """

    def __init__(self, value_type: type, detail: str = "") -> None:
        self.value_type = value_type
        msg = f"Unsupported JSON value type: {value_type!r}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class JsonParseError(ValueError):
    """Raised when a JSON text document cannot be parsed.

    Attributes:
        side:   Which input failed (``"left"``, ``"right"``) or ``None`` when
                the text was parsed on its own.
        lineno: 1-based line of the failure.
        colno:  1-based column of the failure.
    """

    def __init__(
        self,
        message: str,
        side: str | None = None,
        lineno: int = 0,
        colno: int = 0,
    ) -> None:
        self.side = side
        self.lineno = lineno
        self.colno = colno
        prefix = f"{side}: " if side else ""
        super().__init__(f"{prefix}{message} (line {lineno}, column {colno})")
