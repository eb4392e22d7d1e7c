"""Value kinds, serialization flags and the low-level text helpers."""

from __future__ import annotations

import math
from enum import IntEnum, IntFlag

__all__ = [
    "DEF_HASH_ENTRIES",
    "NUMBER_CHARS",
    "HEX_CHARS",
    "JsonType",
    "Flag",
    "escape_str",
    "format_double",
    "indent",
]

DEF_HASH_ENTRIES = 16
NUMBER_CHARS = "0123456789.+-eE"
HEX_CHARS = "0123456789abcdefABCDEF"

_SIMPLE_ESCAPES = {
    "\b": "\\b",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\f": "\\f",
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
}


class JsonType(IntEnum):
    """The kinds of value a JSON tree can hold."""

    NULL = 0
    BOOLEAN = 1
    DOUBLE = 2
    INT = 3
    OBJECT = 4
    ARRAY = 5
    STRING = 6


class Flag(IntFlag):
    """Formatting options for serialization."""

    PLAIN = 0
    SPACED = 1 << 0
    PRETTY = 1 << 1
    NOZERO = 1 << 2


def escape_str(text: str) -> str:
    """Escape ``text`` for use inside a JSON string literal."""
    parts = []
    for char in text:
        replacement = _SIMPLE_ESCAPES.get(char)
        if replacement is not None:
            parts.append(replacement)
        elif ord(char) < 0x20:
            code = ord(char)
            parts.append("\\u00" + HEX_CHARS[code >> 4] + HEX_CHARS[code & 0xF])
        else:
            parts.append(char)
    return "".join(parts)


def format_double(value: float, flags: int = Flag.PLAIN) -> str:
    """Render a double the way the serializer writes it.

    NaN and the infinities become ``NaN``, ``Infinity`` and ``-Infinity``;
    every other value uses seventeen significant digits.  With
    ``Flag.NOZERO`` trailing zeroes after the decimal point are dropped,
    always keeping at least one digit after it.
    """
    if math.isnan(value):
        text = "NaN"
    elif math.isinf(value):
        text = "Infinity" if value > 0 else "-Infinity"
    else:
        text = "%.17g" % value

    text = text.replace(",", ".", 1)
    dot = text.find(".")
    if dot < 0 or not (flags & Flag.NOZERO):
        return text

    keep = dot + 1
    for pos in range(dot + 1, len(text)):
        if text[pos] != "0":
            keep = pos
    return text[: keep + 1]


def indent(level: int, flags: int) -> str:
    """Return the indentation for ``level`` (two spaces per level when pretty)."""
    if flags & Flag.PRETTY:
        return " " * (level * 2)
    return ""