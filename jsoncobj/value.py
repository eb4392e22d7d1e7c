"""In-memory JSON values and their serialization.

A JSON null is represented by ``None``; every other value is an instance
of one of the :class:`JsonValue` subclasses.
"""

from __future__ import annotations

import io
import math
import re
from typing import Any, Callable, Iterator, Optional, TextIO

from .kinds import Flag, JsonType, escape_str, format_double, indent

__all__ = [
    "JsonValue",
    "JsonBoolean",
    "JsonInt",
    "JsonDouble",
    "JsonString",
    "JsonObject",
    "JsonArray",
    "Serializer",
    "get_type",
    "is_type",
    "to_json_string",
    "get_boolean",
    "get_int",
    "get_int64",
    "get_double",
    "get_string",
    "get_string_len",
]

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Serializer = Callable[["JsonValue", TextIO, int, int], None]

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_DECIMAL = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_HEX = re.compile(
    r"\s*[+-]?0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?",
    re.IGNORECASE,
)
_INF_LITERAL = re.compile(r"\s*[+-]?inf", re.IGNORECASE)


def _write_child(child: Optional["JsonValue"], out: TextIO, level: int, flags: int) -> None:
    if child is None:
        out.write("null")
    else:
        child.write(out, level, flags)


class JsonValue:
    """Base class of all non-null JSON values."""

    json_type: JsonType = JsonType.NULL

    def __init__(self) -> None:
        self._serializer: Optional[Serializer] = None
        self.userdata: Any = None

    def _write_default(self, out: TextIO, level: int, flags: int) -> None:
        raise NotImplementedError

    def write(self, out: TextIO, level: int = 0, flags: int = Flag.SPACED) -> None:
        """Write the JSON text of this value to the text stream ``out``."""
        if self._serializer is not None:
            self._serializer(self, out, level, flags)
        else:
            self._write_default(out, level, flags)

    def to_json_string(self, flags: int = Flag.SPACED) -> str:
        """Return the JSON text of this value."""
        out = io.StringIO()
        self.write(out, 0, flags)
        return out.getvalue()

    def set_serializer(self, func: Optional[Serializer] = None, userdata: Any = None) -> None:
        """Install a custom serializer, or restore the default one with ``None``.

        The serializer is called as ``func(value, out, level, flags)``; the
        ``userdata`` is kept on the value as ``value.userdata``.
        """
        self.userdata = None
        if func is None:
            self._serializer = None
            return
        self._serializer = func
        self.userdata = userdata

    def __str__(self) -> str:
        return self.to_json_string()


class JsonBoolean(JsonValue):
    """A JSON ``true`` or ``false``."""

    json_type = JsonType.BOOLEAN

    def __init__(self, value: bool) -> None:
        super().__init__()
        self.value = bool(value)

    def _write_default(self, out: TextIO, level: int, flags: int) -> None:
        out.write("true" if self.value else "false")

    def __repr__(self) -> str:
        return f"JsonBoolean({self.value!r})"


class JsonInt(JsonValue):
    """A JSON integer, held as a signed 64-bit value."""

    json_type = JsonType.INT

    def __init__(self, value: int) -> None:
        super().__init__()
        value = int(value)
        if not INT64_MIN <= value <= INT64_MAX:
            raise OverflowError(f"integer {value} does not fit in 64 bits")
        self.value = value

    def _write_default(self, out: TextIO, level: int, flags: int) -> None:
        out.write(str(self.value))

    def __repr__(self) -> str:
        return f"JsonInt({self.value!r})"


def _write_userdata(value: JsonValue, out: TextIO, level: int, flags: int) -> None:
    out.write(str(value.userdata))


class JsonDouble(JsonValue):
    """A JSON floating point number.

    When ``text`` is given it is written verbatim instead of the formatted
    number, keeping an exact representation of a parsed value.
    """

    json_type = JsonType.DOUBLE

    def __init__(self, value: float, text: Optional[str] = None) -> None:
        super().__init__()
        self.value = float(value)
        if text is not None:
            self.set_serializer(_write_userdata, str(text))

    def _write_default(self, out: TextIO, level: int, flags: int) -> None:
        out.write(format_double(self.value, flags))

    def __repr__(self) -> str:
        return f"JsonDouble({self.value!r})"


class JsonString(JsonValue):
    """A JSON string."""

    json_type = JsonType.STRING

    def __init__(self, text: str) -> None:
        super().__init__()
        self.value = str(text)

    def _write_default(self, out: TextIO, level: int, flags: int) -> None:
        out.write('"')
        out.write(escape_str(self.value))
        out.write('"')

    def __len__(self) -> int:
        return len(self.value)

    def __repr__(self) -> str:
        return f"JsonString({self.value!r})"


class JsonObject(JsonValue):
    """A JSON object: named members kept in insertion order."""

    json_type = JsonType.OBJECT

    def __init__(self) -> None:
        super().__init__()
        self._members: dict[str, Optional[JsonValue]] = {}

    def add(self, key: str, value: Optional[JsonValue]) -> None:
        """Set member ``key``; an existing member keeps its position."""
        self._members[key] = value

    def get(self, key: str) -> Optional[JsonValue]:
        """Return the member ``key``, or ``None`` when it is missing or null."""
        return self._members.get(key)

    def lookup(self, key: str) -> Optional[JsonValue]:
        """Return the member ``key``; raise ``KeyError`` when it is missing."""
        return self._members[key]

    def delete(self, key: str) -> None:
        """Remove the member ``key`` if present."""
        self._members.pop(key, None)

    def items(self) -> Iterator[tuple[str, Optional[JsonValue]]]:
        """Yield the ``(key, value)`` pairs in order."""
        yield from list(self._members.items())

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, key: object) -> bool:
        return key in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._members))

    def _write_default(self, out: TextIO, level: int, flags: int) -> None:
        out.write("{")
        if flags & Flag.PRETTY:
            out.write("\n")
        had_children = False
        for key, child in self._members.items():
            if had_children:
                out.write(",")
                if flags & Flag.PRETTY:
                    out.write("\n")
            had_children = True
            if flags & Flag.SPACED:
                out.write(" ")
            out.write(indent(level + 1, flags))
            out.write('"')
            out.write(escape_str(key))
            out.write('": ' if flags & Flag.SPACED else '":')
            _write_child(child, out, level + 1, flags)
        if flags & Flag.PRETTY:
            if had_children:
                out.write("\n")
            out.write(indent(level, flags))
        out.write(" }" if flags & Flag.SPACED else "}")

    def __repr__(self) -> str:
        return f"JsonObject({self._members!r})"


class JsonArray(JsonValue):
    """A JSON array; its slots may hold ``None`` for null."""

    json_type = JsonType.ARRAY

    def __init__(self) -> None:
        super().__init__()
        self._items: list[Optional[JsonValue]] = []

    def append(self, value: Optional[JsonValue]) -> None:
        """Add ``value`` at the end."""
        self._items.append(value)

    def put(self, index: int, value: Optional[JsonValue]) -> None:
        """Set slot ``index``, growing the array with nulls as needed."""
        if index < 0:
            raise IndexError(f"negative array index {index}")
        if index >= len(self._items):
            self._items.extend([None] * (index + 1 - len(self._items)))
        self._items[index] = value

    def get(self, index: int) -> Optional[JsonValue]:
        """Return slot ``index``, or ``None`` when it is out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def sort(self, key: Callable[[Optional[JsonValue]], Any]) -> None:
        """Sort the elements in place by ``key``."""
        self._items.sort(key=key)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Optional[JsonValue]]:
        return iter(list(self._items))

    def _write_default(self, out: TextIO, level: int, flags: int) -> None:
        out.write("[")
        if flags & Flag.PRETTY:
            out.write("\n")
        had_children = False
        for child in self._items:
            if had_children:
                out.write(",")
                if flags & Flag.PRETTY:
                    out.write("\n")
            had_children = True
            if flags & Flag.SPACED:
                out.write(" ")
            out.write(indent(level + 1, flags))
            _write_child(child, out, level + 1, flags)
        if flags & Flag.PRETTY:
            if had_children:
                out.write("\n")
            out.write(indent(level, flags))
        out.write(" ]" if flags & Flag.SPACED else "]")

    def __repr__(self) -> str:
        return f"JsonArray({self._items!r})"


def get_type(value: Optional[JsonValue]) -> JsonType:
    """Return the kind of ``value``; ``None`` is ``JsonType.NULL``."""
    if value is None:
        return JsonType.NULL
    return value.json_type


def is_type(value: Optional[JsonValue], json_type: JsonType) -> bool:
    """Tell whether ``value`` is of kind ``json_type``."""
    return get_type(value) == json_type


def to_json_string(value: Optional[JsonValue], flags: int = Flag.SPACED) -> str:
    """Return the JSON text of ``value``; ``None`` gives ``null``."""
    if value is None:
        return "null"
    return value.to_json_string(flags)


def _parse_int64(text: str) -> Optional[int]:
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    return max(INT64_MIN, min(INT64_MAX, int(match.group(1))))


def _truncate(number: float, low: int, high: int) -> int:
    if math.isnan(number):
        return 0
    if math.isinf(number):
        return high if number > 0 else low
    return max(low, min(high, int(number)))


def get_boolean(value: Optional[JsonValue]) -> bool:
    """Coerce ``value`` to a boolean."""
    if isinstance(value, JsonBoolean):
        return value.value
    if isinstance(value, (JsonInt, JsonDouble)):
        return value.value != 0
    if isinstance(value, JsonString):
        return len(value.value) != 0
    return False


def get_int(value: Optional[JsonValue]) -> int:
    """Coerce ``value`` to a 32-bit integer, clamping out-of-range values."""
    if isinstance(value, JsonString):
        parsed = _parse_int64(value.value)
        if parsed is None:
            return 0
        return max(INT32_MIN, min(INT32_MAX, parsed))
    if isinstance(value, JsonInt):
        return max(INT32_MIN, min(INT32_MAX, value.value))
    if isinstance(value, JsonDouble):
        return _truncate(value.value, INT32_MIN, INT32_MAX)
    if isinstance(value, JsonBoolean):
        return int(value.value)
    return 0


def get_int64(value: Optional[JsonValue]) -> int:
    """Coerce ``value`` to a 64-bit integer."""
    if isinstance(value, JsonInt):
        return value.value
    if isinstance(value, JsonDouble):
        return _truncate(value.value, INT64_MIN, INT64_MAX)
    if isinstance(value, JsonBoolean):
        return int(value.value)
    if isinstance(value, JsonString):
        parsed = _parse_int64(value.value)
        return 0 if parsed is None else parsed
    return 0


def _parse_double(text: str) -> float:
    if _HEX.fullmatch(text):
        stripped = text.strip()
        try:
            return float.fromhex(stripped)
        except OverflowError:
            return 0.0
    if not _DECIMAL.fullmatch(text):
        return 0.0
    number = float(text.strip())
    if math.isinf(number) and not _INF_LITERAL.match(text):
        return 0.0
    return number


def get_double(value: Optional[JsonValue]) -> float:
    """Coerce ``value`` to a float; unparsable or overflowing strings give 0.0."""
    if isinstance(value, JsonDouble):
        return value.value
    if isinstance(value, JsonInt):
        return float(value.value)
    if isinstance(value, JsonBoolean):
        return float(value.value)
    if isinstance(value, JsonString):
        return _parse_double(value.value)
    return 0.0


def get_string(value: Optional[JsonValue]) -> Optional[str]:
    """Return the text of a string, or the JSON text of any other value."""
    if value is None:
        return None
    if isinstance(value, JsonString):
        return value.value
    return value.to_json_string(Flag.SPACED)


def get_string_len(value: Optional[JsonValue]) -> int:
    """Return the length of a string value, 0 for anything else."""
    if isinstance(value, JsonString):
        return len(value.value)
    return 0