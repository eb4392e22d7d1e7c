"""Positional iteration over the members of a JSON object.

An :class:`ObjectIterator` refers either to one name/value pair of a
:class:`~jsoncobj.value.JsonObject` or to the "end" position beyond the
last pair.  All end iterators compare equal, whatever object they came
from, and so does the default iterator from :func:`iter_default`.
"""

from __future__ import annotations

from typing import Optional

from .kinds import JsonType
from .value import JsonObject, JsonValue, is_type

__all__ = ["ObjectIterator", "iter_begin", "iter_end", "iter_default"]


class ObjectIterator:
    """A position within the members of a JSON object, or the end position."""

    __slots__ = ("_obj", "_keys", "_pos")

    def __init__(
        self,
        obj: Optional[JsonObject] = None,
        keys: tuple[str, ...] = (),
        pos: int = 0,
    ) -> None:
        self._obj = obj
        self._keys = keys
        self._pos = pos

    @property
    def at_end(self) -> bool:
        """True when the iterator refers past the last pair."""
        return self._obj is None or self._pos >= len(self._keys)

    def _require_pair(self) -> str:
        if self.at_end:
            raise IndexError("iterator does not refer to a name/value pair")
        return self._keys[self._pos]

    def next(self) -> None:
        """Advance to the next pair, or to the end position after the last one."""
        self._require_pair()
        self._pos += 1
        if self._pos >= len(self._keys):
            self._obj = None
            self._keys = ()
            self._pos = 0

    def peek_name(self) -> str:
        """Return the name of the referenced pair."""
        return self._require_pair()

    def peek_value(self) -> Optional[JsonValue]:
        """Return the value of the referenced pair; ``None`` stands for null.

        Raises ``KeyError`` if the pair was removed from the object.
        """
        key = self._require_pair()
        assert self._obj is not None
        return self._obj.lookup(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectIterator):
            return NotImplemented
        if self.at_end or other.at_end:
            return self.at_end and other.at_end
        return self._obj is other._obj and self._keys[self._pos] == other._keys[other._pos]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.at_end:
            return "ObjectIterator(<end>)"
        return f"ObjectIterator({self._keys[self._pos]!r})"


def _require_object(obj: object) -> JsonObject:
    if not isinstance(obj, JsonObject) or not is_type(obj, JsonType.OBJECT):
        raise TypeError("iteration requires a JSON object")
    return obj


def iter_begin(obj: JsonObject) -> ObjectIterator:
    """Return an iterator to the first pair of ``obj`` (the end if it is empty)."""
    target = _require_object(obj)
    keys = tuple(target)
    if not keys:
        return ObjectIterator()
    return ObjectIterator(target, keys, 0)


def iter_end(obj: JsonObject) -> ObjectIterator:
    """Return the iterator beyond the last pair of ``obj``."""
    _require_object(obj)
    return ObjectIterator()


def iter_default() -> ObjectIterator:
    """Return an iterator that refers to no pair."""
    return ObjectIterator()