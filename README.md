# jsoncobj

A small JSON value model. Values are typed nodes: booleans, integers, doubles,
strings, objects and arrays. `None` stands for JSON null. Each node can be
serialized with plain, spaced or pretty formatting. Accessors convert between
types leniently.

The package has three modules:

- `jsoncobj.kinds`: the `JsonType` enum, the `Flag` formatting flags and the
  text helpers `escape_str`, `format_double` and `indent`.
- `jsoncobj.value`: the node classes and the accessor functions.
- `jsoncobj.iterator`: explicit cursors over the members of an object.

## Installation

```
pip install jsoncobj
```

To run the tests:

```
pip install "jsoncobj[test]"
pytest
```

## Building values

```python
from jsoncobj.kinds import Flag, JsonType
from jsoncobj.value import (
    JsonArray, JsonBoolean, JsonDouble, JsonInt, JsonObject, JsonString,
    get_type, to_json_string,
)

doc = JsonObject()
doc.add("name", JsonString("example"))
doc.add("count", JsonInt(3))
doc.add("ratio", JsonDouble(1.5))
doc.add("enabled", JsonBoolean(True))
doc.add("missing", None)

tags = JsonArray()
tags.append(JsonString("a"))
tags.put(3, JsonString("d"))      # slots 1 and 2 are filled with null
doc.add("tags", tags)

print(to_json_string(doc, Flag.PLAIN))
print(doc.to_json_string(Flag.PRETTY))
assert get_type(doc) is JsonType.OBJECT
```

Object keys keep the order in which they were added. Adding a key that
already exists replaces its value in place. `JsonObject.get(key)` returns
`None` for a missing key, while `JsonObject.lookup(key)` raises `KeyError`.
`JsonObject.delete(key)` removes a member if it is there.

`JsonArray.put` raises `IndexError` for a negative index; `JsonArray.get`
returns `None` for an index out of range. `JsonArray.sort(key)` sorts in
place by a key function.

`JsonInt` holds a signed 64-bit value and raises `OverflowError` for anything
larger. `JsonDouble(value, text)` writes `text` verbatim instead of the
formatted number, which keeps an exact representation of a value.

## Formatting flags

- `Flag.PLAIN`: no extra whitespace.
- `Flag.SPACED`: a little whitespace inside braces and after colons. This is
  the default for `to_json_string`.
- `Flag.PRETTY`: one member per line, indented by two spaces per level.
- `Flag.NOZERO`: drop trailing zeros from doubles and keep one digit after
  the point.

Flags combine with `|`.

Doubles are written with 17 significant digits. NaN and the infinities are
written as `NaN`, `Infinity` and `-Infinity`. Strings escape control
characters, quotes, backslashes and `/`.

## Lenient accessors

`get_boolean`, `get_int`, `get_int64`, `get_double`, `get_string` and
`get_string_len` accept any value, `None` included, and convert it:

- `get_int` clamps to the 32-bit range.
- Strings holding numbers are parsed.
- Anything that cannot be converted gives zero.
- `get_string` on a value that is not a string returns its JSON text, and
  `None` for `None`.

`get_type` and `is_type` report a value's kind; `None` is `JsonType.NULL`.

## Custom serializers

`JsonValue.set_serializer(func, userdata)` replaces how one node is written.
`func` is called as `func(value, out, level, flags)`, where `out` is a text
stream to write to. The `userdata` is kept on the node as `value.userdata`.
Passing `None` as `func` restores the default.

```python
import io

def shout(value, out, level, flags):
    out.write('"' + value.userdata + '"')

node = JsonInt(7)
node.set_serializer(shout, "SEVEN")
assert node.to_json_string() == '"SEVEN"'

buffer = io.StringIO()
node.write(buffer, 0, Flag.PLAIN)
```

## Iterating over objects

Most code can use `JsonObject.items()` or iterate over the object's keys.
For explicit cursors there is the iterator API:

```python
from jsoncobj.iterator import iter_begin, iter_end

it, end = iter_begin(doc), iter_end(doc)
while it != end:
    print(it.peek_name(), it.peek_value())
    it.next()
```

All end iterators compare equal, as does the one from `iter_default()`.
Calling `next`, `peek_name` or `peek_value` at the end raises `IndexError`.
`iter_begin` and `iter_end` raise `TypeError` for anything but a
`JsonObject`.

## What it does not do

The package builds and writes JSON values. It has no parser: it does not read
JSON text into nodes. It also has no file reading or writing helpers and no
command-line tool.