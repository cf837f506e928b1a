# leptjson

A small, strict JSON parser and generator. A parsed document becomes a
`JsonValue` tree. You can inspect the tree, edit it, compare it, copy it and
write it back out as compact JSON text.

## Installation

```
pip install .
```

## Parsing

`leptjson.parser.parse` accepts a `str`. It also accepts `bytes`, which it
decodes as UTF-8. It returns a `JsonValue`.

```python
from leptjson.parser import parse
from leptjson.value import JsonType

doc = parse('{"name": "leptjson", "tags": [1, 2, 3], "ok": true}')
assert doc.type is JsonType.OBJECT
assert doc.find("name").string == "leptjson"
assert doc["ok"].boolean is True

tags = doc.find("tags")
assert len(tags) == 3
assert tags[0].number == 1.0
```

The parser is strict:

- Leading `+` signs are rejected.
- Leading zeros are rejected.
- Bare `.5` and `1.` are rejected.
- `inf` and `nan` are rejected.
- Trailing commas are rejected.
- Unescaped control characters in strings are rejected.
- Lone or malformed surrogate escapes are rejected.
- Anything after the single root value is rejected.

Numbers that overflow a double are rejected. Numbers that underflow become `0.0`.

Invalid input raises `leptjson.errors.JsonParseError`, a subclass of
`ValueError`. Its `code` attribute is a `ParseErrorCode`, and its `position`
attribute is the offset in the input where the problem was found. The codes are:

- `EXPECT_VALUE`
- `INVALID_VALUE`
- `ROOT_NOT_SINGULAR`
- `NUMBER_TOO_BIG`
- `MISS_QUOTATION_MARK`
- `INVALID_STRING_ESCAPE`
- `INVALID_STRING_CHAR`
- `INVALID_UNICODE_HEX`
- `INVALID_UNICODE_SURROGATE`
- `MISS_COMMA_OR_SQUARE_BRACKET`
- `MISS_KEY`
- `MISS_COLON`
- `MISS_COMMA_OR_CURLY_BRACKET`

```python
from leptjson.errors import JsonParseError, ParseErrorCode

try:
    parse("[1,]")
except JsonParseError as err:
    assert err.code is ParseErrorCode.INVALID_VALUE
```

## The value model

A new `JsonValue()` is null. Its kind is given by the `type` property, which
returns a `JsonType`: `NULL`, `FALSE`, `TRUE`, `NUMBER`, `STRING`, `ARRAY` or
`OBJECT`.

Scalars are read and written through properties:

- `boolean`
- `number`, which is stored as a `float`
- `string`

Assigning to one of these changes the value's kind. Reading the wrong kind
raises `TypeError`. `set_null()` makes the value null again.

```python
from leptjson.value import JsonValue

v = JsonValue()
v.number = 1234.5
v.string = "Hello"
v.boolean = False
v.set_null()
```

### Arrays

Each array method has the following effect:

- `set_array(capacity=0)` makes the value an empty array.
- `push_back()` appends a null element and returns it.
- `insert(index)` inserts a null element and returns it.
- `pop_back()` removes the last element.
- `erase(index, count=1)` removes a run of elements.
- `clear_array()` removes all elements.
- `len(v)` gives the number of elements, and `v[i]` gives one element.

Indices out of range raise `IndexError`.

Arrays also keep a capacity count:

- `array_capacity` reports it.
- Appending to a full array doubles it, or sets it to 1 if it was 0.
- `reserve_array(n)` raises it to at least `n`.
- `shrink_array()` lowers it to the current length.
- Clearing leaves it unchanged.

```python
arr = JsonValue()
arr.set_array()
arr.push_back().number = 1.5
arr.push_back().string = "two"
arr.insert(0).boolean = True
arr.erase(2, 1)
assert len(arr) == 2
```

### Objects

Members are kept in insertion order. Each object method has the following effect:

- `set_object(capacity=0)` makes the value an empty object.
- `set_member(key)` returns the value stored under `key`, adding a null member first if the key is absent.
- `find_index(key)` returns the member's position, or `None` if the key is absent.
- `find(key)` returns the member's value, or `None` if the key is absent.
- `v["key"]` returns the member's value, or raises `KeyError` if the key is absent.
- `key_at(i)` and `value_at(i)` read a member by position.
- `remove_member(i)` removes the member at position `i`.
- `clear_object()` removes all members.

Capacity works as it does for arrays, through `object_capacity`,
`reserve_object(n)` and `shrink_object()`.

```python
obj = JsonValue()
obj.set_object()
obj.set_member("items").move_from(arr)   # arr is now null
obj.remove_member(obj.find_index("items"))
assert len(obj) == 0
```

### Whole-value operations

- `==` compares values deeply. Objects compare equal regardless of member order.
- `copy()` returns a deep copy.
- `move_from(other)` takes over `other`'s contents and leaves `other` null.
- `swap(other)` exchanges the contents of two values.

## Writing JSON

`leptjson.stringify.stringify` renders a value as compact JSON text with no
whitespace.

- Numbers are written with 17 significant digits (`%.17g` style), so every double survives a parse/stringify round trip.
- In strings, `"` and `\` are escaped, and so are the control characters `\b \f \n \r \t`.
- Other control characters are written as `\u00XX`.
- Non-ASCII text is written as is.

```python
from leptjson.stringify import stringify

assert stringify(parse('[ null , false , 1.5 , "a\\nb" ]')) == '[null,false,1.5,"a\\nb"]'
```

## What it does not do

`leptjson` is a library only:

- It has no command-line tool.
- It has no pretty-printing or indentation options.
- It has no streaming or incremental parsing.
- It does not convert to or from plain Python `dict` and `list` objects.

Reading and writing files is left to the caller.