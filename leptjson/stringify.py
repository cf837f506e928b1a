"""Render a JsonValue tree as compact JSON text."""

from __future__ import annotations

from collections.abc import Iterator

from leptjson.value import JsonType, JsonValue

_ESCAPE_TABLE = {code: f"\\u{code:04X}" for code in range(0x20)}
_ESCAPE_TABLE.update(
    {
        ord('"'): '\\"',
        ord("\\"): "\\\\",
        ord("\b"): "\\b",
        ord("\f"): "\\f",
        ord("\n"): "\\n",
        ord("\r"): "\\r",
        ord("\t"): "\\t",
    }
)


def _quote(text: str) -> str:
    return '"' + text.translate(_ESCAPE_TABLE) + '"'


def _emit(value: JsonValue) -> Iterator[str]:
    match value.type:
        case JsonType.NULL:
            yield "null"
        case JsonType.FALSE:
            yield "false"
        case JsonType.TRUE:
            yield "true"
        case JsonType.NUMBER:
            yield format(value.number, ".17g")
        case JsonType.STRING:
            yield _quote(value.string)
        case JsonType.ARRAY:
            yield "["
            for position, element in enumerate(value):
                if position:
                    yield ","
                yield from _emit(element)
            yield "]"
        case JsonType.OBJECT:
            yield "{"
            for position in range(len(value)):
                if position:
                    yield ","
                yield _quote(value.key_at(position))
                yield ":"
                yield from _emit(value.value_at(position))
            yield "}"
        case _:
            raise TypeError(f"cannot stringify value of type {value.type!r}")


def stringify(value: JsonValue) -> str:
    """Return the compact JSON text for ``value``."""
    return "".join(_emit(value))