"""Turn JSON text into a tree of JsonValue objects."""

from __future__ import annotations

import math

from leptjson.errors import JsonParseError, ParseErrorCode
from leptjson.value import JsonValue

_WHITESPACE = frozenset(" \t\n\r")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_digit_1_to_9(ch: str) -> bool:
    return "1" <= ch <= "9"


class _Parser:
    """A recursive-descent parser over one JSON text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def _fail(self, code: ParseErrorCode, position: int | None = None) -> None:
        raise JsonParseError(code, self.pos if position is None else position)

    def skip_whitespace(self) -> None:
        while self._peek() in _WHITESPACE:
            self.pos += 1

    def parse_document(self) -> JsonValue:
        self.skip_whitespace()
        value = self.parse_value()
        self.skip_whitespace()
        if self.pos < len(self.text):
            self._fail(ParseErrorCode.ROOT_NOT_SINGULAR)
        return value

    def parse_value(self) -> JsonValue:
        ch = self._peek()
        if ch == "":
            self._fail(ParseErrorCode.EXPECT_VALUE)
        if ch == "t":
            return self._parse_literal("true", lambda v: setattr(v, "boolean", True))
        if ch == "f":
            return self._parse_literal("false", lambda v: setattr(v, "boolean", False))
        if ch == "n":
            return self._parse_literal("null", JsonValue.set_null)
        if ch == '"':
            value = JsonValue()
            value.string = self._parse_string_raw()
            return value
        if ch == "[":
            return self._parse_array()
        if ch == "{":
            return self._parse_object()
        return self._parse_number()

    def _parse_literal(self, literal: str, assign) -> JsonValue:
        if not self.text.startswith(literal, self.pos):
            self._fail(ParseErrorCode.INVALID_VALUE)
        self.pos += len(literal)
        value = JsonValue()
        assign(value)
        return value

    def _parse_number(self) -> JsonValue:
        start = self.pos
        if self._peek() == "-":
            self.pos += 1
        if self._peek() == "0":
            self.pos += 1
        else:
            if not _is_digit_1_to_9(self._peek()):
                self._fail(ParseErrorCode.INVALID_VALUE, start)
            self._skip_digits()
        if self._peek() == ".":
            self.pos += 1
            if not _is_digit(self._peek()):
                self._fail(ParseErrorCode.INVALID_VALUE, start)
            self._skip_digits()
        if self._peek() in ("e", "E"):
            self.pos += 1
            if self._peek() in ("+", "-"):
                self.pos += 1
            if not _is_digit(self._peek()):
                self._fail(ParseErrorCode.INVALID_VALUE, start)
            self._skip_digits()
        number = float(self.text[start:self.pos])
        if math.isinf(number):
            self._fail(ParseErrorCode.NUMBER_TOO_BIG, start)
        value = JsonValue()
        value.number = number
        return value

    def _skip_digits(self) -> None:
        while _is_digit(self._peek()):
            self.pos += 1

    def _parse_hex4(self) -> int:
        digits = self.text[self.pos:self.pos + 4]
        if len(digits) < 4 or not all(c in _HEX_DIGITS for c in digits):
            self._fail(ParseErrorCode.INVALID_UNICODE_HEX)
        self.pos += 4
        return int(digits, 16)

    def _parse_unicode_escape(self) -> str:
        code = self._parse_hex4()
        if 0xD800 <= code <= 0xDBFF:
            if self.text[self.pos:self.pos + 2] != "\\u":
                self._fail(ParseErrorCode.INVALID_UNICODE_SURROGATE)
            self.pos += 2
            low = self._parse_hex4()
            if not 0xDC00 <= low <= 0xDFFF:
                self._fail(ParseErrorCode.INVALID_UNICODE_SURROGATE)
            code = (((code - 0xD800) << 10) | (low - 0xDC00)) + 0x10000
        return chr(code)

    def _parse_string_raw(self) -> str:
        self.pos += 1  # opening quotation mark
        pieces: list[str] = []
        while True:
            ch = self._peek()
            if ch == "":
                self._fail(ParseErrorCode.MISS_QUOTATION_MARK)
            if ch == '"':
                self.pos += 1
                return "".join(pieces)
            if ch == "\\":
                self.pos += 1
                escape = self._peek()
                if escape and escape in _SIMPLE_ESCAPES:
                    self.pos += 1
                    pieces.append(_SIMPLE_ESCAPES[escape])
                elif escape == "u":
                    self.pos += 1
                    pieces.append(self._parse_unicode_escape())
                else:
                    self._fail(ParseErrorCode.INVALID_STRING_ESCAPE)
                continue
            if ord(ch) < 0x20:
                self._fail(ParseErrorCode.INVALID_STRING_CHAR)
            pieces.append(ch)
            self.pos += 1

    def _parse_array(self) -> JsonValue:
        self.pos += 1  # '['
        self.skip_whitespace()
        elements: list[JsonValue] = []
        if self._peek() == "]":
            self.pos += 1
        else:
            while True:
                elements.append(self.parse_value())
                self.skip_whitespace()
                ch = self._peek()
                if ch == ",":
                    self.pos += 1
                    self.skip_whitespace()
                elif ch == "]":
                    self.pos += 1
                    break
                else:
                    self._fail(ParseErrorCode.MISS_COMMA_OR_SQUARE_BRACKET)
        result = JsonValue()
        result.set_array(len(elements))
        for element in elements:
            result.push_back().move_from(element)
        return result

    def _parse_object(self) -> JsonValue:
        self.pos += 1  # '{'
        self.skip_whitespace()
        members: list[tuple[str, JsonValue]] = []
        if self._peek() == "}":
            self.pos += 1
        else:
            while True:
                if self._peek() != '"':
                    self._fail(ParseErrorCode.MISS_KEY)
                key = self._parse_string_raw()
                self.skip_whitespace()
                if self._peek() != ":":
                    self._fail(ParseErrorCode.MISS_COLON)
                self.pos += 1
                self.skip_whitespace()
                members.append((key, self.parse_value()))
                self.skip_whitespace()
                ch = self._peek()
                if ch == ",":
                    self.pos += 1
                    self.skip_whitespace()
                elif ch == "}":
                    self.pos += 1
                    break
                else:
                    self._fail(ParseErrorCode.MISS_COMMA_OR_CURLY_BRACKET)
        result = JsonValue()
        result.set_object(len(members))
        for key, member_value in members:
            result.set_member(key).move_from(member_value)
        return result


def parse(json: str | bytes) -> JsonValue:
    """Parse a JSON text and return its value.

    Raises JsonParseError when the text is not a single valid JSON value.
    """
    if isinstance(json, (bytes, bytearray)):
        json = bytes(json).decode("utf-8")
    return _Parser(json).parse_document()