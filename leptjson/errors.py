"""Error codes and the exception raised when JSON text cannot be parsed."""

from __future__ import annotations

from enum import IntEnum


class ParseErrorCode(IntEnum):
    """Reasons a JSON text can be rejected by the parser."""

    EXPECT_VALUE = 1
    INVALID_VALUE = 2
    ROOT_NOT_SINGULAR = 3
    NUMBER_TOO_BIG = 4
    MISS_QUOTATION_MARK = 5
    INVALID_STRING_ESCAPE = 6
    INVALID_STRING_CHAR = 7
    INVALID_UNICODE_HEX = 8
    INVALID_UNICODE_SURROGATE = 9
    MISS_COMMA_OR_SQUARE_BRACKET = 10
    MISS_KEY = 11
    MISS_COLON = 12
    MISS_COMMA_OR_CURLY_BRACKET = 13

    @property
    def description(self) -> str:
        return self.name.lower().replace("_", " ")


class JsonParseError(ValueError):
    """Raised when a JSON text is malformed."""

    def __init__(self, code: ParseErrorCode, position: int) -> None:
        self.code = ParseErrorCode(code)
        self.position = position
        super().__init__(f"{self.code.description} at position {position}")