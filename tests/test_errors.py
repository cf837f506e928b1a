import pytest

from leptjson.errors import JsonParseError, ParseErrorCode


@pytest.mark.parametrize(
    "code, value",
    [
        (ParseErrorCode.EXPECT_VALUE, 1),
        (ParseErrorCode.INVALID_VALUE, 2),
        (ParseErrorCode.ROOT_NOT_SINGULAR, 3),
        (ParseErrorCode.NUMBER_TOO_BIG, 4),
        (ParseErrorCode.MISS_QUOTATION_MARK, 5),
        (ParseErrorCode.INVALID_STRING_ESCAPE, 6),
        (ParseErrorCode.INVALID_STRING_CHAR, 7),
        (ParseErrorCode.INVALID_UNICODE_HEX, 8),
        (ParseErrorCode.INVALID_UNICODE_SURROGATE, 9),
        (ParseErrorCode.MISS_COMMA_OR_SQUARE_BRACKET, 10),
        (ParseErrorCode.MISS_KEY, 11),
        (ParseErrorCode.MISS_COLON, 12),
        (ParseErrorCode.MISS_COMMA_OR_CURLY_BRACKET, 13),
    ],
)
def test_code_values_follow_declaration_order(code, value):
    assert ParseErrorCode(value) is code


def test_error_carries_code_and_position():
    error = JsonParseError(ParseErrorCode.MISS_KEY, 3)
    assert error.code is ParseErrorCode.MISS_KEY
    assert error.position == 3


def test_error_is_a_value_error():
    error = JsonParseError(ParseErrorCode.MISS_COLON, 5)
    assert isinstance(error, ValueError)
    assert error.code is ParseErrorCode.MISS_COLON
    assert error.position == 5


def test_error_message_mentions_reason_and_position():
    error = JsonParseError(ParseErrorCode.NUMBER_TOO_BIG, 7)
    message = str(error)
    assert "number too big" in message
    assert "7" in message


def test_error_accepts_plain_integer_code():
    error = JsonParseError(2, 0)
    assert error.code is ParseErrorCode.INVALID_VALUE