"""
Scalar parser tests for null, boolean, integer and float values.
"""

import pytest

from jspan import Cursor
from jspan import JsonValue
from jspan import ValueKind
from jspan import parse_bool
from jspan import parse_float
from jspan import parse_integer
from jspan import parse_null
from jspan import parse_value

INT64_MAX = 2**63 - 1


def test_parse_null() -> None:
    rest, value = parse_null(Cursor("null,"))
    assert value == JsonValue.null()
    assert rest.remainder == ","


@pytest.mark.parametrize(
    "text,expected,remainder",
    [
        ("true", True, ""),
        ("false]", False, "]"),
        ("truest", True, "st"),
    ],
)
def test_parse_bool(text: str, expected: bool, remainder: str) -> None:
    rest, value = parse_bool(Cursor(text))
    assert value is not None
    assert value.as_bool() is expected
    assert rest.remainder == remainder


@pytest.mark.parametrize(
    "text,expected,remainder",
    [
        ("0", 0, ""),
        ("42", 42, ""),
        ("007", 7, ""),
        ("234 }", 234, " }"),
        (str(INT64_MAX), INT64_MAX, ""),
        ("0" * 19 + "1", 1, ""),
        ("0" * 30 + str(INT64_MAX), INT64_MAX, ""),
        ("0" * 5000, 0, ""),
    ],
)
def test_parse_integer(text: str, expected: int, remainder: str) -> None:
    rest, value = parse_integer(Cursor(text))
    assert value == JsonValue.integer(expected)
    assert rest.remainder == remainder


@pytest.mark.parametrize(
    "text",
    [
        str(INT64_MAX + 1),
        "99999999999999999999",
        "1" * 5000,
        "000" + str(INT64_MAX + 1),
    ],
)
def test_parse_integer_overflow_fails(text: str) -> None:
    """
    Validates integers outside the 64-bit range fail without consuming.
    """
    cursor = Cursor(text)
    rest, value = parse_integer(cursor)
    assert value is None
    assert rest == cursor


@pytest.mark.parametrize("text", ["１", "١", "²"])
def test_parse_integer_rejects_non_ascii_digits(text: str) -> None:
    cursor = Cursor(text)
    assert parse_integer(cursor) == (cursor, None)


@pytest.mark.parametrize(
    "text,expected,remainder",
    [
        ("3.5", 3.5, ""),
        ("3.14", 3.14, ""),
        ("1.05", 1.05, ""),
        ("7.", 7.0, ""),
        (".25", 0.25, ""),
        ("0.0", 0.0, ""),
        ("1.5.5", 1.5, ".5"),
        ("2.5 ]", 2.5, " ]"),
        ("0.12345678901234567890", 0.12345678901234567890, ""),
        ("0" * 20 + "1.5", 1.5, ""),
        ("0" * 19 + "1." + "5" * 30, float("1." + "5" * 30), ""),
    ],
)
def test_parse_float(text: str, expected: float, remainder: str) -> None:
    rest, value = parse_float(Cursor(text))
    assert value is not None
    assert value.kind is ValueKind.FLOAT
    assert value.as_float() == expected
    assert rest.remainder == remainder


def test_parse_float_digit_fidelity() -> None:
    """
    Validates the fraction is scaled by its digit count.
    """
    _, value = parse_float(Cursor("1324.34576"))
    assert value is not None
    assert repr(value.as_float()) == "1324.34576"


@pytest.mark.parametrize("text", [".", "42", "", "abc", ".x", "-1.5"])
def test_parse_float_failure_keeps_cursor(text: str) -> None:
    cursor = Cursor(text)
    rest, value = parse_float(cursor)
    assert value is None
    assert rest == cursor


def test_parse_float_whole_overflow_fails() -> None:
    cursor = Cursor("99999999999999999999.5")
    assert parse_float(cursor) == (cursor, None)


@pytest.mark.parametrize(
    "parser,text",
    [
        (parse_null, "nul"),
        (parse_null, "NULL"),
        (parse_bool, "tru"),
        (parse_bool, "fals"),
        (parse_bool, "True"),
        (parse_integer, "x1"),
        (parse_integer, " 1"),
    ],
)
def test_scalar_failure_keeps_cursor(parser, text: str) -> None:
    cursor = Cursor(text)
    rest, value = parser(cursor)
    assert value is None
    assert rest == cursor


def test_float_takes_precedence_over_integer() -> None:
    rest, value = parse_value(Cursor("3.5"))
    assert value == JsonValue.float_(3.5)
    assert not rest


def test_integer_after_float_falls_through() -> None:
    rest, value = parse_value(Cursor("35"))
    assert value == JsonValue.integer(35)
    assert not rest
