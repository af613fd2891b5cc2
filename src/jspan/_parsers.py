"""
Recursive descent parsers for each JSON value type.

Every parser takes a cursor and returns ``(cursor, value)``. A ``None``
value means the parser did not match, and the returned cursor is then the
one it was given, so callers can try the next alternative without undoing
anything. Composite parsers call back into ``parse_value`` for their
elements.
"""

from collections.abc import Callable
from collections.abc import Iterable
from typing import TypeAlias

from ._cursor import Cursor
from ._cursor import is_ascii_digit
from ._cursor import is_not_quote
from ._cursor import match_char
from ._cursor import match_literal
from ._cursor import match_span
from ._cursor import match_whitespace
from ._profiling import ProfileContext
from ._value import INT64_MAX
from ._value import JsonValue

ParseResult: TypeAlias = tuple[Cursor, JsonValue | None]
Parser: TypeAlias = Callable[[Cursor], ParseResult]

# Digits a signed 64-bit integer can have, ignoring leading zeros
_MAX_INT64_DIGITS = len(str(INT64_MAX))


def parse_null(cursor: Cursor) -> ParseResult:
    new_cursor, literal = match_literal(cursor, "null")
    if literal is None:
        return cursor, None
    return new_cursor, JsonValue.null()


def parse_bool(cursor: Cursor) -> ParseResult:
    new_cursor, literal = match_literal(cursor, "true")
    if literal is not None:
        return new_cursor, JsonValue.boolean(True)

    new_cursor, literal = match_literal(cursor, "false")
    if literal is not None:
        return new_cursor, JsonValue.boolean(False)

    return cursor, None


def parse_integer(cursor: Cursor) -> ParseResult:
    """
    Parses a run of ASCII digits as a signed 64-bit integer.

    Runs that overflow the 64-bit range do not match.
    """
    new_cursor, digits = match_span(cursor, is_ascii_digit)
    if not digits:
        return cursor, None

    significant = digits.lstrip("0") or "0"
    if len(significant) > _MAX_INT64_DIGITS:
        return cursor, None
    value = int(significant)
    if value > INT64_MAX:
        return cursor, None

    return new_cursor, JsonValue.integer(value)


def parse_float(cursor: Cursor) -> ParseResult:
    """
    Parses ``whole.fraction`` where either side of the point may be empty.

    The whole part goes through ``parse_integer`` and shares its range. The
    fraction is scaled by its digit count, so ``1.05`` is ``1 + 5 / 10**2``.
    """
    with ProfileContext("parse_float", len(cursor)):
        new_cursor, whole = parse_integer(cursor)
        whole_digits = new_cursor.since(cursor) if whole is not None else ""

        new_cursor, point = match_char(new_cursor, ".")
        if point is None:
            return cursor, None

        # The fraction is a bare digit run with no 64-bit range limit
        new_cursor, fraction_digits = match_span(new_cursor, is_ascii_digit)

        if not whole_digits and not fraction_digits:
            return cursor, None

        # Correctly rounded whole + fraction / 10**len(fraction_digits)
        value = float(f"{whole_digits or '0'}.{fraction_digits or '0'}")
        return new_cursor, JsonValue.float_(value)


def parse_string(cursor: Cursor) -> ParseResult:
    """
    Parses a double-quoted string.

    A backslash directly before a quote keeps the string open; the
    backslash stays in the content. No other escapes are interpreted.
    """
    with ProfileContext("parse_string", len(cursor)):
        new_cursor, quote = match_char(cursor, '"')
        if quote is None:
            return cursor, None

        content_start = new_cursor
        new_cursor, span = match_span(new_cursor, is_not_quote)

        while span.endswith("\\"):
            new_cursor, quote = match_char(new_cursor, '"')
            if quote is None:
                return cursor, None
            new_cursor, span = match_span(new_cursor, is_not_quote)

        content = new_cursor.since(content_start)

        new_cursor, quote = match_char(new_cursor, '"')
        if quote is None:
            return cursor, None

        return new_cursor, JsonValue.string(content)


def parse_array(cursor: Cursor) -> ParseResult:
    """
    Parses ``[ value, ... ]``.

    An element that does not parse ends the element list; the closing
    bracket must follow, otherwise nothing parsed here is kept.
    """
    with ProfileContext("parse_array", len(cursor)):
        new_cursor, bracket = match_char(cursor, "[")
        if bracket is None:
            return cursor, None

        new_cursor, _ = match_whitespace(new_cursor)

        items: list[JsonValue] = []
        while True:
            new_cursor, value = parse_value(new_cursor)
            if value is None:
                break
            items.append(value)

            new_cursor, _ = match_whitespace(new_cursor)
            new_cursor, comma = match_char(new_cursor, ",")
            if comma is None:
                break
            new_cursor, _ = match_whitespace(new_cursor)

        new_cursor, _ = match_whitespace(new_cursor)
        new_cursor, bracket = match_char(new_cursor, "]")
        if bracket is None:
            return cursor, None

        return new_cursor, JsonValue.array(items)


def parse_object(cursor: Cursor) -> ParseResult:
    """
    Parses ``{ "key": value, ... }``.

    A missing key ends the member list. A key without a colon, a colon
    without a value, or a missing closing brace fails the whole object.
    Later duplicates of a key replace earlier ones.
    """
    with ProfileContext("parse_object", len(cursor)):
        new_cursor, brace = match_char(cursor, "{")
        if brace is None:
            return cursor, None

        new_cursor, _ = match_whitespace(new_cursor)

        fields: dict[str, JsonValue] = {}
        while True:
            new_cursor, key = parse_string(new_cursor)
            if key is None:
                break

            new_cursor, _ = match_whitespace(new_cursor)
            new_cursor, colon = match_char(new_cursor, ":")
            if colon is None:
                return cursor, None

            new_cursor, _ = match_whitespace(new_cursor)
            new_cursor, value = parse_value(new_cursor)
            if value is None:
                return cursor, None

            fields[key.payload] = value

            new_cursor, _ = match_whitespace(new_cursor)
            new_cursor, comma = match_char(new_cursor, ",")
            if comma is None:
                break
            new_cursor, _ = match_whitespace(new_cursor)

        new_cursor, _ = match_whitespace(new_cursor)
        new_cursor, brace = match_char(new_cursor, "}")
        if brace is None:
            return cursor, None

        return new_cursor, JsonValue.object(fields)


def parse_first(cursor: Cursor, parsers: Iterable[Parser]) -> ParseResult:
    """Returns the result of the first parser that matches at ``cursor``."""
    for parse in parsers:
        new_cursor, value = parse(cursor)
        if value is not None:
            return new_cursor, value
    return cursor, None


# Float precedes integer so "3.5" is not read as 3 followed by ".5"
VALUE_PARSERS: tuple[Parser, ...] = (
    parse_null,
    parse_bool,
    parse_float,
    parse_integer,
    parse_string,
    parse_array,
    parse_object,
)


def parse_value(cursor: Cursor) -> ParseResult:
    """Parses any value, trying each value type in priority order."""
    with ProfileContext("parse_value", len(cursor)):
        return parse_first(cursor, VALUE_PARSERS)
