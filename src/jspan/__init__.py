"""
Recursive descent JSON parser producing an immutable tagged value tree.

``parse`` decodes text into a ``JsonValue``; ``loads`` and ``load`` convert
the result into plain Python objects the way the standard library json
module does. Supports the JSON subset without signs, exponents and escapes
other than ``\\"``.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import IO
from typing import Any

from ._cursor import Cursor
from ._cursor import Position
from ._cursor import match_char
from ._cursor import match_literal
from ._cursor import match_span
from ._cursor import match_whitespace
from ._parsers import ParseResult
from ._parsers import parse_array
from ._parsers import parse_bool
from ._parsers import parse_first
from ._parsers import parse_float
from ._parsers import parse_integer
from ._parsers import parse_null
from ._parsers import parse_object
from ._parsers import parse_string
from ._parsers import parse_value
from ._profiling import HotPathStats
from ._profiling import ProfileContext
from ._profiling import clear_hot_path_stats
from ._profiling import get_hot_path_stats
from ._value import JsonValue
from ._value import ValueKind

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Hook type definitions - hooks can return custom types
ObjectHook = Callable[[dict[str, Any]], Any] | None
ObjectPairsHook = Callable[[list[tuple[str, Any]]], Any] | None
ParseFloatHook = Callable[[str], Any] | None
ParseIntHook = Callable[[str], Any] | None


class JSONDecodeError(ValueError):
    """
    Handles JSON parsing failures with position and context information.

    Error state containing position, line/column numbers and the text that
    could not be parsed.
    """

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")


class NoMatchError(JSONDecodeError):
    """The input did not parse as any value."""

    def __init__(self, cursor: Cursor) -> None:
        self.remainder = cursor.remainder
        super().__init__(
            f'failed to parse "{self.remainder}"', cursor.text, cursor.pos
        )


class TrailingInputError(JSONDecodeError):
    """A value parsed, but non-whitespace input follows it."""

    def __init__(self, cursor: Cursor) -> None:
        self.remainder = cursor.remainder
        super().__init__(
            f'failed to parse entire value, remainder: "{self.remainder}"',
            cursor.text,
            cursor.pos,
        )


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures conversion of parsed values into Python objects.

    Number hooks receive the decimal text of the number. ``object_pairs_hook``
    takes priority over ``object_hook``.
    """

    parse_float: ParseFloatHook = None
    parse_int: ParseIntHook = None
    object_pairs_hook: ObjectPairsHook = None
    object_hook: ObjectHook = None

    def __post_init__(self) -> None:
        for name in ("parse_float", "parse_int"):
            _check_hook(name, getattr(self, name))
        for name in ("object_pairs_hook", "object_hook"):
            _check_hook(name, getattr(self, name))


def _check_hook(name: str, hook: Any) -> None:
    if hook is not None and not callable(hook):
        raise TypeError(f"{name} must be callable")


def parse(s: str) -> JsonValue:
    """
    Parses a complete JSON document into a value tree.

    Surrounding whitespace is ignored. Raises ``NoMatchError`` when no value
    parses and ``TrailingInputError`` when input remains after the value.
    Nesting deeper than the interpreter's recursion limit raises
    ``RecursionError``.
    """
    if not isinstance(s, str):
        raise TypeError(f"the JSON object must be str, not {type(s).__name__}")

    with ProfileContext("parse", len(s)):
        cursor, value = parse_value(Cursor.trimmed(s))

        if value is None:
            logger.debug("no value at offset %d", cursor.pos)
            raise NoMatchError(cursor)

        cursor, _ = match_whitespace(cursor)
        if cursor:
            logger.debug("trailing input at offset %d", cursor.pos)
            raise TrailingInputError(cursor)

        return value


def loads(s: str, **kwargs: Any) -> Any:
    """
    Parses JSON text into plain Python objects.

    Keyword arguments build a ``ParseConfig``.
    """
    config = ParseConfig(**kwargs)
    return parse(s).to_python(config)


def load(fp: IO[str], **kwargs: Any) -> Any:
    """
    Parses JSON from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


__all__ = [
    "Cursor",
    "HotPathStats",
    "JSONDecodeError",
    "JsonValue",
    "NoMatchError",
    "ParseConfig",
    "ParseResult",
    "TrailingInputError",
    "ValueKind",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "loads",
    "match_char",
    "match_literal",
    "match_span",
    "match_whitespace",
    "parse",
    "parse_array",
    "parse_bool",
    "parse_first",
    "parse_float",
    "parse_integer",
    "parse_null",
    "parse_object",
    "parse_string",
    "parse_value",
]
