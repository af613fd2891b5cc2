"""
Cursor over the input text and the lexical matching primitives.

A cursor is a read-only window ``text[pos:end]``. Matching never copies the
input; it returns a cursor with a larger ``pos`` and, for spans, the slice
that was consumed.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

Position: TypeAlias = int
CharPredicate: TypeAlias = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class Cursor:
    """
    Remaining unconsumed portion of an input buffer.

    Every cursor produced from another shares its ``text`` and ``end``, so a
    returned cursor is always a suffix of the one it was derived from.
    """

    text: str
    pos: Position = 0
    end: Position = -1

    def __post_init__(self) -> None:
        if self.end < 0:
            object.__setattr__(self, "end", len(self.text))
        if not 0 <= self.pos <= self.end <= len(self.text):
            raise ValueError(
                f"invalid cursor bounds {self.pos}:{self.end} "
                f"for text of length {len(self.text)}"
            )

    @classmethod
    def trimmed(cls, text: str) -> "Cursor":
        """Returns a cursor over ``text`` without surrounding whitespace."""
        start, end = 0, len(text)
        while start < end and text[start].isspace():
            start += 1
        while end > start and text[end - 1].isspace():
            end -= 1
        return cls(text, start, end)

    def __len__(self) -> int:
        return self.end - self.pos

    def __bool__(self) -> bool:
        return self.pos < self.end

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos, self.end)

    def advance(self, count: int) -> "Cursor":
        """Returns the cursor moved ``count`` characters forward."""
        return Cursor(self.text, min(self.pos + count, self.end), self.end)

    def since(self, start: "Cursor") -> str:
        """Returns the text consumed between ``start`` and this cursor."""
        return self.text[start.pos : self.pos]

    @property
    def remainder(self) -> str:
        """Copy of the unconsumed text, for diagnostics."""
        return self.text[self.pos : self.end]


def match_char(cursor: Cursor, char: str) -> tuple[Cursor, str | None]:
    """Matches a single character at the start of the cursor."""
    if cursor.pos < cursor.end and cursor.text[cursor.pos] == char:
        return cursor.advance(1), char
    return cursor, None


def match_literal(cursor: Cursor, literal: str) -> tuple[Cursor, str | None]:
    """Matches a fixed character sequence at the start of the cursor."""
    if cursor.startswith(literal):
        return cursor.advance(len(literal)), literal
    return cursor, None


def match_span(
    cursor: Cursor, predicate: CharPredicate
) -> tuple[Cursor, str]:
    """
    Consumes the longest leading run of characters satisfying ``predicate``.

    Never fails: an empty span leaves the cursor where it was.
    """
    text = cursor.text
    end = cursor.end
    pos = cursor.pos
    while pos < end and predicate(text[pos]):
        pos += 1

    if pos == cursor.pos:
        return cursor, ""
    return Cursor(text, pos, end), text[cursor.pos : pos]


def match_whitespace(cursor: Cursor) -> tuple[Cursor, str]:
    """Consumes leading whitespace."""
    return match_span(cursor, str.isspace)


def is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_not_quote(char: str) -> bool:
    return char != '"'
