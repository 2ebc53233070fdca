"""Primitive sub-parsers shared by the wire-format grammars.

Each grammar is written as an explicit sequence of these small, named
sub-parsers instead of a single regular expression, so no extraction code
depends on capture-group positions.

All sub-parsers take a Cursor and return ParseResult | None (or Cursor |
None for parsers with no value). None means the input does not match at
that position; the calling grammar decides whether that is fatal.

Character classes are ASCII-only: str.isdigit() would also accept
superscripts and non-Latin digits, which no wire format allows.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from .cursor import WHITESPACE, Cursor, ParseResult

__all__ = [
    "Clock",
    "is_ascii_alpha",
    "is_ascii_digit",
    "parse_alpha",
    "parse_clock",
    "parse_digits",
    "parse_non_space",
    "parse_whitespace",
]


def is_ascii_digit(ch: str) -> bool:
    """Return True for 0-9 only."""
    return "0" <= ch <= "9"


def is_ascii_alpha(ch: str) -> bool:
    """Return True for A-Z and a-z only."""
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


@dataclass(frozen=True, slots=True)
class Clock:
    """Wall-clock time as written on the wire (second may be absent)."""

    hour: int
    minute: int
    second: int | None


def parse_digits(
    cursor: Cursor, min_len: int = 1, max_len: int | None = None
) -> ParseResult[str] | None:
    """Parse a greedy run of ASCII digits.

    Args:
        cursor: Current position
        min_len: Minimum run length
        max_len: Maximum run length, or None for unbounded

    Returns:
        ParseResult with the digit string, or None if fewer than min_len

    Example:
        >>> parse_digits(Cursor("1994 "), 2, 4).value
        '1994'
        >>> parse_digits(Cursor("7"), 2, 4) is None
        True
    """
    count = cursor.take_while(is_ascii_digit, max_len)
    if count < min_len:
        return None
    return ParseResult(cursor.slice_ahead(count), cursor.advance(count))


def parse_alpha(
    cursor: Cursor, min_len: int = 1, max_len: int | None = None
) -> ParseResult[str] | None:
    """Parse a greedy run of ASCII letters.

    A run longer than max_len does not match (the whole word must fit), so
    "Sunday" is not accepted where a three-letter name is required.
    """
    count = cursor.take_while(is_ascii_alpha)
    if count < min_len or (max_len is not None and count > max_len):
        return None
    return ParseResult(cursor.slice_ahead(count), cursor.advance(count))


def parse_whitespace(cursor: Cursor, *, required: bool = True) -> Cursor | None:
    """Skip a run of whitespace.

    Args:
        cursor: Current position
        required: Fail when no whitespace is present

    Returns:
        Cursor after the run, or None when required and absent
    """
    after = cursor.skip_whitespace()
    if required and after.pos == cursor.pos:
        return None
    return after


def parse_non_space(cursor: Cursor) -> ParseResult[str] | None:
    """Parse a non-empty run of non-whitespace characters."""
    count = cursor.take_while(lambda ch: ch not in WHITESPACE)
    if count == 0:
        return None
    return ParseResult(cursor.slice_ahead(count), cursor.advance(count))


def parse_clock(cursor: Cursor, *, seconds_required: bool) -> ParseResult[Clock] | None:
    """Parse ``HH:MM[:SS]`` with exactly two digits per field.

    Range checks are left to the calendar validator so the diagnostic can
    name the offending field.

    Args:
        cursor: Current position
        seconds_required: Reject ``HH:MM`` without seconds

    Example:
        >>> parse_clock(Cursor("08:49:37"), seconds_required=True).value
        Clock(hour=8, minute=49, second=37)
    """
    hour = parse_digits(cursor, 2, 2)
    if hour is None or (after_colon := hour.cursor.expect(":")) is None:
        return None
    minute = parse_digits(after_colon, 2, 2)
    if minute is None:
        return None
    cursor = minute.cursor
    second: int | None = None
    if (after_colon := cursor.expect(":")) is not None:
        sec = parse_digits(after_colon, 2, 2)
        if sec is None:
            return None
        second = int(sec.value)
        cursor = sec.cursor
    elif seconds_required:
        return None
    return ParseResult(Clock(int(hour.value), int(minute.value), second), cursor)
