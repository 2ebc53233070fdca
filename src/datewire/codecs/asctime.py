"""C library asctime() date-time codec.

Grammar (RFC 9110 Section 5.6.7 asctime-date): ``Sun Nov  6 08:49:37 1994``.
The day is space-padded rather than zero-padded, so a single-digit day is
preceded by two spaces. There is no zone field; values are UTC. Runs of
whitespace are collapsed before matching, and the weekday is checked
leniently. Leap seconds are not accepted.

Python 3.13+.
"""

from __future__ import annotations

from datetime import datetime

from datewire.core.calendar import day_of_week, validate_date_time, validate_weekday
from datewire.core.fields import ParsedDateTime, TemporalFields
from datewire.diagnostics import DateParseError, ErrorTemplate
from datewire.enums import TimezoneSource, WireFormat
from datewire.runtime.convert import to_utc
from datewire.syntax.cursor import Cursor
from datewire.syntax.primitives import parse_alpha, parse_clock, parse_digits, parse_whitespace
from datewire.syntax.scanner import normalize_whitespace
from datewire.syntax.tokens import format_month, format_weekday, parse_month, parse_weekday

__all__ = ["format", "parse", "parse_asctime"]


def parse_asctime(text: str) -> ParsedDateTime | None:
    """Match and validate an asctime date.

    Returns:
        ParsedDateTime in UTC, or None when the text does not have the shape

    Raises:
        DateParseError: When the shape matches but a field is invalid
    """
    cursor = Cursor(normalize_whitespace(text))
    if (weekday := parse_alpha(cursor, 3, 3)) is None:
        return None
    if (after := parse_whitespace(weekday.cursor)) is None:
        return None
    if (month := parse_alpha(after, 3, 3)) is None:
        return None
    if (after := parse_whitespace(month.cursor)) is None:
        return None
    if (day := parse_digits(after, 1, 2)) is None:
        return None
    if (after := parse_whitespace(day.cursor)) is None:
        return None
    if (clock := parse_clock(after, seconds_required=True)) is None:
        return None
    if (after := parse_whitespace(clock.cursor)) is None:
        return None
    if (year := parse_digits(after, 4, 4)) is None or not year.cursor.is_eof:
        return None

    y, m, d = int(year.value), parse_month(month.value), int(day.value)
    c = clock.value
    second = c.second if c.second is not None else 0
    validate_date_time(y, m, d, c.hour, c.minute, second)
    validate_weekday(y, m, d, parse_weekday(weekday.value), strict=False, token=weekday.value)
    return ParsedDateTime(y, m, d, c.hour, c.minute, second, 0, TimezoneSource.OBS_NAME)


def parse(text: str) -> TemporalFields:
    """Parse an asctime date as UTC.

    Raises:
        DateParseError: GRAMMAR_MISMATCH, FIELD_OUT_OF_RANGE

    Example:
        >>> parse("Sun Nov  6 08:49:37 1994").day
        6
    """
    parsed = parse_asctime(text)
    if parsed is None:
        raise DateParseError(ErrorTemplate.grammar_mismatch(text, WireFormat.ASCTIME))
    return parsed.to_fields()


def format(value: datetime) -> str:  # noqa: A001
    """Render as asctime after converting to UTC.

    Example:
        >>> from datetime import UTC
        >>> format(datetime(1994, 11, 6, 8, 49, 37, tzinfo=UTC))
        'Sun Nov  6 08:49:37 1994'
    """
    value = to_utc(value)
    weekday = format_weekday(day_of_week(value.year, value.month, value.day))
    return (
        f"{weekday} {format_month(value.month)} {value.day:2d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d} {value.year:04d}"
    )
