"""IMF-fixdate codec (RFC 9110 Section 5.6.7, from RFC 1123).

The fixed-length HTTP date: ``Sun, 06 Nov 1994 08:49:37 GMT``. Every
field has a fixed width, the zone is the literal ``GMT``, and a weekday
that disagrees with the date is fatal. This is also the canonical output
of the HTTP and Cookie codecs.

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
from datewire.syntax.tokens import format_month, format_weekday, parse_month, parse_weekday

__all__ = ["format", "parse", "parse_imf_fixdate"]


def parse_imf_fixdate(text: str) -> ParsedDateTime | None:
    """Match and validate an IMF-fixdate.

    Returns:
        ParsedDateTime in UTC, or None when the text does not have the shape

    Raises:
        DateParseError: When the shape matches but a field is invalid or the
            weekday disagrees with the date
    """
    cursor = Cursor(text)
    if (weekday := parse_alpha(cursor, 3, 3)) is None:
        return None
    if (after := weekday.cursor.expect(",")) is None:
        return None
    if (after := parse_whitespace(after)) is None:
        return None
    if (day := parse_digits(after, 2, 2)) is None:
        return None
    if (after := parse_whitespace(day.cursor)) is None:
        return None
    if (month := parse_alpha(after, 3, 3)) is None:
        return None
    if (after := parse_whitespace(month.cursor)) is None:
        return None
    if (year := parse_digits(after, 4, 4)) is None:
        return None
    if (after := parse_whitespace(year.cursor)) is None:
        return None
    if (clock := parse_clock(after, seconds_required=True)) is None:
        return None
    if (after := parse_whitespace(clock.cursor)) is None:
        return None
    if after.rest() != "GMT":
        return None

    y, m, d = int(year.value), parse_month(month.value), int(day.value)
    c = clock.value
    second = c.second if c.second is not None else 0
    validate_date_time(y, m, d, c.hour, c.minute, second)
    validate_weekday(y, m, d, parse_weekday(weekday.value), strict=True, token=weekday.value)
    return ParsedDateTime(y, m, d, c.hour, c.minute, second, 0, TimezoneSource.OBS_NAME)


def parse(text: str) -> TemporalFields:
    """Parse an IMF-fixdate.

    Raises:
        DateParseError: GRAMMAR_MISMATCH, FIELD_OUT_OF_RANGE, WEEKDAY_MISMATCH

    Example:
        >>> parse("Sun, 06 Nov 1994 08:49:37 GMT").day
        6
    """
    parsed = parse_imf_fixdate(text.strip())
    if parsed is None:
        raise DateParseError(ErrorTemplate.grammar_mismatch(text, WireFormat.IMF_FIXDATE))
    return parsed.to_fields()


def format(value: datetime) -> str:  # noqa: A001
    """Render as IMF-fixdate after converting to UTC.

    Raises:
        DateFormatError: FIELD_OUT_OF_RANGE when the UTC instant leaves
            years 1..9999

    Example:
        >>> from datetime import UTC
        >>> format(datetime(1994, 11, 6, 8, 49, 37, tzinfo=UTC))
        'Sun, 06 Nov 1994 08:49:37 GMT'
    """
    value = to_utc(value)
    weekday = format_weekday(day_of_week(value.year, value.month, value.day))
    return (
        f"{weekday}, {value.day:02d} {format_month(value.month)} {value.year:04d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d} GMT"
    )
