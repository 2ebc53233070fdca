"""RFC 850 (Usenet, obsoleted by RFC 1036) date-time codec.

Grammar: ``Weekday, DD-Mon-YY HH:MM:SS ZONE``, for example
``Sunday, 06-Nov-94 08:49:37 GMT``. The weekday is a full name (an
abbreviation is tolerated) and is checked leniently. Two-digit years use
the obs-year window: 00-49 -> 20xx, 50-99 -> 19xx.

HTTP (RFC 9110 Section 5.6.7) still requires recipients to accept this
form with a literal ``GMT`` zone and a two-digit day; ``require_gmt``
selects that profile.

Python 3.13+.
"""

from __future__ import annotations

from datetime import datetime

from datewire.core.calendar import day_of_week
from datewire.core.fields import TemporalFields
from datewire.core.y2k import netnews_year
from datewire.diagnostics import DateParseError, ErrorTemplate
from datewire.enums import WireFormat
from datewire.runtime.convert import to_utc
from datewire.syntax.cursor import Cursor
from datewire.syntax.primitives import parse_alpha, parse_digits, parse_whitespace
from datewire.syntax.tokens import format_month, format_weekday_full

from .rfc5322 import ParseOptions, RawDate, match_clock_zone, resolve_raw_date

__all__ = ["format", "match_rfc850", "parse"]


def match_rfc850(text: str, *, require_gmt: bool = False) -> RawDate | None:
    """Match ``Weekday "," [ws] d[d] "-" Mon "-" yy <ws> hh:mm:ss <ws> zone``.

    Args:
        text: Trimmed input
        require_gmt: HTTP profile: literal ``GMT``, two-digit day, and
            mandatory whitespace after the comma

    Returns:
        RawDate, or None when the text does not have this shape
    """
    cursor = Cursor(text)
    if (weekday := parse_alpha(cursor)) is None:
        return None
    if (after := weekday.cursor.expect(",")) is None:
        return None
    after = parse_whitespace(after, required=require_gmt)
    if after is None:
        return None
    if (day := parse_digits(after, 2 if require_gmt else 1, 2)) is None:
        return None
    if (after := day.cursor.expect("-")) is None:
        return None
    if (month := parse_alpha(after, 3, 3)) is None:
        return None
    if (after := month.cursor.expect("-")) is None:
        return None
    if (year := parse_digits(after, 2, 2)) is None:
        return None
    if (tail := match_clock_zone(year.cursor, seconds_required=True)) is None:
        return None
    if require_gmt and tail[1] != "GMT":
        return None
    return RawDate(weekday.value, day.value, month.value, year.value, *tail)


def parse(text: str, options: ParseOptions | None = None) -> TemporalFields:
    """Parse an RFC 850 date-time.

    Raises:
        DateParseError: GRAMMAR_MISMATCH or any field validation failure

    Example:
        >>> parse("Sunday, 06-Nov-94 08:49:37 GMT").year
        1994
    """
    raw = match_rfc850(text.strip())
    if raw is None:
        raise DateParseError(ErrorTemplate.grammar_mismatch(text, WireFormat.RFC850))
    return resolve_raw_date(
        raw, year_resolver=netnews_year, options=options, format_name=WireFormat.RFC850
    ).to_fields()


def format(value: datetime) -> str:  # noqa: A001
    """Render as ``Sunday, 06-Nov-94 08:49:37 GMT`` (always UTC).

    The two-digit year is lossy outside 1950-2049.
    """
    value = to_utc(value)
    weekday = format_weekday_full(day_of_week(value.year, value.month, value.day))
    return (
        f"{weekday}, {value.day:02d}-{format_month(value.month)}-{value.year % 100:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d} GMT"
    )
