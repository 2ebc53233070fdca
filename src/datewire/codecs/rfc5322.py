"""Shared grammar and rendering for the Internet Message Format family.

RFC 5322 Section 3.3 date-time (with the RFC 822/1123/2822 obsolete forms)
is the base of the Email, Netnews, and RFC 850 codecs. Each grammar is a
named sequence of sub-parsers producing a RawDate, a typed record of the
tokens exactly as they appeared. resolve_raw_date() then turns a RawDate
into a validated, leap-second normalized ParsedDateTime.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from datewire.core.calendar import (
    day_of_week,
    normalize_leap_second,
    validate_date_time,
    validate_weekday,
)
from datewire.core.fields import ParsedDateTime
from datewire.diagnostics import DateParseError, ErrorTemplate
from datewire.enums import TimezoneSource
from datewire.runtime.convert import round_to_second
from datewire.syntax.cursor import Cursor
from datewire.syntax.primitives import (
    Clock,
    parse_alpha,
    parse_clock,
    parse_digits,
    parse_non_space,
    parse_whitespace,
)
from datewire.syntax.scanner import format_offset, normalize_whitespace, strip_comments
from datewire.syntax.timezones import TimezoneLookup, parse_timezone
from datewire.syntax.tokens import format_month, format_weekday, parse_month, parse_weekday

__all__ = [
    "FormatOptions",
    "ParseOptions",
    "RawDate",
    "fixed_offset_lookup",
    "match_clock_zone",
    "format_rfc5322",
    "match_rfc5322",
    "prepare",
    "resolve_raw_date",
    "strict_zone",
]


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Options for Email-family parsing.

    Attributes:
        strict: Treat a weekday that disagrees with the date as fatal
        allow_leap_second: Accept ``:60`` and roll it into the next minute
    """

    strict: bool = False
    allow_leap_second: bool = True


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Options for Email-family rendering.

    Attributes:
        include_day_of_week: Emit the leading ``Www,``
        include_seconds: Emit ``:SS``
        colon_in_offset: Emit ``+HH:MM`` instead of ``+HHMM``
        z_for_zero: Emit ``Z`` for a zero offset (not valid RFC 5322 output)
    """

    include_day_of_week: bool = True
    include_seconds: bool = True
    colon_in_offset: bool = False
    z_for_zero: bool = False


@dataclass(frozen=True, slots=True)
class RawDate:
    """Date-time tokens as matched by one of the Email-family grammars.

    Attributes:
        weekday: Weekday token, or None when the grammar found none
        day: Day-of-month digits
        month: Month name token
        year: Year digits, not yet windowed
        clock: Time of day (second may be None)
        zone: Zone token
    """

    weekday: str | None
    day: str
    month: str
    year: str
    clock: Clock
    zone: str


def prepare(text: str) -> str:
    """Strip CFWS comments and normalize whitespace."""
    return normalize_whitespace(strip_comments(text))


def match_clock_zone(
    cursor: Cursor, *, seconds_required: bool = False
) -> tuple[Clock, str] | None:
    """Match ``<ws> hh:mm[:ss] <ws> zone EOF`` following the year.

    Returns:
        (clock, zone token), or None when the text does not have this shape
    """
    if (after := parse_whitespace(cursor)) is None:
        return None
    if (clock := parse_clock(after, seconds_required=seconds_required)) is None:
        return None
    if (after := parse_whitespace(clock.cursor)) is None:
        return None
    if (zone := parse_non_space(after)) is None or not zone.cursor.is_eof:
        return None
    return clock.value, zone.value


def match_rfc5322(
    text: str, *, year_min: int = 4, year_max: int | None = None
) -> RawDate | None:
    """Match ``[Www ","] d[d] Mon yyyy hh:mm[:ss] zone``.

    Args:
        text: Comment-stripped, whitespace-normalized input
        year_min: Minimum year digits (4 for RFC 5322, 2 for obs-year)
        year_max: Maximum year digits, or None for unbounded

    Returns:
        RawDate, or None when the text does not have this shape
    """
    cursor = Cursor(text)
    weekday: str | None = None
    name = parse_alpha(cursor, 3, 3)
    if name is not None:
        if (after := name.cursor.expect(",")) is None:
            return None
        weekday = name.value
        cursor = after.skip_whitespace()

    if (day := parse_digits(cursor, 1, 2)) is None:
        return None
    if (after := parse_whitespace(day.cursor)) is None:
        return None
    if (month := parse_alpha(after, 3, 3)) is None:
        return None
    if (after := parse_whitespace(month.cursor)) is None:
        return None
    if (year := parse_digits(after, year_min, year_max)) is None:
        return None
    if (tail := match_clock_zone(year.cursor)) is None:
        return None
    return RawDate(weekday, day.value, month.value, year.value, *tail)


def resolve_raw_date(
    raw: RawDate,
    *,
    year_resolver: Callable[[str], int] = int,
    options: ParseOptions | None = None,
    min_year: int | None = None,
    format_name: str = "",
    zone_resolver: Callable[[str], TimezoneLookup] = parse_timezone,
) -> ParsedDateTime:
    """Validate a RawDate and normalize any leap second.

    Args:
        raw: Matched tokens
        year_resolver: Expands the year digits (two-digit windows differ by format)
        options: Strictness and leap-second policy
        min_year: Reject years below this value
        format_name: Wire format name for diagnostics
        zone_resolver: Maps the zone token to an offset

    Raises:
        DateParseError: For invalid names, out-of-range fields, strict weekday
            mismatch, or an unresolvable zone
    """
    opts = options or ParseOptions()
    year = year_resolver(raw.year)
    if min_year is not None and year < min_year:
        raise DateParseError(ErrorTemplate.year_out_of_range(year, min_year, format_name))
    month = parse_month(raw.month)
    day = int(raw.day)
    hour, minute = raw.clock.hour, raw.clock.minute
    second = raw.clock.second if raw.clock.second is not None else 0

    validate_date_time(
        year, month, day, hour, minute, second, allow_leap_second=opts.allow_leap_second
    )
    if raw.weekday is not None:
        validate_weekday(
            year, month, day, parse_weekday(raw.weekday), strict=opts.strict, token=raw.weekday
        )

    zone = zone_resolver(raw.zone)
    year, month, day, hour, minute, second = normalize_leap_second(
        year, month, day, hour, minute, second
    )
    return ParsedDateTime(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        offset_minutes=zone.offset_minutes,
        source_tz=zone.source_tz,
    )


def strict_zone(token: str) -> TimezoneLookup:
    """Resolve a zone for RFC 5322 proper, where obs-zone excludes ``J``."""
    if token in ("J", "j"):
        raise DateParseError(ErrorTemplate.unrecognized_timezone(token))
    return parse_timezone(token)


def format_rfc5322(value: datetime, options: FormatOptions | None = None) -> str:
    """Render an aware datetime as an RFC 5322 date-time.

    Sub-second precision is rounded away. A naive value is rendered with
    a ``+0000`` offset.

    Example:
        >>> from datetime import UTC
        >>> format_rfc5322(datetime(1994, 11, 6, 8, 49, 37, tzinfo=UTC))
        'Sun, 06 Nov 1994 08:49:37 +0000'
    """
    opts = options or FormatOptions()
    value = round_to_second(value)
    offset = value.utcoffset() or timedelta(0)
    minutes = int(offset.total_seconds() // 60)

    parts: list[str] = []
    if opts.include_day_of_week:
        parts.append(format_weekday(day_of_week(value.year, value.month, value.day)) + ",")
    parts.append(f"{value.day:02d} {format_month(value.month)} {value.year:04d}")
    clock = f"{value.hour:02d}:{value.minute:02d}"
    if opts.include_seconds:
        clock += f":{value.second:02d}"
    parts.append(clock)
    parts.append(format_offset(minutes, use_colon=opts.colon_in_offset, use_z=opts.z_for_zero))
    return " ".join(parts)


def fixed_offset_lookup(minutes: int) -> TimezoneLookup:
    """Build a numeric lookup for zones that fall back to a fixed offset."""
    return TimezoneLookup(minutes, TimezoneSource.NUMERIC)
