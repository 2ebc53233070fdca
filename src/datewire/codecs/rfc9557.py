"""RFC 9557 date-time codec (RFC 3339 / ISO 8601 with suffix annotations).

Accepted shapes, tried in order:

    zoned date-time  2024-01-01T12:00:00.5+01:00[Europe/Paris][u-ca=iso8601]
    year-month       2024-01, 202401
    month-day        --01-15, 01-15, 0115
    time             T12:00:00Z, 120000

Date and time accept the extended and basic forms; years are four digits
or a signed six-digit expanded year (``-000000`` is not a valid year).
A leap second ``:60`` is clamped to ``:59``. Offsets may carry seconds
and a fraction.

After an optional bracketed time zone, any number of ``[key=value]``
annotations may follow. The first ``u-ca`` wins; a second ``u-ca`` is an
error when either one carries the critical flag ``!``. Any other key
marked critical is an error, and non-critical unknown keys are ignored.

The grammar is a sequence of named sub-parsers; each returns
ParseResult | None and the shape parsers compose them.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta

from datewire.constants import ISO_CALENDAR
from datewire.core.calendar import days_in_month, validate_date_time, validate_time
from datewire.core.fields import TemporalFields
from datewire.diagnostics import DateParseError, ErrorTemplate
from datewire.enums import WireFormat
from datewire.runtime.convert import round_to_second, time_zone_label
from datewire.syntax.cursor import Cursor, ParseResult

__all__ = [
    "Annotation",
    "format",
    "parse",
    "process_annotations",
]

_YEAR_RE = re.compile(r"[+-][0-9]{6}|[0-9]{4}")
_MONTH_RE = re.compile(r"0[1-9]|1[0-2]")
_DAY_RE = re.compile(r"0[1-9]|[12][0-9]|3[01]")
_TWO_DIGITS_RE = re.compile(r"[0-9]{2}")
_FRACTION_RE = re.compile(r"[.,]([0-9]{1,9})")
_OFFSET_RE = re.compile(
    r"[+-](?:[01][0-9]|2[0-3])(?::?[0-5][0-9](?::?[0-5][0-9](?:[.,][0-9]{1,9})?)?)?"
)
_TZ_COMPONENT = r"[A-Za-z._][A-Za-z._0-9+-]*"
_TZ_ID_RE = re.compile(
    rf"[+-](?:[01][0-9]|2[0-3])(?::?[0-5][0-9])?|{_TZ_COMPONENT}(?:/{_TZ_COMPONENT})*"
)
_ANNOTATION_RE = re.compile(r"\[(!)?([a-z_][a-z0-9_-]*)=([A-Za-z0-9]+(?:-[A-Za-z0-9]+)*)\]")

_CALENDAR_KEY = "u-ca"
# Month-day has no year; February 29 must remain valid.
_REFERENCE_LEAP_YEAR = 1972


@dataclass(frozen=True, slots=True)
class Annotation:
    """Bracketed ``[!key=value]`` suffix annotation."""

    critical: bool
    key: str
    value: str


@dataclass(frozen=True, slots=True)
class _Time:
    hour: int
    minute: int
    second: int
    fraction: str


@dataclass(frozen=True, slots=True)
class _Suffix:
    time_zone: str | None
    annotations: tuple[Annotation, ...]
    source: str


# ============================================================================
# SUB-PARSERS
# ============================================================================


def _match(pattern: re.Pattern[str], cursor: Cursor) -> ParseResult[re.Match[str]] | None:
    """Anchor a compiled pattern at the cursor."""
    match = pattern.match(cursor.source, cursor.pos)
    if match is None:
        return None
    return ParseResult(match, Cursor(cursor.source, match.end()))


def _parse_year(cursor: Cursor) -> ParseResult[str] | None:
    if (year := _match(_YEAR_RE, cursor)) is None:
        return None
    return ParseResult(year.value.group(), year.cursor)


def _parse_int(pattern: re.Pattern[str], cursor: Cursor) -> ParseResult[int] | None:
    if (found := _match(pattern, cursor)) is None:
        return None
    return ParseResult(int(found.value.group()), found.cursor)


def _parse_date(cursor: Cursor) -> ParseResult[tuple[str, int, int]] | None:
    """``YYYY-MM-DD`` or ``YYYYMMDD``."""
    if (year := _parse_year(cursor)) is None:
        return None
    if (dash := year.cursor.expect("-")) is not None:
        if (month := _parse_int(_MONTH_RE, dash)) is None:
            return None
        if (dash := month.cursor.expect("-")) is None:
            return None
        if (day := _parse_int(_DAY_RE, dash)) is None:
            return None
    else:
        if (month := _parse_int(_MONTH_RE, year.cursor)) is None:
            return None
        if (day := _parse_int(_DAY_RE, month.cursor)) is None:
            return None
    return ParseResult((year.value, month.value, day.value), day.cursor)


def _parse_fraction(cursor: Cursor) -> ParseResult[str]:
    found = _match(_FRACTION_RE, cursor)
    if found is None:
        return ParseResult("", cursor)
    return ParseResult(found.value.group(1), found.cursor)


def _parse_time(cursor: Cursor) -> ParseResult[_Time] | None:
    """``HH[:MM[:SS[.f]]]`` or ``HH[MM[SS[.f]]]``."""
    if (hour := _parse_int(_TWO_DIGITS_RE, cursor)) is None:
        return None
    minute = second = 0
    fraction = ""
    cursor = hour.cursor
    if (colon := cursor.expect(":")) is not None:
        if (found := _parse_int(_TWO_DIGITS_RE, colon)) is not None:
            minute, cursor = found.value, found.cursor
            if (colon := cursor.expect(":")) is not None and (
                sec := _parse_int(_TWO_DIGITS_RE, colon)
            ) is not None:
                second = sec.value
                fraction_result = _parse_fraction(sec.cursor)
                fraction, cursor = fraction_result.value, fraction_result.cursor
    elif (found := _parse_int(_TWO_DIGITS_RE, cursor)) is not None:
        minute, cursor = found.value, found.cursor
        if (sec := _parse_int(_TWO_DIGITS_RE, cursor)) is not None:
            second = sec.value
            fraction_result = _parse_fraction(sec.cursor)
            fraction, cursor = fraction_result.value, fraction_result.cursor
    return ParseResult(_Time(hour.value, minute, second, fraction), cursor)


def _parse_offset(cursor: Cursor) -> ParseResult[str] | None:
    """``Z`` or ``±HH[[:]MM[[:]SS[.f]]]``; ``Z`` is normalized to upper case."""
    if (after := cursor.expect_any("Zz")) is not None:
        return ParseResult("Z", after)
    if (found := _match(_OFFSET_RE, cursor)) is None:
        return None
    return ParseResult(found.value.group(), found.cursor)


def _parse_time_zone(cursor: Cursor) -> ParseResult[str] | None:
    """``[tzid]`` or ``[!tzid]``."""
    if (after := cursor.expect("[")) is None:
        return None
    after = after.expect("!") or after
    if (found := _match(_TZ_ID_RE, after)) is None:
        return None
    if (close := found.cursor.expect("]")) is None:
        return None
    return ParseResult(found.value.group(), close)


def _parse_annotations(cursor: Cursor) -> ParseResult[tuple[Annotation, ...]]:
    annotations: list[Annotation] = []
    while (found := _match(_ANNOTATION_RE, cursor)) is not None:
        critical, key, value = found.value.groups()
        annotations.append(Annotation(critical == "!", key, value))
        cursor = found.cursor
    return ParseResult(tuple(annotations), cursor)


def _parse_suffix(cursor: Cursor) -> _Suffix | None:
    """``[tz]? annotation* EOF``."""
    time_zone: str | None = None
    if (zone := _parse_time_zone(cursor)) is not None:
        time_zone, cursor = zone.value, zone.cursor
    start = cursor.pos
    annotations = _parse_annotations(cursor)
    if not annotations.cursor.is_eof:
        return None
    return _Suffix(time_zone, annotations.value, cursor.source[start:])


def process_annotations(annotations: tuple[Annotation, ...], source: str = "") -> str | None:
    """Apply the calendar and critical-flag rules.

    Args:
        annotations: Parsed annotations in order of appearance
        source: Annotation text, used in diagnostics

    Returns:
        The calendar of the first ``u-ca`` annotation, or None

    Raises:
        DateParseError: ANNOTATION_CONFLICT, UNRECOGNIZED_ANNOTATION
    """
    calendar: str | None = None
    calendar_was_critical = False
    for annotation in annotations:
        if annotation.key == _CALENDAR_KEY:
            if calendar is None:
                calendar = annotation.value
                calendar_was_critical = annotation.critical
            elif annotation.critical or calendar_was_critical:
                raise DateParseError(ErrorTemplate.annotation_conflict(source))
        elif annotation.critical:
            raise DateParseError(
                ErrorTemplate.unrecognized_annotation(annotation.key, annotation.value)
            )
    return calendar


# ============================================================================
# SHAPES
# ============================================================================


def _year_value(text: str, source: str) -> int:
    if text == "-000000":
        raise DateParseError(ErrorTemplate.grammar_mismatch(source, WireFormat.RFC9557))
    return int(text)


def _apply_time(fields: TemporalFields, time: _Time) -> None:
    second = 59 if time.second == 60 else time.second
    validate_time(time.hour, time.minute, second)
    fields.hour, fields.minute, fields.second = time.hour, time.minute, second
    fields.set_fraction(int(time.fraction.ljust(9, "0")))


def _parse_zoned(text: str) -> TemporalFields | None:
    if (date := _parse_date(Cursor(text))) is None:
        return None
    cursor = date.cursor
    time: _Time | None = None
    offset: str | None = None

    separator = cursor.expect_any("Tt")
    if separator is None and (ws := cursor.skip_whitespace()).pos > cursor.pos:
        separator = ws
    if separator is not None and (found := _parse_time(separator)) is not None:
        time, cursor = found.value, found.cursor
        if (found_offset := _parse_offset(cursor)) is not None:
            offset, cursor = found_offset.value, found_offset.cursor

    if (suffix := _parse_suffix(cursor)) is None:
        return None

    year_text, month, day = date.value
    year = _year_value(year_text, text)
    calendar = process_annotations(suffix.annotations, suffix.source)
    second = 0 if time is None else (59 if time.second == 60 else time.second)
    validate_date_time(
        year, month, day, 0 if time is None else time.hour,
        0 if time is None else time.minute, second,
    )

    fields = TemporalFields(year=year, month=month, day=day)
    if time is not None:
        _apply_time(fields, time)
    fields.offset = offset
    fields.time_zone = suffix.time_zone
    fields.calendar = calendar
    return fields


def _parse_year_month(text: str) -> TemporalFields | None:
    if (year := _parse_year(Cursor(text))) is None:
        return None
    cursor = year.cursor.expect("-") or year.cursor
    if (month := _parse_int(_MONTH_RE, cursor)) is None:
        return None
    if (suffix := _parse_suffix(month.cursor)) is None:
        return None
    fields = TemporalFields(year=_year_value(year.value, text), month=month.value)
    fields.calendar = process_annotations(suffix.annotations, suffix.source)
    return fields


def _parse_month_day(text: str) -> TemporalFields | None:
    cursor = Cursor(text)
    if cursor.slice_ahead(2) == "--":
        cursor = cursor.advance(2)
    if (month := _parse_int(_MONTH_RE, cursor)) is None:
        return None
    cursor = month.cursor.expect("-") or month.cursor
    if (day := _parse_int(_DAY_RE, cursor)) is None:
        return None
    if (suffix := _parse_suffix(day.cursor)) is None:
        return None
    calendar = process_annotations(suffix.annotations, suffix.source)
    limit = days_in_month(_REFERENCE_LEAP_YEAR, month.value)
    if day.value > limit:
        raise DateParseError(ErrorTemplate.field_out_of_range("day", day.value, 1, limit))
    return TemporalFields(month=month.value, day=day.value, calendar=calendar)


def _parse_time_only(text: str) -> TemporalFields | None:
    cursor = Cursor(text)
    cursor = cursor.expect_any("Tt") or cursor
    if (time := _parse_time(cursor)) is None:
        return None
    cursor = time.cursor
    offset: str | None = None
    if (found := _parse_offset(cursor)) is not None:
        offset, cursor = found.value, found.cursor
    if (suffix := _parse_suffix(cursor)) is None:
        return None
    calendar = process_annotations(suffix.annotations, suffix.source)
    fields = TemporalFields()
    _apply_time(fields, time.value)
    fields.offset = offset
    fields.time_zone = suffix.time_zone
    fields.calendar = calendar
    return fields


def parse(text: str) -> TemporalFields:
    """Parse any RFC 9557 shape.

    Returns:
        TemporalFields populated according to the matched shape: date-time
        members for zoned date-times, year and month, month and day, or time
        members only.

    Raises:
        DateParseError: GRAMMAR_MISMATCH, FIELD_OUT_OF_RANGE,
            ANNOTATION_CONFLICT, UNRECOGNIZED_ANNOTATION

    Example:
        >>> fields = parse("2024-01-01T12:00:00+01:00[Europe/Paris][u-ca=iso8601]")
        >>> fields.offset, fields.time_zone, fields.calendar
        ('+01:00', 'Europe/Paris', 'iso8601')
    """
    for shape in (_parse_zoned, _parse_year_month, _parse_month_day, _parse_time_only):
        fields = shape(text)
        if fields is not None:
            return fields
    raise DateParseError(ErrorTemplate.grammar_mismatch(text, WireFormat.RFC9557))


def _format_offset(offset: timedelta) -> str:
    total = int(offset.total_seconds())
    sign = "-" if total < 0 else "+"
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


def format(  # noqa: A001
    value: datetime,
    *,
    show_time_zone: bool = True,
    show_calendar: bool = False,
    fractional_seconds: bool = False,
) -> str:
    """Render a datetime in RFC 9557 form.

    Args:
        value: Aware or naive datetime; naive values get no offset or zone
        show_time_zone: Append the bracketed zone of an aware value
        show_calendar: Append ``[u-ca=iso8601]``
        fractional_seconds: Keep microseconds instead of rounding to seconds

    Example:
        >>> from zoneinfo import ZoneInfo
        >>> paris = datetime(2024, 1, 1, 12, tzinfo=ZoneInfo("Europe/Paris"))
        >>> format(paris, show_calendar=True)
        '2024-01-01T12:00:00+01:00[Europe/Paris][u-ca=iso8601]'
    """
    if not fractional_seconds:
        value = round_to_second(value)
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset()
    if offset is not None:
        text += _format_offset(offset)
        if show_time_zone:
            text += f"[{time_zone_label(value)}]"
    if show_calendar:
        text += f"[{_CALENDAR_KEY}={ISO_CALENDAR}]"
    return text
