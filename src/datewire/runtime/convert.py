"""Conversion primitives between TemporalFields and Python datetime values.

This is the boundary with the canonical value types. The codecs only read
and write TemporalFields; everything that constructs or inspects a
``datetime`` lives here:

    to_zoned_datetime   TemporalFields -> aware datetime
    to_plain_datetime   TemporalFields -> naive wall-clock datetime
    to_aware            any supported time-point shape -> aware datetime
    to_time_zone        aware datetime -> same instant in another zone
    round_to_second     drop sub-second precision, rounding half up
    to_utc              rounded UTC value for the GMT wire formats
    fields_from_datetime datetime/date -> TemporalFields

Named zones resolve through the standard library zoneinfo module.

Python 3.13+.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datewire.constants import DEFAULT_TIME_ZONE
from datewire.core.fields import TemporalFields, offset_from_minutes
from datewire.diagnostics import DateFormatError, DateParseError, ErrorTemplate

__all__ = [
    "fields_from_datetime",
    "offset_to_timedelta",
    "resolve_tzinfo",
    "round_to_second",
    "time_zone_label",
    "to_aware",
    "to_plain_datetime",
    "to_plain_time",
    "to_time_zone",
    "to_utc",
    "to_zoned_datetime",
]

_OFFSET_RE = re.compile(
    r"([+-])([01][0-9]|2[0-3])(?::?([0-5][0-9])(?::?([0-5][0-9])(?:[.,]([0-9]{1,9}))?)?)?"
)


def offset_to_timedelta(text: str) -> timedelta:
    """Convert ``Z`` or ``±HH[:MM[:SS[.fff]]]`` into a timedelta.

    Fractions finer than a microsecond are truncated.

    Raises:
        DateParseError: INVALID_NUMERIC_OFFSET

    Example:
        >>> offset_to_timedelta("-05:30")
        datetime.timedelta(days=-1, seconds=66600)
    """
    if text in ("Z", "z"):
        return timedelta(0)
    match = _OFFSET_RE.fullmatch(text)
    if match is None:
        raise DateParseError(ErrorTemplate.invalid_numeric_offset(text))
    sign, hh, mm, ss, fraction = match.groups()
    delta = timedelta(
        hours=int(hh),
        minutes=int(mm or 0),
        seconds=int(ss or 0),
        microseconds=int((fraction or "").ljust(6, "0")[:6]),
    )
    return -delta if sign == "-" else delta


def resolve_tzinfo(name: str) -> tzinfo:
    """Resolve a zone identifier into a tzinfo.

    ``UTC`` and ``Z`` map to ``datetime.UTC``; offset strings map to a
    fixed ``datetime.timezone``; anything else is looked up with zoneinfo.

    Raises:
        DateFormatError: UNKNOWN_TIME_ZONE when zoneinfo has no such key
    """
    if name in ("UTC", "Z", "z"):
        return UTC
    if name[:1] in ("+", "-"):
        delta = offset_to_timedelta(name)
        return UTC if not delta else timezone(delta)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise DateFormatError(ErrorTemplate.unknown_time_zone(name)) from e


def _describe(fields: TemporalFields) -> str:
    return ", ".join(f"{key}={value}" for key, value in fields.as_dict().items())


def _wall_clock(fields: TemporalFields, tz: tzinfo | None) -> datetime:
    year, month, day = fields.year, fields.month, fields.day
    if year is None or month is None or day is None:
        missing = [name for name in ("year", "month", "day") if getattr(fields, name) is None]
        raise DateParseError(
            ErrorTemplate.incomplete_date(_describe(fields), "canonical", " ".join(missing))
        )
    try:
        return datetime(
            year,
            month,
            day,
            fields.hour or 0,
            fields.minute or 0,
            fields.second or 0,
            (fields.millisecond or 0) * 1000 + (fields.microsecond or 0),
            tzinfo=tz,
        )
    except ValueError as e:
        # datetime only spans years 1..9999; RFC 9557 allows six digits.
        raise DateParseError(
            ErrorTemplate.field_out_of_range("year", year, 1, 9999)
        ) from e


def to_zoned_datetime(
    fields: TemporalFields, default_time_zone: str = DEFAULT_TIME_ZONE
) -> datetime:
    """Build an aware datetime from parsed fields.

    Zone selection:
        - time_zone present: that zone (named or fixed offset); an explicit
          numeric offset must agree with it for one of the two folds
        - only offset present: fixed-offset zone (``Z`` is UTC)
        - neither: default_time_zone

    An offset of ``Z`` next to a named zone denotes an exact instant that
    is then expressed in the zone.

    Raises:
        DateParseError: INCOMPLETE_DATE when year, month, or day is missing
        DateFormatError: OFFSET_MISMATCH, UNKNOWN_TIME_ZONE
    """
    if fields.time_zone is None:
        zone_name = fields.offset if fields.offset is not None else default_time_zone
        return _wall_clock(fields, resolve_tzinfo(zone_name))

    tz = resolve_tzinfo(fields.time_zone)
    if fields.offset in ("Z", "z"):
        return to_time_zone(_wall_clock(fields, UTC), tz)

    candidate = _wall_clock(fields, tz)
    if fields.offset is None:
        return candidate

    expected = offset_to_timedelta(fields.offset)
    for fold in (0, 1):
        resolved = candidate.replace(fold=fold)
        if resolved.utcoffset() == expected:
            return resolved
    raise DateFormatError(
        ErrorTemplate.offset_mismatch(
            fields.offset, fields.time_zone, candidate.replace(tzinfo=None).isoformat()
        )
    )


def to_time_zone(value: datetime, tz: tzinfo) -> datetime:
    """Express an aware datetime in another zone.

    Raises:
        DateParseError: FIELD_OUT_OF_RANGE when the result leaves years 1..9999
    """
    try:
        return value.astimezone(tz)
    except OverflowError as e:
        raise DateParseError(
            ErrorTemplate.field_out_of_range("year", value.year, 1, 9999)
        ) from e


def to_plain_datetime(fields: TemporalFields) -> datetime:
    """Build a naive wall-clock datetime, ignoring any zone or offset."""
    return _wall_clock(fields, None)


def to_plain_time(fields: TemporalFields) -> time:
    """Build a naive time from the time members.

    Raises:
        DateParseError: INCOMPLETE_DATE when no hour is present
    """
    if fields.hour is None:
        raise DateParseError(ErrorTemplate.incomplete_date(_describe(fields), "canonical", "hour"))
    return time(
        fields.hour,
        fields.minute or 0,
        fields.second or 0,
        (fields.millisecond or 0) * 1000 + (fields.microsecond or 0),
    )


def to_aware(
    value: object, default_time_zone: str = DEFAULT_TIME_ZONE, *, format_name: str = ""
) -> datetime:
    """Coerce a supported time-point shape into an aware datetime.

    Supported shapes:
        aware datetime  zoned date-time, returned unchanged
        naive datetime  plain date-time, placed in default_time_zone
        date            plain date, midnight in default_time_zone
        int / float     instant, POSIX timestamp in UTC

    Raises:
        DateFormatError: UNSUPPORTED_INPUT_TYPE for anything else (including time)
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            return value
        return value.replace(tzinfo=resolve_tzinfo(default_time_zone))
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=resolve_tzinfo(default_time_zone))
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, UTC)
    raise DateFormatError(
        ErrorTemplate.unsupported_input_type(type(value).__name__, format_name)
    )


def round_to_second(value: datetime) -> datetime:
    """Round to the nearest whole second (500 ms and above round up).

    Aware values are rounded on the exact timeline, so a carry across a
    DST transition lands on the correct wall time.
    A carry past the last representable second is dropped, so formatting
    never fails for a valid value.

    Example:
        >>> round_to_second(datetime(2024, 1, 1, 12, 0, 0, 500000))
        datetime.datetime(2024, 1, 1, 12, 0, 1)
    """
    if value.microsecond == 0:
        return value
    carry = value.microsecond >= 500_000
    truncated = value.replace(microsecond=0)
    if not carry:
        return truncated
    try:
        if truncated.tzinfo is None:
            return truncated + timedelta(seconds=1)
        return (truncated.astimezone(UTC) + timedelta(seconds=1)).astimezone(truncated.tzinfo)
    except OverflowError:
        return truncated


def to_utc(value: datetime) -> datetime:
    """Round to the second and express in UTC, for the GMT wire formats.

    Naive values are taken to be UTC already.

    Raises:
        DateFormatError: FIELD_OUT_OF_RANGE when the UTC instant leaves
            years 1..9999
    """
    value = round_to_second(value)
    if value.tzinfo is None:
        return value
    try:
        return value.astimezone(UTC)
    except OverflowError as e:
        raise DateFormatError(
            ErrorTemplate.field_out_of_range("year", value.year, 1, 9999)
        ) from e


def time_zone_label(value: datetime) -> str:
    """Return the identifier RFC 9557 writes in brackets for an aware value.

    ZoneInfo zones use their key, UTC is ``UTC``, fixed offsets render as
    ``±HH:MM``.
    """
    tz = value.tzinfo
    if isinstance(tz, ZoneInfo):
        return tz.key
    if tz is UTC:
        return "UTC"
    offset = value.utcoffset() or timedelta(0)
    return offset_from_minutes(int(offset.total_seconds() // 60))


def fields_from_datetime(value: datetime | date) -> TemporalFields:
    """Spread a datetime or date into a TemporalFields record.

    Naive values carry no offset; aware values carry ``offset`` and a
    ``time_zone`` label.
    """
    if not isinstance(value, datetime):
        return TemporalFields(year=value.year, month=value.month, day=value.day)

    result = TemporalFields(
        year=value.year,
        month=value.month,
        day=value.day,
        hour=value.hour,
        minute=value.minute,
        second=value.second,
        millisecond=value.microsecond // 1000,
        microsecond=value.microsecond % 1000,
        nanosecond=0,
    )
    offset = value.utcoffset()
    if offset is not None:
        result.offset = offset_from_minutes(int(offset.total_seconds() // 60))
        result.time_zone = time_zone_label(value)
    return result
