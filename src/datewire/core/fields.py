"""Canonical field record exchanged between codecs and the facade.

TemporalFields is the only data interchange type: codecs fill the members
their grammar carries and leave the rest as None. ParsedDateTime is the
dense intermediate produced by the Email-family grammars before it is
spread into a TemporalFields record.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from datewire.enums import TimezoneSource

__all__ = [
    "ParsedDateTime",
    "TemporalFields",
    "offset_from_minutes",
]


def offset_from_minutes(minutes: int) -> str:
    """Render an offset in minutes as the canonical ``±HH:MM`` string.

    Args:
        minutes: Signed offset from UTC in minutes

    Returns:
        ``"+HH:MM"`` or ``"-HH:MM"``; zero renders as ``"+00:00"``

    Example:
        >>> offset_from_minutes(-330)
        '-05:30'
    """
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


@dataclass(slots=True)
class TemporalFields:
    """Sparse date-time field record.

    Every member is optional. When present, members satisfy:
        month in 1..12, day in 1..days_in_month(year, month),
        hour in 0..23, minute and second in 0..59,
        millisecond, microsecond, nanosecond in 0..999.

    Attributes:
        year: Proleptic Gregorian year (may be negative for RFC 9557)
        era: Calendar era identifier (never set by ISO codecs)
        era_year: Year within era (never set by ISO codecs)
        month: Month 1..12
        month_code: Calendar month code such as "M01"
        week: ISO week number
        day: Day of month
        hour: Hour 0..23
        minute: Minute 0..59
        second: Second 0..59
        millisecond: Milliseconds 0..999
        microsecond: Microseconds 0..999 (within the millisecond)
        nanosecond: Nanoseconds 0..999 (within the microsecond)
        offset: "Z" or signed offset such as "+01:00"
        time_zone: Fixed-offset string or IANA-style identifier
        calendar: Calendar identifier; ISO when None
        source_tz: Provenance of the zone token, when parsed from one
    """

    year: int | None = None
    era: str | None = None
    era_year: int | None = None
    month: int | None = None
    month_code: str | None = None
    week: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    millisecond: int | None = None
    microsecond: int | None = None
    nanosecond: int | None = None
    offset: str | None = None
    time_zone: str | None = None
    calendar: str | None = None
    source_tz: TimezoneSource | None = None

    def has_date(self) -> bool:
        """Return True when year, month, and day are all present."""
        return self.year is not None and self.month is not None and self.day is not None

    def has_time(self) -> bool:
        """Return True when at least the hour is present."""
        return self.hour is not None

    def fraction_nanoseconds(self) -> int:
        """Combine the sub-second members into nanoseconds (0..999_999_999)."""
        return (
            (self.millisecond or 0) * 1_000_000
            + (self.microsecond or 0) * 1_000
            + (self.nanosecond or 0)
        )

    def set_fraction(self, nanoseconds: int) -> None:
        """Spread nanoseconds (0..999_999_999) across the sub-second members."""
        self.millisecond, rest = divmod(nanoseconds, 1_000_000)
        self.microsecond, self.nanosecond = divmod(rest, 1_000)

    def as_dict(self) -> dict[str, object]:
        """Return present members only, in declaration order."""
        result: dict[str, object] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is not None:
                result[item.name] = value
        return result


@dataclass(frozen=True, slots=True)
class ParsedDateTime:
    """Dense result of an Email-family grammar.

    Values are already validated and leap-second normalized.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    offset_minutes: int
    source_tz: TimezoneSource

    def to_fields(self) -> TemporalFields:
        """Spread into a TemporalFields record with a fixed-offset zone."""
        offset = "Z" if self.offset_minutes == 0 else offset_from_minutes(self.offset_minutes)
        return TemporalFields(
            year=self.year,
            month=self.month,
            day=self.day,
            hour=self.hour,
            minute=self.minute,
            second=self.second,
            millisecond=0,
            microsecond=0,
            nanosecond=0,
            offset=offset,
            time_zone=offset_from_minutes(self.offset_minutes),
            source_tz=self.source_tz,
        )
