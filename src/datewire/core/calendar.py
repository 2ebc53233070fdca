"""Proleptic Gregorian calendar rules and field validation.

Shared by every codec: leap years, month lengths, Zeller's-congruence
weekday computation, range checks, and leap-second normalization.

Validation failures raise DateParseError carrying a FIELD_OUT_OF_RANGE or
WEEKDAY_MISMATCH diagnostic.

Python 3.13+. Zero external dependencies.
"""

import logging

from datewire.diagnostics import DateParseError, ErrorTemplate

__all__ = [
    "day_of_week",
    "days_in_month",
    "is_leap_year",
    "normalize_leap_second",
    "validate_date",
    "validate_date_time",
    "validate_time",
    "validate_weekday",
]

logger = logging.getLogger(__name__)

_DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_WEEKDAY_ABBR: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years.

    Example:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
        (True, False, True)
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month.

    Args:
        year: Gregorian year (leap-year aware)
        month: Month 1..12

    Returns:
        28..31

    Raises:
        DateParseError: If month is outside 1..12
    """
    if not 1 <= month <= 12:
        raise DateParseError(ErrorTemplate.field_out_of_range("month", month, 1, 12))
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def _check(name: str, value: int, minimum: int, maximum: int) -> None:
    if not minimum <= value <= maximum:
        raise DateParseError(ErrorTemplate.field_out_of_range(name, value, minimum, maximum))


def validate_date(year: int, month: int, day: int) -> None:
    """Validate month and day against the Gregorian calendar.

    Raises:
        DateParseError: FIELD_OUT_OF_RANGE for month 13, February 30, etc.
    """
    _check("month", month, 1, 12)
    _check("day", day, 1, days_in_month(year, month))


def validate_time(
    hour: int, minute: int, second: int, *, allow_leap_second: bool = False
) -> None:
    """Validate a wall-clock time.

    Args:
        hour: Hour 0..23
        minute: Minute 0..59
        second: Second 0..59 (0..60 with allow_leap_second)
        allow_leap_second: Accept second == 60 as a transient leap second

    Raises:
        DateParseError: FIELD_OUT_OF_RANGE
    """
    _check("hour", hour, 0, 23)
    _check("minute", minute, 0, 59)
    _check("second", second, 0, 60 if allow_leap_second else 59)


def validate_date_time(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    *,
    allow_leap_second: bool = False,
) -> None:
    """Validate date and time fields together.

    Raises:
        DateParseError: FIELD_OUT_OF_RANGE
    """
    validate_date(year, month, day)
    validate_time(hour, minute, second, allow_leap_second=allow_leap_second)


def day_of_week(year: int, month: int, day: int) -> int:
    """Compute the weekday with Zeller's congruence.

    January and February count as months 13 and 14 of the previous year.

    Returns:
        0 = Sunday .. 6 = Saturday

    Example:
        >>> day_of_week(1994, 11, 6)
        0
    """
    if month < 3:
        month += 12
        year -= 1
    k = year % 100
    j = year // 100
    h = (day + (13 * (month + 1)) // 5 + k + k // 4 + j // 4 - 2 * j) % 7
    # Zeller yields 0 = Saturday; shift so 0 = Sunday.
    return (h + 6) % 7


def validate_weekday(
    year: int, month: int, day: int, weekday: int, *, strict: bool, token: str = ""
) -> None:
    """Compare a parsed weekday against the computed one.

    Args:
        year: Parsed year
        month: Parsed month
        day: Parsed day
        weekday: Parsed weekday index (0 = Sunday)
        strict: Raise on mismatch instead of accepting it
        token: Original weekday text, used in the diagnostic

    Raises:
        DateParseError: WEEKDAY_MISMATCH when strict and the days disagree
    """
    actual = day_of_week(year, month, day)
    if actual == weekday:
        return
    if strict:
        raise DateParseError(
            ErrorTemplate.weekday_mismatch(
                token or _WEEKDAY_ABBR[weekday], year, month, day, _WEEKDAY_ABBR[actual]
            )
        )
    logger.debug(
        "Ignoring weekday mismatch: %s given for %04d-%02d-%02d (%s)",
        token or _WEEKDAY_ABBR[weekday],
        year,
        month,
        day,
        _WEEKDAY_ABBR[actual],
    )


def normalize_leap_second(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> tuple[int, int, int, int, int, int]:
    """Roll a ``:60`` leap second forward into the following minute.

    The carry cascades through minute, hour, day, month, and year with
    month-length and leap-year awareness. Values with second < 60 are
    returned unchanged.

    Returns:
        (year, month, day, hour, minute, second)

    Example:
        >>> normalize_leap_second(1999, 12, 31, 23, 59, 60)
        (2000, 1, 1, 0, 0, 0)
    """
    if second != 60:
        return year, month, day, hour, minute, second

    logger.debug(
        "Normalizing leap second %04d-%02d-%02d %02d:%02d:60",
        year, month, day, hour, minute,
    )
    second = 0
    minute += 1
    if minute == 60:
        minute = 0
        hour += 1
        if hour == 24:
            hour = 0
            day += 1
            if day > days_in_month(year, month):
                day = 1
                month += 1
                if month == 13:
                    month = 1
                    year += 1
    return year, month, day, hour, minute, second
