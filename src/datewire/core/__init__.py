"""Core calendar primitives and the canonical field record.

Python 3.13+. Zero external dependencies.
"""

from .calendar import (
    day_of_week,
    days_in_month,
    is_leap_year,
    normalize_leap_second,
    validate_date,
    validate_date_time,
    validate_time,
    validate_weekday,
)
from .fields import ParsedDateTime, TemporalFields, offset_from_minutes
from .y2k import netnews_year, netscape_year, rfc6265_year

__all__ = [
    "ParsedDateTime",
    "TemporalFields",
    "day_of_week",
    "days_in_month",
    "is_leap_year",
    "netnews_year",
    "netscape_year",
    "normalize_leap_second",
    "offset_from_minutes",
    "rfc6265_year",
    "validate_date",
    "validate_date_time",
    "validate_time",
    "validate_weekday",
]
