"""Conversion between field records and Python datetime values.

Python 3.13+.
"""

from .convert import (
    fields_from_datetime,
    offset_to_timedelta,
    resolve_tzinfo,
    round_to_second,
    time_zone_label,
    to_aware,
    to_plain_datetime,
    to_plain_time,
    to_time_zone,
    to_utc,
    to_zoned_datetime,
)

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
