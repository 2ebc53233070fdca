"""Internet Message Format date-time codec (RFC 5322).

Accepts the RFC 5322 Section 3.3 grammar plus the obsolete forms of
Section 4.3 that RFC 822/1123/2822 mail still carries: CFWS comments,
folding whitespace, missing seconds, named and military zones, and
``:60`` leap seconds. Two- and three-digit years are rejected; those
belong to the Netnews codec.

Output is always the strict modern form with a numeric offset:
``Sun, 06 Nov 1994 08:49:37 +0000``.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datewire.constants import EMAIL_MIN_YEAR
from datewire.diagnostics import DateParseError, ErrorTemplate
from datewire.enums import WireFormat

from .rfc5322 import (
    FormatOptions,
    ParseOptions,
    format_rfc5322,
    match_rfc5322,
    prepare,
    resolve_raw_date,
    strict_zone,
)

if TYPE_CHECKING:
    from datetime import datetime

    from datewire.core.fields import TemporalFields

__all__ = ["FormatOptions", "ParseOptions", "format", "parse"]


def parse(text: str, options: ParseOptions | None = None) -> TemporalFields:
    """Parse an RFC 5322 date-time.

    Args:
        text: Header value such as ``Sun, 06 Nov 1994 08:49:37 GMT``
        options: Weekday strictness and leap-second policy

    Returns:
        TemporalFields with date, time, offset, fixed-offset time_zone,
        and source_tz

    Raises:
        DateParseError: GRAMMAR_MISMATCH, FIELD_OUT_OF_RANGE,
            YEAR_OUT_OF_RANGE, INVALID_MONTH_NAME, INVALID_WEEKDAY_NAME,
            UNRECOGNIZED_TIMEZONE, INVALID_NUMERIC_OFFSET, WEEKDAY_MISMATCH

    Example:
        >>> fields = parse("Sun, 06 Nov 1994 08:49:37 GMT")
        >>> fields.year, fields.hour, fields.offset, str(fields.source_tz)
        (1994, 8, 'Z', 'obs-name')
    """
    raw = match_rfc5322(prepare(text), year_min=4)
    if raw is None:
        raise DateParseError(
            ErrorTemplate.grammar_mismatch(text, WireFormat.EMAIL),
        )
    parsed = resolve_raw_date(
        raw,
        options=options,
        min_year=EMAIL_MIN_YEAR,
        format_name=WireFormat.EMAIL,
        zone_resolver=strict_zone,
    )
    return parsed.to_fields()


def format(value: datetime, options: FormatOptions | None = None) -> str:  # noqa: A001
    """Render a datetime as an RFC 5322 date-time.

    Example:
        >>> from datetime import datetime, timedelta, timezone
        >>> format(datetime(2016, 11, 1, 13, 23, 12, tzinfo=timezone(timedelta(hours=1))))
        'Tue, 01 Nov 2016 13:23:12 +0100'
    """
    return format_rfc5322(value, options)
