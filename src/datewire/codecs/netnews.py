"""Netnews date-time codec (RFC 850, RFC 1036, RFC 5536).

RFC 5536 Section 3.1.1 requires the RFC 5322 date-time and tells readers
to also accept obs-year two-digit years, the obsolete zone names, and
the RFC 850/1036 layout still found in archived articles. Grammars are
tried in this order, and the first one whose shape matches decides:

    1. RFC 5322 with 2- to 4-digit years
    2. RFC 850 ``Weekday, DD-Mon-YY HH:MM:SS ZONE``
    3. General ``[Www[,]] d[d] (" "|"-") Mon (" "|"-") yy[yy] hh:mm[:ss] ZONE``

A zone token that cannot be resolved is read as ``+0000`` (RFC 5536
Section 3.1.1 treats unknown zones as unspecified). This fallback is
unique to Netnews. Weekday mismatches are ignored.

Output is RFC 5322 with a numeric offset.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from datewire.core.y2k import netnews_year
from datewire.diagnostics import DateParseError, DiagnosticCode, ErrorTemplate
from datewire.enums import WireFormat
from datewire.syntax.cursor import Cursor
from datewire.syntax.primitives import parse_alpha, parse_digits
from datewire.syntax.timezones import TimezoneLookup, parse_timezone

from .rfc5322 import (
    FormatOptions,
    ParseOptions,
    RawDate,
    fixed_offset_lookup,
    format_rfc5322,
    match_clock_zone,
    match_rfc5322,
    prepare,
    resolve_raw_date,
)
from .rfc850 import match_rfc850

if TYPE_CHECKING:
    from datetime import datetime

    from datewire.core.fields import TemporalFields

__all__ = ["format", "match_general", "parse"]

logger = logging.getLogger(__name__)

_NETNEWS_FORMAT = FormatOptions(include_day_of_week=True, include_seconds=True)

_FALLBACK_CODES = frozenset({
    DiagnosticCode.UNRECOGNIZED_TIMEZONE,
    DiagnosticCode.INVALID_NUMERIC_OFFSET,
})


def _zone_or_utc(token: str) -> TimezoneLookup:
    try:
        return parse_timezone(token)
    except DateParseError as e:
        if e.diagnostic is None or e.diagnostic.code not in _FALLBACK_CODES:
            raise
        logger.warning("Unknown Netnews zone %r, reading as +0000", token)
        return fixed_offset_lookup(0)


def match_general(text: str) -> RawDate | None:
    """Match the permissive Netnews layout.

    ``[Www[","]] [ws] d[d] (ws|"-") Mon (ws|"-") yy[yy] <ws> hh:mm[:ss] <ws> zone``
    """
    cursor = Cursor(text)
    weekday: str | None = None
    if (name := parse_alpha(cursor, 3, 3)) is not None:
        weekday = name.value
        cursor = name.cursor
        cursor = (cursor.expect(",") or cursor).skip_whitespace()

    if (day := parse_digits(cursor, 1, 2)) is None:
        return None
    if (after := _separator(day.cursor)) is None:
        return None
    if (month := parse_alpha(after, 3, 3)) is None:
        return None
    if (after := _separator(month.cursor)) is None:
        return None
    if (year := parse_digits(after, 2, 4)) is None:
        return None
    if (tail := match_clock_zone(year.cursor)) is None:
        return None
    return RawDate(weekday, day.value, month.value, year.value, *tail)


def _separator(cursor: Cursor) -> Cursor | None:
    """Consume one ``-`` or a run of whitespace."""
    if (after := cursor.expect("-")) is not None:
        return after
    skipped = cursor.skip_whitespace()
    return skipped if skipped.pos > cursor.pos else None


def parse(text: str, options: ParseOptions | None = None) -> TemporalFields:
    """Parse a Netnews Date header.

    Args:
        text: Header value
        options: Leap-second policy; weekday strictness is honored but
            defaults to lenient

    Raises:
        DateParseError: GRAMMAR_MISMATCH when no grammar matches, or a
            field validation failure from the grammar that did

    Example:
        >>> parse("Fri, 19 Nov 82 16:14:55 EST").year
        1982
        >>> parse("Fri, 19 Nov 1982 16:14:55 XYZ+1").offset
        'Z'
    """
    normalized = prepare(text)
    raw = (
        match_rfc5322(normalized, year_min=2, year_max=4)
        or match_rfc850(normalized)
        or match_general(normalized)
    )
    if raw is None:
        raise DateParseError(ErrorTemplate.grammar_mismatch(text, WireFormat.NETNEWS))
    return resolve_raw_date(
        raw,
        year_resolver=netnews_year,
        options=options,
        format_name=WireFormat.NETNEWS,
        zone_resolver=_zone_or_utc,
    ).to_fields()


def format(value: datetime) -> str:  # noqa: A001
    """Render as RFC 5322 with a numeric offset.

    Example:
        >>> from datetime import UTC, datetime
        >>> format(datetime(1982, 11, 19, 21, 14, 55, tzinfo=UTC))
        'Fri, 19 Nov 1982 21:14:55 +0000'
    """
    return format_rfc5322(value, _NETNEWS_FORMAT)
