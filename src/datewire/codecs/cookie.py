"""Cookie date codec (RFC 6265 Section 5.1.1).

Cookie Expires attributes are written by every generation of server
software, so RFC 6265 parses them with a token-recovery algorithm rather
than a grammar. The text is split on a wide delimiter class. Each token is
then offered, in a fixed order, to the slots that are still empty:

    1. time          hh:mm[:ss] (1-2 digits each; seconds default to 0)
    2. day-of-month  1-2 digits
    3. month         first three letters name a month
    4. year          2-4 digits

Digits may be followed by any non-digit suffix. The first slot that accepts
a token wins, and tokens no slot wants are ignored. That covers weekdays,
zone names, and noise. The value is always read as UTC.

Two-digit years use the RFC 6265 window (70-99 -> 19xx, 00-69 -> 20xx).
The Netscape / RFC 2965 window (50-99 -> 19xx) is available with
``legacy_years=True`` for documents written against that era.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from datewire.constants import COOKIE_MIN_YEAR
from datewire.core.calendar import validate_date, validate_time
from datewire.core.fields import ParsedDateTime, TemporalFields
from datewire.core.y2k import netscape_year, rfc6265_year
from datewire.diagnostics import DateParseError, ErrorTemplate
from datewire.enums import TimezoneSource, WireFormat
from datewire.syntax.scanner import tokenize_cookie
from datewire.syntax.tokens import match_month_prefix

from . import imf_fixdate

if TYPE_CHECKING:
    from datetime import datetime

__all__ = ["format", "parse", "parse_year"]

logger = logging.getLogger(__name__)

_TIME_RE = re.compile(
    r"([0-9]{1,2}):([0-9]{1,2})(?::([0-9]{1,2}))?(?:[^0-9].*)?", re.DOTALL
)
_DAY_RE = re.compile(r"([0-9]{1,2})(?:[^0-9].*)?", re.DOTALL)
_YEAR_RE = re.compile(r"([0-9]{2,4})(?:[^0-9].*)?", re.DOTALL)


def parse_year(token: str, *, legacy_years: bool = False) -> int | None:
    """Match a year token and apply the two-digit window.

    Returns:
        Windowed year, or None when the token is not 2-4 digits

    Example:
        >>> parse_year("49"), parse_year("50"), parse_year("69"), parse_year("70")
        (2049, 2050, 2069, 1970)
        >>> parse_year("50", legacy_years=True)
        1950
        >>> parse_year("12345") is None
        True
    """
    match = _YEAR_RE.fullmatch(token)
    if match is None:
        return None
    value = int(match.group(1))
    return netscape_year(value) if legacy_years else rfc6265_year(value)


def parse(text: str, *, legacy_years: bool = False) -> TemporalFields:
    """Parse a cookie-date with RFC 6265 token recovery.

    Args:
        text: Expires attribute value
        legacy_years: Use the Netscape / RFC 2965 two-digit window

    Raises:
        DateParseError: INCOMPLETE_DATE when a slot stays empty,
            YEAR_OUT_OF_RANGE for years before 1601, FIELD_OUT_OF_RANGE

    Example:
        >>> fields = parse("Wed, 09-Jun-21 10:18:14 GMT")
        >>> fields.year, fields.month, fields.day
        (2021, 6, 9)
    """
    clock: tuple[int, int, int] | None = None
    day: int | None = None
    month: int | None = None
    year: int | None = None

    for token in tokenize_cookie(text):
        if clock is None and (match := _TIME_RE.fullmatch(token)) is not None:
            clock = (int(match.group(1)), int(match.group(2)), int(match.group(3) or 0))
        elif day is None and (match := _DAY_RE.fullmatch(token)) is not None:
            day = int(match.group(1))
        elif month is None and (found := match_month_prefix(token)) is not None:
            month = found
        elif year is None and (found := parse_year(token, legacy_years=legacy_years)) is not None:
            year = found
        else:
            logger.debug("Ignoring cookie-date token %r", token)

    if clock is None or day is None or month is None or year is None:
        missing = [
            name
            for name, value in (("time", clock), ("day", day), ("month", month), ("year", year))
            if value is None
        ]
        raise DateParseError(
            ErrorTemplate.incomplete_date(text, WireFormat.COOKIE, ", ".join(missing))
        )

    if year < COOKIE_MIN_YEAR:
        raise DateParseError(
            ErrorTemplate.year_out_of_range(year, COOKIE_MIN_YEAR, WireFormat.COOKIE)
        )
    hour, minute, second = clock
    validate_date(year, month, day)
    validate_time(hour, minute, second)
    return ParsedDateTime(
        year, month, day, hour, minute, second, 0, TimezoneSource.OBS_NAME
    ).to_fields()


def format(value: datetime) -> str:  # noqa: A001
    """Render as IMF-fixdate, the form servers should send.

    Example:
        >>> from datetime import UTC, datetime
        >>> format(datetime(2021, 6, 9, 10, 18, 14, tzinfo=UTC))
        'Wed, 09 Jun 2021 10:18:14 GMT'
    """
    return imf_fixdate.format(value)
