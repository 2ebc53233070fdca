"""Per-format entry points over the canonical Python value types.

Each TemporalCodec binds one wire format's parse and format functions to
the conversions in datewire.runtime.convert:

    >>> from datewire.formats import HTTP, RFC9557
    >>> HTTP.to_instant("Sun, 06 Nov 1994 08:49:37 GMT").isoformat()
    '1994-11-06T08:49:37+00:00'
    >>> RFC9557.format(0)
    '1970-01-01T00:00:00+00:00[UTC]'

Accepted format inputs (the time-point shapes):
    aware datetime   zoned date-time
    naive datetime   plain date-time in the codec's default zone (UTC)
    date             midnight in the default zone
    int / float      instant, POSIX timestamp

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from typing import TYPE_CHECKING

from datewire.codecs import asctime, cookie, email, http, imf_fixdate, netnews, rfc850, rfc9557
from datewire.constants import DEFAULT_LOCALE, DEFAULT_TIME_ZONE
from datewire.enums import WireFormat
from datewire.runtime.convert import (
    to_aware,
    to_plain_datetime,
    to_plain_time,
    to_time_zone,
    to_zoned_datetime,
)
from datewire.template import TemplateCache, get_template

if TYPE_CHECKING:
    from collections.abc import Callable

    from datewire.core.fields import TemporalFields

__all__ = [
    "ASCTIME",
    "COOKIE",
    "EMAIL",
    "HTTP",
    "IMF_FIXDATE",
    "NETNEWS",
    "RFC850",
    "RFC9557",
    "TemporalCodec",
    "TimePoint",
    "from_pattern",
]

type TimePoint = datetime | date | int | float


@dataclass(frozen=True, slots=True)
class TemporalCodec:
    """A wire format bound to the canonical value conversions.

    Attributes:
        name: Format identifier used in diagnostics
        parser: ``text -> TemporalFields``
        formatter: ``aware datetime -> text``
        default_time_zone: Zone for naive inputs and zone-less parses
    """

    name: str
    parser: Callable[[str], TemporalFields]
    formatter: Callable[[datetime], str]
    default_time_zone: str = DEFAULT_TIME_ZONE

    def parse(self, text: str) -> TemporalFields:
        """Parse text into a field record."""
        return self.parser(text)

    def format(self, value: TimePoint) -> str:
        """Render any supported time-point shape.

        Raises:
            DateFormatError: UNSUPPORTED_INPUT_TYPE for ``time`` and other types
        """
        return self.formatter(to_aware(value, self.default_time_zone, format_name=self.name))

    def to_zoned_datetime(self, text: str) -> datetime:
        """Parse into an aware datetime in the parsed (or default) zone."""
        return to_zoned_datetime(self.parse(text), self.default_time_zone)

    def to_instant(self, text: str) -> datetime:
        """Parse into an aware datetime expressed in UTC."""
        return to_time_zone(self.to_zoned_datetime(text), UTC)

    def to_datetime(self, text: str) -> datetime:
        """Parse into a naive wall-clock datetime, dropping the zone."""
        return to_plain_datetime(self.parse(text))

    def to_date(self, text: str) -> date:
        """Parse into the calendar date of the wall clock."""
        return to_plain_datetime(self.parse(text)).date()

    def to_time(self, text: str) -> time:
        """Parse into a naive wall-clock time."""
        return to_plain_time(self.parse(text))


EMAIL = TemporalCodec(WireFormat.EMAIL, email.parse, email.format)
NETNEWS = TemporalCodec(WireFormat.NETNEWS, netnews.parse, netnews.format)
RFC850 = TemporalCodec(WireFormat.RFC850, rfc850.parse, rfc850.format)
COOKIE = TemporalCodec(WireFormat.COOKIE, cookie.parse, cookie.format)
IMF_FIXDATE = TemporalCodec(WireFormat.IMF_FIXDATE, imf_fixdate.parse, imf_fixdate.format)
ASCTIME = TemporalCodec(WireFormat.ASCTIME, asctime.parse, asctime.format)
HTTP = TemporalCodec(WireFormat.HTTP, http.parse, http.format)
RFC9557 = TemporalCodec(WireFormat.RFC9557, rfc9557.parse, rfc9557.format)


def from_pattern(
    pattern: str,
    *,
    locale_code: str = DEFAULT_LOCALE,
    default_time_zone: str = DEFAULT_TIME_ZONE,
    cache: TemplateCache | None = None,
) -> TemporalCodec:
    """Build a codec backed by a pattern template.

    The template renders the wall clock of the value it is given; zone-less
    parses are placed in default_time_zone.

    Raises:
        TemplateError: When the pattern does not compile

    Example:
        >>> codec = from_pattern("dd.MM.yyyy")
        >>> codec.to_date("06.11.1994")
        datetime.date(1994, 11, 6)
    """
    template = get_template(pattern, cache, locale_code=locale_code)
    return TemporalCodec(WireFormat.TEMPLATE, template.parse, template.format, default_time_zone)
