"""Obsolete and numeric zone resolution for the Email-family grammars.

RFC 822 Section 5 defined named zones (UT, GMT, the US zones) and the
military single-letter zones. RFC 1123 Section 5.2.14 notes that the sign
of the military letters was specified backwards and that in practice they
are unreliable; RFC 5322 Section 4.3 says they SHOULD be read as -0000.
This table keeps the letters as RFC 822 wrote them (A = +1h, N = -1h). Use
the parsed offset for best-effort display only, never for scheduling.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from types import MappingProxyType

from datewire.diagnostics import DateParseError, ErrorTemplate
from datewire.enums import TimezoneSource

from .scanner import parse_numeric_offset

__all__ = [
    "OBSOLETE_ZONES",
    "TimezoneLookup",
    "parse_timezone",
]


def _build_obsolete_zones() -> dict[str, int]:
    zones = {
        "ut": 0,
        "gmt": 0,
        "utc": 0,
        "edt": -4 * 60,
        "est": -5 * 60,
        "cdt": -5 * 60,
        "cst": -6 * 60,
        "mdt": -6 * 60,
        "mst": -7 * 60,
        "pdt": -7 * 60,
        "pst": -8 * 60,
    }
    # Military letters: A..I = +1..+9, K..M = +10..+12, N..Y = -1..-12.
    # J is not assigned. Z is resolved as a numeric zero before this table.
    for hours, letter in enumerate("abcdefghiklm", start=1):
        zones[letter] = hours * 60
    for hours, letter in enumerate("nopqrstuvwxy", start=1):
        zones[letter] = -hours * 60
    return zones


# Lowercase token -> offset in minutes.
OBSOLETE_ZONES = MappingProxyType(_build_obsolete_zones())


@dataclass(frozen=True, slots=True)
class TimezoneLookup:
    """Resolved zone token.

    Attributes:
        offset_minutes: Signed offset from UTC in minutes
        source_tz: Whether the token was numeric or an obsolete name
    """

    offset_minutes: int
    source_tz: TimezoneSource


def parse_timezone(token: str) -> TimezoneLookup:
    """Resolve an RFC 5322 zone token.

    Resolution order:
        1. ``Z``/``z``: offset 0, numeric
        2. Obsolete name table (UT/GMT/UTC, US zones, military letters)
        3. Numeric ``+HHMM`` / ``+HH:MM``
        4. Any other purely alphabetic token: offset 0, obs-name
           (RFC 5322 treats unknown alphabetic zones as -0000)

    Args:
        token: Zone token as it appeared on the wire

    Returns:
        TimezoneLookup with offset and provenance

    Raises:
        DateParseError: INVALID_NUMERIC_OFFSET for out-of-range numeric zones,
            UNRECOGNIZED_TIMEZONE for anything else

    Example:
        >>> parse_timezone("Q")
        TimezoneLookup(offset_minutes=-240, source_tz=<TimezoneSource.OBS_NAME: 'obs-name'>)
        >>> parse_timezone("+0400").offset_minutes
        240
    """
    key = token.lower()
    if key == "z":
        return TimezoneLookup(0, TimezoneSource.NUMERIC)
    offset = OBSOLETE_ZONES.get(key)
    if offset is not None:
        return TimezoneLookup(offset, TimezoneSource.OBS_NAME)

    if token[:1] in ("+", "-"):
        return TimezoneLookup(parse_numeric_offset(token), TimezoneSource.NUMERIC)

    if token and token.isascii() and token.isalpha():
        return TimezoneLookup(0, TimezoneSource.OBS_NAME)

    raise DateParseError(ErrorTemplate.unrecognized_timezone(token))
