"""Enumerations for datewire type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TimezoneSource(StrEnum):
    """Provenance of a parsed zone token.

    StrEnum provides automatic string conversion: str(TimezoneSource.NUMERIC) == "numeric"

    Provenance matters only for round-trip fidelity checks; it never changes
    offset arithmetic. A military letter and a numeric offset may name the
    same nominal offset yet carry different provenance.
    """

    NUMERIC = "numeric"
    """Numeric zone: +0400, -05:00"""

    OBS_NAME = "obs-name"
    """Obsolete named zone: GMT, EST, military letters, unknown alphabetic"""


class FieldKind(StrEnum):
    """Date field symbol understood by the pattern-template compiler.

    Values are the tr35 pattern letters themselves.
    """

    YEAR = "y"
    """Calendar year: yyyy -> 2024, yy -> 24"""

    MONTH = "M"
    """Format-context month: MM -> 01, MMM -> Jan, MMMM -> January"""

    MONTH_STANDALONE = "L"
    """Stand-alone month: same widths as M"""

    IGNORED = "l"
    """Deprecated chinese leap month marker: emits nothing"""

    DAY = "d"
    """Day of month: dd -> 06"""

    HOUR = "H"
    """Hour of day 0-23: HH -> 08"""

    MINUTE = "m"
    """Minute: mm -> 49"""

    SECOND = "s"
    """Second: ss -> 37"""

    FRACTION = "S"
    """Fractional second, truncated: SSS -> 123"""

    WEEKDAY = "E"
    """Weekday name: EEE -> Sun, EEEE -> Sunday"""


class WireFormat(StrEnum):
    """Names of the wire formats handled by the codecs.

    Used in diagnostics so error output names the grammar that rejected input.
    """

    EMAIL = "rfc5322"
    NETNEWS = "rfc5536"
    RFC850 = "rfc850"
    COOKIE = "rfc6265"
    IMF_FIXDATE = "imf-fixdate"
    ASCTIME = "asctime"
    HTTP = "http"
    RFC9557 = "rfc9557"
    TEMPLATE = "template"


__all__ = [
    "FieldKind",
    "TimezoneSource",
    "WireFormat",
]
