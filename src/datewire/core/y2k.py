"""Two-digit year windows.

The RFCs disagree on how a two-digit year expands, so each window is a
separate function.

    rfc6265_year   00-69 -> 2000-2069, 70-99 -> 1970-1999 (RFC 6265 5.1.1)
    netscape_year  00-49 -> 2000-2049, 50-99 -> 1950-1999 (Netscape / RFC 2965)
    netnews_year   RFC 5322 obs-year, as applied by RFC 5536

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "netnews_year",
    "netscape_year",
    "rfc6265_year",
]


def rfc6265_year(year: int) -> int:
    """Apply the RFC 6265 cookie-date window.

    Values of 100 and above are returned unchanged.

    Example:
        >>> rfc6265_year(69), rfc6265_year(70), rfc6265_year(1994)
        (2069, 1970, 1994)
    """
    if 70 <= year <= 99:
        return year + 1900
    if 0 <= year <= 69:
        return year + 2000
    return year


def netscape_year(year: int) -> int:
    """Apply the historic Netscape / RFC 2965 cookie window.

    Example:
        >>> netscape_year(49), netscape_year(50)
        (2049, 1950)
    """
    if 0 <= year < 50:
        return year + 2000
    if 50 <= year <= 99:
        return year + 1900
    return year


def netnews_year(digits: str) -> int:
    """Expand an RFC 5322 obs-year digit string.

    Two digits: 00-49 -> 20xx, 50-99 -> 19xx. Three digits: 1900 + n.
    Four or more digits are taken verbatim.

    Args:
        digits: ASCII digit string as it appeared on the wire

    Example:
        >>> netnews_year("94"), netnews_year("04"), netnews_year("104")
        (1994, 2004, 2004)
    """
    value = int(digits)
    match len(digits):
        case 2:
            return value + 2000 if value < 50 else value + 1900
        case 3:
            return value + 1900
        case _:
            return value
