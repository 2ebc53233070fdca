"""Wire-format codecs.

Each module exposes ``parse(text) -> TemporalFields`` and
``format(value) -> str`` for one textual date-time format:

    email        RFC 5322 message dates (with RFC 2822 obsolete syntax)
    netnews      RFC 5536 Date headers, lenient legacy layouts
    rfc850       RFC 850 / RFC 1036 dates
    cookie       RFC 6265 cookie-date token recovery
    imf_fixdate  RFC 9110 preferred HTTP-date
    asctime      C library asctime() layout
    http         RFC 9110 HTTP-date (all three layouts)
    rfc9557      RFC 3339 / ISO 8601 with suffix annotations

Python 3.13+.
"""

from . import asctime, cookie, email, http, imf_fixdate, netnews, rfc850, rfc9557

__all__ = [
    "asctime",
    "cookie",
    "email",
    "http",
    "imf_fixdate",
    "netnews",
    "rfc850",
    "rfc9557",
]
