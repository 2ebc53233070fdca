"""Scanning, tokenizing, and grammar primitives.

Python 3.13+. Zero external dependencies.
"""

from .cursor import Cursor, ParseResult
from .scanner import (
    format_offset,
    normalize_whitespace,
    parse_numeric_offset,
    strip_comments,
    tokenize_cookie,
)
from .timezones import OBSOLETE_ZONES, TimezoneLookup, parse_timezone
from .tokens import (
    format_month,
    format_weekday,
    format_weekday_full,
    parse_month,
    parse_weekday,
)

__all__ = [
    "OBSOLETE_ZONES",
    "Cursor",
    "ParseResult",
    "TimezoneLookup",
    "format_month",
    "format_offset",
    "format_weekday",
    "format_weekday_full",
    "normalize_whitespace",
    "parse_month",
    "parse_numeric_offset",
    "parse_timezone",
    "parse_weekday",
    "strip_comments",
    "tokenize_cookie",
]
