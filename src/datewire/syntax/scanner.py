"""Whitespace, comment, and token normalization shared by all formats.

Provides:
    strip_comments       RFC 5322 CFWS comment removal (nested parentheses)
    normalize_whitespace RFC 5322 unfolding and space collapsing
    tokenize_cookie      RFC 6265 Section 5.1.1 delimiter-based tokenizer
    parse_numeric_offset / format_offset  +HHMM <-> minutes

Comment and whitespace handling is total: it never raises. Only malformed
numeric offsets raise.

Python 3.13+. Zero external dependencies.
"""

import re

from datewire.diagnostics import DateParseError, ErrorTemplate

__all__ = [
    "format_offset",
    "normalize_whitespace",
    "parse_numeric_offset",
    "strip_comments",
    "tokenize_cookie",
]

_UNFOLD_RE = re.compile(r"\r\n[\t ]+")
_WSP_RE = re.compile(r"[\t ]+")

# RFC 6265 Section 5.1.1:
#   delimiter = %x09 / %x20-2F / %x3B-40 / %x5B-60 / %x7B-7E
_COOKIE_DELIMITER_RE = re.compile(r"[\x09\x20-\x2F\x3B-\x40\x5B-\x60\x7B-\x7E]+")

_NUMERIC_OFFSET_RE = re.compile(r"([+-])([0-9]{2})(?::?([0-9]{2}))?")


def strip_comments(text: str) -> str:
    """Remove RFC 5322 parenthesized comments.

    Nesting is tracked with a depth counter. An unmatched ``)`` outside any
    comment is kept verbatim; an unclosed ``(`` swallows the rest of the text.

    Example:
        >>> strip_comments("Sun, 06 Nov 1994 (a (nested) note) 08:49:37 GMT")
        'Sun, 06 Nov 1994  08:49:37 GMT'
        >>> strip_comments("a ) b")
        'a ) b'
    """
    out: list[str] = []
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth > 0:
                depth -= 1
            else:
                out.append(ch)
        elif depth == 0:
            out.append(ch)
    return "".join(out)


def normalize_whitespace(text: str) -> str:
    """Unfold ``CRLF WSP+`` and collapse tab/space runs to one space, then trim.

    Example:
        >>> normalize_whitespace("  Sun,\\r\\n\\t06   Nov ")
        'Sun, 06 Nov'
    """
    return _WSP_RE.sub(" ", _UNFOLD_RE.sub(" ", text)).strip()


def tokenize_cookie(text: str) -> list[str]:
    """Split a cookie-date into date-tokens.

    Example:
        >>> tokenize_cookie("Wed, 09-Jun-2021 10:18:14 GMT")
        ['Wed', '09', 'Jun', '2021', '10:18:14', 'GMT']

    Note:
        ``:`` (0x3A) is not a delimiter, so ``hh:mm:ss`` stays one token.
    """
    return [token for token in _COOKIE_DELIMITER_RE.split(text) if token]


def parse_numeric_offset(text: str) -> int:
    """Parse ``+HHMM``, ``+HH:MM``, or ``+HH`` into signed minutes.

    Args:
        text: Offset text

    Returns:
        Signed offset in minutes

    Raises:
        DateParseError: INVALID_NUMERIC_OFFSET on bad syntax, HH > 23, or MM > 59

    Example:
        >>> parse_numeric_offset("-0530")
        -330
    """
    match = _NUMERIC_OFFSET_RE.fullmatch(text)
    if match is None:
        raise DateParseError(ErrorTemplate.invalid_numeric_offset(text))
    sign, hh, mm = match.groups()
    hours = int(hh)
    minutes = int(mm) if mm else 0
    if hours > 23 or minutes > 59:
        raise DateParseError(ErrorTemplate.invalid_numeric_offset(text))
    total = hours * 60 + minutes
    return -total if sign == "-" else total


def format_offset(minutes: int, *, use_colon: bool = False, use_z: bool = False) -> str:
    """Render signed minutes as ``+HHMM`` / ``+HH:MM`` (or ``Z``).

    Args:
        minutes: Signed offset in minutes
        use_colon: Separate hours and minutes with ``:``
        use_z: Render a zero offset as ``Z``

    Example:
        >>> format_offset(-330), format_offset(60, use_colon=True), format_offset(0, use_z=True)
        ('-0530', '+01:00', 'Z')
    """
    if minutes == 0 and use_z:
        return "Z"
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    separator = ":" if use_colon else ""
    return f"{sign}{hours:02d}{separator}{mins:02d}"
