"""Month and weekday name tables for the RFC grammars.

The RFC grammars define fixed English tokens (RFC 5322 Section 3.3,
RFC 850 Section 2.1.4). These are protocol constants, not localized text;
pattern templates get their localized names from Babel instead.

Lookups are case-insensitive. Weekday indices use 0 = Sunday.

Python 3.13+. Zero external dependencies.
"""

from datewire.diagnostics import DateParseError, ErrorTemplate

__all__ = [
    "MONTH_ABBREVIATIONS",
    "WEEKDAY_ABBREVIATIONS",
    "WEEKDAY_NAMES",
    "format_month",
    "format_weekday",
    "format_weekday_full",
    "match_month_prefix",
    "parse_month",
    "parse_weekday",
]

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

WEEKDAY_ABBREVIATIONS: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

_MONTH_INDEX: dict[str, int] = {
    name.lower(): index for index, name in enumerate(MONTH_ABBREVIATIONS, start=1)
}

_WEEKDAY_INDEX: dict[str, int] = {
    **{name.lower(): index for index, name in enumerate(WEEKDAY_ABBREVIATIONS)},
    **{name.lower(): index for index, name in enumerate(WEEKDAY_NAMES)},
}


def parse_month(token: str) -> int:
    """Map a three-letter month name to 1..12.

    Raises:
        DateParseError: INVALID_MONTH_NAME

    Example:
        >>> parse_month("NOV")
        11
    """
    index = _MONTH_INDEX.get(token.lower())
    if index is None:
        raise DateParseError(ErrorTemplate.invalid_month_name(token))
    return index


def match_month_prefix(token: str) -> int | None:
    """Match a token whose first three letters name a month.

    RFC 6265 month tokens are ``month *OCTET``, so "June" and "Junk" both
    match June. Returns None instead of raising: cookie parsing tries other
    token shapes on failure.
    """
    return _MONTH_INDEX.get(token[:3].lower()) if len(token) >= 3 else None


def parse_weekday(token: str) -> int:
    """Map an abbreviated or full weekday name to 0 (Sunday) .. 6.

    Raises:
        DateParseError: INVALID_WEEKDAY_NAME

    Example:
        >>> parse_weekday("sunday"), parse_weekday("Sat")
        (0, 6)
    """
    index = _WEEKDAY_INDEX.get(token.lower())
    if index is None:
        raise DateParseError(ErrorTemplate.invalid_weekday_name(token))
    return index


def _lookup(table: tuple[str, ...], index: int, what: str) -> str:
    if not 0 <= index < len(table):
        msg = f"{what} index out of range: {index}"
        raise ValueError(msg)
    return table[index]


def format_month(month: int) -> str:
    """Render month 1..12 as its abbreviation."""
    return _lookup(MONTH_ABBREVIATIONS, month - 1, "Month")


def format_weekday(weekday: int) -> str:
    """Render weekday 0..6 (0 = Sunday) as its abbreviation."""
    return _lookup(WEEKDAY_ABBREVIATIONS, weekday, "Weekday")


def format_weekday_full(weekday: int) -> str:
    """Render weekday 0..6 (0 = Sunday) as its full name (RFC 850)."""
    return _lookup(WEEKDAY_NAMES, weekday, "Weekday")
