"""Locale utilities for pattern templates.

Wraps Babel so that the template compiler can ask for month and weekday
names by width without knowing CLDR's data layout. Protocol grammars never
come here; their English tokens are fixed by the RFCs.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "NameWidth",
    "get_babel_locale",
    "month_names",
    "normalize_locale",
    "weekday_names",
]

type NameWidth = Literal["abbreviated", "wide", "narrow"]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> get_babel_locale("en-US").territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


@functools.lru_cache(maxsize=128)
def month_names(
    locale_code: str, width: NameWidth, *, standalone: bool = False
) -> tuple[str, ...]:
    """Return the twelve month names, January first.

    ``standalone`` selects the CLDR stand-alone context (pattern letter L)
    instead of the formatting context (M). The two differ in languages that
    inflect month names inside a date, such as Russian.

    Example:
        >>> month_names("en", "abbreviated")[10]
        'Nov'
    """
    context = "stand-alone" if standalone else "format"
    table = get_babel_locale(locale_code).months[context][width]
    return tuple(table[month] for month in range(1, 13))


@functools.lru_cache(maxsize=128)
def weekday_names(locale_code: str, width: NameWidth) -> tuple[str, ...]:
    """Return the seven formatting-context weekday names, Sunday first.

    CLDR numbers days from Monday (0); the result is rotated so that the
    index matches ``day_of_week`` (0 = Sunday).

    Example:
        >>> weekday_names("en", "wide")[0]
        'Sunday'
    """
    table = get_babel_locale(locale_code).days["format"][width]
    return tuple(table[(day + 6) % 7] for day in range(7))
