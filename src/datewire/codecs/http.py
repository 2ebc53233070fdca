"""HTTP-date codec (RFC 9110 Section 5.6.7).

Recipients must accept three layouts, tried in order:

    IMF-fixdate  Sun, 06 Nov 1994 08:49:37 GMT
    RFC 850      Sunday, 06-Nov-94 08:49:37 GMT
    asctime      Sun Nov  6 08:49:37 1994

Senders must only generate IMF-fixdate, so ``format`` always does.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datewire.core.y2k import netnews_year
from datewire.diagnostics import DateParseError, ErrorTemplate
from datewire.enums import WireFormat

from . import imf_fixdate
from .asctime import parse_asctime
from .imf_fixdate import parse_imf_fixdate
from .rfc850 import match_rfc850
from .rfc5322 import ParseOptions, resolve_raw_date

if TYPE_CHECKING:
    from datetime import datetime

    from datewire.core.fields import TemporalFields

__all__ = ["format", "parse"]

_RFC850_OPTIONS = ParseOptions(strict=False, allow_leap_second=False)


def parse(text: str) -> TemporalFields:
    """Parse any of the three HTTP-date layouts.

    Raises:
        DateParseError: GRAMMAR_MISMATCH when no layout matches, or a field
            validation failure from the layout that did

    Example:
        >>> parse("Sunday, 06-Nov-94 08:49:37 GMT").year
        1994
    """
    trimmed = text.strip()
    if (parsed := parse_imf_fixdate(trimmed)) is not None:
        return parsed.to_fields()
    if (raw := match_rfc850(trimmed, require_gmt=True)) is not None:
        return resolve_raw_date(
            raw,
            year_resolver=netnews_year,
            options=_RFC850_OPTIONS,
            format_name=WireFormat.HTTP,
        ).to_fields()
    if (parsed := parse_asctime(trimmed)) is not None:
        return parsed.to_fields()
    raise DateParseError(ErrorTemplate.grammar_mismatch(text, WireFormat.HTTP))


def format(value: datetime) -> str:  # noqa: A001
    """Render as IMF-fixdate."""
    return imf_fixdate.format(value)
