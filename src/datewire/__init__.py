"""datewire - multi-format temporal text codec.

Parses and formats the textual date-time formats of Internet protocols and
ad-hoc pattern templates, converting through Python's datetime types.

Public API:
    EMAIL, NETNEWS, RFC850, COOKIE, IMF_FIXDATE, ASCTIME, HTTP, RFC9557 -
        Per-format codecs (see datewire.formats.TemporalCodec)
    from_pattern - Codec backed by a TR35-style pattern template
    TemporalFields - Sparse field record produced by every parser

Exceptions:
    DateWireError - Base exception class (a ValueError)
    DateParseError - Text does not match or holds invalid fields
    DateFormatError - Value cannot be rendered
    TemplateError - Pattern does not compile or lacks input

Submodules:
    datewire.codecs - Raw parse/format functions per wire format
    datewire.template - Pattern compiler and TemplateCache
    datewire.runtime - Conversions between fields and datetime values
    datewire.diagnostics - Diagnostic codes, templates, and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core.fields import TemporalFields
from .diagnostics import DateFormatError, DateParseError, DateWireError, TemplateError
from .formats import (
    ASCTIME,
    COOKIE,
    EMAIL,
    HTTP,
    IMF_FIXDATE,
    NETNEWS,
    RFC850,
    RFC9557,
    TemporalCodec,
    from_pattern,
)

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("datewire")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ASCTIME",
    "COOKIE",
    "EMAIL",
    "HTTP",
    "IMF_FIXDATE",
    "NETNEWS",
    "RFC850",
    "RFC9557",
    "DateFormatError",
    "DateParseError",
    "DateWireError",
    "TemplateError",
    "TemporalCodec",
    "TemporalFields",
    "__version__",
    "from_pattern",
]
