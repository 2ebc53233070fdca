"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Grammar errors (text does not match a wire format)
        2000-2999: Range errors (syntactically valid, semantically invalid)
        3000-3999: Template errors (pattern compilation and use)
        4000-4999: Conversion errors (canonical value boundary)
    """

    # Grammar errors (1000-1999)
    GRAMMAR_MISMATCH = 1001
    INVALID_MONTH_NAME = 1002
    INVALID_WEEKDAY_NAME = 1003
    INVALID_NUMERIC_OFFSET = 1004
    UNRECOGNIZED_TIMEZONE = 1005
    INCOMPLETE_DATE = 1006
    UNRECOGNIZED_ANNOTATION = 1007
    ANNOTATION_CONFLICT = 1008

    # Range errors (2000-2999)
    FIELD_OUT_OF_RANGE = 2001
    WEEKDAY_MISMATCH = 2002
    YEAR_OUT_OF_RANGE = 2003

    # Template errors (3000-3999)
    UNSUPPORTED_PATTERN_SYMBOL = 3001
    UNTERMINATED_LITERAL = 3002
    MISSING_TEMPLATE_FIELD = 3003

    # Conversion errors (4000-4999)
    UNSUPPORTED_INPUT_TYPE = 4001
    OFFSET_MISMATCH = 4002
    UNKNOWN_TIME_ZONE = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (log aggregation, API error payloads).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Reference document for the grammar involved
        input_value: Text or value that was rejected
        format_name: Wire format whose grammar rejected the input
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    input_value: str | None = None
    format_name: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[WEEKDAY_MISMATCH]: Weekday 'Mon' does not match 1994-11-06 (Sun)
              --> imf-fixdate
              = input: Mon, 06 Nov 1994 08:49:37 GMT
              = help: Correct the weekday or use a lenient format
              = note: see https://www.rfc-editor.org/rfc/rfc9110#section-5.6.7

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
