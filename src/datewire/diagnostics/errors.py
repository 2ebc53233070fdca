"""datewire exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust/Elm-inspired error messages.
All exceptions can store Diagnostic objects for rich error information.

Every exception derives from ValueError: callers that only care about
"invalid input" can catch ValueError, while callers that need the
failure variant inspect ``error.diagnostic.code``.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DateFormatError",
    "DateParseError",
    "DateWireError",
    "TemplateError",
]


class DateWireError(ValueError):
    """Base exception for all datewire errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateWireError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DateParseError(DateWireError):
    """Text could not be parsed into canonical fields.

    Raised for grammar mismatches, out-of-range fields, strict weekday
    mismatches, and unresolvable zones.

    Attributes:
        input_value: The text that failed to parse
        format_name: Wire format whose grammar was applied

    Example:
        >>> from datewire.codecs import imf_fixdate
        >>> try:
        ...     imf_fixdate.parse("Mon, 06 Nov 1994 08:49:37 GMT")
        ... except DateParseError as error:
        ...     print(error.diagnostic.code.name)
        WEEKDAY_MISMATCH
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        format_name: str = "",
    ) -> None:
        """Initialize DateParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The text that failed to parse
            format_name: Wire format whose grammar was applied
        """
        super().__init__(message)
        if isinstance(message, Diagnostic):
            input_value = input_value or (message.input_value or "")
            format_name = format_name or (message.format_name or "")
        self.input_value = input_value
        self.format_name = format_name


class DateFormatError(DateWireError):
    """A value could not be rendered or converted.

    Raised for unsupported input types and for zone/offset conflicts at the
    canonical value boundary. Formatting a valid aware datetime never raises.
    """


class TemplateError(DateWireError):
    """Pattern-template compilation or use failed.

    Unsupported symbols and unterminated literals fail at compile time;
    missing fields fail at format time.
    """
