"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]

# Reference documents for each wire format, keyed by WireFormat value.
_RFC_BASE = "https://www.rfc-editor.org/rfc"
_FORMAT_DOCS: dict[str, str] = {
    "rfc5322": f"{_RFC_BASE}/rfc5322#section-3.3",
    "rfc5536": f"{_RFC_BASE}/rfc5536#section-3.1.1",
    "rfc850": f"{_RFC_BASE}/rfc850#section-2.1.4",
    "rfc6265": f"{_RFC_BASE}/rfc6265#section-5.1.1",
    "imf-fixdate": f"{_RFC_BASE}/rfc9110#section-5.6.7",
    "asctime": f"{_RFC_BASE}/rfc9110#section-5.6.7",
    "http": f"{_RFC_BASE}/rfc9110#section-5.6.7",
    "rfc9557": f"{_RFC_BASE}/rfc9557#section-4.1",
    "template": "https://unicode.org/reports/tr35/tr35-dates.html#Date_Field_Symbol_Table",
}


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def _doc(format_name: str) -> str | None:
        return _FORMAT_DOCS.get(format_name)

    @staticmethod
    def grammar_mismatch(text: str, format_name: str) -> Diagnostic:
        """Input text does not match the grammar of a wire format.

        Args:
            text: The rejected input
            format_name: Wire format whose grammar was applied

        Returns:
            Diagnostic for GRAMMAR_MISMATCH
        """
        msg = f"Invalid {format_name} date-time: {text!r}"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_MISMATCH,
            message=msg,
            hint="Check field order, separators, and field widths",
            help_url=ErrorTemplate._doc(format_name),
            input_value=text,
            format_name=format_name,
        )

    @staticmethod
    def invalid_month_name(token: str) -> Diagnostic:
        """Month token is not one of jan..dec.

        Args:
            token: The rejected month token

        Returns:
            Diagnostic for INVALID_MONTH_NAME
        """
        msg = f"Invalid month: {token!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_MONTH_NAME,
            message=msg,
            hint="Use a three-letter English month abbreviation (Jan..Dec)",
            input_value=token,
        )

    @staticmethod
    def invalid_weekday_name(token: str) -> Diagnostic:
        """Weekday token is not a known abbreviation or full name.

        Args:
            token: The rejected weekday token

        Returns:
            Diagnostic for INVALID_WEEKDAY_NAME
        """
        msg = f"Invalid weekday: {token!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_WEEKDAY_NAME,
            message=msg,
            hint="Use Sun..Sat or a full English weekday name",
            input_value=token,
        )

    @staticmethod
    def invalid_numeric_offset(token: str) -> Diagnostic:
        """Numeric zone is malformed or out of range.

        Args:
            token: The rejected offset token

        Returns:
            Diagnostic for INVALID_NUMERIC_OFFSET
        """
        msg = f"Invalid numeric zone: {token!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMERIC_OFFSET,
            message=msg,
            hint="Numeric zones are +HHMM or +HH:MM with HH <= 23 and MM <= 59",
            input_value=token,
        )

    @staticmethod
    def unrecognized_timezone(token: str) -> Diagnostic:
        """Zone token is neither numeric nor alphabetic.

        Args:
            token: The rejected zone token

        Returns:
            Diagnostic for UNRECOGNIZED_TIMEZONE
        """
        msg = f"Unrecognized time zone: {token!r}"
        return Diagnostic(
            code=DiagnosticCode.UNRECOGNIZED_TIMEZONE,
            message=msg,
            hint="Use a numeric offset such as +0000",
            input_value=token,
        )

    @staticmethod
    def incomplete_date(text: str, format_name: str, missing: str) -> Diagnostic:
        """A required date or time component was never found.

        Args:
            text: The rejected input
            format_name: Wire format whose grammar was applied
            missing: Name of the missing component(s)

        Returns:
            Diagnostic for INCOMPLETE_DATE
        """
        msg = f"Incomplete {format_name} date-time {text!r}: missing {missing}"
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_DATE,
            message=msg,
            hint="A date needs a day, a month, a year, and a time",
            help_url=ErrorTemplate._doc(format_name),
            input_value=text,
            format_name=format_name,
        )

    @staticmethod
    def unrecognized_annotation(key: str, value: str) -> Diagnostic:
        """Critical annotation with a key this codec does not understand.

        Args:
            key: Annotation key
            value: Annotation value

        Returns:
            Diagnostic for UNRECOGNIZED_ANNOTATION
        """
        msg = f"Unrecognized annotation: !{key}={value}"
        return Diagnostic(
            code=DiagnosticCode.UNRECOGNIZED_ANNOTATION,
            message=msg,
            hint="Drop the '!' critical flag or remove the annotation",
            help_url=ErrorTemplate._doc("rfc9557"),
            input_value=f"[!{key}={value}]",
            format_name="rfc9557",
        )

    @staticmethod
    def annotation_conflict(annotations: str) -> Diagnostic:
        """More than one calendar annotation where one is critical.

        Args:
            annotations: The annotation suffix that conflicts

        Returns:
            Diagnostic for ANNOTATION_CONFLICT
        """
        msg = (
            f"Invalid annotations in {annotations!r}: "
            "more than one u-ca present with critical flag"
        )
        return Diagnostic(
            code=DiagnosticCode.ANNOTATION_CONFLICT,
            message=msg,
            hint="Keep a single [u-ca=...] annotation",
            help_url=ErrorTemplate._doc("rfc9557"),
            input_value=annotations,
            format_name="rfc9557",
        )

    @staticmethod
    def field_out_of_range(
        name: str, value: int, minimum: int, maximum: int
    ) -> Diagnostic:
        """A numeric field lies outside its permitted range.

        Args:
            name: Field name (month, day, hour, ...)
            value: Rejected value
            minimum: Inclusive lower bound
            maximum: Inclusive upper bound

        Returns:
            Diagnostic for FIELD_OUT_OF_RANGE
        """
        msg = f"Value out of range: {minimum} <= {name} ({value}) <= {maximum}"
        return Diagnostic(
            code=DiagnosticCode.FIELD_OUT_OF_RANGE,
            message=msg,
            input_value=str(value),
        )

    @staticmethod
    def weekday_mismatch(
        weekday: str, year: int, month: int, day: int, actual: str
    ) -> Diagnostic:
        """Supplied weekday disagrees with the computed one.

        Args:
            weekday: Weekday found in the input
            year: Parsed year
            month: Parsed month
            day: Parsed day
            actual: Weekday computed for the date

        Returns:
            Diagnostic for WEEKDAY_MISMATCH
        """
        msg = (
            f"Weekday {weekday!r} does not match "
            f"{year:04d}-{month:02d}-{day:02d} ({actual})"
        )
        return Diagnostic(
            code=DiagnosticCode.WEEKDAY_MISMATCH,
            message=msg,
            hint="Correct the weekday or use a lenient format",
            input_value=weekday,
        )

    @staticmethod
    def year_out_of_range(year: int, minimum: int, format_name: str) -> Diagnostic:
        """Year below the floor a format allows.

        Args:
            year: Parsed (and windowed) year
            minimum: Inclusive lower bound
            format_name: Wire format imposing the floor

        Returns:
            Diagnostic for YEAR_OUT_OF_RANGE
        """
        msg = f"Year {year} is below the {format_name} minimum of {minimum}"
        return Diagnostic(
            code=DiagnosticCode.YEAR_OUT_OF_RANGE,
            message=msg,
            help_url=ErrorTemplate._doc(format_name),
            input_value=str(year),
            format_name=format_name,
        )

    @staticmethod
    def unsupported_pattern_symbol(symbol: str, pattern: str) -> Diagnostic:
        """Pattern uses a field letter the compiler does not support.

        Args:
            symbol: Offending field letter
            pattern: Full pattern text

        Returns:
            Diagnostic for UNSUPPORTED_PATTERN_SYMBOL
        """
        msg = f'Unsupported date field symbol: "{symbol}", template: "{pattern}"'
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_PATTERN_SYMBOL,
            message=msg,
            hint="Supported symbols: y M L l d H m s S E; quote literal letters with '...'",
            help_url=ErrorTemplate._doc("template"),
            input_value=pattern,
            format_name="template",
        )

    @staticmethod
    def unterminated_literal(pattern: str) -> Diagnostic:
        """Quoted literal in a pattern never closes.

        Args:
            pattern: Full pattern text

        Returns:
            Diagnostic for UNTERMINATED_LITERAL
        """
        msg = f'Unterminated quoted literal in template: "{pattern}"'
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_LITERAL,
            message=msg,
            hint="Close the literal with ' and write '' for a literal quote",
            help_url=ErrorTemplate._doc("template"),
            input_value=pattern,
            format_name="template",
        )

    @staticmethod
    def missing_template_field(symbol: str, field_name: str, pattern: str) -> Diagnostic:
        """Format input lacks a field the pattern renders.

        Args:
            symbol: Pattern letter needing the field
            field_name: Canonical field name that was absent
            pattern: Full pattern text

        Returns:
            Diagnostic for MISSING_TEMPLATE_FIELD
        """
        msg = (
            f'Template has date field symbol "{symbol}" but no corresponding '
            f'input ({field_name}), template: "{pattern}"'
        )
        return Diagnostic(
            code=DiagnosticCode.MISSING_TEMPLATE_FIELD,
            message=msg,
            input_value=pattern,
            format_name="template",
        )

    @staticmethod
    def unsupported_input_type(type_name: str, format_name: str) -> Diagnostic:
        """Value passed to a formatter is not a supported time-point shape.

        Args:
            type_name: Name of the rejected type
            format_name: Wire format that was requested

        Returns:
            Diagnostic for UNSUPPORTED_INPUT_TYPE
        """
        msg = f"Unsupported temporal type: {type_name}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_INPUT_TYPE,
            message=msg,
            hint="Pass an aware or naive datetime, a date, or a POSIX timestamp",
            input_value=type_name,
            format_name=format_name,
        )

    @staticmethod
    def offset_mismatch(offset: str, time_zone: str, text: str) -> Diagnostic:
        """Explicit offset is not valid for the named zone at that wall time.

        Args:
            offset: Offset found in the input
            time_zone: Zone identifier found in the input
            text: Wall-clock date-time being resolved

        Returns:
            Diagnostic for OFFSET_MISMATCH
        """
        msg = f"Offset {offset} is invalid for {text} in {time_zone}"
        return Diagnostic(
            code=DiagnosticCode.OFFSET_MISMATCH,
            message=msg,
            hint="Remove the offset or correct the bracketed time zone",
            help_url=ErrorTemplate._doc("rfc9557"),
            input_value=text,
            format_name="rfc9557",
        )

    @staticmethod
    def unknown_time_zone(time_zone: str) -> Diagnostic:
        """Zone identifier is not in the installed tz database.

        Args:
            time_zone: Rejected identifier

        Returns:
            Diagnostic for UNKNOWN_TIME_ZONE
        """
        msg = f"Unknown time zone: {time_zone!r}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_TIME_ZONE,
            message=msg,
            hint="Install tzdata or use a fixed offset",
            input_value=time_zone,
        )
