"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


def _escape_control(text: str) -> str:
    """Render CR, LF, and other control characters visibly.

    Wire input routinely contains folded header whitespace; echoing it raw
    would split one diagnostic across several log lines.
    """
    return "".join(
        ch if ch.isprintable() else ch.encode("unicode_escape").decode("ascii")
        for ch in text
    )


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output. Supports multiple output formats and
    sanitization options.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.invalid_month_name("Foo")
        >>> print(formatter.format(diagnostic))
        error[INVALID_MONTH_NAME]: Invalid month: 'Foo'
          = input: Foo
          = help: Use a three-letter English month abbreviation (Jan..Dec)

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        INVALID_MONTH_NAME: Invalid month: 'Foo'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics separated by blank lines
        """
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[GRAMMAR_MISMATCH]: Invalid asctime date-time: 'Sun Nov'
              --> asctime
              = input: Sun Nov
              = help: Check field order, separators, and field widths
              = note: see https://www.rfc-editor.org/rfc/rfc9110#section-5.6.7
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._maybe_sanitize(_escape_control(diagnostic.message))
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.format_name:
            parts.append(f"  --> {diagnostic.format_name}")

        if diagnostic.input_value is not None:
            value = self._maybe_sanitize(_escape_control(diagnostic.input_value))
            parts.append(f"  = input: {value}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            WEEKDAY_MISMATCH: Weekday 'Mon' does not match 1994-11-06 (Sun)
        """
        message = self._maybe_sanitize(_escape_control(diagnostic.message))
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "GRAMMAR_MISMATCH", "code_value": 1001, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.format_name:
            data["format_name"] = diagnostic.format_name

        if diagnostic.input_value is not None:
            data["input_value"] = self._maybe_sanitize(diagnostic.input_value)

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
