"""Diagnostic system for datewire errors.

Provides structured error diagnostics with codes, hints, and reference URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import DateFormatError, DateParseError, DateWireError, TemplateError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DateFormatError",
    "DateParseError",
    "DateWireError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "TemplateError",
]
