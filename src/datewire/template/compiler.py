"""Pattern-template compiler.

Compiles a Unicode TR35-style date pattern such as ``"EEE, d MMM yyyy"``
into a CompiledTemplate that can both format and parse.

Pattern syntax:
    - ASCII letters are field symbols; a run of one letter is one field
      whose length selects the rendering (see the symbol table below)
    - Any other character is literal text
    - ``'...'`` quotes literal text, and ``''`` is a literal single quote
      (inside or outside a quoted run)

Symbols:
    y       year. ``y`` unpadded, ``yy`` two low digits (parsed through the
            netnews century window), ``yyy+`` zero-padded to the run length
    M, L    month. 1-2 numeric, 3 abbreviated, 4 wide, 5 narrow (format
            only). L uses the stand-alone name context
    d H m s day, hour, minute, second. Zero-padded to two digits; longer
            runs pad with U+FFFD
    S       fractional second, truncated to the run length
    E       weekday. 1-3 abbreviated, 4 wide, 5 narrow (format only);
            checked leniently when parsing
    l       ignored; renders nothing

Compilation yields a tuple of LiteralPart/FieldPart values plus, for each
part, one format closure and (for fields) one regex group with a setter
closure that writes the captured text into the result record.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING

from datewire.constants import DEFAULT_LOCALE, REPLACEMENT_CHAR, SOFT_FIELD_LIMIT
from datewire.core.calendar import day_of_week, days_in_month, validate_date, validate_weekday
from datewire.core.fields import TemporalFields
from datewire.core.y2k import netnews_year
from datewire.diagnostics import DateFormatError, DateParseError, ErrorTemplate, TemplateError
from datewire.enums import FieldKind, WireFormat
from datewire.locale_utils import month_names, weekday_names
from datewire.runtime.convert import fields_from_datetime

if TYPE_CHECKING:
    from collections.abc import Callable

    from datewire.locale_utils import NameWidth

__all__ = [
    "CompiledTemplate",
    "FieldPart",
    "LiteralPart",
    "TemplatePart",
    "compile_template",
    "scan_pattern",
]

logger = logging.getLogger(__name__)

# Any month in a year-less parse; keeps February 29 valid.
_REFERENCE_LEAP_YEAR = 1972

_TIME_LIMITS: tuple[tuple[str, int], ...] = (("hour", 23), ("minute", 59), ("second", 59))

_SOFT_FIELDS: dict[FieldKind, str] = {
    FieldKind.DAY: "day",
    FieldKind.HOUR: "hour",
    FieldKind.MINUTE: "minute",
    FieldKind.SECOND: "second",
}


# ============================================================================
# PARTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class LiteralPart:
    """Literal text, emitted verbatim and matched exactly."""

    text: str


@dataclass(frozen=True, slots=True)
class FieldPart:
    """A run of one field symbol."""

    kind: FieldKind
    length: int

    @property
    def symbol(self) -> str:
        """Pattern text of the run, e.g. ``"MMM"``."""
        return str(self.kind) * self.length


type TemplatePart = LiteralPart | FieldPart


def _field_kind(char: str, pattern: str) -> FieldKind:
    try:
        return FieldKind(char)
    except ValueError as e:
        raise TemplateError(ErrorTemplate.unsupported_pattern_symbol(char, pattern)) from e


def scan_pattern(pattern: str) -> tuple[TemplatePart, ...]:
    """Split a pattern into literal and field parts.

    Adjacent literal text (quoted or not) is merged into one LiteralPart.

    Raises:
        TemplateError: UNSUPPORTED_PATTERN_SYMBOL, UNTERMINATED_LITERAL

    Example:
        >>> [type(part).__name__ for part in scan_pattern("d 'de' MMMM")]
        ['FieldPart', 'LiteralPart', 'FieldPart']
    """
    parts: list[TemplatePart] = []
    literal: list[str] = []
    i = 0
    n = len(pattern)

    def flush_literal() -> None:
        if literal:
            parts.append(LiteralPart("".join(literal)))
            literal.clear()

    while i < n:
        char = pattern[i]

        if char == "'":
            # '' outside a quoted section is a literal single quote
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            i += 1
            while True:
                if i >= n:
                    raise TemplateError(ErrorTemplate.unterminated_literal(pattern))
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal.append("'")
                        i += 2
                        continue
                    i += 1
                    break
                literal.append(pattern[i])
                i += 1
            continue

        if char.isascii() and char.isalpha():
            kind = _field_kind(char, pattern)
            run_end = i
            while run_end < n and pattern[run_end] == char:
                run_end += 1
            flush_literal()
            parts.append(FieldPart(kind, run_end - i))
            i = run_end
            continue

        literal.append(char)
        i += 1

    flush_literal()
    return tuple(parts)


# ============================================================================
# FIELD CLOSURES
# ============================================================================


@dataclass(slots=True)
class _Capture:
    """Mutable parse state: the field record plus a parsed weekday."""

    fields: TemporalFields = field(default_factory=TemporalFields)
    weekday: int | None = None


type _Formatter = Callable[[TemporalFields], str]
type _Setter = Callable[[_Capture, str], None]


def _name_width(length: int) -> NameWidth:
    if length >= 5:
        return "narrow"
    return "wide" if length == 4 else "abbreviated"


def _literal(text: str) -> _Formatter:
    return lambda _fields: text


def _require(fields: TemporalFields, name: str, part: FieldPart, pattern: str) -> int:
    value = getattr(fields, name)
    if value is None:
        raise TemplateError(ErrorTemplate.missing_template_field(part.symbol, name, pattern))
    return int(value)


def _soft_pad(value: int, length: int) -> str:
    if length == 1:
        return str(value)
    text = f"{value:0{SOFT_FIELD_LIMIT}d}"
    return text + REPLACEMENT_CHAR * (length - SOFT_FIELD_LIMIT)


def _soft_regex(length: int) -> str:
    if length == 1:
        return r"(\d{1,2})"
    return rf"(\d{{{SOFT_FIELD_LIMIT}}})" + REPLACEMENT_CHAR * (length - SOFT_FIELD_LIMIT)


def _names_regex(names: tuple[str, ...]) -> str:
    alternatives = sorted(set(names), key=len, reverse=True)
    return "((?i:" + "|".join(re.escape(name) for name in alternatives) + "))"


def _name_setter(names: tuple[str, ...], apply: Callable[[_Capture, int], None]) -> _Setter:
    index = {name.casefold(): position for position, name in enumerate(names)}

    def setter(capture: _Capture, text: str) -> None:
        apply(capture, index[text.casefold()])

    return setter


def _year_closures(part: FieldPart, pattern: str) -> tuple[_Formatter, str, _Setter]:
    length = part.length

    def fmt(fields: TemporalFields) -> str:
        year = _require(fields, "year", part, pattern)
        if length == 1:
            return str(year)
        if length == 2:
            return f"{year % 100:02d}"
        sign = "-" if year < 0 else ""
        return f"{sign}{abs(year):0{length}d}"

    def setter(capture: _Capture, text: str) -> None:
        capture.fields.year = netnews_year(text) if length == 2 else int(text)

    if length == 1:
        regex = r"(-?\d+)"
    elif length == 2:
        regex = r"(\d{2})"
    else:
        regex = rf"(-?\d{{{length},}})"
    return fmt, regex, setter


def _month_closures(
    part: FieldPart, pattern: str, locale_code: str
) -> tuple[_Formatter, str | None, _Setter | None]:
    length = part.length
    if length <= 2:

        def fmt_numeric(fields: TemporalFields) -> str:
            month = _require(fields, "month", part, pattern)
            return str(month) if length == 1 else f"{month:02d}"

        def set_numeric(capture: _Capture, text: str) -> None:
            capture.fields.month = int(text)

        return fmt_numeric, r"(\d{1,2})" if length == 1 else r"(\d{2})", set_numeric

    names = month_names(
        locale_code, _name_width(length),
        standalone=part.kind is FieldKind.MONTH_STANDALONE,
    )

    def fmt_name(fields: TemporalFields) -> str:
        return names[_require(fields, "month", part, pattern) - 1]

    if length >= 5:
        return fmt_name, None, None

    def apply(capture: _Capture, position: int) -> None:
        capture.fields.month = position + 1

    return fmt_name, _names_regex(names), _name_setter(names, apply)


def _weekday_closures(
    part: FieldPart, pattern: str, locale_code: str
) -> tuple[_Formatter, str | None, _Setter | None]:
    names = weekday_names(locale_code, _name_width(part.length))

    def fmt(fields: TemporalFields) -> str:
        year = _require(fields, "year", part, pattern)
        month = _require(fields, "month", part, pattern)
        day = _require(fields, "day", part, pattern)
        return names[day_of_week(year, month, day)]

    if part.length >= 5:
        return fmt, None, None

    def apply(capture: _Capture, position: int) -> None:
        capture.weekday = position

    return fmt, _names_regex(names), _name_setter(names, apply)


def _soft_closures(part: FieldPart, pattern: str) -> tuple[_Formatter, str, _Setter]:
    name = _SOFT_FIELDS[part.kind]

    def fmt(fields: TemporalFields) -> str:
        return _soft_pad(_require(fields, name, part, pattern), part.length)

    def setter(capture: _Capture, text: str) -> None:
        setattr(capture.fields, name, int(text))

    return fmt, _soft_regex(part.length), setter


def _fraction_closures(part: FieldPart, pattern: str) -> tuple[_Formatter, str, _Setter]:
    length = part.length

    def fmt(fields: TemporalFields) -> str:
        _require(fields, "millisecond", part, pattern)
        digits = f"{fields.fraction_nanoseconds():09d}"
        return digits[:length] if length <= 9 else digits.ljust(length, "0")

    def setter(capture: _Capture, text: str) -> None:
        capture.fields.set_fraction(int(text[:9].ljust(9, "0")))

    return fmt, rf"(\d{{{length}}})", setter


def _closures(
    part: FieldPart, pattern: str, locale_code: str
) -> tuple[_Formatter, str | None, _Setter | None]:
    """Return (formatter, regex group or None, setter or None) for a field."""
    match part.kind:
        case FieldKind.YEAR:
            return _year_closures(part, pattern)
        case FieldKind.MONTH | FieldKind.MONTH_STANDALONE:
            return _month_closures(part, pattern, locale_code)
        case FieldKind.WEEKDAY:
            return _weekday_closures(part, pattern, locale_code)
        case FieldKind.FRACTION:
            return _fraction_closures(part, pattern)
        case FieldKind.IGNORED:
            return (lambda _fields: ""), "", None
        case _:
            return _soft_closures(part, pattern)


def _check_range(name: str, value: int | None, maximum: int, minimum: int = 0) -> None:
    if value is not None and not minimum <= value <= maximum:
        raise DateParseError(ErrorTemplate.field_out_of_range(name, value, minimum, maximum))


def _validate(capture: _Capture) -> None:
    fields = capture.fields
    if fields.month is not None:
        _check_range("month", fields.month, 12, 1)
    if fields.day is not None:
        if fields.year is not None and fields.month is not None:
            validate_date(fields.year, fields.month, fields.day)
        elif fields.month is not None:
            _check_range("day", fields.day, days_in_month(_REFERENCE_LEAP_YEAR, fields.month), 1)
        else:
            _check_range("day", fields.day, 31, 1)
    for name, maximum in _TIME_LIMITS:
        _check_range(name, getattr(fields, name), maximum)
    year, month, day = fields.year, fields.month, fields.day
    if capture.weekday is not None and year is not None and month is not None and day is not None:
        validate_weekday(year, month, day, capture.weekday, strict=False)


# ============================================================================
# COMPILED TEMPLATE
# ============================================================================


class CompiledTemplate:
    """Format and parse closures compiled from one pattern.

    Instances are immutable after construction and safe to share between
    threads.

    Attributes:
        pattern: Source pattern text
        locale_code: Locale of month and weekday names
        parts: Scanned literal and field parts
    """

    __slots__ = ("_formatters", "_regex", "_setters", "_unparsable", "locale_code", "parts",
                 "pattern")

    def __init__(self, pattern: str, locale_code: str = DEFAULT_LOCALE) -> None:
        self.pattern = pattern
        self.locale_code = locale_code
        self.parts = scan_pattern(pattern)

        formatters: list[_Formatter] = []
        setters: list[_Setter] = []
        regex: list[str] = []
        unparsable: str | None = None

        for part in self.parts:
            if isinstance(part, LiteralPart):
                formatters.append(_literal(part.text))
                regex.append(re.escape(part.text))
                continue
            fmt, group, setter = _closures(part, pattern, locale_code)
            formatters.append(fmt)
            if group is None:
                unparsable = unparsable or part.symbol
                continue
            regex.append(group)
            if setter is not None:
                setters.append(setter)

        self._formatters: tuple[_Formatter, ...] = tuple(formatters)
        self._setters: tuple[_Setter, ...] = tuple(setters)
        self._regex = re.compile("".join(regex))
        self._unparsable = unparsable
        logger.debug(
            "Compiled template %r (%d parts, locale %s)", pattern, len(self.parts), locale_code
        )

    def __repr__(self) -> str:
        return f"CompiledTemplate({self.pattern!r}, locale_code={self.locale_code!r})"

    def format(self, value: TemporalFields | datetime | date) -> str:
        """Render a value through the template.

        Args:
            value: TemporalFields, datetime (naive or aware), or date

        Raises:
            TemplateError: MISSING_TEMPLATE_FIELD
            DateFormatError: UNSUPPORTED_INPUT_TYPE

        Example:
            >>> CompiledTemplate("yyyy-MM-dd").format(date(2024, 2, 29))
            '2024-02-29'
        """
        if isinstance(value, (datetime, date)):
            fields = fields_from_datetime(value)
        elif isinstance(value, TemporalFields):
            fields = value
        else:
            raise DateFormatError(
                ErrorTemplate.unsupported_input_type(type(value).__name__, WireFormat.TEMPLATE)
            )
        return "".join(fmt(fields) for fmt in self._formatters)

    def parse(self, text: str) -> TemporalFields:
        """Parse text that was rendered by this template.

        Raises:
            DateParseError: GRAMMAR_MISMATCH, FIELD_OUT_OF_RANGE
            TemplateError: When the pattern uses a format-only field

        Example:
            >>> fields = CompiledTemplate("d MMM yyyy").parse("6 Nov 1994")
            >>> fields.year, fields.month, fields.day
            (1994, 11, 6)
        """
        if self._unparsable is not None:
            raise TemplateError(
                ErrorTemplate.unsupported_pattern_symbol(self._unparsable, self.pattern)
            )
        match = self._regex.fullmatch(text)
        if match is None:
            raise DateParseError(ErrorTemplate.grammar_mismatch(text, WireFormat.TEMPLATE))
        capture = _Capture()
        for setter, group in zip(self._setters, match.groups(), strict=True):
            setter(capture, group)
        _validate(capture)
        return capture.fields


def compile_template(pattern: str, *, locale_code: str = DEFAULT_LOCALE) -> CompiledTemplate:
    """Compile a pattern without caching.

    Raises:
        TemplateError: UNSUPPORTED_PATTERN_SYMBOL, UNTERMINATED_LITERAL
    """
    return CompiledTemplate(pattern, locale_code)
