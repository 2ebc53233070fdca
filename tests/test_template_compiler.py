"""Tests for the pattern-template compiler.

Covers pattern scanning and quoting, every supported field symbol in both
directions, Babel-backed month and weekday names, and the diagnostics raised
for bad patterns, missing input fields, and mismatched text.

Python 3.13+.
"""

from datetime import UTC, date, datetime

import pytest
from hypothesis import given

from datewire.constants import REPLACEMENT_CHAR
from datewire.core.fields import TemporalFields
from datewire.diagnostics import DateFormatError, DateParseError, DiagnosticCode, TemplateError
from datewire.enums import FieldKind
from datewire.template import (
    CompiledTemplate,
    FieldPart,
    LiteralPart,
    compile_template,
    scan_pattern,
)
from tests.strategies import any_dates


class TestScanPattern:
    """Test splitting patterns into parts."""

    def test_fields_and_literals(self) -> None:
        """Letter runs become fields; everything else is literal."""
        assert scan_pattern("yyyy-MM-dd") == (
            FieldPart(FieldKind.YEAR, 4),
            LiteralPart("-"),
            FieldPart(FieldKind.MONTH, 2),
            LiteralPart("-"),
            FieldPart(FieldKind.DAY, 2),
        )

    def test_quoted_literal_merges(self) -> None:
        """Quoted text merges with the surrounding literal text."""
        assert scan_pattern("d 'de' MMMM") == (
            FieldPart(FieldKind.DAY, 1),
            LiteralPart(" de "),
            FieldPart(FieldKind.MONTH, 4),
        )

    def test_escaped_quote(self) -> None:
        """'' is a literal quote inside and outside quoted runs."""
        assert scan_pattern("''") == (LiteralPart("'"),)
        assert scan_pattern("HH 'o''clock'") == (
            FieldPart(FieldKind.HOUR, 2),
            LiteralPart(" o'clock"),
        )

    def test_symbol_property(self) -> None:
        """FieldPart.symbol reproduces the run."""
        assert FieldPart(FieldKind.MONTH, 3).symbol == "MMM"

    def test_unsupported_symbol(self) -> None:
        """Unknown letters fail with the offending symbol named."""
        with pytest.raises(TemplateError) as exc_info:
            scan_pattern("yyyy QQ")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.UNSUPPORTED_PATTERN_SYMBOL
        assert 'Unsupported date field symbol: "Q", template: "yyyy QQ"' in str(exc_info.value)

    def test_unterminated_literal(self) -> None:
        """A quote that never closes fails."""
        with pytest.raises(TemplateError) as exc_info:
            scan_pattern("yyyy 'at")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNTERMINATED_LITERAL

    def test_quoted_letters_are_literal(self) -> None:
        """Letters inside quotes are never field symbols."""
        template = compile_template("'Q'yyyy")
        assert template.format(date(2024, 1, 1)) == "Q2024"


class TestNumericFields:
    """Test year, month, day, and time fields."""

    def test_iso_date(self) -> None:
        """yyyy-MM-dd renders and reads zero-padded values."""
        template = compile_template("yyyy-MM-dd")
        assert template.format(date(2024, 2, 9)) == "2024-02-09"
        fields = template.parse("2024-02-09")
        assert (fields.year, fields.month, fields.day) == (2024, 2, 9)

    def test_unpadded(self) -> None:
        """Single letters render without padding and read one or two digits."""
        template = compile_template("d/M/y")
        assert template.format(date(2024, 2, 9)) == "9/2/2024"
        fields = template.parse("19/12/2024")
        assert (fields.year, fields.month, fields.day) == (2024, 12, 19)

    @pytest.mark.parametrize(("text", "year"), [("94", 1994), ("49", 2049), ("50", 1950)])
    def test_two_digit_year_window(self, text: str, year: int) -> None:
        """yy reads through the 50-year window."""
        assert compile_template("yy").parse(text).year == year

    def test_two_digit_year_format(self) -> None:
        """yy renders the low two digits."""
        assert compile_template("yy").format(date(2005, 1, 1)) == "05"

    def test_long_year_padding(self) -> None:
        """Runs longer than four pad to the run length."""
        assert compile_template("yyyyy").format(date(994, 1, 1)) == "00994"

    def test_negative_year_round_trip(self) -> None:
        """Years before 1 keep their sign in both directions."""
        template = compile_template("yyyy-MM-dd")
        text = template.format(TemporalFields(year=-100, month=3, day=1))
        assert text == "-0100-03-01"
        fields = template.parse(text)
        assert (fields.year, fields.month, fields.day) == (-100, 3, 1)

    def test_negative_year_unpadded(self) -> None:
        """A single y renders and reads a signed year."""
        template = compile_template("y")
        assert template.format(TemporalFields(year=-44)) == "-44"
        assert template.parse("-44").year == -44

    def test_soft_limit_padding(self) -> None:
        """Runs past two digits pad with U+FFFD in both directions."""
        template = compile_template("ddd")
        assert template.format(date(2024, 1, 6)) == "06" + REPLACEMENT_CHAR
        assert template.parse("06" + REPLACEMENT_CHAR).day == 6

    def test_time_fields(self) -> None:
        """HH:mm:ss round-trips through fields."""
        template = compile_template("HH:mm:ss")
        value = datetime(2024, 1, 1, 8, 49, 37)  # noqa: DTZ001
        assert template.format(value) == "08:49:37"
        fields = template.parse("08:49:37")
        assert (fields.hour, fields.minute, fields.second) == (8, 49, 37)

    def test_fraction_truncates(self) -> None:
        """S truncates instead of rounding."""
        template = compile_template("ss.SSS")
        value = datetime(2024, 1, 1, 0, 0, 5, 123_999, tzinfo=UTC)
        assert template.format(value) == "05.123"

    def test_fraction_parse(self) -> None:
        """Parsed fractions spread across ms, us, and ns."""
        fields = compile_template("ss.SSSSSS").parse("05.123456")
        assert (fields.millisecond, fields.microsecond, fields.nanosecond) == (123, 456, 0)

    def test_ignored_symbol(self) -> None:
        """l renders nothing and reads nothing."""
        template = compile_template("yyyyl")
        assert template.format(date(2024, 1, 1)) == "2024"
        assert template.parse("2024").year == 2024


class TestNames:
    """Test Babel-backed month and weekday names."""

    def test_english_names(self) -> None:
        """MMM, MMMM, EEE, and EEEE use CLDR English names."""
        value = date(1994, 11, 6)
        assert compile_template("EEE, d MMM yyyy").format(value) == "Sun, 6 Nov 1994"
        assert compile_template("EEEE, d MMMM yyyy").format(value) == "Sunday, 6 November 1994"

    def test_standalone_month(self) -> None:
        """L selects the stand-alone context."""
        assert compile_template("LLLL").format(date(1994, 11, 6)) == "November"

    def test_parse_names_case_insensitive(self) -> None:
        """Names match regardless of case."""
        fields = compile_template("EEEE, d MMMM yyyy").parse("sunday, 6 NOVEMBER 1994")
        assert (fields.year, fields.month, fields.day) == (1994, 11, 6)

    def test_weekday_checked_leniently(self) -> None:
        """A wrong weekday is accepted."""
        fields = compile_template("EEE, d MMM yyyy").parse("Mon, 6 Nov 1994")
        assert fields.day == 6

    def test_other_locale(self) -> None:
        """Names follow the compiled locale."""
        template = compile_template("d MMMM yyyy", locale_code="fr")
        assert template.format(date(1994, 11, 6)) == "6 novembre 1994"
        assert template.parse("6 novembre 1994").month == 11

    def test_narrow_is_format_only(self) -> None:
        """Five-letter names render but cannot be parsed."""
        template = compile_template("MMMMM")
        assert template.format(date(1994, 11, 6)) == "N"
        with pytest.raises(TemplateError) as exc_info:
            template.parse("N")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNSUPPORTED_PATTERN_SYMBOL


class TestErrors:
    """Test format and parse failures."""

    def test_missing_field(self) -> None:
        """Formatting needs every field the pattern names."""
        with pytest.raises(TemplateError) as exc_info:
            compile_template("yyyy-MM").format(TemporalFields(year=2024))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.MISSING_TEMPLATE_FIELD
        assert '"MM"' in str(exc_info.value)

    def test_unsupported_input(self) -> None:
        """Strings are not time points."""
        with pytest.raises(DateFormatError) as exc_info:
            compile_template("yyyy").format("2024")  # type: ignore[arg-type]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNSUPPORTED_INPUT_TYPE

    def test_grammar_mismatch(self) -> None:
        """Text that does not fit the pattern fails."""
        with pytest.raises(DateParseError) as exc_info:
            compile_template("yyyy-MM-dd").parse("2024/01/01")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.GRAMMAR_MISMATCH
        assert exc_info.value.format_name == "template"

    @pytest.mark.parametrize(
        ("pattern", "text"),
        [("yyyy-MM-dd", "2023-02-29"), ("MM-dd", "02-30"), ("MM", "13"), ("HH:mm", "24:00")],
    )
    def test_out_of_range(self, pattern: str, text: str) -> None:
        """Captured values are range-checked."""
        with pytest.raises(DateParseError) as exc_info:
            compile_template(pattern).parse(text)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.FIELD_OUT_OF_RANGE

    def test_partial_leap_day(self) -> None:
        """Without a year, February 29 is valid."""
        assert compile_template("MM-dd").parse("02-29").day == 29


class TestCompiledTemplate:
    """Test the compiled object itself."""

    def test_repr(self) -> None:
        """repr names pattern and locale."""
        assert repr(CompiledTemplate("yyyy")) == "CompiledTemplate('yyyy', locale_code='en')"

    def test_aware_datetime(self) -> None:
        """Aware datetimes render their wall-clock fields."""
        value = datetime(2024, 3, 1, 23, 5, tzinfo=UTC)
        assert compile_template("yyyy-MM-dd HH:mm").format(value) == "2024-03-01 23:05"

    @given(value=any_dates)
    def test_iso_round_trip(self, value: date) -> None:
        """yyyy-MM-dd reproduces every date."""
        template = compile_template("yyyy-MM-dd")
        fields = template.parse(template.format(value))
        assert date(fields.year or 0, fields.month or 0, fields.day or 0) == value
