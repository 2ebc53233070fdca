"""Tests for the IMF-fixdate and asctime codecs.

Python 3.13+.
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from hypothesis import given

from datewire.codecs import asctime, imf_fixdate
from datewire.codecs.asctime import parse_asctime
from datewire.codecs.imf_fixdate import parse_imf_fixdate
from datewire.diagnostics import DateFormatError, DateParseError, DiagnosticCode
from datewire.runtime.convert import to_zoned_datetime
from tests.strategies import aware_datetimes, utc_datetimes


class TestImfFixdate:
    """Test the fixed-length HTTP date."""

    def test_parse(self) -> None:
        """The canonical example parses as UTC."""
        fields = imf_fixdate.parse("Sun, 06 Nov 1994 08:49:37 GMT")
        assert (fields.year, fields.month, fields.day) == (1994, 11, 6)
        assert fields.offset == "Z"

    def test_weekday_mismatch_raises(self) -> None:
        """The weekday must agree with the date."""
        with pytest.raises(DateParseError) as exc_info:
            imf_fixdate.parse("Mon, 06 Nov 1994 08:49:37 GMT")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.WEEKDAY_MISMATCH

    @pytest.mark.parametrize(
        "text",
        [
            "Sun, 6 Nov 1994 08:49:37 GMT",
            "Sun, 06 Nov 94 08:49:37 GMT",
            "Sun, 06 Nov 1994 08:49 GMT",
            "Sun, 06 Nov 1994 08:49:37 UTC",
        ],
    )
    def test_fixed_widths(self, text: str) -> None:
        """Field widths and the GMT literal are not negotiable."""
        assert parse_imf_fixdate(text) is None
        with pytest.raises(DateParseError):
            imf_fixdate.parse(text)

    def test_format_converts_to_gmt(self) -> None:
        """Offsets are converted before rendering."""
        value = datetime(1994, 11, 6, 3, 49, 37, tzinfo=timezone(timedelta(hours=-5)))
        assert imf_fixdate.format(value) == "Sun, 06 Nov 1994 08:49:37 GMT"

    def test_format_past_year_9999_raises(self) -> None:
        """A UTC instant in year 10000 is a format error, not OverflowError."""
        value = datetime(9999, 12, 31, 23, 0, tzinfo=timezone(timedelta(hours=-5)))
        with pytest.raises(DateFormatError) as exc_info:
            imf_fixdate.format(value)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.FIELD_OUT_OF_RANGE

    def test_format_last_second_rounds_down(self) -> None:
        """Rounding at the end of year 9999 keeps the last second."""
        value = datetime(9999, 12, 31, 23, 59, 59, 999_999, tzinfo=UTC)
        assert imf_fixdate.format(value) == "Fri, 31 Dec 9999 23:59:59 GMT"

    @given(value=utc_datetimes)
    def test_round_trip(self, value: datetime) -> None:
        """parse(format(z)) reproduces a UTC value exactly."""
        assert to_zoned_datetime(imf_fixdate.parse(imf_fixdate.format(value))) == value

    @given(value=aware_datetimes())
    def test_round_trip_preserves_instant(self, value: datetime) -> None:
        """Non-UTC values come back as the same instant in UTC."""
        restored = to_zoned_datetime(imf_fixdate.parse(imf_fixdate.format(value)))
        assert restored == value
        assert restored.utcoffset() == timedelta(0)


class TestAsctime:
    """Test the C asctime() layout."""

    def test_space_padded_day(self) -> None:
        """A single-digit day is preceded by two spaces."""
        fields = asctime.parse("Sun Nov  6 08:49:37 1994")
        assert (fields.year, fields.month, fields.day) == (1994, 11, 6)
        assert fields.offset == "Z"

    def test_two_digit_day(self) -> None:
        """Two-digit days take one space."""
        assert asctime.parse("Thu Nov 24 08:49:37 1994").day == 24

    def test_weekday_lenient(self) -> None:
        """A mismatched weekday is ignored."""
        assert parse_asctime("Mon Nov  6 08:49:37 1994") is not None

    def test_leap_second_rejected(self) -> None:
        """asctime has no leap seconds."""
        with pytest.raises(DateParseError):
            asctime.parse("Fri Dec 31 23:59:60 1999")

    def test_no_zone_allowed(self) -> None:
        """Trailing text after the year does not match."""
        with pytest.raises(DateParseError):
            asctime.parse("Sun Nov  6 08:49:37 1994 GMT")

    def test_format(self) -> None:
        """Output space-pads the day and converts to UTC."""
        value = datetime(1994, 11, 6, 9, 49, 37, tzinfo=timezone(timedelta(hours=1)))
        assert asctime.format(value) == "Sun Nov  6 08:49:37 1994"

    def test_format_then_parse(self) -> None:
        """Rendered values parse back."""
        value = datetime(2024, 2, 29, 23, 0, 1, tzinfo=UTC)
        fields = asctime.parse(asctime.format(value))
        assert (fields.month, fields.day, fields.second) == (2, 29, 1)
