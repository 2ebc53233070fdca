"""Tests for month/weekday tables and obsolete zone resolution.

Python 3.13+.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from datewire.diagnostics import DateParseError, DiagnosticCode
from datewire.enums import TimezoneSource
from datewire.syntax.timezones import OBSOLETE_ZONES, TimezoneLookup, parse_timezone
from datewire.syntax.tokens import (
    MONTH_ABBREVIATIONS,
    format_month,
    format_weekday,
    format_weekday_full,
    match_month_prefix,
    parse_month,
    parse_weekday,
)


class TestMonthNames:
    """Test month token lookup."""

    @given(month=st.integers(min_value=1, max_value=12))
    def test_format_then_parse(self, month: int) -> None:
        """Every abbreviation maps back to its month number."""
        assert parse_month(format_month(month)) == month

    def test_case_insensitive(self) -> None:
        """Month names match regardless of case."""
        assert parse_month("NOV") == parse_month("nov") == 11

    def test_unknown_month(self) -> None:
        """Unknown names raise INVALID_MONTH_NAME."""
        with pytest.raises(DateParseError) as exc_info:
            parse_month("Foo")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_MONTH_NAME

    def test_full_name_rejected_by_strict_lookup(self) -> None:
        """parse_month only accepts the three-letter form."""
        with pytest.raises(DateParseError):
            parse_month("November")

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("June", 6), ("Junk", 6), ("jun9", 6), ("Ju", None), ("Xyz", None)],
    )
    def test_prefix_match(self, token: str, expected: int | None) -> None:
        """Cookie month tokens match on their first three letters."""
        assert match_month_prefix(token) == expected

    def test_format_month_out_of_range(self) -> None:
        """Month 13 has no name."""
        with pytest.raises(ValueError, match="Month index out of range"):
            format_month(13)

    def test_table_size(self) -> None:
        """Twelve abbreviations, January first."""
        assert len(MONTH_ABBREVIATIONS) == 12
        assert MONTH_ABBREVIATIONS[0] == "Jan"


class TestWeekdayNames:
    """Test weekday token lookup (0 = Sunday)."""

    @given(weekday=st.integers(min_value=0, max_value=6))
    def test_abbreviated_and_full_parse(self, weekday: int) -> None:
        """Both the abbreviation and the full name parse to the index."""
        assert parse_weekday(format_weekday(weekday)) == weekday
        assert parse_weekday(format_weekday_full(weekday)) == weekday

    def test_sunday_is_zero(self) -> None:
        """Weekday numbering starts at Sunday."""
        assert parse_weekday("sunday") == 0
        assert parse_weekday("Sat") == 6

    def test_unknown_weekday(self) -> None:
        """Unknown names raise INVALID_WEEKDAY_NAME."""
        with pytest.raises(DateParseError) as exc_info:
            parse_weekday("Funday")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_WEEKDAY_NAME

    def test_format_weekday_out_of_range(self) -> None:
        """Index 7 has no name."""
        with pytest.raises(ValueError, match="Weekday index out of range"):
            format_weekday(7)


class TestParseTimezone:
    """Test RFC 5322 zone resolution and provenance."""

    def test_military_q_is_obs_name(self) -> None:
        """Q is a military letter: -4h, flagged as an obsolete name."""
        assert parse_timezone("Q") == TimezoneLookup(-240, TimezoneSource.OBS_NAME)

    def test_numeric_is_numeric(self) -> None:
        """+0400 is the same magnitude but numeric provenance."""
        assert parse_timezone("+0400") == TimezoneLookup(240, TimezoneSource.NUMERIC)

    @pytest.mark.parametrize(
        ("token", "minutes"),
        [
            ("GMT", 0), ("UT", 0), ("utc", 0), ("EST", -300), ("EDT", -240),
            ("CST", -360), ("PDT", -420), ("PST", -480),
            ("A", 60), ("I", 540), ("K", 600), ("M", 720),
            ("N", -60), ("Y", -720),
        ],
    )
    def test_obsolete_table(self, token: str, minutes: int) -> None:
        """Named and military zones follow RFC 822."""
        lookup = parse_timezone(token)
        assert lookup.offset_minutes == minutes
        assert lookup.source_tz == TimezoneSource.OBS_NAME

    @pytest.mark.parametrize("token", ["Z", "z"])
    def test_zulu_is_numeric(self, token: str) -> None:
        """A lone Z is an exact zero offset, not an obsolete name."""
        assert parse_timezone(token) == TimezoneLookup(0, TimezoneSource.NUMERIC)
        assert "z" not in OBSOLETE_ZONES

    def test_j_not_in_table(self) -> None:
        """J is unassigned; it resolves like any unknown alphabetic zone."""
        assert "j" not in OBSOLETE_ZONES
        assert parse_timezone("J") == TimezoneLookup(0, TimezoneSource.OBS_NAME)

    def test_unknown_alphabetic_is_zero(self) -> None:
        """Unknown alphabetic zones read as -0000."""
        assert parse_timezone("CEST") == TimezoneLookup(0, TimezoneSource.OBS_NAME)

    def test_out_of_range_numeric(self) -> None:
        """Numeric zones beyond 23:59 raise INVALID_NUMERIC_OFFSET."""
        with pytest.raises(DateParseError) as exc_info:
            parse_timezone("+2500")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_NUMERIC_OFFSET

    @pytest.mark.parametrize("token", ["1234", "XYZ+1", "", "G-T"])
    def test_unrecognized(self, token: str) -> None:
        """Tokens that are neither names nor offsets raise."""
        with pytest.raises(DateParseError) as exc_info:
            parse_timezone(token)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNRECOGNIZED_TIMEZONE

    def test_table_is_read_only(self) -> None:
        """The zone table cannot be mutated."""
        with pytest.raises(TypeError):
            OBSOLETE_ZONES["xx"] = 0  # type: ignore[index]
