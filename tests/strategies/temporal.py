"""Hypothesis strategies for date-time codec testing.

Provides strategies for fixed UTC offsets, aware datetimes at whole-second
precision, and calendar dates, plus a sampler of wire-format noise for
fuzzing.

Usage:
    from hypothesis import given
    from tests.strategies.temporal import aware_datetimes

    @given(value=aware_datetimes())
    def test_round_trip(value):
        ...
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# OFFSETS
# ============================================================================

# Whole-minute offsets strictly inside +/-24h (RFC 5322 zone range).
offset_minutes: SearchStrategy[int] = st.integers(min_value=-(23 * 60 + 59), max_value=23 * 60 + 59)

fixed_offsets: SearchStrategy[timezone] = offset_minutes.map(
    lambda minutes: timezone(timedelta(minutes=minutes))
)


# ============================================================================
# DATETIMES
# ============================================================================


@composite
def aware_datetimes(
    draw: st.DrawFn,
    min_year: int = 1900,
    max_year: int = 9998,
) -> datetime:
    """Aware datetime with a fixed offset and no sub-second part.

    The year range stays one year clear of datetime's limits so that
    conversion to UTC never overflows.
    """
    naive = draw(
        st.datetimes(
            min_value=datetime(min_year, 1, 1),  # noqa: DTZ001
            max_value=datetime(max_year, 12, 31, 23, 59, 59),  # noqa: DTZ001
        )
    )
    tz = draw(fixed_offsets)
    if tz is UTC:
        event("offset=utc")
    return naive.replace(microsecond=0, tzinfo=tz)


utc_datetimes: SearchStrategy[datetime] = st.datetimes(
    min_value=datetime(1900, 1, 1),  # noqa: DTZ001
    max_value=datetime(9999, 12, 31, 23, 59, 59),  # noqa: DTZ001
).map(lambda value: value.replace(microsecond=0, tzinfo=UTC))

any_dates: SearchStrategy[date] = st.dates()


# ============================================================================
# FUZZ INPUT
# ============================================================================

_WIRE_FRAGMENTS = [
    "Sun", "Sunday", ",", " ", "  ", "-", ":", "06", "6", "Nov", "1994", "94",
    "08:49:37", "08:49", "GMT", "UT", "+0000", "-0500", "Q", "J", "(c)", "\r\n\t",
    "T", "Z", "[", "]", "!", "u-ca=iso8601", "Europe/Paris", "+01:00", ".5", "--",
]

wire_noise: SearchStrategy[str] = st.one_of(
    st.lists(st.sampled_from(_WIRE_FRAGMENTS), max_size=12).map("".join),
    st.text(max_size=40),
)
