"""Hypothesis strategies for datewire property-based testing.

Usage:
    from tests.strategies import aware_datetimes, fixed_offsets
"""

from .temporal import (
    any_dates,
    aware_datetimes,
    fixed_offsets,
    offset_minutes,
    utc_datetimes,
    wire_noise,
)

__all__ = [
    "any_dates",
    "aware_datetimes",
    "fixed_offsets",
    "offset_minutes",
    "utc_datetimes",
    "wire_noise",
]
