"""Shared constants for datewire.

This module provides centralized configuration constants used across
the codec, template, and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Cache limits: Memory bounds for the template cache
- Year bounds: Lower limits imposed by the governing RFCs
- Template rendering: Padding characters and locale defaults
- Time zones: Default zone for plain (zone-less) inputs

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Cache limits
    "DEFAULT_TEMPLATE_CACHE_SIZE",
    # Year bounds
    "COOKIE_MIN_YEAR",
    "EMAIL_MIN_YEAR",
    # Template rendering
    "REPLACEMENT_CHAR",
    "DEFAULT_LOCALE",
    "SOFT_FIELD_LIMIT",
    # Time zones
    "DEFAULT_TIME_ZONE",
    "ISO_CALENDAR",
]

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of compiled pattern templates held by a TemplateCache.
# Pattern cardinality in real programs is small; eviction only costs a
# recompilation, never correctness.
DEFAULT_TEMPLATE_CACHE_SIZE: int = 100

# ============================================================================
# YEAR BOUNDS
# ============================================================================

# RFC 6265 Section 5.1.1 step 6: abort if year < 1601.
COOKIE_MIN_YEAR: int = 1601

# RFC 5322 Section 3.3: year is 4*DIGIT with value >= 1900.
EMAIL_MIN_YEAR: int = 1900

# ============================================================================
# TEMPLATE RENDERING
# ============================================================================

# U+FFFD REPLACEMENT CHARACTER. Pads numeric fields requested wider than
# their soft limit so over-specified patterns produce visibly corrupt output.
REPLACEMENT_CHAR: str = "\ufffd"

# Soft width limit for day, hour, minute, and second fields.
SOFT_FIELD_LIMIT: int = 2

# Locale used for month and weekday names in pattern templates.
DEFAULT_LOCALE: str = "en"

# ============================================================================
# TIME ZONES
# ============================================================================

# Zone applied to plain date-times and dates when a wire format needs one.
DEFAULT_TIME_ZONE: str = "UTC"

# Calendar identifier implied when no u-ca annotation is present.
ISO_CALENDAR: str = "iso8601"
