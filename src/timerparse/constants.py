"""Shared constants for timerparse.

Centralized configuration used across the locale, calendar and parsing
modules. Placing constants here avoids circular imports and provides a single
source of truth.

Constants are grouped by domain:
- Locale defaults: Fallback locale for unknown or missing locale codes
- Cache limits: Memory bounds for lru_cache-backed lookups
- Input limits: Size constraints checked before any pattern runs
- Calendar: Two-digit year window
- Pattern engine: Flags shared by every compiled pattern
- Timer inputs: Canonical inputs for the default and zero timers

Python 3.13+.
"""

import regex

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "ENGLISH_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_PATTERN_CACHE_SIZE",
    # Input limits
    "MAX_INPUT_LENGTH",
    # Calendar
    "TWO_DIGIT_YEAR_BASE",
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    # Pattern engine
    "PATTERN_FLAGS",
    # Timer inputs
    "DEFAULT_TIMER_INPUT",
    "ZERO_TIMER_INPUT",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Used when no locale is given and the system locale cannot be detected, and
# when a given locale code is unknown to Babel.
DEFAULT_LOCALE: str = "en_US"

# Month and weekday vocabulary is English regardless of the active locale.
# The active locale only decides numeric date order and the decimal symbol.
ENGLISH_LOCALE: str = "en"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Babel Locale objects and derived locale profiles.
MAX_LOCALE_CACHE_SIZE: int = 128

# Compiled pattern tables. Date-time tables are keyed by date order (three
# possible values); duration tables by decimal symbol.
MAX_PATTERN_CACHE_SIZE: int = 16

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Timer phrases are short. Longer input is rejected before matching so that
# pattern evaluation cost stays bounded.
MAX_INPUT_LENGTH: int = 256

# ============================================================================
# CALENDAR
# ============================================================================

# Two-digit years ("14/02/24") map into 2000-2099.
TWO_DIGIT_YEAR_BASE: int = 2000

DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

# ============================================================================
# PATTERN ENGINE
# ============================================================================

# VERBOSE ignores literal whitespace in pattern text, so every pattern spells
# whitespace explicitly with \s.
PATTERN_FLAGS: int = regex.IGNORECASE | regex.VERBOSE

# ============================================================================
# TIMER INPUTS
# ============================================================================

DEFAULT_TIMER_INPUT: str = "5 minutes"
ZERO_TIMER_INPUT: str = "0 seconds"
