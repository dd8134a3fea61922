"""Hypothesis strategies for timerparse property-based testing.

Strategies are organized by domain:

- tokens: date, time, date-time and duration tokens, reference instants,
  and locale codes

Usage:
    from tests.strategies import date_tokens, reference_instants
    from tests.strategies.tokens import duration_tokens
"""

from .tokens import (
    LOCALES,
    date_time_tokens,
    date_tokens,
    day_of_week_tokens,
    duration_tokens,
    normal_date_tokens,
    normal_time_tokens,
    reference_instants,
    special_date_tokens,
    supported_locales,
    time_tokens,
)

__all__ = [
    "LOCALES",
    "date_time_tokens",
    "date_tokens",
    "day_of_week_tokens",
    "duration_tokens",
    "normal_date_tokens",
    "normal_time_tokens",
    "reference_instants",
    "special_date_tokens",
    "supported_locales",
    "time_tokens",
]
