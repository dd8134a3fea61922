"""Elapsed-time timer starts.

DurationToken holds seven non-negative unit fields. The grammar tries three
pattern families in order:

1. Minutes only: a bare integer ("5", "90")
2. Short form: 2-6 integers separated by ':', '.' or whitespace, read from
   the right as seconds, minutes, hours, days, months, years ("5:30:00")
3. Long form: number/unit pairs in any order ("2 hours 15 minutes",
   "1.5h", "15m30s"); repeated units sum, and a trailing bare number takes
   the next smaller unit ("15m30" is 15 minutes 30 seconds)

The long form relies on the regex module: a unit group may appear many times
in one pattern and Match.captures() returns every value it captured.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass, fields
from datetime import datetime, timedelta

import regex

from ..calendar_utils import add_fractional_months, add_fractional_years, add_weeks
from ..constants import MAX_PATTERN_CACHE_SIZE, PATTERN_FLAGS
from ..diagnostics import ErrorTemplate, TimerFormatError
from ..enums import TimerStartType
from ..locale_utils import LocaleProfile, format_number, parse_number
from .base import TimerStartToken

__all__ = ["DurationToken", "clear_duration_cache", "parse_duration"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DurationToken(TimerStartToken):
    """Elapsed time as seven unit fields, all finite and non-negative."""

    years: float = 0.0
    months: float = 0.0
    weeks: float = 0.0
    days: float = 0.0
    hours: float = 0.0
    minutes: float = 0.0
    seconds: float = 0.0

    @property
    def is_valid(self) -> bool:
        return all(math.isfinite(value) and value >= 0 for _, value in self.units())

    @property
    def type(self) -> TimerStartType:
        return TimerStartType.DURATION

    def units(self) -> tuple[tuple[str, float], ...]:
        """(unit name, value) pairs, largest unit first."""
        return tuple((field.name, getattr(self, field.name)) for field in fields(self))

    def _compute_end_time(self, start: datetime) -> datetime:
        # Fixed order: fractional months and years measure the month adjacent
        # to the date already advanced by the smaller units.
        end = start + timedelta(seconds=self.seconds)
        end += timedelta(minutes=self.minutes)
        end += timedelta(hours=self.hours)
        end += timedelta(days=self.days)
        end = add_weeks(end, self.weeks)
        end = add_fractional_months(end, self.months)
        return add_fractional_years(end, self.years)

    def _render(self, profile: LocaleProfile) -> str:
        parts = [
            f"{format_number(value, profile.locale_code)} {_unit_label(unit, value)}"
            for unit, value in self.units()
            if value
        ]
        return " ".join(parts) if parts else "0 seconds"


def _unit_label(unit: str, value: float) -> str:
    return unit[:-1] if value == 1 else unit


# ============================================================================
# GRAMMAR
# ============================================================================

# Unit group name -> accepted suffixes, largest unit first.
_UNIT_SUFFIXES: dict[str, str] = {
    "years": r"years?|yrs?|y",
    "months": r"months?|mons?|mos|mo",
    "weeks": r"weeks?|wks?|w",
    "days": r"days?|dys?|d",
    "hours": r"hours?|hrs?|h",
    "minutes": r"minutes?|mins?|m",
    "seconds": r"seconds?|secs?|s",
}

_SHORT_SEPARATOR = r"(?:\s*[.:]\s*|\s+)"
_LONG_SEPARATOR = r"(?:\s*,?\s*(?:and\s+)?)"

_MINUTES_ONLY = r"^\s*(?P<minutes>\d+)\s*$"


def _short_form() -> str:
    # Positions fill from the right; each larger unit needs the next smaller one.
    prefix = ""
    for unit in ("years", "months", "days", "hours"):
        prefix = rf"(?:{prefix}(?P<{unit}>\d+){_SHORT_SEPARATOR})?"
    return rf"^\s*{prefix}(?P<minutes>\d+){_SHORT_SEPARATOR}(?P<seconds>\d+)\s*$"


def _long_forms(decimal_symbol: str) -> list[str]:
    number = rf"\d+(?:{regex.escape(decimal_symbol)}\d+)?"
    terms = {
        unit: rf"(?P<{unit}>{number})\s*(?:{suffixes})"
        for unit, suffixes in _UNIT_SUFFIXES.items()
    }
    any_term = "(?:" + "|".join(terms.values()) + ")"
    patterns = [rf"^\s*{any_term}(?:{_LONG_SEPARATOR}{any_term})*\s*$"]

    units = list(_UNIT_SUFFIXES)
    for unit, smaller in zip(units, units[1:], strict=False):
        patterns.append(
            rf"^\s*(?:{any_term}{_LONG_SEPARATOR})*{terms[unit]}"
            rf"{_LONG_SEPARATOR}(?P<{smaller}>{number})\s*$"
        )
    return patterns


@functools.lru_cache(maxsize=MAX_PATTERN_CACHE_SIZE)
def _get_patterns(decimal_symbol: str) -> tuple[regex.Pattern[str], ...]:
    sources = [_MINUTES_ONLY, _short_form(), *_long_forms(decimal_symbol)]
    return tuple(regex.compile(source, PATTERN_FLAGS) for source in sources)


def _build_token(match: regex.Match[str], profile: LocaleProfile) -> DurationToken:
    values: dict[str, float] = {}
    group_names = match.re.groupindex
    for unit in _UNIT_SUFFIXES:
        if unit in group_names:
            values[unit] = float(sum(parse_number(text, profile) for text in match.captures(unit)))
    return DurationToken(**values)


def parse_duration(text: str, profile: LocaleProfile) -> DurationToken:
    """Parse text with the duration grammar.

    Args:
        text: Stripped user input
        profile: Active locale profile

    Returns:
        The parsed token

    Raises:
        TimerFormatError: If no pattern yields a valid token
    """
    for pattern in _get_patterns(profile.decimal_symbol):
        match = pattern.fullmatch(text)
        if match is None:
            continue
        try:
            token = _build_token(match, profile)
        except TimerFormatError as e:
            logger.debug("Rejected duration reading of '%s': %s", text, e.diagnostic)
            continue
        if token.is_valid:
            logger.debug("Matched duration for '%s': %r", text, token)
            return token

    raise TimerFormatError(
        ErrorTemplate.no_pattern_matched(text, "duration"),
        input_value=text,
        locale_code=profile.locale_code,
        parse_type="duration",
    )


def clear_duration_cache() -> None:
    """Clear compiled duration pattern tables."""
    _get_patterns.cache_clear()
