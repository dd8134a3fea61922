"""Calendar arithmetic and English calendar vocabulary.

Fractional months and years are measured against the actual calendar: the
fractional part of a month becomes a number of days proportional to the
length of the adjacent month in the direction of travel, never a fixed
30-day approximation.

Month and weekday names come from Babel's CLDR data for English. Name
matching is prefix-based on the first three letters and case-insensitive.

Python 3.13+.
"""

from __future__ import annotations

import functools
import math
from datetime import MAXYEAR, date, datetime, timedelta

from babel.dates import get_day_names, get_month_names
from dateutil.relativedelta import relativedelta

from .constants import DAYS_PER_WEEK, ENGLISH_LOCALE, MONTHS_PER_YEAR
from .enums import Weekday

__all__ = [
    "add_fractional_months",
    "add_fractional_years",
    "add_weeks",
    "increment_month",
    "is_valid_date_parts",
    "is_year_in_range",
    "month_abbreviations",
    "month_name",
    "ordinal_day",
    "parse_month",
    "parse_weekday",
    "try_make_date",
    "weekday_abbreviations",
    "weekday_index",
    "weekday_name",
]

_PREFIX_LENGTH = 3

# Placeholders for unset fields when checking whether a partial date can exist.
# 2000 is a leap year, so "29 February" without a year is accepted.
_PLACEHOLDER_YEAR = 2000
_PLACEHOLDER_MONTH = 1
_PLACEHOLDER_DAY = 1


def add_fractional_months(value: datetime, months: float) -> datetime:
    """Add a possibly fractional number of months.

    The whole part uses calendar month addition, clamping to the month end
    (31 January + 1 month = 28 or 29 February). The fractional part is
    converted to days using the length of the month after the advanced date
    when positive, or the month before it when negative.

    Args:
        value: Start instant
        months: Months to add

    Returns:
        The advanced instant

    Example:
        >>> add_fractional_months(datetime(2015, 1, 1), 1.5)
        datetime.datetime(2015, 2, 15, 0, 0)
    """
    fraction, whole = math.modf(months)
    result = value + relativedelta(months=int(whole))

    if fraction > 0:
        month_days = (result + relativedelta(months=1) - result).days
        result += timedelta(days=round(month_days * fraction))
    elif fraction < 0:
        month_days = (result - (result - relativedelta(months=1))).days
        result += timedelta(days=round(month_days * fraction))

    return result


def add_fractional_years(value: datetime, years: float) -> datetime:
    """Add a possibly fractional number of years as twelve months each."""
    return add_fractional_months(value, years * MONTHS_PER_YEAR)


def add_weeks(value: datetime, weeks: float) -> datetime:
    return value + timedelta(days=weeks * DAYS_PER_WEEK)


def try_make_date(year: int, month: int, day: int) -> date | None:
    """Build a date, or return None when the fields are not calendar-valid."""
    try:
        return date(year, month, day)
    except ValueError:
        return None


def is_valid_date_parts(year: int | None, month: int | None, day: int | None) -> bool:
    """Check that a partial date, with unset fields defaulted, can exist."""
    return (
        try_make_date(
            _PLACEHOLDER_YEAR if year is None else year,
            _PLACEHOLDER_MONTH if month is None else month,
            _PLACEHOLDER_DAY if day is None else day,
        )
        is not None
    )


def increment_month(year: int, month: int) -> tuple[int, int]:
    """Advance (year, month) by one month, rolling over December."""
    if month >= MONTHS_PER_YEAR:
        return year + 1, 1
    return year, month + 1


def weekday_index(value: date) -> Weekday:
    """Sunday-first weekday of a date."""
    return Weekday((value.weekday() + 1) % DAYS_PER_WEEK)


@functools.cache
def _month_names() -> tuple[str, ...]:
    names = get_month_names("wide", locale=ENGLISH_LOCALE)
    return tuple(str(names[month]) for month in range(1, MONTHS_PER_YEAR + 1))


@functools.cache
def _weekday_names() -> tuple[str, ...]:
    # Babel indexes days from Monday (0); reorder to Sunday-first.
    names = get_day_names("wide", locale=ENGLISH_LOCALE)
    return tuple(str(names[(index + 6) % DAYS_PER_WEEK]) for index in range(DAYS_PER_WEEK))


def month_name(month: int) -> str:
    """English month name for month 1..12."""
    return _month_names()[month - 1]


def weekday_name(weekday: Weekday) -> str:
    """English weekday name."""
    return _weekday_names()[weekday]


def month_abbreviations() -> tuple[str, ...]:
    """Three-letter month prefixes, January first."""
    return tuple(name[:_PREFIX_LENGTH] for name in _month_names())


def weekday_abbreviations() -> tuple[str, ...]:
    """Three-letter weekday prefixes, Sunday first."""
    return tuple(name[:_PREFIX_LENGTH] for name in _weekday_names())


def parse_month(text: str) -> int | None:
    """Month number (1..12) whose name starts with the first three letters of text."""
    prefix = text[:_PREFIX_LENGTH].casefold()
    if len(prefix) < _PREFIX_LENGTH:
        return None
    for index, abbreviation in enumerate(month_abbreviations(), start=1):
        if abbreviation.casefold() == prefix:
            return index
    return None


def parse_weekday(text: str) -> Weekday | None:
    """Weekday whose name starts with the first three letters of text."""
    prefix = text[:_PREFIX_LENGTH].casefold()
    if len(prefix) < _PREFIX_LENGTH:
        return None
    for index, abbreviation in enumerate(weekday_abbreviations()):
        if abbreviation.casefold() == prefix:
            return Weekday(index)
    return None


def ordinal_day(day: int) -> str:
    """English ordinal for a day of the month.

    Example:
        >>> [ordinal_day(d) for d in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23, 31)]
        ['1st', '2nd', '3rd', '4th', '11th', '12th', '13th', '21st', '22nd', '23rd', '31st']
    """
    if day % 100 in (11, 12, 13):
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def is_year_in_range(year: int) -> bool:
    return 1 <= year <= MAXYEAR
