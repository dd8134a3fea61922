"""Date tokens: variants, resolution, rendering, and grammars.

A DateToken is a partial or complete date specification. Five closed variants:

- EmptyDateToken: no date given ("5pm")
- NormalDateToken: any subset of year, month, day ("14 feb", "2/3/2024")
- DayOfWeekDateToken: weekday relative to the reference ("next friday")
- RelativeDateToken: today or tomorrow
- SpecialDateToken: named calendar dates ("christmas")

Resolution turns a token plus a reference instant into a concrete date on or
after the reference date. The inclusive flag decides whether the reference
date itself qualifies.

Grammar priority depends on the locale date order: the reading of ambiguous
numeric dates such as "02/03" that the locale prefers is tried first.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..calendar_utils import (
    increment_month,
    is_valid_date_parts,
    is_year_in_range,
    month_abbreviations,
    month_name,
    ordinal_day,
    parse_month,
    parse_weekday,
    try_make_date,
    weekday_abbreviations,
    weekday_index,
    weekday_name,
)
from ..constants import DAYS_PER_WEEK, TWO_DIGIT_YEAR_BASE
from ..diagnostics import ErrorTemplate, TimerFormatError, TimerResolutionError
from ..enums import (
    DateOrder,
    DayOfWeekRelation,
    RelativeDay,
    SpecialDateKind,
    Weekday,
)
from ..locale_utils import LocaleProfile
from .grammar import Capture, Grammar

__all__ = [
    "DATE_GRAMMARS",
    "EMPTY_DATE_GRAMMAR",
    "DateToken",
    "DayOfWeekDateToken",
    "EmptyDateToken",
    "NormalDateToken",
    "RelativeDateToken",
    "SpecialDateToken",
    "format_date_token",
    "is_valid_date_token",
    "resolve_date",
]

logger = logging.getLogger(__name__)

# ============================================================================
# TOKENS
# ============================================================================


@dataclass(frozen=True, slots=True)
class EmptyDateToken:
    """No date given; resolves to the reference date."""


@dataclass(frozen=True, slots=True)
class NormalDateToken:
    """Explicit date fields, any subset set.

    Unset fields are filled from the reference date during resolution. A
    year and day without a month is not a date anyone means, so it is
    invalid.
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None


@dataclass(frozen=True, slots=True)
class DayOfWeekDateToken:
    """A weekday relative to the reference date."""

    weekday: Weekday
    relation: DayOfWeekRelation = DayOfWeekRelation.NEXT


@dataclass(frozen=True, slots=True)
class RelativeDateToken:
    """Today or tomorrow."""

    day: RelativeDay


@dataclass(frozen=True, slots=True)
class SpecialDateToken:
    """A named date with fixed month and day; the year floats."""

    kind: SpecialDateKind


type DateToken = (
    EmptyDateToken | NormalDateToken | DayOfWeekDateToken | RelativeDateToken | SpecialDateToken
)

# Month and day of each special date.
SPECIAL_DATES: dict[SpecialDateKind, tuple[int, int]] = {
    SpecialDateKind.NEW_YEAR: (1, 1),
    SpecialDateKind.CHRISTMAS_DAY: (12, 25),
    SpecialDateKind.NEW_YEARS_EVE: (12, 31),
}

_SPECIAL_DATE_NAMES: dict[SpecialDateKind, str] = {
    SpecialDateKind.NEW_YEAR: "New Year",
    SpecialDateKind.CHRISTMAS_DAY: "Christmas Day",
    SpecialDateKind.NEW_YEARS_EVE: "New Year's Eve",
}


# ============================================================================
# VALIDITY
# ============================================================================


def is_valid_date_token(token: DateToken) -> bool:
    """Check a date token before resolution or rendering."""
    match token:
        case NormalDateToken(year=year, month=month, day=day):
            if year is None and month is None and day is None:
                return False
            if year is not None and day is not None and month is None:
                return False
            return is_valid_date_parts(year, month, day)
        case DayOfWeekDateToken(weekday=weekday, relation=relation):
            return isinstance(weekday, Weekday) and isinstance(relation, DayOfWeekRelation)
        case RelativeDateToken(day=day):
            return isinstance(day, RelativeDay)
        case SpecialDateToken(kind=kind):
            return kind in SPECIAL_DATES
        case EmptyDateToken():
            return True
    return False


# ============================================================================
# RESOLUTION
# ============================================================================


def resolve_date(token: DateToken, min_dt: datetime, *, inclusive: bool) -> date:
    """Resolve a date token to a concrete date.

    Args:
        token: Valid date token
        min_dt: Reference instant; only its date takes part
        inclusive: Whether the reference date itself qualifies

    Returns:
        The resolved date. Normal tokens with no free field left may resolve
        before the reference date; callers reject such end times.

    Raises:
        TimerResolutionError: If the token is invalid or no calendar-valid
            date can be built
    """
    if not is_valid_date_token(token):
        raise TimerResolutionError(ErrorTemplate.token_invalid(token))

    floor = min_dt.date()
    match token:
        case EmptyDateToken():
            return floor if inclusive else floor + timedelta(days=1)
        case NormalDateToken():
            return _resolve_normal(token, min_dt, inclusive=inclusive)
        case DayOfWeekDateToken():
            return _resolve_day_of_week(token, floor)
        case RelativeDateToken(day=day):
            return floor + timedelta(days=day.day_delta)
        case SpecialDateToken(kind=kind):
            month, day_of_month = SPECIAL_DATES[kind]
            candidate = date(floor.year, month, day_of_month)
            if candidate < floor or (candidate == floor and not inclusive):
                candidate = candidate.replace(year=candidate.year + 1)
            return candidate


def _resolve_normal(token: NormalDateToken, min_dt: datetime, *, inclusive: bool) -> date:
    floor = min_dt.date()
    year_set = token.year is not None
    month_set = token.month is not None

    year = token.year if token.year is not None else floor.year
    if token.month is not None:
        month = token.month
    else:
        month = 1 if year_set else floor.month
    if token.day is not None:
        day = token.day
    else:
        day = 1 if year_set or month_set else floor.day

    candidate: date | None = None
    while True:
        candidate = try_make_date(year, month, day)
        if candidate is not None and (candidate > floor or (inclusive and candidate == floor)):
            return candidate

        # Advance the least constrained free field.
        if not year_set and not month_set:
            year, month = increment_month(year, month)
        elif not year_set:
            year += 1
        else:
            break
        if not is_year_in_range(year):
            break

    if candidate is None:
        raise TimerResolutionError(ErrorTemplate.date_unreachable(token, min_dt))
    logger.debug("No free field left for %r; returning %s", token, candidate)
    return candidate


def _resolve_day_of_week(token: DayOfWeekDateToken, floor: date) -> date:
    current = floor + timedelta(days=1)
    while weekday_index(current) != token.weekday:
        current += timedelta(days=1)

    match token.relation:
        case DayOfWeekRelation.AFTER_NEXT:
            current += timedelta(days=DAYS_PER_WEEK)
        case DayOfWeekRelation.NEXT_WEEK:
            # The forward search stays inside the current week when the
            # weekday has not occurred yet this week.
            if token.weekday > weekday_index(floor):
                current += timedelta(days=DAYS_PER_WEEK)
    return current


# ============================================================================
# RENDERING
# ============================================================================


def format_date_token(token: DateToken, profile: LocaleProfile) -> str:
    """Render a valid date token as an English phrase.

    Month-first locales put the month name before the day ("February 14,
    2024"); all others put the day first ("14 February 2024").
    """
    match token:
        case EmptyDateToken():
            return ""
        case NormalDateToken():
            return _format_normal(token, month_first=profile.date_order is DateOrder.MONTH_FIRST)
        case DayOfWeekDateToken(weekday=weekday, relation=relation):
            name = weekday_name(weekday)
            match relation:
                case DayOfWeekRelation.AFTER_NEXT:
                    return f"{name} after next"
                case DayOfWeekRelation.NEXT_WEEK:
                    return f"{name} next week"
            return name
        case RelativeDateToken(day=day):
            return str(day)
        case SpecialDateToken(kind=kind):
            return _SPECIAL_DATE_NAMES[kind]


def _format_normal(token: NormalDateToken, *, month_first: bool) -> str:
    year, month, day = token.year, token.month, token.day
    if month is None:
        if day is not None:
            return ordinal_day(day)
        return f"year {year:04d}"

    name = month_name(month)
    if day is None:
        return name if year is None else f"{name} {year:04d}"
    if year is None:
        return f"{name} {day}" if month_first else f"{day} {name}"
    return f"{name} {day}, {year:04d}" if month_first else f"{day} {name} {year:04d}"


# ============================================================================
# GRAMMARS
# ============================================================================

_ORDINAL = r"(?:\s*(?:st|nd|rd|th))"
_YEAR = r"(?:\d\d)?\d\d"


@functools.cache
def _month_alternation() -> str:
    return "|".join(month_abbreviations())


@functools.cache
def _weekday_alternation() -> str:
    return "|".join(weekday_abbreviations())


def _spelled_day_first() -> str:
    return (
        rf"(?P<day>\d\d?){_ORDINAL}?(?:\s*of)?\s*"
        rf"(?P<month>{_month_alternation()})[a-z]*"
        rf"(?:\s*,?\s*(?P<year>\d\d\d\d))?"
    )


def _spelled_month_first() -> str:
    return (
        rf"(?P<month>{_month_alternation()})[a-z]*\s*"
        rf"(?P<day>\d\d?){_ORDINAL}?"
        rf"(?:\s*[\s,]\s*(?P<year>\d\d\d\d))?"
    )


_NUMERIC_DAY_FIRST = rf"(?P<day>\d\d?)[.\-/](?P<month>\d\d?)(?:[.\-/](?P<year>{_YEAR}))?"
_NUMERIC_MONTH_FIRST = rf"(?P<month>\d\d?)[.\-/](?P<day>\d\d?)(?:[.\-/](?P<year>{_YEAR}))?"
_NUMERIC_YEAR_FIRST = rf"(?P<year>{_YEAR})[.\-/](?P<month>\d\d?)[.\-/](?P<day>\d\d?)"
_DAY_ONLY = rf"(?:the\s*)?(?P<day>\d\d?){_ORDINAL}"
_NUMERIC_MONTH_AND_YEAR = r"(?P<month>\d\d?)[.\-/](?P<year>\d\d\d\d)"
_YEAR_ONLY = r"(?:(?:the\s*)?year\s*)?(?P<year>\d\d\d\d)"


def _month_and_optional_year() -> str:
    return rf"(?P<month>{_month_alternation()})[a-z]*(?:\s*,?\s*(?P<year>\d\d\d\d))?"


@functools.cache
def _normal_patterns(order: DateOrder) -> tuple[str, ...]:
    day_first, month_first = _spelled_day_first(), _spelled_month_first()
    match order:
        case DateOrder.MONTH_FIRST:
            leading = (
                month_first,
                day_first,
                _NUMERIC_MONTH_FIRST,
                _NUMERIC_DAY_FIRST,
                _NUMERIC_YEAR_FIRST,
            )
        case DateOrder.YEAR_FIRST:
            leading = (
                day_first,
                month_first,
                _NUMERIC_YEAR_FIRST,
                _NUMERIC_DAY_FIRST,
                _NUMERIC_MONTH_FIRST,
            )
        case _:
            leading = (
                day_first,
                month_first,
                _NUMERIC_DAY_FIRST,
                _NUMERIC_MONTH_FIRST,
                _NUMERIC_YEAR_FIRST,
            )
    return (
        *leading,
        _DAY_ONLY,
        _month_and_optional_year(),
        _NUMERIC_MONTH_AND_YEAR,
        _YEAR_ONLY,
    )


def _parse_year(text: str) -> int:
    # Only a two-digit year is shorthand; "0099" is the year 99.
    year = int(text)
    return year + TWO_DIGIT_YEAR_BASE if len(text) == 2 else year


def _parse_normal(capture: Capture, profile: LocaleProfile) -> NormalDateToken:
    month: int | None = None
    if capture.month is not None:
        month = int(capture.month) if capture.month.isdigit() else parse_month(capture.month)
        if month is None:
            raise TimerFormatError(
                ErrorTemplate.token_fields_invalid(capture.text, capture.month),
                input_value=capture.text,
                locale_code=profile.locale_code,
                parse_type="date",
            )
    return NormalDateToken(
        year=_parse_year(capture.year) if capture.year is not None else None,
        month=month,
        day=int(capture.day) if capture.day is not None else None,
    )


def _day_of_week_patterns(_order: DateOrder) -> tuple[str, ...]:
    weekdays = _weekday_alternation()
    return (
        rf"(?:(?:this|next)\s*)?(?P<weekday>{weekdays})[a-z]*",
        rf"(?P<weekday>{weekdays})[a-z]*(?:\s*after)?\s*(?P<after_next>next)",
        rf"(?P<weekday>{weekdays})[a-z]*\s*(?P<next_week>next\s*w(?:ee)?k)",
    )


def _parse_day_of_week(capture: Capture, profile: LocaleProfile) -> DayOfWeekDateToken:
    weekday = parse_weekday(capture.weekday or "")
    if weekday is None:
        raise TimerFormatError(
            ErrorTemplate.token_fields_invalid(capture.text, capture.weekday),
            input_value=capture.text,
            locale_code=profile.locale_code,
            parse_type="date",
        )
    if capture.after_next:
        relation = DayOfWeekRelation.AFTER_NEXT
    elif capture.next_week:
        relation = DayOfWeekRelation.NEXT_WEEK
    else:
        relation = DayOfWeekRelation.NEXT
    return DayOfWeekDateToken(weekday=weekday, relation=relation)


def _relative_patterns(_order: DateOrder) -> tuple[str, ...]:
    return (r"(?P<today>today)", r"(?P<tomorrow>tomm?orr?ow)")


def _parse_relative(capture: Capture, _profile: LocaleProfile) -> RelativeDateToken:
    return RelativeDateToken(day=RelativeDay.TODAY if capture.today else RelativeDay.TOMORROW)


def _special_patterns(_order: DateOrder) -> tuple[str, ...]:
    return (
        r"(?P<new_year>ny|new\s*year)",
        r"(?P<christmas_day>(?:ch?rist?|x)-?mass?(?:\s*day)?)",
        r"(?P<new_years_eve>nye|new\s*year(?:'?s)?\s*eve)",
    )


def _parse_special(capture: Capture, _profile: LocaleProfile) -> SpecialDateToken:
    if capture.new_year:
        kind = SpecialDateKind.NEW_YEAR
    elif capture.christmas_day:
        kind = SpecialDateKind.CHRISTMAS_DAY
    else:
        kind = SpecialDateKind.NEW_YEARS_EVE
    return SpecialDateToken(kind=kind)


def _empty_patterns(_order: DateOrder) -> tuple[str, ...]:
    return ("",)


def _parse_empty(_capture: Capture, _profile: LocaleProfile) -> EmptyDateToken:
    return EmptyDateToken()


EMPTY_DATE_GRAMMAR: Grammar[DateToken] = Grammar(
    name="empty_date",
    parse_type="date",
    get_patterns=_empty_patterns,
    parse=_parse_empty,
    is_valid=is_valid_date_token,
    is_empty=True,
)

# Priority order of date grammars.
DATE_GRAMMARS: tuple[Grammar[DateToken], ...] = (
    EMPTY_DATE_GRAMMAR,
    Grammar(
        name="normal_date",
        parse_type="date",
        get_patterns=_normal_patterns,
        parse=_parse_normal,
        is_valid=is_valid_date_token,
    ),
    Grammar(
        name="day_of_week",
        parse_type="date",
        get_patterns=_day_of_week_patterns,
        parse=_parse_day_of_week,
        is_valid=is_valid_date_token,
    ),
    Grammar(
        name="relative_date",
        parse_type="date",
        get_patterns=_relative_patterns,
        parse=_parse_relative,
        is_valid=is_valid_date_token,
    ),
    Grammar(
        name="special_date",
        parse_type="date",
        get_patterns=_special_patterns,
        parse=_parse_special,
        is_valid=is_valid_date_token,
    ),
)
