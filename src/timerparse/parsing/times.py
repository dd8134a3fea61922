"""Time-of-day tokens: variants, resolution, rendering, and grammars.

Three closed variants:

- EmptyTimeToken: no time given; midnight of the resolved date
- NormalTimeToken: hour with optional minute, second and meridiem
- SpecialTimeToken: named times (noon, midnight)

A bare hour without a meridiem is ambiguous. Resolution prefers the
afternoon reading when the morning reading has already passed but the
afternoon one has not, and when an early hour (1-7) lands on a later day
than the reference. At most one 12-hour shift is applied.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from ..diagnostics import ErrorTemplate, TimerResolutionError
from ..enums import DateOrder, Meridiem, SpecialTimeKind
from ..locale_utils import LocaleProfile
from .grammar import Capture, Grammar

__all__ = [
    "EMPTY_TIME_GRAMMAR",
    "TIME_GRAMMARS",
    "EmptyTimeToken",
    "NormalTimeToken",
    "SpecialTimeToken",
    "TimeToken",
    "format_time_token",
    "is_valid_time_token",
    "resolve_time",
]

logger = logging.getLogger(__name__)

_HALF_DAY_HOURS = 12
_LAST_HOUR = 23
_LAST_MINUTE = 59
# Bare hours in (0, 8) on a later day read as afternoon or evening.
_EARLY_HOUR_LIMIT = 8

# ============================================================================
# TOKENS
# ============================================================================


@dataclass(frozen=True, slots=True)
class EmptyTimeToken:
    """No time given."""


@dataclass(frozen=True, slots=True)
class NormalTimeToken:
    """Clock time as typed.

    Attributes:
        hour: Hour as typed; 1..12 with AM/PM, else 0..23
        minute: Minute, or None when not typed
        second: Second, or None when not typed
        meridiem: AM, PM, explicit 24-hour marker, or None
    """

    hour: int
    minute: int | None = None
    second: int | None = None
    meridiem: Meridiem | None = None

    @property
    def normalized_hour(self) -> int:
        """Hour on the 24-hour clock: 12 AM is 0, 1-11 PM add 12."""
        match self.meridiem:
            case Meridiem.AM if self.hour == _HALF_DAY_HOURS:
                return 0
            case Meridiem.PM if 1 <= self.hour < _HALF_DAY_HOURS:
                return self.hour + _HALF_DAY_HOURS
        return self.hour


@dataclass(frozen=True, slots=True)
class SpecialTimeToken:
    """A named time of day."""

    kind: SpecialTimeKind


type TimeToken = EmptyTimeToken | NormalTimeToken | SpecialTimeToken

SPECIAL_TIMES: dict[SpecialTimeKind, time] = {
    SpecialTimeKind.MIDDAY: time(12, 0, 0),
    SpecialTimeKind.MIDNIGHT: time(0, 0, 0),
}

_SPECIAL_TIME_NAMES: dict[SpecialTimeKind, str] = {
    SpecialTimeKind.MIDDAY: "12 noon",
    SpecialTimeKind.MIDNIGHT: "12 midnight",
}


# ============================================================================
# VALIDITY
# ============================================================================


def _in_range(value: int | None, upper: int) -> bool:
    return value is None or 0 <= value <= upper


def is_valid_time_token(token: TimeToken) -> bool:
    """Check a time token before resolution or rendering."""
    match token:
        case NormalTimeToken(hour=hour, minute=minute, second=second, meridiem=meridiem):
            if meridiem in (Meridiem.AM, Meridiem.PM):
                hour_ok = 1 <= hour <= _HALF_DAY_HOURS
            else:
                hour_ok = 0 <= hour <= _LAST_HOUR
            if second is not None and minute is None:
                return False
            return hour_ok and _in_range(minute, _LAST_MINUTE) and _in_range(second, _LAST_MINUTE)
        case SpecialTimeToken(kind=kind):
            return kind in SPECIAL_TIMES
        case EmptyTimeToken():
            return True
    return False


# ============================================================================
# RESOLUTION
# ============================================================================


def resolve_time(token: TimeToken, min_dt: datetime, date_part: date) -> datetime:
    """Resolve a time token on a resolved date.

    Args:
        token: Valid time token
        min_dt: Reference instant
        date_part: Date the time falls on

    Returns:
        The combined instant

    Raises:
        TimerResolutionError: If the token is invalid
    """
    if not is_valid_time_token(token):
        raise TimerResolutionError(ErrorTemplate.token_invalid(token))

    match token:
        case SpecialTimeToken(kind=kind):
            return datetime.combine(date_part, SPECIAL_TIMES[kind])
        case NormalTimeToken():
            return _resolve_normal(token, min_dt, date_part)
    return datetime.combine(date_part, time())


def _resolve_normal(token: NormalTimeToken, min_dt: datetime, date_part: date) -> datetime:
    hour = token.normalized_hour
    value = datetime.combine(date_part, time(hour, token.minute or 0, token.second or 0))
    if token.meridiem is not None or hour >= _HALF_DAY_HOURS:
        return value

    shifted = value + timedelta(hours=_HALF_DAY_HOURS)
    morning_passed = value <= min_dt < shifted
    early_on_later_day = 0 < hour < _EARLY_HOUR_LIMIT and date_part != min_dt.date()
    if morning_passed or early_on_later_day:
        logger.debug("Reading bare hour %d as %s", token.hour, shifted.time())
        return shifted
    return value


# ============================================================================
# RENDERING
# ============================================================================


def _clock(hour: int, minute: int, second: int) -> str:
    text = str(hour)
    if minute or second:
        text += f":{minute:02d}"
    if second:
        text += f":{second:02d}"
    return text


def format_time_token(token: TimeToken) -> str:
    """Render a valid time token as an English phrase."""
    match token:
        case EmptyTimeToken():
            return ""
        case SpecialTimeToken(kind=kind):
            return _SPECIAL_TIME_NAMES[kind]
        case NormalTimeToken(hour=hour, meridiem=meridiem):
            minute, second = token.minute or 0, token.second or 0
            match meridiem:
                case Meridiem.TWENTY_FOUR_HOUR:
                    text = f"{hour:02d}:{minute:02d}"
                    if second:
                        text += f":{second:02d}"
                    return f"{text}h"
                case Meridiem.AM | Meridiem.PM:
                    if hour == _HALF_DAY_HOURS and not minute and not second:
                        return "12 noon" if meridiem is Meridiem.PM else "12 midnight"
                    return f"{_clock(hour, minute, second)} {meridiem}"
            return f"{_clock(hour, minute, second)} o'clock"
    return ""


# ============================================================================
# GRAMMARS
# ============================================================================

_AM = r"(?P<am>a\.?(?:\s*m\.?)?)"
_PM = r"(?P<pm>p\.?(?:\s*m\.?)?)"
_SUFFIX = rf"(?:{_AM}|{_PM}|o'?clock)"
_TWELVE = r"(?:12(?:[.:]00(?:[.:]00)?)?\s*)?"

_NORMAL_PATTERNS: tuple[str, ...] = (
    # 24-hour marker: "14:30h", "14:30 hrs"; a bare "1430h" reads as a duration first
    r"(?P<hour>\d\d?)(?:[.:]?(?P<minute>\d\d)(?:[.:]?(?P<second>\d\d))?)?\s*(?P<h24>h(?:ou)?rs?|h)",
    # "5:30", "5.30.15 pm", "5 o'clock"
    rf"(?P<hour>\d\d?)(?:[.:](?P<minute>\d\d)(?:[.:](?P<second>\d\d))?)?\s*{_SUFFIX}?",
    # "530pm", "113015 am"
    rf"(?P<hour>\d\d?)(?:(?P<minute>\d\d)(?P<second>\d\d)?)?\s*{_SUFFIX}?",
)

_SPECIAL_PATTERNS: tuple[str, ...] = (
    rf"{_TWELVE}(?P<midday>noon|mid(?:-?d)?ay)",
    rf"{_TWELVE}(?P<midnight>mid-?night)",
)


def _normal_patterns(_order: DateOrder) -> tuple[str, ...]:
    return _NORMAL_PATTERNS


def _parse_normal(capture: Capture, _profile: LocaleProfile) -> NormalTimeToken:
    if capture.am:
        meridiem: Meridiem | None = Meridiem.AM
    elif capture.pm:
        meridiem = Meridiem.PM
    elif capture.h24:
        meridiem = Meridiem.TWENTY_FOUR_HOUR
    else:
        meridiem = None
    return NormalTimeToken(
        hour=int(capture.hour or "0"),
        minute=int(capture.minute) if capture.minute is not None else None,
        second=int(capture.second) if capture.second is not None else None,
        meridiem=meridiem,
    )


def _special_patterns(_order: DateOrder) -> tuple[str, ...]:
    return _SPECIAL_PATTERNS


def _parse_special(capture: Capture, _profile: LocaleProfile) -> SpecialTimeToken:
    return SpecialTimeToken(
        kind=SpecialTimeKind.MIDDAY if capture.midday else SpecialTimeKind.MIDNIGHT
    )


def _empty_patterns(_order: DateOrder) -> tuple[str, ...]:
    return ("",)


def _parse_empty(_capture: Capture, _profile: LocaleProfile) -> EmptyTimeToken:
    return EmptyTimeToken()


EMPTY_TIME_GRAMMAR: Grammar[TimeToken] = Grammar(
    name="empty_time",
    parse_type="time",
    get_patterns=_empty_patterns,
    parse=_parse_empty,
    is_valid=is_valid_time_token,
    is_empty=True,
)

# Priority order of time grammars.
TIME_GRAMMARS: tuple[Grammar[TimeToken], ...] = (
    EMPTY_TIME_GRAMMAR,
    Grammar(
        name="normal_time",
        parse_type="time",
        get_patterns=_normal_patterns,
        parse=_parse_normal,
        is_valid=is_valid_time_token,
    ),
    Grammar(
        name="special_time",
        parse_type="time",
        get_patterns=_special_patterns,
        parse=_parse_special,
        is_valid=is_valid_time_token,
    ),
)
