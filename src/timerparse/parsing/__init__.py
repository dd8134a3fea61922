"""Timer start parsing: token families, grammars, and the dispatcher.

Public API:
    parse - Parse text into a TimerStartToken (raises TimerFormatError)
    try_parse - Parse text, returning None on failure
    DurationToken - Elapsed-time start
    DateTimeToken - Absolute date and time start

Date and time token variants live in timerparse.parsing.dates and
timerparse.parsing.times.

Python 3.13+.
"""

from .base import TimerStartToken
from .composition import clear_pattern_cache
from .dates import (
    DateToken,
    DayOfWeekDateToken,
    EmptyDateToken,
    NormalDateToken,
    RelativeDateToken,
    SpecialDateToken,
    resolve_date,
)
from .datetimes import DateTimeToken
from .dispatcher import parse, try_parse
from .durations import DurationToken, clear_duration_cache
from .times import (
    EmptyTimeToken,
    NormalTimeToken,
    SpecialTimeToken,
    TimeToken,
    resolve_time,
)

__all__ = [
    "DateTimeToken",
    "DateToken",
    "DayOfWeekDateToken",
    "DurationToken",
    "EmptyDateToken",
    "EmptyTimeToken",
    "NormalDateToken",
    "NormalTimeToken",
    "RelativeDateToken",
    "SpecialDateToken",
    "SpecialTimeToken",
    "TimeToken",
    "TimerStartToken",
    "clear_duration_cache",
    "clear_pattern_cache",
    "parse",
    "resolve_date",
    "resolve_time",
    "try_parse",
]
