"""timerparse - natural-language timer start parser.

Turns free-form phrases ("5", "5:30pm", "next friday", "2 hours 15 minutes",
"christmas", "14 feb at noon") into either an elapsed duration or an absolute
date and time, resolved against a start instant in local wall-clock time.
Locale data (numeric date order, decimal symbol) comes from Babel.

Public API:
    parse - Parse text into a TimerStartToken
    try_parse - Parse text, returning None on failure
    TimerStart - Parsed input with its locale, for applications
    TimerStartToken - Common base of DurationToken and DateTimeToken

Exceptions:
    TimerError - Base exception class
    TimerFormatError - Text is not a timer start
    TimerResolutionError - Token cannot be resolved to a usable end time

Submodules:
    timerparse.parsing - Token families, grammars, dispatcher
    timerparse.calendar_utils - Fractional month/year arithmetic, names
    timerparse.locale_utils - Locale profiles and number handling
    timerparse.diagnostics - Error types and diagnostic codes
"""

from .calendar_utils import add_fractional_months, add_fractional_years
from .diagnostics import TimerError, TimerFormatError, TimerResolutionError
from .enums import TimerStartType
from .locale_utils import clear_locale_cache
from .parsing import (
    DateTimeToken,
    DurationToken,
    TimerStartToken,
    clear_duration_cache,
    clear_pattern_cache,
    parse,
    try_parse,
)
from .timer_start import TimerStart

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("timerparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"


def clear_caches() -> None:
    """Clear locale, date-time pattern and duration pattern caches."""
    clear_locale_cache()
    clear_pattern_cache()
    clear_duration_cache()


__all__ = [
    "DateTimeToken",
    "DurationToken",
    "TimerError",
    "TimerFormatError",
    "TimerResolutionError",
    "TimerStart",
    "TimerStartToken",
    "TimerStartType",
    "__version__",
    "add_fractional_months",
    "add_fractional_years",
    "clear_caches",
    "parse",
    "try_parse",
]
