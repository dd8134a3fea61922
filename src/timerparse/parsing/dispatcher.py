"""Top-level timer start parser.

Tries each token family in a fixed priority order: the duration grammar
first, then the date-time grammar. Bare and short numeric inputs ("5",
"5:30:00", "15.30") therefore always read as durations and never reach the
date patterns.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..constants import MAX_INPUT_LENGTH
from ..diagnostics import ErrorTemplate, TimerFormatError
from ..locale_utils import LocaleProfile, get_locale_profile
from .base import TimerStartToken
from .datetimes import parse_datetime
from .durations import parse_duration

__all__ = ["PARSERS", "parse", "try_parse"]

logger = logging.getLogger(__name__)

# Priority order of token families.
PARSERS: tuple[Callable[[str, LocaleProfile], TimerStartToken], ...] = (
    parse_duration,
    parse_datetime,
)


def parse(text: str, locale_code: str | None = None) -> TimerStartToken:
    """Parse user text into a timer start token.

    Args:
        text: Free-form phrase ("5", "5:30pm", "next friday", "2h 15m")
        locale_code: Locale for numeric date order and decimal symbol, or None
            for the system locale

    Returns:
        DurationToken or DateTimeToken

    Raises:
        TimerFormatError: If the text is empty, too long, or matches no
            pattern with a valid token

    Example:
        >>> parse("5", "en_US")
        DurationToken(years=0.0, months=0.0, weeks=0.0, days=0.0, hours=0.0, minutes=5.0, seconds=0.0)
    """
    if not isinstance(text, str):
        raise TimerFormatError(
            ErrorTemplate.input_type_invalid(text),
            input_value=repr(text),
            locale_code=locale_code or "",
        )
    stripped = text.strip()
    if not stripped:
        raise TimerFormatError(ErrorTemplate.input_empty(), input_value=text)
    if len(stripped) > MAX_INPUT_LENGTH:
        raise TimerFormatError(
            ErrorTemplate.input_too_long(len(stripped), MAX_INPUT_LENGTH),
            input_value=stripped[:MAX_INPUT_LENGTH],
        )

    profile = get_locale_profile(locale_code)
    for parser in PARSERS:
        try:
            return parser(stripped, profile)
        except TimerFormatError as e:
            logger.debug("%s rejected '%s'", e.parse_type or parser.__name__, stripped)

    raise TimerFormatError(
        ErrorTemplate.no_pattern_matched(stripped, ""),
        input_value=text,
        locale_code=profile.locale_code,
    )


def try_parse(text: str, locale_code: str | None = None) -> TimerStartToken | None:
    """Parse user text, returning None instead of raising on bad input."""
    try:
        return parse(text, locale_code)
    except TimerFormatError:
        return None
