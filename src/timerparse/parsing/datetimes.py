"""Absolute date-time timer starts.

DateTimeToken glues a date token and a time token into one absolute
instant. Resolution first lets the reference date itself qualify; when that
yields an instant at or before the start, the date is resolved again with the
reference date excluded ("5pm" typed at 6pm means tomorrow).

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from ..diagnostics import ErrorTemplate, TimerFormatError
from ..enums import TimerStartType
from ..locale_utils import LocaleProfile
from .base import TimerStartToken
from .composition import get_pattern_definitions
from .dates import DateToken, EmptyDateToken, format_date_token, is_valid_date_token, resolve_date
from .grammar import Capture
from .times import EmptyTimeToken, TimeToken, format_time_token, is_valid_time_token, resolve_time

__all__ = ["DateTimeToken", "parse_datetime"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DateTimeToken(TimerStartToken):
    """A date and a time of day; either part may be empty."""

    date: DateToken = EmptyDateToken()
    time: TimeToken = EmptyTimeToken()

    @property
    def is_valid(self) -> bool:
        return is_valid_date_token(self.date) and is_valid_time_token(self.time)

    @property
    def type(self) -> TimerStartType:
        return TimerStartType.DATE_TIME

    def _compute_end_time(self, start: datetime) -> datetime:
        date_part = resolve_date(self.date, start, inclusive=True)
        end = resolve_time(self.time, start, date_part)
        if end <= start:
            date_part = resolve_date(self.date, start, inclusive=False)
            end = resolve_time(self.time, start, date_part)
            logger.debug("Re-resolved %r past start %s: %s", self, start, end)
        return end

    def _render(self, profile: LocaleProfile) -> str:
        date_text = format_date_token(self.date, profile)
        time_text = format_time_token(self.time)
        if date_text and time_text:
            return f"{date_text} at {time_text}"
        return date_text or time_text


def parse_datetime(text: str, profile: LocaleProfile) -> DateTimeToken:
    """Parse text with the date-time grammar.

    Candidates are tried in composition order; the first whole-string match
    whose token is valid wins.

    Args:
        text: Stripped user input
        profile: Active locale profile

    Returns:
        The parsed token

    Raises:
        TimerFormatError: If no candidate yields a valid token
    """
    for definition in get_pattern_definitions(profile.date_order):
        match = definition.pattern.fullmatch(text)
        if match is None:
            continue
        capture = Capture.from_match(match)
        try:
            token = DateTimeToken(
                date=definition.date_grammar.build(capture, profile),
                time=definition.time_grammar.build(capture, profile),
            )
        except TimerFormatError as e:
            logger.debug("Rejected %s for '%s': %s", definition.name, text, e.diagnostic)
            continue
        if token.is_valid:
            logger.debug("Matched %s for '%s': %r", definition.name, text, token)
            return token

    raise TimerFormatError(
        ErrorTemplate.no_pattern_matched(text, "datetime"),
        input_value=text,
        locale_code=profile.locale_code,
        parse_type="datetime",
    )
