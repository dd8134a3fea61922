"""Application-facing timer start.

TimerStart pairs the text a user typed with its parsed token and the locale
it was parsed under, so that the surrounding application can keep recent
inputs, check whether a start is still usable, and display it again.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .constants import DEFAULT_TIMER_INPUT, ZERO_TIMER_INPUT
from .diagnostics import TimerFormatError
from .enums import TimerStartType
from .locale_utils import resolve_locale
from .parsing import TimerStartToken, parse

__all__ = ["TimerStart"]


@dataclass(frozen=True, slots=True)
class TimerStart:
    """A parsed timer start.

    Attributes:
        input: Text as typed
        token: Parsed token
        locale_code: Locale the text was parsed under
    """

    input: str
    token: TimerStartToken
    locale_code: str

    @classmethod
    def from_string(cls, text: str, locale_code: str | None = None) -> TimerStart:
        """Parse text into a TimerStart.

        Raises:
            TimerFormatError: If the text is not a timer start
        """
        code = resolve_locale(locale_code)
        return cls(input=text, token=parse(text, code), locale_code=code)

    @classmethod
    def try_from_string(cls, text: str, locale_code: str | None = None) -> TimerStart | None:
        try:
            return cls.from_string(text, locale_code)
        except TimerFormatError:
            return None

    @classmethod
    def default(cls) -> TimerStart:
        """Five-minute timer."""
        return cls.from_string(DEFAULT_TIMER_INPUT, "en")

    @classmethod
    def zero(cls) -> TimerStart:
        """Timer that expires immediately."""
        return cls.from_string(ZERO_TIMER_INPUT, "en")

    @property
    def type(self) -> TimerStartType:
        return self.token.type

    @property
    def is_valid(self) -> bool:
        return self.token.is_valid

    def get_end_time(self, start: datetime) -> datetime:
        return self.token.get_end_time(start)

    def try_get_end_time(self, start: datetime) -> datetime | None:
        return self.token.try_get_end_time(start)

    def is_current(self, now: datetime | None = None) -> bool:
        """Whether a timer started now would end now or later.

        Date-time starts stop being current once their end time cannot be
        reached from now; durations always are.
        """
        moment = datetime.now() if now is None else now
        end = self.try_get_end_time(moment)
        return end is not None and end >= moment

    def to_string(self) -> str:
        return self.token.to_string(self.locale_code)

    def __str__(self) -> str:
        return self.to_string()
