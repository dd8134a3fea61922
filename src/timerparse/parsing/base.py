"""Resolvable timer start tokens.

TimerStartToken is the result of a successful parse: an immutable value that
computes an end time against a caller-supplied start instant and renders
back to a display phrase. Two families implement it: DateTimeToken (an
absolute date and time of day) and DurationToken (elapsed time).

Python 3.13+.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..diagnostics import ErrorTemplate, TimerResolutionError
from ..locale_utils import get_locale_profile

if TYPE_CHECKING:
    from datetime import datetime

    from ..enums import TimerStartType
    from ..locale_utils import LocaleProfile

__all__ = ["TimerStartToken"]


class TimerStartToken(ABC):
    """Abstract resolvable starting point for a timer.

    Subclasses are frozen dataclasses. Resolution and rendering require
    is_valid; calling either on an invalid token raises
    TimerResolutionError.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def is_valid(self) -> bool:
        """Whether every field is within range."""

    @property
    @abstractmethod
    def type(self) -> TimerStartType:
        """Token family."""

    @abstractmethod
    def _compute_end_time(self, start: datetime) -> datetime: ...

    @abstractmethod
    def _render(self, profile: LocaleProfile) -> str: ...

    def get_end_time(self, start: datetime) -> datetime:
        """Resolve the end time of a timer started at start.

        Args:
            start: Timer start instant (local wall-clock time)

        Returns:
            End time, never before start

        Raises:
            TimerResolutionError: If the token is invalid, the end time is
                out of the supported range, or it precedes start
        """
        self._require_valid()
        try:
            end = self._compute_end_time(start)
        except (OverflowError, ValueError) as e:
            raise TimerResolutionError(ErrorTemplate.arithmetic_overflow(start, str(e))) from e
        if end < start:
            raise TimerResolutionError(ErrorTemplate.end_time_before_start(end, start))
        return end

    def try_get_end_time(self, start: datetime) -> datetime | None:
        """Resolve the end time, returning None when it cannot be computed."""
        try:
            return self.get_end_time(start)
        except TimerResolutionError:
            return None

    def to_string(self, locale_code: str | None = None) -> str:
        """Render the token as a phrase that parses back under the same locale.

        Args:
            locale_code: Locale for date order and decimal symbol, or None for
                the system locale

        Raises:
            TimerResolutionError: If the token is invalid
        """
        self._require_valid()
        return self._render(get_locale_profile(locale_code))

    def _require_valid(self) -> None:
        if not self.is_valid:
            raise TimerResolutionError(ErrorTemplate.token_invalid(self))
