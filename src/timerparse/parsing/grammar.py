"""Grammar records shared by the date and time token families.

A Grammar is a stateless description of one token variant: the regex
fragments it recognizes (named groups, no anchors), and a builder that turns
the captured text into a token. Captured groups are bound to a typed Capture
record immediately after a match; nothing past that boundary looks up groups
by name.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import regex

from ..diagnostics import ErrorTemplate, TimerFormatError
from ..enums import DateOrder
from ..locale_utils import LocaleProfile

__all__ = ["Capture", "Grammar"]


@dataclass(frozen=True, slots=True)
class Capture:
    """Typed view of the named groups of a date-time match.

    Text fields hold the captured text or None; flag fields record whether
    the marker group participated in the match.
    """

    text: str
    # Date side
    day: str | None = None
    month: str | None = None
    year: str | None = None
    weekday: str | None = None
    after_next: bool = False
    next_week: bool = False
    today: bool = False
    tomorrow: bool = False
    new_year: bool = False
    christmas_day: bool = False
    new_years_eve: bool = False
    # Time side
    hour: str | None = None
    minute: str | None = None
    second: str | None = None
    am: bool = False
    pm: bool = False
    h24: bool = False
    midday: bool = False
    midnight: bool = False

    @classmethod
    def from_match(cls, match: regex.Match[str]) -> Capture:
        """Bind the named groups of a match."""
        groups = match.groupdict()

        def flag(name: str) -> bool:
            return groups.get(name) is not None

        return cls(
            text=match.group(0),
            day=groups.get("day"),
            month=groups.get("month"),
            year=groups.get("year"),
            weekday=groups.get("weekday"),
            after_next=flag("after_next"),
            next_week=flag("next_week"),
            today=flag("today"),
            tomorrow=flag("tomorrow"),
            new_year=flag("new_year"),
            christmas_day=flag("christmas_day"),
            new_years_eve=flag("new_years_eve"),
            hour=groups.get("hour"),
            minute=groups.get("minute"),
            second=groups.get("second"),
            am=flag("am"),
            pm=flag("pm"),
            h24=flag("h24"),
            midday=flag("midday"),
            midnight=flag("midnight"),
        )


@dataclass(frozen=True, slots=True)
class Grammar[T]:
    """One token variant's patterns and builder.

    Attributes:
        name: Identifier used in logs
        parse_type: Token family ('date' or 'time')
        get_patterns: Regex fragments in priority order for a date order
        parse: Builds a token from a capture
        is_valid: Validity check for built tokens
        is_empty: Whether this is the variant matching no text at all
    """

    name: str
    parse_type: str
    get_patterns: Callable[[DateOrder], tuple[str, ...]]
    parse: Callable[[Capture, LocaleProfile], T]
    is_valid: Callable[[T], bool]
    is_empty: bool = False

    def is_compatible_with(self, other: Grammar[Any]) -> bool:
        """Two empty grammars never pair: an all-empty token would match nothing."""
        return not (self.is_empty and other.is_empty)

    def build(self, capture: Capture, profile: LocaleProfile) -> T:
        """Build a token and check it.

        Raises:
            TimerFormatError: If the built token is not valid
        """
        token = self.parse(capture, profile)
        if not self.is_valid(token):
            raise TimerFormatError(
                ErrorTemplate.token_fields_invalid(capture.text, token),
                input_value=capture.text,
                locale_code=profile.locale_code,
                parse_type=self.parse_type,
            )
        return token
