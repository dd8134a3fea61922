"""Enumerations for timerparse type-safe constants.

Uses StrEnum for automatic string conversion where the value is a name, and
IntEnum where the value is an index that takes part in arithmetic.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class Weekday(IntEnum):
    """Day of the week, indexed from Sunday.

    Sunday-first indexing decides the "next week" rule: a target weekday with a
    greater index than the reference day still falls inside the current week.
    """

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class DayOfWeekRelation(StrEnum):
    """How a weekday phrase relates to the reference date."""

    NEXT = "next"
    """First occurrence after the reference date: "friday", "next friday\""""

    AFTER_NEXT = "after_next"
    """One week after the next occurrence: "friday after next\""""

    NEXT_WEEK = "next_week"
    """Occurrence within the following week: "friday next week\""""


class RelativeDay(StrEnum):
    """Day offset from the reference date."""

    TODAY = "today"
    TOMORROW = "tomorrow"

    @property
    def day_delta(self) -> int:
        """Days to add to the reference date."""
        return 0 if self is RelativeDay.TODAY else 1


class SpecialDateKind(StrEnum):
    """Fixed calendar dates recognized by name."""

    NEW_YEAR = "new_year"
    CHRISTMAS_DAY = "christmas_day"
    NEW_YEARS_EVE = "new_years_eve"


class SpecialTimeKind(StrEnum):
    """Fixed times of day recognized by name."""

    MIDDAY = "midday"
    MIDNIGHT = "midnight"


class Meridiem(StrEnum):
    """Marker disambiguating the hour of a clock time.

    StrEnum provides automatic string conversion: str(Meridiem.AM) == "am"
    """

    AM = "am"
    """Ante meridiem, hour 1..12"""

    PM = "pm"
    """Post meridiem, hour 1..12"""

    TWENTY_FOUR_HOUR = "h24"
    """Explicit 24-hour clock: "14:30h", "08:00 hours".

    Without a separator ("1430h") the text reads as a duration unless it
    follows a date, as in "tomorrow at 1430h".
    """


class DateOrder(StrEnum):
    """Field order of a locale's short date format.

    Decides which reading of an ambiguous numeric date such as "02/03" is
    tried first.
    """

    DAY_FIRST = "day_first"
    MONTH_FIRST = "month_first"
    YEAR_FIRST = "year_first"


class TimerStartType(StrEnum):
    """Family of a parsed timer start."""

    DURATION = "duration"
    """Elapsed time added to the start instant"""

    DATE_TIME = "date_time"
    """Absolute date and time of day"""


__all__ = [
    "DateOrder",
    "DayOfWeekRelation",
    "Meridiem",
    "RelativeDay",
    "SpecialDateKind",
    "SpecialTimeKind",
    "TimerStartType",
    "Weekday",
]
