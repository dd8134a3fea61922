"""Tests for duration tokens and the duration grammar.

Python 3.13+.
"""

from __future__ import annotations

import math
from datetime import datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import duration_tokens, reference_instants
from timerparse.diagnostics import DiagnosticCode, TimerFormatError, TimerResolutionError
from timerparse.enums import TimerStartType
from timerparse.locale_utils import get_locale_profile
from timerparse.parsing.durations import DurationToken, parse_duration

START = datetime(2015, 1, 1)


def _parse(text: str, locale_code: str = "en_US") -> DurationToken:
    return parse_duration(text, get_locale_profile(locale_code))


class TestDurationToken:
    def test_default_is_zero_and_valid(self) -> None:
        token = DurationToken()
        assert token.is_valid
        assert token.get_end_time(START) == START

    def test_type(self) -> None:
        assert DurationToken(minutes=5).type is TimerStartType.DURATION

    @pytest.mark.parametrize(
        "token",
        [DurationToken(hours=-1), DurationToken(days=math.inf), DurationToken(seconds=math.nan)],
    )
    def test_invalid_values(self, token: DurationToken) -> None:
        assert not token.is_valid
        with pytest.raises(TimerResolutionError):
            token.get_end_time(START)
        with pytest.raises(TimerResolutionError):
            token.to_string("en_US")

    def test_units_largest_first(self) -> None:
        names = [name for name, _ in DurationToken().units()]
        assert names == ["years", "months", "weeks", "days", "hours", "minutes", "seconds"]


class TestDurationEndTime:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            (DurationToken(minutes=5), datetime(2015, 1, 1, 0, 5)),
            (DurationToken(seconds=30.5), datetime(2015, 1, 1, 0, 0, 30, 500000)),
            (DurationToken(days=1.5), datetime(2015, 1, 2, 12)),
            (DurationToken(weeks=1.5), datetime(2015, 1, 11, 12)),
            (DurationToken(weeks=5), datetime(2015, 2, 5)),
            (DurationToken(months=1.5), datetime(2015, 2, 15)),
            (DurationToken(years=1.5), datetime(2016, 7, 1)),
        ],
    )
    def test_end_times(self, token: DurationToken, expected: datetime) -> None:
        assert token.get_end_time(START) == expected

    def test_days_applied_before_fractional_months(self) -> None:
        """1 day moves the start into February, so half a month measures March."""
        start = datetime(2015, 1, 31)
        token = DurationToken(days=1, months=0.5)
        # 1 Feb + half of 28 days (Feb -> Mar) = 15 Feb
        assert token.get_end_time(start) == datetime(2015, 2, 15)

    def test_days_applied_before_whole_months(self) -> None:
        """Adding the month first would clamp 31 January to 28 February."""
        token = DurationToken(days=1, months=1)
        assert token.get_end_time(datetime(2015, 1, 31)) == datetime(2015, 3, 1)

    def test_overflow_is_resolution_error(self) -> None:
        with pytest.raises(TimerResolutionError) as exc_info:
            DurationToken(years=20000).get_end_time(START)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.ARITHMETIC_OVERFLOW

    def test_try_get_end_time_returns_none_on_overflow(self) -> None:
        assert DurationToken(days=1e12).try_get_end_time(START) is None

    @given(token=duration_tokens, start=reference_instants)
    def test_never_before_start(self, token: DurationToken, start: datetime) -> None:
        assert token.get_end_time(start) >= start


class TestMinutesOnly:
    @pytest.mark.parametrize(("text", "minutes"), [("0", 0), ("5", 5), ("90", 90), (" 15 ", 15)])
    def test_bare_number_is_minutes(self, text: str, minutes: int) -> None:
        assert _parse(text) == DurationToken(minutes=minutes)


class TestShortForm:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("15 30", DurationToken(minutes=15, seconds=30)),
            ("15.30", DurationToken(minutes=15, seconds=30)),
            ("15:30", DurationToken(minutes=15, seconds=30)),
            ("5:30:00", DurationToken(hours=5, minutes=30)),
            ("72:15:30", DurationToken(hours=72, minutes=15, seconds=30)),
            ("38:72:15:30", DurationToken(days=38, hours=72, minutes=15, seconds=30)),
            ("2 38 72 15 30", DurationToken(months=2, days=38, hours=72, minutes=15, seconds=30)),
            (
                "1:2:38:72:15:30",
                DurationToken(years=1, months=2, days=38, hours=72, minutes=15, seconds=30),
            ),
        ],
    )
    def test_positions_fill_from_right(self, text: str, expected: DurationToken) -> None:
        assert _parse(text) == expected

    def test_too_many_parts_rejected(self) -> None:
        with pytest.raises(TimerFormatError):
            _parse("1:2:3:4:5:6:7")


class TestLongForm:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("5 minutes", DurationToken(minutes=5)),
            ("1 min", DurationToken(minutes=1)),
            ("30s", DurationToken(seconds=30)),
            ("30 secs", DurationToken(seconds=30)),
            ("2 hours 15 minutes", DurationToken(hours=2, minutes=15)),
            ("2h, 15m and 10s", DurationToken(hours=2, minutes=15, seconds=10)),
            ("15m30s", DurationToken(minutes=15, seconds=30)),
            ("72hr 15min 30sec", DurationToken(hours=72, minutes=15, seconds=30)),
            ("1.5 hours", DurationToken(hours=1.5)),
            ("30.5s", DurationToken(seconds=30.5)),
            ("3 wks", DurationToken(weeks=3)),
            ("2 dys", DurationToken(days=2)),
            ("6 mo", DurationToken(months=6)),
            ("6 mons", DurationToken(months=6)),
            ("1 yr", DurationToken(years=1)),
            ("2 YEARS", DurationToken(years=2)),
            ("10m 5m", DurationToken(minutes=15)),
        ],
    )
    def test_units(self, text: str, expected: DurationToken) -> None:
        assert _parse(text) == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("15m30", DurationToken(minutes=15, seconds=30)),
            ("72h15", DurationToken(hours=72, minutes=15)),
            ("72h15m30", DurationToken(hours=72, minutes=15, seconds=30)),
            ("2 hours 15", DurationToken(hours=2, minutes=15)),
            ("1 day 6", DurationToken(days=1, hours=6)),
            ("1 year 6", DurationToken(years=1, months=6)),
        ],
    )
    def test_trailing_number_takes_next_smaller_unit(
        self, text: str, expected: DurationToken
    ) -> None:
        assert _parse(text) == expected

    def test_locale_decimal_symbol(self) -> None:
        assert _parse("1,5 h", "de_DE") == DurationToken(hours=1.5)

    def test_foreign_decimal_symbol_rejected(self) -> None:
        with pytest.raises(TimerFormatError):
            _parse("1,5 h", "en_US")

    @pytest.mark.parametrize("text", ["5 pm", "friday", "14 feb", "h", "5 parsecs", ""])
    def test_not_durations(self, text: str) -> None:
        with pytest.raises(TimerFormatError) as exc_info:
            _parse(text)
        assert exc_info.value.parse_type == "duration"


class TestRendering:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            (DurationToken(), "0 seconds"),
            (DurationToken(minutes=1), "1 minute"),
            (DurationToken(hours=1, minutes=30), "1 hour 30 minutes"),
            (DurationToken(years=2, weeks=1, seconds=5), "2 years 1 week 5 seconds"),
            (DurationToken(hours=1.5), "1.5 hours"),
            (DurationToken(minutes=1500), "1500 minutes"),
        ],
    )
    def test_english(self, token: DurationToken, expected: str) -> None:
        assert token.to_string("en_US") == expected

    def test_german_decimal_symbol(self) -> None:
        assert DurationToken(hours=1.5).to_string("de_DE") == "1,5 hours"

    def test_long_fraction_is_not_truncated(self) -> None:
        token = DurationToken(hours=1.7421875)
        text = token.to_string("en_US")
        assert text == "1.7421875 hours"
        assert _parse(text, "en_US") == token
        start = datetime(2024, 1, 1)
        assert _parse(text, "en_US").get_end_time(start) == token.get_end_time(start)

    @given(token=duration_tokens, locale_code=st.sampled_from(["en_US", "de_DE", "fr_FR"]))
    def test_rendering_parses_back(self, token: DurationToken, locale_code: str) -> None:
        assert _parse(token.to_string(locale_code), locale_code) == token
