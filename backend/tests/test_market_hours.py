"""
Session / News Gate Tests
"""
from datetime import datetime, timedelta, timezone

import pytest

from fxsignal.core.market_hours import (
    evaluate_gates,
    get_market_status,
    is_news_blackout,
    is_session_open,
    parse_window,
)


def utc(hour, minute=0):
    return datetime(2024, 3, 5, hour, minute, tzinfo=timezone.utc)


class TestSession:

    def test_asian_hours_blocked(self):
        assert is_session_open(utc(3)) is False

    def test_london_open(self):
        assert is_session_open(utc(10)) is True

    @pytest.mark.parametrize("hour", [7, 12, 16, 21])
    def test_bounds_inclusive(self, hour):
        assert is_session_open(utc(hour, 59)) is True

    @pytest.mark.parametrize("hour", [0, 6, 22, 23])
    def test_outside(self, hour):
        assert is_session_open(utc(hour)) is False

    def test_converts_to_utc(self):
        tokyo = timezone(timedelta(hours=9))
        # 19:00 Tokyo == 10:00 UTC
        assert is_session_open(datetime(2024, 3, 5, 19, 0, tzinfo=tokyo)) is True

    def test_naive_taken_as_utc(self):
        assert is_session_open(datetime(2024, 3, 5, 3, 0)) is False

    def test_custom_windows(self):
        assert is_session_open(utc(3), [(0, 8)]) is True


class TestNews:

    @pytest.mark.parametrize("minute", [0, 30, 59])
    def test_thirteen_hundred_blocked(self, minute):
        assert is_news_blackout(utc(13, minute)) is True

    def test_fourteen_hundred_blocked(self):
        assert is_news_blackout(utc(14, 0)) is True

    def test_fourteen_oh_one_allowed(self):
        assert is_news_blackout(utc(14, 1)) is False

    def test_twelve_fifty_nine_allowed(self):
        assert is_news_blackout(utc(12, 59)) is False

    def test_parse_window(self):
        start, end = parse_window("08:30-09:15")
        assert (start.hour, start.minute, end.hour, end.minute) == (8, 30, 9, 15)

    def test_bad_window(self):
        with pytest.raises(ValueError):
            parse_window("13h-14h")


class TestEvaluateGates:

    def test_allowed(self):
        decision = evaluate_gates(utc(10))
        assert decision.allowed is True
        assert decision.reason is None

    def test_session_blocked(self):
        decision = evaluate_gates(utc(3))
        assert decision.allowed is False
        assert decision.reason == "Outside trading session"

    def test_news_blocked(self):
        decision = evaluate_gates(utc(13, 30))
        assert decision.allowed is False
        assert decision.news_blackout is True
        assert decision.reason == "High-impact news window"

    def test_filters_disabled(self):
        assert evaluate_gates(utc(3), session_filter=False).allowed is True
        assert evaluate_gates(utc(13, 30), news_filter=False).allowed is True

    def test_market_status(self):
        status = get_market_status(utc(13, 15))
        assert status["allowed"] is False
        assert status["session_open"] is True
        assert status["current_time_utc"] == "13:15:00"
        assert status["current_date"] == "2024-03-05"


class TestOvernightWindows:

    @pytest.mark.parametrize("hour", [22, 23, 0, 2])
    def test_session_wraps_midnight(self, hour):
        assert is_session_open(utc(hour), [(22, 2)]) is True

    @pytest.mark.parametrize("hour", [3, 10, 21])
    def test_session_outside_overnight_window(self, hour):
        assert is_session_open(utc(hour), [(22, 2)]) is False

    @pytest.mark.parametrize("hour,minute", [(23, 30), (23, 45), (0, 0), (0, 30)])
    def test_blackout_wraps_midnight(self, hour, minute):
        assert is_news_blackout(utc(hour, minute), ["23:30-00:30"]) is True

    @pytest.mark.parametrize("hour,minute", [(23, 29), (0, 31), (12, 0)])
    def test_outside_overnight_blackout(self, hour, minute):
        assert is_news_blackout(utc(hour, minute), ["23:30-00:30"]) is False
