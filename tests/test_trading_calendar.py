"""Tests for the exchange trading calendar gate."""

from datetime import date

import pandas as pd

from daterange_lab.chrono.trading_calendar import get_trading_sessions, is_session_day


def utc(value: str) -> pd.Timestamp:
    return pd.Timestamp(value, tz="UTC")


class TestGetTradingSessions:
    """Tests for get_trading_sessions function."""

    def test_no_weekends_in_sessions(self):
        """Trading sessions should never include weekends."""
        sessions = get_trading_sessions(date(2025, 11, 1), date(2025, 11, 30))

        for session in sessions:
            # weekday() returns 5 for Saturday, 6 for Sunday
            assert session.weekday() < 5, f"{session} is a weekend day"

    def test_christmas_2025_excluded(self):
        """Dec 25, 2025 is Christmas and should be excluded."""
        sessions = get_trading_sessions(date(2025, 12, 20), date(2025, 12, 31))
        assert date(2025, 12, 25) not in sessions

    def test_empty_range_returns_empty(self):
        """A Saturday-Sunday range has no sessions."""
        assert get_trading_sessions(date(2025, 12, 27), date(2025, 12, 28)) == []

    def test_range_outside_calendar_returns_empty(self):
        assert get_trading_sessions(date(1900, 1, 1), date(1900, 1, 31)) == []


class TestIsSessionDay:
    """Tests for is_session_day function."""

    def test_weekday_is_session(self):
        # Monday Dec 22, 2025
        assert is_session_day("UTC", utc("2025-12-22 12:00")) is True

    def test_holiday_is_not_session(self):
        assert is_session_day("UTC", utc("2025-12-25 12:00")) is False

    def test_zone_decides_the_day(self):
        """Dec 24 20:00 UTC is already Christmas in Tokyo."""
        t = utc("2025-12-24 20:00")
        assert is_session_day("UTC", t) is True
        assert is_session_day("Asia/Tokyo", t) is False

    def test_outside_bounds_uses_weekday_rule(self):
        # Monday Jan 1, 1900 and Saturday Jan 6, 1900
        assert is_session_day("UTC", utc("1900-01-01 12:00")) is True
        assert is_session_day("UTC", utc("1900-01-06 12:00")) is False
