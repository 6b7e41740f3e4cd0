"""Exchange trading calendar gate using exchange-calendars."""

from datetime import date, tzinfo

import exchange_calendars as xcals
import pandas as pd

from daterange_lab.config import DEFAULT_CALENDAR

from .zone import local_date, weekday_of


def get_trading_sessions(
    start_date: date,
    end_date: date,
    calendar: str = DEFAULT_CALENDAR,
) -> list[date]:
    """Get list of trading sessions between start and end dates.

    Args:
        start_date: Start date (inclusive).
        end_date: End date (inclusive).
        calendar: Exchange calendar code (default: XNYS for NYSE).

    Returns:
        List of trading session dates.
    """
    cal = xcals.get_calendar(calendar)

    start_ts = max(pd.Timestamp(start_date), cal.first_session)
    end_ts = min(pd.Timestamp(end_date), cal.last_session)
    if start_ts > end_ts:
        return []

    sessions = cal.sessions_in_range(start_ts, end_ts)

    return [s.date() for s in sessions]


def is_session_day(
    zone: str | tzinfo,
    day,
    calendar: str = DEFAULT_CALENDAR,
) -> bool:
    """Check if the local calendar day of an instant is a trading session.

    Days outside the calendar's known bounds fall back to the weekday rule.

    Args:
        zone: Zone used to resolve the instant's calendar day.
        day: Instant to check.
        calendar: Exchange calendar code (default: XNYS for NYSE).

    Returns:
        True if the day is a trading session.
    """
    cal = xcals.get_calendar(calendar)
    ts = pd.Timestamp(local_date(zone, day))

    if ts < cal.first_session or ts > cal.last_session:
        return not weekday_of(zone, day).is_weekend

    return bool(cal.is_session(ts))
