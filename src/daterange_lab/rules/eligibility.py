"""Which calendar days may be picked."""

from datetime import tzinfo

from daterange_lab.chrono.date_range import DateRange
from daterange_lab.chrono.trading_calendar import is_session_day
from daterange_lab.chrono.zone import add_years, weekday_of
from daterange_lab.config import DEFAULT_CALENDAR


def eligible(zone: str | tzinfo, day, anchor=None) -> bool:
    """Check whether a day may be picked.

    Weekends are never eligible. While a selection is in progress (``anchor``
    set), the day must also fall in ``[anchor, anchor + 1 year)``.

    Args:
        zone: Zone used to resolve weekdays and calendar years.
        day: Instant of the day under the cursor.
        anchor: Begin instant already picked, or None.

    Returns:
        True if the day can be clicked.
    """
    on_weekend = weekday_of(zone, day).is_weekend

    if anchor is None:
        return not on_weekend

    window = DateRange.of(zone, anchor, add_years(zone, anchor, 1))
    return not on_weekend and window.between(day, inclusive="left")


def eligible_session(
    zone: str | tzinfo,
    day,
    anchor=None,
    calendar: str = DEFAULT_CALENDAR,
) -> bool:
    """Like ``eligible`` but also rejects exchange holidays."""
    return eligible(zone, day, anchor) and is_session_day(zone, day, calendar)
