"""Zone-aware calendar primitives and the range value."""

from .date_range import DateRange
from .zone import (
    UnknownZoneError,
    Weekday,
    add_days,
    add_milliseconds,
    add_years,
    calendar_days_between,
    compare,
    end_of_day,
    localize,
    resolve_zone,
    same_calendar_day,
    start_of_day,
    start_of_month,
    start_of_previous_month,
    to_instant,
    to_local,
    weekday_of,
)

__all__ = [
    "DateRange",
    "UnknownZoneError",
    "Weekday",
    "add_days",
    "add_milliseconds",
    "add_years",
    "calendar_days_between",
    "compare",
    "end_of_day",
    "localize",
    "resolve_zone",
    "same_calendar_day",
    "start_of_day",
    "start_of_month",
    "start_of_previous_month",
    "to_instant",
    "to_local",
    "weekday_of",
]
