"""Day-cell and range-caption labels."""

from datetime import tzinfo
from typing import NamedTuple

from daterange_lab.chrono.date_range import DateRange
from daterange_lab.chrono.zone import calendar_days_between, compare, same_calendar_day, to_local

from .relative_time import relative_time


class DayLabel(NamedTuple):
    """Two-line calendar cell label: day of month over signed day offset."""

    top: str
    bottom: str


def day_label(zone: str | tzinfo, day, today) -> DayLabel:
    """Build the label for one calendar cell.

    Examples:
        today          -> DayLabel("15", "0")
        today + 5 days -> DayLabel("20", "+5d")
        today - 2 days -> DayLabel("13", "-2d")
    """
    cmp = compare(day, today)
    distance = calendar_days_between(zone, day, today)

    if distance == 0 or cmp == 0:
        sign = ""
    elif cmp > 0:
        sign = "+"
    else:
        sign = "-"

    bottom = sign + ("0" if distance == 0 else f"{distance}d")
    return DayLabel(top=str(to_local(zone, day).day), bottom=bottom)


def range_label(zone: str | tzinfo, today, date_range: DateRange) -> str:
    """One-line caption for a selected range."""
    begin, end = date_range.begins_at, date_range.ends_at

    if same_calendar_day(zone, begin, end):
        if same_calendar_day(zone, end, today):
            return "today"
        return relative_time(zone, today, begin)

    return f"from {relative_time(zone, today, begin)} to {relative_time(zone, today, end)}"
