"""Month grid for the picker calendar."""

from datetime import tzinfo

import pandas as pd

from daterange_lab.chrono.date_range import DateRange
from daterange_lab.chrono.zone import (
    add_days,
    same_calendar_day,
    start_of_day,
    start_of_month,
    to_local,
    weekday_of,
)
from daterange_lab.config import DEFAULT_CALENDAR
from daterange_lab.humanize.labels import day_label
from daterange_lab.rules.eligibility import eligible, eligible_session

GRID_COLUMNS = ["date", "instant", "dow", "week", "top", "bottom", "eligible", "is_today", "in_selection"]


def build_month_grid(
    zone: str | tzinfo,
    today,
    month_of=None,
    anchor=None,
    selection: DateRange | None = None,
    exclude_holidays: bool = False,
    calendar: str = DEFAULT_CALENDAR,
) -> pd.DataFrame:
    """Build one row per local day of a month.

    Args:
        zone: Zone of the calendar.
        today: Current instant, used for day labels and the today marker.
        month_of: Any instant in the month to show (default: today's month).
        anchor: Begin instant of an in-progress selection, if any.
        selection: Currently selected range, if any.
        exclude_holidays: Also disable exchange holidays.
        calendar: Exchange calendar code used when holidays are excluded.

    Returns:
        DataFrame with columns: date, instant, dow, week, top, bottom,
        eligible, is_today, in_selection. ``week`` is the 0-indexed row of
        the Monday-first calendar grid.
    """
    first = start_of_month(zone, today if month_of is None else month_of)
    # Cells are tested at their first instant, so the anchor must be too.
    if anchor is not None:
        anchor = start_of_day(zone, anchor)
    month = to_local(zone, first).month
    offset = weekday_of(zone, first).value

    records = []
    day = first
    while to_local(zone, day).month == month:
        local = to_local(zone, day)
        label = day_label(zone, day, today)

        if exclude_holidays:
            can_pick = eligible_session(zone, day, anchor, calendar)
        else:
            can_pick = eligible(zone, day, anchor)

        records.append({
            "date": local.strftime("%Y-%m-%d"),
            "instant": local,
            "dow": weekday_of(zone, day).value,  # 0=Monday, 6=Sunday
            "week": (local.day - 1 + offset) // 7,
            "top": label.top,
            "bottom": label.bottom,
            "eligible": can_pick,
            "is_today": same_calendar_day(zone, day, today),
            "in_selection": _in_selection(zone, day, selection),
        })
        day = add_days(zone, day, 1)

    return pd.DataFrame(records, columns=GRID_COLUMNS)


def _in_selection(zone, day, selection: DateRange | None) -> bool:
    if selection is None:
        return False
    # A day is shown as selected if any part of it overlaps the range.
    return (
        selection.between(day, inclusive="both")
        or same_calendar_day(zone, day, selection.begins_at)
        or same_calendar_day(zone, day, selection.ends_at)
    )


def grid_to_weeks(grid: pd.DataFrame, column: str = "top") -> pd.DataFrame:
    """Pivot a month grid into a Monday-first week x weekday table.

    Empty cells (days of neighbouring months) are empty strings.
    """
    table = grid.pivot(index="week", columns="dow", values=column)
    table = table.reindex(columns=range(7)).fillna("")
    table.columns = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    return table
