"""Quick-pick ranges relative to today."""

from datetime import tzinfo
from typing import NamedTuple

from daterange_lab.chrono.date_range import DateRange
from daterange_lab.chrono.zone import (
    add_days,
    add_milliseconds,
    end_of_day,
    start_of_day,
    start_of_month,
    start_of_previous_month,
)

PREDEFINED_LABELS = (
    "Today",
    "Yesterday",
    "Last 7 days",
    "Last 30 days",
    "This month",
    "Last month",
)


class PredefinedRange(NamedTuple):
    label: str
    range: DateRange


def predefined_ranges(zone: str | tzinfo, today) -> list[PredefinedRange]:
    """Build the quick-pick menu for ``today``.

    "Last N days" ranges end at the last millisecond of yesterday, so today
    is excluded. "This month" ends at ``today`` itself, not at end of day.

    Args:
        zone: Zone whose wall-clock day and month boundaries are used.
        today: Current instant.

    Returns:
        Ranges in menu order, labelled as in PREDEFINED_LABELS.
    """
    yesterday = add_days(zone, today, -1)
    today_start = start_of_day(zone, today)
    before_today = add_milliseconds(today_start, -1)
    month_start = start_of_month(zone, today)

    return [
        PredefinedRange("Today", DateRange.of(zone, today_start, end_of_day(zone, today))),
        PredefinedRange(
            "Yesterday",
            DateRange.of(zone, start_of_day(zone, yesterday), end_of_day(zone, yesterday)),
        ),
        PredefinedRange(
            "Last 7 days",
            DateRange.of(zone, start_of_day(zone, add_days(zone, today, -7)), before_today),
        ),
        PredefinedRange(
            "Last 30 days",
            DateRange.of(zone, start_of_day(zone, add_days(zone, today, -30)), before_today),
        ),
        PredefinedRange("This month", DateRange.of(zone, month_start, today)),
        PredefinedRange(
            "Last month",
            DateRange.of(
                zone,
                start_of_previous_month(zone, today),
                add_milliseconds(month_start, -1),
            ),
        ),
    ]


def find_predefined(zone: str | tzinfo, today, label: str) -> DateRange | None:
    """Return the quick-pick range with the given label, or None."""
    for predefined in predefined_ranges(zone, today):
        if predefined.label == label:
            return predefined.range
    return None
