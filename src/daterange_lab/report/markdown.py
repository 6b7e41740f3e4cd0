"""Markdown month sheet."""

from datetime import tzinfo

import pandas as pd

from daterange_lab.chrono.date_range import DateRange
from daterange_lab.chrono.zone import to_local, zone_name
from daterange_lab.config import DEFAULT_CALENDAR
from daterange_lab.features.month_grid import build_month_grid
from daterange_lab.humanize.labels import range_label
from daterange_lab.rules.predefined import predefined_ranges

WEEKDAY_HEADERS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def render_cell(row) -> str:
    """Render one grid row as a Markdown table cell.

    Disabled days are struck through, today is bold and selected days are
    wrapped in brackets.
    """
    text = f"{row['top']} ({row['bottom']})"
    if not row["eligible"]:
        text = f"~~{text}~~"
    if row["is_today"]:
        text = f"**{text}**"
    if row["in_selection"]:
        text = f"[{text}]"
    return text


def render_month_markdown(grid: pd.DataFrame, title: str) -> str:
    """Render a month grid as a Markdown calendar table."""
    lines = [f"## {title}", ""]
    lines.append("| " + " | ".join(WEEKDAY_HEADERS) + " |")
    lines.append("|" + "---|" * len(WEEKDAY_HEADERS))

    for _, week in grid.groupby("week", sort=True):
        cells = [""] * 7
        for _, row in week.iterrows():
            cells[int(row["dow"])] = render_cell(row)
        lines.append("| " + " | ".join(cells) + " |")

    return "\n".join(lines)


def generate_month_sheet(
    zone: str | tzinfo,
    today,
    anchor=None,
    selection: DateRange | None = None,
    exclude_holidays: bool = False,
    calendar: str = DEFAULT_CALENDAR,
) -> str:
    """Generate a Markdown sheet: month calendar plus quick-pick table."""
    grid = build_month_grid(
        zone,
        today,
        anchor=anchor,
        selection=selection,
        exclude_holidays=exclude_holidays,
        calendar=calendar,
    )
    local_today = to_local(zone, today)

    lines = []
    lines.append("# Date Range Lab")
    lines.append("")
    lines.append(f"**Zone:** {zone_name(zone)}")
    lines.append(f"**Today:** {local_today.strftime('%Y-%m-%d %H:%M')}")
    if anchor is not None:
        lines.append(f"**Anchor:** {to_local(zone, anchor).strftime('%Y-%m-%d')}")
    if selection is not None:
        lines.append(f"**Selection:** {range_label(zone, today, selection)}")
    lines.append("")

    lines.append(render_month_markdown(grid, local_today.strftime("%B %Y")))
    lines.append("")

    lines.append("## Quick Picks")
    lines.append("")
    lines.append("| Range | From | To | Caption |")
    lines.append("|---|---|---|---|")
    for label, date_range in predefined_ranges(zone, today):
        begin = date_range.begins_at.strftime("%Y-%m-%d %H:%M")
        end = date_range.ends_at.strftime("%Y-%m-%d %H:%M")
        lines.append(f"| {label} | {begin} | {end} | {range_label(zone, today, date_range)} |")

    return "\n".join(lines)
