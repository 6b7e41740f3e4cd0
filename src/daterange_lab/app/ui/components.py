"""Reusable UI components for Date Range Lab.

This module provides the formatters and HTML snippets used by the picker page.
"""

import html

import pandas as pd
import streamlit as st

# =============================================================================
# Color Palette
# =============================================================================
COLORS = {
    "bg": "#0e1117",
    "card": "#1a1d24",
    "border": "#2d3139",
    "text": "#fafafa",
    "secondary": "#9ca3af",
    "disabled": "#4b5563",
    "today": "#3b82f6",
    "selected": "#166534",
    "anchor": "#c2410c",
}

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


# =============================================================================
# Date Formatting
# =============================================================================
def format_instant_human(ts: pd.Timestamp | None) -> str:
    """Format an instant as "Mar 15, 2024 10:00".

    Args:
        ts: Zone-aware timestamp, or None.

    Returns:
        Formatted string, or "" for None.
    """
    if ts is None:
        return ""
    return f"{ts.strftime('%b')} {ts.day}, {ts.year} {ts.strftime('%H:%M')}"


def format_range_human(begins_at: pd.Timestamp, ends_at: pd.Timestamp) -> str:
    """Format a range's endpoints, e.g. "Mar 1, 2024 00:00 → Mar 15, 2024 10:00"."""
    return f"{format_instant_human(begins_at)} → {format_instant_human(ends_at)}"


# =============================================================================
# Calendar Cells
# =============================================================================
def get_cell_colors(eligible: bool, is_today: bool, in_selection: bool, is_anchor: bool = False) -> tuple[str, str]:
    """Get background and text colors for a calendar cell.

    Returns:
        Tuple of (background_color, text_color).
    """
    if is_anchor:
        bg = COLORS["anchor"]
    elif in_selection:
        bg = COLORS["selected"]
    elif is_today:
        bg = COLORS["today"]
    else:
        bg = COLORS["card"]

    text = COLORS["text"] if eligible else COLORS["disabled"]
    return (bg, text)


def render_day_cell(top: str, bottom: str | None, eligible: bool, is_today: bool, in_selection: bool, is_anchor: bool = False) -> str:
    """Render one calendar cell as HTML.

    Args:
        top: Day-of-month line.
        bottom: Day-offset line, or None to hide it.
        eligible: Whether the day can be picked.
        is_today: Whether the day is today.
        in_selection: Whether the day is inside the current selection.
        is_anchor: Whether the day is the in-progress selection's begin.

    Returns:
        HTML string for the cell.
    """
    bg, fg = get_cell_colors(eligible, is_today, in_selection, is_anchor)
    decoration = "none" if eligible else "line-through"
    bottom_html = ""
    if bottom is not None:
        bottom_html = f'<div style="font-size:0.7rem;color:{COLORS["secondary"]};">{html.escape(bottom)}</div>'
    return (
        f'<td style="background-color:{bg};color:{fg};border:1px solid {COLORS["border"]};'
        f'text-align:center;padding:6px;text-decoration:{decoration};">'
        f'<div style="font-size:1rem;font-weight:600;">{html.escape(top)}</div>'
        f"{bottom_html}</td>"
    )


def render_month_table(grid: pd.DataFrame, show_day_labels: bool = True, anchor_date: str | None = None) -> str:
    """Render a month grid as an HTML table (Monday-first).

    Args:
        grid: Output of ``build_month_grid``.
        show_day_labels: Whether to show the day-offset line.
        anchor_date: "YYYY-MM-DD" of the anchor day, if any.

    Returns:
        HTML string for the table.
    """
    header = "".join(f'<th style="color:{COLORS["secondary"]};padding:4px;">{name}</th>' for name in WEEKDAY_NAMES)
    rows = []
    for _, week in grid.groupby("week", sort=True):
        cells = ["<td></td>"] * 7
        for _, row in week.iterrows():
            cells[int(row["dow"])] = render_day_cell(
                row["top"],
                row["bottom"] if show_day_labels else None,
                bool(row["eligible"]),
                bool(row["is_today"]),
                bool(row["in_selection"]),
                row["date"] == anchor_date,
            )
        rows.append(f"<tr>{''.join(cells)}</tr>")

    return f'<table style="border-collapse:collapse;width:100%;"><tr>{header}</tr>{"".join(rows)}</table>'


# =============================================================================
# Range Caption
# =============================================================================
def render_range_caption(caption: str, begins_at: pd.Timestamp, ends_at: pd.Timestamp) -> None:
    """Render the picker caption card."""
    card_style = (
        f'background-color:{COLORS["card"]};border:1px solid {COLORS["border"]};'
        "border-radius:8px;padding:16px;margin-bottom:12px;"
    )
    card_html = (
        f'<div style="{card_style}">'
        f'<div style="font-size:1.3rem;font-weight:600;color:{COLORS["text"]};">{html.escape(caption)}</div>'
        f'<div style="font-size:0.85rem;color:{COLORS["secondary"]};">'
        f"{html.escape(format_range_human(begins_at, ends_at))}</div></div>"
    )
    st.markdown(card_html, unsafe_allow_html=True)
