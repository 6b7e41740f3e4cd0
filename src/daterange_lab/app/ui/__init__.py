"""UI components for Date Range Lab."""

from daterange_lab.app.ui.components import (
    format_instant_human,
    format_range_human,
    get_cell_colors,
    render_day_cell,
    render_month_table,
    render_range_caption,
)

__all__ = [
    "format_instant_human",
    "format_range_human",
    "get_cell_colors",
    "render_day_cell",
    "render_month_table",
    "render_range_caption",
]
