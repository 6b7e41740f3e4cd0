"""Reporting modules for Date Range Lab."""

from .export import export_selection, predefined_ranges_frame, selection_from_json, selection_to_json
from .markdown import generate_month_sheet, render_month_markdown

__all__ = [
    "export_selection",
    "generate_month_sheet",
    "predefined_ranges_frame",
    "render_month_markdown",
    "selection_from_json",
    "selection_to_json",
]
