"""Picker features for Date Range Lab."""

from .month_grid import build_month_grid, grid_to_weeks

__all__ = ["build_month_grid", "grid_to_weeks"]
