"""Human-readable labels for instants and ranges."""

from .labels import DayLabel, day_label, range_label
from .relative_time import relative_time

__all__ = ["DayLabel", "day_label", "range_label", "relative_time"]
