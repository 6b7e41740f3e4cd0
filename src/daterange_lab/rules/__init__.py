"""Picking rules for Date Range Lab."""

from .eligibility import eligible, eligible_session
from .predefined import PREDEFINED_LABELS, PredefinedRange, find_predefined, predefined_ranges

__all__ = [
    "eligible",
    "eligible_session",
    "PREDEFINED_LABELS",
    "PredefinedRange",
    "find_predefined",
    "predefined_ranges",
]
