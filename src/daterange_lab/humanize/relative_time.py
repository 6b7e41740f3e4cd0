"""Relative-time phrases ("today", "3 days ago", "1 day from now")."""

from datetime import tzinfo

from daterange_lab.chrono.zone import calendar_days_between, compare


def relative_time(zone: str | tzinfo, today, target) -> str:
    """Describe ``target`` relative to ``today`` in whole local days.

    Args:
        zone: Zone whose calendar days are counted.
        today: Current instant.
        target: Instant to describe.

    Returns:
        "today", "1 day ago", "N days ago", "1 day from now" or "N days from now".
    """
    cmp = compare(target, today)
    distance = calendar_days_between(zone, target, today)

    # Both checks are kept; they agree for every input.
    if distance == 0 or cmp == 0:
        return "today"
    if distance == 1 and cmp > 0:
        return "1 day from now"
    if distance == 1 and cmp < 0:
        return "1 day ago"
    if cmp > 0:
        return f"{distance} days from now"
    return f"{distance} days ago"
