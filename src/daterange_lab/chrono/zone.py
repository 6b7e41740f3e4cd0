"""Zone-aware calendar primitives.

Instants are timezone-aware ``pandas.Timestamp`` values. Every function that
needs local calendar fields takes the zone explicitly; nothing here reads the
system clock.
"""

import calendar
from datetime import datetime, tzinfo
from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pandas as pd

ONE_MILLISECOND = pd.Timedelta(milliseconds=1)


class UnknownZoneError(ValueError):
    """Raised when a timezone name cannot be resolved."""


class Weekday(Enum):
    """Day of week, numbered like ``Timestamp.dayofweek`` (0=Monday)."""

    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SAT, Weekday.SUN)


def resolve_zone(zone: str | tzinfo) -> tzinfo:
    """Resolve a zone name to a tzinfo.

    Args:
        zone: IANA name (e.g. "Europe/Berlin") or an existing tzinfo.

    Returns:
        The tzinfo for the zone.

    Raises:
        UnknownZoneError: If the name is not a known IANA zone.
    """
    if isinstance(zone, tzinfo):
        return zone
    try:
        return ZoneInfo(str(zone))
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UnknownZoneError(f"Unknown timezone: {zone!r}") from e


def zone_name(zone: str | tzinfo) -> str:
    """Return the IANA name of a zone."""
    if isinstance(zone, str):
        return zone
    return getattr(zone, "key", None) or str(zone)


def to_instant(value: pd.Timestamp | datetime | str) -> pd.Timestamp:
    """Convert a value to a UTC instant. Naive values are read as UTC."""
    ts = pd.Timestamp(value)
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


def to_local(zone: str | tzinfo, t) -> pd.Timestamp:
    """Express an instant in the zone's wall-clock time."""
    return to_instant(t).tz_convert(resolve_zone(zone))


def localize(zone: str | tzinfo, naive: pd.Timestamp) -> pd.Timestamp:
    """Read a naive wall-clock time in ``zone``.

    Times in a DST gap resolve to the first instant after the gap; repeated
    times resolve to the earlier instant.
    """
    return naive.tz_localize(
        resolve_zone(zone),
        ambiguous=True,
        nonexistent="shift_forward",
    )


def _local_midnight(zone, t) -> pd.Timestamp:
    return to_local(zone, t).tz_localize(None).normalize()


def weekday_of(zone: str | tzinfo, t) -> Weekday:
    """Return the local weekday of an instant."""
    return Weekday(to_local(zone, t).dayofweek)


def start_of_day(zone: str | tzinfo, t) -> pd.Timestamp:
    """Return the first instant of the local day containing ``t``."""
    return localize(zone, _local_midnight(zone, t))


def end_of_day(zone: str | tzinfo, t) -> pd.Timestamp:
    """Return the last millisecond of the local day containing ``t``."""
    next_midnight = _local_midnight(zone, t) + pd.Timedelta(days=1)
    return localize(zone, next_midnight) - ONE_MILLISECOND


def start_of_month(zone: str | tzinfo, t) -> pd.Timestamp:
    """Return local midnight on the first day of ``t``'s month."""
    return localize(zone, _local_midnight(zone, t).replace(day=1))


def start_of_previous_month(zone: str | tzinfo, t) -> pd.Timestamp:
    """Return local midnight on the first day of the month before ``t``'s."""
    first = _local_midnight(zone, t).replace(day=1)
    previous = (first - pd.Timedelta(days=1)).replace(day=1)
    return localize(zone, previous)


def add_days(zone: str | tzinfo, t, days: int) -> pd.Timestamp:
    """Shift by whole local days, keeping the wall-clock time of day."""
    naive = to_local(zone, t).tz_localize(None)
    return localize(zone, naive + pd.Timedelta(days=days))


def add_milliseconds(t, ms: int) -> pd.Timestamp:
    """Shift an instant by an absolute number of milliseconds."""
    return to_instant(t) + pd.Timedelta(milliseconds=ms)


def add_years(zone: str | tzinfo, t, years: int) -> pd.Timestamp:
    """Set the local year forward by ``years``, keeping month, day and time.

    Feb 29 in a non-leap target year clamps to Feb 28.
    """
    naive = to_local(zone, t).tz_localize(None)
    year = naive.year + years
    day = naive.day
    if naive.month == 2 and day == 29 and not calendar.isleap(year):
        day = 28
    return localize(zone, naive.replace(year=year, day=day))


def compare(a, b) -> int:
    """Return -1, 0 or 1 as ``a`` is before, equal to or after ``b``."""
    a, b = to_instant(a), to_instant(b)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def local_date(zone: str | tzinfo, t):
    """Return the zone-local calendar date of an instant."""
    return to_local(zone, t).date()


def calendar_days_between(zone: str | tzinfo, a, b) -> int:
    """Return the non-negative count of local calendar days between two instants."""
    return abs((local_date(zone, a) - local_date(zone, b)).days)


def same_calendar_day(zone: str | tzinfo, a, b) -> bool:
    """True if both instants fall on the same local calendar day."""
    return local_date(zone, a) == local_date(zone, b)
