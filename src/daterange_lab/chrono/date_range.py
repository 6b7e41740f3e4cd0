"""Immutable date range value."""

from dataclasses import dataclass
from datetime import tzinfo

import pandas as pd

from .zone import calendar_days_between, resolve_zone, to_local, zone_name

INCLUSIVE_CHOICES = ("both", "neither", "left", "right")


@dataclass(frozen=True)
class DateRange:
    """A (begins_at, ends_at) pair of instants with begins_at <= ends_at.

    Attributes:
        begins_at: First instant of the range, in the range's zone.
        ends_at: Last instant of the range, in the range's zone.
        zone: Zone used for day counts and display.

    Reversed endpoints are swapped on construction, so an instance never
    violates the ordering invariant.
    """

    begins_at: pd.Timestamp
    ends_at: pd.Timestamp
    zone: str = "UTC"

    def __post_init__(self):
        begins_at = to_local(self.zone, self.begins_at)
        ends_at = to_local(self.zone, self.ends_at)
        if begins_at > ends_at:
            begins_at, ends_at = ends_at, begins_at
        object.__setattr__(self, "begins_at", begins_at)
        object.__setattr__(self, "ends_at", ends_at)
        object.__setattr__(self, "zone", zone_name(self.zone))

    @classmethod
    def of(cls, zone: str | tzinfo, a, b) -> "DateRange":
        """Build a range from two instants in any order."""
        resolve_zone(zone)
        return cls(begins_at=a, ends_at=b, zone=zone_name(zone))

    @property
    def days(self) -> int:
        """Local calendar days between the endpoints (0 for a single day)."""
        return calendar_days_between(self.zone, self.begins_at, self.ends_at)

    def between(self, instant, inclusive: str = "left") -> bool:
        """Test membership of an instant.

        Args:
            instant: Instant to test.
            inclusive: Which edges are closed, as in ``pandas.Series.between``:
                "left" (default, half-open), "both", "right" or "neither".

        Returns:
            True if the instant lies inside the range.
        """
        if inclusive not in INCLUSIVE_CHOICES:
            raise ValueError(f"inclusive must be one of {INCLUSIVE_CHOICES}, got {inclusive!r}")
        t = to_local(self.zone, instant)
        after_begin = t >= self.begins_at if inclusive in ("both", "left") else t > self.begins_at
        before_end = t <= self.ends_at if inclusive in ("both", "right") else t < self.ends_at
        return bool(after_begin and before_end)

    def to_record(self) -> dict:
        """Serialize to a JSON-ready record.

        Returns:
            Dict with ISO-8601 strings (millisecond precision, with offset),
            epoch milliseconds and the zone name.
        """
        return {
            "begins_at": self.begins_at.isoformat(timespec="milliseconds"),
            "ends_at": self.ends_at.isoformat(timespec="milliseconds"),
            "begins_at_ms": _epoch_ms(self.begins_at),
            "ends_at_ms": _epoch_ms(self.ends_at),
            "zone": self.zone,
        }

    @classmethod
    def from_record(cls, record: dict) -> "DateRange":
        """Rebuild a range from ``to_record`` output.

        Epoch milliseconds are preferred; ISO strings are the fallback.

        Raises:
            ValueError: If an endpoint is missing from the record.
        """
        zone = record.get("zone", "UTC")
        try:
            begins_at = _endpoint(record, "begins_at")
            ends_at = _endpoint(record, "ends_at")
        except KeyError as e:
            raise ValueError(f"Range record is missing {e.args[0]}") from e
        return cls.of(zone, begins_at, ends_at)


def _epoch_ms(ts: pd.Timestamp) -> int:
    return ts.value // 1_000_000


def _endpoint(record: dict, field: str) -> pd.Timestamp:
    ms = record.get(f"{field}_ms")
    if ms is not None:
        return pd.Timestamp(int(ms), unit="ms", tz="UTC")
    if record.get(field):
        return pd.Timestamp(record[field])
    raise KeyError(field)
