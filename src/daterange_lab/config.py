"""Configuration for Date Range Lab."""

from dataclasses import asdict, dataclass, replace
from pathlib import Path

from daterange_lab.chrono.zone import resolve_zone

# Paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
EXPORT_DIR = PROJECT_ROOT / "exports"

# Zones
DEFAULT_ZONE = "UTC"
ZONE_CHOICES = [
    "UTC",
    "Europe/London",
    "Europe/Berlin",
    "America/New_York",
    "America/Los_Angeles",
    "America/Sao_Paulo",
    "Asia/Tokyo",
    "Australia/Sydney",
]

# Exchange calendar used when holidays are disabled in the picker
DEFAULT_CALENDAR = "XNYS"

# Logging
LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class PickerConfig:
    """Options shown in the picker's configuration form.

    Changing an option produces a new config; the picker is rebuilt from it.
    """

    zone: str = DEFAULT_ZONE
    show_predefined_ranges: bool = True
    show_day_labels: bool = True
    show_range_label: bool = True
    exclude_holidays: bool = False
    calendar: str = DEFAULT_CALENDAR

    def __post_init__(self):
        resolve_zone(self.zone)

    def with_changes(self, **changes) -> "PickerConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return asdict(self)
