"""Tests for picker configuration."""

from dataclasses import FrozenInstanceError

import pytest

from daterange_lab.chrono.zone import UnknownZoneError
from daterange_lab.config import DEFAULT_CALENDAR, DEFAULT_ZONE, ZONE_CHOICES, PickerConfig


class TestPickerConfig:
    """Tests for the immutable PickerConfig."""

    def test_defaults(self):
        config = PickerConfig()
        assert config.zone == DEFAULT_ZONE
        assert config.show_predefined_ranges
        assert config.show_day_labels
        assert config.show_range_label
        assert not config.exclude_holidays
        assert config.calendar == DEFAULT_CALENDAR

    def test_with_changes_returns_new_value(self):
        config = PickerConfig()
        changed = config.with_changes(zone="Europe/Berlin", exclude_holidays=True)

        assert changed is not config
        assert changed.zone == "Europe/Berlin"
        assert changed.exclude_holidays
        assert config.zone == DEFAULT_ZONE
        assert not config.exclude_holidays

    def test_unchanged_configs_are_equal(self):
        assert PickerConfig().with_changes() == PickerConfig()

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            PickerConfig().zone = "Asia/Tokyo"

    def test_unknown_zone_rejected(self):
        with pytest.raises(UnknownZoneError):
            PickerConfig(zone="Nowhere/Special")
        with pytest.raises(UnknownZoneError):
            PickerConfig().with_changes(zone="Nowhere/Special")

    def test_to_dict(self):
        d = PickerConfig().to_dict()
        assert d["zone"] == DEFAULT_ZONE
        assert set(d) == {
            "zone",
            "show_predefined_ranges",
            "show_day_labels",
            "show_range_label",
            "exclude_holidays",
            "calendar",
        }

    def test_zone_choices_resolve(self):
        for zone in ZONE_CHOICES:
            assert PickerConfig(zone=zone).zone == zone
