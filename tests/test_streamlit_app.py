"""Tests for the picker page helpers."""

from datetime import date

import pandas as pd

from daterange_lab.app.streamlit_app import check_selection, dates_to_selection
from daterange_lab.chrono.date_range import DateRange
from daterange_lab.config import PickerConfig


def utc(value: str) -> pd.Timestamp:
    return pd.Timestamp(value, tz="UTC")


class TestDatesToSelection:
    """Tests for converting date_input output."""

    def test_two_dates_cover_whole_days(self):
        selection, anchor = dates_to_selection("UTC", (date(2024, 3, 8), date(2024, 3, 14)))

        assert anchor is None
        assert selection.begins_at == utc("2024-03-08 00:00")
        assert selection.ends_at == utc("2024-03-14 23:59:59.999")

    def test_reversed_dates_are_swapped(self):
        selection, _ = dates_to_selection("UTC", (date(2024, 3, 14), date(2024, 3, 8)))
        assert selection.begins_at < selection.ends_at

    def test_single_date_is_anchor(self):
        selection, anchor = dates_to_selection("UTC", (date(2024, 3, 18),))

        assert selection is None
        assert anchor == utc("2024-03-18 00:00")

    def test_plain_date_is_anchor(self):
        _, anchor = dates_to_selection("UTC", date(2024, 3, 18))
        assert anchor == utc("2024-03-18 00:00")

    def test_empty_pick(self):
        assert dates_to_selection("UTC", ()) == (None, None)

    def test_dates_are_local_to_zone(self):
        selection, _ = dates_to_selection("Europe/Berlin", (date(2024, 3, 15), date(2024, 3, 15)))
        assert selection.begins_at == utc("2024-03-14 23:00")
        assert selection.ends_at == utc("2024-03-15 22:59:59.999")


class TestCheckSelection:
    """Tests for endpoint warnings."""

    def test_weekday_range_has_no_warnings(self):
        selection = DateRange.of("UTC", utc("2024-03-11 00:00"), utc("2024-03-15 23:59:59.999"))
        assert check_selection(PickerConfig(), selection) == []

    def test_weekend_start_warns(self):
        selection = DateRange.of("UTC", utc("2024-03-16 00:00"), utc("2024-03-18 23:59:59.999"))
        warnings = check_selection(PickerConfig(), selection)

        assert len(warnings) == 1
        assert "start day" in warnings[0]

    def test_range_longer_than_a_year_warns(self):
        selection = DateRange.of("UTC", utc("2024-03-18 00:00"), utc("2025-03-18 23:59:59.999"))
        warnings = check_selection(PickerConfig(), selection)

        assert len(warnings) == 1
        assert "end day" in warnings[0]

    def test_holiday_end_warns_only_when_excluded(self):
        selection = DateRange.of("UTC", utc("2025-12-22 00:00"), utc("2025-12-25 23:59:59.999"))

        assert check_selection(PickerConfig(), selection) == []
        assert len(check_selection(PickerConfig(exclude_holidays=True), selection)) == 1
