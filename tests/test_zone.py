"""Tests for zone-aware calendar primitives."""

import pandas as pd
import pytest

from daterange_lab.chrono.zone import (
    UnknownZoneError,
    Weekday,
    add_days,
    add_milliseconds,
    add_years,
    calendar_days_between,
    compare,
    end_of_day,
    localize,
    resolve_zone,
    same_calendar_day,
    start_of_day,
    start_of_month,
    start_of_previous_month,
    to_instant,
    weekday_of,
)


def utc(value: str) -> pd.Timestamp:
    return pd.Timestamp(value, tz="UTC")


class TestResolveZone:
    """Tests for zone resolution and instant conversion."""

    def test_known_zone(self):
        assert str(resolve_zone("Europe/Berlin")) == "Europe/Berlin"

    def test_unknown_zone_raises(self):
        with pytest.raises(UnknownZoneError):
            resolve_zone("Mars/Olympus_Mons")

    def test_unknown_zone_is_value_error(self):
        with pytest.raises(ValueError):
            resolve_zone("Not/AZone")

    def test_naive_value_is_utc(self):
        assert to_instant("2024-03-15 10:00") == utc("2024-03-15 10:00")

    def test_aware_value_keeps_instant(self):
        berlin = pd.Timestamp("2024-03-15 11:00", tz="Europe/Berlin")
        assert to_instant(berlin) == utc("2024-03-15 10:00")


class TestWeekday:
    """Tests for weekday resolution."""

    def test_saturday_is_weekend(self):
        assert weekday_of("UTC", utc("2024-03-16 12:00")) is Weekday.SAT
        assert Weekday.SAT.is_weekend

    def test_friday_is_not_weekend(self):
        assert weekday_of("UTC", utc("2024-03-15 12:00")) is Weekday.FRI
        assert not Weekday.FRI.is_weekend

    def test_weekday_depends_on_zone(self):
        """Friday 20:00 UTC is already Saturday morning in Tokyo."""
        t = utc("2024-03-15 20:00")
        assert weekday_of("UTC", t) is Weekday.FRI
        assert weekday_of("Asia/Tokyo", t) is Weekday.SAT


class TestDayBoundaries:
    """Tests for start/end of day and month."""

    def test_start_of_day_utc(self):
        assert start_of_day("UTC", utc("2024-03-15 10:00")) == utc("2024-03-15 00:00")

    def test_end_of_day_is_last_millisecond(self):
        assert end_of_day("UTC", utc("2024-03-15 10:00")) == utc("2024-03-15 23:59:59.999")

    def test_start_of_day_uses_local_date(self):
        """02:00 UTC on Mar 15 is still Mar 14 in New York (EDT, UTC-4)."""
        result = start_of_day("America/New_York", utc("2024-03-15 02:00"))
        assert result == utc("2024-03-14 04:00")

    def test_short_dst_day(self):
        """The spring-forward day in New York lasts 23 hours."""
        t = pd.Timestamp("2024-03-10 12:00", tz="America/New_York")
        begin = start_of_day("America/New_York", t)
        end = end_of_day("America/New_York", t)

        assert begin == utc("2024-03-10 05:00")
        assert end == utc("2024-03-11 03:59:59.999")
        assert end - begin == pd.Timedelta(hours=23) - pd.Timedelta(milliseconds=1)

    def test_nonexistent_midnight_shifts_forward(self):
        """Sao Paulo skipped 00:00-01:00 on 2018-11-04."""
        t = utc("2018-11-04 15:00")
        assert start_of_day("America/Sao_Paulo", t) == utc("2018-11-04 03:00")

    def test_start_of_month(self):
        assert start_of_month("UTC", utc("2024-03-15 10:00")) == utc("2024-03-01 00:00")

    def test_start_of_previous_month_rolls_year(self):
        assert start_of_previous_month("UTC", utc("2024-01-10 08:00")) == utc("2023-12-01 00:00")

    def test_start_of_previous_month_in_zone(self):
        result = start_of_previous_month("Europe/Berlin", utc("2024-03-15 10:00"))
        assert result == utc("2024-01-31 23:00")


class TestArithmetic:
    """Tests for day, millisecond and year arithmetic."""

    def test_add_days_keeps_wall_clock_across_dst(self):
        t = pd.Timestamp("2024-03-09 12:00", tz="America/New_York")
        result = add_days("America/New_York", t, 1)

        assert result == pd.Timestamp("2024-03-10 12:00", tz="America/New_York")
        assert result - t == pd.Timedelta(hours=23)

    def test_add_days_negative_crosses_month(self):
        assert add_days("UTC", utc("2024-03-01 10:00"), -1) == utc("2024-02-29 10:00")

    def test_add_milliseconds(self):
        assert add_milliseconds(utc("2024-03-15 00:00"), -1) == utc("2024-03-14 23:59:59.999")

    def test_add_years_keeps_month_and_day(self):
        assert add_years("UTC", utc("2024-03-18 09:30"), 1) == utc("2025-03-18 09:30")

    def test_add_years_clamps_feb_29(self):
        assert add_years("UTC", utc("2024-02-29 00:00"), 1) == utc("2025-02-28 00:00")

    def test_add_years_keeps_feb_29_in_leap_year(self):
        assert add_years("UTC", utc("2024-02-29 00:00"), 4) == utc("2028-02-29 00:00")

    def test_localize_gap_shifts_forward(self):
        """02:30 on Mar 31, 2024 is skipped in Berlin."""
        assert localize("Europe/Berlin", pd.Timestamp("2024-03-31 02:30")) == utc("2024-03-31 01:00")

    def test_localize_overlap_takes_earlier(self):
        """02:30 on Oct 27, 2024 happens twice in Berlin."""
        assert localize("Europe/Berlin", pd.Timestamp("2024-10-27 02:30")) == utc("2024-10-27 00:30")


class TestComparison:
    """Tests for compare and calendar-day distance."""

    def test_compare(self):
        a, b = utc("2024-03-15 10:00"), utc("2024-03-15 11:00")
        assert compare(a, b) == -1
        assert compare(b, a) == 1
        assert compare(a, a) == 0

    def test_compare_across_zones(self):
        berlin = pd.Timestamp("2024-03-15 11:00", tz="Europe/Berlin")
        assert compare(berlin, utc("2024-03-15 10:00")) == 0

    def test_days_between_is_non_negative(self):
        a, b = utc("2024-03-10 10:00"), utc("2024-03-15 09:00")
        assert calendar_days_between("UTC", a, b) == 5
        assert calendar_days_between("UTC", b, a) == 5

    def test_days_between_counts_calendar_days(self):
        """23:00 and 01:00 the next day are one calendar day apart."""
        assert calendar_days_between("UTC", utc("2024-03-15 23:00"), utc("2024-03-16 01:00")) == 1

    def test_days_between_across_dst(self):
        """47 elapsed hours over the spring-forward day are still two days."""
        a = pd.Timestamp("2024-03-09 12:00", tz="America/New_York")
        b = pd.Timestamp("2024-03-11 12:00", tz="America/New_York")

        assert b - a == pd.Timedelta(hours=47)
        assert calendar_days_between("America/New_York", a, b) == 2

    def test_same_calendar_day_depends_on_zone(self):
        a, b = utc("2024-03-15 10:00"), utc("2024-03-15 23:30")
        assert same_calendar_day("UTC", a, b)
        assert not same_calendar_day("Asia/Tokyo", a, b)
