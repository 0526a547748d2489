#!/usr/bin/env python3
"""Tests for calculation helper functions."""
from datetime import date, datetime

from assetwatch import (
    WarningLevel,
    classify_level,
    days_remaining,
    lease_months,
    month_range,
    parse_date,
    parse_month,
)
from assetwatch.calculations import next_month


class TestParseDate:
    """Tests for parse_date."""

    def test_iso_date_string(self):
        assert parse_date("2025-01-15") == date(2025, 1, 15)

    def test_iso_timestamp_truncated_to_day(self):
        assert parse_date("2025-01-15T23:59:59+09:00") == date(2025, 1, 15)

    def test_date_and_datetime_objects(self):
        assert parse_date(date(2025, 1, 15)) == date(2025, 1, 15)
        assert parse_date(datetime(2025, 1, 15, 18, 30)) == date(2025, 1, 15)

    def test_missing_returns_none(self):
        assert parse_date(None) is None
        assert parse_date("") is None
        assert parse_date("   ") is None

    def test_malformed_returns_none(self):
        assert parse_date("not a date") is None
        assert parse_date("2025-13-45") is None
        assert parse_date(20250115) is None


class TestDaysRemaining:
    """Tests for days_remaining."""

    def test_future(self):
        assert days_remaining(date(2025, 2, 14), date(2025, 1, 15)) == 30

    def test_same_day(self):
        assert days_remaining(date(2025, 1, 15), date(2025, 1, 15)) == 0

    def test_overdue_is_negative(self):
        assert days_remaining(date(2025, 1, 10), date(2025, 1, 15)) == -5

    def test_across_dst_change(self):
        """Calendar days, not hours: DST transitions do not shift the count."""
        assert days_remaining(date(2025, 3, 31), date(2025, 3, 1)) == 30


class TestClassifyLevel:
    """Tests for classify_level."""

    def test_binary_split(self):
        assert classify_level(-3) == WarningLevel.CRITICAL
        assert classify_level(30) == WarningLevel.CRITICAL
        assert classify_level(31) == WarningLevel.WARNING
        assert classify_level(60) == WarningLevel.WARNING
        assert classify_level(61) is None

    def test_three_tier_split(self):
        assert classify_level(30, info_days=90) == WarningLevel.CRITICAL
        assert classify_level(60, info_days=90) == WarningLevel.WARNING
        assert classify_level(61, info_days=90) == WarningLevel.INFO
        assert classify_level(90, info_days=90) == WarningLevel.INFO
        assert classify_level(91, info_days=90) is None


class TestMonthRange:
    """Tests for parse_month and month_range."""

    def test_parse_month(self):
        assert parse_month("2024-02") == date(2024, 2, 1)
        assert parse_month("2024-2x") is None
        assert parse_month("") is None
        assert parse_month(None) is None

    def test_inclusive_range(self):
        assert month_range("2024-11", "2025-02") == [
            "2024-11",
            "2024-12",
            "2025-01",
            "2025-02",
        ]

    def test_single_month(self):
        assert month_range("2024-05", "2024-05") == ["2024-05"]

    def test_reversed_range_is_empty(self):
        assert month_range("2024-05", "2024-04") == []

    def test_invalid_boundary_is_empty(self):
        assert month_range("bogus", "2024-04") == []
        assert month_range("2024-01", "2024-99") == []


class TestLeaseMonths:
    """Tests for lease_months."""

    def test_month_inside_contract(self):
        assert lease_months("2024-01-01", "2024-03-31", date(2024, 2, 1), date(2024, 3, 1)) == 1

    def test_month_after_contract(self):
        assert lease_months("2024-01-01", "2024-03-31", date(2024, 5, 1), date(2024, 6, 1)) == 0

    def test_contract_starting_mid_month_skips_that_month(self):
        """Billing is by first-of-month, so a lease from the 15th starts next month."""
        assert lease_months("2024-01-15", "2024-12-31", date(2024, 1, 1), date(2024, 2, 1)) == 0
        assert lease_months("2024-01-15", "2024-12-31", date(2024, 2, 1), date(2024, 3, 1)) == 1

    def test_multi_month_range(self):
        assert lease_months("2024-01-01", "2024-03-31", date(2023, 11, 1), date(2024, 7, 1)) == 3

    def test_bad_or_inverted_contract(self):
        assert lease_months("garbage", "2024-03-31", date(2024, 2, 1), date(2024, 3, 1)) == 0
        assert lease_months("2024-03-31", "2024-01-01", date(2024, 2, 1), date(2024, 3, 1)) == 0
        assert lease_months(None, None, date(2024, 2, 1), date(2024, 3, 1)) == 0

    def test_open_ended_range(self):
        """A range_end of None runs through the last representable month."""
        assert lease_months("9999-01-01", "9999-12-31", date(9999, 11, 1), None) == 2


class TestLastRepresentableMonth:
    """Month stepping at the upper end of the calendar."""

    def test_next_month(self):
        assert next_month(date(2024, 12, 15)) == date(2025, 1, 1)
        assert next_month(date(9999, 12, 5)) is None

    def test_month_range_ending_in_9999_12(self):
        assert month_range("9999-11", "9999-12") == ["9999-11", "9999-12"]
        assert month_range("9999-12", "9999-12") == ["9999-12"]

    def test_lease_months_from_december_9999(self):
        assert lease_months("9999-01-01", "9999-12-31", date(9999, 12, 5), None) == 0
        assert lease_months("9999-01-01", "9999-12-31", date(9999, 12, 1), None) == 1
