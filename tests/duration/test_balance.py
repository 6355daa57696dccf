"""
tests/duration/test_balance.py

Covers:
  - Splitting nanoseconds into 24-hour days
  - Balancing exact-time fields up to a largest unit
  - Wall-clock carry
  - Unbalancing calendar units into smaller ones (and the anchor requirement)
  - Balancing days back up into weeks, months and years
"""

import pytest

from temporal import PlainDate, TemporalRangeError
from temporal.duration.balance import (
    balance_duration,
    balance_duration_relative,
    balance_time,
    nanoseconds_to_days,
    unbalance_duration_relative,
)
from temporal.duration.validation import MAX_SAFE_INTEGER

DAY = 86_400_000_000_000


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def new_year_2024():
    return PlainDate(2024, 1, 1)


# ── Exact-time balancing ──────────────────────────────────────────────────────

class TestNanosecondsToDays:

    def test_whole_days_and_rest(self):
        result = nanoseconds_to_days(2 * DAY + 5)
        assert (result.days, result.nanoseconds, result.day_length) == (2, 5, DAY)

    def test_negative(self):
        result = nanoseconds_to_days(-(DAY + 5))
        assert (result.days, result.nanoseconds) == (-1, -5)

    def test_zero(self):
        assert nanoseconds_to_days(0).days == 0


class TestBalanceDuration:

    def test_day_into_hours(self):
        result = balance_duration(1, 0, 0, 0, 0, 0, 0, "hour")
        assert (result.days, result.hours) == (0, 24)

    def test_nanoseconds_up_to_hours(self):
        result = balance_duration(0, 0, 0, 0, 0, 0, 3_723_000_000_000, "hour")
        assert result.as_tuple() == (0, 1, 2, 3, 0, 0, 0)

    def test_hours_into_days(self):
        result = balance_duration(0, 25, 0, 0, 0, 0, 0, "day")
        assert (result.days, result.hours) == (1, 1)

    def test_largest_unit_caps_the_cascade(self):
        result = balance_duration(0, 2, 0, 0, 0, 0, 0, "second")
        assert (result.hours, result.minutes, result.seconds) == (0, 0, 7200)

    def test_negative(self):
        result = balance_duration(0, 0, 0, 0, 0, 0, -1500, "microsecond")
        assert (result.microseconds, result.nanoseconds) == (-1, -500)

    def test_plural_unit_name(self):
        assert balance_duration(0, 0, 90, 0, 0, 0, 0, "hours").hours == 1

    def test_too_many_days_raise(self):
        with pytest.raises(TemporalRangeError):
            balance_duration(MAX_SAFE_INTEGER, 48, 0, 0, 0, 0, 0, "day")


class TestBalanceTime:

    def test_carry_into_days(self):
        assert balance_time(23, 59, 59, 999, 999, 1000).as_tuple() == (1, 0, 0, 0, 0, 0, 0)

    def test_borrow(self):
        assert balance_time(1, 0, 0, 0, 0, -1).as_tuple() == (0, 0, 59, 59, 999, 999, 999)


# ── Calendar units ────────────────────────────────────────────────────────────

class TestUnbalanceDurationRelative:

    def test_years_into_months(self, new_year_2024):
        assert unbalance_duration_relative(1, 1, 0, 0, "month", new_year_2024).as_tuple() == (0, 13, 0, 0)

    def test_years_into_days_for_week(self, new_year_2024):
        result = unbalance_duration_relative(1, 0, 2, 0, "week", new_year_2024)
        assert result.as_tuple() == (0, 0, 2, 366)

    def test_everything_into_days(self, new_year_2024):
        result = unbalance_duration_relative(0, 1, 1, 1, "day", new_year_2024)
        assert result.as_tuple() == (0, 0, 0, 31 + 7 + 1)

    def test_negative_months(self, new_year_2024):
        result = unbalance_duration_relative(0, -1, 0, 0, "day", new_year_2024)
        assert result.days == -31

    def test_year_is_unchanged(self):
        assert unbalance_duration_relative(1, 2, 3, 4, "year").as_tuple() == (1, 2, 3, 4)

    def test_nothing_to_fold_needs_no_anchor(self):
        assert unbalance_duration_relative(0, 0, 0, 5, "week").days == 5

    def test_missing_anchor_raises(self):
        with pytest.raises(TemporalRangeError):
            unbalance_duration_relative(0, 1, 0, 0, "day")


class TestBalanceDurationRelative:

    def test_days_into_months(self, new_year_2024):
        assert balance_duration_relative(0, 0, 0, 45, "month", new_year_2024).as_tuple() == (0, 1, 0, 14)

    def test_days_into_weeks(self, new_year_2024):
        assert balance_duration_relative(0, 0, 0, 15, "week", new_year_2024).as_tuple() == (0, 0, 2, 1)

    def test_days_into_years(self):
        result = balance_duration_relative(0, 0, 0, 400, "year", PlainDate(2023, 1, 1))
        assert result.as_tuple() == (1, 1, 0, 4)

    def test_negative_days_into_months(self, new_year_2024):
        result = balance_duration_relative(0, 0, 0, -45, "month", new_year_2024)
        assert result.as_tuple() == (0, -1, 0, -14)

    def test_day_is_unchanged(self):
        assert balance_duration_relative(0, 0, 0, 400, "day").days == 400

    def test_missing_anchor_raises(self):
        with pytest.raises(TemporalRangeError):
            balance_duration_relative(0, 0, 0, 40, "month")
