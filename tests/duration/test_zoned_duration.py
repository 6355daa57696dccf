"""
tests/duration/test_zoned_duration.py

Covers duration arithmetic anchored on a ZonedDateTime across DST
transitions (23- and 25-hour days), using the single-transition zone from
conftest:
  - Offset shift between an anchor and the anchor advanced by days
  - Splitting nanoseconds into real wall-clock days
  - Balancing, adding, rounding, totalling and comparing across transitions
"""

import pytest

from temporal import Duration
from temporal.duration.balance import balance_duration, nanoseconds_to_days
from temporal.duration.walker import calculate_offset_shift, move_relative_zoned_date_time
from temporal.timezone import ZonedDateTime

HOUR = 3_600_000_000_000


# ── Offset shift and day splitting ────────────────────────────────────────────

class TestOffsetShift:

    def test_spring_forward(self, spring_midnight):
        assert calculate_offset_shift(spring_midnight, days=1) == HOUR

    def test_fall_back(self, fall_midnight):
        assert calculate_offset_shift(fall_midnight, days=1) == -HOUR

    def test_no_calendar_part(self, spring_midnight):
        assert calculate_offset_shift(spring_midnight) == 0

    def test_plain_anchor(self):
        assert calculate_offset_shift(None, days=1) == 0

    def test_move_relative_zoned_date_time(self, spring_midnight):
        moved = move_relative_zoned_date_time(spring_midnight, 0, 0, 0, 1)
        assert isinstance(moved, ZonedDateTime)
        assert moved.epoch_nanoseconds - spring_midnight.epoch_nanoseconds == 23 * HOUR


class TestNanosecondsToDays:

    def test_short_day(self, spring_midnight):
        result = nanoseconds_to_days(24 * HOUR, spring_midnight)
        assert (result.days, result.nanoseconds, result.day_length) == (1, HOUR, 24 * HOUR)

    def test_long_day(self, fall_midnight):
        result = nanoseconds_to_days(24 * HOUR, fall_midnight)
        assert (result.days, result.nanoseconds, result.day_length) == (0, 24 * HOUR, 25 * HOUR)

    def test_exactly_one_long_day(self, fall_midnight):
        result = nanoseconds_to_days(25 * HOUR, fall_midnight)
        assert (result.days, result.nanoseconds) == (1, 0)

    def test_backwards_over_short_day(self, spring_midnight):
        start = move_relative_zoned_date_time(spring_midnight, 0, 0, 0, 1)
        result = nanoseconds_to_days(-23 * HOUR, start)
        assert (result.days, result.nanoseconds) == (-1, 0)


class TestBalanceAcrossTransition:

    def test_day_of_23_hours(self, spring_midnight):
        result = balance_duration(1, 0, 0, 0, 0, 0, 0, "hour", spring_midnight)
        assert result.hours == 23

    def test_day_of_25_hours(self, fall_midnight):
        result = balance_duration(1, 0, 0, 0, 0, 0, 0, "hour", fall_midnight)
        assert result.hours == 25


# ── Duration operations ───────────────────────────────────────────────────────

class TestDurationAcrossTransition:

    def test_round_24_hours_on_short_day(self, spring_midnight):
        result = Duration(hours=24).round(largest_unit="day", relative_to=spring_midnight)
        assert result == Duration(days=1, hours=1)

    def test_round_24_hours_on_long_day(self, fall_midnight):
        result = Duration(hours=24).round(largest_unit="day", relative_to=fall_midnight)
        assert result == Duration(hours=24)

    def test_round_to_hours_folds_full_day(self, spring_midnight):
        result = Duration(hours=23, minutes=30).round(
            smallest_unit="hour", largest_unit="day", relative_to=spring_midnight
        )
        assert result == Duration(days=1, hours=1)

    def test_total_hours_of_short_day(self, spring_midnight):
        assert Duration(days=1).total("hours", relative_to=spring_midnight) == 23

    def test_total_hours_of_long_day(self, fall_midnight):
        assert Duration(days=1).total("hours", relative_to=fall_midnight) == 25

    def test_total_days_of_24_hours(self, fall_midnight):
        assert Duration(hours=24).total("days", relative_to=fall_midnight) == pytest.approx(24 / 25)

    def test_add_day_and_hour(self, spring_midnight):
        result = Duration(days=1).add(Duration(hours=1), relative_to=spring_midnight)
        assert result == Duration(days=1, hours=1)

    def test_add_hours_only(self, spring_midnight):
        result = Duration(hours=20).add(Duration(hours=4), relative_to=spring_midnight)
        assert result == Duration(hours=24)

    def test_compare_day_and_24_hours(self, spring_midnight, fall_midnight):
        day, hours = Duration(days=1), Duration(hours=24)
        assert Duration.compare(day, hours) == 0
        assert Duration.compare(day, hours, relative_to=spring_midnight) == -1
        assert Duration.compare(day, hours, relative_to=fall_midnight) == 1
