"""
tests/calendar/test_iso_calendar.py

Covers:
  - Leap years and month lengths
  - Epoch-day conversion in both directions
  - Date balancing and regulation (constrain / reject)
  - IsoCalendar.date_add with month-end constraining
  - IsoCalendar.date_until for every date unit, both directions
  - PlainDate validation and text form
"""

import pytest

from temporal.calendar import Calendar, CalendarError, IsoCalendar, PlainDate
from temporal.calendar.calendar import (
    balance_iso_date,
    epoch_days_from_iso,
    is_leap_year,
    iso_date_from_epoch_days,
    iso_day_of_year,
    iso_days_in_month,
    regulate_iso_date,
)
from temporal.records import DateDurationRecord


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def cal():
    return IsoCalendar()


# ── ISO primitives ────────────────────────────────────────────────────────────

class TestIsoPrimitives:

    @pytest.mark.parametrize("year,leap", [(2000, True), (1900, False), (2024, True), (2023, False)])
    def test_leap_years(self, year, leap):
        assert is_leap_year(year) is leap

    def test_february_length(self):
        assert iso_days_in_month(2024, 2) == 29
        assert iso_days_in_month(2023, 2) == 28

    def test_day_of_year_after_leap_day(self):
        assert iso_day_of_year(2024, 3, 1) == 61
        assert iso_day_of_year(2023, 3, 1) == 60

    def test_epoch_day_zero(self):
        assert epoch_days_from_iso(1970, 1, 1) == 0
        assert epoch_days_from_iso(1969, 12, 31) == -1

    def test_epoch_days_round_trip(self):
        assert epoch_days_from_iso(2000, 3, 1) == 11017
        assert iso_date_from_epoch_days(11017) == (2000, 3, 1)
        assert iso_date_from_epoch_days(-1) == (1969, 12, 31)

    def test_balance_day_overflow(self):
        assert balance_iso_date(2024, 1, 32) == (2024, 2, 1)
        assert balance_iso_date(2024, 1, 0) == (2023, 12, 31)

    def test_balance_month_overflow(self):
        assert balance_iso_date(2024, 13, 1) == (2025, 1, 1)
        assert balance_iso_date(2024, 0, 1) == (2023, 12, 1)

    def test_constrain_clamps_day(self):
        assert regulate_iso_date(2023, 2, 30) == (2023, 2, 28)

    def test_reject_raises(self):
        with pytest.raises(CalendarError):
            regulate_iso_date(2023, 2, 30, "reject")

    def test_unknown_overflow_raises(self):
        with pytest.raises(CalendarError, match="constrain, reject"):
            regulate_iso_date(2023, 2, 1, "wrap")


# ── date_add ──────────────────────────────────────────────────────────────────

class TestDateAdd:

    def test_month_end_is_constrained(self, cal):
        result = cal.date_add(PlainDate(2020, 1, 31), DateDurationRecord(months=1))
        assert result == PlainDate(2020, 2, 29)

    def test_reject_on_month_end(self, cal):
        with pytest.raises(CalendarError):
            cal.date_add(PlainDate(2020, 1, 31), DateDurationRecord(months=1), "reject")

    def test_weeks_and_days(self, cal):
        result = cal.date_add(PlainDate(2024, 1, 1), DateDurationRecord(weeks=2, days=3))
        assert result == PlainDate(2024, 1, 18)

    def test_negative_years(self, cal):
        result = cal.date_add(PlainDate(2024, 2, 29), DateDurationRecord(years=-1))
        assert result == PlainDate(2023, 2, 28)

    def test_fractional_step_raises(self, cal):
        with pytest.raises(CalendarError):
            cal.date_add(PlainDate(2024, 1, 1), DateDurationRecord(days=1.5))


# ── date_until ────────────────────────────────────────────────────────────────

class TestDateUntil:

    def test_months_across_year(self, cal):
        result = cal.date_until(PlainDate(2020, 1, 31), PlainDate(2021, 3, 1), "month")
        assert result.as_tuple() == (0, 13, 0, 1)

    def test_years(self, cal):
        result = cal.date_until(PlainDate(2020, 1, 31), PlainDate(2021, 3, 1), "year")
        assert result.as_tuple() == (1, 1, 0, 1)

    def test_same_date(self, cal):
        assert cal.date_until(PlainDate(2021, 3, 1), PlainDate(2021, 3, 1), "year").as_tuple() == (0, 0, 0, 0)

    def test_weeks(self, cal):
        result = cal.date_until(PlainDate(2024, 1, 1), PlainDate(2024, 1, 17), "week")
        assert result.as_tuple() == (0, 0, 2, 2)

    def test_weeks_backwards(self, cal):
        result = cal.date_until(PlainDate(2024, 1, 17), PlainDate(2024, 1, 1), "week")
        assert result.as_tuple() == (0, 0, -2, -2)

    def test_days(self, cal):
        result = cal.date_until(PlainDate(2024, 1, 1), PlainDate(2025, 1, 1))
        assert result.days == 366

    def test_auto_means_days(self, cal):
        assert cal.date_until(PlainDate(2024, 1, 1), PlainDate(2024, 1, 3), "auto").days == 2

    def test_months_backwards(self, cal):
        result = cal.date_until(PlainDate(2024, 3, 15), PlainDate(2024, 1, 10), "month")
        assert result.as_tuple() == (0, -2, 0, -5)

    def test_time_unit_raises(self, cal):
        with pytest.raises(CalendarError):
            cal.date_until(PlainDate(2024, 1, 1), PlainDate(2024, 1, 3), "hour")


# ── PlainDate ─────────────────────────────────────────────────────────────────

class TestPlainDate:

    def test_invalid_day_raises(self):
        with pytest.raises(CalendarError):
            PlainDate(2023, 2, 29)

    def test_out_of_range_raises(self):
        with pytest.raises(CalendarError):
            PlainDate(300_000, 1, 1)

    def test_text_form(self):
        assert str(PlainDate(2024, 1, 5)) == "2024-01-05"
        assert str(PlainDate(-1, 1, 1)) == "-000001-01-01"
        assert str(PlainDate(12345, 1, 1)) == "+012345-01-01"

    def test_calendar_protocol(self):
        assert isinstance(IsoCalendar(), Calendar)
        assert str(IsoCalendar()) == "iso8601"
