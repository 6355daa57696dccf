"""
tests/duration/test_formatting.py

Covers:
  - Canonical text form: zero, date-only, time-only, negative
  - Sub-second fields folded into the seconds fraction
  - Fixed and automatic precision
  - Resolution of smallest_unit / fractional_second_digits
"""

import pytest

from temporal import TemporalRangeError
from temporal.duration import temporal_duration_to_string
from temporal.duration.formatting import to_seconds_string_precision
from temporal.records import DurationRecord


# ── temporal_duration_to_string ───────────────────────────────────────────────

class TestToString:

    def test_zero(self):
        assert temporal_duration_to_string(DurationRecord()) == "PT0S"

    def test_years_and_months(self):
        assert temporal_duration_to_string(DurationRecord(years=1, months=2)) == "P1Y2M"

    def test_all_fields(self):
        record = DurationRecord(1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
        assert temporal_duration_to_string(record) == "P1Y2M3W4DT5H6M7.00800901S"

    def test_negative(self):
        assert temporal_duration_to_string(DurationRecord(days=-1, hours=-2)) == "-P1DT2H"

    def test_milliseconds_carry_into_seconds(self):
        assert temporal_duration_to_string(DurationRecord(milliseconds=1500)) == "PT1.5S"

    def test_seconds_with_fraction(self):
        record = DurationRecord(hours=1, seconds=1, milliseconds=500)
        assert temporal_duration_to_string(record) == "PT1H1.5S"

    def test_one_nanosecond(self):
        assert temporal_duration_to_string(DurationRecord(nanoseconds=1)) == "PT0.000000001S"

    def test_fixed_precision_pads(self):
        assert temporal_duration_to_string(DurationRecord(seconds=1), 3) == "PT1.000S"

    def test_fixed_precision_truncates(self):
        assert temporal_duration_to_string(DurationRecord(milliseconds=1999), 2) == "PT1.99S"

    def test_zero_precision_has_no_point(self):
        assert temporal_duration_to_string(DurationRecord(milliseconds=1999), 0) == "PT1S"

    def test_fixed_precision_always_emits_seconds(self):
        assert temporal_duration_to_string(DurationRecord(days=1), 2) == "P1DT0.00S"


# ── to_seconds_string_precision ───────────────────────────────────────────────

class TestSecondsStringPrecision:

    def test_auto(self):
        assert to_seconds_string_precision() == ("auto", "nanosecond", 1)

    @pytest.mark.parametrize(
        "digits,expected",
        [
            (0, (0, "second", 1)),
            (1, (1, "millisecond", 100)),
            (3, (3, "millisecond", 1)),
            (4, (4, "microsecond", 100)),
            (8, (8, "nanosecond", 10)),
            (9, (9, "nanosecond", 1)),
        ],
    )
    def test_digits(self, digits, expected):
        assert to_seconds_string_precision(None, digits) == expected

    def test_smallest_unit_wins(self):
        assert to_seconds_string_precision("milliseconds", 9) == (3, "millisecond", 1)

    @pytest.mark.parametrize("unit", ["minute", "hour", "day"])
    def test_coarse_units_raise(self, unit):
        with pytest.raises(TemporalRangeError):
            to_seconds_string_precision(unit)

    @pytest.mark.parametrize("digits", [10, -1, True, 1.5, "3"])
    def test_bad_digits_raise(self, digits):
        with pytest.raises(TemporalRangeError):
            to_seconds_string_precision(None, digits)
