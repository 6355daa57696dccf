"""
tests/duration/test_validation.py

Covers:
  - Validity: non-finite fields, mixed signs, safe-integer bound
  - Sign of a duration
  - Default largest unit
  - Validated record constructors
  - Exact nanosecond totals, including the zoned offset shift
"""

import pytest

from temporal import TemporalRangeError
from temporal.duration.nanoseconds import exact, total_duration_nanoseconds
from temporal.duration.validation import (
    MAX_SAFE_INTEGER,
    create_date_duration_record,
    create_duration_record,
    create_time_duration_record,
    default_temporal_largest_unit,
    duration_sign,
    is_valid_duration,
)

HOUR = 3_600_000_000_000


# ── is_valid_duration ─────────────────────────────────────────────────────────

class TestIsValidDuration:

    def test_zero_is_valid(self):
        assert is_valid_duration()

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_is_invalid(self, value):
        assert not is_valid_duration(hours=value)

    def test_mixed_signs_are_invalid(self):
        assert not is_valid_duration(years=1, days=-1)
        assert not is_valid_duration(seconds=-1, nanoseconds=5)

    def test_uniform_sign_is_valid(self):
        assert is_valid_duration(years=-1, days=-3, nanoseconds=-1)

    def test_safe_integer_bound(self):
        assert is_valid_duration(days=MAX_SAFE_INTEGER)
        assert not is_valid_duration(days=MAX_SAFE_INTEGER + 2)

    def test_huge_int_is_invalid(self):
        assert not is_valid_duration(nanoseconds=10**400)


# ── duration_sign / default_temporal_largest_unit ─────────────────────────────

class TestSignAndLargestUnit:

    def test_zero_sign(self):
        assert duration_sign() == 0

    def test_negative_years(self):
        assert duration_sign(years=-1) == -1

    def test_sign_from_finest_field(self):
        assert duration_sign(nanoseconds=3) == 1

    def test_largest_unit(self):
        assert default_temporal_largest_unit(hours=1, seconds=5) == "hour"
        assert default_temporal_largest_unit(weeks=2) == "week"

    def test_largest_unit_of_zero(self):
        assert default_temporal_largest_unit() == "nanosecond"


# ── Validated constructors ────────────────────────────────────────────────────

class TestConstructors:

    def test_fields_round_trip(self):
        record = create_duration_record(1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
        assert record.as_tuple() == (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)

    def test_values_are_not_rounded(self):
        assert create_duration_record(hours=1.5).hours == 1.5

    def test_mixed_signs_raise(self):
        with pytest.raises(TemporalRangeError):
            create_duration_record(years=1, months=-1)

    def test_date_record(self):
        assert create_date_duration_record(0, 1, 0, 2).as_tuple() == (0, 1, 0, 2)
        with pytest.raises(TemporalRangeError):
            create_date_duration_record(days=float("nan"))

    def test_time_record(self):
        assert create_time_duration_record(hours=-2).hours == -2
        with pytest.raises(TemporalRangeError):
            create_time_duration_record(days=1, hours=-1)


# ── Nanosecond accumulator ────────────────────────────────────────────────────

class TestTotalDurationNanoseconds:

    def test_one_day(self):
        assert total_duration_nanoseconds(1, 0, 0, 0, 0, 0, 0, 0) == 86_400_000_000_000

    def test_mixed_units(self):
        assert total_duration_nanoseconds(0, 1, 2, 3, 4, 5, 6) == 3_723_004_005_006

    def test_exact_beyond_float_precision(self):
        total = total_duration_nanoseconds(100_000_000, 0, 0, 0, 0, 0, 1)
        assert total == 8_640_000_000_000_000_000_001

    def test_offset_shift_shortens_days(self):
        assert total_duration_nanoseconds(1, 0, 0, 0, 0, 0, 0, HOUR) == 23 * HOUR

    def test_offset_shift_ignored_without_days(self):
        assert total_duration_nanoseconds(0, 24, 0, 0, 0, 0, 0, HOUR) == 24 * HOUR

    def test_negative(self):
        assert total_duration_nanoseconds(0, 0, 0, -1, -500, 0, 0) == -1_500_000_000

    def test_exact_of_fractional_float(self):
        assert exact(0.5) * 2 == 1
        assert isinstance(exact(2.0), int)
