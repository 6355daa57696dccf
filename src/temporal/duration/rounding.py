"""
Rounding durations to a unit and increment.

All arithmetic is exact (``int`` / ``Fraction``); the nine rounding modes
are reduced to an unsigned mode applied to the magnitude, so that e.g.
``floor`` of a negative value rounds away from zero.
"""

from __future__ import annotations

import math
from fractions import Fraction
from numbers import Real
from typing import Any

from .._exceptions import TemporalRangeError
from ..calendar import Calendar, PlainDate
from ..config.logging import get_logger
from ..records import DateDurationRecord, DurationRecord, RoundedDuration
from ..timezone import ZonedDateTime
from ..timezone.zoned import add_zoned_date_time
from ..units import (
    CALENDAR_UNITS,
    DATE_UNITS,
    MAXIMUM_ROUNDING_INCREMENTS,
    NANOSECONDS_PER_UNIT,
    ROUNDING_MODES,
    to_singular_unit,
    units_from,
)
from .arithmetic import add_duration
from .balance import balance_duration, nanoseconds_to_days
from .nanoseconds import exact, total_duration_nanoseconds
from .validation import create_duration_record
from .walker import move_relative_date, move_relative_zoned_date_time, to_temporal_date

logger = get_logger(__name__)

MAXIMUM_INCREMENT: int = 1_000_000_000

# (positive, negative) unsigned rounding mode for each signed mode.
_UNSIGNED_ROUNDING_MODES: dict[str, tuple[str, str]] = {
    "ceil": ("infinity", "zero"),
    "floor": ("zero", "infinity"),
    "expand": ("infinity", "infinity"),
    "trunc": ("zero", "zero"),
    "halfCeil": ("half-infinity", "half-zero"),
    "halfFloor": ("half-zero", "half-infinity"),
    "halfExpand": ("half-infinity", "half-infinity"),
    "halfTrunc": ("half-zero", "half-zero"),
    "halfEven": ("half-even", "half-even"),
}


def _check_rounding_mode(rounding_mode: str) -> str:
    if rounding_mode not in ROUNDING_MODES:
        raise TemporalRangeError(
            f"rounding_mode must be one of {', '.join(ROUNDING_MODES)}; got {rounding_mode!r}."
        )
    return rounding_mode


def _apply_unsigned_rounding_mode(
    x: Fraction, r1: int, r2: int, unsigned_mode: str
) -> int:
    if x == r1 or unsigned_mode == "zero":
        return r1
    if unsigned_mode == "infinity":
        return r2
    d1, d2 = x - r1, r2 - x
    if d1 < d2:
        return r1
    if d2 < d1:
        return r2
    if unsigned_mode == "half-zero":
        return r1
    if unsigned_mode == "half-infinity":
        return r2
    return r1 if r1 % 2 == 0 else r2


def round_number_to_increment(
    value: float | Fraction, increment: int, rounding_mode: str
) -> int:
    """Round ``value`` to a multiple of ``increment`` using ``rounding_mode``."""
    _check_rounding_mode(rounding_mode)
    quotient = exact(value) / Fraction(increment)
    is_negative = quotient < 0
    if is_negative:
        quotient = -quotient
    unsigned_mode = _UNSIGNED_ROUNDING_MODES[rounding_mode][is_negative]
    r1 = math.floor(quotient)
    rounded = _apply_unsigned_rounding_mode(quotient, r1, r1 + 1, unsigned_mode)
    if is_negative:
        rounded = -rounded
    return rounded * increment


def validate_rounding_increment(
    increment: Any, unit: str, inclusive: bool = False
) -> int:
    """
    Check a rounding increment for ``unit``.

    Sub-day units need an increment that divides the next larger unit
    (e.g. 1, 2, 3, 4, 6, 8 or 12 hours); ``inclusive`` also admits the
    divisor itself.
    """
    if isinstance(increment, bool) or not isinstance(increment, Real):
        raise TemporalRangeError(f"rounding_increment must be an integer; got {increment!r}.")
    if not math.isfinite(increment) or increment != int(increment):
        raise TemporalRangeError(f"rounding_increment must be an integer; got {increment!r}.")
    increment = int(increment)
    if not 1 <= increment <= MAXIMUM_INCREMENT:
        raise TemporalRangeError(f"rounding_increment {increment} is out of range.")
    dividend = MAXIMUM_ROUNDING_INCREMENTS.get(to_singular_unit(unit))
    if dividend is not None:
        maximum = dividend if inclusive else dividend - 1
        if increment > maximum or dividend % increment != 0:
            raise TemporalRangeError(
                f"rounding_increment {increment} is not valid for {unit}s."
            )
    return increment


def round_temporal_instant(
    nanoseconds: int, increment: int, unit: str, rounding_mode: str
) -> int:
    increment_ns = increment * NANOSECONDS_PER_UNIT[to_singular_unit(unit)]
    return round_number_to_increment(nanoseconds, increment_ns, rounding_mode)


def _days_until(calendar: Calendar, one: PlainDate, two: PlainDate) -> int:
    return int(calendar.date_until(one, two, "day").days)


def round_duration(
    duration: DurationRecord,
    increment: int,
    unit: str,
    rounding_mode: str,
    relative_to: Any = None,
) -> RoundedDuration:
    """
    Round ``duration`` to ``increment`` multiples of ``unit``.

    Fields finer than ``unit`` are folded into it and zeroed.  Calendar
    units need ``relative_to`` to know how many days the unit at hand spans.
    The remainder is the fractional part (in units) that was rounded away.
    """
    unit = to_singular_unit(unit)
    increment = validate_rounding_increment(increment, unit)
    _check_rounding_mode(rounding_mode)
    if unit in CALENDAR_UNITS and relative_to is None:
        raise TemporalRangeError(f"A relative_to date is required to round to {unit}s.")

    years, months, weeks, days = (exact(v) for v in duration.date_part().as_tuple())
    time = dict(zip(units_from("hour"), (exact(v) for v in duration.as_tuple()[4:])))

    zoned = relative_to if isinstance(relative_to, ZonedDateTime) else None
    anchor = to_temporal_date(relative_to) if relative_to is not None else None

    if unit in DATE_UNITS:
        ns = total_duration_nanoseconds(0, *time.values(), 0)
        intermediate = (
            move_relative_zoned_date_time(zoned, years, months, weeks, days)
            if zoned is not None
            else None
        )
        split = nanoseconds_to_days(ns, intermediate)
        days = days + split.days + Fraction(split.nanoseconds, split.day_length)
        time = dict.fromkeys(time, 0)

    if unit == "year":
        calendar = anchor.calendar
        years_later = calendar.date_add(anchor, DateDurationRecord(years, 0, 0, 0))
        years_months_weeks_later = calendar.date_add(
            anchor, DateDurationRecord(years, months, weeks, 0)
        )
        days += _days_until(calendar, years_later, years_months_weeks_later)
        anchor = years_later
        days_later = calendar.date_add(anchor, DateDurationRecord(0, 0, 0, int(days)))
        years_passed = calendar.date_until(anchor, days_later, "year").years
        years += years_passed
        old_anchor = anchor
        anchor = calendar.date_add(anchor, DateDurationRecord(years_passed, 0, 0, 0))
        days -= _days_until(calendar, old_anchor, anchor)
        sign = -1 if days < 0 else 1
        one_year_days = move_relative_date(
            calendar, anchor, DateDurationRecord(sign, 0, 0, 0)
        ).days
        fractional = years + Fraction(days) / abs(one_year_days)
        years = round_number_to_increment(fractional, increment, rounding_mode)
        remainder = fractional - years
        months = weeks = days = 0

    elif unit == "month":
        calendar = anchor.calendar
        years_months_later = calendar.date_add(
            anchor, DateDurationRecord(years, months, 0, 0)
        )
        years_months_weeks_later = calendar.date_add(
            anchor, DateDurationRecord(years, months, weeks, 0)
        )
        days += _days_until(calendar, years_months_later, years_months_weeks_later)
        anchor = years_months_later
        sign = -1 if days < 0 else 1
        one_month = DateDurationRecord(0, sign, 0, 0)
        moved = move_relative_date(calendar, anchor, one_month)
        anchor, one_month_days = moved.relative_to, moved.days
        while abs(days) >= abs(one_month_days):
            months += sign
            days -= one_month_days
            moved = move_relative_date(calendar, anchor, one_month)
            anchor, one_month_days = moved.relative_to, moved.days
        fractional = months + Fraction(days) / abs(one_month_days)
        months = round_number_to_increment(fractional, increment, rounding_mode)
        remainder = fractional - months
        weeks = days = 0

    elif unit == "week":
        calendar = anchor.calendar
        sign = -1 if days < 0 else 1
        one_week = DateDurationRecord(0, 0, sign, 0)
        moved = move_relative_date(calendar, anchor, one_week)
        anchor, one_week_days = moved.relative_to, moved.days
        while abs(days) >= abs(one_week_days):
            weeks += sign
            days -= one_week_days
            moved = move_relative_date(calendar, anchor, one_week)
            anchor, one_week_days = moved.relative_to, moved.days
        fractional = weeks + Fraction(days) / abs(one_week_days)
        weeks = round_number_to_increment(fractional, increment, rounding_mode)
        remainder = fractional - weeks
        days = 0

    elif unit == "day":
        fractional = Fraction(days)
        days = round_number_to_increment(fractional, increment, rounding_mode)
        remainder = fractional - days

    else:
        finer = units_from(unit)
        ns = sum(time[u] * NANOSECONDS_PER_UNIT[u] for u in finer)
        fractional = Fraction(ns) / NANOSECONDS_PER_UNIT[unit]
        rounded = round_number_to_increment(fractional, increment, rounding_mode)
        remainder = fractional - rounded
        time.update(dict.fromkeys(finer, 0))
        time[unit] = rounded

    logger.debug(
        "duration.rounded",
        unit=unit,
        increment=increment,
        rounding_mode=rounding_mode,
        remainder=float(remainder),
    )
    record = create_duration_record(years, months, weeks, days, *time.values())
    return RoundedDuration(record, float(remainder))


def adjust_rounded_duration_days(
    duration: DurationRecord,
    increment: int,
    unit: str,
    rounding_mode: str,
    relative_to: Any = None,
) -> DurationRecord:
    """
    Re-fold the time part of a rounded duration against the real length of
    the day that follows its date part.

    Only applies to sub-day rounding against a ZonedDateTime: a time part
    that now spans a whole (23, 24 or 25 hour) day becomes one more day, and
    the leftover is rounded again with the same settings.
    """
    unit = to_singular_unit(unit)
    if (
        not isinstance(relative_to, ZonedDateTime)
        or unit in DATE_UNITS
        or (unit == "nanosecond" and increment == 1)
    ):
        return duration

    time_remainder = total_duration_nanoseconds(0, *duration.as_tuple()[4:], 0)
    if time_remainder == 0:
        return duration
    direction = -1 if time_remainder < 0 else 1

    tz, calendar = relative_to.time_zone, relative_to.calendar
    day_start = add_zoned_date_time(
        relative_to.epoch_nanoseconds, tz, calendar,
        duration.years, duration.months, duration.weeks, duration.days,
    )
    day_end = add_zoned_date_time(day_start, tz, calendar, 0, 0, 0, direction)
    day_length = day_end - day_start
    if (time_remainder - day_length) * direction < 0:
        return duration

    time_remainder = round_temporal_instant(
        time_remainder - day_length, increment, unit, rounding_mode
    )
    adjusted_date = add_duration(
        DurationRecord(duration.years, duration.months, duration.weeks, duration.days),
        DurationRecord(days=direction),
        relative_to,
    )
    adjusted_time = balance_duration(0, 0, 0, 0, 0, 0, time_remainder, "hour")
    logger.debug("duration.days_adjusted", day_length=day_length, direction=direction)
    return create_duration_record(
        adjusted_date.years,
        adjusted_date.months,
        adjusted_date.weeks,
        adjusted_date.days,
        *adjusted_time.as_tuple()[1:],
    )
