"""
Unit balancing.

Calendar units (years, months, weeks) only have a length relative to an
anchor date, so converting between them and days walks the anchor one unit
at a time.  The exact-time fields are balanced through a single exact
nanosecond total.
"""

from __future__ import annotations

from typing import Any

from .._exceptions import TemporalRangeError
from ..config.logging import get_logger
from ..records import DateDurationRecord, NanosecondsToDaysResult, TimeDurationRecord
from ..timezone import ZonedDateTime
from ..timezone.zoned import add_zoned_date_time, get_plain_date_time_for
from ..units import (
    CALENDAR_UNITS,
    DATE_UNITS,
    NANOSECONDS_PER_DAY,
    NANOSECONDS_PER_UNIT,
    to_singular_unit,
    units_from,
)
from .nanoseconds import total_duration_nanoseconds
from .validation import (
    MAX_SAFE_INTEGER,
    create_date_duration_record,
    create_time_duration_record,
    duration_sign,
)
from .walker import move_relative_date, to_temporal_date

logger = get_logger(__name__)


def _require_anchor(relative_to: Any, what: str) -> None:
    if relative_to is None:
        raise TemporalRangeError(
            f"A relative_to date is required to balance {what}."
        )


def _wall_clock_days(start_ns: int, end_ns: int, zoned: ZonedDateTime) -> int:
    """Whole wall-clock days between two instants in the anchor's zone."""
    start = get_plain_date_time_for(zoned.time_zone, start_ns, zoned.calendar)
    end = get_plain_date_time_for(zoned.time_zone, end_ns, zoned.calendar)
    start_day, start_time = divmod(start.local_nanoseconds, NANOSECONDS_PER_DAY)
    end_day, end_time = divmod(end.local_nanoseconds, NANOSECONDS_PER_DAY)
    days = end_day - start_day
    if days > 0 and end_time < start_time:
        days -= 1
    elif days < 0 and end_time > start_time:
        days += 1
    return days


def nanoseconds_to_days(
    nanoseconds: int, relative_to: Any = None
) -> NanosecondsToDaysResult:
    """
    Split a nanosecond count into whole days and a remainder.

    Days are 24 hours unless ``relative_to`` is a ZonedDateTime, in which
    case each day is the real length of that wall-clock day in its zone.
    """
    day_length = NANOSECONDS_PER_DAY
    if nanoseconds == 0:
        return NanosecondsToDaysResult(0, 0, day_length)
    sign = -1 if nanoseconds < 0 else 1

    if not isinstance(relative_to, ZonedDateTime):
        days = abs(nanoseconds) // day_length * sign
        return NanosecondsToDaysResult(days, nanoseconds - days * day_length, day_length)

    tz, cal = relative_to.time_zone, relative_to.calendar
    start_ns = relative_to.epoch_nanoseconds
    end_ns = start_ns + nanoseconds
    days = _wall_clock_days(start_ns, end_ns, relative_to)
    intermediate_ns = add_zoned_date_time(start_ns, tz, cal, 0, 0, 0, days)
    if sign == 1:
        while days > 0 and intermediate_ns > end_ns:
            days -= 1
            intermediate_ns = add_zoned_date_time(start_ns, tz, cal, 0, 0, 0, days)
    nanoseconds = end_ns - intermediate_ns

    while True:
        one_day_farther = add_zoned_date_time(intermediate_ns, tz, cal, 0, 0, 0, sign)
        day_length = one_day_farther - intermediate_ns
        if (nanoseconds - day_length) * sign < 0:
            break
        nanoseconds -= day_length
        intermediate_ns = one_day_farther
        days += sign
    return NanosecondsToDaysResult(days, nanoseconds, abs(day_length))


def balance_duration(
    days: float,
    hours: float,
    minutes: float,
    seconds: float,
    milliseconds: float,
    microseconds: float,
    nanoseconds: int | float,
    largest_unit: str,
    relative_to: Any = None,
) -> TimeDurationRecord:
    largest_unit = to_singular_unit(largest_unit)
    if isinstance(relative_to, ZonedDateTime):
        end_ns = add_zoned_date_time(
            relative_to.epoch_nanoseconds,
            relative_to.time_zone,
            relative_to.calendar,
            0, 0, 0, days,
            hours, minutes, seconds, milliseconds, microseconds, nanoseconds,
        )
        total = end_ns - relative_to.epoch_nanoseconds
    else:
        total = total_duration_nanoseconds(
            days, hours, minutes, seconds, milliseconds, microseconds, nanoseconds, 0
        )

    if largest_unit in DATE_UNITS:
        split = nanoseconds_to_days(total, relative_to)
        whole_days, total = split.days, split.nanoseconds
        top = "hour"
    else:
        whole_days = 0
        top = largest_unit

    sign = -1 if total < 0 else 1
    remaining = abs(total)
    balanced = dict.fromkeys(units_from("hour"), 0)
    for unit in units_from(top):
        balanced[unit], remaining = divmod(remaining, NANOSECONDS_PER_UNIT[unit])

    if abs(whole_days) > MAX_SAFE_INTEGER:
        raise TemporalRangeError(f"Balanced duration of {whole_days} days is out of range.")
    logger.debug("duration.balanced", largest_unit=largest_unit, total_ns=total, days=whole_days)
    return create_time_duration_record(
        whole_days,
        balanced["hour"] * sign,
        balanced["minute"] * sign,
        balanced["second"] * sign,
        balanced["millisecond"] * sign,
        balanced["microsecond"] * sign,
        balanced["nanosecond"] * sign,
    )


def balance_time(
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
    microsecond: int,
    nanosecond: int,
) -> TimeDurationRecord:
    """Carry wall-clock fields upward with floor division; ``days`` is the overflow."""
    microsecond += nanosecond // 1000
    nanosecond %= 1000
    millisecond += microsecond // 1000
    microsecond %= 1000
    second += millisecond // 1000
    millisecond %= 1000
    minute += second // 60
    second %= 60
    hour += minute // 60
    minute %= 60
    days, hour = divmod(hour, 24)
    return TimeDurationRecord(days, hour, minute, second, millisecond, microsecond, nanosecond)


def unbalance_duration_relative(
    years: float,
    months: float,
    weeks: float,
    days: float,
    largest_unit: str,
    relative_to: Any = None,
) -> DateDurationRecord:
    """
    Fold calendar units finer than they are allowed to be into smaller ones.

    ``month``: years become months.  ``week``: years and months become days.
    Anything finer: years, months and weeks become days.
    """
    largest_unit = to_singular_unit(largest_unit)
    if largest_unit == "year" or (years == 0 and months == 0 and weeks == 0 and days == 0):
        return create_date_duration_record(years, months, weeks, days)

    sign = duration_sign(years, months, weeks, days)
    one_year = DateDurationRecord(sign, 0, 0, 0)
    one_month = DateDurationRecord(0, sign, 0, 0)
    one_week = DateDurationRecord(0, 0, sign, 0)
    anchor = to_temporal_date(relative_to) if relative_to is not None else None

    if largest_unit == "month":
        if years != 0:
            _require_anchor(anchor, "years into months")
            calendar = anchor.calendar
        while years != 0:
            later = calendar.date_add(anchor, one_year)
            months += calendar.date_until(anchor, later, "month").months
            anchor = later
            years -= sign
    elif largest_unit == "week":
        if years != 0 or months != 0:
            _require_anchor(anchor, "years and months into days")
            calendar = anchor.calendar
        while years != 0:
            moved = move_relative_date(calendar, anchor, one_year)
            anchor, days = moved.relative_to, days + moved.days
            years -= sign
        while months != 0:
            moved = move_relative_date(calendar, anchor, one_month)
            anchor, days = moved.relative_to, days + moved.days
            months -= sign
    else:
        if years != 0 or months != 0 or weeks != 0:
            _require_anchor(anchor, "calendar units into days")
            calendar = anchor.calendar
        while years != 0:
            moved = move_relative_date(calendar, anchor, one_year)
            anchor, days = moved.relative_to, days + moved.days
            years -= sign
        while months != 0:
            moved = move_relative_date(calendar, anchor, one_month)
            anchor, days = moved.relative_to, days + moved.days
            months -= sign
        while weeks != 0:
            moved = move_relative_date(calendar, anchor, one_week)
            anchor, days = moved.relative_to, days + moved.days
            weeks -= sign

    return create_date_duration_record(years, months, weeks, days)


def balance_duration_relative(
    years: float,
    months: float,
    weeks: float,
    days: float,
    largest_unit: str,
    relative_to: Any = None,
) -> DateDurationRecord:
    """Inverse of :func:`unbalance_duration_relative`: carry days upward."""
    largest_unit = to_singular_unit(largest_unit)
    if largest_unit not in CALENDAR_UNITS or (
        years == 0 and months == 0 and weeks == 0 and days == 0
    ):
        return create_date_duration_record(years, months, weeks, days)
    _require_anchor(relative_to, f"days into {largest_unit}s")

    sign = duration_sign(years, months, weeks, days)
    one_year = DateDurationRecord(sign, 0, 0, 0)
    one_month = DateDurationRecord(0, sign, 0, 0)
    one_week = DateDurationRecord(0, 0, sign, 0)
    anchor = to_temporal_date(relative_to)
    calendar = anchor.calendar

    if largest_unit == "year":
        moved = move_relative_date(calendar, anchor, one_year)
        anchor, one_year_days = moved.relative_to, moved.days
        while abs(days) >= abs(one_year_days):
            days -= one_year_days
            years += sign
            moved = move_relative_date(calendar, anchor, one_year)
            anchor, one_year_days = moved.relative_to, moved.days

        moved = move_relative_date(calendar, anchor, one_month)
        anchor, one_month_days = moved.relative_to, moved.days
        while abs(days) >= abs(one_month_days):
            days -= one_month_days
            months += sign
            moved = move_relative_date(calendar, anchor, one_month)
            anchor, one_month_days = moved.relative_to, moved.days

        later = calendar.date_add(anchor, one_year)
        one_year_months = calendar.date_until(anchor, later, "month").months
        while abs(months) >= abs(one_year_months):
            months -= one_year_months
            years += sign
            anchor = later
            later = calendar.date_add(anchor, one_year)
            one_year_months = calendar.date_until(anchor, later, "month").months

    elif largest_unit == "month":
        moved = move_relative_date(calendar, anchor, one_month)
        anchor, one_month_days = moved.relative_to, moved.days
        while abs(days) >= abs(one_month_days):
            days -= one_month_days
            months += sign
            moved = move_relative_date(calendar, anchor, one_month)
            anchor, one_month_days = moved.relative_to, moved.days

    else:
        moved = move_relative_date(calendar, anchor, one_week)
        anchor, one_week_days = moved.relative_to, moved.days
        while abs(days) >= abs(one_week_days):
            days -= one_week_days
            weeks += sign
            moved = move_relative_date(calendar, anchor, one_week)
            anchor, one_week_days = moved.relative_to, moved.days

    logger.debug(
        "duration.balanced_relative",
        largest_unit=largest_unit,
        years=years, months=months, weeks=weeks, days=days,
    )
    return create_date_duration_record(years, months, weeks, days)
