"""
Adding durations, and the wall-clock / zoned differences it relies on.
"""

from __future__ import annotations

from typing import Any

from .._exceptions import TemporalRangeError
from ..calendar import Calendar, PlainDate
from ..calendar.calendar import balance_iso_date, compare_iso_date
from ..config.logging import get_logger
from ..records import DurationRecord, TimeDurationRecord
from ..timezone import PlainDateTime, TimeZone, ZonedDateTime
from ..timezone.zoned import add_zoned_date_time, get_plain_date_time_for
from ..units import CALENDAR_UNITS, DATE_UNITS, larger_of_two_units
from .balance import balance_duration, balance_time, nanoseconds_to_days
from .validation import (
    create_duration_record,
    default_temporal_largest_unit,
    duration_sign,
)

logger = get_logger(__name__)


def difference_time(start: PlainDateTime, end: PlainDateTime) -> TimeDurationRecord:
    hours = end.hour - start.hour
    minutes = end.minute - start.minute
    seconds = end.second - start.second
    milliseconds = end.millisecond - start.millisecond
    microseconds = end.microsecond - start.microsecond
    nanoseconds = end.nanosecond - start.nanosecond
    sign = duration_sign(
        0, 0, 0, 0, hours, minutes, seconds, milliseconds, microseconds, nanoseconds
    )
    bt = balance_time(
        hours * sign,
        minutes * sign,
        seconds * sign,
        milliseconds * sign,
        microseconds * sign,
        nanoseconds * sign,
    )
    return TimeDurationRecord(*(v * sign for v in bt.as_tuple()))


def difference_iso_date_time(
    start: PlainDateTime,
    end: PlainDateTime,
    calendar: Calendar,
    largest_unit: str,
) -> DurationRecord:
    td = difference_time(start, end)
    time_sign = duration_sign(0, 0, 0, *td.as_tuple())
    date_sign = compare_iso_date(
        end.iso_year, end.iso_month, end.iso_day,
        start.iso_year, start.iso_month, start.iso_day,
    )
    y, m, d = balance_iso_date(start.iso_year, start.iso_month, start.iso_day + int(td.days))
    if time_sign == -date_sign:
        y, m, d = balance_iso_date(y, m, d - time_sign)
        td = balance_duration(
            -time_sign,
            td.hours, td.minutes, td.seconds,
            td.milliseconds, td.microseconds, td.nanoseconds,
            largest_unit,
        )

    date_difference = calendar.date_until(
        PlainDate(y, m, d, calendar),
        PlainDate(end.iso_year, end.iso_month, end.iso_day, calendar),
        larger_of_two_units("day", largest_unit),
    )
    balanced = balance_duration(
        date_difference.days,
        td.hours, td.minutes, td.seconds,
        td.milliseconds, td.microseconds, td.nanoseconds,
        largest_unit,
    )
    return create_duration_record(
        date_difference.years,
        date_difference.months,
        date_difference.weeks,
        *balanced.as_tuple(),
    )


def difference_zoned_date_time(
    one_ns: int,
    two_ns: int,
    time_zone: TimeZone,
    calendar: Calendar,
    largest_unit: str,
) -> DurationRecord:
    if one_ns == two_ns:
        return DurationRecord()
    start = get_plain_date_time_for(time_zone, one_ns, calendar)
    end = get_plain_date_time_for(time_zone, two_ns, calendar)
    date_difference = difference_iso_date_time(start, end, calendar, largest_unit)
    intermediate_ns = add_zoned_date_time(
        one_ns, time_zone, calendar,
        date_difference.years, date_difference.months, date_difference.weeks, 0,
    )
    split = nanoseconds_to_days(
        two_ns - intermediate_ns,
        ZonedDateTime(intermediate_ns, time_zone, calendar),
    )
    td = balance_duration(0, 0, 0, 0, 0, 0, split.nanoseconds, "hour")
    return create_duration_record(
        date_difference.years,
        date_difference.months,
        date_difference.weeks,
        split.days,
        td.hours, td.minutes, td.seconds,
        td.milliseconds, td.microseconds, td.nanoseconds,
    )


def add_duration(
    one: DurationRecord,
    two: DurationRecord,
    relative_to: Any = None,
) -> DurationRecord:
    """
    Sum two durations.

    Years, months and weeks are only addable against an anchor: both
    durations are applied to it in turn and the result is the calendar
    difference between the original and the final anchor.
    """
    largest_unit = larger_of_two_units(
        default_temporal_largest_unit(*one.as_tuple()[:9]),
        default_temporal_largest_unit(*two.as_tuple()[:9]),
    )
    hours = one.hours + two.hours
    minutes = one.minutes + two.minutes
    seconds = one.seconds + two.seconds
    milliseconds = one.milliseconds + two.milliseconds
    microseconds = one.microseconds + two.microseconds
    nanoseconds = one.nanoseconds + two.nanoseconds

    if relative_to is None:
        if largest_unit in CALENDAR_UNITS:
            raise TemporalRangeError(
                "A relative_to date is required to add years, months or weeks."
            )
        result = balance_duration(
            one.days + two.days,
            hours, minutes, seconds, milliseconds, microseconds, nanoseconds,
            largest_unit,
        )
        return create_duration_record(0, 0, 0, *result.as_tuple())

    if isinstance(relative_to, PlainDate):
        calendar = relative_to.calendar
        intermediate = calendar.date_add(relative_to, one.date_part())
        end = calendar.date_add(intermediate, two.date_part())
        date_difference = calendar.date_until(
            relative_to, end, larger_of_two_units("day", largest_unit)
        )
        result = balance_duration(
            date_difference.days,
            hours, minutes, seconds, milliseconds, microseconds, nanoseconds,
            largest_unit,
        )
        logger.debug("duration.added", anchor=str(relative_to), end=str(end))
        return create_duration_record(
            date_difference.years,
            date_difference.months,
            date_difference.weeks,
            *result.as_tuple(),
        )

    if not isinstance(relative_to, ZonedDateTime):
        raise TemporalRangeError(
            f"Unsupported relative_to anchor {type(relative_to).__name__}."
        )
    tz, calendar = relative_to.time_zone, relative_to.calendar
    intermediate_ns = add_zoned_date_time(
        relative_to.epoch_nanoseconds, tz, calendar, *one.as_tuple()
    )
    end_ns = add_zoned_date_time(intermediate_ns, tz, calendar, *two.as_tuple())
    if largest_unit not in DATE_UNITS:
        result = balance_duration(
            0, 0, 0, 0, 0, 0, end_ns - relative_to.epoch_nanoseconds, largest_unit
        )
        return create_duration_record(0, 0, 0, 0, *result.as_tuple()[1:])
    return difference_zoned_date_time(
        relative_to.epoch_nanoseconds, end_ns, tz, calendar, largest_unit
    )


def subtract_duration(
    one: DurationRecord,
    two: DurationRecord,
    relative_to: Any = None,
) -> DurationRecord:
    return add_duration(one, two.negated(), relative_to)
