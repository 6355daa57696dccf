"""
Anchor walking: stepping a ``relative_to`` anchor by calendar units.

Anchors are never mutated; every step returns a new anchor.
"""

from __future__ import annotations

from typing import Any

from .._exceptions import TemporalTypeError
from ..calendar import Calendar, PlainDate
from ..records import DateDurationRecord, DurationRecord, MoveRelativeDateResult
from ..timezone import ZonedDateTime
from ..timezone.zoned import add_zoned_date_time


def to_temporal_date(anchor: Any) -> PlainDate:
    if isinstance(anchor, PlainDate):
        return anchor
    if isinstance(anchor, ZonedDateTime):
        return anchor.to_plain_date()
    raise TemporalTypeError(
        f"Expected a PlainDate or ZonedDateTime anchor; got {type(anchor).__name__}."
    )


def move_relative_date(
    calendar: Calendar,
    relative_to: PlainDate,
    duration: DateDurationRecord | DurationRecord,
) -> MoveRelativeDateResult:
    if isinstance(duration, DurationRecord):
        duration = duration.date_part()
    new_date = calendar.date_add(relative_to, duration)
    days = calendar.date_until(relative_to, new_date, "day").days
    return MoveRelativeDateResult(new_date, int(days))


def move_relative_zoned_date_time(
    zoned: ZonedDateTime,
    years: float,
    months: float,
    weeks: float,
    days: float,
) -> ZonedDateTime:
    epoch_ns = add_zoned_date_time(
        zoned.epoch_nanoseconds,
        zoned.time_zone,
        zoned.calendar,
        years, months, weeks, days,
    )
    return ZonedDateTime(epoch_ns, zoned.time_zone, zoned.calendar)


def calculate_offset_shift(
    relative_to: Any,
    years: float = 0,
    months: float = 0,
    weeks: float = 0,
    days: float = 0,
) -> int:
    """
    Change in UTC offset, in nanoseconds, between a zoned anchor and the
    anchor advanced by the given calendar units.  0 for any other anchor.
    """
    if not isinstance(relative_to, ZonedDateTime):
        return 0
    before = relative_to.offset_nanoseconds
    after_ns = add_zoned_date_time(
        relative_to.epoch_nanoseconds,
        relative_to.time_zone,
        relative_to.calendar,
        years, months, weeks, days,
    )
    after = relative_to.time_zone.offset_nanoseconds_for(after_ns)
    return after - before
