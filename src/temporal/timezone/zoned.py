"""
Zoned instants and the wall-clock arithmetic needed to walk them.

A :class:`ZonedDateTime` is an exact instant (nanoseconds since the Unix
epoch) viewed through a time zone and a calendar.  Calendar steps are taken
on its local wall-clock date and then resolved back to an instant, so the
length of a "day" follows the zone's offset transitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Literal

from .._exceptions import TemporalRangeError
from ..calendar import Calendar, IsoCalendar, PlainDate
from ..calendar.calendar import epoch_days_from_iso, iso_date_from_epoch_days
from ..config.logging import get_logger
from ..records import DateDurationRecord
from ..units import NANOSECONDS_PER_DAY, NANOSECONDS_PER_UNIT
from .timezone import (
    FixedOffsetTimeZone,
    TimeZone,
    ZoneInfoTimeZone,
    timedelta_to_nanoseconds,
)

logger = get_logger(__name__)

# Instants further than 10^8 days from the epoch are out of range.
MAX_EPOCH_NANOSECONDS: int = 100_000_000 * NANOSECONDS_PER_DAY

_UTC_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

Disambiguation = Literal["compatible", "earlier", "later", "reject"]


@dataclass(frozen=True)
class PlainDateTime:
    iso_year: int
    iso_month: int
    iso_day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    microsecond: int = 0
    nanosecond: int = 0
    calendar: Calendar = field(default_factory=IsoCalendar)

    @property
    def local_nanoseconds(self) -> int:
        """Nanoseconds since 1970-01-01T00:00 as if the wall clock were UTC."""
        days = epoch_days_from_iso(self.iso_year, self.iso_month, self.iso_day)
        return (
            days * NANOSECONDS_PER_DAY
            + self.hour * NANOSECONDS_PER_UNIT["hour"]
            + self.minute * NANOSECONDS_PER_UNIT["minute"]
            + self.second * NANOSECONDS_PER_UNIT["second"]
            + self.millisecond * NANOSECONDS_PER_UNIT["millisecond"]
            + self.microsecond * NANOSECONDS_PER_UNIT["microsecond"]
            + self.nanosecond
        )

    def to_plain_date(self) -> PlainDate:
        return PlainDate(self.iso_year, self.iso_month, self.iso_day, self.calendar)


@dataclass(frozen=True)
class ZonedDateTime:
    epoch_nanoseconds: int
    time_zone: TimeZone
    calendar: Calendar = field(default_factory=IsoCalendar)

    def __post_init__(self) -> None:
        if abs(self.epoch_nanoseconds) > MAX_EPOCH_NANOSECONDS:
            raise TemporalRangeError(
                f"Instant {self.epoch_nanoseconds} ns is outside the supported range."
            )

    @classmethod
    def from_datetime(
        cls, value: datetime, calendar: Calendar | None = None
    ) -> ZonedDateTime:
        """Build from an aware :class:`datetime.datetime`."""
        tzinfo = value.tzinfo
        key = getattr(tzinfo, "key", None)
        if key is not None:
            time_zone: TimeZone = ZoneInfoTimeZone(key)
        else:
            offset = value.utcoffset()
            if offset is None:
                raise TemporalRangeError("A naive datetime has no time zone.")
            time_zone = FixedOffsetTimeZone(timedelta_to_nanoseconds(offset))
        epoch_ns = timedelta_to_nanoseconds(value - _UTC_EPOCH)
        return cls(epoch_ns, time_zone, calendar or IsoCalendar())

    @property
    def offset_nanoseconds(self) -> int:
        return self.time_zone.offset_nanoseconds_for(self.epoch_nanoseconds)

    def to_plain_date_time(self) -> PlainDateTime:
        return get_plain_date_time_for(
            self.time_zone, self.epoch_nanoseconds, self.calendar
        )

    def to_plain_date(self) -> PlainDate:
        return self.to_plain_date_time().to_plain_date()


# ── instant <-> wall clock ───────────────────────────────────────────────

def get_plain_date_time_for(
    time_zone: TimeZone, epoch_nanoseconds: int, calendar: Calendar
) -> PlainDateTime:
    local = epoch_nanoseconds + time_zone.offset_nanoseconds_for(epoch_nanoseconds)
    days, rem = divmod(local, NANOSECONDS_PER_DAY)
    year, month, day = iso_date_from_epoch_days(days)
    hour, rem = divmod(rem, NANOSECONDS_PER_UNIT["hour"])
    minute, rem = divmod(rem, NANOSECONDS_PER_UNIT["minute"])
    second, rem = divmod(rem, NANOSECONDS_PER_UNIT["second"])
    millisecond, rem = divmod(rem, NANOSECONDS_PER_UNIT["millisecond"])
    microsecond, nanosecond = divmod(rem, NANOSECONDS_PER_UNIT["microsecond"])
    return PlainDateTime(
        year, month, day,
        hour, minute, second, millisecond, microsecond, nanosecond,
        calendar,
    )


def get_possible_epoch_nanoseconds(
    time_zone: TimeZone, date_time: PlainDateTime
) -> list[int]:
    """Instants showing ``date_time`` on the wall clock: 0 (gap), 1, or 2 (overlap)."""
    local = date_time.local_nanoseconds
    candidates = {
        time_zone.offset_nanoseconds_for(local - NANOSECONDS_PER_DAY),
        time_zone.offset_nanoseconds_for(local + NANOSECONDS_PER_DAY),
    }
    return sorted(
        local - offset
        for offset in candidates
        if time_zone.offset_nanoseconds_for(local - offset) == offset
    )


def get_epoch_nanoseconds_for(
    time_zone: TimeZone,
    date_time: PlainDateTime,
    disambiguation: Disambiguation = "compatible",
) -> int:
    possible = get_possible_epoch_nanoseconds(time_zone, date_time)
    if len(possible) == 1:
        return possible[0]

    if possible:
        logger.debug("zoned.overlap", date_time=date_time, disambiguation=disambiguation)
        if disambiguation in ("compatible", "earlier"):
            return possible[0]
        if disambiguation == "later":
            return possible[-1]
        raise TemporalRangeError(f"{date_time} is ambiguous in {time_zone}.")

    logger.debug("zoned.gap", date_time=date_time, disambiguation=disambiguation)
    if disambiguation == "reject":
        raise TemporalRangeError(f"{date_time} does not exist in {time_zone}.")
    local = date_time.local_nanoseconds
    before = time_zone.offset_nanoseconds_for(local - NANOSECONDS_PER_DAY)
    after = time_zone.offset_nanoseconds_for(local + NANOSECONDS_PER_DAY)
    if disambiguation in ("compatible", "later"):
        return local - before
    return local - after


# ── zoned arithmetic ─────────────────────────────────────────────────────

def time_nanoseconds(
    hours: float = 0,
    minutes: float = 0,
    seconds: float = 0,
    milliseconds: float = 0,
    microseconds: float = 0,
    nanoseconds: float = 0,
) -> int:
    return (
        int(hours) * NANOSECONDS_PER_UNIT["hour"]
        + int(minutes) * NANOSECONDS_PER_UNIT["minute"]
        + int(seconds) * NANOSECONDS_PER_UNIT["second"]
        + int(milliseconds) * NANOSECONDS_PER_UNIT["millisecond"]
        + int(microseconds) * NANOSECONDS_PER_UNIT["microsecond"]
        + int(nanoseconds)
    )


def add_instant(epoch_nanoseconds: int, nanoseconds: int) -> int:
    result = epoch_nanoseconds + nanoseconds
    if abs(result) > MAX_EPOCH_NANOSECONDS:
        raise TemporalRangeError("Resulting instant is outside the supported range.")
    return result


def add_zoned_date_time(
    epoch_nanoseconds: int,
    time_zone: TimeZone,
    calendar: Calendar,
    years: float = 0,
    months: float = 0,
    weeks: float = 0,
    days: float = 0,
    hours: float = 0,
    minutes: float = 0,
    seconds: float = 0,
    milliseconds: float = 0,
    microseconds: float = 0,
    nanoseconds: float = 0,
) -> int:
    """
    Advance an instant: calendar part on the wall clock, time part exactly.

    Returns the resulting epoch nanoseconds.
    """
    exact = time_nanoseconds(
        hours, minutes, seconds, milliseconds, microseconds, nanoseconds
    )
    if years == 0 and months == 0 and weeks == 0 and days == 0:
        return add_instant(epoch_nanoseconds, exact)

    date_time = get_plain_date_time_for(time_zone, epoch_nanoseconds, calendar)
    added = calendar.date_add(
        date_time.to_plain_date(),
        DateDurationRecord(years, months, weeks, days),
    )
    intermediate = replace(
        date_time,
        iso_year=added.iso_year,
        iso_month=added.iso_month,
        iso_day=added.iso_day,
    )
    instant = get_epoch_nanoseconds_for(time_zone, intermediate, "compatible")
    return add_instant(instant, exact)
