from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date as _date
from typing import ClassVar, Protocol, runtime_checkable

import numpy as np

from .._exceptions import CalendarError
from ..records import DateDurationRecord

# Dates further than this from 1970-01-01 are out of range.
MAX_EPOCH_DAYS: int = 100_000_001

_DAYS_IN_MONTH: np.ndarray = np.array(
    [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31], dtype=np.int64
)
_DAYS_BEFORE_MONTH: np.ndarray = np.concatenate(
    ([0], np.cumsum(_DAYS_IN_MONTH)[:-1])
)

OVERFLOW_POLICIES = ("constrain", "reject")


# ── ISO date primitives ──────────────────────────────────────────────────

def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def iso_days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return int(_DAYS_IN_MONTH[month - 1])


def iso_day_of_year(year: int, month: int, day: int) -> int:
    leap_day = 1 if month > 2 and is_leap_year(year) else 0
    return int(_DAYS_BEFORE_MONTH[month - 1]) + leap_day + day


def epoch_days_from_iso(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 in the proleptic Gregorian calendar."""
    year -= month <= 2
    era = year // 400
    yoe = year - era * 400
    doy = (153 * ((month + 9) % 12) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146_097 + doe - 719_468


def iso_date_from_epoch_days(days: int) -> tuple[int, int, int]:
    z = days + 719_468
    era = z // 146_097
    doe = z - era * 146_097
    yoe = (doe - doe // 1460 + doe // 36_524 - doe // 146_096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    return yoe + era * 400 + (month <= 2), month, day


def compare_iso_date(
    y1: int, m1: int, d1: int, y2: int, m2: int, d2: int
) -> int:
    one, two = (y1, m1, d1), (y2, m2, d2)
    return (one > two) - (one < two)


def balance_iso_year_month(year: int, month: int) -> tuple[int, int]:
    return year + (month - 1) // 12, (month - 1) % 12 + 1


def balance_iso_date(year: int, month: int, day: int) -> tuple[int, int, int]:
    year, month = balance_iso_year_month(year, month)
    return iso_date_from_epoch_days(epoch_days_from_iso(year, month, 1) + day - 1)


def is_valid_iso_date(year: int, month: int, day: int) -> bool:
    return 1 <= month <= 12 and 1 <= day <= iso_days_in_month(year, month)


def regulate_iso_date(
    year: int, month: int, day: int, overflow: str = "constrain"
) -> tuple[int, int, int]:
    if overflow not in OVERFLOW_POLICIES:
        raise CalendarError(
            f"overflow must be one of {', '.join(OVERFLOW_POLICIES)}; got {overflow!r}."
        )
    if overflow == "reject":
        if not is_valid_iso_date(year, month, day):
            raise CalendarError(f"Invalid ISO date {year}-{month}-{day}.")
        return year, month, day
    month = min(max(month, 1), 12)
    day = min(max(day, 1), iso_days_in_month(year, month))
    return year, month, day


def add_iso_date(
    year: int,
    month: int,
    day: int,
    years: int,
    months: int,
    weeks: int,
    days: int,
    overflow: str = "constrain",
) -> tuple[int, int, int]:
    y, m = balance_iso_year_month(year + years, month + months)
    y, m, d = regulate_iso_date(y, m, day, overflow)
    return balance_iso_date(y, m, d + days + 7 * weeks)


def difference_iso_date(
    y1: int, m1: int, d1: int, y2: int, m2: int, d2: int, largest_unit: str
) -> DateDurationRecord:
    """
    Calendar difference from the first date to the second.

    For year/month the result counts whole months reachable from the first
    date without passing the second (day-of-month constrained), then days.
    """
    if largest_unit in ("year", "month"):
        sign = -compare_iso_date(y1, m1, d1, y2, m2, d2)
        if sign == 0:
            return DateDurationRecord(0, 0, 0, 0)

        years = y2 - y1
        mid = add_iso_date(y1, m1, d1, years, 0, 0, 0)
        mid_sign = -compare_iso_date(*mid, y2, m2, d2)
        if mid_sign == 0:
            if largest_unit == "year":
                return DateDurationRecord(years, 0, 0, 0)
            return DateDurationRecord(0, years * 12, 0, 0)

        months = m2 - m1
        if mid_sign != sign:
            years -= sign
            months += sign * 12
        mid = add_iso_date(y1, m1, d1, years, months, 0, 0)
        mid_sign = -compare_iso_date(*mid, y2, m2, d2)
        if mid_sign == 0:
            if largest_unit == "year":
                return DateDurationRecord(years, months, 0, 0)
            return DateDurationRecord(0, months + years * 12, 0, 0)

        if mid_sign != sign:
            months -= sign
            if months == -sign:
                years -= sign
                months = 11 * sign
            mid = add_iso_date(y1, m1, d1, years, months, 0, 0)

        mid_y, mid_m, mid_d = mid
        if mid_m == m2:
            days = d2 - mid_d
        elif sign < 0:
            days = -mid_d - (iso_days_in_month(y2, m2) - d2)
        else:
            days = d2 + (iso_days_in_month(mid_y, mid_m) - mid_d)

        if largest_unit == "month":
            months += years * 12
            years = 0
        return DateDurationRecord(years, months, 0, days)

    days = epoch_days_from_iso(y2, m2, d2) - epoch_days_from_iso(y1, m1, d1)
    weeks = 0
    if largest_unit == "week":
        sign = -1 if days < 0 else 1
        weeks, days = divmod(abs(days), 7)
        weeks, days = weeks * sign, days * sign
    return DateDurationRecord(0, 0, weeks, days)


def _whole(value: float) -> int:
    if value != int(value):
        raise CalendarError(f"Calendar steps must be whole numbers; got {value}.")
    return int(value)


# ── Calendar collaborator ────────────────────────────────────────────────

@runtime_checkable
class Calendar(Protocol):
    """The two operations the duration engine needs from a calendar."""

    def date_add(
        self,
        date: PlainDate,
        duration: DateDurationRecord,
        overflow: str = "constrain",
    ) -> PlainDate: ...

    def date_until(
        self,
        one: PlainDate,
        two: PlainDate,
        largest_unit: str = "day",
    ) -> DateDurationRecord: ...


@dataclass(frozen=True)
class IsoCalendar:
    """ISO 8601 (proleptic Gregorian) calendar."""

    identifier: ClassVar[str] = "iso8601"

    def date_add(
        self,
        date: PlainDate,
        duration: DateDurationRecord,
        overflow: str = "constrain",
    ) -> PlainDate:
        y, m, d = add_iso_date(
            date.iso_year,
            date.iso_month,
            date.iso_day,
            _whole(duration.years),
            _whole(duration.months),
            _whole(duration.weeks),
            _whole(duration.days),
            overflow,
        )
        return PlainDate(y, m, d, self)

    def date_until(
        self,
        one: PlainDate,
        two: PlainDate,
        largest_unit: str = "day",
    ) -> DateDurationRecord:
        if largest_unit == "auto":
            largest_unit = "day"
        if largest_unit not in ("year", "month", "week", "day"):
            raise CalendarError(
                f"largest_unit must be a date unit; got {largest_unit!r}."
            )
        return difference_iso_date(
            one.iso_year, one.iso_month, one.iso_day,
            two.iso_year, two.iso_month, two.iso_day,
            largest_unit,
        )

    def __str__(self) -> str:
        return self.identifier


# ── Plain date anchor ────────────────────────────────────────────────────

@dataclass(frozen=True)
class PlainDate:
    """A calendar date; ISO fields plus the calendar used for arithmetic."""

    iso_year: int
    iso_month: int
    iso_day: int
    calendar: Calendar = field(default_factory=IsoCalendar)

    def __post_init__(self) -> None:
        if not is_valid_iso_date(self.iso_year, self.iso_month, self.iso_day):
            raise CalendarError(
                f"Invalid ISO date {self.iso_year}-{self.iso_month}-{self.iso_day}."
            )
        if abs(self.epoch_days) > MAX_EPOCH_DAYS:
            raise CalendarError(f"Date {self} is outside the supported range.")

    @classmethod
    def from_date(cls, value: _date, calendar: Calendar | None = None) -> PlainDate:
        return cls(value.year, value.month, value.day, calendar or IsoCalendar())

    @property
    def epoch_days(self) -> int:
        return epoch_days_from_iso(self.iso_year, self.iso_month, self.iso_day)

    def __str__(self) -> str:
        if 0 <= self.iso_year <= 9999:
            year = f"{self.iso_year:04d}"
        else:
            year = f"{'-' if self.iso_year < 0 else '+'}{abs(self.iso_year):06d}"
        return f"{year}-{self.iso_month:02d}-{self.iso_day:02d}"
