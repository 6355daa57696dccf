"""
temporal.records
~~~~~~~~~~~~~~~~

Plain value records passed between the duration engine's components.

The dataclasses do not validate themselves; the validated constructors in
:mod:`temporal.duration.validation` are the only sanctioned way to build
records from untrusted input.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields, replace
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .calendar import PlainDate


@dataclass(frozen=True, slots=True)
class DurationRecord:
    years: float = 0.0
    months: float = 0.0
    weeks: float = 0.0
    days: float = 0.0
    hours: float = 0.0
    minutes: float = 0.0
    seconds: float = 0.0
    milliseconds: float = 0.0
    microseconds: float = 0.0
    nanoseconds: float = 0.0

    def as_tuple(self) -> tuple[float, ...]:
        return astuple(self)

    def date_part(self) -> DateDurationRecord:
        return DateDurationRecord(self.years, self.months, self.weeks, self.days)

    def time_part(self) -> TimeDurationRecord:
        return TimeDurationRecord(
            self.days,
            self.hours,
            self.minutes,
            self.seconds,
            self.milliseconds,
            self.microseconds,
            self.nanoseconds,
        )

    def negated(self) -> DurationRecord:
        # 0.0 - x keeps zero fields at +0.0
        return DurationRecord(*(0.0 - v for v in astuple(self)))


@dataclass(frozen=True, slots=True)
class DateDurationRecord:
    years: float = 0.0
    months: float = 0.0
    weeks: float = 0.0
    days: float = 0.0

    def as_tuple(self) -> tuple[float, ...]:
        return astuple(self)


@dataclass(frozen=True, slots=True)
class TimeDurationRecord:
    """Exact-time portion; ``days`` here are fixed 24-hour days."""

    days: float = 0.0
    hours: float = 0.0
    minutes: float = 0.0
    seconds: float = 0.0
    milliseconds: float = 0.0
    microseconds: float = 0.0
    nanoseconds: float = 0.0

    def as_tuple(self) -> tuple[float, ...]:
        return astuple(self)


@dataclass(frozen=True, slots=True)
class PartialDurationRecord:
    """
    Sparse patch over a :class:`DurationRecord`.

    ``None`` means "absent" and is never conflated with zero.
    """

    years: Optional[float] = None
    months: Optional[float] = None
    weeks: Optional[float] = None
    days: Optional[float] = None
    hours: Optional[float] = None
    minutes: Optional[float] = None
    seconds: Optional[float] = None
    milliseconds: Optional[float] = None
    microseconds: Optional[float] = None
    nanoseconds: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return all(v is None for v in astuple(self))

    def merge(self, base: DurationRecord) -> DurationRecord:
        present = {
            f.name: float(getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
        return replace(base, **present)


@dataclass(frozen=True, slots=True)
class MoveRelativeDateResult:
    relative_to: PlainDate
    days: int


@dataclass(frozen=True, slots=True)
class RoundedDuration:
    duration_record: DurationRecord
    remainder: float


@dataclass(frozen=True, slots=True)
class NanosecondsToDaysResult:
    days: int
    nanoseconds: int
    day_length: int
