from __future__ import annotations

from typing import Sequence

import numpy as np

from .._exceptions import TemporalRangeError
from ..records import DateDurationRecord, DurationRecord, TimeDurationRecord
from ..units import UNITS

MAX_SAFE_INTEGER: int = 2**53 - 1


def _as_vector(values: Sequence[float]) -> np.ndarray:
    return np.array([float(v) for v in values], dtype=np.float64)


def is_valid_duration(
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
) -> bool:
    """
    True when every field is finite, within the safe-integer bound, and all
    nonzero fields share one sign.
    """
    try:
        x = _as_vector(
            (years, months, weeks, days, hours, minutes, seconds,
             milliseconds, microseconds, nanoseconds)
        )
    except OverflowError:
        return False
    if not np.isfinite(x).all():
        return False
    if (np.abs(x) > MAX_SAFE_INTEGER).any():
        return False
    signs = np.sign(x)
    return not ((signs > 0).any() and (signs < 0).any())


def duration_sign(
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
    x = _as_vector(
        (years, months, weeks, days, hours, minutes, seconds,
         milliseconds, microseconds, nanoseconds)
    )
    nonzero = np.flatnonzero(x)
    if nonzero.size == 0:
        return 0
    return int(np.sign(x[nonzero[0]]))


def default_temporal_largest_unit(
    years: float = 0,
    months: float = 0,
    weeks: float = 0,
    days: float = 0,
    hours: float = 0,
    minutes: float = 0,
    seconds: float = 0,
    milliseconds: float = 0,
    microseconds: float = 0,
) -> str:
    values = (years, months, weeks, days, hours, minutes, seconds,
              milliseconds, microseconds)
    for unit, value in zip(UNITS, values):
        if value != 0:
            return unit
    return "nanosecond"


# ── validated constructors ───────────────────────────────────────────────

def create_duration_record(
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
) -> DurationRecord:
    values = (years, months, weeks, days, hours, minutes, seconds,
              milliseconds, microseconds, nanoseconds)
    if not is_valid_duration(*values):
        raise TemporalRangeError(f"Invalid duration {values}.")
    return DurationRecord(*(float(v) for v in values))


def create_date_duration_record(
    years: float = 0,
    months: float = 0,
    weeks: float = 0,
    days: float = 0,
) -> DateDurationRecord:
    if not is_valid_duration(years, months, weeks, days):
        raise TemporalRangeError(
            f"Invalid date duration {(years, months, weeks, days)}."
        )
    return DateDurationRecord(float(years), float(months), float(weeks), float(days))


def create_time_duration_record(
    days: float = 0,
    hours: float = 0,
    minutes: float = 0,
    seconds: float = 0,
    milliseconds: float = 0,
    microseconds: float = 0,
    nanoseconds: float = 0,
) -> TimeDurationRecord:
    values = (days, hours, minutes, seconds, milliseconds, microseconds, nanoseconds)
    if not is_valid_duration(0, 0, 0, *values):
        raise TemporalRangeError(f"Invalid time duration {values}.")
    return TimeDurationRecord(*(float(v) for v in values))
