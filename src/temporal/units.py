"""
temporal.units
~~~~~~~~~~~~~~

Unit names, their ordering from coarsest to finest, and the fixed
nanosecond length of every exact-time unit.
"""

from __future__ import annotations

from typing import Literal, get_args

from ._exceptions import TemporalRangeError

UNITS: tuple[str, ...] = (
    "year",
    "month",
    "week",
    "day",
    "hour",
    "minute",
    "second",
    "millisecond",
    "microsecond",
    "nanosecond",
)

FIELD_NAMES: tuple[str, ...] = tuple(f"{unit}s" for unit in UNITS)

CALENDAR_UNITS: frozenset[str] = frozenset({"year", "month", "week"})
DATE_UNITS: frozenset[str] = CALENDAR_UNITS | {"day"}

NANOSECONDS_PER_DAY: int = 86_400_000_000_000

NANOSECONDS_PER_UNIT: dict[str, int] = {
    "day": NANOSECONDS_PER_DAY,
    "hour": 3_600_000_000_000,
    "minute": 60_000_000_000,
    "second": 1_000_000_000,
    "millisecond": 1_000_000,
    "microsecond": 1_000,
    "nanosecond": 1,
}

# Rounding increments for these units must divide the next coarser unit.
MAXIMUM_ROUNDING_INCREMENTS: dict[str, int] = {
    "hour": 24,
    "minute": 60,
    "second": 60,
    "millisecond": 1000,
    "microsecond": 1000,
    "nanosecond": 1000,
}

RoundingMode = Literal[
    "ceil",
    "floor",
    "expand",
    "trunc",
    "halfCeil",
    "halfFloor",
    "halfExpand",
    "halfTrunc",
    "halfEven",
]
ROUNDING_MODES: tuple[str, ...] = get_args(RoundingMode)

_RANK: dict[str, int] = {unit: i for i, unit in enumerate(UNITS)}
_PLURALS: dict[str, str] = dict(zip(FIELD_NAMES, UNITS))


def to_singular_unit(unit: str) -> str:
    """Normalize ``"hours"`` / ``"hour"`` to ``"hour"``; reject anything else."""
    if unit in _RANK:
        return unit
    try:
        return _PLURALS[unit]
    except (KeyError, TypeError):
        raise TemporalRangeError(f"{unit!r} is not a valid unit.") from None


def larger_of_two_units(one: str, two: str) -> str:
    return one if _RANK[one] <= _RANK[two] else two


def units_from(unit: str) -> tuple[str, ...]:
    """``unit`` and every finer unit, coarsest first."""
    return UNITS[_RANK[unit]:]
