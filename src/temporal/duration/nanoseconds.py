from __future__ import annotations

from fractions import Fraction
from numbers import Integral, Rational


def exact(value: float) -> int | Fraction:
    """Lossless rational value of a field (ints and integral floats become int)."""
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Rational):
        return Fraction(value)
    value = float(value)
    return int(value) if value.is_integer() else Fraction(value)


def total_duration_nanoseconds(
    days: float,
    hours: float,
    minutes: float,
    seconds: float,
    milliseconds: float,
    microseconds: float,
    nanoseconds: int | float,
    offset_shift: int = 0,
) -> int:
    """
    Exact length of an exact-time duration in nanoseconds.

    ``offset_shift`` is the change in UTC offset across the days of a zoned
    span; it only applies when ``days`` is nonzero.  Sub-nanosecond fractions
    are truncated towards zero.
    """
    ns = exact(nanoseconds)
    if days != 0:
        ns -= offset_shift
    h = exact(hours) + exact(days) * 24
    mins = exact(minutes) + h * 60
    s = exact(seconds) + mins * 60
    ms = exact(milliseconds) + s * 1000
    us = exact(microseconds) + ms * 1000
    return int(ns + us * 1000)
