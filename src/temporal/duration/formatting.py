"""
Canonical ISO 8601 text form of a duration.
"""

from __future__ import annotations

from numbers import Integral
from typing import Literal, Union

from .._exceptions import TemporalRangeError
from ..records import DurationRecord
from ..units import to_singular_unit
from .validation import duration_sign

Precision = Union[Literal["auto"], int]

# smallest_unit -> (digits after the decimal point, rounding unit)
_UNIT_PRECISION: dict[str, tuple[int, str]] = {
    "second": (0, "second"),
    "millisecond": (3, "millisecond"),
    "microsecond": (6, "microsecond"),
    "nanosecond": (9, "nanosecond"),
}


def to_seconds_string_precision(
    smallest_unit: str | None = None,
    fractional_second_digits: Precision = "auto",
) -> tuple[Precision, str, int]:
    """
    Resolve the output precision of :func:`temporal_duration_to_string`.

    Returns ``(precision, unit, increment)``: the digit count (or ``"auto"``)
    and the unit/increment the duration must be rounded to beforehand.
    ``smallest_unit`` wins over ``fractional_second_digits``.
    """
    if smallest_unit is not None:
        unit = to_singular_unit(smallest_unit)
        if unit not in _UNIT_PRECISION:
            raise TemporalRangeError(
                f"smallest_unit must be second or finer; got {smallest_unit!r}."
            )
        digits, unit = _UNIT_PRECISION[unit]
        return digits, unit, 1

    if fractional_second_digits == "auto":
        return "auto", "nanosecond", 1
    if isinstance(fractional_second_digits, bool) or not isinstance(
        fractional_second_digits, Integral
    ):
        raise TemporalRangeError(
            "fractional_second_digits must be 'auto' or 0..9; "
            f"got {fractional_second_digits!r}."
        )
    digits = int(fractional_second_digits)
    if not 0 <= digits <= 9:
        raise TemporalRangeError(
            f"fractional_second_digits must be 'auto' or 0..9; got {digits}."
        )
    if digits == 0:
        return 0, "second", 1
    if digits <= 3:
        return digits, "millisecond", 10 ** (3 - digits)
    if digits <= 6:
        return digits, "microsecond", 10 ** (6 - digits)
    return digits, "nanosecond", 10 ** (9 - digits)


def _magnitude(value: float) -> int:
    return int(abs(value))


def temporal_duration_to_string(
    duration: DurationRecord, precision: Precision = "auto"
) -> str:
    """
    Format ``duration`` as e.g. ``P1Y2M3DT4H5M6.789S``.

    Milliseconds, microseconds and nanoseconds are carried into the seconds
    field as its fraction.  ``precision`` is ``"auto"`` (shortest exact
    fraction) or a fixed number of digits 0..9, truncating.
    """
    sign = duration_sign(*duration.as_tuple())

    nanoseconds = _magnitude(duration.nanoseconds)
    microseconds = _magnitude(duration.microseconds) + nanoseconds // 1000
    nanoseconds %= 1000
    milliseconds = _magnitude(duration.milliseconds) + microseconds // 1000
    microseconds %= 1000
    seconds = _magnitude(duration.seconds) + milliseconds // 1000
    milliseconds %= 1000

    date_part = "".join(
        f"{_magnitude(value)}{designator}"
        for value, designator in (
            (duration.years, "Y"),
            (duration.months, "M"),
            (duration.weeks, "W"),
            (duration.days, "D"),
        )
        if value != 0
    )
    time_part = "".join(
        f"{_magnitude(value)}{designator}"
        for value, designator in ((duration.hours, "H"), (duration.minutes, "M"))
        if value != 0
    )

    nonzero_seconds_and_lower = any((seconds, milliseconds, microseconds, nanoseconds))
    zero_minutes_and_higher = not date_part and not time_part
    if nonzero_seconds_and_lower or zero_minutes_and_higher or precision != "auto":
        fraction = f"{milliseconds * 1_000_000 + microseconds * 1000 + nanoseconds:09d}"
        if precision == "auto":
            fraction = fraction.rstrip("0")
        else:
            fraction = fraction[:precision]
        time_part += f"{seconds}.{fraction}S" if fraction else f"{seconds}S"

    text = ("-" if sign < 0 else "") + "P" + date_part
    if time_part:
        text += "T" + time_part
    return text
