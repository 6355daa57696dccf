"""
The immutable ``Duration`` value object.

``Duration`` is a thin shell around a validated :class:`DurationRecord`;
every operation coerces its arguments, delegates to the engine functions
in this package and wraps the resulting record again.
"""

from __future__ import annotations

from typing import Any

from .._exceptions import TemporalRangeError, TemporalTypeError
from ..config.logging import get_logger
from ..config.models import RoundingOptions, ToStringOptions, validate_options
from ..records import DurationRecord
from ..timezone import ZonedDateTime
from ..units import FIELD_NAMES, larger_of_two_units
from .arithmetic import add_duration, subtract_duration
from .balance import (
    balance_duration,
    balance_duration_relative,
    unbalance_duration_relative,
)
from .coercion import (
    to_integer_without_rounding,
    to_partial_duration,
    to_relative_temporal_object,
    to_temporal_duration_record,
)
from .formatting import temporal_duration_to_string, to_seconds_string_precision
from .nanoseconds import total_duration_nanoseconds
from .rounding import (
    adjust_rounded_duration_days,
    round_duration,
    validate_rounding_increment,
)
from .validation import create_duration_record, default_temporal_largest_unit, duration_sign
from .walker import calculate_offset_shift, move_relative_zoned_date_time

logger = get_logger(__name__)


class Duration:
    """
    A signed span of time in ten independent fields.

    All nonzero fields share one sign.  Years, months and weeks have no fixed
    length; operations that need to convert them take a ``relative_to``
    anchor (a date, an aware datetime, a ``PlainDate`` or a
    ``ZonedDateTime``).

    >>> Duration(hours=1, minutes=30).total("minutes")
    90.0
    >>> str(Duration(years=1, months=2))
    'P1Y2M'
    """

    __slots__ = ("_record",)

    _record: DurationRecord

    def __init__(
        self,
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
    ) -> None:
        values = (years, months, weeks, days, hours, minutes, seconds,
                  milliseconds, microseconds, nanoseconds)
        record = create_duration_record(
            *(to_integer_without_rounding(v, name) for v, name in zip(values, FIELD_NAMES))
        )
        object.__setattr__(self, "_record", record)

    @classmethod
    def _from_record(cls, record: DurationRecord) -> Duration:
        duration = cls.__new__(cls)
        object.__setattr__(duration, "_record", record)
        return duration

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ── fields ───────────────────────────────────────────────────────────

    @property
    def years(self) -> float:
        return self._record.years

    @property
    def months(self) -> float:
        return self._record.months

    @property
    def weeks(self) -> float:
        return self._record.weeks

    @property
    def days(self) -> float:
        return self._record.days

    @property
    def hours(self) -> float:
        return self._record.hours

    @property
    def minutes(self) -> float:
        return self._record.minutes

    @property
    def seconds(self) -> float:
        return self._record.seconds

    @property
    def milliseconds(self) -> float:
        return self._record.milliseconds

    @property
    def microseconds(self) -> float:
        return self._record.microseconds

    @property
    def nanoseconds(self) -> float:
        return self._record.nanoseconds

    @property
    def record(self) -> DurationRecord:
        return self._record

    @property
    def sign(self) -> int:
        return duration_sign(*self._record.as_tuple())

    @property
    def blank(self) -> bool:
        return self.sign == 0

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def from_(cls, value: Any) -> Duration:
        """Build a Duration from another Duration, an ISO string or a duration-like object."""
        if isinstance(value, Duration):
            return cls._from_record(value._record)
        return to_temporal_duration(value)

    def with_(self, **fields: Any) -> Duration:
        """Copy with the given fields replaced; the rest are kept."""
        unknown = set(fields) - set(FIELD_NAMES)
        if unknown:
            raise TemporalTypeError(
                f"Unknown duration field(s): {', '.join(sorted(unknown))}."
            )
        partial = to_partial_duration(fields)
        return create_temporal_duration(*partial.merge(self._record).as_tuple())

    def negated(self) -> Duration:
        return create_negated_temporal_duration(self)

    def abs(self) -> Duration:
        return create_temporal_duration(*(abs(v) for v in self._record.as_tuple()))

    # ── arithmetic ───────────────────────────────────────────────────────

    def add(self, other: Any, relative_to: Any = None) -> Duration:
        result = add_duration(
            self._record,
            _record_of(other),
            to_relative_temporal_object(relative_to),
        )
        return Duration._from_record(result)

    def subtract(self, other: Any, relative_to: Any = None) -> Duration:
        result = subtract_duration(
            self._record,
            _record_of(other),
            to_relative_temporal_object(relative_to),
        )
        return Duration._from_record(result)

    def round(
        self,
        smallest_unit: str | None = None,
        largest_unit: str | None = None,
        rounding_increment: int = 1,
        rounding_mode: str = "halfExpand",
        relative_to: Any = None,
    ) -> Duration:
        """
        Round to ``rounding_increment`` multiples of ``smallest_unit`` and
        rebalance so that no field is coarser than ``largest_unit``.

        At least one of the two units is required.  ``largest_unit`` defaults
        to the coarsest nonzero field (or ``smallest_unit`` if coarser).
        Converting to or from years, months or weeks needs ``relative_to``.
        """
        options = validate_options(
            RoundingOptions,
            smallest_unit=smallest_unit,
            largest_unit=largest_unit,
            rounding_increment=rounding_increment,
            rounding_mode=rounding_mode,
        )
        if options.smallest_unit is None and options.largest_unit is None:
            raise TemporalRangeError("One of smallest_unit or largest_unit is required.")
        if options.smallest_unit == "auto":
            raise TemporalRangeError("smallest_unit cannot be 'auto'.")

        smallest = options.smallest_unit or "nanosecond"
        default_largest = larger_of_two_units(
            default_temporal_largest_unit(*self._record.as_tuple()[:9]), smallest
        )
        largest = options.largest_unit
        if largest is None or largest == "auto":
            largest = default_largest
        if larger_of_two_units(largest, smallest) != largest:
            raise TemporalRangeError(
                f"largest_unit {largest!r} is smaller than smallest_unit {smallest!r}."
            )
        increment = validate_rounding_increment(options.rounding_increment, smallest)
        mode = options.rounding_mode
        relative_to = to_relative_temporal_object(relative_to)

        r = self._record
        unbalanced = unbalance_duration_relative(
            r.years, r.months, r.weeks, r.days, largest, relative_to
        )
        rounded = round_duration(
            create_duration_record(
                *unbalanced.as_tuple(),
                r.hours, r.minutes, r.seconds,
                r.milliseconds, r.microseconds, r.nanoseconds,
            ),
            increment,
            smallest,
            mode,
            relative_to,
        ).duration_record
        adjusted = adjust_rounded_duration_days(
            rounded, increment, smallest, mode, relative_to
        )
        if isinstance(relative_to, ZonedDateTime):
            relative_to = move_relative_zoned_date_time(
                relative_to, adjusted.years, adjusted.months, adjusted.weeks, 0
            )
        balanced = balance_duration(
            adjusted.days,
            adjusted.hours, adjusted.minutes, adjusted.seconds,
            adjusted.milliseconds, adjusted.microseconds, adjusted.nanoseconds,
            largest,
            relative_to,
        )
        date = balance_duration_relative(
            adjusted.years, adjusted.months, adjusted.weeks, balanced.days,
            largest, relative_to,
        )
        logger.debug(
            "duration.round", smallest_unit=smallest, largest_unit=largest,
            increment=increment, rounding_mode=mode,
        )
        return create_temporal_duration(
            *date.as_tuple(), *balanced.as_tuple()[1:]
        )

    def total(self, unit: str, relative_to: Any = None) -> float:
        """The whole duration expressed in ``unit``, fraction included."""
        unit = validate_options(RoundingOptions, smallest_unit=unit).smallest_unit
        if unit is None or unit == "auto":
            raise TemporalRangeError(f"{unit!r} is not a valid unit for total().")
        relative_to = to_relative_temporal_object(relative_to)

        r = self._record
        unbalanced = unbalance_duration_relative(
            r.years, r.months, r.weeks, r.days, unit, relative_to
        )
        intermediate = None
        if isinstance(relative_to, ZonedDateTime):
            intermediate = move_relative_zoned_date_time(
                relative_to, unbalanced.years, unbalanced.months, unbalanced.weeks, 0
            )
        balanced = balance_duration(
            unbalanced.days,
            r.hours, r.minutes, r.seconds,
            r.milliseconds, r.microseconds, r.nanoseconds,
            unit,
            intermediate,
        )
        rounded = round_duration(
            create_duration_record(
                unbalanced.years, unbalanced.months, unbalanced.weeks,
                *balanced.as_tuple(),
            ),
            1,
            unit,
            "trunc",
            relative_to,
        )
        whole = getattr(rounded.duration_record, f"{unit}s")
        return whole + rounded.remainder

    @staticmethod
    def compare(one: Any, two: Any, relative_to: Any = None) -> int:
        """-1, 0 or 1 as ``one`` is shorter than, as long as, or longer than ``two``."""
        one = to_temporal_duration(one)._record
        two = to_temporal_duration(two)._record
        relative_to = to_relative_temporal_object(relative_to)

        shift1 = calculate_offset_shift(relative_to, one.years, one.months, one.weeks, one.days)
        shift2 = calculate_offset_shift(relative_to, two.years, two.months, two.weeks, two.days)
        days1, days2 = one.days, two.days
        if any(v != 0 for v in (one.years, one.months, one.weeks,
                                two.years, two.months, two.weeks)):
            days1 = unbalance_duration_relative(
                one.years, one.months, one.weeks, one.days, "day", relative_to
            ).days
            days2 = unbalance_duration_relative(
                two.years, two.months, two.weeks, two.days, "day", relative_to
            ).days
        ns1 = total_duration_nanoseconds(days1, *one.as_tuple()[4:], shift1)
        ns2 = total_duration_nanoseconds(days2, *two.as_tuple()[4:], shift2)
        return (ns1 > ns2) - (ns1 < ns2)

    # ── text ─────────────────────────────────────────────────────────────

    def to_string(
        self,
        fractional_second_digits: Any = "auto",
        smallest_unit: str | None = None,
        rounding_mode: str = "trunc",
    ) -> str:
        options = validate_options(
            ToStringOptions,
            fractional_second_digits=fractional_second_digits,
            smallest_unit=smallest_unit,
            rounding_mode=rounding_mode,
        )
        precision, unit, increment = to_seconds_string_precision(
            options.smallest_unit, options.fractional_second_digits
        )
        rounded = round_duration(
            self._record, increment, unit, options.rounding_mode
        ).duration_record
        return temporal_duration_to_string(rounded, precision)

    def __str__(self) -> str:
        return temporal_duration_to_string(self._record)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._record == other._record

    def __hash__(self) -> int:
        return hash(self._record)

    def __reduce__(self) -> tuple[Any, ...]:
        return (create_temporal_duration, self._record.as_tuple())


def _record_of(value: Any) -> DurationRecord:
    if isinstance(value, Duration):
        return value._record
    return to_temporal_duration_record(value)


def create_temporal_duration(
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
) -> Duration:
    """Validated constructor; ``TemporalRangeError`` on an invalid duration."""
    return Duration._from_record(
        create_duration_record(
            years, months, weeks, days, hours, minutes, seconds,
            milliseconds, microseconds, nanoseconds,
        )
    )


def create_negated_temporal_duration(duration: Duration) -> Duration:
    return create_temporal_duration(*duration.record.negated().as_tuple())


def to_temporal_duration(value: Any) -> Duration:
    if isinstance(value, Duration):
        return value
    return Duration._from_record(to_temporal_duration_record(value))
