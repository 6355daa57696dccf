"""
Coercion of caller-supplied values into duration records and anchors.

Duration-like values are read by property name: mapping keys for
mappings, attributes for anything else.  Only the ten field names are
recognized; a missing name or ``None`` counts as absent.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal
from numbers import Real
from typing import Any

import numpy as np

from .._exceptions import TemporalRangeError, TemporalTypeError
from ..calendar import PlainDate
from ..records import DurationRecord, PartialDurationRecord
from ..timezone import PlainDateTime, ZonedDateTime
from ..units import FIELD_NAMES, to_singular_unit
from .parser import parse_temporal_duration_string
from .validation import create_duration_record

RelativeTo = PlainDate | ZonedDateTime

_SCALARS = (bool, int, float, complex, bytes, Real, Decimal)


def to_finite_number(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise TemporalTypeError(f"{name} must be a number; got a bool.")
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            raise TemporalRangeError(f"{name} must be numeric; got {value!r}.") from None
    elif isinstance(value, (Real, Decimal)):
        number = float(value)
    else:
        raise TemporalTypeError(
            f"{name} must be a number; got {type(value).__name__}."
        )
    if not np.isfinite(number):
        raise TemporalRangeError(f"{name} must be finite; got {value!r}.")
    return number


def to_integer_without_rounding(value: Any, name: str) -> float:
    """Like :func:`to_finite_number`, but the value must also be integral."""
    number = to_finite_number(value, name)
    if not number.is_integer():
        raise TemporalRangeError(f"{name} must be an integer; got {value!r}.")
    return number


def _read_fields(value: Any) -> dict[str, float]:
    if value is None or isinstance(value, (str, *_SCALARS)):
        raise TemporalTypeError(
            f"Expected a duration-like object; got {type(value).__name__}."
        )
    present: dict[str, float] = {}
    for name in FIELD_NAMES:
        if isinstance(value, Mapping):
            raw = value.get(name)
        else:
            raw = getattr(value, name, None)
        if raw is not None:
            present[name] = to_integer_without_rounding(raw, name)
    if not present:
        raise TemporalTypeError(
            "A duration-like object must have at least one of: "
            + ", ".join(FIELD_NAMES)
            + "."
        )
    return present


def to_partial_duration(value: Any) -> PartialDurationRecord:
    return PartialDurationRecord(**_read_fields(value))


def to_temporal_duration_record(value: Any) -> DurationRecord:
    if isinstance(value, DurationRecord):
        return create_duration_record(*value.as_tuple())
    if isinstance(value, str):
        return parse_temporal_duration_string(value)
    merged = PartialDurationRecord(**_read_fields(value)).merge(DurationRecord())
    return create_duration_record(*merged.as_tuple())


def to_limited_temporal_duration(
    value: Any, disallowed_fields: Iterable[str]
) -> DurationRecord:
    record = to_temporal_duration_record(value)
    for name in disallowed_fields:
        if name not in FIELD_NAMES:
            name = f"{to_singular_unit(name)}s"
        if getattr(record, name) != 0:
            raise TemporalRangeError(f"{name} is not allowed here.")
    return record


def to_relative_temporal_object(value: Any) -> RelativeTo | None:
    if value is None or isinstance(value, (PlainDate, ZonedDateTime)):
        return value
    if isinstance(value, PlainDateTime):
        return value.to_plain_date()
    if isinstance(value, datetime):
        if value.utcoffset() is None:
            return PlainDate.from_date(value.date())
        return ZonedDateTime.from_datetime(value)
    if isinstance(value, date):
        return PlainDate.from_date(value)
    raise TemporalTypeError(
        f"relative_to must be a date, datetime, PlainDate or ZonedDateTime; "
        f"got {type(value).__name__}."
    )
