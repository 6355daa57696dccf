# src/temporal/__init__.py
"""
temporal
~~~~~~~~

Calendar-aware duration arithmetic after the TC39 Temporal ``Duration``.

Public API
----------
Duration             Immutable duration value object.
PlainDate            Calendar date anchor.
ZonedDateTime        Instant-in-a-zone anchor.
IsoCalendar          ISO 8601 calendar.
FixedOffsetTimeZone  Constant UTC offset.
ZoneInfoTimeZone     IANA time zone.
TemporalError        Base exception; see also TemporalRangeError,
                     TemporalTypeError and CalendarError.
"""

from __future__ import annotations

import logging

from temporal._exceptions import (
    CalendarError,
    TemporalError,
    TemporalRangeError,
    TemporalTypeError,
)
from temporal.calendar import IsoCalendar, PlainDate
from temporal.duration import Duration
from temporal.timezone import (
    FixedOffsetTimeZone,
    PlainDateTime,
    ZonedDateTime,
    ZoneInfoTimeZone,
)

__all__ = [
    "CalendarError",
    "Duration",
    "FixedOffsetTimeZone",
    "IsoCalendar",
    "PlainDate",
    "PlainDateTime",
    "TemporalError",
    "TemporalRangeError",
    "TemporalTypeError",
    "ZoneInfoTimeZone",
    "ZonedDateTime",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
