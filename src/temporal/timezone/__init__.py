# src/temporal/timezone/__init__.py
"""
temporal.timezone
~~~~~~~~~~~~~~~~~

Time-zone collaborator and zoned anchors.  A TimeZone only has to report the
UTC offset in effect at an instant; wall-clock resolution (gaps, overlaps)
is derived from that.

Basic usage::

    from temporal.timezone import ZonedDateTime, ZoneInfoTimeZone

    tz = ZoneInfoTimeZone("Europe/Amsterdam")
    anchor = ZonedDateTime(1_616_893_200_000_000_000, tz)   # 2021-03-28T01:00Z
    anchor.to_plain_date_time()                             # 03:00 local, CEST

Public API
----------
TimeZone             Protocol implemented by time zones.
FixedOffsetTimeZone  Constant UTC offset.
ZoneInfoTimeZone     IANA zone from the tz database.
ZonedDateTime        An instant in a time zone, used as a ``relative_to`` anchor.
PlainDateTime        Wall-clock date and time.
"""

from __future__ import annotations

from temporal.timezone.timezone import (
    FixedOffsetTimeZone,
    TimeZone,
    ZoneInfoTimeZone,
)
from temporal.timezone.zoned import PlainDateTime, ZonedDateTime

__all__ = [
    "FixedOffsetTimeZone",
    "PlainDateTime",
    "TimeZone",
    "ZoneInfoTimeZone",
    "ZonedDateTime",
]
