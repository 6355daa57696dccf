# src/temporal/calendar/__init__.py
"""
temporal.calendar
~~~~~~~~~~~~~~~~~

Calendar collaborator for the duration engine.  A Calendar answers two
questions: "what date is this duration after that date?" (``date_add``) and
"how far apart are these two dates?" (``date_until``).  The engine depends
only on that protocol; :class:`IsoCalendar` is the bundled implementation.

Basic usage::

    from temporal.calendar import IsoCalendar, PlainDate
    from temporal.records import DateDurationRecord

    cal = IsoCalendar()
    start = PlainDate(2020, 1, 31)
    cal.date_add(start, DateDurationRecord(months=1))          # → 2020-02-29
    cal.date_until(start, PlainDate(2021, 3, 1), "month")      # → 13 months, 1 day

Public API
----------
Calendar       Protocol implemented by calendar systems.
IsoCalendar    ISO 8601 calendar.
PlainDate      A calendar date, used as a ``relative_to`` anchor.
CalendarError  Raised for invalid or out-of-range dates.
"""

from __future__ import annotations

from temporal._exceptions import CalendarError
from temporal.calendar.calendar import Calendar, IsoCalendar, PlainDate

__all__ = [
    "Calendar",
    "CalendarError",
    "IsoCalendar",
    "PlainDate",
]
