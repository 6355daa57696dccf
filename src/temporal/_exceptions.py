class TemporalError(Exception):
    """Base exception for all errors raised by :mod:`temporal`."""


class TemporalRangeError(TemporalError, ValueError):
    """A value is out of range, inconsistently signed, or missing an anchor."""


class TemporalTypeError(TemporalError, TypeError):
    """A value has the wrong shape, e.g. it exposes no duration fields."""


class CalendarError(TemporalRangeError):
    """Raised by a calendar when a date cannot be produced or compared."""
