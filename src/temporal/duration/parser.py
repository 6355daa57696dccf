"""
Parser for the ISO 8601 duration text form, e.g. ``-P1Y2M3W4DT5H6M7.008009010S``.

Only the last time component may carry a fraction (up to nine digits); it
is carried exactly into the smaller units and whatever is left below one
nanosecond is dropped.
"""

from __future__ import annotations

import math
import re
from fractions import Fraction

from .._exceptions import TemporalRangeError
from ..records import DurationRecord
from .validation import create_duration_record

_DURATION_RE = re.compile(
    r"""
    (?P<sign>[+\-−])?
    P
    (?:(?P<years>\d+)Y)?
    (?:(?P<months>\d+)M)?
    (?:(?P<weeks>\d+)W)?
    (?:(?P<days>\d+)D)?
    (?P<time>T
        (?:(?P<hours>\d+)(?:[.,](?P<fhours>\d{1,9}))?H)?
        (?:(?P<minutes>\d+)(?:[.,](?P<fminutes>\d{1,9}))?M)?
        (?:(?P<seconds>\d+)(?:[.,](?P<fseconds>\d{1,9}))?S)?
    )?
    """,
    re.VERBOSE | re.IGNORECASE,
)

_DATE_GROUPS = ("years", "months", "weeks", "days")
_TIME_GROUPS = ("hours", "minutes", "seconds")


def _fraction(digits: str) -> Fraction:
    return Fraction(int(digits), 10 ** len(digits))


def parse_temporal_duration_string(text: str) -> DurationRecord:
    match = _DURATION_RE.fullmatch(text)
    if match is None:
        raise TemporalRangeError(f"Invalid duration string {text!r}.")
    g = match.groupdict()

    has_time = any(g[name] is not None for name in _TIME_GROUPS)
    if g["time"] is not None and not has_time:
        raise TemporalRangeError(f"Invalid duration string {text!r}: empty time part.")
    if not has_time and all(g[name] is None for name in _DATE_GROUPS):
        raise TemporalRangeError(f"Invalid duration string {text!r}: no components.")

    if g["fhours"] is not None:
        if g["minutes"] is not None or g["seconds"] is not None:
            raise TemporalRangeError(
                f"Invalid duration string {text!r}: only the last component may be fractional."
            )
        minutes = _fraction(g["fhours"]) * 60
    else:
        minutes = Fraction(int(g["minutes"] or 0))

    if g["fminutes"] is not None:
        if g["seconds"] is not None:
            raise TemporalRangeError(
                f"Invalid duration string {text!r}: only the last component may be fractional."
            )
        seconds = _fraction(g["fminutes"]) * 60
    elif g["fhours"] is not None:
        seconds = (minutes % 1) * 60
    else:
        seconds = Fraction(int(g["seconds"] or 0))

    if g["fseconds"] is not None:
        milliseconds = _fraction(g["fseconds"]) * 1000
    else:
        milliseconds = (seconds % 1) * 1000
    microseconds = (milliseconds % 1) * 1000
    nanoseconds = (microseconds % 1) * 1000

    factor = -1 if g["sign"] in ("-", "−") else 1
    return create_duration_record(
        int(g["years"] or 0) * factor,
        int(g["months"] or 0) * factor,
        int(g["weeks"] or 0) * factor,
        int(g["days"] or 0) * factor,
        int(g["hours"] or 0) * factor,
        math.floor(minutes) * factor,
        math.floor(seconds) * factor,
        math.floor(milliseconds) * factor,
        math.floor(microseconds) * factor,
        math.floor(nanoseconds) * factor,
    )
