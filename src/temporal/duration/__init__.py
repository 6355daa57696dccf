# src/temporal/duration/__init__.py
"""
temporal.duration
~~~~~~~~~~~~~~~~~

Duration arithmetic: validation, balancing between units, addition,
rounding, comparison, totals and the ISO 8601 text form.

Basic usage::

    from datetime import date
    from temporal.duration import Duration

    d = Duration.from_("P1M15D")
    d.total("days", relative_to=date(2024, 2, 1))            # → 44.0
    Duration(hours=25).round(largest_unit="day")              # → P1DT1H
    Duration(seconds=2, milliseconds=500).round(
        smallest_unit="second", rounding_mode="halfEven")     # → PT2S

Years, months and weeks have no fixed length, so any operation that needs
to convert them takes a ``relative_to`` anchor.  A zoned anchor also makes
days as long as the wall-clock day they fall on (23, 24 or 25 hours).

Public API
----------
Duration                          The immutable value object.
create_temporal_duration          Validated constructor from field values.
create_negated_temporal_duration  Sign-flipped copy.
to_temporal_duration              Coerce a Duration, ISO string or duration-like.
parse_temporal_duration_string    ISO 8601 text → DurationRecord.
temporal_duration_to_string       DurationRecord → ISO 8601 text.
"""

from __future__ import annotations

from temporal.duration.duration import (
    Duration,
    create_negated_temporal_duration,
    create_temporal_duration,
    to_temporal_duration,
)
from temporal.duration.formatting import temporal_duration_to_string
from temporal.duration.parser import parse_temporal_duration_string

__all__ = [
    "Duration",
    "create_negated_temporal_duration",
    "create_temporal_duration",
    "parse_temporal_duration_string",
    "temporal_duration_to_string",
    "to_temporal_duration",
]
