from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .._exceptions import TemporalRangeError

_UTC_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MICROSECOND = timedelta(microseconds=1)

# Offsets must stay strictly within one day.
MAX_OFFSET_NANOSECONDS: int = 86_400_000_000_000


def timedelta_to_nanoseconds(delta: timedelta) -> int:
    return (delta // _ONE_MICROSECOND) * 1000


@runtime_checkable
class TimeZone(Protocol):
    """Maps an exact instant to the UTC offset in effect at that instant."""

    def offset_nanoseconds_for(self, epoch_nanoseconds: int) -> int: ...


@dataclass(frozen=True)
class FixedOffsetTimeZone:
    offset_nanoseconds: int = 0

    def __post_init__(self) -> None:
        if abs(self.offset_nanoseconds) >= MAX_OFFSET_NANOSECONDS:
            raise TemporalRangeError(
                f"Offset must be less than one day; got {self.offset_nanoseconds} ns."
            )

    def offset_nanoseconds_for(self, epoch_nanoseconds: int) -> int:
        return self.offset_nanoseconds

    def __str__(self) -> str:
        sign = "-" if self.offset_nanoseconds < 0 else "+"
        minutes = abs(self.offset_nanoseconds) // 60_000_000_000
        return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True)
class ZoneInfoTimeZone:
    """An IANA time zone backed by :mod:`zoneinfo` (and ``tzdata``)."""

    key: str

    def __post_init__(self) -> None:
        try:
            ZoneInfo(self.key)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise TemporalRangeError(f"Unknown time zone {self.key!r}.") from exc

    @property
    def zone(self) -> ZoneInfo:
        # ZoneInfo caches instances per key
        return ZoneInfo(self.key)

    def offset_nanoseconds_for(self, epoch_nanoseconds: int) -> int:
        seconds = epoch_nanoseconds // 1_000_000_000
        try:
            utc = _UTC_EPOCH + timedelta(seconds=seconds)
            offset = utc.astimezone(self.zone).utcoffset()
        except OverflowError as exc:
            raise TemporalRangeError(
                f"Instant {epoch_nanoseconds} ns is outside the range of {self.key}."
            ) from exc
        return timedelta_to_nanoseconds(offset) if offset is not None else 0

    def __str__(self) -> str:
        return self.key
