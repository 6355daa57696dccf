"""
Shared fixtures: a deterministic single-transition time zone, so DST tests
do not depend on the installed tz database.

Transitions mirror Europe/Amsterdam in 2021:
  - spring forward 2021-03-28T01:00Z, +01:00 → +02:00 (local 02:00 → 03:00)
  - fall back      2021-10-31T01:00Z, +02:00 → +01:00 (local 03:00 → 02:00)
"""

from dataclasses import dataclass

import pytest

from temporal.timezone import ZonedDateTime

HOUR = 3_600_000_000_000
SECOND = 1_000_000_000

SPRING_TRANSITION = 1_616_893_200 * SECOND
FALL_TRANSITION = 1_635_642_000 * SECOND


@dataclass(frozen=True)
class TransitionTimeZone:
    """Offset ``before`` until ``transition``, ``after`` from then on."""

    transition: int
    before: int
    after: int

    def offset_nanoseconds_for(self, epoch_nanoseconds):
        return self.before if epoch_nanoseconds < self.transition else self.after


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def spring_zone():
    return TransitionTimeZone(SPRING_TRANSITION, 1 * HOUR, 2 * HOUR)


@pytest.fixture
def fall_zone():
    return TransitionTimeZone(FALL_TRANSITION, 2 * HOUR, 1 * HOUR)


@pytest.fixture
def spring_midnight(spring_zone):
    """2021-03-28T00:00+01:00, the start of a 23-hour day."""
    return ZonedDateTime(SPRING_TRANSITION - 2 * HOUR, spring_zone)


@pytest.fixture
def fall_midnight(fall_zone):
    """2021-10-31T00:00+02:00, the start of a 25-hour day."""
    return ZonedDateTime(FALL_TRANSITION - 3 * HOUR, fall_zone)
