"""Conversions from float seconds to split integer representations."""

from __future__ import annotations

import math
from typing import NamedTuple


class Timeval(NamedTuple):
    """Seconds and microseconds, as in ``struct timeval``."""

    sec: int
    usec: int


class Timespec(NamedTuple):
    """Seconds and nanoseconds, as in ``struct timespec``."""

    sec: int
    nsec: int


def _split(t: float, scale: int) -> tuple[int, int]:
    sec = math.floor(t)
    frac = round((t - sec) * scale)
    # Rounding can carry a full unit into the seconds field.
    if frac >= scale:
        sec += 1
        frac -= scale
    return int(sec), int(frac)


def to_timeval(t: float) -> Timeval:
    """Split *t* seconds into whole seconds and microseconds.

    The fractional part is always non-negative, so negative times borrow
    from the seconds field: ``-0.25`` becomes ``Timeval(-1, 750000)``.
    """
    return Timeval(*_split(t, 1_000_000))


def to_timespec(t: float) -> Timespec:
    """Split *t* seconds into whole seconds and nanoseconds."""
    return Timespec(*_split(t, 1_000_000_000))
