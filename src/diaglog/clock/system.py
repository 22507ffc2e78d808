"""System clock backed by the ``time`` module.

The cycle counter is ``time.perf_counter_ns()``: the highest resolution
monotonic counter the interpreter exposes. Its rate is measured, not
assumed, by :func:`diaglog.clock.frequency.processor_frequency`.
"""

from __future__ import annotations

import time

from diaglog.clock.base import ClockSource


class SystemClock(ClockSource):
    """``time`` module wrapper, always available."""

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    def now(self) -> float:
        return time.time()

    def monotonic(self) -> float:
        return time.perf_counter()

    def cycle_count(self) -> int:
        return time.perf_counter_ns()

    def sleep(self, seconds: float) -> None:
        """Sleep for *seconds*; negative durations return immediately."""
        if seconds > 0:
            time.sleep(seconds)


_default_clock = SystemClock()


def get_default_clock() -> ClockSource:
    """Return the process-wide clock used when none is passed explicitly."""
    return _default_clock


def now() -> float:
    """Wall-clock time of the default clock, in seconds since the epoch."""
    return _default_clock.now()


def sleep(seconds: float) -> None:
    """Sleep on the default clock. Not cancellable."""
    _default_clock.sleep(seconds)
