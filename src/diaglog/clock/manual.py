"""Manually driven clock for deterministic tests.

Time only moves when :meth:`ManualClock.advance` (or :meth:`sleep`) is
called. The cycle counter advances in lockstep at a fixed
``cycles_per_second``, which is also reported as the clock's nominal
frequency, so periodic gates never sleep on it to calibrate.
"""

from __future__ import annotations

from diaglog.clock.base import ClockSource


class ManualClock(ClockSource):
    """Deterministic clock for testing.

    Args:
        start: Initial wall-clock reading, seconds since the epoch.
        cycles_per_second: Counter rate used to convert advanced seconds
            into counter ticks.
        start_cycles: Initial counter reading.
    """

    def __init__(
        self,
        start: float = 1_700_000_000.0,
        cycles_per_second: int = 1_000_000,
        start_cycles: int = 1,
    ) -> None:
        self._wall = start
        self._elapsed = 0.0
        self._cycles_per_second = cycles_per_second
        self._start_cycles = start_cycles

    @property
    def name(self) -> str:
        """Return ``'manual'``."""
        return "manual"

    @property
    def cycles_per_second(self) -> int:
        return self._cycles_per_second

    @property
    def nominal_frequency(self) -> float:
        """Return :attr:`cycles_per_second`; calibration never advances this clock."""
        return float(self._cycles_per_second)

    def advance(self, seconds: float) -> None:
        """Move every reading forward by *seconds*.

        Raises:
            ValueError: If *seconds* is negative; the clock is monotonic.
        """
        if seconds < 0:
            raise ValueError(f"Cannot move a monotonic clock backwards ({seconds})")
        self._wall += seconds
        self._elapsed += seconds

    def now(self) -> float:
        return self._wall

    def monotonic(self) -> float:
        return self._elapsed

    def cycle_count(self) -> int:
        return self._start_cycles + round(self._elapsed * self._cycles_per_second)

    def sleep(self, seconds: float) -> None:
        """Advance the clock instead of blocking."""
        if seconds > 0:
            self.advance(seconds)
