"""Time-interval gate driven by the clock's cycle counter.

The interval is given in seconds and converted once, on first use, into a
cycle threshold using the clock's frequency estimate. Each later decision
costs one counter read and one subtraction.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import TYPE_CHECKING

from diaglog.clock.frequency import processor_frequency
from diaglog.clock.system import get_default_clock
from diaglog.exceptions import GateConfigurationError
from diaglog.gates.base import Gate

if TYPE_CHECKING:
    from diaglog.clock.base import ClockSource


class PeriodicGate(Gate):
    """Fires at most once per ``interval_s`` seconds; the first call always fires.

    A call fires when more than the threshold number of cycles has elapsed
    since the last fire. Calls in between are counted as suppressed; the
    count accumulated before a fire is kept in :attr:`last_suppressed` so
    the fired block can report how much it skipped.

    Args:
        interval_s: Minimum spacing between fires, in seconds.
        clock: Clock supplying the cycle counter. Defaults to the system clock.
        frequency: Counter rate in cycles per second. Defaults to the
            cached estimate for *clock*.

    Raises:
        GateConfigurationError: If *interval_s* is not a positive finite number.
    """

    def __init__(
        self,
        interval_s: float,
        clock: ClockSource | None = None,
        frequency: float | None = None,
    ) -> None:
        if isinstance(interval_s, bool) or not isinstance(interval_s, Real):
            raise GateConfigurationError(f"Periodic interval must be a number, got {interval_s!r}")
        if not math.isfinite(interval_s) or interval_s <= 0:
            raise GateConfigurationError(
                f"Periodic interval must be positive and finite, got {interval_s}"
            )
        if frequency is not None and frequency <= 0:
            raise GateConfigurationError(f"Counter frequency must be positive, got {frequency}")
        super().__init__()
        self._interval_s = float(interval_s)
        self._clock = clock if clock is not None else get_default_clock()
        self._frequency = frequency
        self._threshold: int | None = None
        self._last: int | None = None
        self._suppressed = 0
        self._last_suppressed = 0

    @property
    def interval_s(self) -> float:
        return self._interval_s

    @property
    def threshold(self) -> int | None:
        """Cycle threshold, or ``None`` until the first call resolves it."""
        return self._threshold

    @property
    def suppressed(self) -> int:
        """Calls suppressed since the last fire."""
        return self._suppressed

    @property
    def last_suppressed(self) -> int:
        """Calls that were suppressed before the most recent fire."""
        return self._last_suppressed

    def _resolve_threshold(self) -> int:
        frequency = self._frequency
        if frequency is None:
            frequency = processor_frequency(self._clock)
        return int(self._interval_s * frequency)

    def _decide(self) -> bool:
        if self._threshold is None:
            self._threshold = self._resolve_threshold()

        current = self._clock.cycle_count()
        if self._last is None or current - self._last > self._threshold:
            self._last = current
            self._last_suppressed = self._suppressed
            self._suppressed = 0
            return True

        self._suppressed += 1
        return False
