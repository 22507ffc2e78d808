"""Cycle-counter frequency estimation.

Periodic gates express their interval in seconds but compare raw counter
readings, so they need the counter rate in cycles per second. The rate is
measured once per clock by timing several short sleeps against the clock's
monotonic reading, and the median of the rounds is cached for the lifetime
of the clock.
"""

from __future__ import annotations

import logging
import threading
import weakref
from typing import TYPE_CHECKING

import numpy as np

from diaglog.clock.system import get_default_clock
from diaglog.exceptions import DiagLogError

if TYPE_CHECKING:
    from diaglog.clock.base import ClockSource
    from diaglog.config import DiagConfig

logger = logging.getLogger("diaglog")

_cache: weakref.WeakKeyDictionary[ClockSource, float] = weakref.WeakKeyDictionary()
_cache_lock = threading.Lock()


def estimate_frequency(clock: ClockSource, window_s: float, rounds: int) -> float:
    """Measure the counter rate of *clock* without caching.

    Args:
        clock: Clock whose ``cycle_count()`` rate is measured.
        window_s: Length of each calibration sleep, in seconds.
        rounds: Number of calibration windows.

    Returns:
        Median cycles per second over all rounds.

    Raises:
        DiagLogError: If the clock's monotonic reading never advanced.
    """
    rates: list[float] = []
    for _ in range(rounds):
        c0 = clock.cycle_count()
        t0 = clock.monotonic()
        clock.sleep(window_s)
        c1 = clock.cycle_count()
        t1 = clock.monotonic()
        if t1 > t0:
            rates.append((c1 - c0) / (t1 - t0))

    if not rates:
        raise DiagLogError(f"Clock {clock.name!r} did not advance during frequency calibration")
    return float(np.median(np.asarray(rates, dtype=np.float64)))


def processor_frequency(
    clock: ClockSource | None = None,
    config: DiagConfig | None = None,
) -> float:
    """Return the cached cycles-per-second estimate for *clock*.

    A clock reporting a ``nominal_frequency`` is taken at its word. For
    any other clock the first call runs the calibration, which sleeps on
    the clock, and later calls return the cached value.

    Args:
        clock: Clock to calibrate. Defaults to the process-wide system clock.
        config: Supplies calibration window and round count. Defaults to
            ``DiagConfig()``.

    Returns:
        Estimated counter rate in cycles per second.
    """
    if clock is None:
        clock = get_default_clock()

    nominal = clock.nominal_frequency
    if nominal is not None:
        return nominal

    with _cache_lock:
        cached = _cache.get(clock)
        if cached is not None:
            return cached

        if config is None:
            from diaglog.config import DiagConfig

            config = DiagConfig()

        freq = estimate_frequency(
            clock,
            config.frequency_calibration_s,
            config.frequency_calibration_rounds,
        )
        _cache[clock] = freq
        logger.debug("Calibrated clock %r at %.0f cycles/s", clock.name, freq)
        return freq


def _reset() -> None:
    """Drop every cached estimate. **Test-only**."""
    with _cache_lock:
        _cache.clear()
