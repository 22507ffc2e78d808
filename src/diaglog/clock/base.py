"""Abstract base class for clock sources.

Every time reading in diaglog goes through a ``ClockSource``: the wall
clock stamped on records, the monotonic reading used by timers, and the
cycle counter used by periodic gates. Subclasses must implement every
abstract member.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ClockSource(ABC):
    """Abstract base for all clock sources.

    ``cycle_count()`` must be monotonic within one process run. Its values
    are not comparable across processes.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable clock identifier (e.g., ``'system'``)."""

    @abstractmethod
    def now(self) -> float:
        """Return wall-clock time in seconds since the epoch."""

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic reading in seconds, for measuring intervals."""

    @abstractmethod
    def cycle_count(self) -> int:
        """Return the current reading of a monotonically increasing counter."""

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Suspend the caller for approximately *seconds*."""

    @property
    def nominal_frequency(self) -> float | None:
        """Known ``cycle_count()`` rate in cycles per second, or ``None``.

        When ``None``, :func:`~diaglog.clock.frequency.processor_frequency`
        measures the rate instead, which sleeps on this clock.
        """
        return None
