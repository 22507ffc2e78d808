"""Scoped wall-clock timing into caller-owned accumulators.

``TimerBlock`` adds the elapsed time of a ``with`` block (or a decorated
call) to a ``DurationAccumulator`` exactly once per entry, whether the block
falls through, returns early or raises::

    io_time = DurationAccumulator()
    for chunk in chunks:
        with TimerBlock(io_time):
            write(chunk)
    info("spent %.3fs writing", io_time.total)
"""

from __future__ import annotations

import contextlib
import threading
from typing import TYPE_CHECKING, Any, TypeVar

import numpy as np

from diaglog.clock.system import get_default_clock

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from diaglog.clock.base import ClockSource

T = TypeVar("T")


class DurationAccumulator:
    """Running total of measured durations, in seconds.

    Args:
        keep_samples: Also store each individual duration so that
            :meth:`stats` can report a distribution.
    """

    def __init__(self, keep_samples: bool = False) -> None:
        self._lock = threading.Lock()
        self._keep_samples = keep_samples
        self._samples: list[float] = []
        self.total = 0.0
        self.count = 0

    def add(self, seconds: float) -> None:
        with self._lock:
            self.total += seconds
            self.count += 1
            if self._keep_samples:
                self._samples.append(seconds)

    def reset(self) -> None:
        with self._lock:
            self.total = 0.0
            self.count = 0
            self._samples.clear()

    @property
    def samples(self) -> list[float]:
        """Copy of the stored durations (empty unless ``keep_samples``)."""
        return list(self._samples)

    def stats(self) -> dict[str, Any]:
        """Summarize the accumulated durations.

        Returns:
            ``count``, ``total`` and ``mean`` always; ``min``, ``max``,
            ``p50`` and ``p95`` as well when samples are kept. Empty dict if
            nothing has been added.
        """
        if self.count == 0:
            return {}

        result: dict[str, Any] = {
            "count": self.count,
            "total": self.total,
            "mean": self.total / self.count,
        }
        if self._samples:
            values = np.asarray(self._samples, dtype=np.float64)
            result.update(
                {
                    "min": float(values.min()),
                    "max": float(values.max()),
                    "p50": float(np.percentile(values, 50)),
                    "p95": float(np.percentile(values, 95)),
                }
            )
        return result

    def __repr__(self) -> str:
        return f"DurationAccumulator(total={self.total:.6f}, count={self.count})"


class TimerBlock(contextlib.ContextDecorator):
    """Context manager and decorator adding elapsed time to an accumulator.

    Each entry pushes its own start time, so one ``TimerBlock`` may be
    nested, used recursively as a decorator, or shared between threads.
    Exceptions raised inside the block propagate unchanged.

    Args:
        accumulator: Caller-owned accumulator; must outlive the block.
        clock: Clock whose monotonic reading is used. Defaults to the
            system clock.
    """

    def __init__(self, accumulator: DurationAccumulator, clock: ClockSource | None = None) -> None:
        self._accumulator = accumulator
        self._clock = clock if clock is not None else get_default_clock()
        self._local = threading.local()

    def _starts(self) -> list[float]:
        starts = getattr(self._local, "starts", None)
        if starts is None:
            starts = self._local.starts = []
        return starts

    def __enter__(self) -> DurationAccumulator:
        self._starts().append(self._clock.monotonic())
        return self._accumulator

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        start = self._starts().pop()
        self._accumulator.add(self._clock.monotonic() - start)


def measure(
    accumulator: DurationAccumulator,
    fn: Callable[..., T],
    *args: Any,
    clock: ClockSource | None = None,
    **kwargs: Any,
) -> T:
    """Call ``fn(*args, **kwargs)`` and add its running time to *accumulator*."""
    with TimerBlock(accumulator, clock=clock):
        return fn(*args, **kwargs)
