"""Gates keyed on the calling source location.

``every_n()`` and ``periodic()`` keep one gate per call expression in a
process-wide registry, so a bare ``if every_n(100): ...`` behaves like a
gate that lives as long as the process. The interval passed on the first
call at a site is the one that site keeps; later values are ignored.
"""

from __future__ import annotations

import sys
import threading
from typing import TYPE_CHECKING, ClassVar

from diaglog.gates.periodic import PeriodicGate
from diaglog.gates.sampling import SamplingGate

if TYPE_CHECKING:
    from collections.abc import Callable

    from diaglog.clock.base import ClockSource
    from diaglog.gates.base import Gate

# (kind, filename, line, bytecode offset of the call)
CallSiteKey = tuple[str, str, int, int]


class CallSiteRegistry:
    """Process-wide map from call site to its gate."""

    _gates: ClassVar[dict[CallSiteKey, Gate]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def get_or_create(cls, key: CallSiteKey, factory: Callable[[], Gate]) -> Gate:
        """Return the gate for *key*, building it with *factory* on first use.

        Raises:
            GateConfigurationError: If *factory* rejects its interval. Nothing
                is registered in that case.
        """
        gate = cls._gates.get(key)
        if gate is not None:
            return gate
        with cls._lock:
            gate = cls._gates.get(key)
            if gate is None:
                gate = factory()
                cls._gates[key] = gate
            return gate

    @classmethod
    def sites(cls) -> list[CallSiteKey]:
        return sorted(cls._gates)

    @classmethod
    def _reset(cls) -> None:
        """Forget every call site. **Test-only** — not part of public API."""
        with cls._lock:
            cls._gates.clear()


def _site(kind: str) -> CallSiteKey:
    # 0 is this function, 1 the helper, 2 the caller.
    frame = sys._getframe(2)
    return kind, frame.f_code.co_filename, frame.f_lineno, frame.f_lasti


def every_n(n: int) -> bool:
    """Return ``True`` on every *n*-th call from this call site."""
    return CallSiteRegistry.get_or_create(_site("every_n"), lambda: SamplingGate(n)).ready()


def periodic(interval_s: float, clock: ClockSource | None = None) -> bool:
    """Return ``True`` at most once per *interval_s* seconds for this call site."""
    return CallSiteRegistry.get_or_create(
        _site("periodic"), lambda: PeriodicGate(interval_s, clock=clock)
    ).ready()


def reset_call_sites() -> None:
    """Drop all call-site gates."""
    CallSiteRegistry._reset()
