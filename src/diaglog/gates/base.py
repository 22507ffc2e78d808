"""Abstract base class for execution gates.

A gate is a stateful yes/no decision taken once per call: "should the
wrapped block run this time?". Subclasses implement ``_decide()``; the base
class serializes decisions with a lock, counts fires, and provides the
``run()`` and ``guard()`` wrappers.
"""

from __future__ import annotations

import functools
import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


class Gate(ABC):
    """Abstract base for sampling and periodic gates.

    State persists for the lifetime of the gate object. Construct one gate
    per call site and reuse it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._fires = 0

    @abstractmethod
    def _decide(self) -> bool:
        """Update per-call state and return whether this call fires.

        Called with the gate's lock held.
        """

    def ready(self) -> bool:
        """Record one call and return ``True`` if the wrapped block should run."""
        with self._lock:
            fired = self._decide()
            if fired:
                self._fires += 1
            return fired

    @property
    def fires(self) -> int:
        """Total number of calls that fired."""
        return self._fires

    def run(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T | None:
        """Call ``fn(*args, **kwargs)`` if the gate fires, else return ``None``."""
        if self.ready():
            return fn(*args, **kwargs)
        return None

    def guard(self, fn: Callable[..., T]) -> Callable[..., T | None]:
        """Decorate *fn* so that each call passes through this gate.

        Example::

            @SamplingGate(100).guard
            def report(batch):
                ...
        """

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> T | None:
            return self.run(fn, *args, **kwargs)

        return wrapper
