"""Abstract base class for debugger breakpoint traps.

Traps are debug-only tooling: triggering one must be harmless when no
debugger is attached, and an unavailable trap is skipped rather than
treated as an error.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger("diaglog")


class BreakpointTrap(ABC):
    """Abstract base for breakpoint traps.

    Subclasses implement ``name``, ``is_available`` and ``_fire()``;
    :meth:`trigger` checks availability before firing.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name the trap is selected by (e.g., ``'signal'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the trap can fire in the current process and thread."""

    @abstractmethod
    def _fire(self) -> None:
        """Raise the trap. Only called when :attr:`is_available` is true."""

    def trigger(self) -> bool:
        """Fire the trap if possible.

        Returns:
            ``True`` if the trap fired, ``False`` if it was unavailable.
        """
        if not self.is_available:
            logger.debug("Breakpoint trap %r unavailable, skipping", self.name)
            return False
        self._fire()
        return True
