"""No-op breakpoint trap."""

from __future__ import annotations

from diaglog.trap.base import BreakpointTrap


class NullTrap(BreakpointTrap):
    """Disables breakpoint traps; :meth:`trigger` always reports ``False``."""

    @property
    def name(self) -> str:
        return "none"

    @property
    def is_available(self) -> bool:
        return False

    def _fire(self) -> None:
        """Never called."""
