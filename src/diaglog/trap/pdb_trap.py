"""Breakpoint trap entering the interpreter's debugger hook."""

from __future__ import annotations

import sys

from diaglog.trap.base import BreakpointTrap


class PdbTrap(BreakpointTrap):
    """Call ``sys.breakpointhook()``, honouring ``PYTHONBREAKPOINT``.

    With ``PYTHONBREAKPOINT=0`` the hook does nothing, which makes the trap
    safe to leave in code that runs unattended.
    """

    @property
    def name(self) -> str:
        return "pdb"

    @property
    def is_available(self) -> bool:
        return True

    def _fire(self) -> None:
        sys.breakpointhook()
