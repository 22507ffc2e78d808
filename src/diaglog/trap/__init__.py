"""Debugger breakpoint traps for diaglog.

Three traps are built in (``signal``, ``pdb``, ``none``)::

    from diaglog.trap import breakpoint_trap
    breakpoint_trap()          # configured trap, 'signal' by default
    breakpoint_trap("pdb")
"""

from diaglog.trap.base import BreakpointTrap
from diaglog.trap.null import NullTrap
from diaglog.trap.pdb_trap import PdbTrap
from diaglog.trap.signal_trap import SignalTrap
from diaglog.trap.trigger import breakpoint_trap, build_trap, trap_names

__all__ = [
    "BreakpointTrap",
    "NullTrap",
    "PdbTrap",
    "SignalTrap",
    "breakpoint_trap",
    "build_trap",
    "trap_names",
]
