"""``SIGTRAP``-based breakpoint trap.

The trap signal is ignored for the duration of the raise and the previous
disposition restored afterwards, so the process survives when no debugger
is attached. An attached native debugger (gdb, lldb) still stops on it.
"""

from __future__ import annotations

import signal
import threading

from diaglog.trap.base import BreakpointTrap


class SignalTrap(BreakpointTrap):
    """Raise ``SIGTRAP`` under a temporary ``SIG_IGN`` handler.

    Unavailable on platforms without ``SIGTRAP`` and outside the main
    thread, where Python cannot change signal handlers.
    """

    @property
    def name(self) -> str:
        return "signal"

    @property
    def is_available(self) -> bool:
        return hasattr(signal, "SIGTRAP") and threading.current_thread() is threading.main_thread()

    def _fire(self) -> None:
        previous = signal.signal(signal.SIGTRAP, signal.SIG_IGN)
        try:
            signal.raise_signal(signal.SIGTRAP)
        finally:
            signal.signal(signal.SIGTRAP, previous)
