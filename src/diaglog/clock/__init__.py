"""Clock subsystem for diaglog.

Re-exports the ABC, the built-in clocks, frequency estimation and the
time conversion helpers::

    from diaglog.clock import ClockSource, SystemClock, ManualClock
    from diaglog.clock import processor_frequency, to_timeval
"""

from diaglog.clock.base import ClockSource
from diaglog.clock.convert import Timespec, Timeval, to_timespec, to_timeval
from diaglog.clock.frequency import estimate_frequency, processor_frequency
from diaglog.clock.manual import ManualClock
from diaglog.clock.system import SystemClock, get_default_clock, now, sleep

__all__ = [
    "ClockSource",
    "ManualClock",
    "SystemClock",
    "Timespec",
    "Timeval",
    "estimate_frequency",
    "get_default_clock",
    "now",
    "processor_frequency",
    "sleep",
    "to_timespec",
    "to_timeval",
]
