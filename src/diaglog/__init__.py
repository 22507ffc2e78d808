"""diaglog: process-wide diagnostics for Python applications.

Leveled, call-site-tagged log records written synchronously to one stream;
scoped timers accumulating wall-clock durations; gates that let a block run
every N calls or at most once per interval; and process identity helpers
(timestamp, hostname, debugger breakpoint trap).

Example::

    import diaglog

    diaglog.set_log_level("warn")
    diaglog.warn("queue depth %d over limit", depth)

    gate = diaglog.PeriodicGate(5.0)
    if gate.ready():
        diaglog.info("%d calls since last report", gate.last_suppressed)
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("diaglog")
except PackageNotFoundError:
    __version__ = "0.0.0"

from diaglog.clock import ClockSource, ManualClock, SystemClock, now, processor_frequency, sleep
from diaglog.config import DiagConfig, validate_config
from diaglog.exceptions import ConfigValidationError, DiagLogError, GateConfigurationError
from diaglog.gates import PeriodicGate, SamplingGate, every_n, periodic
from diaglog.host import hostname
from diaglog.logging import (
    DiagLogger,
    LogLevel,
    LogRecord,
    check,
    debug,
    error,
    fatal,
    get_log_level,
    get_logger,
    info,
    log,
    pcheck,
    perror,
    set_log_level,
    set_logger,
    warn,
    warning,
)
from diaglog.timer import DurationAccumulator, TimerBlock, measure
from diaglog.trap import breakpoint_trap

__all__ = [
    "ClockSource",
    "ConfigValidationError",
    "DiagConfig",
    "DiagLogError",
    "DiagLogger",
    "DurationAccumulator",
    "GateConfigurationError",
    "LogLevel",
    "LogRecord",
    "ManualClock",
    "PeriodicGate",
    "SamplingGate",
    "SystemClock",
    "TimerBlock",
    "__version__",
    "breakpoint_trap",
    "check",
    "debug",
    "error",
    "every_n",
    "fatal",
    "get_log_level",
    "get_logger",
    "hostname",
    "info",
    "log",
    "measure",
    "now",
    "pcheck",
    "periodic",
    "perror",
    "processor_frequency",
    "set_log_level",
    "set_logger",
    "sleep",
    "validate_config",
    "warn",
    "warning",
]
