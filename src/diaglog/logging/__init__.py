"""Leveled logging subsystem for diaglog.

Provides the severity enum, the immutable rendered record, the stdlib
formatter that produces record lines, and the level-filtered logger with
its process-wide default instance.
"""

from diaglog.logging.formatter import RecordFormatter
from diaglog.logging.logger import (
    DiagLogger,
    check,
    debug,
    describe_error,
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
from diaglog.logging.types import LogLevel, LogRecord

__all__ = [
    "DiagLogger",
    "LogLevel",
    "LogRecord",
    "RecordFormatter",
    "check",
    "debug",
    "describe_error",
    "error",
    "fatal",
    "get_log_level",
    "get_logger",
    "info",
    "log",
    "pcheck",
    "perror",
    "set_log_level",
    "set_logger",
    "warn",
    "warning",
]
