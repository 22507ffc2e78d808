"""Data types for the leveled logging subsystem."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

from diaglog.clock.convert import to_timeval


class LogLevel(IntEnum):
    """Severity levels, totally ordered from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    @property
    def tag(self) -> str:
        """Single-letter tag written at the start of each record."""
        return self.name[0]

    def to_logging(self) -> int:
        """Return the matching stdlib ``logging`` level number."""
        return _TO_LOGGING[self]

    @classmethod
    def from_logging(cls, levelno: int) -> LogLevel:
        """Map a stdlib level number onto the nearest level at or below it.

        Custom stdlib levels between two named ones round down, so
        ``logging.WARNING + 5`` becomes ``WARN``. Anything below
        ``logging.DEBUG`` is ``DEBUG``.
        """
        result = cls.DEBUG
        for level in cls:
            if levelno >= _TO_LOGGING[level]:
                result = level
        return result

    @classmethod
    def from_tag(cls, tag: str) -> LogLevel:
        for level in cls:
            if level.tag == tag:
                return level
        raise ValueError(f"Unknown level tag: {tag!r}")

    @classmethod
    def parse(cls, value: str | int | LogLevel) -> LogLevel:
        """Coerce a level name, number or member into a ``LogLevel``.

        Names are case-insensitive and accept the stdlib spellings
        ``warning`` and ``critical``.

        Raises:
            ValueError: If *value* names no level.
        """
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, int):
            return cls(value)
        key = value.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        choices = ", ".join(level.name.lower() for level in cls)
        raise ValueError(f"Unknown log level: {value!r}. Expected one of: {choices}")


_TO_LOGGING: dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
}

_ALIASES: dict[str, LogLevel] = {
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "warn": LogLevel.WARN,
    "warning": LogLevel.WARN,
    "error": LogLevel.ERROR,
    "fatal": LogLevel.FATAL,
    "critical": LogLevel.FATAL,
}

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_LINE_RE = re.compile(
    r"^(?P<tag>[DIWEF]) "
    r"(?P<date>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\.(?P<usec>\d{6}) "
    r"(?P<host>\S+) "
    r"(?P<file>.+?):(?P<line>\d+)\] "
    r"(?P<message>.*)$"
)


def format_timestamp(t: float) -> str:
    """Render epoch seconds as local time with microseconds."""
    tv = to_timeval(t)
    return f"{datetime.fromtimestamp(tv.sec).strftime(_TIMESTAMP_FORMAT)}.{tv.usec:06d}"


@dataclass(frozen=True, slots=True)
class LogRecord:
    """Immutable rendering of one emitted log call.

    Attributes:
        level: Severity of the call.
        timestamp: Wall-clock time of the call (seconds since epoch).
        hostname: Machine name of the emitting process.
        filename: Base name of the source file of the call site.
        lineno: Line number of the call site.
        message: Message with its arguments already substituted.
    """

    level: LogLevel
    timestamp: float
    hostname: str
    filename: str
    lineno: int
    message: str

    def render(self) -> str:
        """Return the single output line for this record (no newline)."""
        message = self.message.replace("\n", "\\n")
        return (
            f"{self.level.tag} {format_timestamp(self.timestamp)} {self.hostname} "
            f"{self.filename}:{self.lineno}] {message}"
        )

    @classmethod
    def parse(cls, line: str) -> LogRecord:
        """Recover a record from a line produced by :meth:`render`.

        The timestamp is read back as local time with microsecond
        precision. Escaped newlines in the message are left escaped.

        Raises:
            ValueError: If *line* is not a rendered record.
        """
        match = _LINE_RE.match(line.rstrip("\n"))
        if match is None:
            raise ValueError(f"Not a diaglog record: {line!r}")
        base = datetime.strptime(match["date"], _TIMESTAMP_FORMAT).timestamp()
        return cls(
            level=LogLevel.from_tag(match["tag"]),
            timestamp=base + int(match["usec"]) / 1_000_000,
            hostname=match["host"],
            filename=match["file"],
            lineno=int(match["line"]),
            message=match["message"],
        )
