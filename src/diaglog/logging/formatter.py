"""stdlib ``logging.Formatter`` producing diaglog record lines."""

from __future__ import annotations

import logging

from diaglog.logging.types import LogLevel, LogRecord


class RecordFormatter(logging.Formatter):
    """Render stdlib records as ``<tag> <timestamp> <host> <file>:<line>] <msg>``.

    Message arguments are substituted here, inside the handler, so calls
    filtered out before reaching the handler never format anything.

    Args:
        hostname: Machine name stamped on every record.
    """

    def __init__(self, hostname: str) -> None:
        super().__init__()
        self._hostname = hostname

    def to_record(self, record: logging.LogRecord) -> LogRecord:
        return LogRecord(
            level=LogLevel.from_logging(record.levelno),
            timestamp=record.created,
            hostname=self._hostname,
            filename=record.filename,
            lineno=record.lineno,
            message=record.getMessage(),
        )

    def format(self, record: logging.LogRecord) -> str:
        return self.to_record(record).render()
