"""Level-filtered logger with call-site tagging and fatal termination.

Records travel through the standard ``logging`` module: each ``DiagLogger``
owns a private ``logging.Logger`` with a single ``StreamHandler`` whose
lock serializes writes, one record at a time. Filtering against the current
level happens before a record is built, so filtered calls cost a comparison
and never format their arguments.

A FATAL record is written, the handler is flushed, and the process exits
with a non-zero status. That call never returns.

Level changes are lock-guarded; level reads are plain attribute reads, so a
concurrent reader sees either the old or the new level, never anything else.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from typing import TYPE_CHECKING, Any, NoReturn

from diaglog.config import DiagConfig, validate_config
from diaglog.host import hostname
from diaglog.logging.formatter import RecordFormatter
from diaglog.logging.types import LogLevel

if TYPE_CHECKING:
    from collections.abc import Callable

_SYSTEM_ERROR_FORMAT = "%s :: (System error: %s)"


def describe_error(error: BaseException | int | None = None) -> str:
    """Return a short description of an OS-level error.

    Args:
        error: An errno number, an exception, or ``None`` for the exception
            currently being handled.

    Returns:
        ``os.strerror()`` text for errno numbers and ``OSError``s carrying
        one, the exception's message otherwise, or ``'no error'`` when
        there is nothing to describe.
    """
    if isinstance(error, int):
        return os.strerror(error)
    if error is None:
        error = sys.exc_info()[1]
    if error is None:
        return "no error"
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error) or type(error).__name__


def _render(msg: str, args: tuple[Any, ...]) -> str:
    # A bad format must not stop the record (or a failed check) from being written.
    if not args:
        return msg
    try:
        return msg % args
    except (TypeError, ValueError, KeyError):
        return f"{msg!r} % {args!r}"


def _caller(stacklevel: int) -> tuple[str, int]:
    # 0 is this function, 1 is _log_at, 2 the public entry point.
    frame = sys._getframe(stacklevel + 2)
    return frame.f_code.co_filename, frame.f_lineno


class DiagLogger:
    """Leveled logger writing one line per record to a fixed stream.

    Args:
        config: Source of the initial level, stream, hostname and exit
            status. Defaults to ``DiagConfig()``.
        stream: Explicit output stream, overriding ``config.stream``.
        exit_func: Called with the exit status after a FATAL record.
            Defaults to ``os._exit``.

    Raises:
        ConfigValidationError: If *config* is not usable.
    """

    def __init__(
        self,
        config: DiagConfig | None = None,
        stream: Any = None,
        exit_func: Callable[[int], object] | None = None,
    ) -> None:
        self._config = config if config is not None else DiagConfig()
        validate_config(self._config)

        self._level = LogLevel.parse(self._config.log_level)
        self._level_lock = threading.Lock()
        self._exit = exit_func if exit_func is not None else os._exit
        self._hostname = hostname(self._config.hostname)

        if stream is None:
            stream = sys.stdout if self._config.stream == "stdout" else sys.stderr
        self._handler = logging.StreamHandler(stream)
        self._handler.setFormatter(RecordFormatter(self._hostname))

        # Unmanaged logger: not registered with logging.getLogger(), so
        # every DiagLogger keeps exactly one handler.
        self._logger = logging.Logger(self._config.logger_name, logging.DEBUG)
        self._logger.propagate = False
        self._logger.addHandler(self._handler)

    @property
    def level(self) -> LogLevel:
        """The current level; calls below it are dropped."""
        return self._level

    def set_level(self, level: str | int | LogLevel) -> None:
        parsed = LogLevel.parse(level)
        with self._level_lock:
            self._level = parsed

    @property
    def hostname(self) -> str:
        return self._hostname

    def enabled_for(self, level: str | int | LogLevel) -> bool:
        """Whether a call at *level* would be written."""
        return LogLevel.parse(level) >= self._level

    # --- Dispatch ---

    def emit(
        self,
        level: str | int | LogLevel,
        filename: str,
        lineno: int,
        msg: str,
        *args: Any,
    ) -> None:
        """Write ``msg % args`` at *level*, attributed to ``filename:lineno``.

        Does nothing when *level* is below the current level. A FATAL
        record terminates the process after it is written.
        """
        level = LogLevel.parse(level)
        if level < self._level:
            return

        record = self._logger.makeRecord(
            self._logger.name,
            level.to_logging(),
            filename,
            lineno,
            msg,
            args,
            None,
        )
        self._logger.handle(record)

        if level is LogLevel.FATAL:
            self._terminate()

    def _log_at(self, level: LogLevel, msg: str, args: tuple[Any, ...], stacklevel: int) -> None:
        if level < self._level:
            return
        filename, lineno = _caller(stacklevel)
        self.emit(level, filename, lineno, msg, *args)

    def _terminate(self) -> NoReturn:
        self._handler.flush()
        code = self._config.fatal_exit_code
        self._exit(code)
        # Only reached when an injected exit function returns.
        raise SystemExit(code)

    # --- Leveled calls, attributed to the caller ---

    def log(self, level: str | int | LogLevel, msg: str, *args: Any, stacklevel: int = 1) -> None:
        self._log_at(LogLevel.parse(level), msg, args, stacklevel)

    def debug(self, msg: str, *args: Any, stacklevel: int = 1) -> None:
        self._log_at(LogLevel.DEBUG, msg, args, stacklevel)

    def info(self, msg: str, *args: Any, stacklevel: int = 1) -> None:
        self._log_at(LogLevel.INFO, msg, args, stacklevel)

    def warn(self, msg: str, *args: Any, stacklevel: int = 1) -> None:
        self._log_at(LogLevel.WARN, msg, args, stacklevel)

    warning = warn

    def error(self, msg: str, *args: Any, stacklevel: int = 1) -> None:
        self._log_at(LogLevel.ERROR, msg, args, stacklevel)

    def fatal(self, msg: str, *args: Any, stacklevel: int = 1) -> NoReturn:
        """Write a FATAL record and terminate the process."""
        self._log_at(LogLevel.FATAL, msg, args, stacklevel)
        # FATAL is never filtered, so _log_at has already terminated.
        raise AssertionError("unreachable")

    # --- Companion contracts ---

    def perror(
        self,
        msg: str,
        *args: Any,
        error: BaseException | int | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Write a WARN record with the system error description appended.

        Args:
            msg: Format string for the caller's message.
            *args: Arguments substituted into *msg*.
            error: Errno number or exception to describe; defaults to the
                exception currently being handled.
            stacklevel: Extra frames to skip when locating the call site.
        """
        self._log_with_error(LogLevel.WARN, msg, args, error, stacklevel + 1)

    def check(self, condition: object, msg: str, *args: Any, stacklevel: int = 1) -> None:
        """Terminate with a FATAL record when *condition* is false."""
        if not condition:
            self._log_at(LogLevel.FATAL, msg, args, stacklevel)

    def pcheck(
        self,
        condition: object,
        msg: str,
        *args: Any,
        error: BaseException | int | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Like :meth:`check`, with the system error description appended."""
        if not condition:
            self._log_with_error(LogLevel.FATAL, msg, args, error, stacklevel + 1)

    def _log_with_error(
        self,
        level: LogLevel,
        msg: str,
        args: tuple[Any, ...],
        error: BaseException | int | None,
        stacklevel: int,
    ) -> None:
        if level < self._level:
            return
        # Describe the error before formatting can clobber sys.exc_info().
        description = describe_error(error)
        self._log_at(level, _SYSTEM_ERROR_FORMAT, (_render(msg, args), description), stacklevel)


# ---------------------------------------------------------------------------
# Process-wide default logger
# ---------------------------------------------------------------------------

_default: DiagLogger | None = None
_default_lock = threading.Lock()


def get_logger() -> DiagLogger:
    """Return the process-wide logger, building it from ``DiagConfig()`` on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = DiagLogger()
    return _default


def set_logger(new_logger: DiagLogger | None) -> DiagLogger | None:
    """Replace the process-wide logger and return the previous one.

    Passing ``None`` makes the next :func:`get_logger` call build a fresh
    logger from the environment.
    """
    global _default
    with _default_lock:
        previous = _default
        _default = new_logger
    return previous


def get_log_level() -> LogLevel:
    return get_logger().level


def set_log_level(level: str | int | LogLevel) -> None:
    """Set the process-wide current level. Safe to call at any time."""
    get_logger().set_level(level)


def log(level: str | int | LogLevel, msg: str, *args: Any) -> None:
    get_logger()._log_at(LogLevel.parse(level), msg, args, 1)


def debug(msg: str, *args: Any) -> None:
    get_logger()._log_at(LogLevel.DEBUG, msg, args, 1)


def info(msg: str, *args: Any) -> None:
    get_logger()._log_at(LogLevel.INFO, msg, args, 1)


def warn(msg: str, *args: Any) -> None:
    get_logger()._log_at(LogLevel.WARN, msg, args, 1)


warning = warn


def error(msg: str, *args: Any) -> None:
    get_logger()._log_at(LogLevel.ERROR, msg, args, 1)


def fatal(msg: str, *args: Any) -> NoReturn:
    get_logger()._log_at(LogLevel.FATAL, msg, args, 1)
    raise AssertionError("unreachable")


def perror(msg: str, *args: Any, error: BaseException | int | None = None) -> None:
    get_logger()._log_with_error(LogLevel.WARN, msg, args, error, 2)


def check(condition: object, msg: str, *args: Any) -> None:
    if not condition:
        get_logger()._log_at(LogLevel.FATAL, msg, args, 1)


def pcheck(
    condition: object,
    msg: str,
    *args: Any,
    error: BaseException | int | None = None,
) -> None:
    if not condition:
        get_logger()._log_with_error(LogLevel.FATAL, msg, args, error, 2)
