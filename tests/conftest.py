"""Shared pytest fixtures for diaglog tests.

Provides deterministic clocks, in-memory output streams and logger
factories, and resets the process-wide state (default logger, call-site
gates, frequency cache) around every test.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator

import pytest

from diaglog.clock import frequency
from diaglog.clock.manual import ManualClock
from diaglog.config import DiagConfig
from diaglog.gates.callsite import reset_call_sites
from diaglog.logging.logger import DiagLogger, set_logger


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep DIAG_* variables and process-wide singletons out of each test."""
    for var in ("DIAG_LOG_LEVEL", "DIAG_STREAM", "DIAG_HOSTNAME", "DIAG_BREAKPOINT_TRAP"):
        monkeypatch.delenv(var, raising=False)
    previous = set_logger(None)
    reset_call_sites()
    frequency._reset()
    yield
    set_logger(previous)
    reset_call_sites()
    frequency._reset()


@pytest.fixture
def manual_clock() -> ManualClock:
    """Return a ManualClock ticking at one million cycles per second."""
    return ManualClock(cycles_per_second=1_000_000)


@pytest.fixture
def stream() -> io.StringIO:
    """Return an empty in-memory output stream."""
    return io.StringIO()


@pytest.fixture
def exits() -> list[int]:
    """Collects exit codes passed to a logger's exit function."""
    return []


@pytest.fixture
def make_logger(stream: io.StringIO, exits: list[int]) -> Callable[..., DiagLogger]:
    """Return a factory for loggers writing to ``stream`` and recording exits.

    Keyword arguments are forwarded to DiagConfig; the hostname defaults to
    ``'testhost'`` and the level to ``'debug'``.
    """

    def factory(**overrides: object) -> DiagLogger:
        fields: dict[str, object] = {"hostname": "testhost", "log_level": "debug"}
        fields.update(overrides)
        config = DiagConfig(**fields)  # type: ignore[arg-type]
        return DiagLogger(config, stream=stream, exit_func=exits.append)

    return factory


@pytest.fixture
def output_lines(stream: io.StringIO) -> Callable[[], list[str]]:
    """Return a callable listing the non-empty lines written to ``stream`` so far."""

    def read() -> list[str]:
        return [line for line in stream.getvalue().splitlines() if line]

    return read
