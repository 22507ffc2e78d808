"""Configuration system for diaglog.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (DIAG_*) -> field defaults.

No configuration file is read. The current log level is also settable
programmatically at any time through ``diaglog.set_log_level()``; the
``log_level`` field only seeds the process-wide default logger.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from diaglog.exceptions import ConfigValidationError

_STREAMS: frozenset[str] = frozenset({"stderr", "stdout"})


class DiagConfig(BaseSettings):
    """Configuration for diaglog.

    Resolution order: init kwargs -> env vars (DIAG_*) -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="DIAG_",
        extra="ignore",
    )

    # --- Logging ---

    log_level: str = Field(
        default="info",
        description="Initial log level: 'debug', 'info', 'warn', 'error', 'fatal'",
    )
    stream: str = Field(
        default="stderr",
        description="Diagnostic output stream: 'stderr' or 'stdout'",
    )
    hostname: str = Field(
        default="",
        description="Hostname written into each record (empty = detect once)",
    )
    logger_name: str = Field(
        default="diaglog",
        description="Name of the stdlib logger carrying emitted records",
    )
    fatal_exit_code: int = Field(
        default=1,
        description="Process exit status after a FATAL record",
    )

    # --- Processor frequency estimation ---

    frequency_calibration_s: float = Field(
        default=0.002,
        description="Length of one calibration window in seconds",
    )
    frequency_calibration_rounds: int = Field(
        default=5,
        description="Number of calibration windows; the median is kept",
    )

    # --- Debugging ---

    breakpoint_trap: str = Field(
        default="signal",
        description="Breakpoint trap backend: 'signal', 'pdb', 'none'",
    )


def validate_config(config: DiagConfig) -> None:
    """Reject configurations the logger and trap layers cannot honour.

    Args:
        config: The configuration to check.

    Raises:
        ConfigValidationError: If any field holds an unusable value.
    """
    # Imported here: the logging and trap packages import this module.
    from diaglog.logging.types import LogLevel
    from diaglog.trap.trigger import trap_names

    try:
        LogLevel.parse(config.log_level)
    except ValueError as exc:
        raise ConfigValidationError(str(exc)) from exc

    if config.stream not in _STREAMS:
        raise ConfigValidationError(
            f"Unknown stream: {config.stream!r} (expected one of {sorted(_STREAMS)})"
        )
    if any(ch.isspace() for ch in config.hostname):
        raise ConfigValidationError(
            f"hostname must not contain whitespace, got {config.hostname!r}"
        )
    if not 1 <= config.fatal_exit_code <= 255:
        raise ConfigValidationError(
            f"fatal_exit_code must be in 1..255, got {config.fatal_exit_code}"
        )
    if config.frequency_calibration_s <= 0:
        raise ConfigValidationError(
            f"frequency_calibration_s must be positive, got {config.frequency_calibration_s}"
        )
    if config.frequency_calibration_rounds <= 0:
        raise ConfigValidationError(
            "frequency_calibration_rounds must be positive, "
            f"got {config.frequency_calibration_rounds}"
        )
    if config.breakpoint_trap not in trap_names():
        available = ", ".join(trap_names())
        raise ConfigValidationError(
            f"Unknown breakpoint trap: {config.breakpoint_trap!r}. Available: {available}"
        )
