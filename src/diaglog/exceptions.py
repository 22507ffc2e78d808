"""Exception hierarchy for diaglog.

All exceptions derive from DiagLogError. Note that log calls themselves
never raise: records below FATAL are written or dropped, FATAL terminates
the process. These exceptions cover misconfiguration only.
"""


class DiagLogError(Exception):
    """Base exception for all diaglog errors."""


class ConfigValidationError(DiagLogError):
    """Configuration field validation failed.

    Raised when a DiagConfig names an unknown log level, output stream or
    breakpoint trap, or carries non-positive calibration settings.
    """


class GateConfigurationError(DiagLogError):
    """A sampling or periodic gate was built with an unusable interval.

    Raised at construction time for zero, negative or non-numeric
    intervals, instead of misbehaving on first use.
    """
