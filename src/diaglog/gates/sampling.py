"""Every-Nth-call gate."""

from __future__ import annotations

from diaglog.exceptions import GateConfigurationError
from diaglog.gates.base import Gate


class SamplingGate(Gate):
    """Fires on calls ``n``, ``2n``, ``3n``, ... counted from the first call.

    After ``m`` calls the gate has fired exactly ``m // n`` times. With
    ``n == 1`` every call fires.

    Args:
        n: Sampling interval; must be a positive integer.

    Raises:
        GateConfigurationError: If *n* is zero, negative or not an integer.
    """

    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int):
            raise GateConfigurationError(f"Sampling interval must be an int, got {n!r}")
        if n <= 0:
            raise GateConfigurationError(f"Sampling interval must be positive, got {n}")
        super().__init__()
        self._n = n
        self._calls = 0

    @property
    def n(self) -> int:
        return self._n

    @property
    def calls(self) -> int:
        """Number of calls seen so far."""
        return self._calls

    def _decide(self) -> bool:
        self._calls += 1
        return self._calls % self._n == 0
