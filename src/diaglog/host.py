"""Process identity helpers."""

from __future__ import annotations

import functools
import socket


@functools.lru_cache(maxsize=1)
def _detected_hostname() -> str:
    return socket.gethostname() or "localhost"


def hostname(override: str = "") -> str:
    """Return the machine's network name.

    The system is queried once per process and the result cached. A
    non-empty *override* (``DiagConfig.hostname``) wins without a lookup.
    """
    if override:
        return override
    return _detected_hostname()
