"""Selecting and firing a breakpoint trap by name."""

from __future__ import annotations

from typing import TYPE_CHECKING

from diaglog.trap.null import NullTrap
from diaglog.trap.pdb_trap import PdbTrap
from diaglog.trap.signal_trap import SignalTrap

if TYPE_CHECKING:
    from diaglog.config import DiagConfig
    from diaglog.trap.base import BreakpointTrap

_TRAPS: dict[str, type[BreakpointTrap]] = {
    "signal": SignalTrap,
    "pdb": PdbTrap,
    "none": NullTrap,
}


def trap_names() -> list[str]:
    """Return the names accepted by :func:`build_trap`, sorted."""
    return sorted(_TRAPS)


def build_trap(kind: str | None = None, config: DiagConfig | None = None) -> BreakpointTrap:
    """Instantiate a trap by name.

    Args:
        kind: ``'signal'``, ``'pdb'`` or ``'none'``. Defaults to
            ``config.breakpoint_trap``.
        config: Defaults to ``DiagConfig()``; only read when *kind* is ``None``.

    Raises:
        KeyError: If *kind* names no trap.
    """
    if kind is None:
        if config is None:
            from diaglog.config import DiagConfig

            config = DiagConfig()
        kind = config.breakpoint_trap
    try:
        trap_cls = _TRAPS[kind]
    except KeyError:
        raise KeyError(
            f"Unknown breakpoint trap: {kind!r}. Available: {', '.join(trap_names())}"
        ) from None
    return trap_cls()


def breakpoint_trap(kind: str | None = None, config: DiagConfig | None = None) -> bool:
    """Trigger a debugger-visible trap; harmless without a debugger.

    Returns:
        ``True`` if a trap was raised, ``False`` if the chosen trap is
        unavailable here.
    """
    return build_trap(kind, config).trigger()
