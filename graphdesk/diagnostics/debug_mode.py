"""
Process-wide debug switch.

When on, the dispatcher re-checks each engine result with the assertions in
:mod:`graphdesk.diagnostics.core` before returning it. The initial state comes
from the ``GRAPHDESK_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

DEBUG_ENV_VAR = "GRAPHDESK_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


_debug_enabled: bool = _env_flag(os.getenv(DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """Return True when dispatcher results are being verified."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn result verification on or off for the whole process.

    Parameters
    ----------
    enabled:
        New state. Overrides whatever ``GRAPHDESK_DEBUG`` said at import.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Switch debug mode for the duration of a ``with`` block.

    The previous state is restored on exit, including when the block raises.

    Example
    -------
    >>> with debug_context():
    ...     result = run_algorithm(snapshot, "Dijkstra")
    """
    previous = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
