"""Configuration for the algorithm dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..diagnostics.debug_mode import is_debug_enabled


@dataclass(frozen=True)
class DispatchConfig:
    """
    Configuration for :class:`~graphdesk.dispatch.dispatcher.AlgorithmDispatcher`.

    Args:
        mst_name_suffix: Appended to the graph name to title the graph that
            an MST run requests. Defaults to "_MST".
        path_separator: Separator between vertices when results are
            rendered as text. Defaults to " → ".
        verify_results: Re-check successful results with the diagnostics
            module. None (the default) follows debug mode.
        history_limit: Maximum number of entries kept by a dispatcher-owned
            result history. None keeps everything.
    """

    mst_name_suffix: str = "_MST"
    path_separator: str = " → "
    verify_results: Optional[bool] = None
    history_limit: Optional[int] = None

    def __post_init__(self):
        if self.history_limit is not None and self.history_limit <= 0:
            raise ValueError("history_limit must be positive.")

    @property
    def should_verify(self) -> bool:
        if self.verify_results is None:
            return is_debug_enabled()
        return self.verify_results
