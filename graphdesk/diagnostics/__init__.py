"""Diagnostics and debugging utilities for graphdesk."""

from .core import (
    assert_shortest_paths,
    assert_spanning_forest,
    assert_topological_order,
    assert_valid_traversal,
    is_topological_order,
    path_weight,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "path_weight",
    "assert_valid_traversal",
    "assert_shortest_paths",
    "is_topological_order",
    "assert_topological_order",
    "assert_spanning_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
