"""Plain-text rendering of dispatcher results for the result board."""

from __future__ import annotations

from typing import Any, Iterable

from .results import (
    AlgorithmKind,
    AlgorithmResult,
    ErrorKind,
    ErrorResult,
    ShortestPathResult,
    SpanningTreeResult,
    TopologicalSortResult,
    TraversalResult,
)

_TRAVERSAL_TITLES = {
    AlgorithmKind.BFS: "BFS Traversal",
    AlgorithmKind.DFS: "DFS Traversal",
}


def _fmt_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _join(vertices: Iterable[Any], separator: str) -> str:
    return separator.join(str(v) for v in vertices)


def format_result(result: AlgorithmResult, separator: str = " → ") -> str:
    """
    Render a result as the multi-line text shown on the result board.

    Args:
        result: Any dispatcher result.
        separator: Placed between consecutive vertices of orders and paths.

    Returns:
        Human-readable text; errors are prefixed with "Error: ".

    Example:
        >>> from datetime import datetime
        >>> r = TraversalResult(AlgorithmKind.BFS, datetime.now(), start="A", order=("A", "B"))
        >>> print(format_result(r))
        BFS Traversal (Start: A):
        A → B
    """
    if isinstance(result, ErrorResult):
        if result.error is ErrorKind.EMPTY_GRAPH or result.error is ErrorKind.UNKNOWN_ALGORITHM:
            return result.message
        return f"Error: {result.message}"

    if isinstance(result, TraversalResult):
        title = _TRAVERSAL_TITLES[result.kind]
        return f"{title} (Start: {result.start}):\n{_join(result.order, separator)}"

    if isinstance(result, ShortestPathResult):
        lines = [f"Shortest Paths (Start: {result.start}):", "Node\tDist\tPath"]
        for entry in result.entries:
            lines.append(f"{entry.vertex}\t{_fmt_number(entry.distance)}\t{_join(entry.path, separator)}")
        return "\n".join(lines)

    if isinstance(result, SpanningTreeResult):
        lines = []
        if result.warning:
            lines.append(f"Note: {result.warning}")
        lines.append(f"Minimum Spanning Tree (Total Weight: {_fmt_number(result.total_weight)}):")
        for e in result.edges:
            lines.append(f"{e.source} — {e.target} (Weight: {_fmt_number(e.weight)})")
        return "\n".join(lines)

    if isinstance(result, TopologicalSortResult):
        return f"Topological Sort:\n{_join(result.order, separator)}"

    raise TypeError(f"Cannot format result of type {type(result).__name__}")
