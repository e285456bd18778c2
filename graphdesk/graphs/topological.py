"""
Topological ordering: Kahn's algorithm.

References:
    - Kahn, A. B. "Topological sorting of large networks" (1962).
"""

from collections import deque
from typing import Any, Dict, Hashable, Iterable, List, Sequence

from ..logging import get_logger
from .core import coerce_edges, endpoint_ids, vertex_ids

logger = get_logger(__name__)


class CycleDetectedError(ValueError):
    """
    Raised when a directed graph has no topological order.

    Attributes:
        remaining: Vertices that could not be ordered, in vertex order.
            Every cycle of the graph runs through them.
    """

    def __init__(self, remaining: Sequence[Hashable]):
        self.remaining = list(remaining)
        super().__init__(
            f"Cycle detected: graph is not a DAG ({len(self.remaining)} vertices left unordered)"
        )


def topological_sort(edges: Iterable[Any], vertices: Iterable[Any]) -> List[Hashable]:
    """
    Linear order of the vertices consistent with every edge direction.

    Edges are read as directed. Isolated vertices are included. Among
    vertices that become ready at the same time, vertex order wins.

    Args:
        edges: Edge list in any supported representation.
        vertices: Vertex list.

    Returns:
        Every vertex exactly once, each edge source before its target.

    Raises:
        CycleDetectedError: If the graph has a cycle (self-loops included).

    Complexity: O(V + E).

    Example:
        >>> topological_sort([("A", "C"), ("B", "C")], ["C", "B", "A"])
        ['B', 'A', 'C']
    """
    edge_list = coerce_edges(edges)
    nodes = vertex_ids(vertices)
    known = set(nodes)
    nodes += [v for v in endpoint_ids(edge_list) if v not in known]

    successors: Dict[Hashable, List[Hashable]] = {node: [] for node in nodes}
    in_degree: Dict[Hashable, int] = {node: 0 for node in nodes}
    for e in edge_list:
        successors[e.source].append(e.target)
        in_degree[e.target] += 1

    ready = deque(node for node in nodes if in_degree[node] == 0)
    order: List[Hashable] = []

    while ready:
        u = ready.popleft()
        order.append(u)
        for v in successors[u]:
            in_degree[v] -= 1
            if in_degree[v] == 0:
                ready.append(v)

    if len(order) < len(nodes):
        remaining = [node for node in nodes if in_degree[node] > 0]
        logger.debug("Topological sort stopped with %d vertices on cycles", len(remaining))
        raise CycleDetectedError(remaining)

    return order
