"""
Single-source shortest paths: Dijkstra.

Negative edge weights are not checked for. Results for graphs that contain
them are undefined.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

from ..logging import get_logger
from .core import coerce_edges, endpoint_ids, vertex_ids
from .normalize import build_adjacency
from .utils import node_index_map, reconstruct_path

logger = get_logger(__name__)


@dataclass(frozen=True)
class ShortestPathEntry:
    """
    Shortest-path result for one reachable vertex.

    Attributes:
        vertex: The reached vertex.
        distance: Minimum cumulative weight from the start vertex.
        path: Vertices from the start vertex to ``vertex`` (inclusive).
    """

    vertex: Hashable
    distance: float
    path: Tuple[Hashable, ...]


def dijkstra(
    edges: Iterable[Any],
    start: Hashable,
    vertices: Iterable[Any],
    directed: bool = False,
    weighted: bool = True,
) -> List[ShortestPathEntry]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Args:
        edges: Edge list in any supported representation.
        start: Start vertex.
        vertices: Vertex list; fixes the order of the returned entries and
            breaks ties between equal tentative distances.
        directed: If True, only relax edges source -> target.
        weighted: If False, every edge weighs 1.

    Returns:
        One entry per vertex reachable from ``start`` (``start`` itself
        included with distance 0), in vertex order. Edge endpoints missing
        from ``vertices`` follow in first-appearance order.

    Complexity: O(E log V) using a binary heap.

    Example:
        >>> result = dijkstra([("A", "B", 5)], "A", ["A", "B"])
        >>> [(r.vertex, r.distance, r.path) for r in result]
        [('A', 0, ('A',)), ('B', 5, ('A', 'B'))]
    """
    edge_list = coerce_edges(edges)
    adj = build_adjacency(edge_list, directed, vertices, weighted)
    position, _ = node_index_map(vertex_ids(vertices) + endpoint_ids(edge_list) + [start])

    dist: Dict[Hashable, float] = {node: float("inf") for node in adj}
    parent: Dict[Hashable, Optional[Hashable]] = {start: None}
    dist[start] = 0

    # (distance, order index, node) keeps heap ties deterministic
    pq: List[Tuple[float, int, Hashable]] = [(0, position[start], start)]
    settled: set = set()

    while pq:
        d, _, u = heapq.heappop(pq)

        if u in settled:
            continue
        settled.add(u)

        for v, weight in adj.get(u, ()):
            if v in settled:
                continue

            new_dist = d + weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                heapq.heappush(pq, (new_dist, position[v], v))

    reachable = sorted(settled, key=position.__getitem__)
    logger.debug("Dijkstra from %r settled %d of %d vertices", start, len(reachable), len(position))

    return [
        ShortestPathEntry(vertex=v, distance=dist[v], path=tuple(reconstruct_path(parent, v)))
        for v in reachable
    ]
