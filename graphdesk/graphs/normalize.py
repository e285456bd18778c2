"""
Graph model normalization.

Resolves raw edge lists to plain identifier pairs, derives the structural
edge flags (self-loop, bidirectional pair) and builds the insertion-ordered
adjacency lists shared by every engine.
"""

from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

from ..logging import get_logger
from .core import ClassifiedEdge, coerce_edges, vertex_ids
from .utils import edge_weight

logger = get_logger(__name__)

Adjacency = Dict[Hashable, List[Tuple[Hashable, float]]]


def classify_edges(edges: Iterable[Any]) -> List[ClassifiedEdge]:
    """
    Attach derived self-loop and bidirectional flags to every edge.

    An edge is bidirectional when an edge with source and target swapped is
    also present. Self-loops are never bidirectional. The input is not
    modified; flags are recomputed from scratch on every call.

    Pairs are matched on ``"source->target"`` string keys, so ids that
    contain ``->``, or an int id next to its string form (``1`` and
    ``"1"``), can produce false bidirectional matches.

    Args:
        edges: Edge list in any supported representation.

    Returns:
        One ``ClassifiedEdge`` per input edge, in input order.

    Example:
        >>> flags = classify_edges([("A", "B"), ("B", "A"), ("C", "C")])
        >>> [(c.is_self_loop, c.is_bidirectional) for c in flags]
        [(False, True), (False, True), (True, False)]
    """
    edge_list = coerce_edges(edges)
    keys = {e.key for e in edge_list}

    classified = []
    for e in edge_list:
        self_loop = e.source == e.target
        classified.append(
            ClassifiedEdge(
                edge=e,
                is_self_loop=self_loop,
                is_bidirectional=not self_loop and e.reversed_key in keys,
            )
        )
    return classified


def build_adjacency(
    edges: Iterable[Any],
    directed: bool,
    vertices: Optional[Iterable[Any]] = None,
    weighted: bool = True,
) -> Adjacency:
    """
    Build vertex -> [(neighbor, weight)] adjacency lists.

    Neighbor lists follow edge insertion order. Directed graphs only record
    source -> target; undirected graphs record both directions (a self-loop
    once). Parallel edges each contribute their own entry.

    Args:
        edges: Edge list in any supported representation.
        directed: Whether edges are one-way.
        vertices: Optional vertex list; listed vertices get a key even when
            isolated, and key order starts with them.
        weighted: Whether to use edge weights (otherwise 1 per edge).

    Returns:
        Insertion-ordered adjacency dictionary.
    """
    adj: Adjacency = {}
    if vertices is not None:
        for vid in vertex_ids(vertices):
            adj[vid] = []

    edge_list = coerce_edges(edges)
    for e in edge_list:
        w = edge_weight(e, weighted)
        adj.setdefault(e.source, []).append((e.target, w))
        if directed or e.source == e.target:
            adj.setdefault(e.target, [])
        else:
            adj.setdefault(e.target, []).append((e.source, w))

    logger.debug(
        "Built %s adjacency: %d vertices, %d edges",
        "directed" if directed else "undirected",
        len(adj),
        len(edge_list),
    )
    return adj
