"""
Utility functions for graph algorithms.

Provides helpers for weight resolution, vertex indexing, path
reconstruction and a dense matrix view of an edge list.
"""

from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

import numpy as np

from .core import Edge, coerce_edges, endpoint_ids, vertex_ids

DEFAULT_WEIGHT = 1


def edge_weight(edge: Edge, weighted: bool = True) -> float:
    """
    Resolve the effective weight of an edge.

    Missing weights, and every weight of an unweighted graph, count as 1.

    Args:
        edge: Edge to read.
        weighted: Whether the graph is weighted.

    Returns:
        Effective numeric weight.
    """
    if not weighted or edge.weight is None:
        return DEFAULT_WEIGHT
    return edge.weight


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Map nodes to indices 0..n-1, keeping first-appearance order.

    Args:
        nodes: Iterable of hashable nodes (duplicates are ignored).

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'c', 'b'])
        >>> node_to_idx
        {'c': 0, 'a': 1, 'b': 2}
    """
    ordered = list(dict.fromkeys(nodes))
    return {node: idx for idx, node in enumerate(ordered)}, ordered


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]], target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct path from source to target using parent map.

    ``parent[node]`` is the previous node on the shortest path, or None for
    the source itself.

    Args:
        parent: Dictionary mapping node -> parent node (or None).
        target: Target node to reconstruct path to.

    Returns:
        List of nodes from source to target (inclusive), or None if target
        is not in the parent map.

    Example:
        >>> parent = {'A': None, 'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parent, 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parent, 'D') is None
        True
    """
    if target not in parent:
        return None

    path = []
    current = target
    visited = set()
    while current is not None:
        if current in visited:
            # A well-formed parent map never loops
            return None
        visited.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path


def adjacency_matrix(
    edges: Iterable[Any],
    vertices: Iterable[Any],
    directed: bool = False,
    weighted: bool = True,
) -> np.ndarray:
    """
    Dense weight matrix of the graph in vertex order.

    ``W[i, j]`` holds the summed weight of all edges i -> j; undirected
    graphs are mirrored. Endpoints missing from ``vertices`` are appended
    after them in first-appearance order.

    Args:
        edges: Edge list in any supported representation.
        vertices: Vertex list defining row/column order.
        directed: Whether edges are one-way.
        weighted: Whether to use edge weights (otherwise 1 per edge).

    Returns:
        (n, n) float numpy array.

    Example:
        >>> W = adjacency_matrix([("A", "B", 2)], ["A", "B"])
        >>> W.tolist()
        [[0.0, 2.0], [2.0, 0.0]]
    """
    edge_list = coerce_edges(edges)
    node_to_idx, _ = node_index_map(vertex_ids(vertices) + endpoint_ids(edge_list))
    n = len(node_to_idx)

    W = np.zeros((n, n))
    for edge in edge_list:
        i, j = node_to_idx[edge.source], node_to_idx[edge.target]
        w = edge_weight(edge, weighted)
        W[i, j] += w
        if not directed and i != j:
            W[j, i] += w

    return W
