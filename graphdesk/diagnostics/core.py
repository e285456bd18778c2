"""Consistency checks for algorithm outputs."""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Sequence

from ..graphs.core import coerce_edges, endpoint_ids, vertex_ids
from ..graphs.mst import UnionFind
from ..graphs.normalize import build_adjacency
from ..graphs.shortest import ShortestPathEntry
from ..graphs.traversal import bfs


def path_weight(
    path: Sequence[Hashable],
    edges: Iterable[Any],
    directed: bool = False,
    weighted: bool = True,
) -> float:
    """
    Total weight of a walk, using the lightest edge for every step.

    Parameters
    ----------
    path:
        Vertices of the walk, in order.
    edges:
        Edge list in any supported representation.
    directed:
        Whether edges are one-way.
    weighted:
        If False, every edge weighs 1.

    Returns
    -------
    float
        Sum of step weights (0 for a single-vertex path).

    Raises
    ------
    ValueError
        If some step of the walk has no edge.
    """
    adj = build_adjacency(edges, directed, weighted=weighted)
    total = 0
    for u, v in zip(path, path[1:]):
        weights = [w for n, w in adj.get(u, ()) if n == v]
        if not weights:
            raise ValueError(f"No edge from {u!r} to {v!r} on path {list(path)!r}")
        total += min(weights)
    return total


def assert_valid_traversal(
    order: Sequence[Hashable],
    edges: Iterable[Any],
    start: Hashable,
    directed: bool = False,
) -> None:
    """
    Assert that a traversal visits exactly the reachable vertices once each.

    Raises
    ------
    ValueError
        If the order does not begin at ``start``, repeats a vertex, or does
        not cover the reachable set.
    """
    if not order or order[0] != start:
        raise ValueError(f"Traversal must begin at {start!r}, got {list(order)!r}")
    if len(set(order)) != len(order):
        raise ValueError(f"Traversal visits a vertex twice: {list(order)!r}")

    reachable = set(bfs(edges, start, directed))
    if set(order) != reachable:
        raise ValueError(
            f"Traversal covers {sorted(map(str, order))} but reachable set is "
            f"{sorted(map(str, reachable))}"
        )


def assert_shortest_paths(
    entries: Sequence[ShortestPathEntry],
    edges: Iterable[Any],
    start: Hashable,
    directed: bool = False,
    weighted: bool = True,
    atol: float = 1e-9,
) -> None:
    """
    Assert that every reported path is a real walk matching its distance.

    Raises
    ------
    ValueError
        If a path does not run from ``start`` to its vertex, uses a missing
        edge, or its weight differs from the reported distance.
    """
    edge_list = coerce_edges(edges)
    for entry in entries:
        path = entry.path
        if not path or path[0] != start or path[-1] != entry.vertex:
            raise ValueError(f"Path {list(path)!r} does not run from {start!r} to {entry.vertex!r}")
        weight = path_weight(path, edge_list, directed, weighted)
        if abs(weight - entry.distance) > atol:
            raise ValueError(
                f"Path to {entry.vertex!r} weighs {weight}, reported distance is {entry.distance}"
            )


def is_topological_order(order: Sequence[Hashable], edges: Iterable[Any]) -> bool:
    """Return True if every edge source precedes its target in ``order``."""
    position = {v: i for i, v in enumerate(order)}
    if len(position) != len(order):
        return False
    for e in coerce_edges(edges):
        if e.source not in position or e.target not in position:
            return False
        if position[e.source] >= position[e.target]:
            return False
    return True


def assert_topological_order(order: Sequence[Hashable], edges: Iterable[Any]) -> None:
    """
    Assert that ``order`` is a topological order of the directed edges.

    Raises
    ------
    ValueError
        If some edge points backwards or a vertex is missing or repeated.
    """
    if not is_topological_order(order, edges):
        raise ValueError(f"{list(order)!r} is not a topological order of the graph")


def assert_spanning_forest(
    forest: Iterable[Any],
    edges: Iterable[Any],
    vertices: Iterable[Any],
) -> None:
    """
    Assert that ``forest`` is a spanning forest of the undirected graph.

    Checks acyclicity and that it has exactly one tree per connected
    component (``n - components`` edges). Minimality is not checked.

    Raises
    ------
    ValueError
        If the forest has a cycle or leaves components split.
    """
    edge_list = coerce_edges(edges)
    nodes = vertex_ids(vertex_ids(vertices) + endpoint_ids(edge_list))

    components = UnionFind(nodes)
    for e in edge_list:
        components.union(e.source, e.target)
    n_components = len({components.find(v) for v in nodes})

    tree = UnionFind(nodes)
    forest_list = coerce_edges(forest)
    for e in forest_list:
        if not tree.union(e.source, e.target):
            raise ValueError(f"Spanning forest has a cycle through edge {e.source!r}-{e.target!r}")

    expected = len(nodes) - n_components
    if len(forest_list) != expected:
        raise ValueError(
            f"Spanning forest has {len(forest_list)} edges, expected {expected} "
            f"for {len(nodes)} vertices in {n_components} components"
        )
