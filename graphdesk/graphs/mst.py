"""
Minimum spanning forest: Kruskal with union-find.

Edges are always treated as undirected, whatever the graph's own
directedness flag says.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 21.3 (disjoint-set forests) and 23.2 (Kruskal).
"""

from typing import Any, Dict, Hashable, Iterable, List

from ..logging import get_logger
from .core import Edge, coerce_edges, endpoint_ids, vertex_ids
from .utils import edge_weight

logger = get_logger(__name__)


class UnionFind:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by rank.

    Used by Kruskal's algorithm for cycle detection.
    """

    def __init__(self, nodes: Iterable[Hashable]):
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}

        for node in nodes:
            self.add(node)

    def add(self, x: Hashable) -> None:
        """Add ``x`` as a singleton set if it is not tracked yet."""
        if x not in self.parent:
            self.parent[x] = x
            self.rank[x] = 0

    def find(self, x: Hashable) -> Hashable:
        """
        Find root of x with path compression.

        Args:
            x: Node to find root for.

        Returns:
            Root node.
        """
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Union sets containing x and y using union by rank.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        return True


def minimum_spanning_tree(
    edges: Iterable[Any], vertices: Iterable[Any], weighted: bool = True
) -> List[Edge]:
    """
    Kruskal's algorithm for a minimum spanning forest.

    Candidate edges are stably sorted by weight, so equal weights keep
    their input order. Self-loops are skipped, and of several parallel
    edges only the lightest can be selected. A disconnected graph yields
    one tree per connected component.

    Args:
        edges: Edge list in any supported representation.
        vertices: Vertex list.
        weighted: If False, every edge weighs 1.

    Returns:
        Selected edges in selection order, each carrying its resolved weight.

    Complexity: O(E log E).

    Example:
        >>> tree = minimum_spanning_tree(
        ...     [("A", "B", 1), ("B", "C", 2), ("A", "C", 5)], ["A", "B", "C"]
        ... )
        >>> [(e.source, e.target, e.weight) for e in tree]
        [('A', 'B', 1), ('B', 'C', 2)]
    """
    edge_list = coerce_edges(edges)
    candidates = sorted(
        (e for e in edge_list if e.source != e.target),
        key=lambda e: edge_weight(e, weighted),
    )

    uf = UnionFind(vertex_ids(vertices) + endpoint_ids(edge_list))
    selected: List[Edge] = []

    for e in candidates:
        if uf.union(e.source, e.target):
            selected.append(Edge(e.source, e.target, edge_weight(e, weighted), e.id))

    logger.debug(
        "MST selected %d of %d edges across %d vertices",
        len(selected),
        len(edge_list),
        len(uf.parent),
    )
    return selected


mst = minimum_spanning_tree


def total_weight(edges: Iterable[Any]) -> float:
    """Sum of resolved edge weights."""
    return sum(edge_weight(e) for e in coerce_edges(edges))
