"""
Graph traversal algorithms: BFS and DFS.

Both walk the adjacency lists built from the edge list and visit neighbors
in edge insertion order, so the output is a pure function of the input
ordering.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Any, Hashable, Iterable, Iterator, List

from .normalize import build_adjacency


def bfs(edges: Iterable[Any], start: Hashable, directed: bool = False) -> List[Hashable]:
    """
    Breadth-first search from a start vertex.

    Args:
        edges: Edge list in any supported representation.
        start: Vertex to start from. A vertex with no incident edges yields
            ``[start]``.
        directed: If True, only follow edges source -> target.

    Returns:
        Vertices in the order they are first discovered. Vertices not
        reachable from ``start`` are omitted.

    Complexity: O(V + E).

    Example:
        >>> bfs([("A", "B"), ("B", "C")], "A", directed=True)
        ['A', 'B', 'C']
    """
    adj = build_adjacency(edges, directed)

    order: List[Hashable] = [start]
    visited = {start}
    queue = deque([start])

    while queue:
        u = queue.popleft()
        for v, _ in adj.get(u, ()):
            if v not in visited:
                visited.add(v)
                order.append(v)
                queue.append(v)

    return order


def dfs(edges: Iterable[Any], start: Hashable, directed: bool = False) -> List[Hashable]:
    """
    Depth-first search from a start vertex (pre-order).

    Iterative, with an explicit stack of neighbor iterators so the result
    matches the recursive definition without hitting the recursion limit
    on long chains.

    Args:
        edges: Edge list in any supported representation.
        start: Vertex to start from.
        directed: If True, only follow edges source -> target.

    Returns:
        Vertices in pre-order. Vertices not reachable from ``start`` are
        omitted.

    Complexity: O(V + E).

    Example:
        >>> dfs([("A", "B"), ("A", "C"), ("B", "D")], "A")
        ['A', 'B', 'D', 'C']
    """
    adj = build_adjacency(edges, directed)

    preorder: List[Hashable] = [start]
    visited = {start}
    stack: List[Iterator] = [iter(adj.get(start, ()))]

    while stack:
        for v, _ in stack[-1]:
            if v not in visited:
                visited.add(v)
                preorder.append(v)
                stack.append(iter(adj.get(v, ())))
                break
        else:
            stack.pop()

    return preorder
