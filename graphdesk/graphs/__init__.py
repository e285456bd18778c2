"""
Graph algorithms for the graphdesk editor.

This package holds the computational core behind the editor's algorithm
panel:
- Graph data model and endpoint normalization (Vertex, Edge)
- Edge classification (self-loops, bidirectional pairs) and adjacency lists
- Traversal algorithms (BFS, DFS)
- Shortest paths (Dijkstra)
- Minimum spanning forest (Kruskal)
- Topological sort (Kahn)

Every function takes a graph snapshot (edge list, vertex list, flags) and
never mutates it. Ties are broken by input order, so identical inputs give
identical outputs.
"""

from .core import ClassifiedEdge, Edge, Vertex, coerce_edge, coerce_vertex, resolve_id, vertex_exists, vertex_ids
from .mst import UnionFind, minimum_spanning_tree, mst, total_weight
from .normalize import build_adjacency, classify_edges
from .shortest import ShortestPathEntry, dijkstra
from .topological import CycleDetectedError, topological_sort
from .traversal import bfs, dfs
from .utils import adjacency_matrix, edge_weight, node_index_map, reconstruct_path

__all__ = [
    "Vertex",
    "Edge",
    "ClassifiedEdge",
    "resolve_id",
    "coerce_vertex",
    "coerce_edge",
    "vertex_ids",
    "vertex_exists",
    "classify_edges",
    "build_adjacency",
    "bfs",
    "dfs",
    "ShortestPathEntry",
    "dijkstra",
    "UnionFind",
    "minimum_spanning_tree",
    "mst",
    "total_weight",
    "CycleDetectedError",
    "topological_sort",
    "edge_weight",
    "node_index_map",
    "reconstruct_path",
    "adjacency_matrix",
]

# Example usage:
# from graphdesk.graphs import Edge, dijkstra
#
# edges = [Edge("A", "B", 1), Edge("B", "C", 2)]
# for entry in dijkstra(edges, "A", ["A", "B", "C"], directed=True):
#     print(entry.vertex, entry.distance, entry.path)
