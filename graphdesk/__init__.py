"""graphdesk - the algorithm core of an interactive graph editor."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_shortest_paths,
    assert_spanning_forest,
    assert_topological_order,
    assert_valid_traversal,
    debug_context,
    is_debug_enabled,
    is_topological_order,
    path_weight,
    set_debug_enabled,
)

# Dispatcher
from .dispatch import (
    AlgorithmDispatcher,
    AlgorithmKind,
    AlgorithmRequest,
    AlgorithmResult,
    DispatchConfig,
    ErrorKind,
    ErrorResult,
    GraphRequest,
    GraphSnapshot,
    ResultHistory,
    ResultStatus,
    ShortestPathResult,
    SpanningTreeResult,
    TopologicalSortResult,
    TraversalResult,
    format_result,
    run_algorithm,
)

# Graph model and engines
from .graphs import (
    ClassifiedEdge,
    CycleDetectedError,
    Edge,
    ShortestPathEntry,
    UnionFind,
    Vertex,
    adjacency_matrix,
    bfs,
    build_adjacency,
    classify_edges,
    coerce_edge,
    coerce_vertex,
    dfs,
    dijkstra,
    edge_weight,
    minimum_spanning_tree,
    mst,
    node_index_map,
    reconstruct_path,
    resolve_id,
    topological_sort,
    total_weight,
    vertex_exists,
    vertex_ids,
)

__all__ = [
    # Version
    "__version__",
    # Graph model
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
    # Engines
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
    # Utilities
    "edge_weight",
    "node_index_map",
    "reconstruct_path",
    "adjacency_matrix",
    # Dispatcher
    "AlgorithmDispatcher",
    "run_algorithm",
    "DispatchConfig",
    "AlgorithmKind",
    "AlgorithmRequest",
    "AlgorithmResult",
    "ErrorKind",
    "ErrorResult",
    "GraphRequest",
    "GraphSnapshot",
    "ResultHistory",
    "ResultStatus",
    "ShortestPathResult",
    "SpanningTreeResult",
    "TopologicalSortResult",
    "TraversalResult",
    "format_result",
    # Diagnostics
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
