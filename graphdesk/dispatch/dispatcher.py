"""
Algorithm dispatcher.

Validates a run request against a graph snapshot, delegates to the matching
engine and wraps the outcome in an :class:`AlgorithmResult`. Failures of any
kind come back as :class:`ErrorResult` values; nothing raised by an engine
reaches the caller.
"""

from __future__ import annotations

import copy
from datetime import datetime
from typing import Any, Callable, List, Optional

from ..diagnostics import (
    assert_shortest_paths,
    assert_spanning_forest,
    assert_topological_order,
    assert_valid_traversal,
)
from ..graphs import (
    CycleDetectedError,
    Edge,
    Vertex,
    bfs,
    coerce_edge,
    coerce_vertex,
    dfs,
    dijkstra,
    minimum_spanning_tree,
    topological_sort,
    total_weight,
    vertex_exists,
)
from ..logging import get_logger
from .config import DispatchConfig
from .formatting import format_result
from .history import ResultHistory
from .results import (
    AlgorithmKind,
    AlgorithmRequest,
    AlgorithmResult,
    ErrorKind,
    ErrorResult,
    GraphRequest,
    GraphSnapshot,
    ShortestPathResult,
    SpanningTreeResult,
    TopologicalSortResult,
    TraversalResult,
)

logger = get_logger(__name__)

MST_DIRECTED_WARNING = (
    "MST is usually defined for undirected graphs. Result might be incorrect for directed graphs."
)


class AlgorithmDispatcher:
    """
    Runs editor algorithm requests against graph snapshots.

    Args:
        config: Dispatcher configuration. Defaults to ``DispatchConfig()``.
        on_create_graph: Called with a :class:`GraphRequest` whenever an MST
            run asks for a new graph window.
        history: Result log every produced result is prepended to. A fresh
            one sized by ``config.history_limit`` is created when omitted.
        clock: Timestamp source for results.

    Example:
        >>> dispatcher = AlgorithmDispatcher()
        >>> snapshot = GraphSnapshot(["A", "B"], [("A", "B")], directed=True)
        >>> dispatcher.run(snapshot, AlgorithmRequest("BFS", "A")).order
        ('A', 'B')
    """

    def __init__(
        self,
        config: Optional[DispatchConfig] = None,
        on_create_graph: Optional[Callable[[GraphRequest], None]] = None,
        history: Optional[ResultHistory] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config if config is not None else DispatchConfig()
        self.on_create_graph = on_create_graph
        self.history = history if history is not None else ResultHistory(self.config.history_limit)
        self.clock = clock

    def run(self, snapshot: GraphSnapshot, request: AlgorithmRequest) -> AlgorithmResult:
        """
        Validate ``request`` and run it against ``snapshot``.

        Validation order: algorithm name, empty graph, start vertex (BFS, DFS
        and Dijkstra only), graph kind (topological sort only). The snapshot
        is never modified.

        Returns:
            Exactly one result, which is also prepended to ``self.history``.
        """
        result = self._dispatch(snapshot, request)
        self.history.add(result)

        if isinstance(result, ErrorResult):
            if result.error is ErrorKind.EMPTY_GRAPH:
                logger.info("%s skipped: %s", request.algorithm, result.message)
            else:
                logger.warning("%s failed (%s): %s", request.algorithm, result.error.value, result.message)
        else:
            logger.info("%s finished on %r", result.kind.value, snapshot.name)
        return result

    def describe(self, result: AlgorithmResult) -> str:
        """Render ``result`` as text using the configured path separator."""
        return format_result(result, self.config.path_separator)

    def _dispatch(self, snapshot: GraphSnapshot, request: AlgorithmRequest) -> AlgorithmResult:
        try:
            kind = AlgorithmKind.parse(request.algorithm)
        except ValueError:
            return self._error(None, ErrorKind.UNKNOWN_ALGORITHM, "Algorithm not implemented.")

        try:
            vertices = [coerce_vertex(v) for v in snapshot.vertices]
        except (KeyError, TypeError) as exc:
            return self._error(kind, ErrorKind.UNEXPECTED_ENGINE_FAILURE, f"Invalid vertex: {exc}")
        if not vertices:
            return self._error(kind, ErrorKind.EMPTY_GRAPH, "Graph is empty.")

        start = self._resolve_start(request.start, vertices)
        if kind.needs_start and not vertex_exists(vertices, start):
            return self._error(
                kind,
                ErrorKind.INVALID_START_VERTEX,
                f'Start node "{start}" does not exist.',
                (start,),
            )

        if kind is AlgorithmKind.TOPOLOGICAL_SORT and not snapshot.directed:
            return self._error(
                kind, ErrorKind.WRONG_GRAPH_KIND, "Topological Sort requires a Directed Graph."
            )

        logger.debug(
            "Running %s on %r (%d vertices, %d edges, start=%r)",
            kind.value,
            snapshot.name,
            len(vertices),
            len(snapshot.edges),
            start,
        )
        try:
            edges = [coerce_edge(e) for e in snapshot.edges]
            return self._run_engine(kind, snapshot, vertices, edges, start)
        except CycleDetectedError as exc:
            return self._error(
                kind,
                ErrorKind.CYCLE_DETECTED,
                "Cycle detected (Graph is not a DAG).",
                tuple(exc.remaining),
            )
        except Exception as exc:
            logger.debug("%s engine raised", kind.value, exc_info=True)
            return self._error(kind, ErrorKind.UNEXPECTED_ENGINE_FAILURE, str(exc) or type(exc).__name__)

    def _run_engine(
        self,
        kind: AlgorithmKind,
        snapshot: GraphSnapshot,
        vertices: List[Vertex],
        edges: List[Edge],
        start: Any,
    ) -> AlgorithmResult:
        verify = self.config.should_verify

        if kind in (AlgorithmKind.BFS, AlgorithmKind.DFS):
            engine = bfs if kind is AlgorithmKind.BFS else dfs
            order = engine(edges, start, snapshot.directed)
            if verify:
                assert_valid_traversal(order, edges, start, snapshot.directed)
            return TraversalResult(kind, self.clock(), start=start, order=tuple(order))

        if kind is AlgorithmKind.DIJKSTRA:
            entries = dijkstra(edges, start, vertices, snapshot.directed, snapshot.weighted)
            if verify:
                assert_shortest_paths(entries, edges, start, snapshot.directed, snapshot.weighted)
            return ShortestPathResult(kind, self.clock(), start=start, entries=tuple(entries))

        if kind is AlgorithmKind.MST:
            tree = minimum_spanning_tree(edges, vertices, snapshot.weighted)
            if verify:
                assert_spanning_forest(tree, edges, vertices)
            request = GraphRequest(
                name=f"{snapshot.name}{self.config.mst_name_suffix}",
                vertices=tuple(Vertex(v.id, copy.deepcopy(v.attributes)) for v in vertices),
                edges=tuple(tree),
                directed=False,
                weighted=True,
            )
            if self.on_create_graph is not None:
                self.on_create_graph(request)
            return SpanningTreeResult(
                kind,
                self.clock(),
                edges=tuple(tree),
                total_weight=total_weight(tree),
                warning=MST_DIRECTED_WARNING if snapshot.directed else None,
                graph_request=request,
            )

        order = topological_sort(edges, vertices)
        if verify:
            assert_topological_order(order, edges)
        return TopologicalSortResult(kind, self.clock(), order=tuple(order))

    @staticmethod
    def _resolve_start(start: Any, vertices: List[Vertex]) -> Any:
        if isinstance(start, str):
            start = start.strip()
        if start is None or start == "":
            return vertices[0].id
        return start

    def _error(
        self,
        kind: Optional[AlgorithmKind],
        error: ErrorKind,
        message: str,
        details: tuple = (),
    ) -> ErrorResult:
        return ErrorResult(kind, self.clock(), error=error, message=message, details=details)


def run_algorithm(
    snapshot: GraphSnapshot,
    algorithm: "str | AlgorithmKind",
    start: Optional[str] = None,
    config: Optional[DispatchConfig] = None,
    on_create_graph: Optional[Callable[[GraphRequest], None]] = None,
) -> AlgorithmResult:
    """
    One-shot convenience wrapper around :class:`AlgorithmDispatcher`.

    Example:
        >>> snapshot = GraphSnapshot([], [])
        >>> run_algorithm(snapshot, "BFS").message
        'Graph is empty.'
    """
    dispatcher = AlgorithmDispatcher(config=config, on_create_graph=on_create_graph)
    return dispatcher.run(snapshot, AlgorithmRequest(algorithm, start))
