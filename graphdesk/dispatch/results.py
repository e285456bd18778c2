"""
Request and result dataclasses for the algorithm dispatcher.

A run takes a :class:`GraphSnapshot` plus an :class:`AlgorithmRequest` and
produces exactly one :class:`AlgorithmResult`. Results form a tagged union:
every variant carries the algorithm kind, a status and a timestamp, plus
the engine's native output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Hashable, Optional, Tuple

from ..graphs.core import Edge, Vertex
from ..graphs.shortest import ShortestPathEntry


class AlgorithmKind(Enum):
    """Algorithms offered by the editor's algorithm panel."""

    BFS = "BFS"
    DFS = "DFS"
    DIJKSTRA = "Dijkstra"
    MST = "MST"
    TOPOLOGICAL_SORT = "TopologicalSort"

    @classmethod
    def parse(cls, name: "str | AlgorithmKind") -> "AlgorithmKind":
        """
        Parse a user-facing algorithm name, case-insensitively.

        Raises:
            ValueError: If the name matches no algorithm.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace(" ", "").replace("-", "").replace("_", "")
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown algorithm {name!r}") from None

    @property
    def needs_start(self) -> bool:
        return self in (AlgorithmKind.BFS, AlgorithmKind.DFS, AlgorithmKind.DIJKSTRA)


_ALIASES = {
    "bfs": AlgorithmKind.BFS,
    "breadthfirstsearch": AlgorithmKind.BFS,
    "dfs": AlgorithmKind.DFS,
    "depthfirstsearch": AlgorithmKind.DFS,
    "dijkstra": AlgorithmKind.DIJKSTRA,
    "shortestpath": AlgorithmKind.DIJKSTRA,
    "mst": AlgorithmKind.MST,
    "minimumspanningtree": AlgorithmKind.MST,
    "topologicalsort": AlgorithmKind.TOPOLOGICAL_SORT,
    "toposort": AlgorithmKind.TOPOLOGICAL_SORT,
    "topo": AlgorithmKind.TOPOLOGICAL_SORT,
}


class ResultStatus(Enum):
    """Outcome of a dispatcher run."""

    OK = "ok"
    INFO = "info"
    ERROR = "error"


class ErrorKind(Enum):
    """Reasons a run produced no algorithm output."""

    EMPTY_GRAPH = "empty_graph"
    INVALID_START_VERTEX = "invalid_start_vertex"
    WRONG_GRAPH_KIND = "wrong_graph_kind"
    CYCLE_DETECTED = "cycle_detected"
    UNEXPECTED_ENGINE_FAILURE = "unexpected_engine_failure"
    UNKNOWN_ALGORITHM = "unknown_algorithm"


@dataclass(frozen=True)
class GraphSnapshot:
    """
    Immutable view of one editor graph.

    Attributes:
        vertices: Vertices in declared order.
        edges: Edges; endpoints may be ids or embedded vertex objects.
        directed: Whether edges are one-way.
        weighted: Whether edge weights are meaningful (otherwise all 1).
            Defaults to True.
        name: Graph title, used to name derived graphs.
    """

    vertices: Tuple[Any, ...] = ()
    edges: Tuple[Any, ...] = ()
    directed: bool = False
    weighted: bool = True
    name: str = "Graph"

    def __post_init__(self):
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "edges", tuple(self.edges))


@dataclass(frozen=True)
class AlgorithmRequest:
    """
    A user's "run" command.

    Attributes:
        algorithm: Algorithm name or kind.
        start: Start vertex as typed; blank or None means the first vertex.
    """

    algorithm: "str | AlgorithmKind"
    start: Optional[str] = None


@dataclass(frozen=True)
class GraphRequest:
    """Request to open a new graph window, emitted by the MST run."""

    name: str
    vertices: Tuple[Vertex, ...]
    edges: Tuple[Edge, ...]
    directed: bool = False
    weighted: bool = True


@dataclass(frozen=True)
class AlgorithmResult:
    """
    Base of all dispatcher results.

    Attributes:
        kind: Algorithm that was requested, or None if the name was unknown.
        timestamp: When the result was produced.
    """

    kind: Optional[AlgorithmKind]
    timestamp: datetime

    status: ClassVar[ResultStatus] = ResultStatus.OK

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK


@dataclass(frozen=True)
class TraversalResult(AlgorithmResult):
    """BFS or DFS visitation order."""

    start: Hashable = None
    order: Tuple[Hashable, ...] = ()


@dataclass(frozen=True)
class ShortestPathResult(AlgorithmResult):
    """Dijkstra distances and paths, one entry per reachable vertex."""

    start: Hashable = None
    entries: Tuple[ShortestPathEntry, ...] = ()

    def distance_to(self, vertex: Hashable) -> Optional[float]:
        for entry in self.entries:
            if entry.vertex == vertex:
                return entry.distance
        return None


@dataclass(frozen=True)
class SpanningTreeResult(AlgorithmResult):
    """
    Minimum spanning forest.

    Attributes:
        edges: Selected edges with resolved weights.
        total_weight: Sum of selected edge weights.
        warning: Advisory note, set when the source graph is directed.
        graph_request: Derived graph built from the selected edges.
    """

    edges: Tuple[Edge, ...] = ()
    total_weight: float = 0
    warning: Optional[str] = None
    graph_request: Optional[GraphRequest] = None


@dataclass(frozen=True)
class TopologicalSortResult(AlgorithmResult):
    """Topological order of a DAG."""

    order: Tuple[Hashable, ...] = ()


@dataclass(frozen=True)
class ErrorResult(AlgorithmResult):
    """
    A run that produced no algorithm output.

    ``EMPTY_GRAPH`` is informational; every other kind is an error.
    """

    error: ErrorKind = ErrorKind.UNEXPECTED_ENGINE_FAILURE
    message: str = ""
    details: Tuple[Any, ...] = field(default=())

    @property
    def status(self) -> ResultStatus:  # type: ignore[override]
        if self.error is ErrorKind.EMPTY_GRAPH:
            return ResultStatus.INFO
        return ResultStatus.ERROR


__all__ = [
    "AlgorithmKind",
    "ResultStatus",
    "ErrorKind",
    "GraphSnapshot",
    "AlgorithmRequest",
    "GraphRequest",
    "AlgorithmResult",
    "TraversalResult",
    "ShortestPathResult",
    "SpanningTreeResult",
    "TopologicalSortResult",
    "ErrorResult",
]
