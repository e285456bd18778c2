"""
Core graph data model.

Vertices and edges as the editor hands them over: endpoints may be plain
identifiers or embedded vertex objects. The helpers here resolve every
representation to plain identifiers so the engines never branch on it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional

VertexId = Hashable


@dataclass(frozen=True)
class Vertex:
    """
    A uniquely identified graph vertex.

    Attributes:
        id: Vertex identifier, unique within a graph.
        attributes: Display data owned by the rendering layer (position,
            colour, ...). Never read by the algorithms.
    """

    id: VertexId
    attributes: Dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Edge:
    """
    Connection from ``source`` to ``target``.

    Attributes:
        source: Source vertex identifier.
        target: Target vertex identifier.
        weight: Optional numeric weight. ``None`` means "use the default of 1".
        id: Optional edge identifier assigned by the editor.
    """

    source: VertexId
    target: VertexId
    weight: Optional[float] = None
    id: Optional[str] = None

    @property
    def key(self) -> str:
        """Directional key ``"source->target"``."""
        return f"{self.source}->{self.target}"

    @property
    def reversed_key(self) -> str:
        return f"{self.target}->{self.source}"


@dataclass(frozen=True)
class ClassifiedEdge:
    """
    Edge with its derived structural flags.

    Attributes:
        edge: The normalized edge.
        is_self_loop: True when source == target.
        is_bidirectional: True when the reversed edge is also present and the
            edge is not a self-loop.
    """

    edge: Edge
    is_self_loop: bool
    is_bidirectional: bool

    @property
    def source(self) -> VertexId:
        return self.edge.source

    @property
    def target(self) -> VertexId:
        return self.edge.target

    @property
    def weight(self) -> Optional[float]:
        return self.edge.weight


def resolve_id(endpoint: Any) -> VertexId:
    """
    Resolve an edge endpoint to a plain vertex identifier.

    Accepts a bare identifier, a mapping with an ``"id"`` key, or any object
    exposing an ``id`` attribute.

    Args:
        endpoint: Endpoint in any supported representation.

    Returns:
        The vertex identifier.

    Example:
        >>> resolve_id("A")
        'A'
        >>> resolve_id(Vertex("B"))
        'B'
        >>> resolve_id({"id": "C", "x": 10})
        'C'
    """
    if isinstance(endpoint, Mapping):
        if "id" not in endpoint:
            raise KeyError(f"Endpoint mapping {endpoint!r} has no 'id' key")
        return endpoint["id"]
    if isinstance(endpoint, (str, int)):
        return endpoint
    if hasattr(endpoint, "id"):
        return endpoint.id
    return endpoint


def coerce_vertex(raw: Any) -> Vertex:
    """Coerce a ``Vertex``, an ``{"id": ...}`` mapping or a bare id to ``Vertex``."""
    if isinstance(raw, Vertex):
        return raw
    if isinstance(raw, Mapping):
        attributes = {k: v for k, v in raw.items() if k != "id"}
        return Vertex(resolve_id(raw), attributes)
    return Vertex(resolve_id(raw))


def coerce_edge(raw: Any) -> Edge:
    """
    Coerce any supported edge representation to an ``Edge`` with plain ids.

    Supported inputs are ``Edge`` (endpoints may still be embedded objects),
    ``(source, target)`` and ``(source, target, weight)`` tuples, and
    mappings with ``source``, ``target`` and optional ``weight`` / ``id``.

    Raises:
        TypeError: If the value is none of the above.
    """
    if isinstance(raw, Edge):
        source, target = resolve_id(raw.source), resolve_id(raw.target)
        if source == raw.source and target == raw.target:
            return raw
        return Edge(source, target, raw.weight, raw.id)
    if isinstance(raw, Mapping):
        return Edge(
            resolve_id(raw["source"]),
            resolve_id(raw["target"]),
            raw.get("weight"),
            raw.get("id"),
        )
    if isinstance(raw, tuple) and len(raw) in (2, 3):
        weight = raw[2] if len(raw) == 3 else None
        return Edge(resolve_id(raw[0]), resolve_id(raw[1]), weight)
    raise TypeError(f"Cannot interpret {raw!r} as an edge")


def coerce_edges(edges: Iterable[Any]) -> List[Edge]:
    return [coerce_edge(e) for e in edges]


def vertex_ids(vertices: Iterable[Any]) -> List[VertexId]:
    """
    Return vertex identifiers in declared order, dropping duplicates.

    Args:
        vertices: Vertices in any supported representation.

    Returns:
        List of identifiers.
    """
    seen = set()
    ids: List[VertexId] = []
    for v in vertices:
        vid = resolve_id(v)
        if vid not in seen:
            seen.add(vid)
            ids.append(vid)
    return ids


def vertex_exists(vertices: Iterable[Any], vertex_id: VertexId) -> bool:
    """
    Check whether ``vertex_id`` names a vertex in ``vertices``.

    Example:
        >>> vertex_exists([Vertex("A"), Vertex("B")], "B")
        True
        >>> vertex_exists(["A"], "Z")
        False
    """
    return any(resolve_id(v) == vertex_id for v in vertices)


def endpoint_ids(edges: Iterable[Edge]) -> List[VertexId]:
    """Identifiers touched by ``edges`` in first-appearance order."""
    return vertex_ids(endpoint for e in edges for endpoint in (e.source, e.target))

