"""Tests for plain-text result rendering."""

from datetime import datetime

import pytest

from graphdesk.dispatch import (
    AlgorithmKind,
    ErrorKind,
    ErrorResult,
    ShortestPathResult,
    SpanningTreeResult,
    TopologicalSortResult,
    TraversalResult,
    format_result,
)
from graphdesk.dispatch.results import AlgorithmResult
from graphdesk.graphs import Edge, ShortestPathEntry

NOW = datetime(2024, 1, 1)


def test_traversal():
    result = TraversalResult(AlgorithmKind.DFS, NOW, start="A", order=("A", "C", "B"))
    assert format_result(result) == "DFS Traversal (Start: A):\nA → C → B"


def test_custom_separator():
    result = TopologicalSortResult(AlgorithmKind.TOPOLOGICAL_SORT, NOW, order=("X", "Y"))
    assert format_result(result, separator=", ") == "Topological Sort:\nX, Y"


def test_shortest_paths():
    """Test the distance table layout."""
    result = ShortestPathResult(
        AlgorithmKind.DIJKSTRA,
        NOW,
        start="A",
        entries=(ShortestPathEntry("A", 0, ("A",)), ShortestPathEntry("B", 5.0, ("A", "B"))),
    )
    lines = format_result(result).splitlines()
    assert lines[0] == "Shortest Paths (Start: A):"
    assert lines[2] == "A\t0\tA"
    assert lines[3] == "B\t5\tA → B"


def test_spanning_tree_with_warning():
    """Test the MST listing, total and directed-graph note."""
    result = SpanningTreeResult(
        AlgorithmKind.MST,
        NOW,
        edges=(Edge("A", "B", 1), Edge("B", "C", 2.5)),
        total_weight=3.5,
        warning="MST is usually defined for undirected graphs.",
    )
    lines = format_result(result).splitlines()
    assert lines[0].startswith("Note: ")
    assert lines[1] == "Minimum Spanning Tree (Total Weight: 3.5):"
    assert lines[2] == "A — B (Weight: 1)"
    assert lines[3] == "B — C (Weight: 2.5)"


@pytest.mark.parametrize(
    "error,message,expected",
    [
        (ErrorKind.EMPTY_GRAPH, "Graph is empty.", "Graph is empty."),
        (ErrorKind.UNKNOWN_ALGORITHM, "Algorithm not implemented.", "Algorithm not implemented."),
        (
            ErrorKind.INVALID_START_VERTEX,
            'Start node "Z" does not exist.',
            'Error: Start node "Z" does not exist.',
        ),
        (
            ErrorKind.CYCLE_DETECTED,
            "Cycle detected (Graph is not a DAG).",
            "Error: Cycle detected (Graph is not a DAG).",
        ),
    ],
)
def test_errors(error, message, expected):
    result = ErrorResult(AlgorithmKind.BFS, NOW, error=error, message=message)
    assert format_result(result) == expected


def test_unknown_result_type():
    with pytest.raises(TypeError):
        format_result(AlgorithmResult(AlgorithmKind.BFS, NOW))
