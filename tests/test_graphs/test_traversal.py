"""Tests for graph traversal algorithms."""

import pytest

from graphdesk.graphs import Edge, Vertex, bfs, build_adjacency, dfs


def _reachable(edges, start, directed):
    adj = build_adjacency(edges, directed)
    seen = {start}
    frontier = [start]
    while frontier:
        u = frontier.pop()
        for v, _ in adj.get(u, ()):
            if v not in seen:
                seen.add(v)
                frontier.append(v)
    return seen


class TestBFS:
    """Tests for breadth-first search."""

    def test_bfs_chain(self):
        """Test BFS on a directed chain."""
        assert bfs([("A", "B"), ("B", "C")], "A", directed=True) == ["A", "B", "C"]

    def test_bfs_levels(self):
        """Test that BFS finishes a level before going deeper."""
        edges = [("A", "B"), ("B", "D"), ("A", "C")]
        assert bfs(edges, "A") == ["A", "B", "C", "D"]

    def test_bfs_insertion_order(self):
        """Test that neighbors are visited in edge insertion order."""
        edges = [("A", "C"), ("A", "B")]
        assert bfs(edges, "A") == ["A", "C", "B"]

    def test_bfs_directed_ignores_backward_edges(self):
        """Test that directed BFS does not walk edges backwards."""
        edges = [("B", "A"), ("B", "C")]
        assert bfs(edges, "A", directed=True) == ["A"]
        assert bfs(edges, "A", directed=False) == ["A", "B", "C"]

    def test_bfs_disconnected(self):
        """Test that unreachable vertices are omitted."""
        edges = [("A", "B"), ("C", "D")]
        order = bfs(edges, "A")
        assert order == ["A", "B"]

    def test_bfs_isolated_start(self):
        """Test BFS from a vertex with no edges."""
        assert bfs([("B", "C")], "A") == ["A"]
        assert bfs([], "A") == ["A"]

    def test_bfs_self_loops_and_parallel_edges(self):
        """Test that self-loops and parallel edges do not repeat vertices."""
        edges = [("A", "A"), ("A", "B"), ("A", "B"), ("B", "A")]
        assert bfs(edges, "A", directed=True) == ["A", "B"]

    def test_bfs_embedded_endpoints(self):
        """Test BFS on edges that embed vertex objects."""
        edges = [Edge(Vertex("A"), Vertex("B")), {"source": {"id": "B"}, "target": "C"}]
        assert bfs(edges, "A", directed=True) == ["A", "B", "C"]


class TestDFS:
    """Tests for depth-first search."""

    def test_dfs_preorder(self):
        """Test that DFS goes deep before wide."""
        edges = [("A", "B"), ("A", "C"), ("B", "D")]
        assert dfs(edges, "A") == ["A", "B", "D", "C"]

    def test_dfs_insertion_order(self):
        """Test that DFS takes the first unvisited neighbor in insertion order."""
        edges = [("A", "Z"), ("A", "B"), ("A", "M")]
        assert dfs(edges, "A", directed=True) == ["A", "Z", "B", "M"]

    def test_dfs_backtracks(self):
        """Test that DFS resumes the parent's neighbor list after a dead end."""
        edges = [("A", "B"), ("B", "C"), ("A", "D"), ("C", "A")]
        assert dfs(edges, "A", directed=True) == ["A", "B", "C", "D"]

    def test_dfs_directed_vs_undirected(self):
        """Test directionality handling."""
        edges = [("B", "A"), ("B", "C")]
        assert dfs(edges, "A", directed=True) == ["A"]
        assert dfs(edges, "A", directed=False) == ["A", "B", "C"]

    def test_dfs_disconnected(self):
        """Test that unreachable vertices are omitted."""
        edges = [("A", "B"), ("C", "D")]
        assert dfs(edges, "C") == ["C", "D"]

    def test_dfs_long_chain(self):
        """Test DFS on a chain deeper than the default recursion limit."""
        n = 5000
        edges = [(i, i + 1) for i in range(n)]
        order = dfs(edges, 0, directed=True)
        assert order == list(range(n + 1))

    def test_dfs_isolated_start(self):
        """Test DFS from a vertex with no edges."""
        assert dfs([], "A") == ["A"]


class TestTraversalProperties:
    """Randomized checks against a reference reachability computation."""

    @pytest.mark.parametrize("directed", [True, False])
    @pytest.mark.parametrize("traverse", [bfs, dfs])
    def test_visits_reachable_exactly_once(self, random_graph, traverse, directed):
        """Test that every reachable vertex appears exactly once and nothing else."""
        for _ in range(20):
            vertices, edges = random_graph(n_vertices=7, n_edges=8)
            start = vertices[0]
            order = traverse(edges, start, directed)

            assert order[0] == start
            assert len(order) == len(set(order))
            assert set(order) == _reachable(edges, start, directed)

    def test_deterministic(self, random_graph):
        """Test that identical inputs give identical outputs."""
        vertices, edges = random_graph()
        assert bfs(edges, vertices[0]) == bfs(list(edges), vertices[0])
        assert dfs(edges, vertices[0]) == dfs(list(edges), vertices[0])
