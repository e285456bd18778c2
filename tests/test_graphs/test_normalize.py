"""Tests for edge classification and adjacency construction."""

from graphdesk.graphs import Edge, Vertex, build_adjacency, classify_edges


class TestClassifyEdges:
    """Tests for classify_edges."""

    def test_plain_edge(self):
        """Test that a lone edge has neither flag."""
        (c,) = classify_edges([("A", "B")])
        assert not c.is_self_loop
        assert not c.is_bidirectional

    def test_bidirectional_pair(self):
        """Test that both halves of a reversed pair are flagged."""
        flags = classify_edges([("A", "B"), ("B", "C"), ("B", "A")])
        assert [c.is_bidirectional for c in flags] == [True, False, True]

    def test_self_loop_never_bidirectional(self):
        """Test that a self-loop is only flagged as a self-loop."""
        (c,) = classify_edges([("A", "A")])
        assert c.is_self_loop
        assert not c.is_bidirectional

    def test_mixed_representations(self):
        """Test classification across string and object endpoints."""
        edges = [
            {"source": {"id": "A"}, "target": {"id": "B"}},
            Edge(Vertex("B"), "A"),
        ]
        flags = classify_edges(edges)
        assert all(c.is_bidirectional for c in flags)
        assert flags[0].source == "A"
        assert flags[1].target == "A"

    def test_idempotent(self):
        """Test that classifying twice gives identical flags."""
        edges = [("A", "B"), ("B", "A"), ("C", "C"), ("A", "C", 2)]
        first = classify_edges(edges)
        second = classify_edges(edges)
        assert first == second

    def test_reclassify_after_edit(self):
        """Test that flags follow the current edge set."""
        edges = [("A", "B"), ("B", "A")]
        assert classify_edges(edges)[0].is_bidirectional
        assert not classify_edges(edges[:1])[0].is_bidirectional

    def test_preserves_weight(self):
        """Test that weights survive classification."""
        (c,) = classify_edges([("A", "B", 7)])
        assert c.weight == 7


    def test_string_keys_conflate_int_and_str_ids(self):
        """Test the documented key collision between 1 and "1"."""
        flags = classify_edges([(1, "2"), ("2", "1")])
        assert [c.is_bidirectional for c in flags] == [True, True]


class TestBuildAdjacency:
    """Tests for build_adjacency."""

    def test_directed(self):
        """Test that directed graphs only record forward edges."""
        adj = build_adjacency([("A", "B", 2), ("B", "C")], directed=True)
        assert adj == {"A": [("B", 2)], "B": [("C", 1)], "C": []}

    def test_undirected(self):
        """Test that undirected graphs record both directions."""
        adj = build_adjacency([("A", "B", 2)], directed=False)
        assert adj == {"A": [("B", 2)], "B": [("A", 2)]}

    def test_insertion_order(self):
        """Test that neighbors follow edge insertion order."""
        adj = build_adjacency([("A", "Z"), ("A", "B"), ("A", "M")], directed=True)
        assert [v for v, _ in adj["A"]] == ["Z", "B", "M"]

    def test_parallel_edges_kept(self):
        """Test that parallel edges each contribute an entry."""
        adj = build_adjacency([("A", "B", 3), ("A", "B", 1)], directed=True)
        assert adj["A"] == [("B", 3), ("B", 1)]

    def test_self_loop_single_entry(self):
        """Test that an undirected self-loop is recorded once."""
        adj = build_adjacency([("A", "A")], directed=False)
        assert adj == {"A": [("A", 1)]}

    def test_isolated_vertices(self):
        """Test that listed vertices appear even without edges."""
        adj = build_adjacency([("A", "B")], directed=True, vertices=["C", "A", "B"])
        assert list(adj) == ["C", "A", "B"]
        assert adj["C"] == []

    def test_unweighted(self):
        """Test that unweighted graphs use weight 1 everywhere."""
        adj = build_adjacency([("A", "B", 9)], directed=True, weighted=False)
        assert adj["A"] == [("B", 1)]

    def test_input_not_mutated(self):
        """Test that the caller's edge list is left unchanged."""
        edges = [("A", "B", 1), ("B", "C", 2)]
        build_adjacency(edges, directed=False)
        assert edges == [("A", "B", 1), ("B", "C", 2)]
