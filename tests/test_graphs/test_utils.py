"""Tests for graph utility functions."""

import numpy as np

from graphdesk.graphs import Edge, adjacency_matrix, edge_weight, node_index_map, reconstruct_path


class TestEdgeWeight:
    """Tests for edge_weight."""

    def test_explicit(self):
        assert edge_weight(Edge("A", "B", 4)) == 4

    def test_missing_defaults_to_one(self):
        assert edge_weight(Edge("A", "B")) == 1

    def test_unweighted(self):
        assert edge_weight(Edge("A", "B", 4), weighted=False) == 1

    def test_zero_kept(self):
        assert edge_weight(Edge("A", "B", 0)) == 0


class TestNodeIndexMap:
    """Tests for node_index_map."""

    def test_first_appearance_order(self):
        """Test that indices follow first appearance."""
        node_to_idx, idx_to_node = node_index_map(["C", "A", "C", "B"])
        assert node_to_idx == {"C": 0, "A": 1, "B": 2}
        assert idx_to_node == ["C", "A", "B"]


class TestReconstructPath:
    """Tests for reconstruct_path."""

    def test_reconstruct_path(self):
        """Test path reconstruction from a parent map."""
        parent = {"A": None, "B": "A", "C": "B"}
        assert reconstruct_path(parent, "C") == ["A", "B", "C"]

    def test_source(self):
        """Test that the source maps to a single-element path."""
        assert reconstruct_path({"A": None}, "A") == ["A"]

    def test_unreachable(self):
        """Test that unknown targets give None."""
        assert reconstruct_path({"A": None}, "Z") is None

    def test_cycle_in_parent_map(self):
        """Test that a looping parent map gives None."""
        assert reconstruct_path({"A": "B", "B": "A"}, "A") is None


class TestAdjacencyMatrix:
    """Tests for adjacency_matrix."""

    def test_undirected_symmetric(self):
        """Test that undirected matrices are symmetric."""
        W = adjacency_matrix([("A", "B", 2), ("B", "C", 3)], ["A", "B", "C"])
        np.testing.assert_array_equal(W, W.T)
        assert W[0, 1] == 2
        assert W[1, 2] == 3
        assert W[0, 2] == 0

    def test_directed(self):
        """Test that directed matrices only fill source rows."""
        W = adjacency_matrix([("A", "B", 2)], ["A", "B"], directed=True)
        np.testing.assert_array_equal(W, np.array([[0.0, 2.0], [0.0, 0.0]]))

    def test_parallel_edges_accumulate(self):
        """Test that parallel edges add up."""
        W = adjacency_matrix([("A", "B", 2), ("A", "B", 5)], ["A", "B"], directed=True)
        assert W[0, 1] == 7

    def test_self_loop_on_diagonal(self):
        """Test that self-loops are counted once."""
        W = adjacency_matrix([("A", "A", 4)], ["A"])
        assert W[0, 0] == 4

    def test_unweighted_and_extra_endpoints(self):
        """Test unweighted matrices and endpoints missing from the vertex list."""
        W = adjacency_matrix([("A", "Z", 9)], ["A"], weighted=False)
        assert W.shape == (2, 2)
        assert W[0, 1] == 1
