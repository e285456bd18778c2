"""Pytest configuration and shared fixtures for graphdesk tests.

This module provides:
- A deterministic numpy RNG fixture
- A random graph factory used by the property-style tests
"""

import os
from typing import Callable, List, Tuple

import numpy as np
import pytest


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def random_graph(rng: np.random.Generator) -> Callable[..., Tuple[List[str], List[Tuple[str, str, int]]]]:
    """Factory for small random graphs with integer weights in [1, max_weight].

    Self-loops and parallel edges are allowed on purpose.
    """

    def make(n_vertices: int = 6, n_edges: int = 9, max_weight: int = 9):
        vertices = [f"v{i}" for i in range(n_vertices)]
        edges = []
        for _ in range(n_edges):
            u, v = rng.integers(0, n_vertices, size=2)
            w = int(rng.integers(1, max_weight + 1))
            edges.append((vertices[u], vertices[v], w))
        return vertices, edges

    return make
