import pytest

from sp_algo import StaticGraph
from sp_algo.generators import random_graph


@pytest.fixture
def diamond_graph() -> StaticGraph:
    """0->1 (1), 1->2 (2), 0->2 (5), 2->3 (1): distances from 0 are 0, 1, 3, 4."""
    return StaticGraph(4, [(0, 1, 1), (1, 2, 2), (0, 2, 5), (2, 3, 1)])


@pytest.fixture(params=[(1, 30, 60), (2, 60, 240), (3, 80, 200), (4, 40, 400)])
def random_graphs(request) -> StaticGraph:
    """Small seeded random multigraphs with zero weights and self-loops allowed."""
    seed, nodes, edges = request.param
    return random_graph(nodes, edges, seed=seed, max_weight=20)
