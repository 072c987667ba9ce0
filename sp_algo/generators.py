"""
Seeded synthetic graphs for tests and benchmarks when no DIMACS data is at hand.
"""

from typing import List, Optional, Tuple
import random

from .static_graph import StaticGraph


def random_graph(
    node_count: int,
    edge_count: int,
    seed: int = 0,
    max_weight: int = 100,
    rng: Optional[random.Random] = None,
) -> StaticGraph:
    """Uniform random directed multigraph; weights drawn from ``0..max_weight``."""
    rng = rng or random.Random(seed)
    edges: List[Tuple[int, int, int]] = []
    if node_count > 0:
        for _ in range(edge_count):
            u = rng.randrange(node_count)
            v = rng.randrange(node_count)
            edges.append((u, v, rng.randint(0, max_weight)))
    return StaticGraph(node_count, edges)


def grid_graph(rows: int, cols: int, seed: int = 0, max_weight: int = 100) -> StaticGraph:
    """
    Road-like grid: each cell links to its four neighbours in both directions
    with independently drawn weights in ``1..max_weight``.
    """
    rng = random.Random(seed)
    edges: List[Tuple[int, int, int]] = []
    coordinates = []
    for r in range(rows):
        for c in range(cols):
            u = r * cols + c
            coordinates.append((c, r))
            if c + 1 < cols:
                edges.append((u, u + 1, rng.randint(1, max_weight)))
                edges.append((u + 1, u, rng.randint(1, max_weight)))
            if r + 1 < rows:
                edges.append((u, u + cols, rng.randint(1, max_weight)))
                edges.append((u + cols, u, rng.randint(1, max_weight)))
    return StaticGraph(rows * cols, edges, coordinates)
