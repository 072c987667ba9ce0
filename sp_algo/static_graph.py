"""
Concrete immutable graph implementation for sp_algo.

Implements the Graph interface with a compressed adjacency layout: one offset
array plus parallel target and weight arrays, so continental road networks fit
in a few flat buffers instead of millions of small per-node containers.
"""

from __future__ import annotations

from array import array
from functools import cached_property
from typing import Iterable, Optional, Sequence, Tuple, Union
import math
import numbers

from .errors import InvalidWeight, NodeOutOfRange
from .graph import Edge, Graph, Node

# Largest total edge weight a graph may carry. Every shortest path is simple,
# so its cost is bounded by the total and stays exact in a float64 matrix.
MAX_TOTAL_WEIGHT = 2**53

EdgeLike = Union[Edge, Tuple[int, int, int]]
Coordinate = Tuple[int, int]


def check_node(graph: Graph, node: object) -> Node:
    """Return ``node`` as a plain int, or raise NodeOutOfRange."""
    if isinstance(node, bool) or not isinstance(node, numbers.Integral):
        raise NodeOutOfRange(node, graph.node_count)
    index = int(node)
    if not 0 <= index < graph.node_count:
        raise NodeOutOfRange(node, graph.node_count)
    return index


def check_weight(weight: object) -> int:
    """Normalise an edge weight to a non-negative int, or raise InvalidWeight."""
    if isinstance(weight, bool):
        raise InvalidWeight(f"edge weight must be a number, got {weight!r}")
    if isinstance(weight, numbers.Integral):
        value = int(weight)
    elif isinstance(weight, numbers.Real):
        if not math.isfinite(weight) or weight != int(weight):
            raise InvalidWeight(f"edge weight must be a finite integer, got {weight!r}")
        value = int(weight)
    else:
        raise InvalidWeight(f"edge weight must be a number, got {weight!r}")
    if value < 0:
        raise InvalidWeight(f"edge weight must be non-negative, got {weight!r}")
    if value > MAX_TOTAL_WEIGHT:
        raise InvalidWeight(f"edge weight must not exceed 2**53, got {weight!r}")
    return value


class StaticGraph(Graph):
    """
    Directed, weighted graph in compressed sparse row form.

    ``outgoing(u)`` lists the edges of ``u`` in the order they were supplied.
    The reverse view used by bidirectional search is built on first access and
    cached for the lifetime of the graph.
    """

    def __init__(
        self,
        node_count: int,
        edges: Iterable[EdgeLike] = (),
        coordinates: Optional[Sequence[Coordinate]] = None,
    ) -> None:
        if isinstance(node_count, bool) or not isinstance(node_count, numbers.Integral) or node_count < 0:
            raise ValueError(f"node_count must be a non-negative integer, got {node_count!r}")
        n = int(node_count)
        if coordinates is not None and len(coordinates) != n:
            raise ValueError(f"expected {n} coordinates, got {len(coordinates)}")

        self._n = n
        sources = array("q")
        targets = array("q")
        weights = array("q")
        total = 0
        for edge in edges:
            if isinstance(edge, Edge):
                u, v, w = edge.source, edge.target, edge.weight
            else:
                u, v, w = edge
            sources.append(check_node(self, u))
            targets.append(check_node(self, v))
            w = check_weight(w)
            total += w
            if total > MAX_TOTAL_WEIGHT:
                raise InvalidWeight(f"total edge weight exceeds 2**53 at edge {(u, v, w)!r}")
            weights.append(w)

        self._offsets, self._targets, self._weights = _compress(n, sources, targets, weights)
        self._coordinates = tuple(tuple(c) for c in coordinates) if coordinates is not None else None
        self._reverse_of: Optional[StaticGraph] = None

    @classmethod
    def _from_arrays(
        cls,
        n: int,
        offsets: array,
        targets: array,
        weights: array,
        coordinates: Optional[Tuple[Coordinate, ...]],
        reverse_of: StaticGraph,
    ) -> StaticGraph:
        # Trusted internal constructor; inputs were validated by reverse_of.
        graph = cls.__new__(cls)
        graph._n = n
        graph._offsets = offsets
        graph._targets = targets
        graph._weights = weights
        graph._coordinates = coordinates
        graph._reverse_of = reverse_of
        return graph

    # --- Graph interface -----------------------------------------------------

    @property
    def node_count(self) -> int:
        return self._n

    @property
    def edge_count(self) -> int:
        return len(self._targets)

    def outgoing(self, node: Node) -> Sequence[Tuple[Node, int]]:
        start, end = self._offsets[node], self._offsets[node + 1]
        return tuple(zip(self._targets[start:end], self._weights[start:end]))

    def out_degree(self, node: Node) -> int:
        return self._offsets[node + 1] - self._offsets[node]

    @property
    def coordinates(self) -> Optional[Tuple[Coordinate, ...]]:
        """Node coordinates passed through from ingestion; unused by searches."""
        return self._coordinates

    @cached_property
    def reverse(self) -> StaticGraph:
        if self._reverse_of is not None:
            return self._reverse_of
        sources = array("q")
        for u in range(self._n):
            sources.extend([u] * (self._offsets[u + 1] - self._offsets[u]))
        offsets, targets, weights = _compress(self._n, self._targets, sources, self._weights)
        return StaticGraph._from_arrays(self._n, offsets, targets, weights, self._coordinates, self)

    def __repr__(self) -> str:
        return f"StaticGraph(nodes={self._n}, edges={self.edge_count})"


def _compress(n: int, sources: array, targets: array, weights: array) -> tuple[array, array, array]:
    """Counting sort of an edge list into CSR arrays, stable in edge order."""
    offsets = array("q", [0]) * (n + 1)
    for u in sources:
        offsets[u + 1] += 1
    for i in range(n):
        offsets[i + 1] += offsets[i]

    cursor = array("q", offsets[:n]) if n else array("q")
    out_targets = array("q", [0]) * len(targets)
    out_weights = array("q", [0]) * len(weights)
    for u, v, w in zip(sources, targets, weights):
        slot = cursor[u]
        out_targets[slot] = v
        out_weights[slot] = w
        cursor[u] = slot + 1
    return offsets, out_targets, out_weights
