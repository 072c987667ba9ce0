"""
Directed, weighted graph abstraction for sp_algo.

Nodes are dense integers in [0, n).
Edges are directed: u -> v with a non-negative integer weight.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

Node = int


@dataclass(frozen=True)
class Edge:
    """Directed edge ``source -> target``."""

    source: Node
    target: Node
    weight: int


class Graph(ABC):
    """Immutable directed, weighted graph over dense integer nodes."""

    @property
    @abstractmethod
    def node_count(self) -> int:
        """Number of nodes n; valid node ids are 0..n-1."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node: Node) -> Sequence[Tuple[Node, int]]:
        """
        Outgoing neighbours and edge weights for a given node, in edge order.

        Returns: sequence of (target, weight). Parallel edges are kept.
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def reverse(self) -> "Graph":
        """Read-only view with every edge flipped."""
        raise NotImplementedError

    def nodes(self) -> Iterable[Node]:
        """Return all nodes in the graph."""
        return range(self.node_count)

    def edges(self) -> Iterator[Edge]:
        for u in self.nodes():
            for v, w in self.outgoing(u):
                yield Edge(u, v, w)
