"""
Algorithm interfaces for shortest-path search.

Keeps the search strategies separate from the queue implementations they run
on and from the benchmarking harness that drives them.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Tuple, Union

import numpy as np

from .graph import Graph, Node

Distance = Union[int, float]


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: Node) -> List[Distance]:
        """
        Compute shortest-path costs from source to every node.

        Returns:
            List indexed by node; unreachable nodes hold ``INFINITY``.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: Node
    ) -> Tuple[List[Distance], Dict[Node, Node]]:
        """
        Compute shortest-path costs plus the predecessor chain for each node.

        Returns:
            (dist, prev) where dist is the cost list and prev records parents.
            The source and unreachable nodes have no entry in prev.
        """
        raise NotImplementedError


class PointToPointEngine(ABC):
    """
    Interface for a single source -> target distance query.
    """

    @abstractmethod
    def distance(self, graph: Graph, source: Node, target: Node) -> Distance:
        """
        Shortest-path cost from source to target, ``INFINITY`` if unreachable.
        """
        raise NotImplementedError


class AllPairsEngine(ABC):
    """
    Interface for dense all-pairs shortest-path computation.
    """

    @abstractmethod
    def distance_matrix(self, graph: Graph) -> np.ndarray:
        """
        Return an n x n float64 matrix; entry [i, j] is the cost i -> j.

        Unreachable pairs hold ``inf``. Integer costs below 2**53 are exact.
        """
        raise NotImplementedError
