"""Shortest-path search over large static graphs with pluggable priority queues."""

from .algorithms import AllPairsEngine, DijkstraEngine, Distance, PointToPointEngine
from .all_pairs import MatrixRelaxationEngine, RepeatedDijkstraEngine
from .api import (
    AllPairsMode,
    PointToPointMode,
    compute_all_pairs,
    compute_point_to_point,
    compute_single_source,
    shortest_route,
)
from .bidirectional_engine import BidirectionalEngine, BidirectionalResult
from .dijkstra_engine import (
    DijkstraSearch,
    EarlyAbortEngine,
    PlainPointToPointEngine,
    QueueDijkstraEngine,
    SearchBudget,
)
from .dimacs import load_graph
from .errors import (
    INFINITY,
    DimacsFormatError,
    EmptyQueue,
    InvalidWeight,
    NodeOutOfRange,
    SearchError,
    SearchTimeout,
)
from .graph import Edge, Graph, Node
from .queues import QueueKind, make_queue
from .static_graph import StaticGraph

__all__ = [
    "Graph",
    "StaticGraph",
    "Edge",
    "Node",
    "Distance",
    "INFINITY",
    "QueueKind",
    "make_queue",
    "DijkstraEngine",
    "PointToPointEngine",
    "AllPairsEngine",
    "DijkstraSearch",
    "QueueDijkstraEngine",
    "PlainPointToPointEngine",
    "EarlyAbortEngine",
    "BidirectionalEngine",
    "BidirectionalResult",
    "RepeatedDijkstraEngine",
    "MatrixRelaxationEngine",
    "SearchBudget",
    "PointToPointMode",
    "AllPairsMode",
    "compute_single_source",
    "compute_point_to_point",
    "compute_all_pairs",
    "shortest_route",
    "load_graph",
    "SearchError",
    "EmptyQueue",
    "InvalidWeight",
    "NodeOutOfRange",
    "SearchTimeout",
    "DimacsFormatError",
]
