"""
Entry points used by the benchmarking layer.

Each call validates its node arguments before any search state is allocated,
then dispatches to the engine selected by ``queue_kind`` and ``mode``.
"""

from enum import Enum
from typing import Dict, List, Optional, Type, TypeVar, Union

import numpy as np

from .algorithms import Distance, PointToPointEngine
from .all_pairs import MatrixRelaxationEngine, RepeatedDijkstraEngine
from .bidirectional_engine import BidirectionalEngine
from .dijkstra_engine import (
    DijkstraSearch,
    EarlyAbortEngine,
    PlainPointToPointEngine,
    QueueDijkstraEngine,
    SearchBudget,
)
from .graph import Graph, Node
from .queues import QueueKind, make_queue, resolve_queue_kind
from .static_graph import check_node


class PointToPointMode(Enum):
    """
    PLAIN: full single-source search, then read the target.
    EARLY_ABORT: stop when the target is settled.
    BIDIRECTIONAL: forward and backward searches meeting in the middle.
    """

    PLAIN = "plain"
    EARLY_ABORT = "early_abort"
    BIDIRECTIONAL = "bidirectional"


class AllPairsMode(Enum):
    """
    DIJKSTRA: one single-source search per node, fanned out to workers.
    MATRIX: Floyd–Warshall relaxation of a dense matrix.
    """

    DIJKSTRA = "dijkstra"
    MATRIX = "matrix"


E = TypeVar("E", bound=Enum)


def _resolve_mode(mode: Union[E, str], enum_type: Type[E]) -> E:
    if isinstance(mode, enum_type):
        return mode
    try:
        return enum_type(mode)
    except ValueError:
        valid = ", ".join(m.value for m in enum_type)
        raise ValueError(f"Unknown {enum_type.__name__} {mode!r}; expected one of: {valid}") from None


def compute_single_source(
    graph: Graph,
    source: Node,
    queue_kind: Union[QueueKind, str] = QueueKind.HEAP4,
    budget: Optional[SearchBudget] = None,
) -> Dict[Node, Distance]:
    """Distance from ``source`` to every node; unreachable nodes map to INFINITY."""
    dist = QueueDijkstraEngine(queue_kind, budget).shortest_path_costs(graph, source)
    return dict(enumerate(dist))


def point_to_point_engine(
    queue_kind: Union[QueueKind, str] = QueueKind.HEAP4,
    mode: Union[PointToPointMode, str] = PointToPointMode.EARLY_ABORT,
    budget: Optional[SearchBudget] = None,
) -> PointToPointEngine:
    mode = _resolve_mode(mode, PointToPointMode)
    if mode is PointToPointMode.PLAIN:
        return PlainPointToPointEngine(queue_kind, budget)
    if mode is PointToPointMode.EARLY_ABORT:
        return EarlyAbortEngine(queue_kind, budget)
    return BidirectionalEngine(queue_kind, budget)


def compute_point_to_point(
    graph: Graph,
    source: Node,
    target: Node,
    queue_kind: Union[QueueKind, str] = QueueKind.HEAP4,
    mode: Union[PointToPointMode, str] = PointToPointMode.EARLY_ABORT,
    budget: Optional[SearchBudget] = None,
) -> Distance:
    """Shortest cost source -> target; INFINITY when there is no path."""
    engine = point_to_point_engine(queue_kind, mode, budget)
    return engine.distance(graph, source, target)


def compute_all_pairs(
    graph: Graph,
    queue_kind: Union[QueueKind, str] = QueueKind.HEAP4,
    mode: Union[AllPairsMode, str] = AllPairsMode.DIJKSTRA,
    max_workers: Optional[int] = None,
) -> np.ndarray:
    """Dense n x n distance matrix. ``queue_kind`` is unused by MATRIX mode."""
    mode = _resolve_mode(mode, AllPairsMode)
    queue_kind = resolve_queue_kind(queue_kind)
    if mode is AllPairsMode.MATRIX:
        return MatrixRelaxationEngine().distance_matrix(graph)
    return RepeatedDijkstraEngine(queue_kind, max_workers=max_workers).distance_matrix(graph)


def shortest_route(
    graph: Graph,
    source: Node,
    target: Node,
    queue_kind: Union[QueueKind, str] = QueueKind.HEAP4,
) -> List[Node]:
    """Nodes of one shortest path source -> target, empty if unreachable."""
    source = check_node(graph, source)
    target = check_node(graph, target)
    search = DijkstraSearch(graph, source, make_queue(queue_kind))
    return search.run(target).route_to(target)
