"""
Bidirectional Dijkstra for point-to-point queries.

A forward search from the source over the graph and a backward search from
the target over ``graph.reverse`` are interleaved. Each keeps its own queue
and settled set.

Alternation: the side whose next extraction priority is smaller advances;
on a tie the forward side advances.

Meeting: ``mu`` is the best complete source -> target cost seen so far. It is
lowered whenever a settled node, or the head of an edge being relaxed, already
carries a label from the opposite search.

Stop: once ``top_forward + top_backward >= mu`` no undiscovered path can beat
``mu``, so ``mu`` is the shortest distance (``INFINITY`` if none was found).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .algorithms import Distance, PointToPointEngine
from .dijkstra_engine import DijkstraSearch, SearchBudget
from .errors import INFINITY
from .graph import Graph, Node
from .queues import QueueKind, make_queue, resolve_queue_kind
from .static_graph import check_node


@dataclass
class BidirectionalResult:
    """
    Outcome of one bidirectional query.

    ``meeting`` is ``(x, y)`` where the best path runs source -> x in the
    forward tree, then edge x -> y (or nothing when x == y), then y -> target
    in the backward tree. It is None when no path exists.
    """

    distance: Distance
    forward: DijkstraSearch
    backward: DijkstraSearch
    meeting: Optional[Tuple[Node, Node]]

    @property
    def extractions(self) -> int:
        return self.forward.extractions + self.backward.extractions

    def route(self) -> List[Node]:
        if self.meeting is None:
            return []
        x, y = self.meeting
        head = self.forward.route_to(x)
        tail = self.backward.route_to(y)
        tail.reverse()
        if x == y:
            tail = tail[1:]
        return head + tail


class BidirectionalEngine(PointToPointEngine):
    """Meet-in-the-middle Dijkstra over a selectable priority queue."""

    def __init__(
        self,
        queue_kind: Union[QueueKind, str] = QueueKind.HEAP4,
        budget: Optional[SearchBudget] = None,
    ) -> None:
        self.queue_kind = resolve_queue_kind(queue_kind)
        self.budget = budget

    def distance(self, graph: Graph, source: Node, target: Node) -> Distance:
        return self.search(graph, source, target).distance

    def search(self, graph: Graph, source: Node, target: Node) -> BidirectionalResult:
        source = check_node(graph, source)
        target = check_node(graph, target)

        forward = DijkstraSearch(graph, source, make_queue(self.queue_kind), self.budget)
        backward = DijkstraSearch(graph.reverse, target, make_queue(self.queue_kind), self.budget)

        mu: Distance = INFINITY
        meeting: Optional[Tuple[Node, Node]] = None
        if source == target:
            mu, meeting = 0, (source, source)

        while True:
            top_f = forward.top_priority()
            top_b = backward.top_priority()
            if top_f + top_b >= mu:
                break

            if top_f <= top_b:
                this, other, is_forward = forward, backward, True
            else:
                this, other, is_forward = backward, forward, False

            entry = this.settle_next()
            u, du = entry.key, entry.priority

            across = other.dist[u]
            if du + across < mu:
                mu = du + across
                meeting = (u, u)

            for v, w in this.graph.outgoing(u):
                across = other.dist[v]
                if across == INFINITY:
                    continue
                candidate = du + w + across
                if candidate < mu:
                    mu = candidate
                    meeting = (u, v) if is_forward else (v, u)

            this.relax(u)

        return BidirectionalResult(mu, forward, backward, meeting)
