"""
Queue-generic Dijkstra for sp_algo.

DijkstraSearch is the shared primitive: a single-source search that can be
advanced one settled node at a time. The single-source engine runs it to
exhaustion, the early-abort engine stops it at the target, and the
bidirectional engine interleaves two of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union
import time

from .algorithms import DijkstraEngine, Distance, PointToPointEngine
from .errors import INFINITY, SearchTimeout
from .graph import Graph, Node
from .queues import PriorityQueue, QueueEntry, QueueKind, make_queue, resolve_queue_kind
from .static_graph import check_node


@dataclass(frozen=True)
class SearchBudget:
    """
    Optional cutoff layered over a search.

    A search that settles more than ``max_settled`` nodes, or runs longer than
    ``max_seconds``, raises SearchTimeout instead of returning a distance.
    """

    max_settled: Optional[int] = None
    max_seconds: Optional[float] = None

    def check(self, settled: int, started: float) -> None:
        if self.max_settled is not None and settled > self.max_settled:
            raise SearchTimeout(f"settled {settled} nodes, budget is {self.max_settled}")
        if self.max_seconds is not None:
            elapsed = time.perf_counter() - started
            if elapsed > self.max_seconds:
                raise SearchTimeout(f"search ran {elapsed:.3f}s, budget is {self.max_seconds}s")


class DijkstraSearch:
    """
    One single-source search over ``graph`` using a fresh ``queue``.

    Nodes move Unvisited -> Frontier (queued, tentative distance) -> Settled
    (extracted, final distance). Because weights are non-negative the
    distance a node has when it is extracted never changes afterwards.
    """

    def __init__(
        self,
        graph: Graph,
        source: Node,
        queue: PriorityQueue,
        budget: Optional[SearchBudget] = None,
    ) -> None:
        n = graph.node_count
        self.graph = graph
        self.source = source
        self.queue = queue
        self.dist: List[Distance] = [INFINITY] * n
        self.settled = bytearray(n)
        self.prev: Dict[Node, Node] = {}
        self.order: List[Node] = []
        self.relaxations = 0
        self._budget = budget
        self._started = time.perf_counter()

        self.dist[source] = 0
        queue.insert(source, 0)

    @property
    def extractions(self) -> int:
        return len(self.order)

    def exhausted(self) -> bool:
        return self.queue.is_empty()

    def top_priority(self) -> Distance:
        """Priority of the next node to settle, ``INFINITY`` when exhausted."""
        if self.queue.is_empty():
            return INFINITY
        return self.queue.peek_min().priority

    def settle_next(self) -> QueueEntry:
        entry = self.queue.extract_min()
        self.settled[entry.key] = 1
        self.order.append(entry.key)
        if self._budget is not None:
            self._budget.check(len(self.order), self._started)
        return entry

    def relax(self, node: Node) -> None:
        """Relax every outgoing edge of a settled node."""
        dist, prev, queue = self.dist, self.prev, self.queue
        base = dist[node]
        for v, w in self.graph.outgoing(node):
            self.relaxations += 1
            candidate = base + w
            if candidate < dist[v]:
                dist[v] = candidate
                prev[v] = node
                queue.insert(v, candidate)

    def run(self, target: Optional[Node] = None) -> DijkstraSearch:
        """Settle nodes until the queue is empty or ``target`` is settled."""
        while not self.queue.is_empty():
            entry = self.settle_next()
            if entry.key == target:
                break
            self.relax(entry.key)
        return self

    def route_to(self, target: Node) -> List[Node]:
        """Node sequence source -> target, empty if target was not reached."""
        if self.dist[target] == INFINITY:
            return []
        route = [target]
        while route[-1] != self.source:
            route.append(self.prev[route[-1]])
        route.reverse()
        return route


class QueueDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra on a selectable priority queue.

    Complexity:
        O((V + E) log V) with the heap-backed queues, O(V^2) with the
        sorted-list queue.
    """

    def __init__(
        self,
        queue_kind: Union[QueueKind, str] = QueueKind.HEAP4,
        budget: Optional[SearchBudget] = None,
    ) -> None:
        self.queue_kind = resolve_queue_kind(queue_kind)
        self.budget = budget

    def search(self, graph: Graph, source: Node) -> DijkstraSearch:
        """Run a full search and return its state (distances, parents, order)."""
        source = check_node(graph, source)
        return DijkstraSearch(graph, source, make_queue(self.queue_kind), self.budget).run()

    def shortest_path_costs(self, graph: Graph, source: Node) -> List[Distance]:
        return self.search(graph, source).dist

    def shortest_paths(
        self, graph: Graph, source: Node
    ) -> Tuple[List[Distance], Dict[Node, Node]]:
        """
        Dijkstra variant that also returns the predecessor map.

        Walking ``prev`` back from any reachable node ends at the source,
        which has no parent of its own.
        """
        result = self.search(graph, source)
        return result.dist, result.prev


class PlainPointToPointEngine(PointToPointEngine):
    """Full single-source search, then read the target's entry."""

    def __init__(
        self,
        queue_kind: Union[QueueKind, str] = QueueKind.HEAP4,
        budget: Optional[SearchBudget] = None,
    ) -> None:
        self._engine = QueueDijkstraEngine(queue_kind, budget)

    def distance(self, graph: Graph, source: Node, target: Node) -> Distance:
        source = check_node(graph, source)
        target = check_node(graph, target)
        return self._engine.shortest_path_costs(graph, source)[target]


class EarlyAbortEngine(PointToPointEngine):
    """
    Dijkstra that stops as soon as the target is settled.

    Gives the same distance as a full search; only the amount of work differs.
    """

    def __init__(
        self,
        queue_kind: Union[QueueKind, str] = QueueKind.HEAP4,
        budget: Optional[SearchBudget] = None,
    ) -> None:
        self.queue_kind = resolve_queue_kind(queue_kind)
        self.budget = budget

    def search(self, graph: Graph, source: Node, target: Node) -> DijkstraSearch:
        source = check_node(graph, source)
        target = check_node(graph, target)
        search = DijkstraSearch(graph, source, make_queue(self.queue_kind), self.budget)
        return search.run(target)

    def distance(self, graph: Graph, source: Node, target: Node) -> Distance:
        target = check_node(graph, target)
        return self.search(graph, source, target).dist[target]
