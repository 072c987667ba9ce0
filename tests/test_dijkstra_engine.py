"""
Unit tests for the queue-generic single-source Dijkstra.
"""

import pytest

from sp_algo import (
    INFINITY,
    NodeOutOfRange,
    QueueDijkstraEngine,
    QueueKind,
    SearchBudget,
    SearchTimeout,
    StaticGraph,
    compute_single_source,
    make_queue,
    shortest_route,
)
from sp_algo.dijkstra_engine import DijkstraSearch
from sp_algo.generators import grid_graph


@pytest.mark.parametrize("kind", list(QueueKind))
def test_dijkstra_basic_paths(diamond_graph, kind):
    dist = compute_single_source(diamond_graph, 0, kind)
    # Shortest 0->2 is 0->1->2 with cost 3, not the direct edge of cost 5.
    assert dist == {0: 0, 1: 1, 2: 3, 3: 4}


def test_dijkstra_unreachable_node_is_infinite():
    g = StaticGraph(3, [(0, 1, 2)])

    engine = QueueDijkstraEngine(QueueKind.HEAP2)
    dist = engine.shortest_path_costs(g, 0)

    assert dist[0] == 0
    assert dist[1] == 2
    assert dist[2] == INFINITY


def test_single_node_graph_has_zero_distance():
    dist = compute_single_source(StaticGraph(1), 0, QueueKind.PAIRING)
    assert dist == {0: 0}


def test_all_queue_kinds_agree(random_graphs):
    reference = compute_single_source(random_graphs, 0, QueueKind.SORTED_LIST)
    for kind in QueueKind:
        assert compute_single_source(random_graphs, 0, kind) == reference, kind


@pytest.mark.parametrize("kind", list(QueueKind))
def test_settle_order_is_monotone(random_graphs, kind):
    search = DijkstraSearch(random_graphs, 0, make_queue(kind)).run()

    settled = [search.dist[u] for u in search.order]
    assert settled == sorted(settled)
    # Every reachable node is settled exactly once.
    reachable = [u for u, d in enumerate(search.dist) if d != INFINITY]
    assert sorted(search.order) == reachable


def test_repeated_runs_are_identical(random_graphs):
    engine = QueueDijkstraEngine(QueueKind.LAZY_HEAP8)
    first = engine.search(random_graphs, 1)
    second = engine.search(random_graphs, 1)

    assert first.dist == second.dist
    assert first.order == second.order
    assert first.prev == second.prev


def test_predecessors_form_shortest_paths(random_graphs):
    dist, prev = QueueDijkstraEngine(QueueKind.HEAP4).shortest_paths(random_graphs, 0)

    assert 0 not in prev
    for v, u in prev.items():
        weights = [w for t, w in random_graphs.outgoing(u) if t == v]
        assert dist[u] + min(weights) == dist[v]


def test_shortest_route_on_diamond(diamond_graph):
    assert shortest_route(diamond_graph, 0, 3) == [0, 1, 2, 3]
    assert shortest_route(diamond_graph, 0, 0) == [0]
    assert shortest_route(diamond_graph, 3, 0) == []


def test_source_out_of_range_fails_before_search():
    g = StaticGraph(2, [(0, 1, 1)])
    with pytest.raises(NodeOutOfRange):
        compute_single_source(g, 2)
    with pytest.raises(NodeOutOfRange):
        compute_single_source(g, -1)


def test_node_budget_raises_timeout():
    g = grid_graph(10, 10, seed=3)
    engine = QueueDijkstraEngine(QueueKind.HEAP2, budget=SearchBudget(max_settled=5))
    with pytest.raises(SearchTimeout):
        engine.shortest_path_costs(g, 0)

    # A budget large enough for the whole graph changes nothing.
    roomy = QueueDijkstraEngine(QueueKind.HEAP2, budget=SearchBudget(max_settled=100))
    assert roomy.shortest_path_costs(g, 0) == QueueDijkstraEngine(QueueKind.HEAP2).shortest_path_costs(g, 0)


def test_zero_second_budget_raises_timeout():
    g = grid_graph(5, 5, seed=1)
    engine = QueueDijkstraEngine(QueueKind.PAIRING, budget=SearchBudget(max_seconds=-1.0))
    with pytest.raises(SearchTimeout):
        engine.shortest_path_costs(g, 0)


def test_search_counts_work(diamond_graph):
    search = QueueDijkstraEngine(QueueKind.HEAP2).search(diamond_graph, 0)
    assert search.extractions == 4
    assert search.relaxations == 4
