"""
All-pairs: repeated Dijkstra fan-out versus dense matrix relaxation.
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from sp_algo import (
    AllPairsMode,
    MatrixRelaxationEngine,
    QueueKind,
    RepeatedDijkstraEngine,
    StaticGraph,
    compute_all_pairs,
    compute_single_source,
)


def test_dijkstra_and_matrix_modes_agree(random_graphs):
    by_dijkstra = compute_all_pairs(random_graphs, QueueKind.HEAP4, AllPairsMode.DIJKSTRA)
    by_matrix = compute_all_pairs(random_graphs, mode=AllPairsMode.MATRIX)

    assert by_dijkstra.shape == (random_graphs.node_count, random_graphs.node_count)
    assert np.array_equal(by_dijkstra, by_matrix)


def test_rows_match_single_source(random_graphs):
    matrix = compute_all_pairs(random_graphs, QueueKind.PAIRING, "dijkstra", max_workers=2)
    for source in (0, random_graphs.node_count - 1):
        row = compute_single_source(random_graphs, source, QueueKind.PAIRING)
        assert list(matrix[source]) == [row[v] for v in range(random_graphs.node_count)]


def test_matrix_initialisation_rules():
    # Parallel edges keep the minimum, self-loops never beat the zero diagonal.
    g = StaticGraph(3, [(0, 1, 9), (0, 1, 4), (1, 1, 3), (1, 2, 1)])
    dist = MatrixRelaxationEngine().distance_matrix(g)

    expected = np.array(
        [
            [0.0, 4.0, 5.0],
            [np.inf, 0.0, 1.0],
            [np.inf, np.inf, 0.0],
        ]
    )
    assert np.array_equal(dist, expected)


@pytest.mark.parametrize("mode", list(AllPairsMode))
def test_single_node_and_disconnected_pairs(mode):
    assert np.array_equal(compute_all_pairs(StaticGraph(1), mode=mode), np.zeros((1, 1)))

    two = compute_all_pairs(StaticGraph(2), mode=mode)
    assert np.array_equal(two, np.array([[0.0, np.inf], [np.inf, 0.0]]))


@pytest.mark.parametrize("mode", list(AllPairsMode))
def test_modes_exact_at_largest_total_weight(mode):
    g = StaticGraph(4, [(0, 1, 2**53 - 2), (1, 2, 1), (2, 3, 1)])
    by_dijkstra = compute_all_pairs(g, QueueKind.HEAP2, AllPairsMode.DIJKSTRA)
    by_matrix = compute_all_pairs(g, mode=AllPairsMode.MATRIX)

    assert np.array_equal(by_dijkstra, by_matrix)
    assert int(by_matrix[0, 3]) == 2**53
    assert int(by_matrix[0, 2]) == 2**53 - 1


@pytest.mark.parametrize("mode", list(AllPairsMode))
def test_empty_graph(mode):
    assert compute_all_pairs(StaticGraph(0), mode=mode).shape == (0, 0)


def test_external_executor_and_small_chunks(random_graphs):
    expected = MatrixRelaxationEngine().distance_matrix(random_graphs)
    with ThreadPoolExecutor(max_workers=3) as pool:
        engine = RepeatedDijkstraEngine(QueueKind.LAZY_HEAP4, executor=pool, chunk_size=5)
        assert np.array_equal(engine.distance_matrix(random_graphs), expected)


def test_process_pool_matches_threads(diamond_graph):
    threads = RepeatedDijkstraEngine(QueueKind.HEAP2, chunk_size=1).distance_matrix(diamond_graph)
    processes = RepeatedDijkstraEngine(
        QueueKind.HEAP2, max_workers=2, use_processes=True, chunk_size=2
    ).distance_matrix(diamond_graph)
    assert np.array_equal(threads, processes)
    assert list(threads[0]) == [0.0, 1.0, 3.0, 4.0]


def test_chunk_size_must_be_positive():
    with pytest.raises(ValueError):
        RepeatedDijkstraEngine(chunk_size=0)
