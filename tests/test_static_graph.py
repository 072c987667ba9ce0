"""
Unit tests for StaticGraph.
"""

import math

import pytest

from sp_algo import Edge, InvalidWeight, NodeOutOfRange, StaticGraph


def test_outgoing_keeps_edge_order_and_parallel_edges():
    g = StaticGraph(3, [(0, 2, 5), (1, 2, 3), (0, 1, 1), (0, 2, 4)])

    assert g.node_count == 3
    assert g.edge_count == 4
    assert list(g.outgoing(0)) == [(2, 5), (1, 1), (2, 4)]
    assert list(g.outgoing(1)) == [(2, 3)]
    assert list(g.outgoing(2)) == []
    assert g.out_degree(0) == 3


def test_accepts_edge_objects_and_lists_edges():
    g = StaticGraph(2, [Edge(0, 1, 7), Edge(1, 0, 2)])

    assert list(g.edges()) == [Edge(0, 1, 7), Edge(1, 0, 2)]
    assert list(g.nodes()) == [0, 1]


def test_outgoing_is_read_only():
    g = StaticGraph(2, [(0, 1, 1)])

    out = g.outgoing(0)
    with pytest.raises((TypeError, AttributeError)):
        out.append((1, 2))  # type: ignore[attr-defined]

    assert list(g.outgoing(0)) == [(1, 1)]


def test_reverse_view_flips_edges_and_is_cached():
    g = StaticGraph(3, [(0, 1, 1), (1, 2, 2), (0, 2, 5)])

    rev = g.reverse
    assert rev is g.reverse
    assert sorted(rev.outgoing(2)) == [(0, 5), (1, 2)]
    assert list(rev.outgoing(1)) == [(0, 1)]
    assert list(rev.outgoing(0)) == []
    # Reversing twice gives back the original graph object.
    assert rev.reverse is g


def test_empty_and_single_node_graphs():
    empty = StaticGraph(0)
    assert empty.node_count == 0
    assert list(empty.edges()) == []

    single = StaticGraph(1)
    assert list(single.outgoing(0)) == []


@pytest.mark.parametrize("weight", [-1, math.inf, math.nan, 1.5, "3", None, True])
def test_invalid_weights_rejected(weight):
    with pytest.raises(InvalidWeight):
        StaticGraph(2, [(0, 1, weight)])


def test_integral_float_weight_normalised_to_int():
    g = StaticGraph(2, [(0, 1, 4.0)])
    (target, weight), = g.outgoing(0)
    assert target == 1
    assert weight == 4 and isinstance(weight, int)


@pytest.mark.parametrize("edge", [(0, 2, 1), (-1, 0, 1), (0, 5, 1), ("a", 0, 1)])
def test_edge_endpoints_must_be_in_range(edge):
    with pytest.raises(NodeOutOfRange):
        StaticGraph(2, [edge])


def test_invalid_weight_is_a_value_error():
    # Callers that only know the builtin hierarchy can still catch it.
    with pytest.raises(ValueError):
        StaticGraph(2, [(0, 1, -3)])


def test_coordinates_passed_through():
    g = StaticGraph(2, [(0, 1, 1)], coordinates=[(10, 20), (30, 40)])
    assert g.coordinates == ((10, 20), (30, 40))
    assert g.reverse.coordinates == g.coordinates

    with pytest.raises(ValueError):
        StaticGraph(2, [], coordinates=[(0, 0)])


def test_negative_node_count_rejected():
    with pytest.raises(ValueError):
        StaticGraph(-1)


@pytest.mark.parametrize(
    "edges",
    [
        [(0, 1, 2**63)],
        [(0, 1, 2**53 + 1)],
        [(0, 1, 2**53), (1, 2, 1), (2, 3, 1)],
    ],
)
def test_total_weight_bounded(edges):
    with pytest.raises(InvalidWeight):
        StaticGraph(4, edges)


def test_total_weight_at_bound_accepted():
    g = StaticGraph(4, [(0, 1, 2**53 - 2), (1, 2, 1), (2, 3, 1)])
    assert sum(w for _, w in g.outgoing(0)) == 2**53 - 2
