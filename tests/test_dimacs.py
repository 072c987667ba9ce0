"""
Unit tests for the DIMACS readers.
"""

from pathlib import Path

import pytest

from sp_algo import DimacsFormatError, InvalidWeight, compute_single_source, load_graph
from sp_algo.dimacs import read_arcs, read_coordinates

GR = """c 9th DIMACS Implementation Challenge: Shortest Paths
c tiny sample
p sp 4 4
c
a 1 2 1
a 2 3 2
a 1 3 5
a 3 4 1
"""

CO = """c coordinates
p aux sp co 4
v 1 -73530767 41085396
v 2 -73530538 41086098
v 3 -73519366 41048796
v 4 -73519377 41048654
"""


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


def test_load_graph_shifts_ids_to_zero_based(tmp_path: Path):
    g = load_graph(_write(tmp_path, "tiny.gr", GR), _write(tmp_path, "tiny.co", CO))

    assert g.node_count == 4
    assert list(g.outgoing(0)) == [(1, 1), (2, 5)]
    assert g.coordinates[0] == (-73530767, 41085396)
    assert compute_single_source(g, 0) == {0: 0, 1: 1, 2: 3, 3: 4}


def test_node_count_from_largest_id_without_header(tmp_path: Path):
    declared, arcs = read_arcs(_write(tmp_path, "bare.gr", "a 1 5 3\na 2 1 1\n"))
    assert declared is None
    assert arcs == [(0, 4, 3), (1, 0, 1)]
    assert load_graph(tmp_path / "bare.gr").node_count == 5


def test_header_node_count_wins(tmp_path: Path):
    g = load_graph(_write(tmp_path, "pad.gr", "p sp 10 1\na 1 2 3\n"))
    assert g.node_count == 10


@pytest.mark.parametrize(
    "body",
    [
        "a 1 2\n",
        "a 1 2 x\n",
        "a 0 2 1\n",
        "e 1 2 3\n",
        "p max 3 1\n",
    ],
)
def test_malformed_lines_report_line_number(tmp_path: Path, body: str):
    path = _write(tmp_path, "bad.gr", "c header\n" + body)
    with pytest.raises(DimacsFormatError) as info:
        read_arcs(path)
    assert info.value.line_no == 2


def test_negative_weight_rejected_at_construction(tmp_path: Path):
    with pytest.raises(InvalidWeight):
        load_graph(_write(tmp_path, "neg.gr", "p sp 2 1\na 1 2 -4\n"))


def test_coordinates_must_cover_every_node(tmp_path: Path):
    path = _write(tmp_path, "gap.co", "v 1 0 0\nv 3 1 1\n")
    with pytest.raises(DimacsFormatError) as info:
        read_coordinates(path)
    assert info.value.line_no == 2
    assert "node 2" in info.value.reason


def test_duplicate_coordinates_rejected(tmp_path: Path):
    path = _write(tmp_path, "dup.co", "p aux sp co 2\nv 1 0 0\nv 2 5 5\nv 1 9 9\n")
    with pytest.raises(DimacsFormatError) as info:
        read_coordinates(path)
    assert info.value.line_no == 4
