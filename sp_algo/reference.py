"""
Persisted reference distances.

A reference file is a CSV with columns ``source,node,distance``: one row per
node reachable from each fixed source, sources and nodes in ascending order.
Unreachable nodes are omitted. Every queue kind and search mode is expected
to reproduce the file exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Sequence, Union
import csv

from .algorithms import Distance
from .errors import INFINITY

FIELDNAMES = ["source", "node", "distance"]

DistanceRow = Union[Sequence[Distance], Mapping[int, Distance]]


@dataclass(frozen=True)
class Mismatch:
    source: int
    node: int
    expected: Distance
    actual: Distance


def _items(row: DistanceRow):
    if isinstance(row, Mapping):
        return sorted(row.items())
    return enumerate(row)


def write_reference(path: Path, results: Mapping[int, DistanceRow]) -> None:
    """Write the reachable distances of each source in ``results``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        for source in sorted(results):
            for node, distance in _items(results[source]):
                if distance == INFINITY:
                    continue
                writer.writerow({"source": source, "node": node, "distance": int(distance)})


def read_reference(path: Path) -> Dict[int, Dict[int, int]]:
    """Return source -> (node -> distance) for every row in the file."""
    reference: Dict[int, Dict[int, int]] = {}
    with Path(path).open(newline="") as f:
        for row in csv.DictReader(f):
            source = int(row["source"])
            reference.setdefault(source, {})[int(row["node"])] = int(row["distance"])
    return reference


def diff_reference(
    expected: Mapping[int, Mapping[int, int]],
    actual: Mapping[int, DistanceRow],
) -> List[Mismatch]:
    """
    Compare computed distances against a reference.

    Only sources present in ``expected`` are checked. A node missing from the
    reference is expected to be unreachable.
    """
    mismatches: List[Mismatch] = []
    for source in sorted(expected):
        want = expected[source]
        got = dict(_items(actual.get(source, {})))
        for node in sorted(set(want) | set(got)):
            w = want.get(node, INFINITY)
            g = got.get(node, INFINITY)
            if w != g:
                mismatches.append(Mismatch(source, node, w, g))
    return mismatches
