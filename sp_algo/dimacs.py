"""
Readers for the 9th DIMACS Implementation Challenge graph files.

``.gr`` files hold a ``p sp <n> <m>`` header and ``a <u> <v> <w>`` arcs;
``.co`` files hold ``v <id> <x> <y>`` coordinates. Ids in the files are
1-based and are shifted to the dense ``[0, n)`` node space here. Lines starting
with ``c`` are comments.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union
import logging

from .errors import DimacsFormatError
from .static_graph import StaticGraph

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _records(path: Path, tag: str) -> Iterator[Tuple[int, str, List[str]]]:
    """Yield (line number, raw line, fields) for every line starting with ``tag`` or ``p``."""
    with path.open() as f:
        for line_no, line in enumerate(f, start=1):
            fields = line.split()
            if not fields or fields[0] == "c":
                continue
            if fields[0] not in (tag, "p"):
                raise DimacsFormatError(path, line_no, line, f"unexpected record type {fields[0]!r}")
            yield line_no, line, fields


def _ints(path: Path, line_no: int, line: str, fields: List[str], count: int) -> List[int]:
    if len(fields) != count:
        raise DimacsFormatError(path, line_no, line, f"expected {count} fields, got {len(fields)}")
    try:
        return [int(x) for x in fields]
    except ValueError:
        raise DimacsFormatError(path, line_no, line, "non-integer field") from None


def read_arcs(path: PathLike) -> Tuple[Optional[int], List[Tuple[int, int, int]]]:
    """Return (declared node count or None, 0-based arc list) from a ``.gr`` file."""
    path = Path(path)
    declared: Optional[int] = None
    declared_arcs: Optional[int] = None
    arcs: List[Tuple[int, int, int]] = []
    for line_no, line, fields in _records(path, "a"):
        if fields[0] == "p":
            if len(fields) != 4 or fields[1] != "sp":
                raise DimacsFormatError(path, line_no, line, "expected 'p sp <nodes> <arcs>'")
            declared, declared_arcs = _ints(path, line_no, line, fields[2:], 2)
            continue
        u, v, w = _ints(path, line_no, line, fields[1:], 3)
        if u < 1 or v < 1:
            raise DimacsFormatError(path, line_no, line, "node ids are 1-based")
        arcs.append((u - 1, v - 1, w))

    if declared_arcs is not None and declared_arcs != len(arcs):
        logger.warning("%s declares %d arcs but contains %d", path, declared_arcs, len(arcs))
    return declared, arcs


def read_coordinates(path: PathLike) -> List[Tuple[int, int]]:
    """Return coordinates ordered by node id from a ``.co`` file."""
    path = Path(path)
    by_id = {}
    for line_no, line, fields in _records(path, "v"):
        if fields[0] == "p":
            continue
        node, x, y = _ints(path, line_no, line, fields[1:], 3)
        if node < 1:
            raise DimacsFormatError(path, line_no, line, "node ids are 1-based")
        if node - 1 in by_id:
            raise DimacsFormatError(path, line_no, line, f"duplicate coordinates for node {node}")
        by_id[node - 1] = (x, y, line_no, line)

    missing = [i for i in range(len(by_id)) if i not in by_id]
    if missing:
        # Report the first id that lies past the gap.
        _, _, line_no, line = by_id[min(i for i in by_id if i >= len(by_id))]
        raise DimacsFormatError(path, line_no, line, f"coordinates missing for node {missing[0] + 1}")
    return [by_id[i][:2] for i in range(len(by_id))]


def load_graph(gr_path: PathLike, co_path: Optional[PathLike] = None) -> StaticGraph:
    """
    Build a StaticGraph from a ``.gr`` file and optional ``.co`` file.

    The node count is taken from the ``p`` header, or from the coordinates, or
    from the largest id seen, in that order of preference.
    """
    declared, arcs = read_arcs(gr_path)
    coordinates = read_coordinates(co_path) if co_path is not None else None

    if declared is not None:
        n = declared
    elif coordinates is not None:
        n = len(coordinates)
    else:
        n = 1 + max((max(u, v) for u, v, _ in arcs), default=-1)

    logger.debug("loaded %s: %d nodes, %d arcs", gr_path, n, len(arcs))
    return StaticGraph(n, arcs, coordinates)
