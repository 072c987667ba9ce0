"""
Error kinds raised by sp_algo.

Construction-time problems (bad weights, bad node ids) fail fast before any
search state exists. An unreachable target is not an error: searches report
it as ``INFINITY``.
"""

import math

INFINITY = math.inf


class SearchError(Exception):
    """Base class for every error raised by this package."""


class EmptyQueue(SearchError, IndexError):
    """extract-min or peek-min on an empty priority queue."""


class InvalidWeight(SearchError, ValueError):
    """Edge weight that is negative, not an integer, or pushes the graph total past 2**53."""


class NodeOutOfRange(SearchError, IndexError):
    """Node identifier outside ``[0, n)``."""

    def __init__(self, node: object, node_count: int) -> None:
        super().__init__(f"node {node!r} outside [0, {node_count})")
        self.node = node
        self.node_count = node_count


class SearchTimeout(SearchError, RuntimeError):
    """A search exceeded its node or wall-clock budget."""


class DimacsFormatError(SearchError, ValueError):
    """Malformed line in a DIMACS ``.gr`` or ``.co`` file."""

    def __init__(self, path: object, line_no: int, line: str, reason: str) -> None:
        super().__init__(f"{path}:{line_no}: {reason}: {line.strip()!r}")
        self.path = path
        self.line_no = line_no
        self.line = line
        self.reason = reason
