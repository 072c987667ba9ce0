"""Priority queue implementations and the queue-kind selector."""

from enum import Enum
from typing import Callable, Dict, Union

from .base import PriorityQueue, QueueEntry
from .dary_heap import SUPPORTED_ARITIES, DaryHeap, LazyDaryHeap
from .pairing_heap import PairingHeap
from .sorted_list import SortedListQueue


class QueueKind(Enum):
    """
    Selector for the priority queue a search runs on.

    HEAP<d>: d-ary heap with key lookup and true decrease-key.
    LAZY_HEAP<d>: d-ary heap without lookup; stale entries are skipped.
    SORTED_LIST: sorted sequence baseline.
    PAIRING: pairing heap.
    """

    SORTED_LIST = "sorted_list"
    HEAP2 = "heap2"
    HEAP4 = "heap4"
    HEAP8 = "heap8"
    HEAP16 = "heap16"
    LAZY_HEAP2 = "lazy_heap2"
    LAZY_HEAP4 = "lazy_heap4"
    LAZY_HEAP8 = "lazy_heap8"
    LAZY_HEAP16 = "lazy_heap16"
    PAIRING = "pairing"


_FACTORIES: Dict[QueueKind, Callable[[], PriorityQueue]] = {
    QueueKind.SORTED_LIST: SortedListQueue,
    QueueKind.PAIRING: PairingHeap,
}
for _d in SUPPORTED_ARITIES:
    _FACTORIES[QueueKind(f"heap{_d}")] = lambda d=_d: DaryHeap(d)
    _FACTORIES[QueueKind(f"lazy_heap{_d}")] = lambda d=_d: LazyDaryHeap(d)


def resolve_queue_kind(kind: Union[QueueKind, str]) -> QueueKind:
    """Accept a QueueKind or its string value."""
    if isinstance(kind, QueueKind):
        return kind
    try:
        return QueueKind(kind)
    except ValueError:
        valid = ", ".join(k.value for k in QueueKind)
        raise ValueError(f"Unknown queue kind {kind!r}; expected one of: {valid}") from None


def make_queue(kind: Union[QueueKind, str]) -> PriorityQueue:
    """Return a fresh, empty queue of the given kind."""
    return _FACTORIES[resolve_queue_kind(kind)]()


__all__ = [
    "PriorityQueue",
    "QueueEntry",
    "QueueKind",
    "DaryHeap",
    "LazyDaryHeap",
    "SortedListQueue",
    "PairingHeap",
    "SUPPORTED_ARITIES",
    "make_queue",
    "resolve_queue_kind",
]
