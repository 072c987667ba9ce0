"""
Priority queue interface shared by every search in sp_algo.

Keys are node ids, priorities are tentative distances. Implementations differ
in whether ``insert`` on a key that is already queued performs a real
decrease-key or leaves a shadow entry behind for lazy deletion.
"""

from abc import ABC, abstractmethod
from typing import NamedTuple

from ..errors import EmptyQueue


class QueueEntry(NamedTuple):
    key: int
    priority: int


class PriorityQueue(ABC):
    """
    Min-priority queue over integer keys.

    Contract:
        insert(key, priority): add an entry. When ``supports_decrease_key`` is
            true and ``key`` is already queued with a strictly greater
            priority, the entry is lowered in place; an equal or greater
            priority for a queued key is ignored.
        extract_min(): remove and return the smallest entry. Ties are broken
            deterministically per implementation.
        peek_min(): return the smallest entry without removing it.
        is_empty(): true when no live entry remains.

    extract_min and peek_min raise EmptyQueue on an empty queue.
    """

    supports_decrease_key: bool = True

    @abstractmethod
    def insert(self, key: int, priority: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def extract_min(self) -> QueueEntry:
        raise NotImplementedError

    @abstractmethod
    def peek_min(self) -> QueueEntry:
        raise NotImplementedError

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored entries, stale shadow entries included."""
        raise NotImplementedError

    def _raise_empty(self, operation: str) -> None:
        raise EmptyQueue(f"{operation} on empty {type(self).__name__}")
