"""
Sorted-sequence priority queue, the baseline for small frontiers.
"""

from bisect import bisect_left, bisect_right
from typing import Dict, List

from .base import PriorityQueue, QueueEntry


class SortedListQueue(PriorityQueue):
    """
    Entries kept in priority order with the minimum at the tail of the list.

    insert is O(n) (binary search plus a shift), extract_min and peek_min are
    O(1). Equal priorities come out in insertion order. A queued key is
    lowered by removing its old entry and inserting the new one.
    """

    supports_decrease_key = True

    def __init__(self) -> None:
        # _neg is ascending, so priorities are descending towards the tail.
        self._neg: List[int] = []
        self._keys: List[int] = []
        self._priority: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: int) -> bool:
        return key in self._priority

    def insert(self, key: int, priority: int) -> None:
        current = self._priority.get(key)
        if current is not None:
            if priority >= current:
                return
            self._remove(key, current)
        slot = bisect_left(self._neg, -priority)
        self._neg.insert(slot, -priority)
        self._keys.insert(slot, key)
        self._priority[key] = priority

    def _remove(self, key: int, priority: int) -> None:
        lo = bisect_left(self._neg, -priority)
        hi = bisect_right(self._neg, -priority)
        slot = self._keys.index(key, lo, hi)
        del self._neg[slot]
        del self._keys[slot]

    def extract_min(self) -> QueueEntry:
        if not self._keys:
            self._raise_empty("extract_min")
        key = self._keys.pop()
        self._neg.pop()
        return QueueEntry(key, self._priority.pop(key))

    def peek_min(self) -> QueueEntry:
        if not self._keys:
            self._raise_empty("peek_min")
        return QueueEntry(self._keys[-1], -self._neg[-1])

    def is_empty(self) -> bool:
        return not self._keys
