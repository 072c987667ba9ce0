"""
Array-backed d-ary heaps.

Both variants store the complete d-ary tree in two parallel lists (keys and
priorities); the children of slot ``i`` live at ``d*i + 1 .. d*i + d``.

DaryHeap keeps a key -> slot map so a queued key can be lowered in place.
LazyDaryHeap keeps no map: a lower priority for a queued key is pushed as a
shadow entry and the stale copies are dropped when they reach the top.
"""

from typing import Dict, List, Optional, Set

from .base import PriorityQueue, QueueEntry

SUPPORTED_ARITIES = (2, 4, 8, 16)


class _ImplicitHeap(PriorityQueue):
    """Shared sift logic; ``_index`` is None for the variant without lookup."""

    def __init__(self, arity: int = 2) -> None:
        if isinstance(arity, bool) or not isinstance(arity, int) or arity < 2:
            raise ValueError(f"heap arity must be an integer >= 2, got {arity!r}")
        self.arity = arity
        self._keys: List[int] = []
        self._prios: List[int] = []
        self._index: Optional[Dict[int, int]] = None

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(arity={self.arity}, size={len(self._keys)})"

    def _push(self, key: int, priority: int) -> None:
        self._keys.append(key)
        self._prios.append(priority)
        self._sift_up(len(self._keys) - 1)

    def _pop_root(self) -> QueueEntry:
        keys, prios = self._keys, self._prios
        top = QueueEntry(keys[0], prios[0])
        last_key = keys.pop()
        last_prio = prios.pop()
        if keys:
            keys[0] = last_key
            prios[0] = last_prio
            self._sift_down(0)
        return top

    def _sift_up(self, pos: int) -> None:
        keys, prios, index, d = self._keys, self._prios, self._index, self.arity
        key, prio = keys[pos], prios[pos]
        while pos > 0:
            parent = (pos - 1) // d
            if prios[parent] <= prio:
                break
            keys[pos] = keys[parent]
            prios[pos] = prios[parent]
            if index is not None:
                index[keys[pos]] = pos
            pos = parent
        keys[pos] = key
        prios[pos] = prio
        if index is not None:
            index[key] = pos

    def _sift_down(self, pos: int) -> None:
        keys, prios, index, d = self._keys, self._prios, self._index, self.arity
        n = len(keys)
        key, prio = keys[pos], prios[pos]
        while True:
            first = d * pos + 1
            if first >= n:
                break
            # Leftmost smallest child wins ties.
            child = first
            child_prio = prios[first]
            for c in range(first + 1, min(first + d, n)):
                if prios[c] < child_prio:
                    child = c
                    child_prio = prios[c]
            if prio <= child_prio:
                break
            keys[pos] = keys[child]
            prios[pos] = child_prio
            if index is not None:
                index[keys[pos]] = pos
            pos = child
        keys[pos] = key
        prios[pos] = prio
        if index is not None:
            index[key] = pos


class DaryHeap(_ImplicitHeap):
    """
    d-ary heap with O(1) key lookup and true decrease-key.

    insert and extract_min are O(log_d n). A larger arity gives a shallower
    tree at the cost of scanning more children per level in sift-down.
    """

    supports_decrease_key = True

    def __init__(self, arity: int = 2) -> None:
        super().__init__(arity)
        self._index = {}

    def __contains__(self, key: int) -> bool:
        return key in self._index

    def priority_of(self, key: int) -> int:
        return self._prios[self._index[key]]

    def insert(self, key: int, priority: int) -> None:
        pos = self._index.get(key)
        if pos is None:
            self._push(key, priority)
        elif priority < self._prios[pos]:
            self._prios[pos] = priority
            self._sift_up(pos)

    def extract_min(self) -> QueueEntry:
        if not self._keys:
            self._raise_empty("extract_min")
        top = self._pop_root()
        del self._index[top.key]
        return top

    def peek_min(self) -> QueueEntry:
        if not self._keys:
            self._raise_empty("peek_min")
        return QueueEntry(self._keys[0], self._prios[0])

    def is_empty(self) -> bool:
        return not self._keys


class LazyDaryHeap(_ImplicitHeap):
    """
    d-ary heap without a lookup table.

    Decrease-key is simulated: every insert adds an entry, so a key may be
    queued several times. The first extraction of a key (its lowest priority)
    is authoritative; later entries for that key are discarded as stale.
    A key that has been extracted is never returned again by this queue.
    """

    supports_decrease_key = False

    def __init__(self, arity: int = 2) -> None:
        super().__init__(arity)
        self._extracted: Set[int] = set()

    def insert(self, key: int, priority: int) -> None:
        if key not in self._extracted:
            self._push(key, priority)

    def _discard_stale(self) -> None:
        keys, extracted = self._keys, self._extracted
        while keys and keys[0] in extracted:
            self._pop_root()

    def extract_min(self) -> QueueEntry:
        self._discard_stale()
        if not self._keys:
            self._raise_empty("extract_min")
        top = self._pop_root()
        self._extracted.add(top.key)
        return top

    def peek_min(self) -> QueueEntry:
        self._discard_stale()
        if not self._keys:
            self._raise_empty("peek_min")
        return QueueEntry(self._keys[0], self._prios[0])

    def is_empty(self) -> bool:
        self._discard_stale()
        return not self._keys
