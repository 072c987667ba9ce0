"""
Pairing heap over an index-addressed arena.

Every tree node is a slot in a set of parallel lists. ``child`` points at the
leftmost child, ``sibling`` at the next sibling to the right, and ``left`` at
the previous sibling, or at the parent for a leftmost child. Slots refer to
each other only by index, so the structure holds no object reference cycles.

meld is the single structural primitive: insert melds a one-node tree into
the root, decrease-key cuts a subtree and melds it back, and extract-min melds
the root's children with the two-pass pairing rule.
"""

from typing import Dict, List

from .base import PriorityQueue, QueueEntry

NIL = -1


class PairingHeap(PriorityQueue):
    """
    Pairing heap with handle-based decrease-key.

    insert and decrease-key are O(1) amortized; extract_min is O(log n)
    amortized. On equal priorities the tree that is already the root keeps
    its place.
    """

    supports_decrease_key = True

    def __init__(self) -> None:
        self._prio: List[int] = []
        self._key: List[int] = []
        self._child: List[int] = []
        self._sibling: List[int] = []
        self._left: List[int] = []
        self._free: List[int] = []
        self._handle: Dict[int, int] = {}
        self._root = NIL

    def __len__(self) -> int:
        return len(self._handle)

    def __contains__(self, key: int) -> bool:
        return key in self._handle

    def insert(self, key: int, priority: int) -> None:
        slot = self._handle.get(key)
        if slot is not None:
            if priority < self._prio[slot]:
                self._decrease_key(slot, priority)
            return
        slot = self._allocate(key, priority)
        self._handle[key] = slot
        self._root = self._meld(self._root, slot)

    def extract_min(self) -> QueueEntry:
        root = self._root
        if root == NIL:
            self._raise_empty("extract_min")
        top = QueueEntry(self._key[root], self._prio[root])
        self._root = self._merge_pairs(self._child[root])
        del self._handle[top.key]
        self._child[root] = NIL
        self._free.append(root)
        return top

    def peek_min(self) -> QueueEntry:
        if self._root == NIL:
            self._raise_empty("peek_min")
        return QueueEntry(self._key[self._root], self._prio[self._root])

    def is_empty(self) -> bool:
        return self._root == NIL

    # --- Arena helpers -------------------------------------------------------

    def _allocate(self, key: int, priority: int) -> int:
        if self._free:
            slot = self._free.pop()
            self._prio[slot] = priority
            self._key[slot] = key
            self._child[slot] = NIL
            self._sibling[slot] = NIL
            self._left[slot] = NIL
            return slot
        self._prio.append(priority)
        self._key.append(key)
        self._child.append(NIL)
        self._sibling.append(NIL)
        self._left.append(NIL)
        return len(self._prio) - 1

    def _meld(self, a: int, b: int) -> int:
        """Link two detached trees; the root with the larger priority becomes a child."""
        if a == NIL:
            return b
        if b == NIL:
            return a
        if self._prio[b] < self._prio[a]:
            a, b = b, a
        child = self._child[a]
        self._sibling[b] = child
        if child != NIL:
            self._left[child] = b
        self._left[b] = a
        self._child[a] = b
        return a

    def _cut(self, slot: int) -> None:
        left = self._left[slot]
        right = self._sibling[slot]
        if self._child[left] == slot:
            self._child[left] = right
        else:
            self._sibling[left] = right
        if right != NIL:
            self._left[right] = left
        self._sibling[slot] = NIL
        self._left[slot] = NIL

    def _decrease_key(self, slot: int, priority: int) -> None:
        self._prio[slot] = priority
        if slot == self._root:
            return
        self._cut(slot)
        self._root = self._meld(self._root, slot)

    def _merge_pairs(self, first: int) -> int:
        """Two-pass pairing: meld neighbours left to right, then fold right to left."""
        trees: List[int] = []
        slot = first
        while slot != NIL:
            following = self._sibling[slot]
            self._sibling[slot] = NIL
            self._left[slot] = NIL
            trees.append(slot)
            slot = following

        paired = [
            self._meld(trees[i], trees[i + 1]) if i + 1 < len(trees) else trees[i]
            for i in range(0, len(trees), 2)
        ]
        result = NIL
        for tree in reversed(paired):
            result = self._meld(tree, result)
        return result
