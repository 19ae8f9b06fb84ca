from __future__ import annotations

import logging
from typing import Generic, Iterable, List, Optional, Sequence, TypeVar

from .tree import (
    NO_INDEX,
    Level,
    grandchildren,
    grandparent,
    left_child,
    level,
    parent,
    right_child,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


class MinMaxHeap(Generic[T]):
    """A double-ended priority queue backed by a min-max heap.

    Implementation notes
    --------------------
    • Storage is a plain list read as an implicit complete binary tree.
    • Even depths are max levels, odd depths are min levels: the maximum is
      always at index 0, the minimum at index 1 or 2 (or 0 for one element).
    • Empty queries return ``None``. ``None`` itself is therefore not a valid
      element and is rejected by :meth:`insert`.
    • Elements only need ``<`` and ``>`` forming a total order.
    """

    __slots__ = ("_data",)

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._data: List[T] = []
        if it is not None:
            # Repeated insertion: O(n log n), keeps a single restoring path
            for v in it:
                self.insert(v)
            logger.debug("built MinMaxHeap of %d elements", len(self._data))

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _value_at(self, idx: int) -> Optional[T]:
        """Element at ``idx``, or None when the position does not exist."""
        if idx == NO_INDEX or idx >= len(self._data):
            return None
        return self._data[idx]

    def _swap(self, i: int, j: int) -> None:
        data = self._data
        data[i], data[j] = data[j], data[i]

    def _best_index(self, indices: Sequence[int], lvl: Level) -> int:
        """Index holding the best value for ``lvl`` among ``indices``.

        Missing positions never win; on ties the first one listed does.
        Returns -1 when none of the positions exist.
        """
        best = NO_INDEX
        best_value: Optional[T] = None
        for idx in indices:
            value = self._value_at(idx)
            if value is None:
                continue
            if best == NO_INDEX or lvl.better(value, best_value):
                best, best_value = idx, value
        return best

    def _min_index(self) -> int:
        n = len(self._data)
        if n <= 2:
            return n - 1
        data = self._data
        return 2 if data[2] < data[1] else 1

    def _bubble_up(self, idx: int) -> None:
        if idx == 0:
            return
        data = self._data
        lvl = level(idx)
        up = parent(idx)
        # The parent sits on the other track; the new value may belong there.
        if lvl.opposite.better(data[idx], data[up]):
            self._swap(idx, up)
            self._bubble_up_track(up, lvl.opposite)
        else:
            self._bubble_up_track(idx, lvl)

    def _bubble_up_track(self, idx: int, lvl: Level) -> None:
        """Move ``idx`` up through its grandparents while it beats them."""
        data = self._data
        while True:
            above = grandparent(idx)
            if above == NO_INDEX or not lvl.better(data[idx], data[above]):
                return
            self._swap(idx, above)
            idx = above

    def _trickle_down(self, idx: int, lvl: Level) -> None:
        """Restore the heap below ``idx``, which lies on a ``lvl`` level."""
        data = self._data
        n = len(data)
        while True:
            left = left_child(idx, n)
            if left == NO_INDEX:
                return
            right = right_child(idx, n)
            grand = grandchildren(idx, n)

            if grand[0] == NO_INDEX:
                # Only children below: one comparison finishes the walk.
                child = self._best_index((left, right), lvl)
                if lvl.better(data[child], data[idx]):
                    self._swap(idx, child)
                return

            # A child with children of its own never beats them, but a
            # childless right child is still a candidate.
            candidates = list(grand)
            if right != NO_INDEX and left_child(right, n) == NO_INDEX:
                candidates.append(right)
            best = self._best_index(candidates, lvl)
            if not lvl.better(data[best], data[idx]):
                return
            self._swap(idx, best)
            if best == right:
                return

            up = parent(best)
            if lvl.better(data[up], data[best]):
                self._swap(up, best)
            idx = best

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, value: T) -> None:
        """Insert ``value`` (amortized O(log n)).

        Raises:
            TypeError: if ``value`` is None, which is reserved for "absent".
        """
        if value is None:
            raise TypeError("MinMaxHeap cannot store None; None marks an absent result")
        self._data.append(value)
        self._bubble_up(len(self._data) - 1)

    push = insert

    def peek_min(self) -> Optional[T]:
        """Return the smallest item without removing it (O(1))."""
        if not self._data:
            return None
        return self._data[self._min_index()]

    def peek_max(self) -> Optional[T]:
        """Return the largest item without removing it (O(1))."""
        return self._data[0] if self._data else None

    def extract_min(self) -> Optional[T]:
        """Remove and return the smallest item, or None if empty (O(log n))."""
        data = self._data
        if not data:
            return None
        idx = self._min_index()
        value = data[idx]
        last = data.pop()
        if idx < len(data):
            data[idx] = last
            if len(data) > 2:
                self._trickle_down(idx, Level.MIN)
        return value

    def extract_max(self) -> Optional[T]:
        """Remove and return the largest item, or None if empty (O(log n))."""
        data = self._data
        if not data:
            return None
        value = data[0]
        last = data.pop()
        if data:
            data[0] = last
            self._trickle_down(0, Level.MAX)
        return value

    pop_min = extract_min
    pop_max = extract_max

    def replace_min(self, value: T) -> Optional[T]:
        """Pop the smallest item, then insert ``value``.

        Returns the popped item, or None if the heap was empty (``value`` is
        still inserted).
        """
        if value is None:
            raise TypeError("MinMaxHeap cannot store None; None marks an absent result")
        top = self.extract_min()
        self.insert(value)
        return top

    def replace_max(self, value: T) -> Optional[T]:
        """Pop the largest item, then insert ``value``."""
        if value is None:
            raise TypeError("MinMaxHeap cannot store None; None marks an absent result")
        top = self.extract_max()
        self.insert(value)
        return top

    def pushpop_min(self, value: T) -> T:
        """Push ``value`` then pop the smallest item in a single call."""
        if value is None:
            raise TypeError("MinMaxHeap cannot store None; None marks an absent result")
        if not self._data or not self._data[self._min_index()] < value:
            return value
        top = self.extract_min()
        self.insert(value)
        return top  # type: ignore[return-value]

    def pushpop_max(self, value: T) -> T:
        """Push ``value`` then pop the largest item in a single call."""
        if value is None:
            raise TypeError("MinMaxHeap cannot store None; None marks an absent result")
        if not self._data or not self._data[0] > value:
            return value
        top = self.extract_max()
        self.insert(value)
        return top  # type: ignore[return-value]

    def clear(self) -> None:
        logger.debug("clearing MinMaxHeap of %d elements", len(self._data))
        self._data.clear()

    def is_valid(self) -> bool:
        """Check the min-max property of every node against its whole subtree.

        Each element is compared with all of its ancestors, O(n log n).
        """
        data = self._data
        for i in range(1, len(data)):
            value = data[i]
            above = parent(i)
            while above != NO_INDEX:
                if level(above).better(value, data[above]):
                    return False
                above = parent(above)
        return True

    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return bool(self._data)

    def to_list(self) -> List[T]:
        """Copy of the backing list in heap order (not sorted)."""
        return list(self._data)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"MinMaxHeap({self._data!r})"
