"""Index arithmetic for an implicit (list-backed) complete binary tree.

Positions are 0-based list indices:

- left child of ``i`` is ``2i + 1``, right child ``2i + 2``
- parent of ``i`` is ``(i + 1) // 2 - 1``; the root has none
- depth of ``i`` is ``floor(log2(i + 1))``

Every lookup returns ``-1`` for a position that does not exist, so callers
can chain lookups (e.g. the grandchildren of a missing child) without
special-casing each step.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Tuple

NO_INDEX = -1


class Level(str, Enum):
    """Ordering duty of a tree level in a min-max heap.

    Even depths are MAX levels (the node is >= its whole subtree), odd depths
    are MIN levels (the node is <= its whole subtree).
    """

    MIN = "min"
    MAX = "max"

    @property
    def opposite(self) -> "Level":
        return Level.MAX if self is Level.MIN else Level.MIN

    def better(self, a: Any, b: Any) -> bool:
        """Return True if ``a`` should sit above ``b`` on this level's track."""
        if self is Level.MAX:
            return a > b
        return a < b


# -----------------------------
# Position lookups
# -----------------------------

def parent(i: int) -> int:
    """Index of the parent of ``i``, or ``-1`` for the root (or a missing index)."""
    if i <= 0:
        return NO_INDEX
    return (i + 1) // 2 - 1


def grandparent(i: int) -> int:
    return parent(parent(i))


def left_child(i: int, size: int) -> int:
    """Index of the left child of ``i`` in a tree of ``size`` nodes, or ``-1``."""
    if i < 0:
        return NO_INDEX
    child = (i + 1) * 2 - 1
    if child > size - 1:
        return NO_INDEX
    return child


def right_child(i: int, size: int) -> int:
    """Index of the right child of ``i`` in a tree of ``size`` nodes, or ``-1``."""
    left = left_child(i, size)
    if left == NO_INDEX or left + 1 > size - 1:
        return NO_INDEX
    return left + 1


def grandchildren(i: int, size: int) -> Tuple[int, int, int, int]:
    """The four grandchild slots of ``i``, left to right; missing ones are ``-1``."""
    left = (i + 1) * 2 - 1 if i >= 0 else NO_INDEX
    right = left + 1 if left != NO_INDEX else NO_INDEX
    return (
        left_child(left, size),
        right_child(left, size),
        left_child(right, size),
        right_child(right, size),
    )


# -----------------------------
# Levels
# -----------------------------

def depth(i: int) -> int:
    """Depth of index ``i`` below the root (root is depth 0)."""
    if i < 0:
        raise ValueError(f"negative index {i} has no depth")
    return (i + 1).bit_length() - 1


def level(i: int) -> Level:
    return Level.MAX if depth(i) % 2 == 0 else Level.MIN
