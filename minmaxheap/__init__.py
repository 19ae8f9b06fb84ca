from .heap import MinMaxHeap
from .tree import Level, grandchildren, grandparent, left_child, level, parent, right_child

__all__ = [
    "MinMaxHeap",
    "Level",
    "parent",
    "grandparent",
    "left_child",
    "right_child",
    "grandchildren",
    "level",
]
