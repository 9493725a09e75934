from .exceptions import (
    DuplicateValueError,
    InvalidStructureError,
    InvariantViolationError,
    NullValueError,
    RedBlackTreeError,
)
from .rbtree import Colour, Direction, Node, RedBlackTree

__all__ = [
    "Colour",
    "Direction",
    "DuplicateValueError",
    "InvalidStructureError",
    "InvariantViolationError",
    "Node",
    "NullValueError",
    "RedBlackTree",
    "RedBlackTreeError",
]
