"""
Exceptions raised by the red-black tree.
"""


class RedBlackTreeError(Exception):
    """Base class for every error raised by this package."""


class NullValueError(RedBlackTreeError, TypeError):
    """Raised when None is inserted. The tree cannot store null values."""

    def __init__(self):
        super().__init__("This RedBlackTree cannot store None values.")


class DuplicateValueError(RedBlackTreeError, ValueError):
    """
    Raised when a value equal to one already stored is inserted.

    The error is raised during descent, before a node is attached, so the
    tree structure and colours are left exactly as they were.
    """

    def __init__(self, value):
        """
        Args:
            value: The rejected value.
        """
        self.value = value
        super().__init__(f"This RedBlackTree already contains {value!r}.")


class InvalidStructureError(RedBlackTreeError):
    """
    Raised when a rotation is requested on nodes that are not parent and child.

    Indicates a bug in the rebalancing code, never a caller error.
    """

    def __init__(self, child, parent):
        self.child = child
        self.parent = parent
        super().__init__(f"cannot rotate {child!r} over {parent!r}: not its parent")


class InvariantViolationError(RedBlackTreeError, AssertionError):
    """Raised by RedBlackTree.validate() on the first broken tree property."""
