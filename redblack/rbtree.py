import enum
import logging
from collections import deque
from typing import Iterable, Iterator, Optional

from .exceptions import (
    DuplicateValueError,
    InvalidStructureError,
    InvariantViolationError,
    NullValueError,
)

logger = logging.getLogger(__name__)

# level order dumps look like the repr of a python list: [a, b, c]
DUMP_OPEN = "["
DUMP_CLOSE = "]"
DUMP_SEPARATOR = ", "


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1


class Colour(enum.Enum):
    BLACK = 0
    RED = 1


class Node:

    def __init__(self, value):
        self.parent: Optional[Node] = None
        self.right: Optional[Node] = None
        self.left: Optional[Node] = None
        self.colour = Colour.RED
        self._value = value

    @property
    def value(self):
        return self._value

    def get_child(self, direction: Direction):
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def get_direction(self) -> Direction:
        if self.parent is None:
            return Direction.ROOT
        return Direction.LEFT if self is self.parent.left else Direction.RIGHT

    def is_left_child(self) -> bool:
        return self.parent is not None and self.parent.left is self

    def is_red(self) -> bool:
        return self.colour == Colour.RED

    def is_black(self) -> bool:
        return self.colour == Colour.BLACK

    def __repr__(self):
        return f"Node({self._value!r}, {self.colour.name})"


class RedBlackTree:
    """
    A set of ordered values kept in a red-black binary search tree.

    Values must be totally ordered with respect to each other (``<`` and
    ``==``). None and duplicate values are rejected. There is no removal,
    the tree only grows.
    """

    def __init__(self, values: Optional[Iterable] = None):
        self.root: Optional[Node] = None
        self._size = 0
        if values is not None:
            self.update(values)

    def __len__(self):
        return self._size

    def __contains__(self, value):
        return self.search(value) is not None

    def __iter__(self) -> Iterator:
        """Yields the stored values in ascending order"""
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __str__(self):
        return self.dump()

    def is_empty(self):
        return self.root is None

    def insert(self, value) -> Node:
        """
        Adds value to the tree and rebalances it.

        Args:
            value: the value to store, comparable with every stored value

        Raises:
            NullValueError: value is None
            DuplicateValueError: an equal value is already stored

        Returns:
            Node: the newly attached node
        """
        if value is None:
            raise NullValueError()

        node = Node(value)
        if self.root is None:
            self.root = node
        else:
            # find the empty slot first so a duplicate leaves the tree untouched
            parent, direction = self._find_slot(value)
            node.parent = parent
            parent.set_child(direction, node)
            self._fix_insert(node)

        self._size += 1
        self.root.colour = Colour.BLACK
        logger.debug("inserted %r, size is now %d", value, self._size)
        return node

    def update(self, values: Iterable):
        """Inserts every value in order, stopping at the first error"""
        for value in values:
            self.insert(value)

    def _find_slot(self, value):
        parent = self.root
        while True:
            if value == parent.value:
                raise DuplicateValueError(value)
            direction = Direction.LEFT if value < parent.value else Direction.RIGHT
            child = parent.get_child(direction)
            if child is None:
                return parent, direction
            parent = child

    def _fix_insert(self, node: Node):
        # node is always red here. walk up the tree until its parent is black
        # or we reach the root, which insert() paints black afterwards
        while node.parent is not None:
            parent = node.parent
            if parent.is_black():
                return

            grandparent = parent.parent
            if grandparent is None:
                return

            side = parent.get_direction()
            uncle = grandparent.get_child(Direction(1 - side))

            # red uncle: push the grandparent's blackness down a level and
            # carry on from the grandparent, which may now clash with its own
            # parent
            if uncle is not None and uncle.is_red():
                logger.debug("red uncle %r, recolouring under %r", uncle, grandparent)
                parent.colour = Colour.BLACK
                uncle.colour = Colour.BLACK
                grandparent.colour = Colour.RED
                node = grandparent
                continue

            # zig-zag: the node sits between parent and grandparent. rotate it
            # into the parent's slot so the three line up on one side
            if node.get_direction() != side:
                logger.debug("zig-zag at %r, rotating over %r", node, parent)
                self._rotate(node, parent)
                node, parent = parent, node

            # straight line: lift the parent over the grandparent. the subtree
            # root is black again so nothing above can be affected
            logger.debug("straight line at %r, rotating over %r", parent, grandparent)
            self._rotate(parent, grandparent)
            parent.colour = Colour.BLACK
            grandparent.colour = Colour.RED
            return

    def _rotate(self, child: Node, parent: Node):
        """Swaps the levels of child and parent, keeping the values in order"""
        if child.parent is not parent:
            raise InvalidStructureError(child, parent)

        grandparent = parent.parent
        if grandparent is None:
            self.root = child
        else:
            grandparent.set_child(parent.get_direction(), child)

        # a left child rotates right and vice versa. the child's inner subtree
        # moves across to fill the slot the child leaves in the parent
        direction = child.get_direction()
        opposite = Direction(1 - direction)
        inner = child.get_child(opposite)

        parent.set_child(direction, inner)
        if inner is not None:
            inner.parent = parent

        child.set_child(opposite, parent)
        child.parent = grandparent
        parent.parent = child

    def search(self, value) -> Optional[Node]:
        """Returns the node holding value, or None"""
        if value is None:
            return None
        node = self.root
        while node is not None:
            if value == node.value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def smallest(self, node: Node = None) -> Optional[Node]:
        """Returns the leftmost node in the subtree"""
        node = node or self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def largest(self, node: Node = None) -> Optional[Node]:
        """Returns the rightmost node in the subtree"""
        node = node or self.root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node

    def height(self, node: Node) -> int:
        if node is None:
            return -1
        return 1 + max(self.height(node.left), self.height(node.right))

    def black_height(self, node: Node = None) -> int:
        """
        Counts the black nodes below node on the way to an absent child.

        Every such path holds the same number of black nodes, so following
        left children is enough.
        """
        node = node or self.root
        if node is None:
            return 0
        count = 0
        child = node.left
        while child is not None:
            if child.is_black():
                count += 1
            child = child.left
        return count

    def level_order(self, node: Node = None) -> Iterator[Node]:
        """Yields the nodes of the subtree breadth first"""
        node = node or self.root
        if node is None:
            return
        queue = deque([node])
        while queue:
            current = queue.popleft()
            if current.left is not None:
                queue.append(current.left)
            if current.right is not None:
                queue.append(current.right)
            yield current

    def dump(self, node: Node = None) -> str:
        """
        Renders the values of the subtree in level order, e.g. ``[2, 1, 3]``.

        Each value is rendered with str(). Defaults to the whole tree.
        """
        values = DUMP_SEPARATOR.join(str(n.value) for n in self.level_order(node))
        return DUMP_OPEN + values + DUMP_CLOSE

    def validate(self) -> int:
        """
        Checks every red-black tree property over the whole tree.

        Raises:
            InvariantViolationError: naming the first broken property

        Returns:
            int: the black height of the root
        """
        if self.root is None:
            return 0
        if self.root.parent is not None:
            raise InvariantViolationError(f"root {self.root!r} has a parent")
        if self.root.is_red():
            raise InvariantViolationError(f"root {self.root!r} is red")

        count = sum(1 for _ in self.level_order())
        if count != self._size:
            raise InvariantViolationError(
                f"tree holds {count} nodes but its size is {self._size}")

        return self._validate(self.root, None, None) - 1

    def _validate(self, node: Node, low, high) -> int:
        # returns the black nodes on each path from node (inclusive) down to
        # an absent child. low and high bound the values allowed in the subtree
        if node is None:
            return 0
        if node.value is None:
            raise InvariantViolationError("tree holds a None value")
        if low is not None and not low < node.value:
            raise InvariantViolationError(f"{node!r} is not greater than {low!r}")
        if high is not None and not node.value < high:
            raise InvariantViolationError(f"{node!r} is not less than {high!r}")

        for child in (node.left, node.right):
            if child is None:
                continue
            if child.parent is not node:
                raise InvariantViolationError(f"{child!r} does not point back to {node!r}")
            if node.is_red() and child.is_red():
                raise InvariantViolationError(f"red {node!r} has red child {child!r}")

        left = self._validate(node.left, low, node.value)
        right = self._validate(node.right, node.value, high)
        if left != right:
            raise InvariantViolationError(
                f"black heights under {node!r} differ: {left} left, {right} right")

        return left + (1 if node.is_black() else 0)

    def pprint(self, node: Node, depth=0):
        if node is None:
            return "\t" * depth + "|_ null\n"
        # recursively draw a tree
        direction = node.get_direction()
        return ("\t" * depth + f"|_ {direction.name} | {node.value}: {node.colour.name}\n"
                + self.pprint(node.left, depth + 1)
                + self.pprint(node.right, depth + 1))
