import logging
from typing import Iterator, List, Optional

from .errors import DuplicateKeyError, InvalidTreeError, KeyNotFoundError, TreeError
from .node import Colour, Direction, Node, is_red

_logger = logging.getLogger(__name__)


class RedBlackTree:

    def __init__(self):
        self.root: Optional[Node] = None
        self._size = 0

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self.contains(key)

    def __iter__(self):
        return self.traverse_in_order()

    def __repr__(self):
        return f"RedBlackTree({list(self)!r})"

    def is_empty(self):
        return not self.root

    def clear(self):
        self.root = None
        self._size = 0

    def search(self, key) -> Optional[Node]:
        """Returns the node holding `key`, or None if it isn't in the tree"""
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                return node
        return None

    def contains(self, key) -> bool:
        return self.search(key) is not None

    def insert(self, key):
        """Adds `key` to the tree and rebalances it

        Raises:
            DuplicateKeyError: if `key` is already in the tree
        """
        parent = None
        direction = Direction.ROOT
        child = self.root

        while child is not None:
            if key < child.key:
                direction = Direction.LEFT
            elif child.key < key:
                direction = Direction.RIGHT
            else:
                _logger.debug("rejecting duplicate key %r", key)
                raise DuplicateKeyError(key)
            parent = child
            child = parent.get_child(direction)

        node = Node(key)
        node.parent = parent
        if parent is None:
            self.root = node
        else:
            parent.set_child(direction, node)
        self._size += 1

        self._insert_fixup(node)

    def _insert_fixup(self, node: Node):
        # each pass either terminates or moves the red violation two levels
        # up, towards the root
        while True:
            parent = node.parent

            # case 1: the root is always black
            if parent is None:
                node.colour = Colour.BLACK
                return

            # case 2: a black parent can take a red child
            if parent.colour == Colour.BLACK:
                return

            # a red parent is never the root, so the grandparent exists
            grandparent = parent.parent
            assert grandparent is not None, f"red root {parent!r}"
            uncle = node.uncle()

            # case 3: push the blackness of the grandparent down to both of
            # its children and retry from the grandparent
            if is_red(uncle):
                parent.colour = Colour.BLACK
                uncle.colour = Colour.BLACK
                grandparent.colour = Colour.RED
                node = grandparent
                continue

            direction = parent.get_direction()

            # case 4: the node sits between its parent and grandparent, so
            # rotate it up to make it an outer grandchild
            if node.get_direction() != direction:
                _logger.debug("insert fixup: rotating inner node %r up", node.key)
                parent.rotate(direction)
                grandparent.set_child(direction, node)
                node, parent = parent, node

            # case 5: the parent takes the grandparent's place
            _logger.debug(
                "insert fixup: rotating %r above %r", parent.key, grandparent.key
            )
            parent.colour = Colour.BLACK
            grandparent.colour = Colour.RED
            self._rotate(grandparent, Direction(1 - direction))
            return

    def delete(self, key):
        """Removes `key` from the tree and rebalances it

        Raises:
            KeyNotFoundError: if `key` isn't in the tree
        """
        node = self.search(key)
        if node is None:
            _logger.debug("cannot delete missing key %r", key)
            raise KeyNotFoundError(key)

        # node has 2 non-null children: take over the key of the in-order
        # successor, then unlink the successor, which has no left child
        if node.left is not None and node.right is not None:
            successor = self.smallest(node.right)
            node.key = successor.key
            node = successor

        child = node.left if node.left is not None else node.right
        parent = node.parent
        direction = node.get_direction()
        self._replace(node, child)
        node.parent = node.left = node.right = None
        self._size -= 1

        # a red node carries no black height
        if node.colour == Colour.RED:
            return

        # a red child can take over the lost black
        if is_red(child):
            child.colour = Colour.BLACK
            return

        self._delete_fixup(parent, direction)

    def _delete_fixup(self, parent: Optional[Node], direction: Direction):
        # the subtree on the `direction` side of `parent` is one black node
        # short. It may be empty, so it is tracked by its parent and side
        # rather than by its root.
        while parent is not None:
            sibling = parent.get_child(Direction(1 - direction))
            assert sibling is not None, f"{parent!r} has no sibling subtree"

            # case 2: make the sibling black by rotating it above the parent
            if is_red(sibling):
                _logger.debug(
                    "delete fixup: rotating red sibling %r above %r",
                    sibling.key, parent.key
                )
                sibling.colour = Colour.BLACK
                parent.colour = Colour.RED
                self._rotate(parent, direction)
                sibling = parent.get_child(Direction(1 - direction))

            near_nephew = sibling.get_child(direction)
            distant_nephew = sibling.get_child(Direction(1 - direction))

            if not is_red(near_nephew) and not is_red(distant_nephew):
                sibling.colour = Colour.RED

                # case 4: a red parent absorbs the deficit
                if parent.colour == Colour.RED:
                    parent.colour = Colour.BLACK
                    return

                # case 3: the whole parent subtree is now short, move up
                direction = parent.get_direction()
                parent = parent.parent
                continue

            # case 5: move the red near nephew to the far side
            if not is_red(distant_nephew):
                _logger.debug(
                    "delete fixup: rotating near nephew %r above %r",
                    near_nephew.key, sibling.key
                )
                sibling.colour = Colour.RED
                near_nephew.colour = Colour.BLACK
                self._rotate(sibling, Direction(1 - direction))
                distant_nephew = sibling
                sibling = near_nephew

            # case 6: rotate the sibling above the parent, the distant
            # nephew makes up for the black that moved over to our side
            _logger.debug(
                "delete fixup: rotating sibling %r above %r",
                sibling.key, parent.key
            )
            sibling.colour = parent.colour
            parent.colour = Colour.BLACK
            distant_nephew.colour = Colour.BLACK
            self._rotate(parent, direction)
            return

        # case 1: reaching the root shortens every path by the same amount

    def _rotate(self, sub: Node, direction: Direction) -> Node:
        parent = sub.parent
        d = sub.get_direction()
        new_root = sub.rotate(direction)
        if parent is None:
            self.root = new_root
        else:
            parent.set_child(d, new_root)
        return new_root

    def _replace(self, node: Node, child: Optional[Node]):
        node.replace_in_parent(child)
        if node is self.root:
            self.root = child

    def smallest(self, node: Node = None) -> Node:
        """Returns the leftmost node of the subtree, the whole tree by default"""
        node = node or self.root
        if node is None:
            raise TreeError("smallest key of an empty tree")
        while node.left is not None:
            node = node.left
        return node

    def largest(self, node: Node = None) -> Node:
        """Returns the rightmost node of the subtree, the whole tree by default"""
        node = node or self.root
        if node is None:
            raise TreeError("largest key of an empty tree")
        while node.right is not None:
            node = node.right
        return node

    def minimum(self):
        return self.smallest().key

    def maximum(self):
        return self.largest().key

    def traverse_in_order(self) -> Iterator:
        """Yields the keys in ascending order"""
        stack: List[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def height(self, node: Node) -> int:
        if node is None:
            return -1
        return 1 + max(self.height(node.left), self.height(node.right))

    def black_height(self) -> int:
        """Counts the black nodes below the root on any path to a null leaf"""
        node = self.root.left if self.root is not None else None
        count = 0
        while node is not None:
            if node.colour == Colour.BLACK:
                count += 1
            node = node.left
        return count

    def validate(self) -> int:
        """Checks the red-black and search tree invariants

        Returns:
            int: black height of the root, not counting the root itself

        Raises:
            InvalidTreeError: on the first violation found
        """
        if self.root is None:
            if self._size:
                raise InvalidTreeError(f"empty tree with size {self._size}")
            return 0
        if self.root.parent is not None:
            raise InvalidTreeError(f"root {self.root!r} has a parent")
        if self.root.colour != Colour.BLACK:
            raise InvalidTreeError(f"root {self.root!r} is red")

        count = 0

        def check(node: Optional[Node], low, high) -> int:
            nonlocal count
            if node is None:
                return 0
            count += 1
            if low is not None and not low.key < node.key:
                raise InvalidTreeError(f"{node!r} is out of order with {low!r}")
            if high is not None and not node.key < high.key:
                raise InvalidTreeError(f"{node!r} is out of order with {high!r}")
            for child in (node.left, node.right):
                if child is None:
                    continue
                if child.parent is not node:
                    raise InvalidTreeError(f"{child!r} has a stale parent link")
                if is_red(node) and is_red(child):
                    raise InvalidTreeError(f"red {node!r} has red child {child!r}")
            left = check(node.left, low, node)
            right = check(node.right, node, high)
            if left != right:
                raise InvalidTreeError(
                    f"black height of {node!r} differs: {left} != {right}"
                )
            return left + int(node.colour == Colour.BLACK)

        height = check(self.root, None, None) - 1
        if count != self._size:
            raise InvalidTreeError(f"found {count} nodes, expected {self._size}")
        return height

    def dump(self) -> str:
        """Renders the tree as nested `(key left right)` groups

        Red keys are marked with `*` and missing children with `_`.
        """
        if self.root is None:
            return "Empty tree."

        parts = []

        def render(node: Node):
            parts.append(f"({node.key}{'*' if is_red(node) else ''} ")
            if node.left is not None:
                render(node.left)
            else:
                parts.append("_")
            if node.right is not None:
                render(node.right)
            else:
                parts.append(" _")
            parts.append(")")

        render(self.root)
        return "".join(parts)

    def pprint(self, node: Node, depth=0):
        if node is None:
            return "\t" * depth + "|_ null\n"
        # recursively draw a tree
        direction = node.get_direction()
        return ("\t" * depth + f"|_ {direction.name} | {node.key}: {node.colour.name}\n"
                + self.pprint(node.left, depth + 1)
                + self.pprint(node.right, depth + 1))
