import enum
from typing import Optional


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1


class Colour(enum.Enum):
    BLACK = 0
    RED = 1


def is_red(node: Optional["Node"]) -> bool:
    # null children are black leaves
    return node is not None and node.colour == Colour.RED


class Node:

    def __init__(self, key):
        self.parent: Optional[Node] = None
        self.right: Optional[Node] = None
        self.left: Optional[Node] = None
        self.colour = Colour.RED
        self.key = key

    def __repr__(self):
        return f"Node({self.key!r}, {self.colour.name})"

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
        return self.get_direction() == Direction.LEFT

    def is_right_child(self) -> bool:
        return self.get_direction() == Direction.RIGHT

    def sibling(self) -> Optional["Node"]:
        direction = self.get_direction()
        if direction == Direction.ROOT:
            return None
        return self.parent.get_child(Direction(1 - direction))

    def uncle(self) -> Optional["Node"]:
        if self.parent is None:
            return None
        return self.parent.sibling()

    def replace_in_parent(self, node: Optional["Node"]):
        """Puts `node` in the slot this node occupies under its parent

        The node itself keeps its own parent link. When called on the root,
        only `node.parent` is cleared and the owner of the root reference
        has to repoint it.
        """
        direction = self.get_direction()
        if direction != Direction.ROOT:
            self.parent.set_child(direction, node)
        if node is not None:
            node.parent = self.parent

    def rotate(self, direction: Direction) -> "Node":
        """Rotates the subtree rooted at this node towards `direction`

        The child on the opposite side is pulled up into this node's
        position and this node becomes its `direction` child. Parent links
        of all moved nodes are updated, but the slot in this node's former
        parent still points here: the caller has to repoint it to the
        returned subtree root.

        Args:
            direction (Direction): side this node moves down to

        Returns:
            Node: the new root of the subtree
        """
        pivot = self.get_child(Direction(1 - direction))
        assert pivot is not None, f"cannot rotate {self!r} {direction.name}"

        inner = pivot.get_child(direction)
        self.set_child(Direction(1 - direction), inner)
        if inner is not None:
            inner.parent = self

        pivot.set_child(direction, self)
        pivot.parent = self.parent
        self.parent = pivot
        return pivot

    def rotate_left(self) -> "Node":
        return self.rotate(Direction.LEFT)

    def rotate_right(self) -> "Node":
        return self.rotate(Direction.RIGHT)
