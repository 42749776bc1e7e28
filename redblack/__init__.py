from .errors import DuplicateKeyError, InvalidTreeError, KeyNotFoundError, TreeError
from .graph import to_graph
from .node import Colour, Direction, Node, is_red
from .tree import RedBlackTree

__all__ = [
    "Colour",
    "Direction",
    "DuplicateKeyError",
    "InvalidTreeError",
    "KeyNotFoundError",
    "Node",
    "RedBlackTree",
    "TreeError",
    "is_red",
    "to_graph",
]
