class TreeError(Exception):
    """Base class for errors raised by a red-black tree."""


class DuplicateKeyError(TreeError):
    """Raised when inserting a key that is already in the tree."""

    def __init__(self, key):
        super().__init__(f"already inserted: {key!r}")
        self.key = key


class KeyNotFoundError(TreeError, KeyError):
    """Raised when a key expected to be in the tree is missing."""

    def __init__(self, key):
        super().__init__(f"not found: {key!r}")
        self.key = key

    def __str__(self):
        # KeyError would quote the message
        return str(self.args[0])


class InvalidTreeError(TreeError):
    """Raised when a tree breaks one of the red-black invariants."""
