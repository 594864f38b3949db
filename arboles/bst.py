"""An unbalanced binary search tree of distinct values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from arboles.binary_tree import _remove, _search, _traverse


@dataclass(eq=False)
class BSTNode:
    """A binary search tree node."""

    value: Any
    left: BSTNode | None = None
    right: BSTNode | None = None


def _insert(node, value):
    if node is None:
        return BSTNode(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    return node


class BST:
    """A binary search tree; inserting a value already present does nothing."""

    def __init__(self):
        self.root: BSTNode | None = None

    def insert(self, value):
        self.root = _insert(self.root, value)

    def search(self, value):
        """Return the node holding ``value``, or None."""
        return _search(self.root, value)

    def remove(self, value):
        """Remove ``value`` if present; otherwise leave the tree unchanged."""
        self.root = _remove(self.root, value)

    def inorder(self):
        """Values in ascending order."""
        return list(_traverse(self.root, "in"))

    def preorder(self):
        return list(_traverse(self.root, "pre"))

    def postorder(self):
        return list(_traverse(self.root, "post"))