"""An unbalanced binary search tree that keeps duplicate values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class BinaryNode:
    """A binary tree node."""

    value: Any
    left: BinaryNode | None = None
    right: BinaryNode | None = None


def _traverse(node, order):
    """Yield the values of a subtree in ``"pre"``, ``"in"`` or ``"post"`` order."""
    if node is None:
        return
    if order == "pre":
        yield node.value
    yield from _traverse(node.left, order)
    if order == "in":
        yield node.value
    yield from _traverse(node.right, order)
    if order == "post":
        yield node.value


def _minimum(node):
    while node.left:
        node = node.left
    return node


def _remove(node, value):
    """Remove one occurrence of ``value`` below ``node``; return the new subtree."""
    if node is None:
        return None
    if value < node.value:
        node.left = _remove(node.left, value)
    elif value > node.value:
        node.right = _remove(node.right, value)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = _minimum(node.right)
        node.value = successor.value
        node.right = _remove(node.right, successor.value)
    return node


def _search(node, value):
    """Return the first node on the search path holding ``value``, or None."""
    while node is not None and node.value != value:
        node = node.left if value < node.value else node.right
    return node


def _height(node):
    return 1 + max(_height(node.left), _height(node.right)) if node else 0


def _size(node):
    return 1 + _size(node.left) + _size(node.right) if node else 0


class BinaryTree:
    """A binary search tree; equal values go to the right subtree."""

    def __init__(self):
        self.root: BinaryNode | None = None

    def is_empty(self):
        return self.root is None

    def root_value(self):
        """Value at the root; raises LookupError when the tree is empty."""
        if self.root is None:
            raise LookupError("tree is empty")
        return self.root.value

    def height(self):
        return _height(self.root)

    def size(self):
        return _size(self.root)

    def insert(self, value):
        new = BinaryNode(value)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            side = "left" if value < node.value else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, new)
                return
            node = child

    def remove(self, value):
        """Remove one occurrence of ``value`` if present."""
        self.root = _remove(self.root, value)

    def search(self, value):
        """Return the node holding ``value`` (recursive descent), or None."""

        def descend(node):
            if node is None or node.value == value:
                return node
            return descend(node.left if value < node.value else node.right)

        return descend(self.root)

    def search_iterative(self, value):
        """Return the node holding ``value`` (loop descent), or None."""
        return _search(self.root, value)

    def preorder(self):
        return list(_traverse(self.root, "pre"))

    def inorder(self):
        return list(_traverse(self.root, "in"))

    def postorder(self):
        return list(_traverse(self.root, "post"))