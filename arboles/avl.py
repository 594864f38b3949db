"""A self-balancing AVL tree of distinct values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from arboles.binary_tree import _minimum, _traverse


@dataclass(eq=False)
class AVLNode:
    """An AVL node with its cached subtree height."""

    value: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def _height(node):
    return node.height if node else 0


def _balance(node):
    return _height(node.left) - _height(node.right) if node else 0


def _update(node):
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate(node, side):
    """Rotate ``node`` towards ``side`` ("left" or "right"); return the new top."""
    other = "right" if side == "left" else "left"
    top = getattr(node, other)
    setattr(node, other, getattr(top, side))
    setattr(top, side, node)
    _update(node)
    _update(top)
    return top


def _rebalance(node, left_heavy_single, right_heavy_single):
    """Rotate ``node`` if unbalanced; the flags choose single over double rotation."""
    factor = _balance(node)
    if factor > 1:
        if not left_heavy_single:
            node.left = _rotate(node.left, "left")
        return _rotate(node, "right")
    if factor < -1:
        if not right_heavy_single:
            node.right = _rotate(node.right, "right")
        return _rotate(node, "left")
    return node


def _insert(node, value):
    if node is None:
        return AVLNode(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    else:
        return node
    _update(node)
    return _rebalance(
        node,
        node.left is not None and value < node.left.value,
        node.right is not None and value > node.right.value,
    )


def _remove(node, value):
    if node is None:
        return None
    if value < node.value:
        node.left = _remove(node.left, value)
    elif value > node.value:
        node.right = _remove(node.right, value)
    else:
        if node.left is None or node.right is None:
            return node.left or node.right
        successor = _minimum(node.right)
        node.value = successor.value
        node.right = _remove(node.right, successor.value)
    _update(node)
    return _rebalance(node, _balance(node.left) >= 0, _balance(node.right) <= 0)


class AVLTree:
    """An AVL tree; inserting a value already present does nothing."""

    def __init__(self):
        self.root: AVLNode | None = None

    def insert(self, value):
        self.root = _insert(self.root, value)

    def remove(self, value):
        """Remove ``value`` if present; otherwise leave the tree unchanged."""
        self.root = _remove(self.root, value)

    def height(self):
        """Height of the tree; 0 when empty."""
        return _height(self.root)

    def root_value(self):
        """Value at the root, or None when the tree is empty."""
        return self.root.value if self.root else None

    def root_balance(self):
        """Left height minus right height at the root; 0 when empty."""
        return _balance(self.root)

    def inorder(self):
        return list(_traverse(self.root, "in"))

    def preorder(self):
        return list(_traverse(self.root, "pre"))

    def postorder(self):
        return list(_traverse(self.root, "post"))