"""A red-black tree that allows duplicate values (placed to the right)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Color(Enum):
    """Node colour; the value is the one-letter label used when printing."""

    RED = "R"
    BLACK = "N"


@dataclass(eq=False)
class RBNode:
    """A red-black node with a link to its parent."""

    value: Any
    color: Color = Color.RED
    left: RBNode | None = None
    right: RBNode | None = None
    parent: RBNode | None = field(default=None, repr=False)


def _inorder(node, out):
    if node:
        _inorder(node.left, out)
        out.append((node.value, node.color))
        _inorder(node.right, out)
    return out


def _preorder(node, out):
    if node:
        out.append((node.value, node.color))
        _preorder(node.left, out)
        _preorder(node.right, out)
    return out


def _postorder(node, out):
    if node:
        _postorder(node.left, out)
        _postorder(node.right, out)
        out.append((node.value, node.color))
    return out


class RedBlackTree:
    """A red-black tree supporting insertion and traversal."""

    def __init__(self):
        self.root: RBNode | None = None

    def _replace_in_parent(self, old, new):
        parent = old.parent
        new.parent = parent
        if parent is None:
            self.root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, x):
        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_in_parent(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, x):
        y = x.left
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        self._replace_in_parent(x, y)
        y.right = x
        x.parent = y

    def _fix_insert(self, node):
        while node is not self.root and node.parent.color is Color.RED:
            parent = node.parent
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                node.parent.color = Color.BLACK
                node.parent.parent.color = Color.RED
                self._rotate_right(node.parent.parent)
            else:
                uncle = grandparent.left
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                node.parent.color = Color.BLACK
                node.parent.parent.color = Color.RED
                self._rotate_left(node.parent.parent)
        self.root.color = Color.BLACK

    def insert(self, value):
        new = RBNode(value)
        if self.root is None:
            new.color = Color.BLACK
            self.root = new
            return
        parent = None
        current = self.root
        while current is not None:
            parent = current
            current = current.left if value < current.value else current.right
        new.parent = parent
        if value < parent.value:
            parent.left = new
        else:
            parent.right = new
        self._fix_insert(new)

    def inorder(self):
        """(value, colour) pairs in ascending order of value."""
        return _inorder(self.root, [])

    def preorder(self):
        return _preorder(self.root, [])

    def postorder(self):
        return _postorder(self.root, [])