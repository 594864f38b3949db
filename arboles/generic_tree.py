"""A general tree whose nodes hold any number of ordered children."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any

_NO_VALUE = object()


@dataclass(eq=False)
class TreeNode:
    """A node with a value and an ordered list of children."""

    value: Any = None
    children: list[TreeNode] = field(default_factory=list)

    def add_child(self, value):
        """Append a new child holding ``value`` and return it."""
        child = TreeNode(value)
        self.children.append(child)
        return child

    def remove_child(self, value):
        """Remove the first direct child holding ``value``; report success."""
        for child in self.children:
            if child.value == value:
                self.children.remove(child)
                return True
        return False

    def find_child(self, value):
        """Return the first direct child holding ``value``, or None."""
        return next((child for child in self.children if child.value == value), None)

    def height(self):
        """Number of nodes on the longest path from this node down to a leaf."""
        return 1 + max((child.height() for child in self.children), default=0)

    def size(self):
        """Number of nodes in the subtree rooted here."""
        return 1 + sum(child.size() for child in self.children)

    def preorder(self):
        """Values in pre-order: this node, then each child's subtree."""
        values = [self.value]
        for child in self.children:
            values.extend(child.preorder())
        return values

    def postorder(self):
        """Values in post-order: each child's subtree, then this node."""
        values = []
        for child in self.children:
            values.extend(child.postorder())
        values.append(self.value)
        return values

    def inorder(self):
        """Values in in-order, using only the first two children."""
        values = []
        if self.children:
            values.extend(self.children[0].inorder())
        values.append(self.value)
        if len(self.children) > 1:
            values.extend(self.children[1].inorder())
        return values

    def level_order(self):
        """Values breadth first, level by level."""
        values = []
        queue = deque([self])
        while queue:
            node = queue.popleft()
            values.append(node.value)
            queue.extend(node.children)
        return values


class Tree:
    """A general tree, possibly empty."""

    def __init__(self, value=_NO_VALUE):
        self.root: TreeNode | None = None if value is _NO_VALUE else TreeNode(value)

    def _require_root(self):
        if self.root is None:
            raise ValueError("tree is empty")
        return self.root

    def is_empty(self):
        return self.root is None

    def insert(self, parent, value):
        """Add ``value`` as a child of the node holding ``parent``; report success."""
        parent_node = self.find(parent)
        if parent_node is None:
            return False
        parent_node.add_child(value)
        return True

    def remove(self, value):
        """Remove the root or a direct child of the root holding ``value``."""
        root = self._require_root()
        if root.value == value:
            self.root = None
            return True
        return root.remove_child(value)

    def find(self, value):
        """Return the root or a direct child of the root holding ``value``."""
        root = self._require_root()
        if root.value == value:
            return root
        return root.find_child(value)

    def height(self):
        return self._require_root().height()

    def size(self):
        return self._require_root().size()

    def level_order(self):
        return self._require_root().level_order()