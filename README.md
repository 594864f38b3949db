# arboles

A small collection of tree data structures in plain Python, with no dependencies
outside the standard library.

| Module | Classes | What it is |
| --- | --- | --- |
| `arboles.generic_tree` | `Tree`, `TreeNode` | A general tree whose nodes hold any number of ordered children. |
| `arboles.binary_tree` | `BinaryTree`, `BinaryNode` | An unbalanced binary search tree that keeps duplicates (equal values go right). |
| `arboles.bst` | `BST`, `BSTNode` | An unbalanced binary search tree; inserting a value already present does nothing. |
| `arboles.avl` | `AVLTree`, `AVLNode` | A self-balancing AVL tree of distinct values. |
| `arboles.red_black` | `RedBlackTree`, `RBNode`, `Color` | A red-black tree with insertion and traversals. |
| `arboles.demo` | – | Example runs of each tree, printed as text. |

Traversals (`preorder`, `inorder`, `postorder`, and `level_order` on the
general tree) return lists of the visited values instead of printing them.

## Installation

```
pip install .
```

## Usage

### AVL tree

```python
from arboles.avl import AVLTree

tree = AVLTree()
for value in (10, 20, 30, 40, 50, 25):
    tree.insert(value)

tree.root_value()    # 30
tree.height()        # 3
tree.root_balance()  # 0
tree.inorder()       # [10, 20, 25, 30, 40, 50]

tree.remove(30)
tree.root_value()    # 40
```

On an empty `AVLTree`, `root_value()` returns `None`, and `height()` and
`root_balance()` return `0`. Removing a value that is absent leaves the tree
unchanged.

### Binary search trees

```python
from arboles.binary_tree import BinaryTree

tree = BinaryTree()
for value in (10, 5, 20, 15, 8, 3, 25):
    tree.insert(value)
tree.root_value()             # 10
tree.height()                 # 3
tree.size()                   # 7
tree.search(15) is not None   # True
tree.remove(15)
tree.inorder()                # [3, 5, 8, 10, 20, 25]
```

`BinaryTree.search` and `BinaryTree.search_iterative` both return the node
holding the value, or `None`. `BinaryTree.root_value()` raises `LookupError`
when the tree is empty.

`BST` offers `insert`, `search`, `remove`, `inorder`, `preorder` and
`postorder` with the same meaning, but ignores duplicate insertions.

### General tree

```python
from arboles.generic_tree import Tree

tree = Tree(1)
tree.insert(1, 2)    # True
tree.insert(1, 3)    # True
tree.insert(2, 4)    # True
tree.level_order()   # [1, 2, 3, 4]
tree.root.preorder() # [1, 2, 4, 3]
```

`Tree.insert(parent, value)` adds `value` under the node holding `parent` and
returns whether that node was found. `Tree.find` and `Tree.remove` look only at
the root and the root's direct children; removing the root empties the tree.
`find`, `remove`, `height`, `size` and `level_order` raise `ValueError` on an
empty tree. `TreeNode.inorder` uses only a node's first two children.

### Red-black tree

```python
from arboles.red_black import Color, RedBlackTree

tree = RedBlackTree()
for value in (10, 20, 30, 15, 25):
    tree.insert(value)
tree.inorder()[0]    # (10, Color.BLACK)
```

Traversals return `(value, Color)` pairs. `Color.RED` and `Color.BLACK` carry
the labels `"R"` and `"N"`.

## Demonstration

The `arboles-demo` command builds each kind of tree and prints its traversals
and measurements:

```
arboles-demo            # run every demo
arboles-demo avl        # one of: avl, binary, bst, generic, red-black
```

The same text is available from `arboles.demo`: `generic_demo()`,
`avl_demo()`, `binary_demo()`, `bst_demo()` and `red_black_demo()` each return
it as a string.

## What it does not do

- `RedBlackTree` supports insertion and traversal only; it has no removal or
  search.
- The general `Tree` does not search deeper than the root's direct children.
- Nothing is stored on disk; trees live in memory only.

## Running the tests

```
pip install .[test]
pytest
```