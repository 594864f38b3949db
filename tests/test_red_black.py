import pytest

from arboles.red_black import Color, RBNode, RedBlackTree


def _rb(values):
    tree = RedBlackTree()
    for value in values:
        tree.insert(value)
    return tree


def _black_height(node):
    """Black height of the subtree, asserting the red-black properties."""
    if node is None:
        return 1
    children = [c for c in (node.left, node.right) if c is not None]
    for child in children:
        assert child.parent is node
        assert node.color is Color.BLACK or child.color is Color.BLACK
    left = _black_height(node.left)
    assert left == _black_height(node.right)
    return left + (node.color is Color.BLACK)


def test_color_labels_in_traversal():
    tree = _rb([10, 20])
    assert [color.value for _, color in tree.inorder()] == ["N", "R"]


def test_new_node_is_red():
    assert RBNode(3).color is Color.RED


@pytest.mark.parametrize("order", ["inorder", "preorder", "postorder"])
def test_empty_traversals(order):
    assert getattr(RedBlackTree(), order)() == []


def test_single_insert_root_is_black():
    assert _rb([7]).inorder() == [(7, Color.BLACK)]


def test_source_example():
    tree = _rb([10, 20, 30, 15, 25])
    assert tree.preorder() == [
        (20, Color.BLACK),
        (10, Color.BLACK),
        (15, Color.RED),
        (30, Color.BLACK),
        (25, Color.RED),
    ]
    assert [v for v, _ in tree.inorder()] == [10, 15, 20, 25, 30]


@pytest.mark.parametrize(
    "values",
    [
        list(range(1, 32)),
        list(range(31, 0, -1)),
        [50, 20, 80, 10, 30, 70, 90, 25, 27, 26, 85, 95, 1, 2, 3],
        [5, 5, 5, 5, 5, 5],
        [5, 3, 5],
    ],
)
def test_properties_hold(values):
    tree = _rb(values)
    assert tree.root.color is Color.BLACK
    assert tree.root.parent is None
    _black_height(tree.root)
    assert [v for v, _ in tree.inorder()] == sorted(values)


def test_traversals_cover_same_nodes():
    tree = _rb([8, 4, 12, 2, 6, 10, 14, 1])
    for order in (tree.preorder(), tree.postorder()):
        assert sorted(order, key=lambda p: p[0]) == tree.inorder()
    assert tree.postorder()[-1] == tree.preorder()[0]