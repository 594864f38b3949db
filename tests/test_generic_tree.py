import pytest

from arboles.generic_tree import Tree, TreeNode


def _sample():
    tree = Tree(1)
    assert tree.insert(1, 2)
    assert tree.insert(1, 3)
    assert tree.insert(2, 4)
    assert tree.insert(2, 5)
    return tree


def test_empty_and_non_empty():
    assert Tree().is_empty() is True
    assert Tree(1).is_empty() is False


def test_size_counts_every_inserted_value():
    values = [1, 2, 3, 4, 5]
    assert _sample().size() == len(values)


def test_insert_under_missing_parent_fails():
    tree = _sample()
    before = tree.size()
    assert tree.insert(99, 6) is False
    assert tree.size() == before


def test_single_node_height_is_one():
    assert Tree(7).height() == 1


def test_height_grows_with_a_deeper_level():
    tree = Tree(1)
    tree.insert(1, 2)
    before = tree.height()
    tree.insert(2, 4)
    assert tree.height() == before + 1


def test_find_looks_at_root_and_its_children_only():
    tree = _sample()
    assert tree.find(1) is tree.root
    assert tree.find(2).value == 2
    assert tree.find(4) is None


def test_traversals_of_sample():
    root = _sample().root
    assert root.preorder() == [1, 2, 4, 5, 3]
    assert root.postorder() == [4, 5, 2, 3, 1]
    assert root.inorder() == [4, 2, 5, 1, 3]


def test_level_order_starts_with_root_and_children():
    tree = Tree(0)
    for value in (10, 20, 30):
        tree.insert(0, value)
    assert tree.level_order() == [0, 10, 20, 30]


def test_level_order_visits_every_node_once():
    tree = _sample()
    assert sorted(tree.level_order()) == sorted(tree.root.preorder())


def test_inorder_ignores_children_beyond_the_second():
    node = TreeNode(1)
    for value in (2, 3, 4):
        node.add_child(value)
    assert node.inorder() == [2, 1, 3]


def test_remove_root_empties_tree():
    tree = _sample()
    assert tree.remove(1) is True
    assert tree.is_empty() is True


def test_remove_child_of_root():
    tree = _sample()
    assert tree.remove(3) is True
    assert tree.find(3) is None
    assert tree.remove(3) is False


def test_operations_on_empty_tree_raise():
    tree = Tree()
    with pytest.raises(ValueError):
        tree.remove(1)
    with pytest.raises(ValueError):
        tree.find(1)
    with pytest.raises(ValueError):
        tree.size()


def test_remove_child_removes_only_first_match():
    node = TreeNode("a")
    node.add_child("b")
    node.add_child("b")
    assert node.remove_child("b") is True
    assert [child.value for child in node.children] == ["b"]
    assert node.remove_child("z") is False


def test_add_child_returns_new_node():
    node = TreeNode(1)
    child = node.add_child(2)
    assert node.find_child(2) is child