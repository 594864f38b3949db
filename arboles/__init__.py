"""Tree data structures: general, binary search, AVL and red-black trees, with demos."""

__version__ = "0.1.0"
__all__ = ["generic_tree", "binary_tree", "bst", "avl", "red_black", "demo"]