"""Example runs of each tree, printed as text."""

from __future__ import annotations

import argparse

from .avl import AVLTree
from .binary_tree import BinaryTree
from .bst import BST
from .generic_tree import Tree
from .red_black import RedBlackTree


def _join(values):
    return " ".join(str(value) for value in values)


def generic_demo():
    """Traversals of a small general tree."""
    tree = Tree(1)
    tree.insert(1, 2)
    tree.insert(1, 3)
    tree.insert(2, 4)
    tree.insert(2, 5)
    root = tree.root
    return "\n".join(
        [
            f"Preorden: {_join(root.preorder())}",
            f"Postorden: {_join(root.postorder())}",
            f"Inorden: {_join(root.inorder())}",
            f"Nivel orden: {_join(tree.level_order())}",
        ]
    )


def _avl_state(tree):
    return [
        f"Raíz: {tree.root_value()}",
        f"Altura del árbol: {tree.height()}",
        f"Factor de balance de la raíz: {tree.root_balance()}",
    ]


def _avl_traversals(tree):
    return [
        f"InOrden: {_join(tree.inorder())}",
        f"PreOrden: {_join(tree.preorder())}",
        f"PosOrden: {_join(tree.postorder())}",
    ]


def avl_demo():
    """Insertions and one removal in an AVL tree, with its state after each."""
    tree = AVLTree()
    lines = ["Insertando elementos en el AVL..."]
    for value in (10, 20, 30, 40, 50, 25):
        tree.insert(value)
        lines += ["", f"Después de insertar {value}:", *_avl_state(tree)]
    lines += ["", "Recorridos después de las inserciones:", *_avl_traversals(tree)]
    lines += ["", "Eliminando el nodo 30..."]
    tree.remove(30)
    lines += ["", "Después de eliminar 30:", *_avl_state(tree)]
    lines += ["", "Recorridos después de la eliminación:", *_avl_traversals(tree)]
    return "\n".join(lines)


def binary_demo():
    """Measures, traversals, a search and a removal in a binary tree."""
    tree = BinaryTree()
    for value in (10, 5, 20, 15, 8, 3, 25):
        tree.insert(value)
    found = "Encontrado" if tree.search(15) else "No encontrado"
    lines = [
        f"Raiz: {tree.root_value()}",
        f"Altura del árbol: {tree.height()}",
        f"Tamaño del árbol: {tree.size()}",
        f"Recorrido Preorden: {_join(tree.preorder())}",
        f"Recorrido Inorden: {_join(tree.inorder())}",
        f"Recorrido Posorden: {_join(tree.postorder())}",
        f"Buscando el valor 15: {found}",
    ]
    tree.remove(15)
    lines += ["Después de eliminar 15:", f"Recorrido Inorden: {_join(tree.inorder())}"]
    return "\n".join(lines)


def bst_demo():
    """Traversals, a search and a removal in a binary search tree."""
    tree = BST()
    for value in (10, 5, 20, 3, 8, 25):
        tree.insert(value)
    inorder_label = "Recorrido Inorden (Ordenado): "
    lines = [
        inorder_label + _join(tree.inorder()),
        f"Recorrido Preorden: {_join(tree.preorder())}",
        f"Recorrido Postorden: {_join(tree.postorder())}",
    ]
    if tree.search(8):
        lines.append("Nodo con valor 8 encontrado.")
    else:
        lines.append("Nodo con valor 8 no encontrado.")
    tree.remove(20)
    lines.append(inorder_label + _join(tree.inorder()))
    return "\n".join(lines)


def _colored(pairs):
    return " ".join(f"{value} ({color.value})" for value, color in pairs)


def red_black_demo():
    """Traversals of a red-black tree showing each node's colour."""
    tree = RedBlackTree()
    for value in (10, 20, 30, 15, 25):
        tree.insert(value)
    return "\n".join(
        [
            f"Recorrido Inorden: {_colored(tree.inorder())}",
            f"Recorrido Preorden: {_colored(tree.preorder())}",
            f"Recorrido Posorden: {_colored(tree.postorder())}",
        ]
    )


DEMOS = {
    "generic": generic_demo,
    "avl": avl_demo,
    "binary": binary_demo,
    "bst": bst_demo,
    "red-black": red_black_demo,
}


def main(argv=None):
    """Print the chosen demo, or all of them when none is named."""
    parser = argparse.ArgumentParser(prog="arboles", description="Tree demos.")
    parser.add_argument("demo", nargs="?", choices=sorted(DEMOS), default=None)
    args = parser.parse_args(argv)
    names = [args.demo] if args.demo else list(DEMOS)
    for name in names:
        print(DEMOS[name]())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())