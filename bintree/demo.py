"""Sample program: build a small tree, draw it and count its leaves."""

from __future__ import annotations

from typing import Optional, Sequence

from bintree.render import print_tree
from bintree.tree import BinaryTreeNode


def build_sample_tree() -> BinaryTreeNode:
    """Build the sample tree used by :func:`main` and return its root."""
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, parent=root)
    root.right = BinaryTreeNode(402, parent=root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the sample tree and the leaf counts of some of its subtrees."""
    root = build_sample_tree()
    print_tree(root)
    assert root.left is not None and root.right is not None
    assert root.left.right is not None
    for node in (root, root.right, root.left.right):
        print(f"Leaves in {node.value}: {node.leaves()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())