"""Text rendering of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.tree import BinaryTreeNode


def _write(row: list[str], start: int, text: str) -> None:
    end = start + len(text)
    if end > len(row):
        row.extend(" " * (end - len(row)))
    row[start:end] = text


def _layout(
    node: Optional[BinaryTreeNode], offset: int, depth: int, rows: list[list[str]]
) -> int:
    """Draw the subtree into ``rows`` and return the width it takes."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _layout(node.left, offset, depth + 1, rows)
    right = _layout(node.right, offset + left + width, depth + 1, rows)
    _write(rows[depth], offset + left, label)
    if depth:
        above = rows[depth - 1]
        mark = offset + left + width // 2
        if is_left:
            _write(above, mark, "-" * (width + right))
        else:
            _write(above, offset - width // 2, "-" * (left + width))
        _write(above, mark, ".")
    return left + width + right


def render(tree: Optional[BinaryTreeNode]) -> str:
    """Return the drawing of ``tree``, each line ending in a newline.

    An empty tree renders as the empty string.
    """
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]
    _layout(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Optional[BinaryTreeNode], file: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))