"""Binary tree nodes with parent links and common structural queries."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional


class BinaryTreeNode:
    """A binary tree node holding an integer, with links to parent and children.

    Creating a node records its parent but does not attach it to that
    parent; use :meth:`insert_left` or :meth:`insert_right` for that.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[BinaryTreeNode] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[BinaryTreeNode] = None
        self.right: Optional[BinaryTreeNode] = None

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"

    # Building -------------------------------------------------------------

    def insert_left(self, value: int) -> BinaryTreeNode:
        """Insert a new left child; an existing left child becomes its left child."""
        node = BinaryTreeNode(value, parent=self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> BinaryTreeNode:
        """Insert a new right child; an existing right child becomes its right child."""
        node = BinaryTreeNode(value, parent=self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    # Node predicates ------------------------------------------------------

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    # Traversals -----------------------------------------------------------

    def _walk(self) -> Iterator[BinaryTreeNode]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self) -> Iterator[int]:
        """Yield the values of the subtree in pre-order."""
        for node in self._walk():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield the values of the subtree in in-order."""
        stack: list[BinaryTreeNode] = []
        node: Optional[BinaryTreeNode] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield the values of the subtree in post-order."""
        order: list[int] = []
        stack = [self]
        while stack:
            node = stack.pop()
            order.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(order)

    # Measurements ---------------------------------------------------------

    @staticmethod
    def _levels(node: Optional[BinaryTreeNode]) -> int:
        """Number of nodes on the longest downward path; 0 for no node."""
        if node is None:
            return 0
        levels = 0
        frontier = deque([node])
        while frontier:
            levels += 1
            for _ in range(len(frontier)):
                current = frontier.popleft()
                if current.left is not None:
                    frontier.append(current.left)
                if current.right is not None:
                    frontier.append(current.right)
        return levels

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        return self._levels(self) - 1

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        depth = 0
        node = self
        while node.parent is not None:
            depth += 1
            node = node.parent
        return depth

    def size(self) -> int:
        """Number of nodes in the subtree."""
        return sum(1 for _ in self._walk())

    def leaves(self) -> int:
        """Number of leaves in the subtree."""
        return sum(1 for node in self._walk() if node.is_leaf())

    def nodes(self) -> int:
        """Number of nodes in the subtree with at least one child."""
        return sum(1 for node in self._walk() if not node.is_leaf())

    def balance(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        return self._levels(self.left) - self._levels(self.right)

    def is_full(self) -> bool:
        """Return True if every node has either zero or two children."""
        return all(
            (node.left is None) == (node.right is None) for node in self._walk()
        )

    def is_perfect(self) -> bool:
        """Return True if all inner nodes have two children and leaves share a level."""
        return all(
            node.is_leaf() or self._levels(node.left) == self._levels(node.right)
            for node in self._walk()
        )

    # Relatives ------------------------------------------------------------

    def sibling(self) -> Optional[BinaryTreeNode]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Optional[BinaryTreeNode]:
        """Return the sibling of this node's parent, or None."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grandparent = parent.parent
        if grandparent.left is parent:
            return grandparent.right
        return grandparent.left