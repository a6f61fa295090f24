# bintree

This is a small library of binary tree nodes. Each node stores an integer and knows its parent. The library provides the usual traversals and measurements. It also has an ASCII renderer that shows the shape of a tree.

## Installation

```
pip install .
```

## Building a tree

```python
from bintree.tree import BinaryTreeNode

root = BinaryTreeNode(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
root.insert_right(128)   # 128 takes 402's place; 402 becomes its right child
```

`insert_left` and `insert_right` always put the new node directly under the node they are called on, and return the new node. A child already in that place moves down one level and hangs on the same side of the new node.

`BinaryTreeNode(value, parent=...)` only records the parent. It does not attach the new node to that parent. To link it in, assign it to `parent.left` or `parent.right` yourself.

## Traversals

`preorder()`, `inorder()` and `postorder()` each return an iterator over the values stored in the subtree:

```python
list(root.preorder())   # [98, 12, 54, 128, 402]
list(root.inorder())    # [12, 54, 98, 128, 402]
list(root.postorder())  # [54, 12, 402, 128, 98]
```

## Measurements and checks

| Method         | Result                                                              |
|----------------|---------------------------------------------------------------------|
| `height()`     | edges on the longest path down to a leaf (a leaf has height 0)      |
| `depth()`      | edges on the path up to the root (the root has depth 0)             |
| `size()`       | number of nodes in the subtree                                      |
| `leaves()`     | number of nodes in the subtree with no children                     |
| `nodes()`      | number of nodes in the subtree with at least one child              |
| `balance()`    | height of the left subtree minus height of the right subtree        |
| `is_leaf()`    | whether the node has no children                                    |
| `is_root()`    | whether the node has no parent                                      |
| `is_full()`    | whether every node has either zero or two children                  |
| `is_perfect()` | whether every inner node has two children and all leaves share a level |
| `sibling()`    | the other child of the same parent, or `None`                       |
| `uncle()`      | the sibling of the parent, or `None`                                |

## Rendering

```python
from bintree.render import render, print_tree

print_tree(root)             # writes to standard output
text = render(root)          # the same drawing as a string
```

`print_tree` also accepts a `file` argument, which can be any text stream.

The drawing has one line per level. Each value is shown as a zero-padded box such as `(098)`. Dashes connect every node to its children, and a dot marks each child's position. If you pass `None` as the tree, the result is the empty string.

## Demo

The package installs a command that builds a sample tree, draws it, and reports how many leaves three of its subtrees have:

```
bintree-demo
```

The same sample tree is available from Python as `bintree.demo.build_sample_tree()`.

## What it does not do

The package has no method that removes a node or a subtree. To drop part of a tree, clear the child link (for example, `node.left = None`).

The nodes are not ordered by value. The package does no searching or balancing.