import pytest

from bintree.tree import BinaryTreeNode


def sample_tree():
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.right = BinaryTreeNode(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def perfect_tree(levels, start=0):
    root = BinaryTreeNode(start)
    frontier = [root]
    counter = start
    for _ in range(levels - 1):
        nxt = []
        for node in frontier:
            counter += 1
            node.left = BinaryTreeNode(counter, node)
            counter += 1
            node.right = BinaryTreeNode(counter, node)
            nxt.extend([node.left, node.right])
        frontier = nxt
    return root


def test_new_node_is_detached_from_parent():
    parent = BinaryTreeNode(1)
    child = BinaryTreeNode(2, parent)
    assert child.parent is parent
    assert parent.left is None and parent.right is None
    assert child.value == 2


def test_insert_left_pushes_existing_child_down():
    root = BinaryTreeNode(1)
    old = root.insert_left(2)
    new = root.insert_left(3)
    assert root.left is new
    assert new.parent is root
    assert new.left is old
    assert old.parent is new
    assert new.right is None


def test_insert_right_pushes_existing_child_down():
    root = BinaryTreeNode(1)
    old = root.insert_right(2)
    new = root.insert_right(3)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_sample_leaves_match_demo_output():
    root = sample_tree()
    assert root.leaves() == 2
    assert root.right.leaves() == 1
    assert root.left.right.leaves() == 1


def test_is_leaf_and_is_root():
    root = sample_tree()
    assert root.is_root() and not root.is_leaf()
    leaf = root.left.right
    assert leaf.is_leaf() and not leaf.is_root()


def test_traversals_visit_same_values():
    root = sample_tree()
    pre = list(root.preorder())
    ino = list(root.inorder())
    post = list(root.postorder())
    assert sorted(pre) == sorted(ino) == sorted(post)
    assert len(pre) == root.size()
    assert pre[0] == root.value
    assert post[-1] == root.value


def test_preorder_order():
    root = sample_tree()
    assert list(root.preorder()) == [98, 12, 54, 128, 402]


def test_inorder_order():
    root = sample_tree()
    assert list(root.inorder()) == [12, 54, 98, 128, 402]


def test_postorder_is_reverse_of_mirrored_preorder():
    root = perfect_tree(3)
    post = list(root.postorder())
    assert post[-1] == 0
    assert post[:3] == [list(root.left.preorder())[1], list(root.left.preorder())[2], 1]


def test_height_and_depth():
    root = sample_tree()
    leaf = root.left.right
    assert leaf.height() == 0
    assert root.left.height() == leaf.height() + 1
    assert root.height() == max(root.left.height(), root.right.height()) + 1
    assert leaf.depth() == 2
    assert root.depth() == 0


def test_size_is_leaves_plus_inner_nodes():
    for tree in (sample_tree(), perfect_tree(4), BinaryTreeNode(5)):
        assert tree.size() == tree.leaves() + tree.nodes()


def test_balance():
    root = BinaryTreeNode(1)
    assert root.balance() == 0
    root.insert_left(2)
    assert root.balance() == 1
    root.insert_right(3)
    assert root.balance() == 0
    root.right.insert_right(4)
    root.right.right.insert_right(5)
    assert root.balance() == -2


@pytest.mark.parametrize("levels", [1, 2, 3, 4])
def test_perfect_trees_are_full_and_perfect(levels):
    tree = perfect_tree(levels)
    assert tree.is_full()
    assert tree.is_perfect()
    assert tree.size() == 2 ** levels - 1
    assert tree.height() == levels - 1


def test_full_but_not_perfect():
    root = perfect_tree(2)
    root.left.left = BinaryTreeNode(10, root.left)
    root.left.right = BinaryTreeNode(11, root.left)
    assert root.is_full()
    assert not root.is_perfect()


def test_one_child_is_neither_full_nor_perfect():
    root = BinaryTreeNode(1)
    root.insert_left(2)
    assert not root.is_full()
    assert not root.is_perfect()


def test_sibling():
    root = sample_tree()
    assert root.left.sibling() is root.right
    assert root.right.sibling() is root.left
    assert root.sibling() is None
    assert root.left.right.sibling() is None


def test_uncle():
    root = sample_tree()
    assert root.left.right.uncle() is root.right
    assert root.right.right.uncle() is root.left
    assert root.left.uncle() is None
    assert root.uncle() is None


def test_sibling_of_unattached_node_is_none():
    parent = BinaryTreeNode(1)
    parent.insert_left(2)
    stray = BinaryTreeNode(3, parent)
    assert stray.sibling() is None