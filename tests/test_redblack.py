import math
import random

import pytest

from dsdemo.binarytree import Color, TreeError
from dsdemo.redblack import RedBlackTree


def _black_height(tree: RedBlackTree) -> int:
    nil = tree.nil
    assert nil.color is Color.BLACK

    def walk(node):
        if node is nil:
            return 1
        if node.color is Color.RED:
            assert node.left.color is Color.BLACK
            assert node.right.color is Color.BLACK
        for child in (node.left, node.right):
            if child is not nil:
                assert child.parent is node
        left = walk(node.left)
        right = walk(node.right)
        assert left == right
        return left + (1 if node.color is Color.BLACK else 0)

    root = tree.root
    if root is None:
        return walk(nil)
    assert root.color is Color.BLACK
    assert root.parent is nil
    return walk(root)


def test_single_value_constructor_has_black_root():
    tree = RedBlackTree(7)
    assert tree.root.data == 7
    assert tree.root.color is Color.BLACK


def test_empty_tree():
    tree = RedBlackTree()
    assert tree.root is None
    assert list(tree) == []
    assert _black_height(tree) == 1


def test_first_insert_is_black_root():
    tree = RedBlackTree()
    tree.insert(5)
    assert tree.root.data == 5
    assert tree.root.color is Color.BLACK


def test_ascending_three_rotates_to_middle():
    tree = RedBlackTree()
    for value in (1, 2, 3):
        tree.insert(value)
    assert tree.root.data == 2
    assert tree.root.left.data == 1
    assert tree.root.right.data == 3
    _black_height(tree)


def test_descending_three_rotates_to_middle():
    tree = RedBlackTree()
    for value in (3, 2, 1):
        tree.insert(value)
    assert tree.root.data == 2
    _black_height(tree)


@pytest.mark.parametrize("n", [10, 100, 500])
def test_sorted_insertion_stays_balanced(n):
    tree = RedBlackTree()
    for value in range(n):
        tree.insert(value)
        _black_height(tree)
    assert list(tree) == list(range(n))
    assert tree.height() <= 2 * math.log2(n + 1)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_insertion_keeps_invariants(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 50) for _ in range(200)]
    tree = RedBlackTree()
    for value in values:
        tree.insert(value)
    _black_height(tree)
    assert list(tree) == sorted(values)
    for value in values:
        assert tree.search(value).data == value


@pytest.mark.parametrize("seed", [4, 5, 6])
def test_random_deletion_keeps_invariants(seed):
    rng = random.Random(seed)
    values = list(range(120))
    rng.shuffle(values)
    tree = RedBlackTree()
    for value in values:
        tree.insert(value)
    remaining = sorted(values)
    order = values[:]
    rng.shuffle(order)
    for value in order:
        node = tree.search(value)
        tree.delete(node)
        remaining.remove(value)
        _black_height(tree)
        assert list(tree) == remaining
        assert tree.search(value) is None
    assert tree.root is None


def test_delete_with_duplicates():
    tree = RedBlackTree()
    values = [4, 4, 4, 2, 2, 8, 8, 1]
    for value in values:
        tree.insert(value)
    _black_height(tree)
    tree.delete(tree.search(4))
    expected = sorted(values)
    expected.remove(4)
    assert list(tree) == expected
    _black_height(tree)


def test_delete_none_raises():
    tree = RedBlackTree(1)
    with pytest.raises(TreeError):
        tree.delete(None)


def test_insert_node_is_recoloured_red_then_fixed():
    tree = RedBlackTree()
    for value in (10, 20, 30, 40):
        tree.insert(value)
    node = tree.insert(50)
    _black_height(tree)
    assert tree.search(50) is node
    assert list(tree) == [10, 20, 30, 40, 50]