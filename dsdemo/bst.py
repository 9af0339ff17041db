"""Binary search trees: ordered insertion, lookup, neighbours and deletion."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dsdemo.binarytree import BinaryTree, TreeError, TreeNode

_DEMO_VALUES = (
    16, 8, 24, 4, 12, 20, 28, 2, 6, 10, 14, 18, 22, 26, 30,
    1, 3, 5, 7, 9, 11, 13, 15, 17, 19, 21, 23, 25, 27, 29, 31,
)


class BinarySearchTree(BinaryTree):
    """A binary tree kept in search order.

    Smaller values go to the left; values greater than or equal to a node
    go to its right, so equal values may appear more than once.
    """

    def _present(self, node: TreeNode) -> TreeNode | None:
        return None if node is self.nil else node

    def search(self, value: Any) -> TreeNode | None:
        """The first node met that holds ``value``, or None."""
        x = self._root
        while x is not self.nil and value != x.data:
            x = x.left if value < x.data else x.right
        return self._present(x)

    def minimum(self, node: TreeNode | None = None) -> TreeNode | None:
        """Node with the smallest value under ``node`` (the whole tree by default)."""
        x = self._root if node is None else node
        if x is self.nil:
            return None
        while x.left is not self.nil:
            x = x.left
        return x

    def maximum(self, node: TreeNode | None = None) -> TreeNode | None:
        """Node with the largest value under ``node`` (the whole tree by default)."""
        x = self._root if node is None else node
        if x is self.nil:
            return None
        while x.right is not self.nil:
            x = x.right
        return x

    def successor(self, node: TreeNode | None) -> TreeNode | None:
        """The node following ``node`` in sorted order, or None for the last."""
        x = self._resolve(node)
        if x is self.nil:
            raise TreeError("The node is a NULL.")
        if x.right is not self.nil:
            return self.minimum(x.right)
        y = x.parent
        while y is not self.nil and x is y.right:
            x, y = y, y.parent
        return self._present(y)

    def predecessor(self, node: TreeNode | None) -> TreeNode | None:
        """The node preceding ``node`` in sorted order, or None for the first."""
        x = self._resolve(node)
        if x is self.nil:
            raise TreeError("The node is a NULL.")
        if x.left is not self.nil:
            return self.maximum(x.left)
        y = x.parent
        while y is not self.nil and x is y.left:
            x, y = y, y.parent
        return self._present(y)

    def insert(self, value: Any) -> TreeNode:
        """Insert a new node holding ``value`` and return it."""
        node = TreeNode(value)
        self.insert_node(node)
        return node

    def insert_node(self, node: TreeNode) -> None:
        """Insert ``node`` as a leaf, keeping the search order."""
        node.left = node.right = self.nil
        y = self.nil
        x = self._root
        while x is not self.nil:
            y = x
            x = x.left if node.data < x.data else x.right
        node.parent = y
        if y is self.nil:
            self._root = node
        elif node.data < y.data:
            y.left = node
        else:
            y.right = node

    def delete(self, node: TreeNode | None) -> None:
        """Remove ``node`` from the tree, keeping the search order."""
        x = self._resolve(node)
        if x is self.nil:
            raise TreeError("The node is a NULL.")
        if x.left is self.nil:
            self.transplant(x, x.right)
        elif x.right is self.nil:
            self.transplant(x, x.left)
        else:
            y = self.minimum(x.right)
            if y.parent is not x:
                self.transplant(y, y.right)
                y.right = x.right
                y.right.parent = y
            self.transplant(x, y)
            y.left = x.left
            y.left.parent = y
        x.left = x.right = x.parent = None


def main(argv: Sequence[str] | None = None) -> int:
    """Build a full tree of 1..31, then delete three nodes, drawing each step."""
    tree = BinarySearchTree()
    for value in _DEMO_VALUES:
        tree.insert(value)
    print(tree.render(), end="")

    r = tree.root
    print(f"delete {r.data}")
    tree.delete(r)
    print(tree.render(), end="")

    r = tree.root
    print(f"delete {r.left.data}")
    tree.delete(r.left)
    print(tree.render(), end="")

    target = r.left.right.left
    print(f"delete {target.data}")
    tree.delete(target)
    print(tree.render(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())