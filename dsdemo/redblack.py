"""Red-black trees: binary search trees kept balanced by node colours."""

from __future__ import annotations

from typing import Any

from dsdemo.binarytree import Color, TreeError, TreeNode
from dsdemo.bst import BinarySearchTree


class RedBlackTree(BinarySearchTree):
    """A binary search tree that keeps the red-black properties.

    The root is black, a red node has no red child, and every path from a
    node down to the sentinel passes the same number of black nodes.
    ``RedBlackTree()`` is empty; ``RedBlackTree(value)`` holds one black
    root.
    """

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        if self._root is not self.nil:
            self._root.color = Color.BLACK

    def insert_node(self, node: TreeNode) -> None:
        """Insert ``node`` as a red leaf, then restore the colour rules."""
        node.color = Color.RED
        super().insert_node(node)
        x = node
        while x.parent.color is Color.RED:
            parent = x.parent
            grand = parent.parent
            if parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    x = grand
                    continue
                if x is parent.right:
                    x = parent
                    self.left_rotate(x)
                    parent = x.parent
                    grand = parent.parent
                parent.color = Color.BLACK
                grand.color = Color.RED
                self.right_rotate(grand)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    x = grand
                    continue
                if x is parent.left:
                    x = parent
                    self.right_rotate(x)
                    parent = x.parent
                    grand = parent.parent
                parent.color = Color.BLACK
                grand.color = Color.RED
                self.left_rotate(grand)
        self._root.color = Color.BLACK

    def delete(self, node: TreeNode | None) -> None:
        """Remove ``node`` from the tree, then restore the colour rules."""
        z = self._resolve(node)
        if z is self.nil:
            raise TreeError("The node is a NULL.")
        y = z
        removed_color = y.color
        if z.left is self.nil:
            x = z.right
            self.transplant(z, z.right)
        elif z.right is self.nil:
            x = z.left
            self.transplant(z, z.left)
        else:
            y = self.minimum(z.right)
            removed_color = y.color
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self.transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self.transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color
        if removed_color is Color.BLACK:
            self._delete_fixup(x)
        z.left = z.right = z.parent = None

    def _delete_fixup(self, x: TreeNode) -> None:
        while x is not self._root and x.color is Color.BLACK:
            parent = x.parent
            if x is parent.left:
                w = parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self.left_rotate(parent)
                    w = parent.right
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = parent
                    continue
                if w.right.color is Color.BLACK:
                    w.left.color = Color.BLACK
                    w.color = Color.RED
                    self.right_rotate(w)
                    w = parent.right
                w.color = parent.color
                parent.color = Color.BLACK
                w.right.color = Color.BLACK
                self.left_rotate(parent)
                x = self._root
            else:
                w = parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self.right_rotate(parent)
                    w = parent.left
                if w.right.color is Color.BLACK and w.left.color is Color.BLACK:
                    w.color = Color.RED
                    x = parent
                    continue
                if w.left.color is Color.BLACK:
                    w.right.color = Color.BLACK
                    w.color = Color.RED
                    self.left_rotate(w)
                    w = parent.left
                w.color = parent.color
                parent.color = Color.BLACK
                w.left.color = Color.BLACK
                self.right_rotate(parent)
                x = self._root
        x.color = Color.BLACK