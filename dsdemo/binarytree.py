"""Binary trees built on a shared sentinel node, with a text renderer."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

RESET = "\033[0m"
RED_CODE = "\033[31m"
WHITE_CODE = "\033[37m"


class Color(enum.Enum):
    """Colour of a tree node."""

    RED = "red"
    BLACK = "black"


class TreeError(ValueError):
    """Raised when a tree operation is applied where it cannot work."""


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree.

    ``depth`` and ``pos`` record the node's layer and its place in that
    layer of the complete binary tree; they are refreshed by
    :meth:`BinaryTree.update_depth_and_pos`.
    """

    data: Any = None
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)
    parent: TreeNode | None = field(default=None, repr=False)
    depth: int = 0
    pos: int = 0
    color: Color = Color.RED


class _Branch(enum.Enum):
    LEFT = enum.auto()
    RIGHT = enum.auto()
    BOTH = enum.auto()
    NONE = enum.auto()


def _both_branch(width: int) -> str:
    k = (width - 3) // 2
    return "┌" + "─" * k + "┴" + "─" * k + "┐"


def _left_branch(width: int) -> str:
    k = (width - 3) // 2
    return "┌" + "─" * k + "┘" + " " * k + " "


def _right_branch(width: int) -> str:
    k = (width - 3) // 2
    return " " + " " * k + "└" + "─" * k + "┐"


def _spaces(count: int) -> str:
    return " " * max(count, 0)


class BinaryTree:
    """A binary tree whose missing children all point at one sentinel.

    ``BinaryTree()`` is empty; ``BinaryTree(value)`` holds a single root
    node.  The sentinel ``nil`` is black and stands for "no node"; the
    public ``root`` property reports an empty tree as None.
    """

    def __init__(self, *args: Any) -> None:
        if len(args) > 1:
            raise TypeError(f"expected at most one value, got {len(args)}")
        self.nil = TreeNode(color=Color.BLACK)
        self._root: TreeNode = self.nil
        if args:
            self._root = self._new_node(args[0], self.nil)

    def _new_node(self, value: Any, parent: TreeNode) -> TreeNode:
        return TreeNode(value, self.nil, self.nil, parent)

    @property
    def root(self) -> TreeNode | None:
        """The root node, or None when the tree is empty."""
        return None if self._root is self.nil else self._root

    @root.setter
    def root(self, node: TreeNode | None) -> None:
        self._root = self.nil if node is None else node

    def _resolve(self, node: TreeNode | None) -> TreeNode:
        return self.nil if node is None else node

    def insert_left(self, node: TreeNode | None, value: Any) -> TreeNode:
        """Attach a new left child holding ``value`` under ``node``."""
        node = self._resolve(node)
        if node is self.nil:
            raise TreeError("The tree is empty.")
        if node.left is not self.nil:
            raise TreeError("The left child is occupied.")
        child = self._new_node(value, node)
        node.left = child
        return child

    def insert_right(self, node: TreeNode | None, value: Any) -> TreeNode:
        """Attach a new right child holding ``value`` under ``node``."""
        node = self._resolve(node)
        if node is self.nil:
            raise TreeError("The tree is empty.")
        if node.right is not self.nil:
            raise TreeError("The right child is occupied.")
        child = self._new_node(value, node)
        node.right = child
        return child

    def transplant(self, u: TreeNode | None, v: TreeNode | None) -> None:
        """Put the subtree rooted at ``v`` where the one at ``u`` hangs."""
        u = self._resolve(u)
        v = self._resolve(v)
        if u is self.nil:
            raise TreeError("Can not transplant to a NULL.")
        if u.parent is self.nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def height(self, node: TreeNode | None = None) -> int:
        """Height of the subtree at ``node`` (the whole tree by default).

        An empty tree has height 0 and a single node height 1.
        """
        start = self._root if node is None else node
        if start is self.nil:
            return 0
        height = 0
        layer = [start]
        while layer:
            height += 1
            layer = [
                child
                for n in layer
                for child in (n.left, n.right)
                if child is not self.nil
            ]
        return height

    def inorder(self, node: TreeNode | None = None) -> Iterator[Any]:
        """Yield the data of the subtree at ``node`` in sorted-walk order."""
        stack: list[TreeNode] = []
        current = self._root if node is None else node
        while stack or current is not self.nil:
            while current is not self.nil:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.data
            current = current.right

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def update_depth_and_pos(self) -> None:
        """Refresh the depth and layer position of every node."""
        stack = [(self._root, 0, 0)]
        while stack:
            node, depth, pos = stack.pop()
            if node is self.nil:
                continue
            node.depth = depth
            node.pos = pos
            stack.append((node.right, depth + 1, pos * 2 + 1))
            stack.append((node.left, depth + 1, pos * 2))

    def render(self, color: bool = True) -> str:
        """Draw the tree as a complete binary tree with branch lines.

        Red nodes are drawn in red and others in white when ``color`` is
        true.  The drawing grows as 2 to the power of the height, so it
        suits small trees only.
        """
        self.update_depth_and_pos()
        if self._root is self.nil:
            return "The tree is empty.\n"
        h = self.height()
        counter = [0] * h
        order: list[tuple[TreeNode, _Branch]] = []
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            has_left = node.left is not self.nil
            has_right = node.right is not self.nil
            if has_left:
                queue.append(node.left)
            if has_right:
                queue.append(node.right)
            if has_left and has_right:
                case = _Branch.BOTH
            elif has_left:
                case = _Branch.LEFT
            elif has_right:
                case = _Branch.RIGHT
            else:
                case = _Branch.NONE
            order.append((node, case))
            counter[node.depth] += 1

        out: list[str] = []
        cache: list[tuple[TreeNode, _Branch]] = []
        count = 0
        off = 0
        for node, case in order:
            span = 1 << (h - node.depth)
            while off < node.pos:
                out.append(_spaces(span * 2))
                off += 1
            out.append(_spaces(span - 2))
            label = f"{node.data!s:<3}"
            if color:
                code = RED_CODE if node.color is Color.RED else WHITE_CODE
                label = f"{code}{label}{RESET}"
            out.append(label)
            out.append(_spaces(span - 1))
            count += 1
            off += 1
            cache.append((node, case))
            if count == counter[node.depth] and node.depth != h - 1:
                count = 0
                off = 0
                out.append("\n")
                for cached, cached_case in cache:
                    span = 1 << (h - cached.depth)
                    while off < cached.pos:
                        out.append(_spaces(span * 2))
                        off += 1
                    out.append(_spaces(span // 2 - 2))
                    width = span + 1
                    if cached_case is _Branch.BOTH:
                        out.append(_both_branch(width))
                    elif cached_case is _Branch.LEFT:
                        out.append(_left_branch(width))
                    elif cached_case is _Branch.RIGHT:
                        out.append(_right_branch(width))
                    else:
                        out.append(_spaces(width))
                    out.append(_spaces(span // 2 - 2))
                    out.append("   ")
                    off += 1
                cache.clear()
                off = 0
                out.append("\n")
        out.append("\n")
        return "".join(out)

    def clear(self) -> None:
        """Drop every node, leaving an empty tree."""
        self._root = self.nil

    def left_rotate(self, x: TreeNode) -> None:
        """Rotate left around ``x``; its right child takes its place."""
        y = x.right
        if x is self.nil or y is self.nil:
            raise TreeError("left rotation needs a node with a right child")
        x.right = y.left
        if y.left is not self.nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self.nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def right_rotate(self, x: TreeNode) -> None:
        """Rotate right around ``x``; its left child takes its place."""
        y = x.left
        if x is self.nil or y is self.nil:
            raise TreeError("right rotation needs a node with a left child")
        x.left = y.right
        if y.right is not self.nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self.nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.right = x
        x.parent = y


def main(argv: Sequence[str] | None = None) -> int:
    """Build a three-node tree, draw it, then lift its left child to root."""
    BinaryTree(1)
    b = BinaryTree(3)
    b.insert_left(b.root, 1)
    b.insert_right(b.root, 2)
    print(f"Height of B: {b.height()}")
    print(b.render(), end="")
    t = b.root.left
    t.color = Color.BLACK
    b.transplant(b.root, t)
    print(b.render(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())