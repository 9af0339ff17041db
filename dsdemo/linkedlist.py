"""Singly linked lists driven by a cursor."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


class CursorError(LookupError):
    """Raised when an operation needs a cursor position that is not valid."""


@dataclass(eq=False)
class Node:
    """One node of a singly linked list."""

    value: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list with a cursor that marks the current node.

    ``LinkedList()`` is empty; ``LinkedList(value)`` holds one node, which
    is also the current one.
    """

    def __init__(self, *args: Any) -> None:
        if len(args) > 1:
            raise TypeError(f"expected at most one value, got {len(args)}")
        self._head: Node | None = None
        self._current: Node | None = None
        self._length = 0
        if args:
            self._head = Node(args[0])
            self._current = self._head
            self._length = 1

    @property
    def head(self) -> Node | None:
        """The first node, or None when the list is empty."""
        return self._head

    @property
    def current(self) -> Node | None:
        """The node under the cursor, or None."""
        return self._current

    @property
    def value(self) -> Any:
        """Value of the current node."""
        if self._current is None:
            raise CursorError("Current node is Null.")
        return self._current.value

    @value.setter
    def value(self, new: Any) -> None:
        if self._current is None:
            raise CursorError("Current node is Null.")
        self._current.value = new

    def insert(self, value: Any) -> Node:
        """Insert after the cursor; with no cursor, insert at the front.

        A node inserted at the front becomes the current node.
        """
        if self._current is None:
            node = Node(value, self._head)
            self._head = node
            self._current = node
        else:
            node = Node(value, self._current.next)
            self._current.next = node
        self._length += 1
        return node

    def delete(self) -> None:
        """Delete the node after the cursor.

        With no cursor the first node is removed and the cursor moves to the
        new head.  If the list holds a single node under the cursor, the list
        becomes empty.  An empty list is left alone.
        """
        current = self._current
        if current is None:
            if self._head is not None:
                self._head = self._head.next
                self._length -= 1
                self._current = self._head
        elif current.next is None:
            if self._length != 1:
                raise CursorError("no node after the cursor to delete")
            self._head = None
            self._current = None
            self._length = 0
        else:
            current.next = current.next.next
            self._length -= 1

    def advance(self) -> None:
        """Move the cursor to the next node; no-op without a cursor."""
        if self._current is not None:
            self._current = self._current.next

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def seek(self, node: Node | None) -> None:
        """Place the cursor on ``node`` (a node of this list) or on None."""
        if node is not None and not any(n is node for n in self._nodes()):
            raise CursorError("node does not belong to this list")
        self._current = node

    def find(self, value: Any) -> Node | None:
        """First node holding ``value``, or None."""
        return next((n for n in self._nodes() if n.value == value), None)

    def __iter__(self) -> Iterator[Any]:
        return (n.value for n in self._nodes())

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return "".join(f"{v}\t" for v in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


class SimpleList:
    """A linked list with head, tail and cursor, appended to at the tail.

    ``SimpleList()`` is empty; ``SimpleList(value)`` holds one node.
    """

    def __init__(self, *args: Any) -> None:
        if len(args) > 1:
            raise TypeError(f"expected at most one value, got {len(args)}")
        self._head: Node | None = None
        self._tail: Node | None = None
        self._current: Node | None = None
        self._length = 0
        if args:
            self._single(args[0])

    def _single(self, value: Any) -> None:
        node = Node(value)
        self._head = self._tail = self._current = node
        self._length = 1

    @property
    def current(self) -> Node | None:
        """The node under the cursor, or None."""
        return self._current

    def append(self, value: Any) -> None:
        """Add a node at the tail; the first node also becomes current."""
        if self._tail is None:
            self._single(value)
            return
        self._tail.next = Node(value)
        self._tail = self._tail.next
        self._length += 1

    def push(self, value: Any) -> None:
        """Add a node at the front and move the cursor to it."""
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._current = node
        self._length += 1

    def insert(self, value: Any) -> None:
        """Insert after the cursor; into an empty list as its only node."""
        if self._head is None or self._current is None:
            if self._head is not None:
                raise CursorError("no current node to insert after")
            self._single(value)
            return
        node = Node(value, self._current.next)
        self._current.next = node
        if self._current is self._tail:
            self._tail = node
        self._length += 1

    def delete(self) -> None:
        """Delete the node after the cursor, or the only node of the list."""
        if self._head is None:
            return
        if self._length == 1:
            if self._current is not self._tail:
                raise CursorError("Error!")
            self.clear()
            return
        current = self._current
        if current is None or current is self._tail or current.next is None:
            raise CursorError("Error!")
        removed = current.next
        current.next = removed.next
        if removed is self._tail:
            self._tail = current
        self._length -= 1

    def clear(self) -> None:
        """Remove every node."""
        self._head = self._tail = self._current = None
        self._length = 0

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return "\t".join(str(v) for v in self)

    def __repr__(self) -> str:
        return f"SimpleList({list(self)!r})"


def _show(items: LinkedList) -> None:
    print("List all elements:")
    print(items)


def _show_simple(items: SimpleList) -> None:
    if len(items):
        print(items)


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise both list types and print their contents."""
    a = LinkedList(2.71)
    c = LinkedList()
    c.insert(3.14)
    _show(a)
    _show(c)
    c.insert(2.71)
    c.delete()
    c.insert(1.41)
    _show(c)
    a.delete()
    _show(a)
    a.delete()
    _show(a)
    c.seek(None)
    c.delete()
    a.insert(3.14)
    _show(c)
    c.value = a.value
    _show(c)

    s = SimpleList()
    t = SimpleList(1)
    for i in range(3):
        s.append(i)
    s.push(999)
    s.insert(13)
    t.delete()
    _show_simple(s)
    _show_simple(t)
    s.clear()
    _show_simple(s)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())