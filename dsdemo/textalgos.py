"""Small algorithms on text and sequences built on stacks, queues and sets."""

from __future__ import annotations

import string
from bisect import insort_left
from collections.abc import Iterable, Iterator, Sequence
from typing import IO, Any

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def brackets_match(text: str) -> bool:
    """True if every (), [] and {} in ``text`` is properly closed and nested."""
    stack: list[str] = []
    for c in text:
        if c in _OPENERS:
            stack.append(c)
        elif c in _PAIRS:
            if not stack or stack[-1] != _PAIRS[c]:
                return False
            stack.pop()
    return not stack


def _collapse_pass(chars: Sequence[str]) -> list[str]:
    out: list[str] = []
    run: list[str] = []
    for c in chars:
        if not run:
            run.append(c)
        elif len(run) < 3:
            if c == run[0]:
                run.append(c)
            else:
                out.extend(run)
                run = [c]
        else:
            # Three equal characters followed by another one vanish.
            run = [c]
    out.extend(run)
    return out


def collapse_runs(text: str) -> str:
    """Repeatedly remove three equal characters that are followed by more text.

    Passes are repeated until one removes nothing.  A run of three at the
    very end of the text is kept.
    """
    chars = list(text)
    while True:
        reduced = _collapse_pass(chars)
        if len(reduced) == len(chars):
            return "".join(reduced)
        chars = reduced


def inner_product(a: Iterable[float], b: Iterable[float]) -> float:
    """Sum of pairwise products, stopping at the end of the shorter input."""
    return sum((x * y for x, y in zip(a, b)), 0.0)


def read_vectors(stream: IO[str]) -> tuple[list[float], list[float]]:
    """Read a length n followed by two vectors of n numbers each."""
    tokens = stream.read().split()
    if not tokens:
        raise ValueError("missing vector length")
    try:
        length = int(tokens[0])
    except ValueError:
        raise ValueError(f"invalid vector length {tokens[0]!r}") from None
    if length < 0:
        raise ValueError(f"vector length must be non-negative, got {length}")
    numbers = tokens[1 : 1 + 2 * length]
    if len(numbers) < 2 * length:
        raise ValueError(f"expected {2 * length} numbers, got {len(numbers)}")
    values = [float(t) for t in numbers]
    return values[:length], values[length:]


def insertion_sorted(values: Iterable[Any]) -> list[Any]:
    """Build a sorted list by inserting each value before the first not smaller."""
    result: list[Any] = []
    for value in values:
        insort_left(result, value)
    return result


def _fold(item: str) -> str:
    return item.translate(_ASCII_LOWER)


class CaseInsensitiveSet:
    """A set of strings that treats ASCII letters without regard to case.

    The first spelling added for a word is the one kept.
    """

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: dict[str, str] = {}
        for item in items:
            self.add(item)

    def add(self, item: str) -> bool:
        """Add ``item``; return False if an equal word was already present."""
        key = _fold(item)
        if key in self._items:
            return False
        self._items[key] = item
        return True

    def __contains__(self, item: object) -> bool:
        return isinstance(item, str) and _fold(item) in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CaseInsensitiveSet({list(self)!r})"