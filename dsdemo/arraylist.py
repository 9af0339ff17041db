"""A fixed-size list of comparable items with linear and binary search."""

from __future__ import annotations

import sys
from bisect import bisect_left
from collections.abc import Iterator, Sequence
from typing import Any


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(items: list[Any]) -> list[Any]:
    if len(items) <= 1:
        return list(items)
    middle = (len(items) + 1) // 2
    return _merge(_merge_sort(items[:middle]), _merge_sort(items[middle:]))


class ArrayList:
    """A list of ``size`` slots, each starting with the value ``fill``."""

    def __init__(self, size: int = 0, fill: Any = 0) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._data: list[Any] = [fill] * size

    def find(self, value: Any) -> int:
        """Index of the first element equal to ``value``, or -1."""
        for index, item in enumerate(self._data):
            if item == value:
                return index
        return -1

    def fast_find(self, value: Any) -> int:
        """Bisection search in a sorted list; first matching index, or -1."""
        index = bisect_left(self._data, value)
        if index < len(self._data) and self._data[index] == value:
            return index
        return -1

    def merge_sort(self) -> None:
        """Sort the elements in place, keeping equal elements in order."""
        self._data = _merge_sort(self._data)

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[index] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __str__(self) -> str:
        return "".join(f"{item}\t" for item in self._data)

    def __repr__(self) -> str:
        return f"ArrayList({self._data!r})"


def _show(items: ArrayList) -> None:
    print("List all items:", file=sys.stderr)
    print(items)


def main(argv: Sequence[str] | None = None) -> int:
    """Fill, index, search and sort a few small lists."""
    print("Begin to test...")
    a = ArrayList(5, 3)
    _show(a)
    for i in range(5):
        a[i] = i
    print("".join(f"{item}\t" for item in a))
    print(f"Test << :{a}")
    print(a.find(3))
    b = ArrayList(5)
    for i, value in enumerate((5, 1, 4, 2, 3)):
        b[i] = value
    b.merge_sort()
    _show(b)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())