"""Points in two or three dimensions with component-wise addition."""

from __future__ import annotations

import operator
from collections.abc import Iterator, Sequence


class DimensionError(ValueError):
    """Raised when a point has an unsupported or mismatched dimension."""


class Point:
    """A mutable point of dimension 2 or 3."""

    __slots__ = ("_coords",)

    def __init__(self, *args: float | Point) -> None:
        if len(args) == 1 and isinstance(args[0], Point):
            self._coords = list(args[0]._coords)
        elif len(args) in (2, 3):
            self._coords = [float(a) for a in args]
        else:
            raise DimensionError("Dimension error!")

    def _check(self, i: int) -> int:
        i = operator.index(i)
        if not 0 <= i < len(self._coords):
            raise IndexError("Dimension out range!")
        return i

    def __getitem__(self, i: int) -> float:
        return self._coords[self._check(i)]

    def __setitem__(self, i: int, value: float) -> None:
        self._coords[self._check(i)] = float(value)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __iadd__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        if len(other) != len(self):
            raise DimensionError("Dimension error!")
        self._coords = [a + b for a, b in zip(self._coords, other._coords)]
        return self

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[float]:
        return iter(self._coords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._coords == other._coords

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(f"{c:g}\t" for c in self._coords)

    def __repr__(self) -> str:
        return f"Point({', '.join(repr(c) for c in self._coords)})"

    def copy(self) -> Point:
        """Return an independent point with the same coordinates."""
        return Point(self)


def main(argv: Sequence[str] | None = None) -> int:
    """Show construction, indexing and addition of points."""
    a = Point(1, 2)
    print(", ".join(f"{c:g}" for c in a))
    b = Point(1, 2, 3)
    print(", ".join(f"{c:g}" for c in b))
    print(f"{a[0]:g}, {a[1]:g}")
    c = Point(b)
    c = b.copy()
    print(f"b + c = {b + c}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())