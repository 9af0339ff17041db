"""A dense matrix stored column by column, filled with its own indices."""

from __future__ import annotations

from collections.abc import Sequence


class Matrix:
    """A ``rows`` by ``cols`` matrix whose storage slot k holds k."""

    def __init__(self, rows: int, cols: int | None = None) -> None:
        if cols is None:
            cols = rows
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self.rows = rows
        self.cols = cols
        self._data = list(range(rows * cols))

    def __getitem__(self, index: tuple[int, int]) -> int:
        i, j = index
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"index ({i}, {j}) out of range")
        return self._data[j * self.rows + i]


def main(argv: Sequence[str] | None = None) -> int:
    """Print a 3 by 3 matrix row by row."""
    n = 3
    m = Matrix(n)
    for j in range(n):
        print("".join(f"{m[i, j]}\t" for i in range(n)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())