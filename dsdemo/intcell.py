"""A cell that holds a single integer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class IntCell:
    """A simple integer memory cell; starts at 0."""

    value: int = 0


def main(argv: Sequence[str] | None = None) -> int:
    """Store 5 in a cell and print it."""
    cell = IntCell()
    cell.value = 5
    print(f"Cell contents: {cell.value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())