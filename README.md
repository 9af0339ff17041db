# dsdemo

Small, readable implementations of classic data structures, written for
teaching, plus a tiny level-set demo that builds a signed-distance field
around a circle. There are no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module              | Contents                                                                 |
|---------------------|--------------------------------------------------------------------------|
| `dsdemo.levelset`   | `interface_point`, `initial_interface`, `distance`, `clockwise`, `signed_distance`, `render_matlab` |
| `dsdemo.point`      | `Point` of dimension 2 or 3 with indexing, `+`, `+=` and `copy()`; `DimensionError` |
| `dsdemo.intcell`    | `IntCell`, a dataclass holding one integer `value` (default 0)           |
| `dsdemo.matrix`     | `Matrix(rows, cols=None)`, a column-major matrix whose slot k holds k, read with `m[i, j]` |
| `dsdemo.arraylist`  | `ArrayList(size, fill)` with `find`, `fast_find` (bisection on a sorted list) and `merge_sort` |
| `dsdemo.linkedlist` | `LinkedList` and `SimpleList`, singly linked lists with a cursor; `Node`, `CursorError` |
| `dsdemo.binarytree` | `BinaryTree`, `TreeNode`, `Color`, `TreeError`; rotations, transplant, in-order iteration and a box-drawing `render()` |
| `dsdemo.bst`        | `BinarySearchTree`: `search`, `minimum`, `maximum`, `successor`, `predecessor`, `insert`, `insert_node`, `delete` |
| `dsdemo.redblack`   | `RedBlackTree`, a binary search tree kept balanced by node colours       |
| `dsdemo.textalgos`  | `brackets_match`, `collapse_runs`, `inner_product`, `read_vectors`, `insertion_sorted`, `CaseInsensitiveSet` |

## Examples

```python
from dsdemo.point import Point
from dsdemo.bst import BinarySearchTree
from dsdemo.redblack import RedBlackTree
from dsdemo.textalgos import brackets_match, CaseInsensitiveSet

p = Point(1, 2) + Point(3, 4)
print(list(p))                      # [4.0, 6.0]

tree = BinarySearchTree()
for value in (16, 8, 24, 4, 12):
    tree.insert(value)
node = tree.search(8)
print(tree.successor(node).data)    # 12

rb = RedBlackTree()
for value in range(10):
    rb.insert(value)
print(list(rb))                     # [0, 1, ..., 9]

print(brackets_match("([]{})"))     # True

names = CaseInsensitiveSet(["HELLO", "helLo", "WORLD"])
print(len(names))                   # 2
```

## Errors

- `Point` raises `DimensionError` when built from other than two or three
  coordinates, or when points of different dimensions are added; an index
  outside the point's dimension raises `IndexError`.
- `LinkedList` raises `CursorError` when reading or setting `value` with no
  current node, when `seek` is given a node from another list, and when
  `delete` is called with the cursor on the last node of a longer list.
  `SimpleList.delete` and `SimpleList.insert` raise it when the cursor does
  not allow the operation.
- Tree operations raise `TreeError` where they cannot work, such as adding a
  child where one already exists, transplanting onto no node, rotating a
  node that lacks the needed child, or deleting `None`.
- `read_vectors` and `signed_distance` raise `ValueError` on malformed input
  or an interface that leaves the grid.

## Demo commands

Each command prints the output of a small demonstration:

```
dsdemo-levelset     # MATLAB/Octave script plotting the signed-distance field of a circle
dsdemo-point        # point construction, indexing and addition
dsdemo-intcell      # write and read an IntCell
dsdemo-matrix       # print a 3x3 Matrix
dsdemo-arraylist    # fill, find and merge-sort an ArrayList
dsdemo-linkedlist   # cursor-based insertion and deletion on linked lists
dsdemo-binarytree   # build, render and transplant in a small BinaryTree
dsdemo-bst          # build a 31-node search tree, then delete nodes and redraw it
```

The level-set output can be pasted into Octave or MATLAB to draw the
surface; the package does not plot anything itself.

## What it does not do

`dsdemo.redblack` and `dsdemo.textalgos` have no commands: bracket
matching, run collapsing, inner products and insertion sorting are offered
only as functions to call from Python, not as programs that read standard
input or files. Nothing is stored between runs.