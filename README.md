# algokit

Classic algorithms and data structures in plain Python, with no third-party
dependencies. Requires Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.grid` | Grid helpers `is_valid`, `is_unblocked`, `heuristic` (Euclidean distance) and the errors `PathfindingError`, `InvalidCellError`, `BlockedCellError`, `PathNotFoundError` |
| `algokit.pathfinding` | A* search on an 8-connected grid: `a_star_search`, `trace_path` |
| `algokit.mst` | `Graph` with `add_edge` and `boruvka_mst`, which returns an `MSTResult` of `Edge`s and their total weight |
| `algokit.flow` | Ford–Fulkerson maximum flow with breadth-first search: `max_flow`, `find_augmenting_path` |
| `algokit.matching` | Gale–Shapley stable marriage: `stable_marriage`, `prefers_current` |
| `algokit.dynamic` | `max_loot` (house robber), `lcs_length`, `longest_common_substring_length`, `knapsack` (0/1), `pascal_triangle` |
| `algokit.subarrays` | `kadane`, `max_sum_rectangle`, `max_window_sum` |
| `algokit.number_theory` | `power_mod`, `mod_inverse` (Fermat's little theorem, prime modulus) |
| `algokit.permutations` | `johnson_trotter`: a generator of permutations, each one adjacent swap from the last |
| `algokit.fenwick` | `FenwickTree` with `update` and `prefix_sum` |
| `algokit.persistent` | `PersistentSegmentTree`: range sums over every version, with `update`, `query` and `versions` |
| `algokit.sparse_table` | `SparseTable` range-minimum queries and `solve_queries` |
| `algokit.range_sums` | `range_sum` and Mo's offline algorithm in `mo_range_sums`, giving `RangeSum` results |
| `algokit.prefix_sets` | `PrefixSetMatcher`: do two sequence prefixes hold the same set of values? |
| `algokit.circular_list` | `CircularLinkedList` with one-based positional `insert` |
| `algokit.priority_queue` | `ArrayPriorityQueue`: highest priority first, ties to the larger value, then to the earlier entry |
| `algokit.stack` | `BoundedStack` with `StackOverflowError` and `StackUnderflowError` |
| `algokit.heap` | `MaxHeap` with `push`, `pop_root`, `peek`, iterating in level order |
| `algokit.kd_tree` | `KDTree` for k-dimensional point insertion and membership (`in`) |

## Examples

```python
from algokit.dynamic import knapsack, lcs_length, max_loot
from algokit.subarrays import max_sum_rectangle, max_window_sum
from algokit.flow import max_flow
from algokit.number_theory import mod_inverse
from algokit.fenwick import FenwickTree
from algokit.persistent import PersistentSegmentTree
from algokit.sparse_table import solve_queries
from algokit.range_sums import range_sum
from algokit.kd_tree import KDTree

max_loot([6, 7, 1, 3, 8, 2, 4])            # 19
lcs_length("AGGTAB", "GXTXAYB")            # 4
knapsack(4, [1, 2, 3], [4, 5, 1])          # 3

max_sum_rectangle([
    [1, 2, -1, -4, -20],
    [-8, -3, 4, 2, 1],
    [3, 8, 10, 1, 3],
    [-4, -1, 1, 7, -6],
])                                         # 29
max_window_sum([1, 4, 2, 10, 2, 3, 1, 0, 20], 4)   # 24

capacity = [
    [0, 16, 13, 0, 0, 0],
    [0, 0, 10, 12, 0, 0],
    [0, 4, 0, 0, 14, 0],
    [0, 0, 9, 0, 0, 20],
    [0, 0, 0, 7, 0, 4],
    [0, 0, 0, 0, 0, 0],
]
max_flow(capacity, 0, 5)                   # 23

mod_inverse(3, 11)                         # 4

tree = FenwickTree([2, 1, 1, 3, 2, 3, 4, 5, 6, 7, 8, 9])
tree.prefix_sum(5)                         # 12
tree.update(3, 6)
tree.prefix_sum(5)                         # 18

seg = PersistentSegmentTree([1, 2, 3, 4, 5])
v1 = seg.update(0, 4, 1)                   # version 1
v2 = seg.update(v1, 2, 10)                 # version 2
seg.query(v1, 0, 4)                        # 11
seg.query(v2, 3, 4)                        # 5
seg.query(0, 0, 3)                         # 10

solve_queries([7, 2, 3, 0, 5, 10, 3, 12, 18], [(0, 4), (4, 7), (7, 8)])
# [0, 3, 12]

range_sum([1, 5, 2, 4, 6, 1, 3, 5, 7, 10], 3, 8)   # 26

points = KDTree(2)
for p in [(3, 6), (17, 15), (13, 15), (6, 12), (9, 1), (2, 7), (10, 19)]:
    points.insert(p)
(10, 19) in points                         # True
(12, 19) in points                         # False
```

Grids for `a_star_search` use `1` for an open cell and any other value for a
blocked one. The search returns the path as a list of `(row, col)` cells from
source to destination; an invalid or blocked endpoint, or an unreachable
destination, raises a subclass of `PathfindingError`.

`Graph.boruvka_mst` raises `ValueError` when the graph is not connected, and
`mod_inverse` raises `ValueError` when the inverse does not exist.

## Command-line tools

Two small programs are installed with the package.

```
algokit-prefix-sets [--seed N]
```

reads from standard input a length `n`, then `n` values of sequence `a`, `n`
values of sequence `b`, a query count, and that many pairs `x y`. For each pair
it prints `Yes` if the first `x` values of `a` and the first `y` values of `b`
contain the same set of distinct values, and `No` otherwise. Values are hashed
randomly; `--seed` makes the hashes repeatable.

```
algokit-stack
```

runs a menu-driven bounded stack on standard input: it asks for the capacity,
then reads choices `1` (push, followed by the value), `2` (pop) and `3` (peek)
until input ends, reporting overflow, underflow and an empty stack.