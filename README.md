# algolab

A small collection of classic algorithms in plain Python, with no runtime
dependencies. Graphs are given as square matrices (lists of lists) and
vertices are numbered from 0.

## Contents

| Module | What it provides |
| --- | --- |
| `algolab.sorting` | `merge_sort` and `quick_sort`, each returning a `SortResult` with the sorted `values` and the number of `comparisons` counted; `heap_sort` and `insertion_sort`, each returning a new sorted list; `elements_unique`, which presorts and checks neighbours; and `comparison_table`, which counts a sorter's comparisons on ascending, descending and random inputs of sizes 16, 32, 64, … below a limit |
| `algolab.string_search` | Horspool's algorithm: `shift_table(pattern)` and `horspool(text, pattern)`, which returns the index of the first match or -1 |
| `algolab.knapsack` | 0/1 knapsack by dynamic programming: `knapsack(weights, values, capacity)` returns a `KnapsackSolution` with `max_value` and the zero-based `items` taken |
| `algolab.backtracking` | `n_queens(n)` yields every placement as a tuple of zero-based columns, row by row; `format_board` renders one as rows of `Q` and `-`; `subset_sums(weights, target)` yields the subsets that sum exactly to the target |
| `algolab.traversal` | `bfs`, `connected_components`, and `topological_sort`, which raises `CycleError` (a `ValueError`) when the graph has a cycle |
| `algolab.shortest_paths` | `floyd` for all pairs (off the diagonal, -1 or `None` means no edge; unreachable pairs come back as `math.inf`), and `dijkstra` for one source (missing edges as `math.inf`), returning `ShortestPaths` with `distances`, `parents` and `path(target)` |
| `algolab.spanning_tree` | Prim's algorithm: `prim` returns the tree's `Edge` list in the order added, growing from vertex 0 (0, `None` or `math.inf` means no edge; a disconnected graph raises `ValueError`), plus `total_cost` |
| `algolab.tsp` | branch-and-bound travelling salesman: `solve_tsp` returns a `Tour` with the vertex `order` from vertex 0 and its `cost` (0 means no edge; `ValueError` if no round trip exists) |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algolab.sorting import merge_sort, quick_sort, heap_sort, elements_unique, comparison_table
from algolab.string_search import horspool
from algolab.knapsack import knapsack
from algolab.backtracking import n_queens, format_board, subset_sums

result = merge_sort([5, 3, 8, 1])
print(result.values, result.comparisons)
print(heap_sort([5, 3, 8, 1]))              # [1, 3, 5, 8]
print(elements_unique([3, 1, 2]))           # True

for size, asc, desc, rand in comparison_table(quick_sort, limit=1000, seed=1):
    print(size, asc, desc, rand)

print(horspool("barbershop", "shop"))       # 6

solution = knapsack([2, 1, 3, 2], [12, 10, 20, 15], 5)
print(solution.max_value, solution.items)   # 37 (0, 1, 3)

for board in n_queens(4):
    print(board)
    print(format_board(board))

print(list(subset_sums([1, 2, 5, 6, 8], 9)))
```

Graph functions take adjacency or cost matrices:

```python
import math

from algolab.traversal import connected_components, topological_sort
from algolab.shortest_paths import floyd, dijkstra
from algolab.spanning_tree import prim, total_cost
from algolab.tsp import solve_tsp

print(connected_components([[0, 1, 0], [1, 0, 0], [0, 0, 0]]))   # [[0, 1], [2]]
print(topological_sort([[0, 1, 0], [0, 0, 1], [0, 0, 0]]))       # [0, 1, 2]

print(floyd([[0, 3, -1], [-1, 0, 2], [1, -1, 0]]))

paths = dijkstra([[0, 4, 1], [4, 0, 2], [1, 2, 0]], 0)
print(paths.distances, paths.path(1))                              # (0, 3, 1) [0, 2, 1]

edges = prim([[0, 2, 3], [2, 0, 1], [3, 1, 0]])
print(total_cost(edges))                                           # 3

tour = solve_tsp([[0, 10, 15, 20], [10, 0, 35, 25], [15, 35, 0, 30], [20, 25, 30, 0]])
print(tour.order, tour.cost)                                       # cost 80
```

## What it does not do

`algolab` is a library only. It has no command-line program and reads no
input of its own: every function takes Python values and returns its result,
and printing or formatting results (apart from `format_board`) is left to the
caller.