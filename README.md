# algokit

A small library of classic algorithms in plain Python, with no third-party
dependencies. It also has an `algokit` command for a four-function
calculator and star triangles.

## Installation

```
pip install .
```

Install the test requirements with `pip install ".[test]"`.

## Modules

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `heap_sort`, `heap_sort_rebuild`, `bubble_sort`, `counting_sort`, `cycle_sort`, `merge_sort`, `selection_sort`, `insertion_sort`, `count_inversions` |
| `algokit.searching` | `binary_search`, `contains` |
| `algokit.knapsack` | `knapsack` |
| `algokit.graphs` | `transpose_graph`, `kruskal_mst_weight` |
| `algokit.arrays` | `three_sum`, `jump`, `stock_span`, `avoid_flood`, `furthest_building`, `two_sum`, `min_platforms`, `to_sparse` |
| `algokit.numtheory` | `prime_factors`, `binary_to_decimal`, `decimal_to_binary`, `fibonacci`, `is_perfect`, `ones_complement_sum`, `checksum` |
| `algokit.textalgo` | `reverse_words`, `is_balanced`, `is_anagram`, `minimal_ternary` |
| `algokit.trees` | `TreeNode`, `QuadNode`, `max_depth`, `is_balanced_tree`, `construct_quad_tree` |
| `algokit.linkedlist` | `ListNode`, `build_list`, `iter_values`, `insertion_sort_list`, `delete_key`, `merge_sorted`, `rotate_right` |
| `algokit.cli` | `calculate`, `pattern_lines`, `main` |

Some details worth knowing:

- Every sort takes any iterable and returns a new ascending list.
  `counting_sort` accepts only non-negative integers and raises
  `ValueError` otherwise.
- `binary_search` returns an index of the target in an ascending sequence,
  or `-1`; `contains` sorts its input first and returns a boolean.
- `knapsack(capacity, weights, values)` solves the 0-1 problem and raises
  `ValueError` when the two sequences differ in length.
- `kruskal_mst_weight(vertex_count, edges)` takes `(u, v, weight)` triples
  with vertices numbered `0` to `vertex_count` and returns the weight of a
  minimum spanning forest.
- `min_platforms` takes 24-hour clock times from 0 to 2359; a train holds
  its platform from arrival through departure inclusive.
- `to_sparse` returns `(rows, columns, non_zero_count)` followed by one
  `(row, column, value)` triple per non-zero entry.
- `checksum` returns the one's complement of the end-around-carry sum of
  equally wide bit words given most significant bit first.
- `construct_quad_tree` needs a square grid whose side is a power of two
  and returns `None` for an empty grid.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.knapsack import knapsack
from algokit.arrays import stock_span
from algokit.numtheory import decimal_to_binary
from algokit.textalgo import is_balanced

merge_sort([5, 2, 9, 1])                         # [1, 2, 5, 9]
knapsack(50, [10, 20, 30], [60, 100, 120])       # 220
stock_span([10, 4, 5, 90, 120, 80])              # [1, 1, 2, 4, 5, 1]
decimal_to_binary(244)                           # "11110100"
is_balanced("()[]{}")                            # True
```

Linked-list helpers work on `ListNode` chains:

```python
from algokit.linkedlist import build_list, iter_values, rotate_right

head = build_list([1, 2, 3, 4, 5])
list(iter_values(rotate_right(head, 2)))         # [4, 5, 1, 2, 3]
```

## Command line

`algokit` has two subcommands.

```
algokit calc + 3 4
```

prints `3 + 4 = 7`. The operator is one of `+`, `-`, `*` and `/` (quote
`*` in the shell). An unknown operator prints
`Error! operator is not correct` to standard error and exits with status 1.

```
algokit pattern 3
algokit pattern 3 --reverse
```

print a triangle of stars three rows high, growing from one star or, with
`--reverse`, shrinking to one. A row count below 1 prints `Invalid input`
to standard error and exits with status 1.

Run `algokit --help` for the full usage.

## What it does not do

The command takes everything from its arguments; it does not prompt for
input or loop over repeated requests. No function reads or writes files:
the checksum helpers return bit lists rather than writing a report.

## Running the tests

```
pytest
```