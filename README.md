# algocorner

A library of classic algorithms and data structures in plain Python, with no
third-party dependencies. Every function takes ordinary Python values (lists,
strings, tuples, nested lists for matrices) and returns its result; inputs are
not modified.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algocorner.sorting` | `bubble_sort`, `bucket_sort` (floats in `[0, 1)`), `bogosort` (takes a `random.Random`), `is_sorted`, `counting_sort` (non-negative integers), `counting_sort_text` (characters up to code point 255), `sort_012`, `heap_sort`, `merge_sort`, `quick_sort`, `selection_sort`, `shell_sort` |
| `algocorner.searching` | `binary_search`, `linear_search`, `contains`, `exponential_search`, `fibonacci_search`, `interpolation_search`, `jump_search`, `kth_smallest` (quickselect), `naive_pattern_search` |
| `algocorner.graphs` | `Graph` with `add_edge`, `bfs` and `dfs`; `reachable_from` on an adjacency matrix; `bellman_ford` (raises `NegativeCycleError`); `prim_mst_matrix` and `prim_mst` |
| `algocorner.stacks` | `TwoStacks`: two stacks sharing one fixed-size array, raising `StackOverflowError` and `StackUnderflowError` |
| `algocorner.hash_table` | `ChainedHashTable`: integer keys hashed by `key % buckets`, each bucket kept sorted |
| `algocorner.linked_lists` | `LinkedList` with head/tail insertion, `delete_head`, `delete`, `reverse`, `reverse_recursive`, `rotate`; `MultiNode`, `build_multilevel`, `flatten` and `iter_down` for flattening sorted columns |
| `algocorner.trees` | `TreeNode`, `level_order`, `preorder`, `postorder`, `nodes_at_distance` |
| `algocorner.huffman` | `HuffmanNode`, `build_huffman_tree`, `huffman_codes` |
| `algocorner.puzzles` | `knights_tour`, `count_paths`, `grid_paths`, `grid_paths_with_diagonal`, `paths_with_obstacles`, `paths_four_directions`, `solve_rat_maze`, `solve_n_queens`, `graph_coloring` |
| `algocorner.combinatorics` | `permutations_recursive`, `permutations_iterative`, `combination_sum`, `is_subset_sum` |
| `algocorner.arithmetic` | `add_bit_strings`, `extended_euclid`, `celsius_to_fahrenheit`, `reverse_digits`, `is_palindrome_number`, `xor_up_to`, `get_bit`, `digit_square_sum`, `is_happy`, `mccarthy91` |
| `algocorner.dynamic` | `edit_distance`, `lcs_length`, `lcs_length_recursive`, `distinct_subsequences`, `partition_cost`, `binomial_coefficient`, `friends_pairings`, `max_gold`, `matrix_chain_order`, `catalan`, `pascal_triangle`, `n_choose_r` |
| `algocorner.greedy` | `largest_rectangle_area`, `min_increment_operations`, `maximum_toys`, `select_activities`, `max_window_sum`, `count_pairs_with_difference`, `min_product_subset` |
| `algocorner.arrays` | `rotation_count`, `multiply_matrices`, `reverse_string`, `min_max`, `array_sum`, `move_negatives`, `spiral_order`, `ToeplitzMatrix` |
| `algocorner.scheduling` | `round_robin` returning `ProcessStats` per process; `average_waiting_time`, `average_turnaround_time` |
| `algocorner.geometry` | `Point`, `closest_pair_distance` |
| `algocorner.animals` | `Animal`, `Pig` and `Dog`, each with its own `sound()` |

Searches that return an index give `-1` when the target is absent.
Backtracking solvers (`knights_tour`, `solve_rat_maze`, `solve_n_queens`,
`graph_coloring`) return `None` when there is no solution. Invalid arguments
raise `ValueError` (or `IndexError` for out-of-range cells and empty-list
deletes).

## Examples

```python
from algocorner.sorting import merge_sort
from algocorner.searching import binary_search
from algocorner.dynamic import edit_distance
from algocorner.graphs import Graph

merge_sort([12, 11, 13, 5, 6, 7])        # [5, 6, 7, 11, 12, 13]
binary_search([2, 3, 4, 10, 40], 10)     # 3
edit_distance("horse", "ros")            # 3

g = Graph()
g.add_edge(0, 1)
g.add_edge(0, 2)
g.add_edge(2, 3)
g.bfs(0)                                 # [0, 1, 2, 3]
```

```python
from algocorner.huffman import huffman_codes

huffman_codes("abcdef", [5, 9, 12, 13, 16, 45])  # {symbol: "0"/"1" code, ...}
```

```python
from algocorner.stacks import TwoStacks, StackOverflowError

stacks = TwoStacks(2)
stacks.push1(1)
stacks.push2(2)
try:
    stacks.push1(3)
except StackOverflowError:
    print("full")
```

## What it does not do

This is a library only. It has no command-line program and reads no input;
nothing is printed; every result is returned to the caller.