# dsakit

Classic data structures and algorithms in plain Python, with no
third-party dependencies.

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
| `dsakit.linked_list` | `ListNode`, `from_values`, `to_values`, `push`, `append`, `sorted_insert`, `reverse`, `reversed_values`, `k_reverse`, `merge_sorted`, `is_palindrome`, `swap_nodes`, `rotate` |
| `dsakit.list_algorithms` | `pairwise_swap_values`, `swap_pairs`, `remove_duplicates`, `remove_nth_from_end`, `nth_from_end`, `has_cycle`, `floyd_meeting_point`, `intersection`, `reorder`, `total`, `find_position` |
| `dsakit.doubly_linked_list` | `DoublyLinkedList` with `push_front`, `push_back`, forward iteration and `backward()` |
| `dsakit.linked_queue` | `LinkedQueue`, a FIFO queue with `enqueue` and `dequeue` |
| `dsakit.positional_list` | `PositionalList` with 1-based `insert_at`/`delete_at`, `insert_front`, `insert_back`, `update`, `delete_first`, `delete_last` |
| `dsakit.polynomial` | `Term`, `multiply`, `combine_like_terms`, `format_polynomial` |
| `dsakit.hash_tables` | `ChainedHashTable` (separate chaining) and `QuadraticProbingMap` (open addressing with tombstones), both with `render()` |
| `dsakit.huffman` | `HuffmanNode`, `build_tree`, `huffman_codes` |
| `dsakit.postfix` | `is_operator`, `precedence`, `infix_to_postfix` |
| `dsakit.graphs` | `Digraph` (`bfs`, `dfs`, `topological_order`), `is_connected`, `has_eulerian_path` on adjacency matrices |
| `dsakit.matching` | `BipartiteGraph.maximum_matching` (Hopcroft–Karp) |
| `dsakit.shortest_paths` | `floyd_warshall`, `format_distances`, `INF` |
| `dsakit.coloring` | `color_graph`, greedy colouring vertex by vertex |
| `dsakit.digits` | `is_armstrong`, `binary_to_decimal`, `decimal_to_binary`, `is_prime`, `digit_sum` |
| `dsakit.sorting` | three quicksorts, `radix_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `bubble_sort`, `selection_sort`, `wave_sort`, `merge_k_sorted` |
| `dsakit.searching` | `ternary_search`, `find_positions` |
| `dsakit.array_problems` | `has_pair_with_sum`, `kth_largest_subarray_sum`, `has_subset_sum`, `matrix_chain_cost`, `minimal_badness` |
| `dsakit.recurrences` | `combination`, `fibonacci`, `factorial`, `josephus`, `is_palindrome`, `count_digit_one`, `taylor_exp`, `countdown` |
| `dsakit.backtracking` | `solve_n_queens`, `rat_in_maze`, `solve_sudoku`, `keypad_combinations`, `combinations_of_size`, `hanoi_moves` |
| `dsakit.avl` | `AVLNode`, `AVLTree` with `insert` and `inorder` |
| `dsakit.binary_trees` | `TreeNode`, `build_level_order`, `bst_search`, `bst_search_recursive`, `bst_insert`, `height`, `level_order`, `is_symmetric`, `count_islands` |

## Examples

```python
from dsakit.linked_list import from_values, k_reverse, to_values

head = from_values([1, 2, 3, 4, 5])
print(to_values(k_reverse(head, 2)))   # [2, 1, 4, 3, 5]
```

```python
from dsakit.graphs import Digraph

g = Digraph(4)
for source, target in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(source, target)
print(g.bfs(2))   # [2, 0, 3, 1]
```

```python
from dsakit.backtracking import solve_n_queens

for board in solve_n_queens(4):
    print("\n".join(board), end="\n\n")
```

```python
from dsakit.huffman import huffman_codes

codes = huffman_codes("abcdef", [5, 9, 12, 13, 16, 45])
print(codes["f"])   # "0"
```

```python
from dsakit.sorting import radix_sort

print(radix_sort([170, 45, 75, 90, 802, 24, 2, 66]))
# [2, 24, 45, 66, 75, 90, 170, 802]
```

Linked lists are chains of `ListNode` objects, with `None` for the empty
list; functions that may change the first node return the new head.
Functions that sort return a new list and leave their input untouched.
Operations that the data does not allow, such as dequeuing from an empty
queue or asking for a position past the end of a list, raise an exception.

## What it does not do

- It is a library only: there are no command-line programs and nothing
  reads from standard input.
- There is no circular linked list and no minimum-spanning-tree routine
  (no Kruskal, no disjoint-set structure).