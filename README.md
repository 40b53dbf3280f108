# algokit

A small library of self-contained algorithm routines, grouped by theme. It has
no runtime dependencies and needs Python 3.10 or later.

| Module | Contents |
| --- | --- |
| `algokit.arrays` | `max_area`, `candy`, `majority_elements`, `find_132_pattern`, `is_monotonic`, `group_the_people`, `sort_by_bits`, `build_array`, `get_last_moment`, `num_identical_pairs`, `maximum_score`, `min_operations`, `full_bloom_flowers`, `find_champion`, `maximum_strong_pair_xor` |
| `algokit.search` | `MountainArray`, `first_occurrence`, `last_occurrence`, `search_range`, `find_peak_index`, `find_in_mountain_array` |
| `algokit.numbers` | `pascal_triangle`, `pascal_row`, `is_power_of_four`, `integer_break`, `poor_pigs`, `tribonacci`, `count_symmetric_integers`, `is_palindrome`, `maximum_achievable_x` |
| `algokit.dynamic` | `unique_paths`, `min_cost_climbing_stairs`, `num_factored_binary_trees`, `constrained_subset_sum`, `count_vowel_permutation`, `num_ways`, `num_of_arrays`, `max_dot_product`, `paint_walls` (counting results are taken modulo `MOD = 1_000_000_007`) |
| `algokit.strings` | `reverse_words`, `backspace_compare`, `min_deletions`, `winner_of_game`, `is_vowel_string`, `vowel_strings`, `maximum_odd_binary_number`, `find_minimum_operations`, `length_of_last_word`, `longest_common_prefix` |
| `algokit.linked` | `ListNode`, `RandomNode`, `copy_random_list`, `has_cycle`, `add_two_numbers` |
| `algokit.trees` | `TreeNode`, `postorder_traversal`, `average_of_subtree`, `validate_binary_tree_nodes` |
| `algokit.graphs` | `minimum_effort_path`, `minimum_time` |
| `algokit.hashmap` | `ChainedHashMap` |
| `algokit.nested` | `NestedInteger`, `NestedIterator`, `flatten` |

Inputs that make no sense for a routine raise an exception rather than return
a made-up answer: for instance `max_area` with fewer than two lines,
`pascal_triangle` with a negative row count or `maximum_odd_binary_number` on a
string with no `1` raise `ValueError`, and `maximum_score` with `k` outside the
array raises `IndexError`.

## Installation

```
pip install .
```

## Examples

```python
from algokit.arrays import max_area
from algokit.search import search_range
from algokit.numbers import pascal_triangle
from algokit.linked import ListNode, add_two_numbers
from algokit.hashmap import ChainedHashMap
from algokit.nested import NestedInteger, flatten

max_area([1, 8, 6, 2, 5, 4, 8, 3, 7])      # 49
search_range([5, 7, 7, 8, 8, 10], 8)        # [3, 4]
pascal_triangle(3)                          # [[1], [1, 1], [1, 2, 1]]

total = add_two_numbers(ListNode.from_values([2, 4, 3]),
                        ListNode.from_values([5, 6, 4]))
list(total)      # [7, 0, 8]

table = ChainedHashMap()
table.put(1, 10)
table.get(1)     # 10
1 in table       # True
table.remove(1)
table.get(1)     # -1

flatten([NestedInteger([NestedInteger(1), NestedInteger(1)]),
         NestedInteger(2)])                 # [1, 1, 2]
```

`ListNode` iterates over the values from itself to the end of the list, and
`ListNode.from_values` builds a list (or `None` for no values).
`NestedIterator` is a Python iterator; `has_next` tells whether another integer
remains. `ChainedHashMap` supports `in` and `len()` besides `put`, `get` and
`remove`.

## Running the tests

```
pip install ".[test]"
pytest
```