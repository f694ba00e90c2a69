# algokit

Classic algorithm exercises written as plain Python functions and a few small
classes, grouped by topic. Functions take ordinary lists, strings and nested
lists; most return new values rather than changing their arguments.

## Modules

- `algokit.sums`: `three_sum`, `four_sum` (distinct sorted tuples as lists) and
  `two_sum` (pairs from a two-pointer sweep; an empty list when none is found).
- `algokit.arrays`: `max_profit`, `max_profit_multiple`, `contains_duplicate`,
  `find_duplicate`, `fib`, `pivot_index`, `longest_consecutive`,
  `majority_element` (returns `None` when there is none), `majority_elements`,
  `merge_sorted_arrays`, `merge_intervals`, `min_common` (returns `None` when
  there is none), `max_odd_binary`, `move_zeroes`, `move_zeros_left`,
  `next_greater`, `product_except_self`, `rearrange_by_sign`,
  `max_satisfaction`, `remove_duplicates`, `remove_element`, `single_number`,
  `sort_colors`, `sorted_squares` and `bag_of_tokens_score`.
- `algokit.browser`: `BrowserHistory` with `visit`, `back` and `forward`.
  Moving back or forward stops at the first or last page.
- `algokit.linked_list`: `ListNode` (iterable over its values), `build_list`,
  and operations on lists: `binary_to_integer`, `has_cycle`, `delete_node`,
  `find_intersection`, `kth_from_end`, `max_twin_sum`, `merge_sorted`,
  `merge_in_between`, `find_middle`, `is_palindrome`, `remove_value`,
  `remove_duplicates`, `remove_nth_from_end`, `reverse`, `reorder`,
  `spiral_matrix` and `swap_pairs`. Most of these relink nodes in place.
- `algokit.tree`: `TreeNode` and `range_sum_bst`.
- `algokit.stack`: `QueueStack`, a stack kept in one queue (`push`, `pop`,
  `top`, `is_empty`, `len()`; `pop` and `top` raise `IndexError` when empty),
  and `visible_people`.
- `algokit.matrix`: `rook_captures`, `projection_area`, `flip_and_invert`,
  `lucky_numbers`, `diagonal_sum`, `reshape`, `maximum_wealth`, `num_special`,
  `is_toeplitz` and `count_negatives`.
- `algokit.mathutils`: `count_primes`, `is_prime`, `diagonal_prime`, `power`
  and `is_power_of_two`.
- `algokit.text`: `count_vowels`, `halves_are_alike`, `num_jewels_in_stones`,
  `reverse_string`, `sort_sentence`, `to_lower_case` and `is_palindrome`.
- `algokit.backtracking`: `combine`, `combination_sum`, `combination_sum2`,
  `combination_sum3`, `flood_fill`, `letter_combinations`, `max_unique_length`,
  `solve_n_queens`, `num_rolls_to_target` (modulo `MOD`),
  `can_partition_k_subsets`, `permute`, `permute_unique`, `subsets`,
  `subsets_with_dup` and `exist`.
- `algokit.sorting`: `merge_sort` and the `main` entry point of the command.

Invalid input, such as an empty price list or a board without a rook, raises
`ValueError`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from algokit.sums import three_sum
from algokit.linked_list import build_list, reverse
from algokit.backtracking import solve_n_queens
from algokit.browser import BrowserHistory

three_sum([-1, 0, 1, 2, -1, -4])        # [[-1, -1, 2], [-1, 0, 1]]
list(reverse(build_list([1, 2, 3])))    # [3, 2, 1]
len(solve_n_queens(4))                  # 2

history = BrowserHistory("home.example.com")
history.visit("a.example.com")
history.back(1)                         # "home.example.com"
```

## Command line

The package installs one command. It sorts the integers given on the command
line with merge sort and prints them separated by spaces:

```
algokit-mergesort 5 3 1 4
```

prints `1 3 4 5`. Run without arguments, it sorts a built-in sample and prints
`1 2 3 5 7`.