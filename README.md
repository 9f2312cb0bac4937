# algodrills

Small, self-contained algorithm exercises written as plain Python functions.
Each function takes ordinary Python values (lists, strings, integers) and
returns a result. That makes them easy to call from a REPL, a notebook or a
test. Several problems come in more than one version, for example a brute-force
solution next to a faster one, so you can compare the approaches on the same
input.

The package has no dependencies beyond the standard library.

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

### `algodrills.arrays`

- `majority_element_brute_force`, `majority_element`: find the majority value.
  The second uses Boyer-Moore voting. Both return -1 for an empty input.
- `three_sum`: all distinct zero-sum triplets. Each triplet is sorted, and the
  triplets are returned in lexicographic order.
- `sort_012`: sorts a list of 0s, 1s and 2s in place.
- `max_profit_brute_force`, `max_profit`: the best profit from one buy
  followed by one sell.
- `contains_duplicate`, `contains_nearby_duplicate`: detect repeated values.
  The second only counts equal values at most `k` positions apart.
- `find_missing_numbers`: the numbers in `1..len(nums)` that are absent.
- `max_subarray_sum_brute_force`, `max_subarray_sum`: the largest sum of a
  non-empty contiguous run. The second uses Kadane's method. Both raise
  `ValueError` for an empty input.
- `minimum_abs_difference`: the adjacent pairs of the sorted values that have
  the smallest difference.
- `min_subarray_len_brute_force`, `min_subarray_len`: the length of the
  shortest run whose sum is at least `target`, or 0 if there is none.
- `shift_positive_right`: returns a new list with the negatives first.
  `shift_positive_right_in_place` does the same in place.
- `sorted_squares`: sorts the values, then squares each one in that order.
- `union_of_arrays`: the distinct values of both inputs, in order of first
  appearance.
- `longest_mountain`: the length of the longest run that rises strictly and
  then falls strictly.
- `find_pivot`: the first index whose left and right sums are equal, or -1.

### `algodrills.text`

- `longest_common_subsequence`: the number of characters the two strings
  share, counted with multiplicity. Order is not taken into account.
- `character_counts`: a `collections.Counter` of the characters.
- `reverse_words`: reverses each space-separated word and keeps the words in
  place.
- `to_binary`: the binary digits of a positive integer. It raises `ValueError`
  below 1.
- `from_binary`: the value of a digit string. Any character other than `'1'`
  counts as 0.
- `string_permutations`: every ordering of the characters, by position.
- `check_inclusion_brute_force`, `check_inclusion`: whether some permutation
  of `s1` occurs in `s2`.
- `contains_substring_scan`, `contains_substring`: substring tests.

### `algodrills.graphs`

- `Graph(size)`: a directed adjacency-list graph with `add_edge`,
  `neighbours` and `len()`. Out-of-range nodes raise `IndexError`.
- `bfs_of_graph(adjacency, start=0)`, `dfs_of_graph(adjacency)`: traversal
  orders over a list of adjacency lists.
- `flood_fill`: repaints a 4-connected region in place and returns the image.
- `num_islands`, `num_islands_dfs`: count islands of `'1'` cells that are
  joined in eight directions.
- `oranges_rotting`: the minutes until all fresh oranges are rotten, or -1 if
  some never rot. The input grid is not modified.

### `algodrills.backtracking`

- `solve_n_queens`: every N-queens board, given as rows of `'.'` and `'Q'`.
- `combination_sum`: combinations that may reuse values. The values must be
  positive.
- `combination_sum2`: distinct combinations that use each candidate at most
  once.
- `permute`: every ordering of a list.
- Recursion exercises:
  - `count_down`
  - `reverse_string`
  - `reverse_list` and `reverse_list_recursive`, which both work in place
  - `is_palindrome`

### `algodrills.dynamic`

- `rob`, `rob_tabulated`: the largest sum of houses that are not adjacent.
- `climb_stairs`, `climb_stairs_memo`, `climb_stairs_iterative`: the number of
  ways to climb `n` stairs in steps of 1 or 2.
- `frog_jump`, `frog_jump_memo`: the least energy needed to reach stone
  `n - 1` when jumping one or two stones at a time.
- `find_groups`: the lengths of runs of identical consecutive characters.
- `possible_string_count`, `possible_string_count_optimized`,
  `possible_string_count_rolling`: the number of originals of length at least
  `k` that could have been typed as `word` with long-pressed keys. The result
  is taken modulo 1,000,000,007. The three versions compute the same count in
  different ways.

### `algodrills.sorting`

- `merge_sort`: returns a new ascending list.
- `count_inversions`: the number of pairs `i < j` with `arr[i] > arr[j]`. The
  input is left unchanged.

### `algodrills.patterns`

Each function returns the pattern as a string with one row per line:

- `square`
- `right_angle`
- `right_angle_with_numbers`
- `right_angle_with_incremental_numbers`
- `reverse_right_angle`, which has rows of `n - 1`, `n - 3`, ... stars
- `reverse_right_angle_with_incremental_numbers`

## Examples

```python
from algodrills.arrays import max_profit, three_sum
from algodrills.backtracking import solve_n_queens
from algodrills.dynamic import climb_stairs_iterative, possible_string_count
from algodrills.graphs import oranges_rotting
from algodrills.patterns import right_angle
from algodrills.sorting import count_inversions, merge_sort

max_profit([7, 1, 5, 3, 6, 4])          # 5
three_sum([-1, 0, 1, 2, -1, -4])        # [[-1, -1, 2], [-1, 0, 1]]
len(solve_n_queens(4))                  # 2
climb_stairs_iterative(3)               # 3
possible_string_count("aabbccdd", 7)    # 5
oranges_rotting([[2, 1, 1], [1, 1, 0], [0, 1, 1]])  # 4
merge_sort([4, 1, 2, 6, 5, 7, 3])       # [1, 2, 3, 4, 5, 6, 7]
count_inversions([10, 10, 10])          # 0
print(right_angle(3), end="")           # *, **, *** on three lines
```

## What it does not do

The package is a library only. It installs no command-line program, and it
does not print, read input or store anything. To see a result, call a
function and print what it returns.