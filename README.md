# algosolve

A small library of solutions to well-known algorithm puzzles, written as
plain Python functions that take Python values and return Python values.
It has no dependencies outside the standard library and supports
Python 3.10 and later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `algosolve.linked`

- `ListNode(val, next=None)`: a singly linked list node; iterating over a
  node yields the values from it to the end of the list.
- `build_list(values)` builds a list (or `None` when `values` is empty);
  `list_values(head)` turns one back into a Python list.
- `merge_two_lists(l1, l2)` splices two sorted lists into one;
  `merge_k_lists(lists)` merges any number by divide and conquer.

### `algosolve.trees`

- `TreeNode(val, left=None, right=None)`: a binary tree node.
- `lowest_common_ancestor(root, p, q)`, `binary_tree_paths(root)`
  (strings such as `"1->2->5"`), `diameter_of_binary_tree(root)`,
  `prune_tree(root)` (drops subtrees holding no 1),
  `distribute_coins(root)`, `is_valid_bst(root)`.
- `is_valid_serialization(preorder)` checks a comma separated preorder
  string that uses `#` for an empty child.
- `insert_into_bst(root, val)` puts equal values to the right;
  `tree_insert(root, data)` puts them to the left.
- `top_view(root)` returns the left spine bottom-up, the root, then the
  right spine, as a list.

### `algosolve.heaps`

- `find_kth_largest(nums, k)`, `top_k_frequent(nums, k)`.
- `k_smallest_pairs(nums1, nums2, k)` returns `(a, b)` tuples, the largest
  sum first; `nums2` is expected to be sorted ascending.
- `least_interval(tasks, n)` for tasks named by letters `A` to `Z`.
- `most_booked(n, meetings)` returns the room, numbered from 0, that held
  the most meetings.

### `algosolve.windows`

- `max_sliding_window(nums, k)`.
- `shortest_subarray(nums, k)` returns -1 when no run sums to at least `k`.

### `algosolve.greedy`

- `candies(ratings)`, `get_minimum_cost(k, prices)`,
  `luck_balance(k, contests)` with contests as `(luck, importance)` pairs.
- `fair_rations(loaves)` returns the count as a string, or `"NO"`.
- `pylons(k, towns)` and `truck_tour(pumps)` (pumps as
  `(petrol, distance)` pairs) return -1 when there is no answer.
- `highest_value_palindrome(s, k)` returns `"-1"` when no palindrome can be
  reached.

### `algosolve.counting`

- `acm_team(topics)` returns `(most topics known, number of such pairs)`.
- `count_divisible_subarrays(numbers, k)`, `stones(n, a, b)`,
  `non_divisible_subset(k, numbers)`, `sansa_xor(numbers)`.
- `substrings(digits)` returns the sum of all substrings modulo 1e9+7.

### `algosolve.search`

- `queens_attack(n, queen_row, queen_col, obstacles)` with rows and columns
  numbered from 1.
- `special_multiple(n)` returns the smallest multiple of `n` written with
  the digits 9 and 0, as a string.
- `first_primes(count)` and `waiter(plates, q)`.

Invalid arguments, such as a non-positive window size or divisor, raise
`ValueError`.

## Example

```python
from algosolve.linked import build_list, list_values, merge_k_lists
from algosolve.windows import max_sliding_window
from algosolve.greedy import candies

merged = merge_k_lists([build_list([1, 4, 5]), build_list([1, 3, 4]), build_list([2, 6])])
print(list_values(merged))                               # [1, 1, 2, 3, 4, 4, 5, 6]

print(max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3))  # [3, 3, 5, 5, 6, 7]
print(candies([1, 2, 2]))                                 # 4
```

## What it does not do

The package is a library only. It installs no command-line programs and
does not read puzzle input from standard input or write answers to files;
parsing input and printing results is left to the caller.