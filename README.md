# diffsolver

A small collection of exact algorithms for "difference" style problems. They
cover remapping digits, pairing array elements, frequency parity in strings,
bipartite counts in trees, and lexicographic ordering of integers.

It needs only the standard library.

## Installation

```
pip install .
```

To get pytest and hypothesis for the test suite, install `.[test]`.

## Modules

### `diffsolver.digits`

- `max_diff(num)`: the largest difference between two numbers made from the
  positive integer `num` by remapping one digit each time. The larger number
  maps the first digit that is not 9 to 9. The smaller number maps the first
  digit greater than 1 to 1 if it is the leading digit, and to 0 otherwise.
  Raises `ValueError` if `num < 1`.
- `min_max_difference(num)`: the difference between the largest and smallest
  values made by remapping a single digit of `num`. Leading zeros are allowed
  in the smaller value. Raises `ValueError` if `num < 1`.
- `count_prefix_steps(prefix, n)`: how many integers in `1..n` start with
  `prefix` in decimal.
- `find_kth_number(n, k)`: the `k`-th smallest integer in `1..n` in
  lexicographic order. Raises `ValueError` unless `1 <= k <= n`.

### `diffsolver.arrays`

- `maximum_difference(nums)`: the largest `nums[j] - nums[i]` with `i < j` and
  `nums[i] < nums[j]`. Returns `-1` if no such pair exists.
- `max_distance(colors)`: the largest distance between the indices of two
  houses that have different colours.
- `can_form_pairs(nums, p, max_diff)`: whether the sorted sequence `nums`
  holds `p` disjoint adjacent pairs whose difference is at most `max_diff`.
- `minimize_max(nums, p)`: the smallest possible maximum difference over `p`
  disjoint pairs. It uses a binary search on the answer.
- `difference_of_sums(n, m)`: the sum of the integers in `1..n` not divisible
  by `m`, minus the sum of those that are. Returns `0` if `n < 1`. Raises
  `ValueError` if `m < 1`.
- `max_adjacent_distance(nums)`: the largest absolute difference between
  neighbours in a circular sequence.

Every function here that takes a sequence, except `can_form_pairs`, raises
`ValueError` when the sequence is empty.

### `diffsolver.frequency`

- `max_parity_difference(s)`: the largest odd letter frequency minus the
  smallest non-zero even letter frequency.
  - A missing odd frequency counts as `0`.
  - A missing even frequency counts as `len(s)`.
  - Raises `ValueError` if `s` holds anything other than lowercase ASCII letters.
- `max_parity_difference_window(s, k)`: works on strings of the digits `0` to
  `4`. It returns the largest `freq[a] - freq[b]` over substrings of length at
  least `k`, where `a` occurs an odd number of times and `b` occurs a non-zero
  even number of times. Returns `-1` if no substring qualifies.

### `diffsolver.trees`

Trees are given as edge lists over the nodes `0..len(edges)`.

- `same_parity_counts(edges)`: for each node, the number of nodes at an even
  distance from it, the node itself included. Raises `ValueError` if a node is
  out of range or the edges do not connect every node.
- `max_target_nodes(edges1, edges2)`: for each node of the first tree, the most
  nodes at even distance it can reach after a single edge joins it to the
  second tree.

## Example

```python
from diffsolver.digits import find_kth_number, min_max_difference
from diffsolver.arrays import minimize_max

find_kth_number(13, 2)               # 10
min_max_difference(11891)            # 99009
minimize_max([10, 1, 2, 7, 1, 3], 2) # 1
```

## What it does not do

This package is a library of functions only. It has no command-line
interface, and it does not read input files or print results.