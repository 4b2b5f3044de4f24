"""Difference puzzles over integer sequences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

__all__ = [
    "maximum_difference",
    "max_distance",
    "can_form_pairs",
    "minimize_max",
    "difference_of_sums",
    "max_adjacent_distance",
]


def maximum_difference(nums: Sequence[int]) -> int:
    """Largest ``nums[j] - nums[i]`` with ``i < j`` and ``nums[i] < nums[j]``, or -1."""
    if not nums:
        raise ValueError("nums must not be empty")

    minimum = nums[0]
    answer = -1
    for value in nums[1:]:
        if value == minimum:
            continue
        answer = max(answer, value - minimum)
        minimum = min(minimum, value)
    return answer


def max_distance(colors: Sequence[int]) -> int:
    """Largest index distance between two houses of different colours."""
    if not colors:
        raise ValueError("colors must not be empty")
    if len(colors) == 2:
        return 1

    first = colors[0]
    pos = next((i for i, c in enumerate(colors) if c != first), None)
    if pos is None:
        return 1

    answer = pos
    for i, colour in enumerate(colors[pos + 1 :], start=pos + 1):
        # A house matching the first colour differs from the one at ``pos``.
        answer = max(answer, i if colour != first else i - pos)
    return answer


def can_form_pairs(nums: Sequence[int], p: int, max_diff: int) -> bool:
    """Whether sorted ``nums`` holds ``p`` disjoint adjacent pairs differing by at most ``max_diff``."""
    count = 0
    skip = False
    for left, right in pairwise(nums):
        if skip:
            skip = False
            continue
        if right - left <= max_diff:
            count += 1
            skip = True
    return count >= p


def minimize_max(nums: Sequence[int], p: int) -> int:
    """Smallest possible maximum difference over ``p`` disjoint pairs of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")

    ordered = sorted(nums)
    low, high = 0, ordered[-1] - ordered[0]
    answer = high
    while low <= high:
        mid = (low + high) // 2
        if can_form_pairs(ordered, p, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def difference_of_sums(n: int, m: int) -> int:
    """Sum of ``1..n`` not divisible by ``m`` minus the sum of those divisible by ``m``."""
    if m < 1:
        raise ValueError(f"m must be positive, got {m}")
    if n < 1:
        return 0
    total = n * (n + 1) // 2
    multiples = n // m
    divisible = m * multiples * (multiples + 1) // 2
    return total - 2 * divisible


def max_adjacent_distance(nums: Sequence[int]) -> int:
    """Largest absolute difference between neighbours in a circular sequence."""
    if not nums:
        raise ValueError("nums must not be empty")
    rotated = [*nums[1:], nums[0]]
    return max(abs(a - b) for a, b in zip(nums, rotated))