"""Digit-level puzzles: digit remapping differences and lexicographic ordering."""

from __future__ import annotations

__all__ = [
    "max_diff",
    "min_max_difference",
    "count_prefix_steps",
    "find_kth_number",
]


def _require_positive(num: int) -> str:
    if num < 1:
        raise ValueError(f"expected a positive integer, got {num}")
    return str(num)


def max_diff(num: int) -> int:
    """Largest difference between two numbers made by remapping one digit of ``num``.

    The larger number maps the first non-9 digit to 9. The smaller number maps
    the first digit greater than 1 to 1 when it leads the number, otherwise to 0,
    so that no leading zero is produced.
    """
    text = _require_positive(num)

    high_digit = next((d for d in text if d != "9"), text[0])
    maximum = int(text.replace(high_digit, "9"))

    low_index = next((i for i, d in enumerate(text) if d > "1"), 0)
    low_digit = text[low_index]
    replacement = "1" if low_index == 0 else "0"
    minimum = int(text.replace(low_digit, replacement))

    return maximum - minimum


def min_max_difference(num: int) -> int:
    """Difference between the largest and smallest values from remapping one digit.

    Leading zeros are allowed in the smaller value, so its leading digit is
    mapped to 0 everywhere it appears.
    """
    text = _require_positive(num)

    high_digit = next((d for d in text if d != "9"), text[0])
    maximum = int(text.replace(high_digit, "9"))
    minimum = int(text.replace(text[0], "0"))

    return maximum - minimum


def count_prefix_steps(prefix: int, n: int) -> int:
    """Count the integers in ``[1, n]`` whose decimal form starts with ``prefix``."""
    steps = 0
    first, last = prefix, prefix + 1
    while first <= n:
        steps += min(n + 1, last) - first
        first *= 10
        last *= 10
    return steps


def find_kth_number(n: int, k: int) -> int:
    """Return the ``k``-th smallest integer of ``[1, n]`` in lexicographic order."""
    if not 1 <= k <= n:
        raise ValueError(f"k must lie in [1, {n}], got {k}")

    current = 1
    remaining = k - 1
    while remaining > 0:
        steps = count_prefix_steps(current, n)
        if steps <= remaining:
            current += 1
            remaining -= steps
        else:
            current *= 10
            remaining -= 1
    return current