"""Differences between odd and even character frequencies."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate, permutations
from string import ascii_lowercase

__all__ = [
    "max_parity_difference",
    "max_parity_difference_window",
]

_WINDOW_ALPHABET = "01234"


def max_parity_difference(s: str) -> int:
    """Largest odd letter frequency minus the smallest non-zero even letter frequency.

    Missing odd frequencies count as 0 and a missing even frequency counts as
    ``len(s)``.
    """
    stray = set(s) - set(ascii_lowercase)
    if stray:
        raise ValueError(f"expected lowercase letters only, found {sorted(stray)}")

    counts = Counter(s).values()
    largest_odd = max((c for c in counts if c % 2 == 1), default=0)
    smallest_even = min((c for c in counts if c % 2 == 0), default=len(s))
    return largest_odd - smallest_even


def _prefix_counts(s: str, target: str) -> list[int]:
    return [0, *accumulate(int(ch == target) for ch in s)]


def max_parity_difference_window(s: str, k: int) -> int:
    """Best ``freq[a] - freq[b]`` over substrings of length at least ``k``.

    Characters are the digits ``0`` to ``4``; ``a`` must occur an odd number of
    times and ``b`` a non-zero even number of times in the substring. Returns
    -1 when no substring qualifies.
    """
    n = len(s)
    best: int | None = None

    for a, b in permutations(_WINDOW_ALPHABET, 2):
        count_a = _prefix_counts(s, a)
        count_b = _prefix_counts(s, b)

        # Best ``count_b[j] - count_a[j]`` seen on the left, keyed by parities.
        left_best: dict[tuple[int, int], int] = {}
        j = 0
        for i in range(k, n + 1):
            while i - j >= k and count_a[i] > count_a[j] and count_b[i] > count_b[j]:
                key = (count_a[j] % 2, count_b[j] % 2)
                candidate = count_b[j] - count_a[j]
                if key not in left_best or candidate > left_best[key]:
                    left_best[key] = candidate
                j += 1

            need = left_best.get((1 - count_a[i] % 2, count_b[i] % 2))
            if need is not None:
                value = count_a[i] - count_b[i] + need
                if best is None or value > best:
                    best = value

    return -1 if best is None else best