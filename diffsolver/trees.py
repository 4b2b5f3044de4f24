"""Target-node counts on trees joined by a single extra edge."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

__all__ = [
    "same_parity_counts",
    "max_target_nodes",
]


def _adjacency(edges: Sequence[Sequence[int]]) -> list[list[int]]:
    size = len(edges) + 1
    graph: list[list[int]] = [[] for _ in range(size)]
    for u, v in edges:
        for node in (u, v):
            if not 0 <= node < size:
                raise ValueError(f"node {node} out of range for a tree of {size} nodes")
        graph[u].append(v)
        graph[v].append(u)
    return graph


def _two_colour(graph: list[list[int]]) -> list[int]:
    colours: list[int | None] = [None] * len(graph)
    colours[0] = 0
    stack = [0]
    while stack:
        node = stack.pop()
        for neighbour in graph[node]:
            if colours[neighbour] is None:
                colours[neighbour] = 1 - colours[node]
                stack.append(neighbour)
    if None in colours:
        raise ValueError("edges do not form a connected tree")
    return colours  # type: ignore[return-value]


def same_parity_counts(edges: Sequence[Sequence[int]]) -> list[int]:
    """For each node, the number of nodes at an even distance from it (itself included)."""
    colours = _two_colour(_adjacency(edges))
    sizes = Counter(colours)
    return [sizes[c] for c in colours]


def max_target_nodes(
    edges1: Sequence[Sequence[int]], edges2: Sequence[Sequence[int]]
) -> list[int]:
    """Most nodes at even distance from each node of tree 1 after linking it to tree 2.

    Crossing the linking edge flips parity, so tree 2 contributes its largest
    count of nodes at odd distance from some node.
    """
    own = same_parity_counts(edges1)
    other_size = len(edges2) + 1
    best_other = max(other_size - c for c in same_parity_counts(edges2))
    return [c + best_other for c in own]