"""0/1 knapsack by dynamic programming."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class KnapsackSolution:
    """Best total value and the zero-based indices of the items taken."""

    max_value: int
    items: tuple[int, ...]


def knapsack(
    weights: Sequence[int], values: Sequence[int], capacity: int
) -> KnapsackSolution:
    """Solve the 0/1 knapsack problem with a bottom-up value table."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    n = len(weights)
    table = [[0] * (capacity + 1) for _ in range(n + 1)]
    for i, (weight, value) in enumerate(zip(weights, values), start=1):
        previous, row = table[i - 1], table[i]
        for j in range(1, capacity + 1):
            if j - weight < 0:
                row[j] = previous[j]
            else:
                row[j] = max(previous[j], previous[j - weight] + value)

    taken = []
    i, j = n, capacity
    while i > 0 and j > 0:
        if table[i][j] != table[i - 1][j]:
            taken.append(i - 1)
            j -= weights[i - 1]
        i -= 1
    return KnapsackSolution(table[n][capacity], tuple(reversed(taken)))