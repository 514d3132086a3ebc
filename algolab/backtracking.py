"""Backtracking searches: n queens and subsets summing to a target."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of n non-attacking queens.

    Each solution gives, row by row, the zero-based column of that row's queen.
    Solutions come in lexicographic order.
    """
    if n < 0:
        raise ValueError("number of queens must not be negative")
    columns: list[int] = []

    def safe(col: int) -> bool:
        row = len(columns)
        return all(
            c != col and abs(c - col) != row - r for r, c in enumerate(columns)
        )

    def place() -> Iterator[tuple[int, ...]]:
        for col in range(n):
            if safe(col):
                columns.append(col)
                if len(columns) == n:
                    yield tuple(columns)
                else:
                    yield from place()
                columns.pop()

    yield from place()


def format_board(solution: Sequence[int]) -> str:
    """Render a solution as tab-separated rows of 'Q' and '-'."""
    n = len(solution)
    return "".join(
        "".join("Q\t" if c == col else "-\t" for c in range(n)) + "\n"
        for col in solution
    )


def subset_sums(weights: Iterable[int], target: int) -> Iterator[tuple[int, ...]]:
    """Yield subsets of non-negative weights that sum exactly to ``target``.

    Weights are taken in increasing order; each subset lists its weights in
    that order.
    """
    w = sorted(weights)
    if not w or sum(w) < target or w[0] > target:
        return
    w.extend((0, 0))
    chosen = [False] * len(w)

    def search(s: int, k: int, remaining: int) -> Iterator[tuple[int, ...]]:
        chosen[k] = True
        if s + w[k] == target:
            yield tuple(w[i] for i in range(k + 1) if chosen[i])
        elif s + w[k] + w[k + 1] <= target:
            yield from search(s + w[k], k + 1, remaining - w[k])
        if s + remaining - w[k] >= target and s + w[k + 1] <= target:
            chosen[k] = False
            yield from search(s, k + 1, remaining - w[k])

    yield from search(0, 0, sum(w))