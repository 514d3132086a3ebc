"""Travelling salesman tours by branch and bound."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class Tour:
    """A round trip visiting every vertex once, starting at vertex 0."""

    order: tuple[int, ...]
    cost: float


def solve_tsp(graph: Sequence[Sequence[int]]) -> Tour:
    """Find a cheapest round trip from vertex 0 through every vertex.

    A 0 entry means no edge. Raises ValueError if no round trip exists.
    """
    n = len(graph)
    if n == 0 or any(len(row) != n for row in graph):
        raise ValueError("distance matrix must be square and not empty")

    marked = [False] * n
    path: list[int] = []
    best_cost: float = math.inf
    best_order: Optional[tuple[int, ...]] = None

    def min_edge(vertex: int) -> int:
        return min(
            (w for i, w in enumerate(graph[vertex]) if w and not marked[i]),
            default=0,
        )

    def two_smallest(vertex: int) -> int:
        return sum(sorted(w for w in graph[vertex] if w)[:2])

    def lower_bound() -> int:
        return sum(two_smallest(v) for v in range(n) if not marked[v])

    def visit(node: int, cost: int) -> None:
        nonlocal best_cost, best_order
        path.append(node)
        marked[node] = True
        start = path[0]
        if len(path) == n and graph[node][start]:
            total = cost + graph[node][start]
            if total < best_cost:
                best_cost = total
                best_order = tuple(path)
        else:
            for nxt, weight in enumerate(graph[node]):
                if marked[nxt] or not weight:
                    continue
                marked[nxt] = True
                step = cost + weight
                bound = step + (
                    lower_bound() + 1 + min_edge(node) + min_edge(start)
                ) // 2
                if bound < best_cost:
                    visit(nxt, step)
                marked[nxt] = False
        marked[node] = False
        path.pop()

    visit(0, 0)
    if best_order is None:
        raise ValueError("graph has no round trip through every vertex")
    return Tour(best_order, best_cost)