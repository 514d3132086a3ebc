"""Minimum spanning tree by Prim's algorithm."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class Edge:
    """A tree edge from an already reached vertex ``u`` to a new vertex ``v``."""

    u: int
    v: int
    cost: float


def _weight(value: Optional[float]) -> float:
    return math.inf if value is None or value == 0 else value


def prim(cost: Sequence[Sequence[Optional[float]]]) -> list[Edge]:
    """Return the spanning tree edges in the order Prim's algorithm adds them.

    A 0, None or ``math.inf`` entry means no edge. The tree grows from vertex 0.
    Raises ValueError if the graph is not connected.
    """
    n = len(cost)
    if any(len(row) != n for row in cost):
        raise ValueError("cost matrix must be square")
    if n == 0:
        return []
    visited = [False] * n
    visited[0] = True
    edges: list[Edge] = []
    while len(edges) < n - 1:
        best: Optional[Edge] = None
        for u in (i for i in range(n) if visited[i]):
            for v, value in enumerate(cost[u]):
                weight = _weight(value)
                if not visited[v] and weight < (best.cost if best else math.inf):
                    best = Edge(u, v, weight)
        if best is None:
            raise ValueError("graph is not connected")
        visited[best.v] = True
        edges.append(best)
    return edges


def total_cost(edges: Iterable[Edge]) -> float:
    """Sum the costs of the given edges."""
    return sum(edge.cost for edge in edges)