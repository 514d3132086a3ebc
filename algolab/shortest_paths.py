"""All-pairs shortest distances (Floyd) and single-source paths (Dijkstra)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

Number = float


def _check_square(matrix: Sequence[Sequence[Number]]) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    return n


def floyd(matrix: Sequence[Sequence[Optional[Number]]]) -> list[list[Number]]:
    """Return the matrix of shortest distances between every pair of vertices.

    Off the diagonal, -1 or None marks a missing edge; unreachable pairs come
    back as ``math.inf``. The input is left unchanged.
    """
    n = _check_square(matrix)
    dist = [
        [
            math.inf if i != j and (value is None or value == -1) else value
            for j, value in enumerate(row)
        ]
        for i, row in enumerate(matrix)
    ]
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            for j in range(n):
                candidate = via + through[j]
                if candidate < row[j]:
                    row[j] = candidate
    return dist


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessor links from one source vertex."""

    source: int
    distances: tuple[Number, ...]
    parents: tuple[Optional[int], ...]

    def path(self, target: int) -> list[int]:
        """Return the vertices from the source to ``target``, both included."""
        if not 0 <= target < len(self.distances):
            raise IndexError(f"vertex {target} out of range")
        if math.isinf(self.distances[target]):
            raise ValueError(f"vertex {target} is unreachable from {self.source}")
        route = [target]
        node = target
        while self.parents[node] is not None:
            node = self.parents[node]
            route.append(node)
        return route[::-1]


def dijkstra(cost: Sequence[Sequence[Number]], source: int) -> ShortestPaths:
    """Find shortest distances from ``source`` in a cost matrix.

    Missing edges are given as ``math.inf``; the diagonal is normally 0.
    """
    n = _check_square(cost)
    if not 0 <= source < n:
        raise IndexError(f"source {source} out of range")
    dist = list(cost[source])
    parents: list[Optional[int]] = [source] * n
    parents[source] = None
    done = [False] * n
    done[source] = True
    for _ in range(n):
        nearest = None
        best = math.inf
        for j in range(n):
            if not done[j] and dist[j] < best:
                best = dist[j]
                nearest = j
        if nearest is None:
            break
        done[nearest] = True
        row = cost[nearest]
        for v in range(n):
            if not done[v] and dist[v] > dist[nearest] + row[v]:
                dist[v] = dist[nearest] + row[v]
                parents[v] = nearest
    return ShortestPaths(source, tuple(dist), tuple(parents))