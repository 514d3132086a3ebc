"""Breadth-first connectivity and depth-first topological ordering."""

from __future__ import annotations

from collections import deque
from typing import MutableSet, Sequence


class CycleError(ValueError):
    """Raised when a directed graph has a cycle and so no topological order."""


def _check_square(adjacency: Sequence[Sequence[int]]) -> int:
    n = len(adjacency)
    if any(len(row) != n for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    return n


def bfs(
    adjacency: Sequence[Sequence[int]],
    start: int,
    visited: MutableSet[int] | None = None,
) -> list[int]:
    """Return nodes reached from ``start`` in breadth-first order.

    An edge is an entry equal to 1. Nodes already in ``visited`` are not
    entered; every node reached is added to it.
    """
    n = _check_square(adjacency)
    if not 0 <= start < n:
        raise IndexError(f"start node {start} out of range")
    if visited is None:
        visited = set()
    visited.add(start)
    order = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour, edge in enumerate(adjacency[node]):
            if neighbour not in visited and edge == 1:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def connected_components(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Split the graph into the groups of nodes reachable by BFS from each other."""
    n = _check_square(adjacency)
    visited: set[int] = set()
    return [bfs(adjacency, node, visited) for node in range(n) if node not in visited]


def topological_sort(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Order the nodes so every edge points forward; raise CycleError on a cycle."""
    n = _check_square(adjacency)
    visited = [False] * n
    on_stack = [False] * n
    finished: list[int] = []
    has_cycle = False

    def visit(node: int) -> None:
        nonlocal has_cycle
        visited[node] = True
        on_stack[node] = True
        for neighbour, edge in enumerate(adjacency[node]):
            if not edge:
                continue
            if not visited[neighbour]:
                visit(neighbour)
            elif on_stack[neighbour]:
                has_cycle = True
        on_stack[node] = False
        finished.append(node)

    for node in range(n):
        if not visited[node]:
            visit(node)
    if has_cycle:
        raise CycleError("graph has a cycle; no topological order exists")
    return finished[::-1]