"""Maximum flow by the Ford-Fulkerson method with breadth-first search."""

from __future__ import annotations

from collections import deque
from itertools import pairwise
from typing import Sequence


def find_augmenting_path(
    residual: Sequence[Sequence[int]], source: int, sink: int
) -> list[int] | None:
    """Return the shortest path of positive residual capacity, or None."""
    parent: dict[int, int | None] = {source: None}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, capacity in enumerate(residual[u]):
            if v in parent or capacity <= 0:
                continue
            parent[v] = u
            if v == sink:
                path = [v]
                node = parent[v]
                while node is not None:
                    path.append(node)
                    node = parent[node]
                path.reverse()
                return path
            queue.append(v)
    return None


def max_flow(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Return the maximum flow from ``source`` to ``sink`` in a capacity matrix."""
    size = len(capacity)
    if any(len(row) != size for row in capacity):
        raise ValueError("capacity matrix must be square")
    for vertex in (source, sink):
        if not 0 <= vertex < size:
            raise ValueError(f"vertex {vertex} is out of range")

    residual = [list(row) for row in capacity]
    total = 0
    while (path := find_augmenting_path(residual, source, sink)) is not None:
        edges = list(pairwise(path))
        path_flow = min(residual[u][v] for u, v in edges)
        for u, v in edges:
            residual[u][v] -= path_flow
            residual[v][u] += path_flow
        total += path_flow
    return total