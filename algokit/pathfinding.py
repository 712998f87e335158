"""A* search on a grid with eight-way movement."""

from __future__ import annotations

import heapq
import math
from typing import Mapping

from algokit.grid import (
    BlockedCellError,
    Cell,
    Grid,
    InvalidCellError,
    PathNotFoundError,
    heuristic,
    is_unblocked,
    is_valid,
)

_STRAIGHT = 1.0
_DIAGONAL = 1.414

# Successors in the order they are examined: N, S, E, W, NE, NW, SE, SW.
_MOVES: tuple[tuple[int, int, float], ...] = (
    (-1, 0, _STRAIGHT),
    (1, 0, _STRAIGHT),
    (0, 1, _STRAIGHT),
    (0, -1, _STRAIGHT),
    (-1, 1, _DIAGONAL),
    (-1, -1, _DIAGONAL),
    (1, 1, _DIAGONAL),
    (1, -1, _DIAGONAL),
)


def trace_path(parents: Mapping[Cell, Cell], dest: Cell) -> list[Cell]:
    """Follow parent links back from ``dest`` and return the path from the source.

    The source is the cell that is its own parent.
    """
    path = [dest]
    seen = {dest}
    cell = dest
    while parents[cell] != cell:
        cell = parents[cell]
        if cell in seen:
            raise ValueError(f"parent links form a cycle at {cell}")
        seen.add(cell)
        path.append(cell)
    path.reverse()
    return path


def a_star_search(grid: Grid, src: Cell, dest: Cell) -> list[Cell]:
    """Return a path of cells from ``src`` to ``dest`` found by A* search.

    Raises InvalidCellError for a cell outside the grid, BlockedCellError when
    either end is blocked and PathNotFoundError when the destination cannot
    be reached.
    """
    src = (src[0], src[1])
    dest = (dest[0], dest[1])

    if not is_valid(grid, *src):
        raise InvalidCellError(src, "Source")
    if not is_valid(grid, *dest):
        raise InvalidCellError(dest, "Destination")
    if not is_unblocked(grid, *src):
        raise BlockedCellError(src)
    if not is_unblocked(grid, *dest):
        raise BlockedCellError(dest)
    if src == dest:
        return [src]

    g_cost: dict[Cell, float] = {src: 0.0}
    f_cost: dict[Cell, float] = {src: 0.0}
    parents: dict[Cell, Cell] = {src: src}
    closed: set[Cell] = set()
    open_heap: list[tuple[float, Cell]] = [(0.0, src)]

    while open_heap:
        _, cell = heapq.heappop(open_heap)
        if cell in closed:
            continue
        closed.add(cell)
        row, col = cell

        for d_row, d_col, step in _MOVES:
            successor = (row + d_row, col + d_col)
            if not is_valid(grid, *successor):
                continue
            if successor == dest:
                parents[dest] = cell
                return trace_path(parents, dest)
            if successor in closed or not is_unblocked(grid, *successor):
                continue

            g_new = g_cost[cell] + step
            f_new = g_new + heuristic(successor, dest)
            if f_new < f_cost.get(successor, math.inf):
                heapq.heappush(open_heap, (f_new, successor))
                f_cost[successor] = f_new
                g_cost[successor] = g_new
                parents[successor] = cell

    raise PathNotFoundError(src, dest)