"""Grid helpers and errors shared by the grid path-finding code.

A grid is a sequence of rows. A cell holding ``1`` is open and any
other value blocks it. Cells are addressed as ``(row, col)`` pairs.
"""

from __future__ import annotations

import math
from typing import Sequence

Cell = tuple[int, int]
Grid = Sequence[Sequence[int]]


class PathfindingError(Exception):
    """Base class for errors raised while searching a grid."""


class InvalidCellError(PathfindingError):
    """A cell lies outside the grid."""

    def __init__(self, cell: Cell, role: str = "Cell") -> None:
        super().__init__(f"{role} {cell} is invalid")
        self.cell = cell
        self.role = role


class BlockedCellError(PathfindingError):
    """The source or the destination cell is blocked."""

    def __init__(self, cell: Cell) -> None:
        super().__init__(f"Source or the destination is blocked: {cell}")
        self.cell = cell


class PathNotFoundError(PathfindingError):
    """No path leads from the source to the destination."""

    def __init__(self, src: Cell, dest: Cell) -> None:
        super().__init__(f"Failed to find the destination cell {dest} from {src}")
        self.src = src
        self.dest = dest


def _shape(grid: Grid) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return rows, cols


def is_valid(grid: Grid, row: int, col: int) -> bool:
    """Return whether ``(row, col)`` lies inside the grid."""
    rows, cols = _shape(grid)
    return 0 <= row < rows and 0 <= col < cols


def is_unblocked(grid: Grid, row: int, col: int) -> bool:
    """Return whether the cell is open; raise if it lies outside the grid."""
    if not is_valid(grid, row, col):
        raise InvalidCellError((row, col))
    return grid[row][col] == 1


def heuristic(cell: Cell, dest: Cell) -> float:
    """Euclidean distance from ``cell`` to ``dest``."""
    return math.hypot(cell[0] - dest[0], cell[1] - dest[1])