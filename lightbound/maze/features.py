"""Feature placement on a carved grid: the Start marker and the Exit dead-end."""
from __future__ import annotations

from typing import List, Optional, Sequence

from .grid import Coord, Grid, count_passable_neighbors
from .tiles import EXIT, FLOOR, START


def mark_start(grid: Grid, start: Coord) -> None:
    sx, sy = start
    grid[sx][sy] = START


def find_dead_ends(grid: Grid, floor_cells: Sequence[Coord]) -> List[Coord]:
    """FLOOR cells with exactly one passable neighbour, in registry order.

    Start and Exit cells are never candidates but do count as neighbours.
    """
    return [
        (x, y)
        for x, y in floor_cells
        if grid[x][y] == FLOOR and count_passable_neighbors(grid, x, y) == 1
    ]


def select_exit(grid: Grid, floor_cells: Sequence[Coord]) -> Optional[Coord]:
    """Mark the dead-end furthest along x + y as EXIT and return it.

    Ties go to the first candidate in registry order. Returns None and leaves
    the grid untouched when there is no dead-end.
    """
    dead_ends = find_dead_ends(grid, floor_cells)
    if not dead_ends:
        return None
    ex, ey = max(dead_ends, key=lambda c: c[0] + c[1])
    grid[ex][ey] = EXIT
    return ex, ey


__all__ = ["mark_start", "find_dead_ends", "select_exit"]
