"""Grid allocation and neighbourhood helpers shared by the generation phases."""
from __future__ import annotations

from typing import Iterator, List, Tuple

from .tiles import PASSABLE, WALL, CellType

Grid = List[List[CellType]]
Coord = Tuple[int, int]

# up, down, left, right
STEPS: Tuple[Coord, ...] = ((0, 1), (0, -1), (-1, 0), (1, 0))


def init_grid(width: int, height: int) -> Grid:
    """Allocate a column-major ``grid[x][y]`` with every cell walled.

    The border ring stays WALL for the lifetime of the grid; interior cells
    start as WALL too and count as unvisited until carved.
    """
    return [[WALL for _ in range(height)] for _ in range(width)]


def grid_size(grid: Grid) -> Tuple[int, int]:
    return len(grid), len(grid[0])


def is_interior(x: int, y: int, width: int, height: int) -> bool:
    return 0 < x < width - 1 and 0 < y < height - 1


def interior_neighbors(grid: Grid, x: int, y: int) -> Iterator[Coord]:
    width, height = grid_size(grid)
    for dx, dy in STEPS:
        nx, ny = x + dx, y + dy
        if is_interior(nx, ny, width, height):
            yield nx, ny


def count_passable_neighbors(grid: Grid, x: int, y: int) -> int:
    return sum(1 for nx, ny in interior_neighbors(grid, x, y) if grid[nx][ny] in PASSABLE)


__all__ = [
    "Grid",
    "Coord",
    "STEPS",
    "init_grid",
    "grid_size",
    "is_interior",
    "interior_neighbors",
    "count_passable_neighbors",
]
