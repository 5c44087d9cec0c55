"""Randomized depth-first (recursive backtracker) path carving.

Rooms live on odd coordinates; each step jumps two cells and opens the wall
between the current room and the next one. The walk uses an explicit LIFO
stack instead of Python recursion but visits cells in exactly the order the
recursive formulation would, so seeded runs replay identically.
"""
from __future__ import annotations

import random
from typing import Callable, List, NamedTuple, Optional

from .grid import Coord, Grid, grid_size, is_interior
from .tiles import FLOOR, WALL

JUMPS: tuple = ((2, 0), (0, 2), (-2, 0), (0, -2))


class CarveStats(NamedTuple):
    cells_carved: int
    max_depth_reached: int
    depth_capped: bool


def _shuffled_jumps(rng: random.Random):
    jumps = list(JUMPS)
    rng.shuffle(jumps)
    return iter(jumps)


def carve(
    grid: Grid,
    floor_cells: List[Coord],
    start: Coord,
    max_depth: int,
    rng: random.Random,
    on_cell_done: Optional[Callable[[Coord], object]] = None,
) -> CarveStats:
    """Carve a spanning structure of FLOOR cells outward from ``start``.

    Every cell that becomes FLOOR is appended to ``floor_cells`` (the midpoint
    before the room it leads to). A room reached at ``depth + 1 >= max_depth``
    is carved but not explored further. ``on_cell_done`` runs post-order,
    once all four directions of a cell have been tried.
    """
    width, height = grid_size(grid)
    sx, sy = start
    grid[sx][sy] = FLOOR
    floor_cells.append(start)
    carved = 1
    deepest = 0
    capped = False

    stack = [(start, 0, _shuffled_jumps(rng))]
    while stack:
        (x, y), depth, jumps = stack[-1]
        for dx, dy in jumps:
            nx, ny = x + dx, y + dy
            if not is_interior(nx, ny, width, height) or grid[nx][ny] != WALL:
                continue
            mx, my = x + dx // 2, y + dy // 2
            # the loosener may already have opened the midpoint
            if grid[mx][my] == WALL:
                grid[mx][my] = FLOOR
                floor_cells.append((mx, my))
                carved += 1
            grid[nx][ny] = FLOOR
            floor_cells.append((nx, ny))
            carved += 1
            deepest = max(deepest, depth + 1)
            if depth + 1 >= max_depth:
                capped = True
                continue
            stack.append(((nx, ny), depth + 1, _shuffled_jumps(rng)))
            break
        else:
            stack.pop()
            if on_cell_done is not None:
                on_cell_done((x, y))
    return CarveStats(carved, deepest, capped)


__all__ = ["JUMPS", "CarveStats", "carve"]
