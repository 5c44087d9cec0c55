"""Probabilistic wall loosening that turns a perfect maze into a looping one."""
from __future__ import annotations

import random
from typing import List

from .grid import STEPS, Coord, Grid, grid_size, is_interior
from .tiles import FLOOR, WALL


def loosen_walls(grid: Grid, floor_cells: List[Coord], cell: Coord, chance: float, rng: random.Random) -> int:
    """Open interior walls around ``cell`` with independent probability ``chance``.

    Each opened wall is registered and the same check cascades from it before
    the remaining directions of its parent are tried. Conversion is one-way
    (WALL -> FLOOR), so the cascade terminates on a finite grid.

    Returns the number of walls opened. ``chance <= 0`` draws no randomness.
    """
    if chance <= 0:
        return 0
    width, height = grid_size(grid)
    opened = 0

    def _candidates(x: int, y: int):
        return iter([(x + dx, y + dy) for dx, dy in STEPS])

    stack = [_candidates(*cell)]
    while stack:
        for nx, ny in stack[-1]:
            if not is_interior(nx, ny, width, height) or grid[nx][ny] != WALL:
                continue
            if rng.random() >= chance:
                continue
            grid[nx][ny] = FLOOR
            floor_cells.append((nx, ny))
            opened += 1
            stack.append(_candidates(nx, ny))
            break
        else:
            stack.pop()
    return opened


__all__ = ["loosen_walls"]
