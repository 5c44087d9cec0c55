"""Immutable result of a generation run handed to movement, camera and API code."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .grid import Coord, is_interior
from .tiles import PASSABLE, CellType


@dataclass(frozen=True)
class Maze:
    grid: Tuple[Tuple[CellType, ...], ...]
    width: int
    height: int
    start: Coord
    exit: Optional[Coord]
    floor_cells: Tuple[Coord, ...]
    seed: Optional[int] = None
    cell_size: float = 1.0
    metrics: Dict[str, Any] = field(default_factory=dict, compare=False)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> CellType:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} maze")
        return self.grid[x][y]

    def is_passable(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.grid[x][y] in PASSABLE

    def is_interior(self, x: int, y: int) -> bool:
        return is_interior(x, y, self.width, self.height)

    def world_position(self, x: int, y: int) -> Tuple[float, float, float]:
        return (x * self.cell_size, y * self.cell_size, 0.0)

    @property
    def start_position(self) -> Tuple[float, float, float]:
        """World-space anchor of the start cell."""
        return self.world_position(*self.start)

    def to_rows(self) -> List[List[int]]:
        # Row-major (grid[y][x]) so clients index the visual orientation directly.
        return [[int(self.grid[x][y]) for x in range(self.width)] for y in range(self.height)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "width": self.width,
            "height": self.height,
            "cell_size": self.cell_size,
            "start": list(self.start),
            "start_position": list(self.start_position),
            "exit": list(self.exit) if self.exit else None,
            "grid": self.to_rows(),
            "metrics": self.metrics,
        }

    def counts(self) -> Dict[str, int]:
        tally = Counter(self.grid[x][y].name.lower() for x in range(self.width) for y in range(self.height))
        return {name.lower(): tally.get(name.lower(), 0) for name in CellType.__members__}


__all__ = ["Maze"]
