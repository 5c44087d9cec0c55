"""Movement rules for a player walking a generated maze.

The mover only reads the maze. Entering the exit cell fires the ``on_exit``
callback, which is where callers hook their "reload / next maze" action.
"""

from __future__ import annotations

from typing import Callable, List, NamedTuple, Optional

from lightbound.maze import EXIT, Maze

DELTAS = {"n": (0, 1), "s": (0, -1), "e": (1, 0), "w": (-1, 0)}


class MoveResult(NamedTuple):
    x: int
    y: int
    moved: bool
    reached_exit: bool


def legal_exits(maze: Maze, x: int, y: int) -> List[str]:
    return [d for d, (dx, dy) in DELTAS.items() if maze.is_passable(x + dx, y + dy)]


class Mover:
    def __init__(self, maze: Maze, on_exit: Optional[Callable[[Maze], object]] = None, position=None):
        self.maze = maze
        self.on_exit = on_exit
        x, y = position if position is not None else maze.start
        if not maze.is_passable(x, y):
            raise ValueError(f"({x}, {y}) is not a passable cell")
        self.x, self.y = x, y

    @property
    def position(self):
        return self.x, self.y

    @property
    def world_position(self):
        return self.maze.world_position(self.x, self.y)

    def exits(self) -> List[str]:
        return legal_exits(self.maze, self.x, self.y)

    def attempt_move(self, direction: str) -> MoveResult:
        """Step one cell in ``direction`` (n/s/e/w) if the target is passable."""
        try:
            dx, dy = DELTAS[direction.lower()]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}") from None
        nx, ny = self.x + dx, self.y + dy
        if not self.maze.is_passable(nx, ny):
            return MoveResult(self.x, self.y, False, False)
        self.x, self.y = nx, ny
        reached_exit = self.maze.grid[nx][ny] == EXIT
        if reached_exit and self.on_exit is not None:
            self.on_exit(self.maze)
        return MoveResult(nx, ny, True, reached_exit)


__all__ = ["DELTAS", "MoveResult", "Mover", "legal_exits"]
