"""Public maze package interface."""

from .config import MazeConfig, MazeConfigError, random_odd
from .maze import Maze
from .pipeline import generate
from .tiles import EXIT, FLOOR, PASSABLE, START, WALL, CellType  # noqa: F401

__all__ = [
    "Maze",
    "MazeConfig",
    "MazeConfigError",
    "CellType",
    "WALL",
    "FLOOR",
    "START",
    "EXIT",
    "PASSABLE",
    "generate",
    "random_odd",
]
