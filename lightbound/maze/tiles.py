# Cell type constants centralized for modular imports
from enum import IntEnum


class CellType(IntEnum):
    WALL = 0
    FLOOR = 1
    START = 3
    EXIT = 4


WALL = CellType.WALL
FLOOR = CellType.FLOOR
START = CellType.START
EXIT = CellType.EXIT

PASSABLE = frozenset({FLOOR, START, EXIT})

__all__ = ["CellType", "WALL", "FLOOR", "START", "EXIT", "PASSABLE"]
