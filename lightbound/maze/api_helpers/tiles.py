"""Shared tile helpers for the maze API, CLI and movement helpers."""

from lightbound.maze import EXIT, FLOOR, START, WALL, Maze

_CHARS = {WALL: "#", FLOOR: ".", START: "S", EXIT: "E"}


def cell_to_type(cell) -> str:
    if cell == FLOOR:
        return "floor"
    if cell == START:
        return "start"
    if cell == EXIT:
        return "exit"
    return "wall"


def cell_to_char(cell) -> str:
    return _CHARS.get(cell, "#")


def render_ascii(maze: Maze) -> str:
    """Text dump with +y pointing up, so the top line is ``y == height - 1``."""
    lines = []
    for y in reversed(range(maze.height)):
        lines.append("".join(cell_to_char(maze.grid[x][y]) for x in range(maze.width)))
    return "\n".join(lines)
