"""Structural checks over a finished maze, used by scripts/diagnose_seeds.py."""
from __future__ import annotations

from collections import deque
from typing import Any, Dict, List, Set

from .grid import Coord, count_passable_neighbors
from .maze import Maze
from .tiles import EXIT, FLOOR, PASSABLE, START


def flood_from_start(maze: Maze) -> Set[Coord]:
    seen = {maze.start}
    q = deque([maze.start])
    while q:
        cx, cy = q.popleft()
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nx, ny = cx + dx, cy + dy
            if (nx, ny) not in seen and maze.is_passable(nx, ny):
                seen.add((nx, ny))
                q.append((nx, ny))
    return seen


def analyze(maze: Maze) -> Dict[str, Any]:
    """Return lists of offending coordinates keyed by the invariant they break."""
    w, h = maze.width, maze.height
    passable = {(x, y) for x in range(w) for y in range(h) if maze.grid[x][y] in PASSABLE}
    registry = set(maze.floor_cells)
    reach = flood_from_start(maze)
    exits: List[Coord] = [c for c in passable if maze.grid[c[0]][c[1]] == EXIT]
    starts: List[Coord] = [c for c in passable if maze.grid[c[0]][c[1]] == START]
    bad_exit: List[Coord] = []
    if maze.exit is not None:
        # Exit must be a dead-end of the grid it was picked from
        grid = [list(col) for col in maze.grid]
        ex, ey = maze.exit
        grid[ex][ey] = FLOOR
        if count_passable_neighbors(grid, ex, ey) != 1:
            bad_exit.append(maze.exit)
    return {
        "open_border": sorted(c for c in passable if not maze.is_interior(*c)),
        "unregistered": sorted(passable - registry),
        "unreachable": sorted(passable - reach),
        "duplicate_registry": len(maze.floor_cells) - len(registry),
        "start_count": len(starts),
        "exit_count": len(exits),
        "exit_not_dead_end": bad_exit,
    }


def issues(report: Dict[str, Any]) -> Dict[str, int]:
    return {
        "open_border": len(report["open_border"]),
        "unregistered": len(report["unregistered"]),
        "unreachable": len(report["unreachable"]),
        "duplicate_registry": report["duplicate_registry"],
        "bad_start": int(report["start_count"] != 1),
        "bad_exit": int(report["exit_count"] > 1) + len(report["exit_not_dead_end"]),
    }


__all__ = ["flood_from_start", "analyze", "issues"]
