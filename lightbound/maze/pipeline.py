"""Pipeline orchestration for maze generation.

Runs the phases strictly forward over one grid and one floor registry:
grid init -> carve (loosening each cell post-order) -> start marker -> exit.
The finished grid is frozen into a :class:`Maze` before it is returned.
"""
from __future__ import annotations

import os
import random
import time
from typing import Any, Dict, List, Optional

from lightbound.logging_utils import get_logger

from .carver import carve
from .config import MazeConfig
from .features import find_dead_ends, mark_start, select_exit
from .grid import Coord, init_grid
from .loosener import loosen_walls
from .maze import Maze
from .metrics import init_metrics

log = get_logger("lightbound.maze")


def _metrics_enabled(explicit: Optional[bool]) -> bool:
    if explicit is not None:
        return explicit
    val = os.environ.get("MAZE_ENABLE_METRICS", "1").lower()
    return val not in {"0", "false", "no", ""}


def generate(
    config: Optional[MazeConfig] = None,
    rng: Optional[random.Random] = None,
    *,
    enable_metrics: Optional[bool] = None,
) -> Maze:
    """Generate a maze from ``config`` using ``rng`` as the only randomness source.

    When ``rng`` is omitted a ``random.Random`` is seeded from ``config.seed``
    (drawing and recording a fresh seed if that is None too). An injected
    ``rng`` leaves ``Maze.seed`` as None since the seed cannot replay it. Raises
    :class:`~lightbound.maze.config.MazeConfigError` on invalid settings.
    """
    config = (config or MazeConfig()).validate()
    seed = config.seed
    if rng is not None:
        # the seed only describes the run when it seeded the rng
        seed = None
    else:
        if seed is None:
            seed = random.randint(0, 2**31 - 1)
        rng = random.Random(seed)
    config = config.resolve_size(rng).validate()

    with_metrics = _metrics_enabled(enable_metrics)
    metrics: Dict[str, Any] = init_metrics() if with_metrics else {}
    phase_times: Dict[str, int] = {}
    started = time.perf_counter()

    def _phase(label, fn, *a, **k):
        if not with_metrics:
            return fn(*a, **k)
        ps = time.perf_counter()
        r = fn(*a, **k)
        phase_times[label] = int((time.perf_counter() - ps) * 1000)
        return r

    grid = _phase("init_grid", init_grid, config.width, config.height)
    floor_cells: List[Coord] = []
    loosened = 0

    def _loosen(cell: Coord) -> None:
        nonlocal loosened
        loosened += loosen_walls(grid, floor_cells, cell, config.wall_to_floor_chance, rng)

    stats = _phase("carve", carve, grid, floor_cells, config.start, config.max_recursion, rng, _loosen)
    _phase("mark_start", mark_start, grid, config.start)
    if with_metrics:
        metrics["dead_ends"] = len(find_dead_ends(grid, floor_cells))
    exit_cell = _phase("select_exit", select_exit, grid, floor_cells)

    if with_metrics:
        metrics["cells_carved"] = stats.cells_carved
        metrics["walls_loosened"] = loosened
        metrics["floor_cells"] = len(floor_cells)
        metrics["max_depth_reached"] = stats.max_depth_reached
        metrics["depth_capped"] = stats.depth_capped
        metrics["exit_placed"] = exit_cell is not None
        metrics["runtime_ms"] = int((time.perf_counter() - started) * 1000)
        metrics["phase_ms"] = phase_times

    maze = Maze(
        grid=tuple(tuple(column) for column in grid),
        width=config.width,
        height=config.height,
        start=config.start,
        exit=exit_cell,
        floor_cells=tuple(floor_cells),
        seed=seed,
        cell_size=config.cell_size,
        metrics=metrics,
    )
    log.debug(
        event="maze_generated",
        seed=seed,
        size=f"{maze.width}x{maze.height}",
        floor_cells=len(floor_cells),
        exit=exit_cell,
        depth_capped=stats.depth_capped,
        runtime_ms=int((time.perf_counter() - started) * 1000),
    )
    return maze


__all__ = ["generate"]
