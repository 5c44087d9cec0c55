"""
project: Lightbound
module: maze_api.py
License: MIT

Maze retrieval and movement API routes.

Mazes are regenerated from their seed on demand; nothing is persisted. A
client keeps the seed it was given and replays it to move around or to
rebuild the same maze after a restart.
"""

import hashlib
import random
import threading
from dataclasses import astuple, replace

from flask import Blueprint, current_app, jsonify, request

from lightbound.logging_utils import get_logger
from lightbound.maze import MazeConfig, MazeConfigError, generate
from lightbound.maze.api_helpers.movement import Mover, legal_exits
from lightbound.maze.api_helpers.tiles import cell_to_type

bp_maze = Blueprint("maze_api", __name__)
log = get_logger("lightbound.api")

SEED_MAX = 2**63 - 1
DEFAULT_MAX_DIMENSION = 201

# (config tuple)->Maze. Mazes are frozen so sharing between request threads is safe.
_maze_cache = {}
_maze_cache_lock = threading.Lock()
_MAZE_CACHE_MAX = 16


def _coerce_seed(payload_seed):
    """Convert provided seed (int or str) into a bounded non-negative int."""
    if payload_seed is None:
        return random.randint(1, 1_000_000)
    if isinstance(payload_seed, bool):
        raise MazeConfigError("seed must be an integer or string")
    if isinstance(payload_seed, int):
        return payload_seed % SEED_MAX
    if isinstance(payload_seed, str):
        s = payload_seed.strip()
        if not s:
            return random.randint(1, 1_000_000)
        if s.isdigit():
            return int(s) % SEED_MAX
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:8], "big") % SEED_MAX
    raise MazeConfigError("seed must be an integer or string")


def _to_int(name, raw):
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise MazeConfigError(f"{name} must be an integer")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise MazeConfigError(f"{name} must be an integer") from None


def _to_float(name, raw):
    if raw is None or raw == "":
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise MazeConfigError(f"{name} must be a number") from None


def _to_bool(raw):
    if raw is None:
        return None
    if isinstance(raw, bool):
        return raw
    return str(raw).lower() not in {"0", "false", "no", "off", ""}


def config_from_params(params) -> MazeConfig:
    """Overlay request parameters onto the app's default maze config."""
    base = current_app.config.get("MAZE_DEFAULTS") or MazeConfig()
    overrides = {
        "seed": _coerce_seed(params.get("seed")),
        "width": _to_int("width", params.get("width")),
        "height": _to_int("height", params.get("height")),
        "max_recursion": _to_int("depth", params.get("depth")),
        "wall_to_floor_chance": _to_float("chance", params.get("chance")),
        "random_size": _to_bool(params.get("random_size")),
    }
    config = replace(base, **{k: v for k, v in overrides.items() if v is not None}).validate()
    limit = current_app.config.get("MAZE_MAX_DIMENSION", DEFAULT_MAX_DIMENSION)
    # random_size draws up to max_size, so that bound is what gets allocated
    dims = (config.max_size, config.max_size) if config.random_size else (config.width, config.height)
    if max(dims) > limit:
        raise MazeConfigError(f"maze dimensions are limited to {limit} on this server")
    return config


def get_cached_maze(config: MazeConfig):
    key = astuple(config)
    with _maze_cache_lock:
        maze = _maze_cache.get(key)
        if maze is not None:
            return maze
    maze = generate(config)
    with _maze_cache_lock:
        _maze_cache[key] = maze
        if len(_maze_cache) > _MAZE_CACHE_MAX:
            first_key = next(iter(_maze_cache.keys()))
            if first_key != key:
                _maze_cache.pop(first_key, None)
    return maze


@bp_maze.errorhandler(MazeConfigError)
def _bad_config(exc):
    return jsonify({"error": str(exc)}), 400


@bp_maze.route("/api/health")
def health():
    return jsonify({"status": "ok"})


@bp_maze.route("/api/maze")
def maze_map():
    """
    Generate (or fetch from cache) the maze for the given seed and settings.
    Query: seed, width, height, chance, depth, random_size (all optional)
    Response: { seed, width, height, cell_size, start, start_position, exit, grid[y][x], metrics }
    """
    config = config_from_params(request.args)
    maze = get_cached_maze(config)
    log.info(event="maze_served", seed=maze.seed, size=f"{maze.width}x{maze.height}")
    return jsonify(maze.to_dict())


@bp_maze.route("/api/maze/move", methods=["POST"])
def maze_move():
    """Apply one movement step.

    Body JSON: { seed, width, height, chance, depth, random_size, x, y, direction }
    Response: { x, y, moved, reached_exit, reload, type, exits }
    ``reload`` tells the client to request a fresh maze.
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON object"}), 400
    if data.get("seed") is None:
        raise MazeConfigError("seed is required to replay a maze")
    config = config_from_params(data)
    maze = get_cached_maze(config)
    x = _to_int("x", data.get("x"))
    y = _to_int("y", data.get("y"))
    position = (x, y) if x is not None and y is not None else None
    try:
        mover = Mover(maze, position=position)
        result = mover.attempt_move(str(data.get("direction", "")))
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    if result.reached_exit:
        log.info(event="maze_exit_reached", seed=maze.seed, x=result.x, y=result.y)
    return jsonify(
        {
            "x": result.x,
            "y": result.y,
            "moved": result.moved,
            "reached_exit": result.reached_exit,
            "reload": result.reached_exit,
            "type": cell_to_type(maze.grid[result.x][result.y]),
            "exits": legal_exits(maze, result.x, result.y),
        }
    )
