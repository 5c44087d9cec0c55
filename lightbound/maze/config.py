import os
import random
from dataclasses import dataclass, fields, replace
from typing import Optional, Tuple


class MazeConfigError(ValueError):
    """Raised when a maze configuration cannot produce a valid grid."""


@dataclass
class MazeConfig:
    width: int = 11
    height: int = 11
    max_recursion: int = 100
    wall_to_floor_chance: float = 0.1
    random_size: bool = False
    min_size: int = 5
    max_size: int = 25
    cell_size: float = 1.0
    seed: Optional[int] = None
    start: Tuple[int, int] = (1, 1)

    def validate(self) -> "MazeConfig":
        """Fail fast on settings that would index outside the grid.

        Returns self so calls can be chained.
        """
        if self.random_size:
            if self.min_size < 3:
                raise MazeConfigError(f"min_size must be >= 3 (got {self.min_size})")
            if self.min_size > self.max_size:
                raise MazeConfigError(f"min_size {self.min_size} exceeds max_size {self.max_size}")
            if not _odd_values(self.min_size, self.max_size):
                raise MazeConfigError(f"no odd size in [{self.min_size}, {self.max_size}]")
        else:
            if self.width < 3 or self.height < 3:
                raise MazeConfigError(f"maze must be at least 3x3 (got {self.width}x{self.height})")
            sx, sy = self.start
            if not (0 < sx < self.width - 1 and 0 < sy < self.height - 1):
                raise MazeConfigError(f"start {self.start} is not an interior cell")
            if sx % 2 == 0 or sy % 2 == 0:
                raise MazeConfigError(f"start {self.start} must have odd coordinates")
        if self.max_recursion < 1:
            raise MazeConfigError(f"max_recursion must be >= 1 (got {self.max_recursion})")
        if not 0.0 <= self.wall_to_floor_chance <= 1.0:
            raise MazeConfigError(f"wall_to_floor_chance must be within [0, 1] (got {self.wall_to_floor_chance})")
        if self.cell_size <= 0:
            raise MazeConfigError(f"cell_size must be positive (got {self.cell_size})")
        return self

    def resolve_size(self, rng: random.Random) -> "MazeConfig":
        """Return a copy with concrete dimensions, drawing odd sizes when ``random_size`` is set."""
        if not self.random_size:
            return self
        width = random_odd(rng, self.min_size, self.max_size)
        height = random_odd(rng, self.min_size, self.max_size)
        return replace(self, width=width, height=height, random_size=False)

    @classmethod
    def from_env(cls, **overrides) -> "MazeConfig":
        """Build a config from ``MAZE_*`` environment variables.

        Explicit keyword overrides win over the environment.
        """
        env_map = {
            "MAZE_WIDTH": ("width", int),
            "MAZE_HEIGHT": ("height", int),
            "MAZE_MAX_RECURSION": ("max_recursion", int),
            "MAZE_WALL_TO_FLOOR_CHANCE": ("wall_to_floor_chance", float),
            "MAZE_RANDOM_SIZE": ("random_size", _parse_bool),
            "MAZE_MIN_SIZE": ("min_size", int),
            "MAZE_MAX_SIZE": ("max_size", int),
            "MAZE_CELL_SIZE": ("cell_size", float),
            "MAZE_SEED": ("seed", int),
        }
        values = {}
        for env_key, (attr, parse) in env_map.items():
            raw = os.environ.get(env_key)
            if raw is None or raw.strip() == "":
                continue
            try:
                values[attr] = parse(raw.strip())
            except ValueError as exc:
                raise MazeConfigError(f"invalid value for {env_key}: {raw!r}") from exc
        known = {f.name for f in fields(cls)}
        for key, val in overrides.items():
            if key not in known:
                raise MazeConfigError(f"unknown maze setting {key!r}")
            if val is not None:
                values[key] = val
        return cls(**values)


def _parse_bool(raw: str) -> bool:
    return raw.lower() not in {"0", "false", "no", "off", ""}


def _odd_values(lo: int, hi: int):
    first = lo if lo % 2 else lo + 1
    return range(first, hi + 1, 2)


def random_odd(rng: random.Random, lo: int, hi: int) -> int:
    """Uniform odd integer in the inclusive range [lo, hi]."""
    candidates = _odd_values(lo, hi)
    if not candidates:
        raise MazeConfigError(f"no odd size in [{lo}, {hi}]")
    return rng.choice(candidates)


__all__ = ["MazeConfig", "MazeConfigError", "random_odd"]
