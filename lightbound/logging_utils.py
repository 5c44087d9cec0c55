"""Minimal structured logging helper for Lightbound.

Emits one key=value line (or a compact JSON object) per event with a
timestamp, level and logger name. Generation code logs through this so that
runs can be grepped or piped into a log collector without configuring the
stdlib logging tree.

Usage:
    from lightbound.logging_utils import get_logger
    log = get_logger("lightbound.maze")
    log.info(event="maze_generated", seed=42, size="11x11")

Environment:
    LIGHTBOUND_LOG_LEVEL  debug|info|warn|error (default info)
    LIGHTBOUND_LOG_JSON   1/true/yes/on switches to JSON lines

Beyond plain print-based records this module adds:
    * a ``logger=<name>`` field on every record, so API and generator output
      can be told apart in one stream;
    * ``set_level()`` to change the threshold at runtime (the CLI
      ``--log-level`` flag uses it); it accepts ``warning`` as an alias of ``warn``.

Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_ALIASES = {"warning": "warn"}


def _level_value(level: str) -> int:
    name = level.strip().lower()
    name = _ALIASES.get(name, name)
    if name not in LEVELS:
        raise ValueError(f"unknown log level {level!r}; expected one of {sorted(LEVELS)}")
    return LEVELS[name]


_ENV_LEVEL = os.getenv("LIGHTBOUND_LOG_LEVEL", "info").lower()
CURRENT_LEVEL = LEVELS.get(_ALIASES.get(_ENV_LEVEL, _ENV_LEVEL), 20)
JSON_MODE = os.getenv("LIGHTBOUND_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")


def set_level(level: str) -> None:
    global CURRENT_LEVEL
    CURRENT_LEVEL = _level_value(level)


def format_record(level: str, **fields) -> str:
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            parts.append(f"{k}={str(v).replace(' ', '_')}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "lightbound"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        fields.setdefault("logger", self.name)
        print(format_record(lvl, **fields), file=sys.stderr if lvl == "error" else sys.stdout)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE: dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("lightbound")
