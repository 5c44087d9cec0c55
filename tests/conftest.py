import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from lightbound import create_app  # noqa: E402
from lightbound.routes import maze_api  # noqa: E402

MAZE_ENV_KEYS = (
    "MAZE_WIDTH",
    "MAZE_HEIGHT",
    "MAZE_MAX_RECURSION",
    "MAZE_WALL_TO_FLOOR_CHANCE",
    "MAZE_RANDOM_SIZE",
    "MAZE_MIN_SIZE",
    "MAZE_MAX_SIZE",
    "MAZE_CELL_SIZE",
    "MAZE_SEED",
    "MAZE_ENABLE_METRICS",
    "MAZE_MAX_DIMENSION",
)


@pytest.fixture(autouse=True)
def _clean_maze_env(monkeypatch):
    # A developer .env must not leak into assertions about defaults
    for key in MAZE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def test_app(tmp_path):
    app = create_app({"TESTING": True})
    app.instance_path = str(tmp_path)
    with maze_api._maze_cache_lock:
        maze_api._maze_cache.clear()
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()
