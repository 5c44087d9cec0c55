"""
project: Lightbound
module: __init__.py
License: MIT

Flask application factory.

Configuration is sourced from environment variables (optionally loaded from a
local .env file). Maze defaults come from the ``MAZE_*`` variables understood
by :meth:`lightbound.maze.MazeConfig.from_env`; request parameters override
them per call.
"""

import os

from dotenv import load_dotenv
from flask import Flask

__version__ = "0.2.0"

# Load .env if present so MAZE_* and server settings can be supplied
# without exporting shell variables during development.
load_dotenv()


def create_app(overrides=None):
    """Build the Flask app with the maze API registered."""
    from lightbound.maze import MazeConfig
    from lightbound.routes.maze_api import bp_maze

    app = Flask(__name__, instance_relative_config=True)
    os.makedirs(app.instance_path, exist_ok=True)
    app.config.update(
        SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
        MAZE_DEFAULTS=MazeConfig.from_env().validate(),
        MAZE_MAX_DIMENSION=int(os.getenv("MAZE_MAX_DIMENSION", "201")),
    )
    if overrides:
        app.config.update(overrides)
    app.register_blueprint(bp_maze)
    return app
