"""
project: Maze Game
module: __init__.py
License: MIT

Flask application setup.

Wires the maze API blueprint into a Flask app. Configuration is sourced from
environment variables (optionally loaded from a ``.env`` file) with defaults
matching the classic 10x10 board. A local ``instance/`` directory holds the
rotating log file written by ``mazegame.server``.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

from mazegame.maze import MazeConfig

# Load .env if present so MAZE_* settings can be supplied without exporting
# shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)

_defaults = MazeConfig.from_env()

app.config.update(
    SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
    JSON_SORT_KEYS=False,
    MAZE_WIDTH=_defaults.width,
    MAZE_HEIGHT=_defaults.height,
    MAZE_ROOMS=_defaults.num_rooms,
    MAZE_START_X=_defaults.start_x,
    MAZE_START_Y=_defaults.start_y,
    MAZE_STRICT_BORDER=_defaults.strict_border,
    MAZE_ENABLE_GENERATION_METRICS=_defaults.enable_metrics,
    MAZE_MAX_ATTEMPTS=int(os.getenv("MAZE_MAX_ATTEMPTS", "25")),
    MAZE_MAX_SIZE=int(os.getenv("MAZE_MAX_SIZE", "200")),
)

# Register HTTP blueprints (after app config so handlers see final settings)
from mazegame.routes.maze_api import bp_maze  # noqa: E402

app.register_blueprint(bp_maze)


def create_app(**overrides):
    """Return the Flask app instance with optional config overrides applied."""
    if overrides:
        app.config.update(overrides)
    return app


@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify({"error": "internal server error", "error_id": error_id}), 500
