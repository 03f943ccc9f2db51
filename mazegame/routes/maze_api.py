"""
project: Maze Game
module: maze_api.py
License: MIT

Maze generation and solvability API routes.

Read-only JSON endpoints over the maze core: generate a maze (optionally
regenerating until solvable), check solvability of a caller supplied layout,
and report the effective generation defaults.
"""

from flask import Blueprint, current_app, jsonify, request

from mazegame.logging_utils import get_logger
from mazegame.maze import Maze, MazeConfig, MazeConfigError, MazeError
from mazegame.services.maze_service import coerce_seed, get_cached_maze

bp_maze = Blueprint("maze", __name__)

log = get_logger("maze_api")

_TRUTHY = {"1", "true", "yes", "on"}


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise MazeConfigError(f"{name} must be an integer") from None


def _seed_arg():
    # no seed in the query means a one-off random maze, which is never cached
    raw = request.args.get("seed")
    if raw is None or raw.strip() == "":
        return None
    return coerce_seed(raw)


def _default_config() -> MazeConfig:
    cfg = current_app.config
    return MazeConfig(
        width=cfg.get("MAZE_WIDTH", 10),
        height=cfg.get("MAZE_HEIGHT", 10),
        num_rooms=cfg.get("MAZE_ROOMS", 2),
        start_x=cfg.get("MAZE_START_X", 0),
        start_y=cfg.get("MAZE_START_Y", 1),
        strict_border=cfg.get("MAZE_STRICT_BORDER", False),
        enable_metrics=cfg.get("MAZE_ENABLE_GENERATION_METRICS", True),
    )


@bp_maze.errorhandler(MazeError)
def _maze_error(err):
    log.info(event="maze_api_rejected", error=err.__class__.__name__, path=request.path)
    return jsonify({"error": str(err), "type": err.__class__.__name__}), 400


@bp_maze.route("/api/maze")
def maze_generate():
    """Generate a maze.

    Query (all optional): width, height, rooms, seed (int or string),
    solvable (1 => regenerate until solvable).
    Response: Maze.to_json() plus { "attempts": <int> }
    """
    base = _default_config()
    config = MazeConfig(
        width=_int_arg("width", base.width),
        height=_int_arg("height", base.height),
        num_rooms=_int_arg("rooms", base.num_rooms),
        start_x=base.start_x,
        start_y=base.start_y,
        seed=_seed_arg(),
        strict_border=base.strict_border,
        enable_metrics=base.enable_metrics,
    )
    max_size = current_app.config.get("MAZE_MAX_SIZE", 200)
    if config.width > max_size or config.height > max_size:
        raise MazeConfigError(f"maze dimensions are capped at {max_size}")
    require_solvable = request.args.get("solvable", "0").strip().lower() in _TRUTHY
    maze, attempts = get_cached_maze(
        config.validate(),
        require_solvable=require_solvable,
        max_attempts=current_app.config.get("MAZE_MAX_ATTEMPTS", 25),
    )
    payload = maze.to_json()
    payload["attempts"] = attempts
    return jsonify(payload)


@bp_maze.route("/api/maze/solve", methods=["POST"])
def maze_solve():
    """Check whether a supplied layout is solvable.

    Body JSON: { "rows": ["#####", "S__E#", ...], "start": [x, y] (optional) }
    Response: { "solvable": <bool>, "width": <int>, "height": <int> }
    """
    data = request.get_json(silent=True) or {}
    rows = data.get("rows")
    if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
        raise MazeConfigError("rows must be a list of strings")
    start = data.get("start")
    if start is not None:
        if not (isinstance(start, list) and len(start) == 2 and all(isinstance(v, int) for v in start)):
            raise MazeConfigError("start must be [x, y]")
    max_size = current_app.config.get("MAZE_MAX_SIZE", 200)
    if len(rows) > max_size or any(len(r) > max_size for r in rows):
        raise MazeConfigError(f"maze dimensions are capped at {max_size}")
    maze = Maze.from_rows(rows, start=start)
    return jsonify({"solvable": maze.is_solvable(), "width": maze.width, "height": maze.height})


@bp_maze.route("/api/maze/config")
def maze_config():
    base = _default_config()
    return jsonify(
        {
            "width": base.width,
            "height": base.height,
            "rooms": base.num_rooms,
            "start": list(base.start),
            "end": list(base.end),
            "max_attempts": current_app.config.get("MAZE_MAX_ATTEMPTS", 25),
            "max_size": current_app.config.get("MAZE_MAX_SIZE", 200),
        }
    )
