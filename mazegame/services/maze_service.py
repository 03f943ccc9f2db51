"""Caller-side maze policies: seed coercion, regenerate-until-solvable, caching.

The maze core never retries. Anything that wants a guaranteed-solvable board
(the HTTP API, the CLI) goes through ``generate_solvable`` which rebuilds with
successive seeds until the reachability check passes or the attempt budget
runs out.
"""

from __future__ import annotations

import hashlib
import os
import random
import threading
from dataclasses import replace
from typing import Tuple

from mazegame.logging_utils import get_logger
from mazegame.maze import Maze, MazeConfig

log = get_logger("maze_service")

MAX_SEED = 2**31 - 1
DEFAULT_MAX_ATTEMPTS = 25


def coerce_seed(value) -> int:
    """Convert a user supplied seed (int, digit string or any string) to a bounded int."""
    if value is None:
        return random.randint(1, 1_000_000)
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value % MAX_SEED
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return random.randint(1, 1_000_000)
        if s.isdigit():
            return int(s) % MAX_SEED
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:8], "big") % MAX_SEED
    return random.randint(1, 1_000_000)


def generate_solvable(config: MazeConfig, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> Tuple[Maze, int]:
    """Build mazes from ``config.seed``, ``seed+1``, ... until one is solvable.

    Returns ``(maze, attempts)``. When the budget is exhausted the last maze is
    returned as-is; callers inspect ``maze.is_solvable()``.
    """
    if max_attempts < 1:
        max_attempts = 1
    base_seed = config.seed if config.seed is not None else coerce_seed(None)
    maze = None
    for attempt in range(1, max_attempts + 1):
        maze = Maze(replace(config, seed=(base_seed + attempt - 1) % MAX_SEED))
        if maze.is_solvable():
            if attempt > 1:
                log.info(event="maze_regenerated", base_seed=base_seed, seed=maze.seed, attempts=attempt)
            return maze, attempt
    log.warn(event="maze_unsolvable", base_seed=base_seed, attempts=max_attempts)
    return maze, max_attempts


# Small in-process cache keyed by the generation parameters. Guarded by a lock
# because the Flask dev server handles requests on several threads.
_maze_cache = {}
_maze_cache_lock = threading.Lock()
_MAZE_CACHE_MAX = 16


def _cache_key(config: MazeConfig, require_solvable: bool, max_attempts: int):
    return (
        config.width,
        config.height,
        config.num_rooms,
        config.start_x,
        config.start_y,
        config.seed,
        require_solvable,
        max_attempts,
    )


def get_cached_maze(
    config: MazeConfig, require_solvable: bool = False, max_attempts: int = DEFAULT_MAX_ATTEMPTS
) -> Tuple[Maze, int]:
    """Return ``(maze, attempts)`` for a seeded config, reusing earlier results.

    Unseeded configs are never cached. Cached mazes are shared and must be
    treated as read-only.
    """
    cacheable = config.seed is not None and os.environ.get("MAZE_DISABLE_CACHE") != "1"
    key = _cache_key(config, require_solvable, max_attempts)
    if cacheable:
        with _maze_cache_lock:
            hit = _maze_cache.get(key)
        if hit is not None:
            return hit
    if require_solvable:
        result = generate_solvable(config, max_attempts)
    else:
        result = (Maze(replace(config)), 1)
    if cacheable:
        with _maze_cache_lock:
            _maze_cache[key] = result
            if len(_maze_cache) > _MAZE_CACHE_MAX:
                first_key = next(iter(_maze_cache))
                if first_key != key:
                    _maze_cache.pop(first_key, None)
    return result


def clear_cache() -> None:
    with _maze_cache_lock:
        _maze_cache.clear()


__all__ = ["coerce_seed", "generate_solvable", "get_cached_maze", "clear_cache"]
