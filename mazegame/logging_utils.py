"""Minimal structured event logging.

Emits one ``key=value`` line per event (or a compact JSON object when
``MAZE_LOG_JSON`` is set) with a level and a timestamp. Generation code logs
events rather than prose so runs can be grepped and compared.

Usage:
    from mazegame.logging_utils import get_logger
    log = get_logger("maze")
    log.info(event="maze_generated", seed=42, width=10)

Level threshold comes from ``MAZE_LOG_LEVEL`` (debug, info, warn, error) and
is read on every call so tests and the CLI can change it at runtime.
Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "yes", "on")


def current_level() -> int:
    return LEVELS.get(os.getenv("MAZE_LOG_LEVEL", "info").strip().lower(), LEVELS["info"])


def json_mode() -> bool:
    return os.getenv("MAZE_LOG_JSON", "0").strip().lower() in _TRUTHY


def format_event(level: str, **fields) -> str:
    ts = int(time.time())
    if json_mode():
        rec = {"level": level, "ts": ts}
        rec.update((k, v) for k, v in fields.items() if v is not None)
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={ts}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (bool, int, float)):
            parts.append(f"{k}={v}")
        else:
            parts.append(f"{k}={str(v).replace(' ', '_')}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "mazegame"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < current_level():
            return
        fields.setdefault("logger", self.name)
        stream = sys.stderr if lvl == "error" else sys.stdout
        print(format_event(lvl, **fields), file=stream)

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


log = get_logger("mazegame")
