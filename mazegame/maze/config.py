import os
from dataclasses import dataclass
from typing import Optional

from .cells import Position
from .errors import MazeConfigError

MIN_SIZE = 4

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class MazeConfig:
    width: int = 10
    height: int = 10
    num_rooms: int = 2
    start_x: int = 0
    start_y: int = 1
    seed: Optional[int] = None
    strict_border: bool = False
    enable_metrics: bool = True

    @property
    def start(self) -> Position:
        return Position(self.start_x, self.start_y)

    @property
    def end(self) -> Position:
        return Position(self.width - 1, self.height - 2)

    def validate(self) -> "MazeConfig":
        """Raise MazeConfigError when the parameters cannot produce a maze."""
        if self.width < MIN_SIZE or self.height < MIN_SIZE:
            raise MazeConfigError(f"maze must be at least {MIN_SIZE}x{MIN_SIZE}, got {self.width}x{self.height}")
        if self.num_rooms < 0:
            raise MazeConfigError(f"num_rooms must not be negative, got {self.num_rooms}")
        if not (0 <= self.start_x < self.width and 0 <= self.start_y < self.height):
            raise MazeConfigError(f"start {tuple(self.start)} lies outside the {self.width}x{self.height} maze")
        if self.start == self.end:
            raise MazeConfigError(f"start and end both resolve to {tuple(self.end)}")
        return self

    @classmethod
    def from_env(cls, environ=None) -> "MazeConfig":
        """Build a config from ``MAZE_*`` environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        base = cls()

        def _int(key, default):
            raw = env.get(key)
            if raw is None or raw.strip() == "":
                return default
            try:
                return int(raw)
            except ValueError:
                raise MazeConfigError(f"{key} must be an integer, got {raw!r}") from None

        def _flag(key, default):
            if key not in env:
                return default
            return env.get(key, "").strip().lower() in _TRUTHY

        seed = _int("MAZE_SEED", None)
        return cls(
            width=_int("MAZE_WIDTH", base.width),
            height=_int("MAZE_HEIGHT", base.height),
            num_rooms=_int("MAZE_ROOMS", base.num_rooms),
            start_x=_int("MAZE_START_X", base.start_x),
            start_y=_int("MAZE_START_Y", base.start_y),
            seed=seed,
            strict_border=_flag("MAZE_STRICT_BORDER", base.strict_border),
            enable_metrics=_flag("MAZE_ENABLE_GENERATION_METRICS", base.enable_metrics),
        )


__all__ = ["MazeConfig", "MIN_SIZE"]
