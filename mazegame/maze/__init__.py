"""Public maze package interface."""

from .cells import CellType, MazeCell, Position  # noqa: F401
from .config import MazeConfig  # noqa: F401
from .errors import BorderInvariantError, MazeConfigError, MazeError, OutOfBoundsError  # noqa: F401
from .grid import Grid  # noqa: F401
from .maze import Maze  # noqa: F401

__all__ = [
    "Maze",
    "MazeConfig",
    "MazeCell",
    "CellType",
    "Position",
    "Grid",
    "MazeError",
    "MazeConfigError",
    "OutOfBoundsError",
    "BorderInvariantError",
]
