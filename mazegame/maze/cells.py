from enum import Enum
from typing import NamedTuple


class Position(NamedTuple):
    x: int
    y: int


class CellType(str, Enum):
    WALL = "wall"
    PATH = "path"
    START = "start"
    END = "end"
    TRAP = "trap"
    REWARD = "reward"


# Cell types the reachability walk cannot pass through
BLOCKING = frozenset({CellType.WALL, CellType.TRAP})


class MazeCell:
    """Lightweight container for a maze grid cell.

    The position is fixed for the lifetime of the maze; the type is rewritten
    by generation and by gameplay code placing traps or rewards.
    """

    __slots__ = ("position", "cell_type")

    def __init__(self, position: Position, cell_type: CellType = CellType.WALL):
        self.position = position
        self.cell_type = cell_type

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def is_wall(self) -> bool:
        return self.cell_type is CellType.WALL

    def is_path(self) -> bool:
        return self.cell_type is CellType.PATH

    def is_start(self) -> bool:
        return self.cell_type is CellType.START

    def is_end(self) -> bool:
        return self.cell_type is CellType.END

    def is_trap(self) -> bool:
        return self.cell_type is CellType.TRAP

    def is_reward(self) -> bool:
        return self.cell_type is CellType.REWARD

    def is_blocking(self) -> bool:
        return self.cell_type in BLOCKING

    def to_dict(self):
        return {"x": self.x, "y": self.y, "cell_type": self.cell_type.value}

    def __repr__(self) -> str:
        return f"MazeCell({self.x}, {self.y}, {self.cell_type.value})"


__all__ = ["Position", "CellType", "MazeCell", "BLOCKING"]
