"""Fixed-size 2D container of maze cells.

Storage is column-major (``cells[x][y]``) to match the coordinate order used
by every caller. Cells are allocated once as WALL and never replaced; only
their types change.
"""
from __future__ import annotations

from typing import Iterator, List, Tuple

from .cells import CellType, MazeCell, Position
from .errors import MazeConfigError, OutOfBoundsError

# left, right, up, down
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Grid:
    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise MazeConfigError(f"grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self.cells: List[List[MazeCell]] = [
            [MazeCell(Position(x, y)) for y in range(height)] for x in range(width)
        ]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def is_border(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and (x in (0, self._width - 1) or y in (0, self._height - 1))

    def is_interior(self, x: int, y: int) -> bool:
        return 1 <= x <= self._width - 2 and 1 <= y <= self._height - 2

    def get(self, x: int, y: int) -> MazeCell:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)
        return self.cells[x][y]

    def type_at(self, x: int, y: int) -> CellType:
        return self.get(x, y).cell_type

    def set_type(self, x: int, y: int, cell_type: CellType) -> None:
        self.get(x, y).cell_type = cell_type

    def neighbors(self, x: int, y: int) -> List[MazeCell]:
        """In-bounds orthogonal neighbours, ordered left, right, up, down."""
        self.get(x, y)
        out = []
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                out.append(self.cells[nx][ny])
        return out

    def __iter__(self) -> Iterator[MazeCell]:
        # row-major, same order the renderer uses
        for y in range(self._height):
            for x in range(self._width):
                yield self.cells[x][y]

    def count(self, cell_type: CellType) -> int:
        return sum(1 for c in self if c.cell_type is cell_type)

    def positions_of(self, cell_type: CellType) -> List[Position]:
        return [c.position for c in self if c.cell_type is cell_type]


__all__ = ["Grid", "DIRECTIONS"]
