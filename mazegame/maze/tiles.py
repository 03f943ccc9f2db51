"""Character projection of cell types, used by the renderer and the layout parser."""
from typing import Dict, Iterable

from .cells import CellType
from .errors import MazeConfigError
from .grid import Grid

PATH_CHAR = "_"
WALL_CHAR = "#"
START_CHAR = "S"
END_CHAR = "E"
REWARD_CHAR = "R"
TRAP_CHAR = "T"

CHAR_BY_TYPE: Dict[CellType, str] = {
    CellType.PATH: PATH_CHAR,
    CellType.WALL: WALL_CHAR,
    CellType.START: START_CHAR,
    CellType.END: END_CHAR,
    CellType.REWARD: REWARD_CHAR,
    CellType.TRAP: TRAP_CHAR,
}
TYPE_BY_CHAR: Dict[str, CellType] = {ch: t for t, ch in CHAR_BY_TYPE.items()}


def type_to_char(cell_type: CellType) -> str:
    return CHAR_BY_TYPE[cell_type]


def char_to_type(ch: str) -> CellType:
    try:
        return TYPE_BY_CHAR[ch]
    except KeyError:
        raise MazeConfigError(f"unknown maze character {ch!r}") from None


def render_rows(grid: Grid):
    return ["".join(CHAR_BY_TYPE[grid.cells[x][y].cell_type] for x in range(grid.width)) for y in range(grid.height)]


def render(grid: Grid) -> str:
    """Flat row-major string, one character per cell."""
    return "".join(render_rows(grid))


def parse_rows(rows: Iterable[str]) -> Grid:
    """Build a Grid from rendered rows (inverse of ``render_rows``)."""
    rows = [r for r in rows]
    if not rows or not rows[0]:
        raise MazeConfigError("layout must contain at least one non-empty row")
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise MazeConfigError(f"row {i} has {len(row)} cells, expected {width}")
    grid = Grid(width, len(rows))
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            grid.cells[x][y].cell_type = char_to_type(ch)
    return grid


__all__ = [
    "CHAR_BY_TYPE",
    "TYPE_BY_CHAR",
    "type_to_char",
    "char_to_type",
    "render",
    "render_rows",
    "parse_rows",
]
