"""Connectivity utilities: border repair, reachability and the border check.

The connectors are local greedy repairs. They carve from the fixed start/end
corners towards the first pre-existing path cell and do not prove that start
and end are joined; ``is_reachable`` answers that question.
"""
from __future__ import annotations

from typing import Iterable, List, Set

from .cells import BLOCKING, CellType, Position
from .grid import DIRECTIONS, Grid


def connect_start_to_path(grid: Grid) -> int:
    """Carve down column 1 until it meets an existing open cell.

    At each step the column-1 cell below and its diagonal neighbour in column
    2 are checked; the walk stops once either is open or the column runs out
    of interior rows. Returns the number of cells carved.
    """
    carved = 0
    y = 0
    while y + 1 <= grid.height - 2:
        if grid.type_at(1, y + 1) is not CellType.WALL or grid.type_at(2, y) is not CellType.WALL:
            break
        grid.set_type(1, y + 1, CellType.PATH)
        carved += 1
        y += 1
    return carved


def connect_end_to_path(grid: Grid) -> int:
    """Mirror of ``connect_start_to_path`` walking left along row height-2."""
    w, h = grid.width, grid.height
    carved = 0
    x = 0
    while w - 2 - x >= 1:
        if grid.type_at(w - 1 - x, h - 3) is not CellType.WALL or grid.type_at(w - 2 - x, h - 2) is not CellType.WALL:
            break
        grid.set_type(w - 2 - x, h - 2, CellType.PATH)
        carved += 1
        x += 1
    return carved


def is_reachable(grid: Grid, start: Position) -> bool:
    """Depth-first search from ``start`` for any END cell.

    WALL and TRAP cells end a branch; every other type is passable. Neighbours
    are explored left, right, up, down. The visited set lives only for this
    call.
    """
    visited: Set[Position] = set()
    stack = [Position(*start)]
    grid.get(*stack[0])
    while stack:
        pos = stack.pop()
        if pos in visited:
            continue
        visited.add(pos)
        cell = grid.cells[pos.x][pos.y]
        if cell.cell_type is CellType.END:
            return True
        if cell.cell_type in BLOCKING:
            continue
        # reversed so the stack pops left first
        for dx, dy in reversed(DIRECTIONS):
            nx, ny = pos.x + dx, pos.y + dy
            if grid.in_bounds(nx, ny) and (nx, ny) not in visited:
                stack.append(Position(nx, ny))
    return False


def reachable_positions(grid: Grid, start: Position) -> Set[Position]:
    """All non-blocking cells connected to ``start`` (empty if start is blocking)."""
    start = Position(*start)
    if grid.get(*start).cell_type in BLOCKING:
        return set()
    seen = {start}
    stack = [start]
    while stack:
        x, y = stack.pop()
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if grid.in_bounds(nx, ny) and (nx, ny) not in seen and grid.cells[nx][ny].cell_type not in BLOCKING:
                seen.add(Position(nx, ny))
                stack.append(Position(nx, ny))
    return seen


def border_violations(grid: Grid, allowed: Iterable[Position] = ()) -> List[Position]:
    """Outer-ring cells that are not WALL, ignoring the ``allowed`` positions."""
    allowed = {Position(*p) for p in allowed}
    out = []
    for cell in grid:
        if grid.is_border(cell.x, cell.y) and cell.cell_type is not CellType.WALL and cell.position not in allowed:
            out.append(cell.position)
    return out


__all__ = [
    "connect_start_to_path",
    "connect_end_to_path",
    "is_reachable",
    "reachable_positions",
    "border_violations",
]
