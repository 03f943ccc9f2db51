"""Skeleton generation: randomized frontier growth of a loop-free PATH network.

A simplified randomized-Prim carve. Starting from a random interior cell, the
frontier collects interior neighbours of carved cells. A candidate is carved
only when exactly one of its orthogonal neighbours is already PATH, so every
carve adds one edge to a tree and never closes a loop. The frontier is not
deduplicated; a cell queued several times is simply re-checked.
"""
from __future__ import annotations

import random
from typing import List, NamedTuple

from .cells import CellType, MazeCell
from .grid import Grid


class GrowthStats(NamedTuple):
    origin: tuple
    cells_carved: int
    frontier_pops: int
    peak_frontier: int


def _interior_neighbors(grid: Grid, x: int, y: int) -> List[MazeCell]:
    out = []
    if x != 1:
        out.append(grid.get(x - 1, y))
    if x != grid.width - 2:
        out.append(grid.get(x + 1, y))
    if y != 1:
        out.append(grid.get(x, y - 1))
    if y != grid.height - 2:
        out.append(grid.get(x, y + 1))
    return out


def _push_uncarved(frontier: List[MazeCell], grid: Grid, x: int, y: int) -> None:
    frontier.extend(c for c in _interior_neighbors(grid, x, y) if c.cell_type is CellType.WALL)


def count_adjacent_paths(grid: Grid, x: int, y: int) -> int:
    return sum(1 for c in grid.neighbors(x, y) if c.cell_type is CellType.PATH)


def grow_paths(grid: Grid, rng=None) -> GrowthStats:
    """Carve the skeleton into ``grid`` in place.

    Requires at least one interior cell (width and height >= 3).
    """
    if rng is None:
        rng = random
    x = rng.randint(1, grid.width - 2)
    y = rng.randint(1, grid.height - 2)
    grid.set_type(x, y, CellType.PATH)
    frontier: List[MazeCell] = []
    _push_uncarved(frontier, grid, x, y)

    carved = 1
    pops = 0
    peak = len(frontier)
    while frontier:
        i = rng.randrange(len(frontier))
        cell = frontier[i]
        pops += 1
        if cell.cell_type is CellType.WALL and count_adjacent_paths(grid, cell.x, cell.y) == 1:
            cell.cell_type = CellType.PATH
            carved += 1
            _push_uncarved(frontier, grid, cell.x, cell.y)
        frontier.pop(i)
        if len(frontier) > peak:
            peak = len(frontier)
    return GrowthStats((x, y), carved, pops, peak)


__all__ = ["GrowthStats", "grow_paths", "count_adjacent_paths"]
