"""Skeleton generation tests.

The frontier-growth carve only extends the network from cells with exactly
one PATH neighbour, so the result must be a single tree inside the interior.
"""

import random

import pytest

from mazegame.maze import CellType, Grid
from mazegame.maze.generator import count_adjacent_paths, grow_paths
from tests.maze_test_utils import adjacency_edges, bfs_component, path_cells


def _grow(width, height, seed):
    g = Grid(width, height)
    stats = grow_paths(g, random.Random(seed))
    return g, stats


@pytest.mark.parametrize("size,seed", [((4, 4), 1), ((10, 10), 7), ((21, 15), 99), ((31, 31), 2024)])
def test_skeleton_stays_inside_interior(size, seed):
    g, _ = _grow(*size, seed)
    for x, y in path_cells(g, {CellType.PATH}):
        assert g.is_interior(x, y), f"carved border cell {(x, y)}"


@pytest.mark.parametrize("seed", [3, 11, 42, 1234, 98765])
def test_skeleton_is_a_connected_tree(seed):
    g, stats = _grow(25, 19, seed)
    cells = path_cells(g, {CellType.PATH})
    assert len(cells) == stats.cells_carved
    assert bfs_component(cells, next(iter(cells))) == cells
    assert adjacency_edges(cells) == len(cells) - 1


def test_origin_is_interior_and_carved():
    g, stats = _grow(12, 9, 5)
    ox, oy = stats.origin
    assert g.is_interior(ox, oy)
    assert g.type_at(ox, oy) is CellType.PATH


def test_smallest_grid_carves_three_of_four_interior_cells():
    # 2x2 interior: the diagonal of the origin always sees two PATH neighbours
    for seed in range(10):
        g, stats = _grow(4, 4, seed)
        assert stats.cells_carved == 3
        assert g.count(CellType.PATH) == 3


def test_same_seed_same_skeleton():
    a, _ = _grow(17, 13, 314159)
    b, _ = _grow(17, 13, 314159)
    assert path_cells(a, {CellType.PATH}) == path_cells(b, {CellType.PATH})


def test_frontier_is_exhausted_and_counted():
    g, stats = _grow(15, 15, 8)
    assert stats.frontier_pops >= stats.cells_carved - 1
    assert stats.peak_frontier >= 1
    # no WALL interior cell is left with exactly one PATH neighbour
    for x in range(1, g.width - 1):
        for y in range(1, g.height - 1):
            if g.type_at(x, y) is CellType.WALL:
                assert count_adjacent_paths(g, x, y) != 1, f"uncarved frontier cell left at {(x, y)}"


def test_count_adjacent_paths():
    g = Grid(5, 5)
    g.set_type(1, 2, CellType.PATH)
    g.set_type(3, 2, CellType.PATH)
    g.set_type(2, 1, CellType.START)
    assert count_adjacent_paths(g, 2, 2) == 2
