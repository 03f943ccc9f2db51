"""Boundary connector and reachability tests."""

import pytest

from mazegame.maze import CellType, Grid, Maze, OutOfBoundsError, Position
from mazegame.maze.connectivity import (
    border_violations,
    connect_end_to_path,
    connect_start_to_path,
    is_reachable,
    reachable_positions,
)
from mazegame.maze.tiles import parse_rows


# ---------------- Boundary connector ------------------------------------------


def test_start_connector_terminates_on_solid_grid():
    g = Grid(6, 6)
    carved = connect_start_to_path(g)
    assert carved == 4
    assert [g.type_at(1, y) for y in range(6)] == [
        CellType.WALL,
        CellType.PATH,
        CellType.PATH,
        CellType.PATH,
        CellType.PATH,
        CellType.WALL,
    ]


def test_start_connector_stops_at_diagonal_path():
    g = Grid(8, 8)
    g.set_type(2, 3, CellType.PATH)
    assert connect_start_to_path(g) == 3
    assert g.type_at(1, 3) is CellType.PATH
    assert g.type_at(1, 4) is CellType.WALL


def test_start_connector_noop_when_column_already_open():
    g = Grid(6, 6)
    g.set_type(1, 1, CellType.PATH)
    assert connect_start_to_path(g) == 0
    assert g.count(CellType.PATH) == 1


def test_end_connector_terminates_on_solid_grid():
    g = Grid(6, 6)
    assert connect_end_to_path(g) == 4
    assert [g.type_at(x, 4) for x in range(6)] == [
        CellType.WALL,
        CellType.PATH,
        CellType.PATH,
        CellType.PATH,
        CellType.PATH,
        CellType.WALL,
    ]


def test_end_connector_stops_below_existing_path():
    g = Grid(8, 8)
    g.set_type(4, 5, CellType.PATH)
    assert connect_end_to_path(g) == 3
    assert [g.type_at(x, 6) for x in (3, 4, 5, 6)] == [CellType.WALL, CellType.PATH, CellType.PATH, CellType.PATH]


def test_connectors_join_start_and_end_on_empty_skeleton():
    m = Maze.blank(6, 6)
    m.set_start(0, 1)
    m.set_end(5, 4)
    connect_start_to_path(m.grid)
    connect_end_to_path(m.grid)
    # column 1 and row 4 meet at (1, 4)
    assert m.is_solvable()


# ---------------- Reachability ------------------------------------------------


def test_unconnected_start_and_end_is_not_solvable(blank_maze):
    blank_maze.set_start(0, 1)
    blank_maze.set_end(3, 2)
    assert blank_maze.is_solvable() is False


def test_adjacent_start_and_end_is_solvable(blank_maze):
    blank_maze.set_start(0, 1)
    blank_maze.set_end(1, 1)
    assert blank_maze.is_solvable() is True


def test_corridor_reaches_end():
    g = parse_rows(
        [
            "####",
            "S__#",
            "#__E",
            "####",
        ]
    )
    assert is_reachable(g, Position(0, 1))


def test_trap_blocks_and_reward_does_not():
    trapped = parse_rows(["#####", "S_T_E", "#####"])
    rewarded = parse_rows(["#####", "S_R_E", "#####"])
    assert not is_reachable(trapped, Position(0, 1))
    assert is_reachable(rewarded, Position(0, 1))


def test_end_cell_is_reached_even_when_start_is_end():
    g = parse_rows(["E#", "##"])
    assert is_reachable(g, Position(0, 0))


def test_blocking_start_is_not_solvable():
    g = parse_rows(["#_E", "###"])
    assert not is_reachable(g, Position(0, 0))


def test_reachability_does_not_mutate_and_is_repeatable():
    m = Maze(width=15, height=11, num_rooms=3, seed=4242)
    before = m.to_string()
    first = m.is_solvable()
    second = m.is_solvable()
    assert first == second
    assert m.to_string() == before


def test_large_open_grid_needs_no_recursion():
    size = 150
    g = Grid(size, size)
    for cell in g:
        cell.cell_type = CellType.PATH
    g.set_type(size - 1, size - 1, CellType.END)
    assert is_reachable(g, Position(0, 0))


def test_out_of_bounds_start_raises():
    g = Grid(4, 4)
    with pytest.raises(OutOfBoundsError):
        is_reachable(g, Position(4, 0))


def test_reachable_positions_stops_at_walls_and_traps():
    g = parse_rows(["S_T_", "##__"])
    assert reachable_positions(g, Position(0, 0)) == {Position(0, 0), Position(1, 0)}
    assert reachable_positions(g, Position(0, 1)) == set()


# ---------------- Border check ------------------------------------------------


def test_border_violations_ignore_allowed_positions():
    g = parse_rows(["#####", "S___#", "#___E", "##_##"])
    assert border_violations(g, allowed=(Position(0, 1), Position(4, 2))) == [Position(2, 3)]
    assert len(border_violations(g)) == 3
