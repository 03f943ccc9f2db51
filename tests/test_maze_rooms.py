import random

import pytest

from mazegame.maze import CellType, Grid, Maze, MazeConfigError
from mazegame.maze.rooms import Room, add_rooms, carve_room


def test_room_cells_and_center():
    r = Room(2, 3, 2, 1)
    assert list(r.cells()) == [(2, 3), (3, 3)]
    assert r.center == (3, 3)


def test_rooms_carve_only_path_over_any_prior_type():
    g = Grid(6, 6)
    for cell in g:
        cell.cell_type = CellType.TRAP
    room = Room(2, 2, 2, 2)
    carve_room(g, room)
    for x, y in room.cells():
        assert g.type_at(x, y) is CellType.PATH
    assert g.count(CellType.PATH) == 4


@pytest.mark.parametrize("seed", range(12))
def test_add_rooms_stay_inside_interior(seed):
    g = Grid(7, 5)
    rooms = add_rooms(g, 8, random.Random(seed))
    assert len(rooms) == 8
    for r in rooms:
        assert r.w in (1, 2) and r.h in (1, 2)
        assert 1 <= r.x and r.x + r.w < g.width
        assert 1 <= r.y and r.y + r.h < g.height
        for x, y in r.cells():
            assert g.is_interior(x, y)
            assert g.type_at(x, y) is CellType.PATH


def test_room_anchored_at_last_interior_column_is_one_wide():
    # Only w == 1 keeps x + w < width when x == width - 2
    class PinnedRng(random.Random):
        def __init__(self):
            super().__init__(0)
            self._anchors = iter([4, 4])

        def randint(self, a, b):
            if a == 1 and b == 4:
                return next(self._anchors)
            return super().randint(a, b)

    g = Grid(6, 6)
    (room,) = add_rooms(g, 1, PinnedRng())
    assert (room.x, room.y, room.w, room.h) == (4, 4, 1, 1)


def test_zero_rooms_is_a_noop_and_negative_rejected():
    g = Grid(5, 5)
    assert add_rooms(g, 0, random.Random(1)) == []
    assert g.count(CellType.WALL) == 25
    with pytest.raises(MazeConfigError):
        add_rooms(g, -1)


def test_maze_add_rooms_overwrites_and_records():
    m = Maze(width=12, height=10, num_rooms=0, seed=55)
    before = len(m.rooms)
    new_rooms = m.add_rooms(5)
    assert len(m.rooms) == before + 5
    for r in new_rooms:
        for x, y in r.cells():
            assert m.get_cell(x, y).cell_type is CellType.PATH
