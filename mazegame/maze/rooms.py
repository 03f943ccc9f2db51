import random
from dataclasses import dataclass
from typing import List, Tuple

from .cells import CellType
from .errors import MazeConfigError
from .grid import Grid

ROOM_DIMENSIONS = (1, 2)


@dataclass
class Room:
    x: int
    y: int
    w: int
    h: int

    def cells(self):
        for ix in range(self.x, self.x + self.w):
            for iy in range(self.y, self.y + self.h):
                yield ix, iy

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.w // 2, self.y + self.h // 2)


def _random_dimension(rng, anchor: int, limit: int) -> int:
    # re-draw until the rectangle stays short of the far border
    while True:
        size = rng.randint(ROOM_DIMENSIONS[0], ROOM_DIMENSIONS[-1])
        if anchor + size < limit:
            return size


def carve_room(grid: Grid, room: Room) -> None:
    for ix, iy in room.cells():
        grid.set_type(ix, iy, CellType.PATH)


def add_rooms(grid: Grid, num_rooms: int, rng=None) -> List[Room]:
    """Overlay ``num_rooms`` small open rectangles onto the grid.

    Rooms may overlap each other and overwrite any cell type; they only ever
    write PATH, so they can join regions but never split them.
    """
    if num_rooms < 0:
        raise MazeConfigError(f"num_rooms must not be negative, got {num_rooms}")
    if rng is None:
        rng = random
    rooms: List[Room] = []
    for _ in range(num_rooms):
        x = rng.randint(1, grid.width - 2)
        y = rng.randint(1, grid.height - 2)
        w = _random_dimension(rng, x, grid.width)
        h = _random_dimension(rng, y, grid.height)
        room = Room(x, y, w, h)
        carve_room(grid, room)
        rooms.append(room)
    return rooms


__all__ = ["Room", "add_rooms", "carve_room"]
