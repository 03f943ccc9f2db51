"""Maze generator and public maze surface.

Generation phases, run once by the constructor:
    * Carve a loop-free PATH skeleton by randomized frontier growth.
    * Overlay ``num_rooms`` small open rectangles (1-2 cells per side).
    * Tag START (default ``(0, 1)``) and END (``(width-1, height-2)``).
    * Walk column 1 / row height-2 from the corners until the start and end
      touch the carved network.
    * Check the outer ring is still WALL apart from START and END.

Invariants enforced by code & tests:
    * Exactly one START and one END after construction.
    * The skeleton is a tree confined to the interior cells.
    * ``is_solvable`` never mutates the grid and keeps no state between calls.

Public contract consumed elsewhere:
    Maze(config=None, *, width, height, num_rooms, seed, rng)
    Attributes: grid, config, seed, rooms, metrics, start, end, width, height
    Queries: get_cell, is_wall, is_trap, is_solvable, to_string, to_ascii, to_json
    Mutators: set_start, set_end, add_rooms

The same seed always produces the same layout. Solvability is not guaranteed;
regenerating until solvable is the caller's policy (see services.maze_service).
"""

from __future__ import annotations

import random
import time
from dataclasses import replace
from typing import Any, Dict, List, Sequence

from ..logging_utils import get_logger
from .cells import CellType, MazeCell, Position
from .config import MazeConfig
from .connectivity import (
    border_violations,
    connect_end_to_path,
    connect_start_to_path,
    is_reachable,
    reachable_positions,
)
from .errors import BorderInvariantError
from .generator import grow_paths
from .grid import Grid
from .metrics import init_metrics, tile_counts
from .rooms import Room, add_rooms
from .tiles import parse_rows, render, render_rows

log = get_logger("maze")


class Maze:
    def __init__(
        self,
        config: MazeConfig | None = None,
        *,
        width: int | None = None,
        height: int | None = None,
        num_rooms: int | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
    ):
        # Accept either a config object or keyword overrides; the caller's
        # config is copied and never written to
        config = replace(config) if config is not None else MazeConfig()
        if width is not None:
            config.width = width
        if height is not None:
            config.height = height
        if num_rooms is not None:
            config.num_rooms = num_rooms
        if seed is not None:
            config.seed = seed
        self.config = config.validate()
        if rng is not None:
            # an injected RNG has no seed we can report
            self.seed = None
            self._rng = rng
        else:
            self.seed = self.config.seed if self.config.seed is not None else random.randint(0, 2**31 - 1)
            # Local RNG so external random usage does not affect generation
            self._rng = random.Random(self.seed)
        self.grid = Grid(self.config.width, self.config.height)
        self.rooms: List[Room] = []
        self.start = self.config.start
        self.end = self.config.end
        self.metrics: Dict[str, Any] = init_metrics() if self.config.enable_metrics else {}
        self._generate()

    @classmethod
    def blank(cls, width: int, height: int) -> "Maze":
        """All-WALL maze with no generation and no START/END tagged."""
        maze = cls.__new__(cls)
        maze._init_empty(MazeConfig(width=width, height=height, num_rooms=0, enable_metrics=False), Grid(width, height))
        return maze

    @classmethod
    def from_rows(cls, rows: Sequence[str], start: Position | None = None) -> "Maze":
        """Rebuild a maze from rendered rows.

        The start position defaults to the first ``S`` cell; without one it
        falls back to the default start coordinate.
        """
        grid = parse_rows(rows)
        maze = cls.__new__(cls)
        maze._init_empty(MazeConfig(width=grid.width, height=grid.height, num_rooms=0, enable_metrics=False), grid)
        starts = grid.positions_of(CellType.START)
        ends = grid.positions_of(CellType.END)
        if start is not None:
            maze.start = Position(*start)
            grid.get(*maze.start)
        elif starts:
            maze.start = starts[0]
        if ends:
            maze.end = ends[0]
        return maze

    def _init_empty(self, config: MazeConfig, grid: Grid) -> None:
        self.config = config
        self.seed = None
        self._rng = random.Random()
        self.grid = grid
        self.rooms = []
        self.start = config.start
        self.end = config.end
        self.metrics = {}

    # ------------------------------------------------------------------
    # Generation Pipeline
    # ------------------------------------------------------------------
    def _generate(self):
        if self.config.enable_metrics:
            started = time.perf_counter()
            phase_times = {}

            def _phase(label, fn, *a, **k):
                ps = time.perf_counter()
                r = fn(*a, **k)
                phase_times[label] = round((time.perf_counter() - ps) * 1000, 3)
                return r

        else:

            def _phase(label, fn, *a, **k):
                return fn(*a, **k)

        growth = _phase("grow_paths", grow_paths, self.grid, self._rng)
        _phase("add_rooms", self.add_rooms, self.config.num_rooms)
        self.set_start(self.start.x, self.start.y)
        self.set_end(self.end.x, self.end.y)
        start_carved = _phase("connect_start", connect_start_to_path, self.grid)
        end_carved = _phase("connect_end", connect_end_to_path, self.grid)
        violations = _phase("border_check", self.check_border)

        if self.config.enable_metrics:
            self.metrics.update(
                {
                    "cells_carved": growth.cells_carved,
                    "frontier_pops": growth.frontier_pops,
                    "peak_frontier": growth.peak_frontier,
                    "rooms": len(self.rooms),
                    "start_connector_carved": start_carved,
                    "end_connector_carved": end_carved,
                    "border_violations": len(violations),
                    "reachable_tiles": len(reachable_positions(self.grid, self.start)),
                }
            )
            self.metrics.update(tile_counts(self.grid))
            self.metrics["runtime_ms"] = round((time.perf_counter() - started) * 1000, 3)
            self.metrics["phase_ms"] = phase_times
        log.debug(
            event="maze_generated",
            seed=self.seed,
            width=self.width,
            height=self.height,
            rooms=len(self.rooms),
            carved=growth.cells_carved,
        )

    def check_border(self) -> List[Position]:
        """Return open outer-ring cells other than START/END.

        Violations are logged; with ``strict_border`` they raise instead.
        """
        violations = border_violations(self.grid, allowed=(self.start, self.end))
        if violations:
            if self.config.strict_border:
                raise BorderInvariantError(violations)
            log.warn(event="maze_border_violation", seed=self.seed, count=len(violations))
        return violations

    # ------------------------------------------------------------------
    # Public surface
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def get_cell(self, x, y: int | None = None) -> MazeCell:
        """Cell at ``(x, y)``; also accepts a single Position argument."""
        if y is None:
            x, y = x
        return self.grid.get(x, y)

    def is_wall(self, position: Position) -> bool:
        return self.get_cell(position).is_wall()

    def is_trap(self, position: Position) -> bool:
        return self.get_cell(position).is_trap()

    def set_start(self, x: int, y: int) -> None:
        cell = self.grid.get(x, y)
        self._retag(self.start, cell.position, CellType.START)
        self.start = cell.position

    def set_end(self, x: int, y: int) -> None:
        cell = self.grid.get(x, y)
        self._retag(self.end, cell.position, CellType.END)
        self.end = cell.position

    def _retag(self, previous: Position, current: Position, cell_type: CellType) -> None:
        # demote the old marker so only one START/END exists
        if previous != current and self.grid.in_bounds(*previous):
            old = self.grid.get(*previous)
            if old.cell_type is cell_type:
                old.cell_type = CellType.PATH
        self.grid.set_type(current.x, current.y, cell_type)

    def add_rooms(self, num_rooms: int) -> List[Room]:
        rooms = add_rooms(self.grid, num_rooms, self._rng)
        self.rooms.extend(rooms)
        return rooms

    def is_solvable(self) -> bool:
        return is_reachable(self.grid, self.start)

    # Convenience outputs
    def to_string(self) -> str:
        return render(self.grid)

    def __str__(self) -> str:
        return self.to_string()

    def rows(self) -> List[str]:
        return render_rows(self.grid)

    def to_ascii(self) -> str:
        return "\n".join(self.rows())

    def to_json(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "width": self.width,
            "height": self.height,
            "start": list(self.start),
            "end": list(self.end),
            "grid": self.rows(),
            "solvable": self.is_solvable(),
            "metrics": self.metrics,
        }


__all__ = ["Maze"]

if __name__ == "__main__":  # manual quick smoke
    m = Maze(seed=1234, width=20, height=12, num_rooms=3)
    print(m.to_ascii())
    print(m.is_solvable(), m.metrics)
