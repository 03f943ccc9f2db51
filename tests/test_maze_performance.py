import time

import pytest

from mazegame.maze import Maze

# Coarse guardrail against large regressions, not a micro-benchmark.
# Thresholds are generous; loosen them if CI hardware is much slower.


@pytest.mark.performance
def test_maze_generation_medium_seeds():
    seeds = [10101, 20202, 30303]
    max_seconds_per = 2.0
    timings = []
    for s in seeds:
        start = time.perf_counter()
        m = Maze(width=75, height=75, num_rooms=10, seed=s)
        elapsed = time.perf_counter() - start
        timings.append(elapsed)
        assert m.grid is not None
        assert elapsed < max_seconds_per, f"Seed {s} took {elapsed:.3f}s (> {max_seconds_per}s)"
    avg = sum(timings) / len(timings)
    assert avg < max_seconds_per, f"Average generation {avg:.3f}s too high"


@pytest.mark.performance
def test_solvability_check_on_large_maze():
    m = Maze(width=150, height=150, num_rooms=0, seed=77)
    start = time.perf_counter()
    assert m.is_solvable()
    assert time.perf_counter() - start < 2.0
