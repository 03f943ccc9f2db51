import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazegame import create_app  # noqa: E402
from mazegame.maze import Maze  # noqa: E402
from mazegame.services.maze_service import clear_cache  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app()
    app.config.update({"TESTING": True})
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture(autouse=True)
def _fresh_maze_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def blank_maze():
    """4x4 all-WALL maze with no generation steps run."""
    return Maze.blank(4, 4)
