"""Exceptions raised by the maze core.

Everything derives from ``MazeError`` so the HTTP layer can map the whole
family to a 400 response with a single handler.
"""
from __future__ import annotations


class MazeError(Exception):
    """Base class for maze generation and access failures."""


class MazeConfigError(MazeError, ValueError):
    """Invalid dimensions, room counts, coordinates or layout text."""


class OutOfBoundsError(MazeError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"({x}, {y}) is outside the {width}x{height} maze")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class BorderInvariantError(MazeError):
    def __init__(self, violations):
        self.violations = list(violations)
        shown = ", ".join(f"({p.x}, {p.y})" for p in self.violations[:5])
        super().__init__(f"{len(self.violations)} open border cell(s): {shown}")


__all__ = ["MazeError", "MazeConfigError", "OutOfBoundsError", "BorderInvariantError"]
