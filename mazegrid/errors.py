"""Exceptions raised by the maze engine."""

from __future__ import annotations

from typing import Tuple


class MazeError(Exception):
    """Base class for maze engine errors."""


class OutOfBounds(MazeError, IndexError):
    """A coordinate was used outside the extents of a grid."""

    def __init__(self, coord: Tuple[int, int], size: Tuple[int, int]) -> None:
        self.coord = tuple(coord)
        self.size = tuple(size)
        super().__init__(f"Coordinate {self.coord} outside grid of size {self.size}")


class DegenerateGridSize(MazeError, ValueError):
    """The grid is too small to hold an interior seed cell."""

    def __init__(self, size: Tuple[int, int]) -> None:
        self.size = tuple(size)
        super().__init__(
            f"Grid size {self.size} is too small for maze generation; width and height must be at least 4"
        )


__all__ = ["MazeError", "OutOfBounds", "DegenerateGridSize"]
