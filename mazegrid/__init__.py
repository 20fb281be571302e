"""Maze generation and grid interaction engine."""

__all__ = [
    "AbstractGridRenderer",
    "CellCoord",
    "CellState",
    "GridSize",
    "GridStore",
    "MazeGenerator",
    "CarveResult",
    "TextRenderer",
    "ImageRenderer",
    "MazeSession",
    "PointerMapper",
    "PointerState",
    "RegenerationController",
    "RegenerationRequest",
    "map_to_cell",
    "neighbors",
    "wall_between",
    "MazeError",
    "OutOfBounds",
    "DegenerateGridSize",
]

from .errors import MazeError, OutOfBounds, DegenerateGridSize
from .grid import CellCoord, CellState, GridSize, GridStore, neighbors, wall_between
from .base import AbstractGridRenderer
from .maze import MazeGenerator, CarveResult, TextRenderer, ImageRenderer
from .interaction import (
    MazeSession,
    PointerMapper,
    PointerState,
    RegenerationController,
    RegenerationRequest,
    map_to_cell,
)
