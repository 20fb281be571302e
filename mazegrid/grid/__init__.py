"""Grid storage and lattice helpers."""

__all__ = [
    "CellState",
    "CellCoord",
    "GridSize",
    "GridStore",
    "neighbors",
    "wall_between",
]

from .store import CellState, CellCoord, GridSize, GridStore
from .neighbors import neighbors, wall_between
