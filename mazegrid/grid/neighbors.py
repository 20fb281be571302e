"""Lattice neighbor and wall lookups.

Maze cells sit on even lattice positions with walls on the odd positions in
between, so neighbors are always two steps away and the wall separating two
neighbors is their midpoint.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .store import CellCoord, GridSize

# up, down, left, right in a y-up world
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (-1, 0), (1, 0))
STEP = 2


def neighbors(coord: Tuple[int, int], grid_size: Tuple[int, int]) -> List[CellCoord]:
    """Return the cardinal neighbors two cells away that fall inside the grid."""

    size = GridSize(*grid_size)
    x, y = coord
    result: List[CellCoord] = []
    for dx, dy in DIRECTIONS:
        candidate = CellCoord(x + dx * STEP, y + dy * STEP)
        if size.contains(candidate):
            result.append(candidate)
    return result


def wall_between(
    current: Tuple[int, int],
    next_cell: Tuple[int, int],
    grid_size: Tuple[int, int],
) -> Optional[CellCoord]:
    """Return the cell between ``current`` and ``next_cell``, or None if off-grid."""

    cx, cy = current
    nx, ny = next_cell
    wall = CellCoord(cx - (cx - nx) // 2, cy - (cy - ny) // 2)
    if not GridSize(*grid_size).contains(wall):
        return None
    return wall


__all__ = ["DIRECTIONS", "STEP", "neighbors", "wall_between"]
