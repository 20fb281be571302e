"""Pointer-to-grid coordinate mapping and click-driven regeneration."""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional, Sequence, Tuple, Union

import numpy as np

from ..grid.store import CellCoord, GridSize

logger = logging.getLogger(__name__)

CellSize = Union[float, Tuple[float, float]]

# Pointer position before the first move event; far away from any grid.
OFFSCREEN = (-1000.0, -1000.0)


def translation(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def _cell_dims(cell_size: CellSize) -> Tuple[float, float]:
    if isinstance(cell_size, (int, float)):
        dims = (float(cell_size), float(cell_size))
    else:
        dims = (float(cell_size[0]), float(cell_size[1]))
    if dims[0] <= 0 or dims[1] <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    return dims


def center_transform(grid_size: Tuple[int, int], cell_size: CellSize, z: float = 0.0) -> np.ndarray:
    """Transform that puts the middle of the grid at the world origin."""

    cell_w, cell_h = _cell_dims(cell_size)
    width, height = grid_size
    return translation(-width * cell_w / 2.0, -height * cell_h / 2.0, z)


def map_to_cell(
    pointer_world_pos: Sequence[float],
    grid_size: Tuple[int, int],
    cell_size: CellSize,
    grid_transform: Optional[np.ndarray] = None,
) -> Optional[CellCoord]:
    """Return the grid cell under a world-space point, or None when off-grid.

    The point is moved into grid-local space with the inverse of
    ``grid_transform``; cell ``(0, 0)`` covers ``[0, cell_size)`` on both axes.
    """

    matrix = np.identity(4) if grid_transform is None else np.asarray(grid_transform, dtype=float)
    point = np.array([pointer_world_pos[0], pointer_world_pos[1], 0.0, 1.0])
    local = np.linalg.inv(matrix) @ point
    cell_w, cell_h = _cell_dims(cell_size)
    coord = CellCoord(math.floor(local[0] / cell_w), math.floor(local[1] / cell_h))
    if not GridSize(*grid_size).contains(coord):
        return None
    return coord


def viewport_to_world(
    viewport_pos: Sequence[float],
    viewport_size: Tuple[float, float],
    camera_transform: Optional[np.ndarray] = None,
) -> Tuple[float, float]:
    """Project a window position (origin top-left, y down) into 2D world space.

    Assumes an orthographic camera centred on the viewport with one world unit
    per pixel before ``camera_transform`` is applied.
    """

    width, height = viewport_size
    local = np.array([viewport_pos[0] - width / 2.0, height / 2.0 - viewport_pos[1], 0.0, 1.0])
    matrix = np.identity(4) if camera_transform is None else np.asarray(camera_transform, dtype=float)
    world = matrix @ local
    return float(world[0]), float(world[1])


class PointerState:
    """Last known pointer position and the primary-button edge for one step."""

    def __init__(self) -> None:
        self.position: Tuple[float, float] = OFFSCREEN
        self.pressed = False
        self.just_pressed = False

    def move(self, world_pos: Sequence[float]) -> None:
        self.position = (float(world_pos[0]), float(world_pos[1]))

    def press(self) -> None:
        if not self.pressed:
            self.just_pressed = True
        self.pressed = True

    def release(self) -> None:
        self.pressed = False

    def end_step(self) -> None:
        self.just_pressed = False


class PointerMapper:
    """Turn primary-button presses over the grid into regeneration requests."""

    def __init__(self, emit: Callable[[], None]) -> None:
        self._emit = emit

    def handle(self, pointer: PointerState, session) -> Optional[CellCoord]:
        """Map a just-pressed click onto ``session``'s grid, emitting one request on a hit."""

        if not pointer.just_pressed:
            return None
        logger.debug("Pointer pressed at %s", pointer.position)
        cell = map_to_cell(pointer.position, session.grid_size, session.cell_size, session.transform)
        if cell is None:
            return None
        logger.debug("Pointer over cell %s; requesting regeneration", cell)
        self._emit()
        return cell


__all__ = [
    "OFFSCREEN",
    "PointerMapper",
    "PointerState",
    "center_transform",
    "map_to_cell",
    "translation",
    "viewport_to_world",
]
