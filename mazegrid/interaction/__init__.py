"""Pointer mapping and regeneration control for an interactive maze."""

__all__ = [
    "MazeSession",
    "PointerMapper",
    "PointerState",
    "RegenerationController",
    "RegenerationRequest",
    "center_transform",
    "map_to_cell",
    "translation",
    "viewport_to_world",
]

from .pointer import (
    PointerMapper,
    PointerState,
    center_transform,
    map_to_cell,
    translation,
    viewport_to_world,
)
from .controller import MazeSession, RegenerationController, RegenerationRequest
