"""Text and image previews of a maze grid."""

from __future__ import annotations

from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from ..base import AbstractGridRenderer
from ..grid.store import CellCoord, CellState, GridStore

WALL_COLOR = (0, 0, 0)
FLOOR_COLOR = (255, 255, 255)
SEED_COLOR = (255, 215, 0)

WALL_CHAR = "#"
FLOOR_CHAR = "."


class TextRenderer(AbstractGridRenderer[str]):
    """Render a grid as lines of characters, highest ``y`` first."""

    def __init__(self, *, wall: str = WALL_CHAR, floor: str = FLOOR_CHAR) -> None:
        self.wall = wall
        self.floor = floor
        self._rows: List[List[str]] = []

    def begin(self, store: GridStore) -> None:
        self._rows = [[self.wall] * store.width for _ in range(store.height)]

    def draw_cell(self, coord: CellCoord, state: CellState) -> None:
        self._rows[coord.y][coord.x] = self.floor if state == CellState.FLOOR else self.wall

    def finish(self) -> str:
        return "\n".join("".join(row) for row in reversed(self._rows))


class ImageRenderer(AbstractGridRenderer[Image.Image]):
    """Render a grid as an RGB image with one filled square per cell."""

    def __init__(
        self,
        *,
        cell_size: int = 16,
        seed: Optional[Tuple[int, int]] = None,
        wall_color: Tuple[int, int, int] = WALL_COLOR,
        floor_color: Tuple[int, int, int] = FLOOR_COLOR,
        seed_color: Tuple[int, int, int] = SEED_COLOR,
    ) -> None:
        if cell_size < 1:
            raise ValueError("cell_size must be positive")
        self.cell_size = cell_size
        self.seed = CellCoord(*seed) if seed is not None else None
        self.wall_color = wall_color
        self.floor_color = floor_color
        self.seed_color = seed_color
        self._height = 0
        self._canvas: Optional[Image.Image] = None
        self._draw: Optional[ImageDraw.ImageDraw] = None

    def begin(self, store: GridStore) -> None:
        self._height = store.height
        dims = (store.width * self.cell_size, store.height * self.cell_size)
        self._canvas = Image.new("RGB", dims, self.wall_color)
        self._draw = ImageDraw.Draw(self._canvas)

    def draw_cell(self, coord: CellCoord, state: CellState) -> None:
        if coord == self.seed and state == CellState.FLOOR:
            fill = self.seed_color
        else:
            fill = self.floor_color if state == CellState.FLOOR else self.wall_color
        left, top, right, bottom = self.cell_bbox(coord)
        self._draw.rectangle((left, top, right - 1, bottom - 1), fill=fill)

    def finish(self) -> Image.Image:
        canvas = self._canvas
        self._canvas = None
        self._draw = None
        return canvas

    def cell_bbox(self, coord: CellCoord) -> Tuple[int, int, int, int]:
        # image rows grow downward while grid y grows upward
        left = coord.x * self.cell_size
        top = (self._height - 1 - coord.y) * self.cell_size
        return left, top, left + self.cell_size, top + self.cell_size


__all__ = ["TextRenderer", "ImageRenderer"]
