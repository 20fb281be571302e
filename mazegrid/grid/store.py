"""Cell storage for maze grids."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Hashable, Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

from ..errors import OutOfBounds


class CellState(IntEnum):
    FLOOR = 0
    WALL = 1


class CellCoord(NamedTuple):
    x: int
    y: int


class GridSize(NamedTuple):
    width: int
    height: int

    @classmethod
    def of(cls, width: int, height: int) -> "GridSize":
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        return cls(int(width), int(height))

    def contains(self, coord: Tuple[int, int]) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height


class GridStore:
    """Fixed-size grid of wall/floor states.

    States live in a numpy array indexed ``[y, x]``. The store also keeps an
    opaque render handle per cell for whatever collaborator draws the grid; the
    handles are never interpreted here.
    """

    def __init__(self, size: Tuple[int, int], *, fill: CellState = CellState.WALL) -> None:
        self.size = GridSize.of(*size)
        self._cells = np.full((self.size.height, self.size.width), int(fill), dtype=np.uint8)
        self._handles: Dict[CellCoord, Hashable] = {}

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    def in_bounds(self, coord: Tuple[int, int]) -> bool:
        return self.size.contains(coord)

    def _check(self, coord: Tuple[int, int]) -> CellCoord:
        if not self.in_bounds(coord):
            raise OutOfBounds(coord, self.size)
        return CellCoord(*coord)

    def get(self, coord: Tuple[int, int]) -> CellState:
        x, y = self._check(coord)
        return CellState(int(self._cells[y, x]))

    def set(self, coord: Tuple[int, int], state: CellState) -> None:
        x, y = self._check(coord)
        self._cells[y, x] = int(state)

    def reset_all(self, state: CellState) -> None:
        self._cells.fill(int(state))

    # ------------------------------------------------------------------

    def cells(self) -> Iterator[Tuple[CellCoord, CellState]]:
        """Yield every ``(coord, state)`` pair, row by row."""

        for y in range(self.height):
            for x in range(self.width):
                yield CellCoord(x, y), CellState(int(self._cells[y, x]))

    def floor_cells(self) -> List[CellCoord]:
        ys, xs = np.nonzero(self._cells == int(CellState.FLOOR))
        return [CellCoord(int(x), int(y)) for y, x in zip(ys, xs)]

    def attach_handle(self, coord: Tuple[int, int], handle: Hashable) -> None:
        self._handles[self._check(coord)] = handle

    def handle(self, coord: Tuple[int, int]) -> Optional[Hashable]:
        return self._handles.get(self._check(coord))

    def to_rows(self) -> List[List[int]]:
        return self._cells.astype(int).tolist()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid_size": list(self.size),
            "cells": self.to_rows(),
        }

    def __repr__(self) -> str:
        return f"GridStore(size={tuple(self.size)}, floor={len(self.floor_cells())})"


__all__ = ["CellState", "CellCoord", "GridSize", "GridStore"]
