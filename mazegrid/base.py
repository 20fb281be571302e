"""Abstract interfaces for grid render collaborators and snapshot export."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Generic, Hashable, List, Optional, TypeVar, Union

from .grid.store import CellCoord, CellState, GridStore

PathLike = Union[str, Path]
OutputT = TypeVar("OutputT")


class AbstractGridRenderer(ABC, Generic[OutputT]):
    """Base class for collaborators that draw a grid after a generation step.

    Renderers only read the store. Each cell's appearance is derived from its
    ``CellState``; the opaque handle a renderer attaches to a cell is its own
    business.
    """

    def render(self, store: GridStore) -> OutputT:
        """Draw every cell of ``store`` and return the finished output."""

        self.begin(store)
        for coord, state in store.cells():
            if store.handle(coord) is None:
                store.attach_handle(coord, self.make_handle(store, coord))
            self.draw_cell(coord, state)
        return self.finish()

    def make_handle(self, store: GridStore, coord: CellCoord) -> Hashable:
        """Per-cell handle hook; defaults to the row-major cell index."""

        return coord.y * store.width + coord.x

    @abstractmethod
    def begin(self, store: GridStore) -> None:
        """Prepare a fresh output for ``store``."""

    @abstractmethod
    def draw_cell(self, coord: CellCoord, state: CellState) -> None:
        """Draw a single cell."""

    @abstractmethod
    def finish(self) -> OutputT:
        """Return the completed output."""


def write_snapshot(
    store: GridStore,
    path: PathLike,
    *,
    extra: Optional[Dict[str, Any]] = None,
    append: bool = False,
) -> None:
    """Serialize the grid to JSON, appending to an existing list if requested."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    existing: List[Dict[str, Any]] = []
    if append and path.exists():
        existing = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(existing, list):
            raise ValueError(f"Snapshot file must hold a list of records: {path}")
    payload = store.to_dict()
    if extra:
        payload.update(extra)
    path.write_text(json.dumps(existing + [payload], indent=2), encoding="utf-8")


__all__ = [
    "AbstractGridRenderer",
    "PathLike",
    "write_snapshot",
]
