"""Active maze session and regeneration request handling."""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Optional

import numpy as np

from ..grid.store import GridSize, GridStore
from ..maze.generator import DEFAULT_HEIGHT, DEFAULT_WIDTH, CarveResult, MazeGenerator, check_grid_size
from .pointer import CellSize, PointerMapper, PointerState, center_transform

logger = logging.getLogger(__name__)


class RegenerationRequest:
    """Signal that the active grid should be reset and carved again."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "RegenerationRequest()"


class MazeSession:
    """The active maze: one grid, its cell size and its world transform."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        *,
        cell_size: CellSize = 16.0,
        transform: Optional[np.ndarray] = None,
        z: float = 0.0,
    ) -> None:
        self.grid_size: GridSize = check_grid_size((width, height))
        self.cell_size = cell_size
        self.store = GridStore(self.grid_size)
        if transform is None:
            transform = center_transform(self.grid_size, cell_size, z)
        self.transform = np.asarray(transform, dtype=float)


class RegenerationController:
    """Own a MazeSession and run one full carve per regeneration request.

    Requests are queued and drained synchronously by ``process_pending``; a
    carve always finishes before the next request starts, so renderers reading
    the store between steps never see a partial maze.
    """

    def __init__(
        self,
        session: MazeSession,
        *,
        generator: Optional[MazeGenerator] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.session = session
        self.generator = generator if generator is not None else MazeGenerator(seed=seed)
        self.pointer_mapper = PointerMapper(self.request)
        self._pending: Deque[RegenerationRequest] = deque()
        self.runs = 0
        self.last_result: Optional[CarveResult] = None

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request(self) -> None:
        self._pending.append(RegenerationRequest())

    def startup(self) -> None:
        """Queue the initial build of the maze."""

        self.request()

    def process_pending(self) -> int:
        """Run one generation per queued request and return how many ran."""

        results: List[CarveResult] = []
        while self._pending:
            self._pending.popleft()
            results.append(self.generator.generate(self.session.store))
        if results:
            self.runs += len(results)
            self.last_result = results[-1]
            logger.debug("Processed %d regeneration request(s)", len(results))
        return len(results)

    def step(self, pointer: Optional[PointerState] = None) -> int:
        """Advance one event step.

        Pending requests are processed first; a click in this step queues a
        request for the next one. Input edges are cleared at the end.
        """

        ran = self.process_pending()
        if pointer is not None:
            self.pointer_mapper.handle(pointer, self.session)
            pointer.end_step()
        return ran


__all__ = ["MazeSession", "RegenerationController", "RegenerationRequest"]
