"""Recursive-backtracking maze generator over a wall/floor grid."""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Set, Tuple

from ..base import write_snapshot
from ..errors import DegenerateGridSize
from ..grid.neighbors import neighbors, wall_between
from ..grid.store import CellCoord, CellState, GridSize, GridStore
from .render import ImageRenderer, TextRenderer

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 79
DEFAULT_HEIGHT = 45


@dataclass
class CarveResult:
    seed: CellCoord
    visited: int
    carved: int
    backtracks: int

    def to_dict(self) -> dict:
        return {
            "seed": list(self.seed),
            "visited": self.visited,
            "carved": self.carved,
            "backtracks": self.backtracks,
        }


def check_grid_size(size: Tuple[int, int]) -> GridSize:
    """Return ``size`` as a GridSize, rejecting grids with no interior seed."""

    width, height = size
    if width <= 3 or height <= 3:
        raise DegenerateGridSize(size)
    return GridSize(width, height)


class MazeGenerator:
    """Carve a perfect maze into a GridStore using an explicit stack.

    Cells live on even coordinates and walls on the odd ones between them.
    ``rng`` only needs a ``choice`` method, so tests can inject a scripted
    source; otherwise a ``random.Random`` seeded with ``seed`` is used. With
    ``keep_border`` the carve stays inside ``[1, size - 1)`` and the outer ring
    is left as wall.
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        keep_border: bool = True,
    ) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self.keep_border = keep_border

    def choose_seed(self, size: Tuple[int, int]) -> CellCoord:
        width, height = check_grid_size(size)
        xs = range(2, width - 1, 2)
        ys = range(2, height - 1, 2)
        return CellCoord(self._rng.choice(xs), self._rng.choice(ys))

    def generate(self, store: GridStore) -> CarveResult:
        size = check_grid_size(store.size)
        logger.debug("Generating maze on grid %sx%s", size.width, size.height)

        store.reset_all(CellState.WALL)
        first = self.choose_seed(size)
        store.set(first, CellState.FLOOR)

        stack: List[CellCoord] = [first]
        visited: Set[CellCoord] = {first}
        carved = 0
        backtracks = 0

        while stack:
            current = stack.pop()
            unvisited = [
                cell
                for cell in neighbors(current, size)
                if cell not in visited and self._carvable(cell, size)
            ]
            if not unvisited:
                backtracks += 1
                continue

            next_cell = self._rng.choice(unvisited)
            stack.append(current)
            wall = wall_between(current, next_cell, size)
            if wall is not None:
                store.set(wall, CellState.FLOOR)
                store.set(next_cell, CellState.FLOOR)
                stack.append(next_cell)
                carved += 1
            visited.add(next_cell)

        result = CarveResult(seed=first, visited=len(visited), carved=carved, backtracks=backtracks)
        logger.debug("Maze generated: %s", result)
        return result

    def _carvable(self, cell: CellCoord, size: GridSize) -> bool:
        if not self.keep_border:
            return True
        return 1 <= cell.x < size.width - 1 and 1 <= cell.y < size.height - 1


__all__ = ["MazeGenerator", "CarveResult", "check_grid_size"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a recursive-backtracking maze")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--open-border",
        action="store_true",
        help="Allow carving on the outer ring of the grid",
    )
    parser.add_argument("--cell-size", type=int, default=16, help="Pixel size of a cell in the PNG preview")
    parser.add_argument("--png", type=Path, default=None, help="Write a PNG preview to this path")
    parser.add_argument("--json", type=Path, default=None, help="Write the grid snapshot to this JSON file")
    parser.add_argument("--quiet", action="store_true", help="Do not print the text rendering")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    store = GridStore((args.width, args.height))
    generator = MazeGenerator(seed=args.seed, keep_border=not args.open_border)
    result = generator.generate(store)

    if not args.quiet:
        print(TextRenderer().render(store))
    if args.png is not None:
        image = ImageRenderer(cell_size=args.cell_size, seed=result.seed).render(store)
        args.png.parent.mkdir(parents=True, exist_ok=True)
        image.save(args.png)
        print(f"Wrote preview to {args.png}")
    if args.json is not None:
        write_snapshot(store, args.json, extra=result.to_dict())
        print(f"Wrote snapshot to {args.json}")


if __name__ == "__main__":
    main()
