import unittest

import numpy as np

from mazegrid.errors import DegenerateGridSize
from mazegrid.grid import CellState
from mazegrid.interaction import MazeSession, PointerState, RegenerationController
from mazegrid.interaction.pointer import map_to_cell
from mazegrid.maze import MazeGenerator


class CountingGenerator(MazeGenerator):
    def __init__(self) -> None:
        super().__init__(seed=7)
        self.calls = 0

    def generate(self, store):
        self.calls += 1
        return super().generate(store)


class MazeSessionTests(unittest.TestCase):
    def test_defaults_match_interactive_window(self) -> None:
        session = MazeSession()
        self.assertEqual(session.grid_size, (79, 45))
        self.assertEqual(session.store.size, (79, 45))
        self.assertTrue(all(state == CellState.WALL for _, state in session.store.cells()))

    def test_grid_is_centered_on_origin(self) -> None:
        session = MazeSession()
        cell = map_to_cell((0, 0), session.grid_size, session.cell_size, session.transform)
        self.assertEqual(cell, (39, 22))

    def test_explicit_transform_is_kept(self) -> None:
        session = MazeSession(10, 10, transform=np.identity(4))
        self.assertTrue(np.array_equal(session.transform, np.identity(4)))

    def test_degenerate_size_is_rejected(self) -> None:
        with self.assertRaises(DegenerateGridSize):
            MazeSession(2, 40)
        with self.assertRaises(DegenerateGridSize):
            MazeSession(40, 1)


class RegenerationControllerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = MazeSession(10, 10, cell_size=16, transform=np.identity(4))
        self.generator = CountingGenerator()
        self.controller = RegenerationController(self.session, generator=self.generator)

    def test_startup_builds_maze_once(self) -> None:
        self.controller.startup()
        self.assertEqual(self.controller.pending, 1)
        self.assertEqual(self.controller.process_pending(), 1)
        self.assertEqual(self.generator.calls, 1)
        self.assertEqual(self.controller.pending, 0)
        self.assertGreater(len(self.session.store.floor_cells()), 1)
        self.assertIsNotNone(self.controller.last_result)

    def test_each_request_runs_one_generation(self) -> None:
        for _ in range(3):
            self.controller.request()
        self.assertEqual(self.controller.process_pending(), 3)
        self.assertEqual(self.generator.calls, 3)
        self.assertEqual(self.controller.runs, 3)
        self.assertEqual(self.controller.process_pending(), 0)
        self.assertEqual(self.generator.calls, 3)

    def test_click_regenerates_on_next_step(self) -> None:
        pointer = PointerState()
        self.controller.startup()
        self.assertEqual(self.controller.step(pointer), 1)

        pointer.move((40, 40))
        pointer.press()
        self.assertEqual(self.controller.step(pointer), 0)
        self.assertEqual(self.controller.pending, 1)
        self.assertFalse(pointer.just_pressed)

        self.assertEqual(self.controller.step(pointer), 1)
        self.assertEqual(self.generator.calls, 2)

    def test_held_button_only_regenerates_once(self) -> None:
        pointer = PointerState()
        pointer.move((40, 40))
        pointer.press()
        for _ in range(4):
            pointer.press()
            self.controller.step(pointer)
        self.assertEqual(self.generator.calls, 1)

    def test_click_outside_grid_does_not_regenerate(self) -> None:
        pointer = PointerState()
        pointer.move((-5, -5))
        pointer.press()
        self.controller.step(pointer)
        self.controller.step(pointer)
        self.assertEqual(self.generator.calls, 0)

    def test_controller_builds_its_own_generator(self) -> None:
        controller = RegenerationController(MazeSession(9, 9), seed=1)
        controller.startup()
        controller.process_pending()
        other = RegenerationController(MazeSession(9, 9), seed=1)
        other.startup()
        other.process_pending()
        self.assertEqual(controller.session.store.to_rows(), other.session.store.to_rows())


if __name__ == "__main__":
    unittest.main()
