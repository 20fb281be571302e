"""Maze generation and previews."""

__all__ = [
    "MazeGenerator",
    "CarveResult",
    "TextRenderer",
    "ImageRenderer",
]

from .generator import MazeGenerator, CarveResult
from .render import TextRenderer, ImageRenderer
