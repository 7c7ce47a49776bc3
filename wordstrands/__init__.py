"""Strands-style word puzzle authoring tools.

This package exposes the public API surface via:

- ``wordstrands.engine.layout.LayoutEngine``: lays a spangram and theme words
  out onto the grid so that they tile it exactly.
- ``wordstrands.engine.validator.PuzzleValidator``: checks a puzzle before it
  is stored.
- ``wordstrands.engine.play.SelectionMatcher``: judges selections during play
  with the same path rules.
"""

from .core.constants import GridShape
from .core.models import Coordinate, LayoutResult, PuzzleDraft, ThemeWord
from .engine.layout import LayoutConfig, LayoutEngine, auto_layout
from .engine.play import SelectionMatcher
from .engine.validator import PuzzleValidator

__all__ = [
    "Coordinate",
    "GridShape",
    "LayoutConfig",
    "LayoutEngine",
    "LayoutResult",
    "PuzzleDraft",
    "PuzzleValidator",
    "SelectionMatcher",
    "ThemeWord",
    "auto_layout",
]

__version__ = "0.1.0"
