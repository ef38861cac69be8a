"""Conway's Game of Life engine with hard-edged grids."""

__version__ = "0.1.0"

from .core.errors import InvalidArgument, OutOfRange
from .core.grid import Grid
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Grid", "GameOfLife", "Pattern", "PatternLibrary", "InvalidArgument", "OutOfRange"]
