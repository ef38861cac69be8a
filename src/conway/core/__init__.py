"""Core cellular automata logic."""

from .errors import InvalidArgument, OutOfRange
from .grid import Grid
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary
from .config import SimulationConfig

__all__ = ["Grid", "GameOfLife", "Pattern", "PatternLibrary", "SimulationConfig", "InvalidArgument", "OutOfRange"]
