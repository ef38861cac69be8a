"""Frontend interfaces for the Game of Life engine."""

from .cli import CLIGameOfLife

__all__ = ["CLIGameOfLife"]
