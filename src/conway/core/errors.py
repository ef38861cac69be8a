"""Exceptions raised by the simulation engine."""


class InvalidArgument(ValueError):
    """Raised for bad grid dimensions or a seed count that cannot fit."""


class OutOfRange(IndexError):
    """Raised when a coordinate falls outside the grid."""
