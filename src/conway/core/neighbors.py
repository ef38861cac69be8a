"""Relative offsets of the in-bounds Moore neighbours of a cell.

The grid has hard edges, so a corner cell has 3 neighbours, an edge cell 5
and an interior cell 8. All functions here are pure.
"""

from typing import List, Tuple

Offset = Tuple[int, int]


def limits(value: int, limit: int) -> List[int]:
    """Get the non-zero steps that stay inside ``[0, limit)``.

    Args:
        value: Coordinate along one axis
        limit: Size of that axis

    Returns:
        Subset of ``[-1, 1]``, empty when ``limit == 1``
    """
    steps = []
    if value > 0:
        steps.append(-1)
    if value < limit - 1:
        steps.append(1)
    return steps


def horizontal_offsets(x: int, limit_width: int) -> List[Offset]:
    """Offsets to the left and right neighbours, as ``(dx, 0)`` pairs."""
    return [(dx, 0) for dx in limits(x, limit_width)]


def vertical_offsets(y: int, limit_height: int) -> List[Offset]:
    """Offsets to the neighbours above and below, as ``(0, dy)`` pairs."""
    return [(0, dy) for dy in limits(y, limit_height)]


def diagonal_offsets(x: int, y: int, limit_width: int, limit_height: int) -> List[Offset]:
    """Offsets to the corner neighbours.

    Cartesian product of the horizontal and vertical steps available at
    ``(x, y)``.
    """
    return [(dx, dy) for dx in limits(x, limit_width) for dy in limits(y, limit_height)]


def all_offsets(x: int, y: int, limit_width: int, limit_height: int) -> List[Offset]:
    """Get every in-bounds neighbour offset of ``(x, y)``.

    Args:
        x: Column coordinate
        y: Row coordinate
        limit_width: Grid width
        limit_height: Grid height

    Returns:
        Diagonal, then vertical, then horizontal offsets. Never contains (0, 0).
    """
    return (
        diagonal_offsets(x, y, limit_width, limit_height)
        + vertical_offsets(y, limit_height)
        + horizontal_offsets(x, limit_width)
    )
