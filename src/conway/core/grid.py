"""Grid data structure for Conway's Game of Life."""

import logging
import numbers
from typing import Iterator, Optional, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from .errors import InvalidArgument, OutOfRange
from .neighbors import all_offsets

logger = logging.getLogger(__name__)


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"Grid {name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgument(f"Grid {name} cannot be negative, got {value}")
    return int(value)


def _moore_kernel() -> torch.Tensor:
    """Build the 3x3 neighbour kernel from the offsets of an interior cell."""
    kernel = torch.zeros(3, 3, dtype=torch.float32)
    for dx, dy in all_offsets(1, 1, 3, 3):
        kernel[1 + dy, 1 + dx] = 1.0
    return kernel.unsqueeze(0).unsqueeze(0)


class Grid:
    """Fixed-size 2D grid of live/dead cells with hard (non-wrapping) edges.

    Cells are stored in a boolean numpy array indexed ``[y, x]`` (row, column).
    Public methods take ``(x, y)`` coordinates.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create an all-dead grid.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            InvalidArgument: If a dimension is negative or not an integer
        """
        self.width = _check_dimension("width", width)
        self.height = _check_dimension("height", height)
        self._cells = np.zeros((self.height, self.width), dtype=bool)

        # Neighbour maps are computed on the calling thread only
        torch.set_num_threads(1)

        self._torch_input = torch.zeros(1, 1, self.height, self.width, dtype=torch.float32)
        self._torch_kernel = _moore_kernel()

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the current cell array, shape (height, width)."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def size(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (isinstance(x, numbers.Integral) and isinstance(y, numbers.Integral)):
            raise OutOfRange(f"Coordinates ({x!r}, {y!r}) must be integers")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfRange(f"Coordinates ({x}, {y}) outside {self.width}x{self.height} grid")

    def is_alive(self, x: int, y: int) -> bool:
        """Check whether the cell at (x, y) is alive.

        Raises:
            OutOfRange: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        return bool(self._cells[y, x])

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            OutOfRange: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        self._cells[y, x] = bool(alive)

    def toggle(self, x: int, y: int) -> None:
        """Flip the cell at (x, y) between alive and dead.

        Raises:
            OutOfRange: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        self._cells[y, x] = not self._cells[y, x]

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(False)

    def total_alive(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def seed_random_life(self, count: int, rng: Optional[np.random.Generator] = None) -> None:
        """Bring ``count`` randomly chosen dead cells to life.

        Coordinates are drawn uniformly and redrawn whenever they land on a
        live cell, so exactly ``count`` new cells are activated.

        Args:
            count: Number of dead cells to activate
            rng: Random source; a fresh default generator is used if omitted

        Raises:
            InvalidArgument: If count is negative, not an integer, or larger
                than the number of dead cells
        """
        if isinstance(count, bool) or not isinstance(count, numbers.Integral) or count < 0:
            raise InvalidArgument(f"Live cell count must be a non-negative integer, got {count!r}")
        if count + self.total_alive() > self.width * self.height:
            raise InvalidArgument(
                f"Cannot add {count} live cells: only {self.width * self.height - self.total_alive()} dead cells left"
            )

        if rng is None:
            rng = np.random.default_rng()

        remaining = int(count)
        draws = 0
        while remaining > 0:
            x = int(rng.integers(self.width))
            y = int(rng.integers(self.height))
            draws += 1
            if not self._cells[y, x]:
                self._cells[y, x] = True
                remaining -= 1

        logger.debug("Seeded %d live cells in %d draws", count, draws)

    def live_neighbor_count(self, x: int, y: int) -> int:
        """Count living neighbours of a cell.

        Cells past the grid edge do not exist, so corners have at most 3
        neighbours and edge cells at most 5.

        Raises:
            OutOfRange: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        return sum(
            1 for dx, dy in all_offsets(x, y, self.width, self.height) if self._cells[y + dy, x + dx]
        )

    def neighbor_counts(self) -> np.ndarray:
        """Count neighbours for all cells using PyTorch convolution.

        Zero padding stands in for the missing cells beyond the edges.

        Returns:
            int8 array of shape (height, width) with a count for each cell
        """
        if self._cells.size == 0:
            return np.zeros((self.height, self.width), dtype=np.int8)

        self._torch_input[0, 0] = torch.from_numpy(self._cells.astype(np.float32))
        neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def step(self) -> None:
        """Advance the grid by one generation.

        The next generation is computed entirely from the current one and
        then replaces it as a whole.
        """
        counts = self.neighbor_counts()
        survive = self._cells & ((counts == 2) | (counts == 3))
        born = ~self._cells & (counts == 3)
        self._cells = survive | born

    def every_cell(self) -> Iterator[Tuple[int, int]]:
        """Yield every (x, y) coordinate, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def live_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) coordinates of living cells, row by row."""
        ys, xs = np.nonzero(self._cells)
        for x, y in zip(xs, ys):
            yield (int(x), int(y))

    def copy(self) -> "Grid":
        """Create an independent grid with the same cells."""
        other = Grid(self.width, self.height)
        other._cells[:] = self._cells
        return other

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        ys, xs = np.nonzero(self._cells)
        if len(xs) == 0:
            return None

        return (int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))

    def __eq__(self, other: object) -> bool:
        """Check if two grids have the same size and cells."""
        if not isinstance(other, Grid):
            return False
        return self.size() == other.size() and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if alive else "." for alive in row) for row in self._cells)
