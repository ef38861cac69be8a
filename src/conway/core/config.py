"""Configuration for a simulation run."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

DEFAULT_DENSITY = 0.1


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    width: int = 50
    height: int = 50
    live_cells: Optional[int] = None
    max_generations: int = 10000
    pattern: Optional[str] = None
    pattern_x: Optional[int] = None
    pattern_y: Optional[int] = None
    seed: Optional[int] = None

    def initial_live_cells(self) -> int:
        """Number of cells to seed at random (10% of the grid by default)."""
        if self.live_cells is not None:
            return self.live_cells
        return int(self.width * self.height * DEFAULT_DENSITY)

    def make_rng(self) -> np.random.Generator:
        """Random source for seeding; reproducible when ``seed`` is set."""
        return np.random.default_rng(self.seed)
