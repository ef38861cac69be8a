#!/usr/bin/env python3
"""
Example usage of the conway package.
"""

import numpy as np

from conway import Grid, GameOfLife, PatternLibrary


def main():
    """Demonstrate programmatic usage of the conway package."""
    grid = Grid(20, 20)
    game = GameOfLife(grid)

    library = PatternLibrary()
    glider = library.get_pattern("Glider")
    glider.apply_to_grid(grid, offset_x=8, offset_y=8)

    print("Initial state:")
    print(grid)
    print(f"Population: {game.population}")
    print()

    # The glider runs into the corner and settles into a block
    final_generation, reason = game.run_until_stable(max_generations=100)
    print(f"Stopped at generation {final_generation}: {reason}")
    print(grid)
    print()

    # Random start, reproducible through the seeded generator
    game.reset()
    grid.seed_random_life(80, np.random.default_rng(2024))
    final_generation, reason = game.run_until_stable(max_generations=1000)

    stats = game.get_statistics()
    print(f"Random run stopped at generation {final_generation}: {reason}")
    for key in ("population", "population_density", "cycle_length", "bounding_box"):
        print(f"  {key}: {stats[key]}")


if __name__ == "__main__":
    main()
