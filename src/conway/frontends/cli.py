"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
import time
from typing import Tuple

from ..core.config import SimulationConfig
from ..core.game import GameOfLife
from ..core.grid import Grid
from ..core.patterns import PatternLibrary

logger = logging.getLogger(__name__)


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self):
        self.pattern_library = PatternLibrary()

    def run_simulation(
        self,
        config: SimulationConfig,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[int, str, dict]:
        """Run a Game of Life simulation until it stabilizes or runs out of generations.

        Args:
            config: Grid size, seeding and generation limit
            verbose: Print progress updates
            show_grid: Show initial and final grid states

        Returns:
            Tuple of (final_generation, finish_reason, statistics)

        Raises:
            ValueError: If the requested pattern does not exist
        """
        grid = Grid(config.width, config.height)
        game = GameOfLife(grid)

        if verbose:
            print(f"Initializing {config.width}x{config.height} grid")

        if config.pattern:
            pattern = self.pattern_library.get_pattern(config.pattern)
            if pattern is None:
                raise ValueError(f"Pattern '{config.pattern}' not found")

            pattern_width, pattern_height = pattern.get_size()
            offset_x = config.pattern_x if config.pattern_x is not None else max(0, (config.width - pattern_width) // 2)
            offset_y = (
                config.pattern_y if config.pattern_y is not None else max(0, (config.height - pattern_height) // 2)
            )
            if verbose:
                print(f"Loading pattern '{config.pattern}' at ({offset_x}, {offset_y})")
            pattern.apply_to_grid(grid, offset_x, offset_y)
        else:
            live_cells = config.initial_live_cells()
            if verbose:
                print(f"Seeding {live_cells} random live cells (seed: {config.seed})")
            grid.seed_random_life(live_cells, config.make_rng())

        initial_population = game.population

        if verbose:
            print(f"Initial population: {initial_population} cells")

        if show_grid:
            print("\nInitial grid:")
            print(self._format_grid(grid))

        if verbose:
            print(f"\nRunning simulation (max {config.max_generations} generations)...")

        start_time = time.time()
        final_generation, reason = game.run_until_stable(config.max_generations)
        duration = time.time() - start_time
        logger.info("Finished after %d generations: %s", final_generation, reason)

        stats = game.get_statistics()
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = final_generation / duration if duration > 0 else 0
        stats["initial_population"] = initial_population

        if show_grid and reason != "extinction":
            print(f"\nFinal grid (generation {final_generation}):")
            print(self._format_grid(grid))

        return final_generation, reason, stats

    def _format_grid(self, grid: Grid, max_size: int = 50) -> str:
        """Format grid for display, truncating if too large."""
        if grid.width > max_size or grid.height > max_size:
            return f"Grid too large to display ({grid.width}x{grid.height})"

        return str(grid)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                width, height = pattern.get_size()
                print(f"  {name:<24} {width}x{height}  {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life simulations from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a 50x50 simulation seeded with 250 random live cells
  conway-cli --width 50 --height 50 --live-cells 250

  # Reproducible random run
  conway-cli -W 30 -H 30 -n 120 --seed 42

  # Run R-pentomino with verbose output
  conway-cli --pattern "R-pentomino" --verbose --show-grid

  # List available patterns
  conway-cli --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=50, help="Grid width (default: 50)")

    parser.add_argument("-H", "--height", type=int, default=50, help="Grid height (default: 50)")

    parser.add_argument(
        "-n",
        "--live-cells",
        type=int,
        default=None,
        help="Number of random live cells to seed (default: 10%% of the grid)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible seeding",
    )

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Load a specific pattern instead of random live cells",
    )

    parser.add_argument(
        "--pattern-x",
        type=int,
        default=None,
        help="X offset for pattern placement (default: centered)",
    )

    parser.add_argument(
        "--pattern-y",
        type=int,
        default=None,
        help="Y offset for pattern placement (default: centered)",
    )

    # Simulation configuration
    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=10000,
        help="Maximum generations to simulate (default: 10000)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final grid states (small grids only)",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List available patterns and exit",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: WARNING, or INFO with --verbose)",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Build a simulation config from parsed arguments."""
    return SimulationConfig(
        width=args.width,
        height=args.height,
        live_cells=args.live_cells,
        max_generations=args.max_generations,
        pattern=args.pattern,
        pattern_x=args.pattern_x,
        pattern_y=args.pattern_y,
        seed=args.seed,
    )


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the simulation finish reason for display.

    Args:
        reason: Finish reason from GameOfLife.run_until_stable
        stats: Statistics dictionary

    Returns:
        Formatted reason string
    """
    if reason == "extinction":
        return "Extinction - all cells died"
    elif reason == "cycle":
        cycle_len = stats.get("cycle_length", 0)
        cycle_start = stats.get("cycle_start_generation", 0)
        return f"Cycle detected - length {cycle_len}, started at generation {cycle_start}"
    elif reason == "max_generations":
        return f"Maximum generations reached ({stats.get('generation', 0)})"
    else:
        return f"Unknown reason: {reason}"


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        reason: Finish reason
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation completed after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, stats)}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Population change rate: {stats['population_change_rate']:.2f}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
            print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")

        if stats["bounding_box"]:
            bbox = stats["bounding_box"]
            bbox_size = stats["bounding_box_size"]
            print(f"  Bounding box: ({bbox[0]}, {bbox[1]}) to ({bbox[2]}, {bbox[3]}) [{bbox_size[0]}x{bbox_size[1]}]")
    else:
        duration = stats.get("duration_seconds", 0)
        speed = stats.get("generations_per_second", 0)
        print(
            f"Population: {stats['initial_population']} -> {stats['population']}, "
            f"Duration: {duration:.3f}s, Speed: {speed:.0f} gen/s"
        )


def validate_args(args: argparse.Namespace, pattern_library: PatternLibrary) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments
        pattern_library: Library used to resolve --pattern

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if args.live_cells is not None:
        if args.live_cells < 0:
            errors.append("Live cell count must be non-negative")
        elif args.width > 0 and args.height > 0 and args.live_cells > args.width * args.height:
            errors.append(f"Live cell count cannot exceed grid area ({args.width * args.height})")

    if args.pattern_x is not None and args.pattern_x < 0:
        errors.append("Pattern X offset must be non-negative")

    if args.pattern_y is not None and args.pattern_y < 0:
        errors.append("Pattern Y offset must be non-negative")

    if args.pattern and pattern_library.get_pattern(args.pattern) is None:
        errors.append(f"Pattern '{args.pattern}' not found (available: {', '.join(pattern_library.list_patterns())})")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def configure_logging(args: argparse.Namespace) -> None:
    """Set up root logging from --log-level / --verbose."""
    level = args.log_level or ("INFO" if args.verbose else "WARNING")
    logging.basicConfig(level=getattr(logging, level), format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv=None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args)

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args, cli.pattern_library):
        return 1

    try:
        final_generation, reason, stats = cli.run_simulation(
            config_from_args(args), verbose=args.verbose, show_grid=args.show_grid
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1

    print_results(final_generation, reason, stats, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
