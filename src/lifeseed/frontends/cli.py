"""Command-line interface for the seeded Game of Life."""

import argparse
import sys
import time
from typing import Dict, Optional, Tuple

from ..core.grid import Grid
from ..core.game import LifeSimulation
from ..core.patterns import OrganismCatalog, placement_plan


class CLILifeSeed:
    """Command-line interface for running seeded simulations."""

    def __init__(self) -> None:
        """Initialize CLI interface."""
        self.catalog = OrganismCatalog()

    def run_simulation(
        self,
        width: int,
        height: int,
        generations: int,
        until_stable: bool = False,
        max_generations: int = 10000,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[int, str, Dict]:
        """Seed a grid and run it.

        Args:
            width: Grid width
            height: Grid height
            generations: Frames to run when not running until stable
            until_stable: Run until a cycle, extinction or max_generations
            max_generations: Frame limit for until_stable
            verbose: Print progress updates
            show_grid: Show the final grid state

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        grid = Grid(width, height)
        simulation = LifeSimulation(grid)

        if verbose:
            print(f"Initializing {width}x{height} grid")

        start_time = time.time()

        # The first frame seeds the grid before advancing it
        if until_stable:
            if verbose:
                print(f"Running simulation (max {max_generations} generations)...")
            final_generation, reason = simulation.run_until_stable(max_generations)
        else:
            if verbose:
                print(f"Running simulation ({generations} generations)...")
            final_generation = simulation.run(generations)
            reason = "generations"

        duration = time.time() - start_time
        initial_population = simulation.seeded_population

        if verbose:
            print(f"Seeded population: {initial_population} cells")

        stats = simulation.get_statistics()
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = final_generation / duration if duration > 0 else 0
        stats["initial_population"] = initial_population

        if show_grid:
            print(f"\nGrid (generation {final_generation}):")
            print(self._format_grid(grid))

        return final_generation, reason, stats

    def list_patterns(self) -> None:
        """Print the built-in organisms grouped by category."""
        print("Available organisms:")

        for category, names in self.catalog.get_organisms_by_category().items():
            print(f"\n{category}:")
            for name in names:
                organism = self.catalog.get_organism(name)
                size = organism.get_size()
                print(f"  {name}: {size[0]}x{size[1]}, {organism.population} cells")
                if organism.description:
                    print(f"    {organism.description}")

    def show_plan(self, width: int, height: int) -> None:
        """Print where each organism is anchored on a grid of the given size."""
        print(f"Placement plan for {width}x{height} grid:")
        for index, (organism, x, y) in enumerate(placement_plan(width, height)):
            size = organism.get_size()
            clipped = x + size[0] > width or y + size[1] > height
            note = " (clipped)" if clipped else ""
            print(f"  [{index:2d}] {organism.name} at ({x}, {y}){note}")

    def _format_grid(self, grid: Grid) -> str:
        """Format grid for display; large grids are summarized."""
        if grid.width > 120 or grid.height > 60:
            return f"[Grid too large to display: {grid.width}x{grid.height}, population {grid.population}]"
        return str(grid)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life seeded with classic organisms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run 10 generations on the default 100x75 grid
  lifeseed-cli

  # Run a 20x20 grid for 50 generations and print it
  lifeseed-cli -W 20 -H 20 -n 50 --show-grid

  # Run until the grid cycles or dies out
  lifeseed-cli --until-stable --max-generations 5000 --verbose

  # Show where organisms will be placed
  lifeseed-cli -W 40 -H 40 --show-plan
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=100, help="Grid width (default: 100)")

    parser.add_argument("-H", "--height", type=int, default=75, help="Grid height (default: 75)")

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=10,
        help="Number of generations to run (default: 10)",
    )

    parser.add_argument(
        "--until-stable",
        action="store_true",
        help="Run until a cycle or extinction instead of a fixed count",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=10000,
        help="Maximum generations with --until-stable (default: 10000)",
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
        help="Display the final grid state (small grids only)",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all built-in organisms and exit",
    )

    parser.add_argument(
        "--show-plan",
        action="store_true",
        help="Show the placement plan for the grid size and exit",
    )

    return parser


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the simulation finish reason for display.

    Args:
        reason: Finish reason code
        stats: Simulation statistics

    Returns:
        Human-readable finish reason
    """
    if reason == "cycle":
        cycle_length = stats.get("cycle_length", 0)
        start_gen = stats.get("cycle_start_generation", 0)
        if cycle_length == 1:
            return f"Reached stable state (still life) at generation {start_gen}"
        return f"Entered cycle of length {cycle_length} starting at generation {start_gen}"
    elif reason == "extinction":
        return "All cells died (extinction)"
    elif reason == "max_generations":
        return "Reached maximum generation limit"
    elif reason == "generations":
        return "Completed requested generations"
    return f"Unknown reason: {reason}"


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool = False) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        reason: Finish reason
        stats: Simulation statistics
        verbose: Show detailed statistics
    """
    print(f"\nSimulation completed after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, stats)}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Seeded population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Population change rate: {stats['population_change_rate']:.2f}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
            print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")

        if stats.get("bounding_box"):
            bbox = stats["bounding_box"]
            size = stats["bounding_box_size"]
            print(f"  Bounding box: ({bbox[0]}, {bbox[1]}) to ({bbox[2]}, {bbox[3]}), size {size[0]}x{size[1]}")
    else:
        print(
            "Population: {} -> {}, Duration: {:.3f}s".format(
                stats["initial_population"], stats["population"], stats.get("duration_seconds", 0.0)
            )
        )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.generations <= 0:
        errors.append("Generations must be positive")

    if args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLILifeSeed()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.show_plan:
        cli.show_plan(args.width, args.height)
        return 0

    try:
        final_generation, reason, stats = cli.run_simulation(
            width=args.width,
            height=args.height,
            generations=args.generations,
            until_stable=args.until_stable,
            max_generations=args.max_generations,
            verbose=args.verbose,
            show_grid=args.show_grid,
        )
        print_results(final_generation, reason, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
