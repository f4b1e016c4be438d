#!/usr/bin/env python3
"""
Example usage of the lifeseed package.
"""

from lifeseed import Grid, LifeSimulation


def main():
    """Demonstrate programmatic usage of the lifeseed package."""
    grid = Grid(40, 24)
    simulation = LifeSimulation(grid)

    # The first tick seeds the grid with the organism layout
    for _ in range(5):
        simulation.tick()
        print(f"Generation {simulation.generation}:")
        print(grid)
        print(f"Population: {simulation.population}")
        print()

    stats = simulation.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
