"""Conway's Game of Life seeded with a catalog of classic organisms."""

__version__ = "0.1.0"

from .core.grid import Grid, InvalidDimension
from .core.game import LifeSimulation
from .core.patterns import Organism, OrganismCatalog, initialize_pattern

__all__ = ["Grid", "InvalidDimension", "LifeSimulation", "Organism", "OrganismCatalog", "initialize_pattern"]
