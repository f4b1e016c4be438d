"""Core simulation logic."""

from .grid import Grid, InvalidDimension
from .game import LifeSimulation
from .patterns import Organism, OrganismCatalog, initialize_pattern, placement_plan

__all__ = [
    "Grid",
    "InvalidDimension",
    "LifeSimulation",
    "Organism",
    "OrganismCatalog",
    "initialize_pattern",
    "placement_plan",
]
