"""Built-in Game of Life organisms and the initial placement plan."""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .grid import Grid

Offsets = Tuple[Tuple[int, int], ...]
CellSetter = Callable[[int, int], None]


@dataclass(frozen=True)
class Organism:
    """A named arrangement of live cells relative to an anchor point."""

    name: str
    offsets: Offsets
    description: str = ""
    category: str = ""

    def place(self, x: int, y: int, set_cell: CellSetter) -> None:
        """Call ``set_cell`` once for every live cell anchored at (x, y).

        The organism knows nothing about grid bounds; clipping is up to the
        setter.

        Args:
            x: Anchor column
            y: Anchor row
            set_cell: Callback receiving absolute (x, y) coordinates
        """
        for dx, dy in self.offsets:
            set_cell(x + dx, y + dy)

    @property
    def population(self) -> int:
        """Number of live cells in the organism."""
        return len(self.offsets)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the organism.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.offsets:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.offsets)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get organism size as (width, height)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)


GLIDER = Organism(
    "glider",
    ((1, 0), (2, 1), (0, 2), (1, 2), (2, 2)),
    "Smallest spaceship, period-4",
    "Spaceships",
)

LWSS = Organism(
    "lwss",
    ((1, 0), (2, 0), (3, 0), (4, 0), (0, 1), (4, 1), (4, 2), (0, 3), (3, 3)),
    "Lightweight spaceship, period-4",
    "Spaceships",
)

MWSS = Organism(
    "mwss",
    ((1, 0), (2, 0), (3, 0), (4, 0), (5, 0), (0, 1), (5, 1), (5, 2), (0, 3), (4, 3)),
    "Middleweight spaceship",
    "Spaceships",
)

PULSAR = Organism(
    "pulsar",
    (
        # Top half
        (2, 0), (3, 0), (4, 0), (8, 0), (9, 0), (10, 0),
        (0, 2), (5, 2), (7, 2), (12, 2),
        (0, 3), (5, 3), (7, 3), (12, 3),
        (0, 4), (5, 4), (7, 4), (12, 4),
        (2, 5), (3, 5), (4, 5), (8, 5), (9, 5), (10, 5),
        # Bottom half (mirrored)
        (2, 7), (3, 7), (4, 7), (8, 7), (9, 7), (10, 7),
        (0, 8), (5, 8), (7, 8), (12, 8),
        (0, 9), (5, 9), (7, 9), (12, 9),
        (0, 10), (5, 10), (7, 10), (12, 10),
        (2, 12), (3, 12), (4, 12), (8, 12), (9, 12), (10, 12),
    ),
    "Period-3 oscillator",
    "Oscillators",
)

BEACON = Organism(
    "beacon",
    ((0, 0), (1, 0), (0, 1), (1, 1), (2, 2), (3, 2), (2, 3), (3, 3)),
    "Period-2 oscillator",
    "Oscillators",
)

PENTADECATHLON = Organism(
    "pentadecathlon",
    ((2, 0), (2, 1), (1, 2), (2, 2), (3, 2), (2, 3), (2, 4), (2, 5), (1, 6), (2, 6), (3, 6), (2, 7), (2, 8)),
    "Period-15 oscillator",
    "Oscillators",
)

BLOCK = Organism("block", ((0, 0), (1, 0), (0, 1), (1, 1)), "2x2 still life block", "Still Life")

LOAF = Organism(
    "loaf",
    ((1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (3, 2), (2, 3)),
    "Loaf still life",
    "Still Life",
)

BOAT = Organism("boat", ((0, 0), (1, 0), (0, 1), (2, 1), (1, 2)), "Boat still life", "Still Life")

TUB = Organism("tub", ((1, 0), (0, 1), (2, 1), (1, 2)), "Tub still life", "Still Life")

ORGANISMS: Dict[str, Organism] = {
    organism.name: organism
    for organism in (GLIDER, LWSS, MWSS, PULSAR, BEACON, PENTADECATHLON, BLOCK, LOAF, BOAT, TUB)
}

# Seeded row by row into a 4x4 layout on the first frame
PLACEMENT_SEQUENCE: Tuple[Organism, ...] = (
    PULSAR, LWSS, MWSS, PULSAR,
    BEACON, PENTADECATHLON, BLOCK, LOAF,
    LWSS, MWSS, BOAT, TUB,
    PULSAR, GLIDER, BEACON, PULSAR,
)

PLACEMENT_COLUMNS = 4
PLACEMENT_MARGIN = 2


class OrganismCatalog:
    """Read-only access to the built-in organisms."""

    CATEGORIES = ("Still Life", "Oscillators", "Spaceships")

    def __init__(self) -> None:
        self._organisms: Dict[str, Organism] = dict(ORGANISMS)

    def get_organism(self, name: str) -> Optional[Organism]:
        """Get an organism by name.

        Args:
            name: Organism name (case-insensitive)

        Returns:
            Organism instance or None if not found
        """
        return self._organisms.get(name.lower())

    def list_organisms(self) -> List[str]:
        """Get list of all organism names."""
        return list(self._organisms.keys())

    def get_organisms_by_category(self) -> Dict[str, List[str]]:
        """Get organism names grouped by category.

        Returns:
            Dictionary mapping categories to organism name lists
        """
        categories: Dict[str, List[str]] = {category: [] for category in self.CATEGORIES}
        for organism in self._organisms.values():
            categories.setdefault(organism.category, []).append(organism.name)

        return {category: names for category, names in categories.items() if names}


def placement_plan(width: int, height: int) -> List[Tuple[Organism, int, int]]:
    """Compute where each organism of the placement sequence is anchored.

    Args:
        width: Grid width
        height: Grid height

    Returns:
        List of (organism, anchor_x, anchor_y) in placement order
    """
    spacing_x = width // PLACEMENT_COLUMNS
    spacing_y = height // PLACEMENT_COLUMNS

    plan = []
    for index, organism in enumerate(PLACEMENT_SEQUENCE):
        x = (index % PLACEMENT_COLUMNS) * spacing_x + PLACEMENT_MARGIN
        y = (index // PLACEMENT_COLUMNS) * spacing_y + PLACEMENT_MARGIN
        plan.append((organism, x, y))
    return plan


def initialize_pattern(grid: Grid) -> bool:
    """Seed the grid with the placement sequence.

    Only acts while the grid is still at generation 0. Organisms that fall
    partly or fully outside the grid are clipped, and overlapping organisms
    simply add their cells to the ones already there.

    Args:
        grid: Grid to seed

    Returns:
        True if the grid was seeded, False if it had already advanced
    """
    if grid.generation != 0:
        return False

    def set_alive(x: int, y: int) -> None:
        grid.set_cell(x, y, True)

    for organism, x, y in placement_plan(grid.width, grid.height):
        organism.place(x, y, set_alive)
    return True
