"""Frame-by-frame driver for a seeded Game of Life grid."""

from typing import Deque, Dict, Tuple
from collections import deque
import numpy as np

from .grid import Grid
from .patterns import initialize_pattern


class LifeSimulation:
    """Runs a grid the way the display loop does.

    Every frame first seeds the grid with the placement sequence (a no-op
    once the grid has advanced) and then advances it by one generation.
    Population history and cycle detection are tracked along the way.
    """

    # Most recent states remembered for cycle detection
    STATE_WINDOW = 1000

    def __init__(self, grid: Grid) -> None:
        """Initialize the simulation with a grid.

        Args:
            grid: The grid to drive
        """
        self.grid = grid
        self._population_history: Deque[int] = deque(maxlen=100)
        self._state_history: Deque[bytes] = deque()
        self._seen_states: Dict[bytes, int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0
        self._seeded_population = 0

        self._update_population_history()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self.grid.generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a cycle has been detected."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    @property
    def seeded_population(self) -> int:
        """Population right after the placement sequence was applied."""
        return self._seeded_population

    def tick(self) -> None:
        """Run one frame: seed if still at generation 0, then advance."""
        if initialize_pattern(self.grid):
            # Seeding replaces the recorded starting population
            self._seeded_population = self.population
            self._population_history.clear()
            self._update_population_history()

        self._check_for_cycles()
        self.grid.advance()
        self._update_population_history()

    def run(self, generations: int) -> int:
        """Run a fixed number of frames.

        Args:
            generations: Number of frames to run

        Returns:
            Generation reached

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generation count must be non-negative, got {generations}")

        for _ in range(generations):
            self.tick()
        return self.generation

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run until the grid repeats a state, dies out, or hits the limit.

        Args:
            max_generations: Maximum frames to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of
            'cycle', 'extinction', 'max_generations'

        Raises:
            ValueError: If max_generations is negative
        """
        if max_generations < 0:
            raise ValueError(f"Generation count must be non-negative, got {max_generations}")

        for _ in range(max_generations):
            self.tick()

            if self._cycle_detected:
                return self.generation, "cycle"

            if self.population == 0:
                return self.generation, "extinction"

        return self.generation, "max_generations"

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def _check_for_cycles(self) -> None:
        """Flag a cycle when the current cells repeat a recent generation."""
        if self._cycle_detected:
            return

        state = self.grid.cells.tobytes()
        first_seen = self._seen_states.get(state)
        if first_seen is not None:
            self._cycle_detected = True
            self._cycle_start_generation = first_seen
            self._cycle_length = self.generation - first_seen
            return

        self._seen_states[state] = self.generation
        self._state_history.append(state)
        # Recorded states are unique until a repeat, so the oldest can always go
        if len(self._state_history) > self.STATE_WINDOW:
            del self._seen_states[self._state_history.popleft()]

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Calculate recent population change rate.

        Args:
            window_size: Number of recent generations to consider

        Returns:
            Average population change per generation
        """
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        changes = np.diff(recent_history)
        return float(np.mean(changes))

    def get_statistics(self) -> Dict:
        """Summarize the current frame for display."""
        bbox = self.grid.get_bounding_box()
        box_size = (bbox[2] - bbox[0] + 1, bbox[3] - bbox[1] + 1) if bbox else (0, 0)
        cells = self.grid.width * self.grid.height

        return {
            "generation": self.generation,
            "grid_size": self.grid.shape,
            "population": self.population,
            "population_density": self.population / cells,
            "population_history": self.population_history,
            "population_change_rate": self.get_population_change_rate(),
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "bounding_box": bbox,
            "bounding_box_size": box_size,
            "bounding_box_area": box_size[0] * box_size[1],
        }
