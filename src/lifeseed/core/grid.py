"""Grid data structure for the Game of Life simulation."""

import numbers
from typing import List, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F


class InvalidDimension(ValueError):
    """Raised when a grid is constructed with a non-positive width or height."""


class Grid:
    """A fixed-size 2D grid of cells with a dead (non-wrapping) boundary.

    Cells are stored in a flat row-major buffer, so the cell at ``(x, y)``
    lives at ``y * width + x``. Two buffers are allocated up front and
    alternate between "current" and "next" on every generation.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a new grid with every cell dead.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            InvalidDimension: If width or height is not a positive integer
        """
        for value in (width, height):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidDimension(f"Grid dimensions must be integers, got {width!r}x{height!r}")
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise InvalidDimension(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self._generation = 0
        self._cells = np.zeros(width * height, dtype=np.int8)
        self._next_cells = np.zeros(width * height, dtype=np.int8)

        # Keep torch single-threaded; one small convolution per generation
        torch.set_num_threads(1)

        # Reused for every neighbor count
        self._torch_input = torch.zeros(1, 1, height, width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the current flat, row-major cell buffer."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def generation(self) -> int:
        """Number of transitions applied since construction."""
        return self._generation

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            True if the cell is alive. Coordinates outside the grid are
            always dead.
        """
        if not self._in_bounds(x, y):
            return False
        return bool(self._cells[y * self.width + x])

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Writes outside the grid are ignored, which is what lets organisms
        placed near an edge be clipped.

        Args:
            x: Column coordinate
            y: Row coordinate
            alive: Whether the cell should be alive
        """
        if not self._in_bounds(x, y):
            return
        self._cells[y * self.width + x] = 1 if alive else 0

    def get_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a single cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                if self.get_cell(x + dx, y + dy):
                    count += 1
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells with a single convolution.

        Zero padding makes everything outside the grid count as dead.

        Returns:
            Array of shape (height, width) with the neighbor count of each cell
        """
        self._torch_input[0, 0] = torch.from_numpy(self._cells.reshape(self.height, self.width).astype(np.float32))
        neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def advance(self) -> None:
        """Advance the grid by one generation using the B3/S23 rule.

        The next state is written into the spare buffer while the current one
        is only read, then the two are swapped.
        """
        counts = self.count_all_neighbors().reshape(-1)
        current = self._cells

        # Survival: live cell with 2 or 3 neighbors
        survive = (current > 0) & ((counts == 2) | (counts == 3))

        # Birth: dead cell with exactly 3 neighbors
        birth = (current == 0) & (counts == 3)

        self._next_cells[:] = survive | birth
        self._cells, self._next_cells = self._next_cells, self._cells
        self._generation += 1

    def live_cells(self) -> List[Tuple[int, int]]:
        """Get coordinates of living cells in row-major order.

        Returns:
            List of (x, y) tuples
        """
        indices = np.flatnonzero(self._cells)
        return [(int(i % self.width), int(i // self.width)) for i in indices]

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        ys, xs = np.nonzero(self._cells.reshape(self.height, self.width))
        if len(xs) == 0:
            return None

        return (int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))

    def __eq__(self, other: object) -> bool:
        """Check if two grids have the same shape and cells."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        rows = self._cells.reshape(self.height, self.width)
        return "\n".join("".join("*" if cell else "." for cell in row) for row in rows)
