"""Tests for the Grid class."""

import numpy as np
import pytest
from lifeseed.core.grid import Grid, InvalidDimension


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20)
        assert grid.width == 10
        assert grid.height == 20
        assert grid.shape == (10, 20)
        assert grid.generation == 0
        assert grid.population == 0
        assert len(grid.cells) == 200

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3), (3, -7), (0, 0)])
    def test_invalid_dimensions(self, width, height):
        """Test that non-positive dimensions are rejected."""
        with pytest.raises(InvalidDimension):
            Grid(width, height)

    def test_invalid_dimension_is_value_error(self):
        """Test that InvalidDimension can be caught as ValueError."""
        with pytest.raises(ValueError):
            Grid(0, 1)

    def test_non_integer_dimensions(self):
        """Test that fractional dimensions are rejected."""
        with pytest.raises(InvalidDimension):
            Grid(2.5, 3)

    def test_numpy_integer_dimensions(self):
        """Test that numpy integers are accepted and stored as plain ints."""
        grid = Grid(np.int64(10), np.int32(7))

        assert grid.shape == (10, 7)
        assert type(grid.width) is int
        assert type(grid.height) is int
        assert len(grid.cells) == 70

    @pytest.mark.parametrize("width,height", [(True, True), (True, 5), (5, False)])
    def test_bool_dimensions(self, width, height):
        """Test that booleans are not taken as dimensions."""
        with pytest.raises(InvalidDimension):
            Grid(width, height)

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        grid = Grid(5, 5)

        assert grid.get_cell(0, 0) is False
        assert grid.get_cell(2, 3) is False

        grid.set_cell(1, 1, True)
        grid.set_cell(2, 3, True)

        assert grid.get_cell(1, 1) is True
        assert grid.get_cell(2, 3) is True
        assert grid.get_cell(0, 0) is False

        grid.set_cell(1, 1, False)
        assert grid.get_cell(1, 1) is False

    def test_row_major_layout(self):
        """Test that (x, y) maps to index y * width + x."""
        grid = Grid(5, 3)
        grid.set_cell(3, 1, True)
        grid.set_cell(4, 2, True)

        assert grid.cells[1 * 5 + 3] == 1
        assert grid.cells[2 * 5 + 4] == 1
        assert grid.population == 2

    def test_cells_are_read_only(self):
        """Test that the exposed buffer cannot be written to."""
        grid = Grid(3, 3)
        with pytest.raises(ValueError):
            grid.cells[0] = 1

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 3), (-5, -5), (100, 100)])
    def test_out_of_range_access(self, x, y):
        """Test that out-of-range reads are dead and writes are ignored."""
        grid = Grid(3, 3)

        grid.set_cell(x, y, True)
        assert grid.get_cell(x, y) is False
        assert grid.population == 0

    def test_out_of_range_does_not_wrap(self):
        """Test that the grid edges do not wrap around."""
        grid = Grid(3, 3)
        grid.set_cell(2, 2, True)

        assert grid.get_cell(-1, -1) is False
        assert grid.get_cell(2, -1) is False
        assert grid.get_cell(-1, 2) is False

    def test_population(self):
        """Test population counting."""
        grid = Grid(5, 5)
        assert grid.population == 0

        grid.set_cell(0, 0, True)
        assert grid.population == 1

        grid.set_cell(1, 1, True)
        grid.set_cell(2, 2, True)
        assert grid.population == 3

        grid.set_cell(0, 0, False)
        assert grid.population == 2

    def test_get_neighbors(self):
        """Test neighbor counting for individual cells."""
        grid = Grid(5, 5)

        assert grid.get_neighbors(2, 2) == 0

        grid.set_cell(1, 1, True)
        grid.set_cell(1, 2, True)
        grid.set_cell(2, 1, True)

        assert grid.get_neighbors(0, 0) == 1  # Only (1,1)
        assert grid.get_neighbors(2, 2) == 3  # All three
        assert grid.get_neighbors(1, 1) == 2  # The cell itself doesn't count
        assert grid.get_neighbors(3, 3) == 0

    def test_get_neighbors_at_corner(self):
        """Test that cells beyond the edge count as dead."""
        grid = Grid(3, 3)
        grid.set_cell(0, 0, True)
        grid.set_cell(2, 2, True)

        assert grid.get_neighbors(0, 0) == 0
        assert grid.get_neighbors(2, 2) == 0
        assert grid.get_neighbors(1, 1) == 2

    def test_count_all_neighbors(self):
        """Test vectorized neighbor counting."""
        grid = Grid(5, 5)

        # Vertical line
        grid.set_cell(2, 1, True)
        grid.set_cell(2, 2, True)
        grid.set_cell(2, 3, True)

        counts = grid.count_all_neighbors()

        assert counts.shape == (5, 5)
        assert counts[2, 2] == 2  # Middle of line
        assert counts[2, 1] == 3  # Left of middle
        assert counts[2, 3] == 3  # Right of middle
        assert counts[0, 0] == 0

    def test_count_all_neighbors_matches_single_cell_count(self):
        """Test that both neighbor counts agree, including at the edges."""
        grid = Grid(6, 4)
        for x, y in [(0, 0), (1, 0), (5, 3), (4, 3), (5, 2), (2, 2), (0, 3)]:
            grid.set_cell(x, y, True)

        counts = grid.count_all_neighbors()
        for y in range(grid.height):
            for x in range(grid.width):
                assert counts[y, x] == grid.get_neighbors(x, y)

    def test_get_bounding_box(self):
        """Test bounding box calculation."""
        grid = Grid(10, 10)

        assert grid.get_bounding_box() is None

        grid.set_cell(5, 3, True)
        assert grid.get_bounding_box() == (5, 3, 5, 3)

        grid.set_cell(2, 1, True)
        grid.set_cell(7, 8, True)
        assert grid.get_bounding_box() == (2, 1, 7, 8)

    def test_live_cells(self):
        """Test live cell listing in row-major order."""
        grid = Grid(4, 4)
        grid.set_cell(3, 0, True)
        grid.set_cell(0, 2, True)
        grid.set_cell(1, 0, True)

        assert grid.live_cells() == [(1, 0), (3, 0), (0, 2)]

    def test_equality(self):
        """Test grid equality comparison."""
        grid1 = Grid(3, 3)
        grid2 = Grid(3, 3)

        assert grid1 == grid2

        grid1.set_cell(1, 1, True)
        grid2.set_cell(1, 1, True)
        assert grid1 == grid2

        grid2.set_cell(2, 2, True)
        assert grid1 != grid2

        assert grid1 != Grid(4, 4)
        assert grid1 != "not a grid"

    def test_string_representation(self):
        """Test string representation."""
        grid = Grid(3, 3)
        assert str(grid) == "...\n...\n..."

        grid.set_cell(0, 0, True)
        grid.set_cell(1, 1, True)
        grid.set_cell(2, 2, True)
        assert str(grid) == "*..\n.*.\n..*"

    def test_string_representation_non_square(self):
        """Test that rows follow the grid height."""
        grid = Grid(3, 2)
        grid.set_cell(2, 0, True)
        assert str(grid) == "..*\n..."


class TestAdvance:
    """Test cases for the generation transition."""

    def test_generation_counter(self):
        """Test that each advance increments the generation by one."""
        grid = Grid(5, 5)
        for expected in range(1, 4):
            grid.advance()
            assert grid.generation == expected

    def test_empty_grid_stays_empty(self):
        """Test that nothing is born on an empty grid."""
        grid = Grid(8, 6)
        for _ in range(5):
            grid.advance()
        assert grid.population == 0

    def test_underpopulation(self):
        """Test that a live cell with fewer than 2 neighbors dies."""
        grid = Grid(5, 5)
        grid.set_cell(2, 2, True)
        grid.set_cell(2, 3, True)

        grid.advance()
        assert grid.population == 0

    def test_overpopulation(self):
        """Test that a live cell with more than 3 neighbors dies."""
        grid = Grid(5, 5)
        grid.set_cell(2, 2, True)
        for x, y in [(1, 1), (2, 1), (3, 1), (1, 2)]:
            grid.set_cell(x, y, True)

        grid.advance()
        assert grid.get_cell(2, 2) is False

    def test_birth(self):
        """Test that a dead cell with exactly 3 neighbors comes alive."""
        grid = Grid(5, 5)
        grid.set_cell(1, 1, True)
        grid.set_cell(2, 1, True)
        grid.set_cell(3, 1, True)

        grid.advance()
        assert grid.get_cell(2, 0) is True
        assert grid.get_cell(2, 2) is True

    def test_blinker_uses_previous_generation(self):
        """Test that every cell is computed from the previous generation."""
        grid = Grid(5, 5)
        grid.set_cell(2, 1, True)
        grid.set_cell(2, 2, True)
        grid.set_cell(2, 3, True)

        grid.advance()
        assert grid.live_cells() == [(1, 2), (2, 2), (3, 2)]

        grid.advance()
        assert grid.live_cells() == [(2, 1), (2, 2), (2, 3)]

    def test_blinker_at_edge(self):
        """Test that cells beyond the boundary never contribute births."""
        grid = Grid(3, 3)
        grid.set_cell(0, 0, True)
        grid.set_cell(0, 1, True)
        grid.set_cell(0, 2, True)

        grid.advance()
        # The horizontal phase loses its off-grid left cell
        assert grid.live_cells() == [(0, 1), (1, 1)]

        grid.advance()
        assert grid.population == 0

    def test_corner_block_is_stable(self):
        """Test that a block touching the corner is unaffected by the boundary."""
        grid = Grid(4, 4)
        for x, y in [(0, 0), (1, 0), (0, 1), (1, 1)]:
            grid.set_cell(x, y, True)

        before = grid.cells.copy()
        grid.advance()
        assert np.array_equal(grid.cells, before)

    def test_matches_reference_simulation(self, reference_step):
        """Test a random soup against a straightforward simulation."""
        rng = np.random.default_rng(1234)
        width, height = 17, 11
        grid = Grid(width, height)
        live = set()
        for y in range(height):
            for x in range(width):
                if rng.random() < 0.35:
                    grid.set_cell(x, y, True)
                    live.add((x, y))

        for _ in range(12):
            grid.advance()
            live = reference_step(live, width, height)
            assert set(grid.live_cells()) == live
