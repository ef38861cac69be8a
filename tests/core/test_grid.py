"""Tests for the Grid class."""

import numpy as np
import pytest
from conway.core.errors import InvalidArgument, OutOfRange
from conway.core.grid import Grid


def live_set(grid):
    return set(grid.live_cells())


class TestGridConstruction:
    """Test cases for creating grids."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20)
        assert grid.width == 10
        assert grid.height == 20
        assert grid.size() == (10, 20)
        assert grid.cells.shape == (20, 10)
        assert grid.total_alive() == 0

    @pytest.mark.parametrize("width,height", [(0, 0), (0, 5), (5, 0), (1, 1), (3, 7)])
    def test_fresh_grid_is_empty(self, width, height):
        """Any non-negative size starts with no live cells."""
        grid = Grid(width, height)
        assert grid.size() == (width, height)
        assert grid.total_alive() == 0

    @pytest.mark.parametrize("width,height", [(-1, 5), (5, -1), (-3, -3)])
    def test_negative_dimensions(self, width, height):
        """Negative sizes are rejected."""
        with pytest.raises(InvalidArgument):
            Grid(width, height)

    @pytest.mark.parametrize("width,height", [(2.5, 5), (5, "5"), (None, 3), (True, 4)])
    def test_non_integer_dimensions(self, width, height):
        """Non-integer sizes are rejected."""
        with pytest.raises(InvalidArgument):
            Grid(width, height)

    def test_numpy_integer_dimensions(self):
        """numpy integers are accepted as sizes."""
        grid = Grid(np.int64(4), np.int32(3))
        assert grid.size() == (4, 3)

    def test_invalid_argument_is_value_error(self):
        """InvalidArgument can be caught as ValueError."""
        with pytest.raises(ValueError):
            Grid(-1, 1)


class TestCellAccess:
    """Test cases for reading and changing cells."""

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        grid = Grid(5, 4)

        assert not grid.is_alive(0, 0)

        grid.set_cell(4, 3, True)
        grid.set_cell(1, 2, True)
        assert grid.is_alive(4, 3)
        assert grid.is_alive(1, 2)
        assert not grid.is_alive(2, 1)

        grid.set_cell(4, 3, False)
        assert not grid.is_alive(4, 3)

    def test_row_major_storage(self):
        """Cells are stored as [row][col], i.e. [y][x]."""
        grid = Grid(5, 3)
        grid.set_cell(4, 1, True)
        assert grid.cells[1][4]
        assert grid.cells[1, 4]

    def test_toggle(self):
        """Toggle flips a cell and returns nothing."""
        grid = Grid(5, 5)

        assert grid.toggle(2, 3) is None
        assert grid.is_alive(2, 3) is True

        grid.toggle(2, 3)
        assert grid.is_alive(2, 3) is False

    def test_toggle_twice_restores(self):
        """Toggling twice is an involution for every cell."""
        grid = Grid(3, 3)
        grid.seed_random_life(4, np.random.default_rng(0))
        before = grid.copy()

        for x, y in grid.every_cell():
            grid.toggle(x, y)
            grid.toggle(x, y)

        assert grid == before

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 2), (10, 10)])
    def test_out_of_range(self, x, y):
        """Coordinates outside the grid raise OutOfRange."""
        grid = Grid(3, 2)

        with pytest.raises(OutOfRange):
            grid.is_alive(x, y)

        with pytest.raises(OutOfRange):
            grid.toggle(x, y)

        with pytest.raises(OutOfRange):
            grid.set_cell(x, y, True)

        with pytest.raises(OutOfRange):
            grid.live_neighbor_count(x, y)

    @pytest.mark.parametrize("x,y", [(1.5, 1), (1, 0.5), (1.0, 1), ("1", 1), (None, 0)])
    def test_non_integer_coordinates(self, x, y):
        """Non-integer coordinates raise OutOfRange even inside the grid."""
        grid = Grid(3, 3)

        with pytest.raises(OutOfRange):
            grid.is_alive(x, y)

        with pytest.raises(OutOfRange):
            grid.toggle(x, y)

        with pytest.raises(OutOfRange):
            grid.set_cell(x, y, True)

        with pytest.raises(OutOfRange):
            grid.live_neighbor_count(x, y)

        assert grid.total_alive() == 0

    def test_numpy_integer_coordinates(self):
        """numpy integers are accepted as coordinates."""
        grid = Grid(3, 3)
        grid.toggle(np.int64(2), np.int32(1))
        assert grid.is_alive(2, 1)

    def test_out_of_range_is_index_error(self):
        """OutOfRange can be caught as IndexError."""
        with pytest.raises(IndexError):
            Grid(2, 2).is_alive(2, 0)

    def test_cells_view_is_read_only(self):
        """The cells property cannot be used to change the grid."""
        grid = Grid(3, 3)
        with pytest.raises(ValueError):
            grid.cells[0, 0] = True
        assert grid.total_alive() == 0

    def test_clear(self):
        """Test grid clearing."""
        grid = Grid(5, 5)
        grid.set_cell(1, 1, True)
        grid.set_cell(2, 2, True)
        assert grid.total_alive() == 2

        grid.clear()
        assert grid.total_alive() == 0

    def test_total_alive(self):
        """Test population counting."""
        grid = Grid(5, 5)
        grid.set_cell(0, 0, True)
        assert grid.total_alive() == 1

        grid.toggle(1, 1)
        grid.toggle(2, 2)
        assert grid.total_alive() == 3

        grid.toggle(0, 0)
        assert grid.total_alive() == 2


class TestIteration:
    """Test cases for coordinate traversal."""

    def test_every_cell_row_major(self):
        """Coordinates come out with y outer and x inner."""
        grid = Grid(3, 2)
        assert list(grid.every_cell()) == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]

    def test_every_cell_restartable(self):
        """Each call starts a fresh traversal."""
        grid = Grid(2, 2)
        first = grid.every_cell()
        next(first)
        assert len(list(grid.every_cell())) == 4
        assert list(grid.every_cell()) == list(grid.every_cell())

    def test_every_cell_empty_grid(self):
        """A zero-area grid has no coordinates."""
        assert list(Grid(0, 4).every_cell()) == []

    def test_live_cells(self):
        """Live cells are reported as (x, y) in row-major order."""
        grid = Grid(4, 4)
        grid.set_cell(3, 0, True)
        grid.set_cell(0, 2, True)
        grid.set_cell(1, 0, True)
        assert list(grid.live_cells()) == [(1, 0), (3, 0), (0, 2)]


class TestSeeding:
    """Test cases for random seeding."""

    def test_adds_exact_count(self):
        """Seeding activates exactly the requested number of cells."""
        grid = Grid(10, 8)
        grid.seed_random_life(25, np.random.default_rng(1))
        assert grid.total_alive() == 25

        grid.seed_random_life(30, np.random.default_rng(2))
        assert grid.total_alive() == 55

    def test_reproducible_with_seeded_rng(self):
        """The same seed picks the same cells."""
        first = Grid(12, 12)
        second = Grid(12, 12)
        first.seed_random_life(40, np.random.default_rng(42))
        second.seed_random_life(40, np.random.default_rng(42))
        assert first == second

    def test_default_rng(self):
        """Seeding works without an explicit generator."""
        grid = Grid(6, 6)
        grid.seed_random_life(10)
        assert grid.total_alive() == 10

    def test_fill_whole_grid(self):
        """Seeding every cell of an empty grid fills it."""
        grid = Grid(4, 3)
        grid.seed_random_life(12, np.random.default_rng(7))
        assert grid.total_alive() == 12
        assert all(grid.is_alive(x, y) for x, y in grid.every_cell())

    def test_too_many(self):
        """Asking for more cells than the grid holds fails."""
        grid = Grid(4, 3)
        with pytest.raises(InvalidArgument):
            grid.seed_random_life(13)
        assert grid.total_alive() == 0

    def test_too_many_counts_existing_life(self):
        """Cells that are already alive reduce the room left."""
        grid = Grid(3, 3)
        grid.set_cell(1, 1, True)
        grid.set_cell(2, 2, True)

        with pytest.raises(InvalidArgument):
            grid.seed_random_life(8)

        grid.seed_random_life(7, np.random.default_rng(3))
        assert grid.total_alive() == 9

    def test_zero_count(self):
        """Seeding zero cells is a no-op, even on an empty-area grid."""
        grid = Grid(0, 0)
        grid.seed_random_life(0)
        assert grid.total_alive() == 0

    @pytest.mark.parametrize("count", [-1, 1.5, "3"])
    def test_invalid_count(self, count):
        """Negative or non-integer counts are rejected."""
        with pytest.raises(InvalidArgument):
            Grid(5, 5).seed_random_life(count)


class TestNeighbors:
    """Test cases for neighbour counting."""

    def test_live_neighbor_count(self):
        """Test neighbor counting for individual cells."""
        grid = Grid(5, 5)
        assert grid.live_neighbor_count(2, 2) == 0

        grid.set_cell(1, 1, True)
        grid.set_cell(1, 2, True)
        grid.set_cell(2, 1, True)

        assert grid.live_neighbor_count(0, 0) == 1
        assert grid.live_neighbor_count(2, 2) == 3
        assert grid.live_neighbor_count(1, 1) == 2
        assert grid.live_neighbor_count(3, 3) == 0

    def test_no_wraparound(self):
        """Opposite corners are not neighbours."""
        grid = Grid(3, 3)
        grid.set_cell(0, 0, True)
        grid.set_cell(2, 2, True)
        assert grid.live_neighbor_count(0, 0) == 0
        assert grid.live_neighbor_count(2, 2) == 0

    def test_full_grid_bounds(self):
        """On a full grid, corners see 3, edges 5 and interior cells 8."""
        grid = Grid(5, 4)
        grid.seed_random_life(20, np.random.default_rng(0))

        for x, y in grid.every_cell():
            on_x_edge = x in (0, 4)
            on_y_edge = y in (0, 3)
            if on_x_edge and on_y_edge:
                expected = 3
            elif on_x_edge or on_y_edge:
                expected = 5
            else:
                expected = 8
            assert grid.live_neighbor_count(x, y) == expected

    def test_neighbor_counts_matches_per_cell(self):
        """The convolution map agrees with per-cell counting."""
        grid = Grid(9, 7)
        grid.seed_random_life(30, np.random.default_rng(5))

        counts = grid.neighbor_counts()
        assert counts.shape == (7, 9)
        for x, y in grid.every_cell():
            assert counts[y, x] == grid.live_neighbor_count(x, y)

    def test_neighbor_counts_vertical_line(self):
        """Test vectorized neighbor counting."""
        grid = Grid(5, 5)
        grid.set_cell(2, 1, True)
        grid.set_cell(2, 2, True)
        grid.set_cell(2, 3, True)

        counts = grid.neighbor_counts()
        assert counts[2, 2] == 2
        assert counts[2, 1] == 3
        assert counts[2, 3] == 3
        assert counts[0, 0] == 0

    def test_neighbor_counts_empty_area(self):
        """Zero-area grids produce an empty map."""
        assert Grid(0, 3).neighbor_counts().shape == (3, 0)


class TestStep:
    """Test cases for generational updates."""

    def test_blinker(self):
        """Blinker alternates between horizontal and vertical."""
        grid = Grid(5, 5)
        for x, y in [(1, 2), (2, 2), (3, 2)]:
            grid.toggle(x, y)

        grid.step()
        assert live_set(grid) == {(2, 1), (2, 2), (2, 3)}

        grid.step()
        assert live_set(grid) == {(1, 2), (2, 2), (3, 2)}

    def test_block_still_life(self):
        """Block never changes."""
        grid = Grid(4, 4)
        block = {(1, 1), (2, 1), (1, 2), (2, 2)}
        for x, y in block:
            grid.toggle(x, y)

        for _ in range(10):
            grid.step()
            assert live_set(grid) == block

    def test_block_in_corner(self):
        """A block touching the edges is still stable without wraparound."""
        grid = Grid(2, 2)
        grid.seed_random_life(4, np.random.default_rng(0))
        grid.step()
        assert grid.total_alive() == 4

    @pytest.mark.parametrize("x,y", [(0, 0), (3, 0), (2, 2), (0, 4), (3, 4)])
    def test_isolated_cell_dies(self, x, y):
        """A lone cell dies of underpopulation."""
        grid = Grid(4, 5)
        grid.toggle(x, y)
        grid.step()
        assert grid.total_alive() == 0

    def test_overpopulation(self):
        """A live cell with four live neighbours dies."""
        grid = Grid(3, 3)
        for x, y in [(1, 1), (0, 0), (2, 0), (0, 2), (2, 2)]:
            grid.toggle(x, y)

        grid.step()
        assert not grid.is_alive(1, 1)

    def test_birth(self):
        """A dead cell with exactly three live neighbours is born."""
        grid = Grid(3, 3)
        for x, y in [(0, 0), (1, 0), (2, 0)]:
            grid.toggle(x, y)

        grid.step()
        assert grid.is_alive(1, 1)
        assert grid.is_alive(1, 0)
        assert not grid.is_alive(0, 0)

    def test_glider_hits_edge(self):
        """A glider does not wrap around; it collapses into a block at the corner."""
        grid = Grid(6, 6)
        for x, y in [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]:
            grid.toggle(x, y)

        for _ in range(40):
            grid.step()

        assert live_set(grid) == {(4, 4), (5, 4), (4, 5), (5, 5)}

    def test_step_is_deterministic(self):
        """Stepping two copies of one snapshot yields the same grid."""
        grid = Grid(16, 12)
        grid.seed_random_life(60, np.random.default_rng(11))
        snapshot = grid.copy()

        grid.step()
        snapshot.step()
        assert grid == snapshot

    def test_step_uses_previous_generation_only(self):
        """Cells updated earlier in a pass do not affect later cells."""
        grid = Grid(5, 5)
        for x, y in [(1, 2), (2, 2), (3, 2)]:
            grid.toggle(x, y)

        before = grid.copy()
        expected = set()
        for x, y in before.every_cell():
            count = before.live_neighbor_count(x, y)
            if count == 3 or (before.is_alive(x, y) and count == 2):
                expected.add((x, y))

        grid.step()
        assert live_set(grid) == expected

    def test_held_view_keeps_old_generation(self):
        """A cells view taken before a step still shows the old generation."""
        grid = Grid(3, 3)
        grid.toggle(1, 1)
        view = grid.cells

        grid.step()
        assert view[1, 1]
        assert not grid.cells[1, 1]


class TestGridMisc:
    """Test cases for copying, comparison and formatting."""

    def test_copy_is_independent(self):
        """Changing a copy leaves the original alone."""
        grid = Grid(3, 3)
        grid.toggle(0, 0)
        other = grid.copy()
        other.toggle(1, 1)

        assert grid.total_alive() == 1
        assert other.total_alive() == 2

    def test_get_bounding_box(self):
        """Test bounding box calculation."""
        grid = Grid(10, 10)
        assert grid.get_bounding_box() is None

        grid.set_cell(5, 3, True)
        assert grid.get_bounding_box() == (5, 3, 5, 3)

        grid.set_cell(2, 1, True)
        grid.set_cell(7, 8, True)
        assert grid.get_bounding_box() == (2, 1, 7, 8)

    def test_equality(self):
        """Test grid equality comparison."""
        grid1 = Grid(3, 3)
        grid2 = Grid(3, 3)
        assert grid1 == grid2

        grid1.toggle(1, 1)
        assert grid1 != grid2

        grid2.toggle(1, 1)
        assert grid1 == grid2

        assert Grid(3, 4) != Grid(4, 3)
        assert grid1 != "not a grid"

    def test_string_representation(self):
        """Rows are printed top to bottom."""
        grid = Grid(4, 2)
        assert str(grid) == "....\n...."

        grid.set_cell(0, 0, True)
        grid.set_cell(3, 1, True)
        assert str(grid) == "*...\n...*"
