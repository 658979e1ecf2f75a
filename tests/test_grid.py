"""
Tests for the color buffer.
"""

import numpy as np
import pytest

from langtons_ant.model.grid import GridState, InvalidSize, WHITE, BLACK


class TestGridConstruction:
    """Tests for GridState creation and size validation."""

    def test_all_white(self, small_grid):
        """New grid is size*size white cells."""
        assert small_grid.cells.shape == (9,)
        assert np.all(small_grid.cells == WHITE)

    def test_accepts_numpy_integer(self):
        """numpy integer sizes are accepted and stored as int."""
        grid = GridState(np.int64(4))
        assert grid.size == 4
        assert isinstance(grid.size, int)

    @pytest.mark.parametrize("size", [0, -1, -10])
    def test_rejects_non_positive(self, size):
        """Zero and negative sizes raise InvalidSize."""
        with pytest.raises(InvalidSize, match="positive integer"):
            GridState(size)

    @pytest.mark.parametrize("size", [2.0, "3", None, True])
    def test_rejects_non_integer(self, size):
        """Non-integer sizes raise InvalidSize."""
        with pytest.raises(InvalidSize):
            GridState(size)

    def test_invalid_size_is_value_error(self):
        """InvalidSize can be caught as ValueError."""
        with pytest.raises(ValueError):
            GridState(0)


class TestGridAccess:
    """Tests for read/toggle/snapshot."""

    def test_row_major_indexing(self, small_grid):
        """toggle(x, y) flips buffer index y*size + x."""
        small_grid.toggle(2, 1)
        assert small_grid.cells[1 * 3 + 2] == BLACK
        assert small_grid.read(2, 1) == BLACK
        assert small_grid.read(1, 2) == WHITE

    def test_toggle_twice_restores(self, small_grid):
        """Toggle flips 0 -> 1 -> 0 and returns the new color."""
        assert small_grid.toggle(0, 0) == BLACK
        assert small_grid.toggle(0, 0) == WHITE

    def test_toggle_touches_one_cell(self, small_grid):
        """Exactly one cell changes per toggle."""
        before = small_grid.snapshot()
        small_grid.toggle(1, 1)
        assert np.count_nonzero(small_grid.snapshot() != before) == 1

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_out_of_bounds(self, small_grid, x, y):
        """Out-of-range coordinates raise instead of wrapping."""
        with pytest.raises(IndexError):
            small_grid.read(x, y)
        with pytest.raises(IndexError):
            small_grid.toggle(x, y)

    def test_snapshot_is_independent(self, small_grid):
        """Mutating a snapshot leaves the grid untouched."""
        snap = small_grid.snapshot()
        snap[:] = 1
        assert small_grid.count_black() == 0

    def test_as_rows(self, small_grid):
        """as_rows is a [y, x] copy."""
        small_grid.toggle(2, 0)
        rows = small_grid.as_rows()
        assert rows.shape == (3, 3)
        assert rows[0, 2] == BLACK
        rows[:] = 0
        assert small_grid.read(2, 0) == BLACK

    def test_count_black(self, small_grid):
        small_grid.toggle(0, 0)
        small_grid.toggle(2, 2)
        assert small_grid.count_black() == 2
        small_grid.toggle(0, 0)
        assert small_grid.count_black() == 1

    def test_count_black_matches_buffer(self):
        """The running count agrees with the buffer after many toggles."""
        grid = GridState(5)
        for i in range(200):
            grid.toggle(i % 5, (i * 3) % 5)
            assert grid.count_black() == int(np.count_nonzero(grid.cells))
