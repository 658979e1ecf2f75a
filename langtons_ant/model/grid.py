"""Color buffer for the Langton's Ant grid."""

import numpy as np

WHITE = 0
BLACK = 1


class InvalidSize(ValueError):
    """Raised when a grid is requested with a size that is not a positive integer."""


class GridState:
    """
    Square two-color grid stored as a flat row-major buffer.

    Coordinate convention: (x, y) for API, y * size + x for buffer indexing.
    """

    def __init__(self, size: int):
        if (isinstance(size, bool) or not isinstance(size, (int, np.integer))
                or size <= 0):
            raise InvalidSize(f"size must be a positive integer, got {size!r}")

        self.size = int(size)

        # 0 = white, 1 = black
        self.cells = np.zeros(self.size * self.size, dtype=np.uint8)
        self._black_cells = 0

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if (x, y) lies inside the grid."""
        return 0 <= x < self.size and 0 <= y < self.size

    def _index(self, x: int, y: int) -> int:
        # Negative indices would silently wrap in numpy
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.size}x{self.size} grid")
        return y * self.size + x

    def read(self, x: int, y: int) -> int:
        """Return the color at (x, y)."""
        return int(self.cells[self._index(x, y)])

    def toggle(self, x: int, y: int) -> int:
        """Flip the color at (x, y) and return the new color."""
        idx = self._index(x, y)
        self.cells[idx] ^= 1
        color = int(self.cells[idx])
        self._black_cells += 1 if color else -1
        return color

    def snapshot(self) -> np.ndarray:
        """Independent flat copy of the buffer."""
        return self.cells.copy()

    def as_rows(self) -> np.ndarray:
        """Independent [size, size] copy, indexed [y, x]."""
        return self.cells.reshape(self.size, self.size).copy()

    def count_black(self) -> int:
        """Number of black cells, kept up to date by toggle()."""
        return self._black_cells
