from __future__ import annotations

from typing import List, Optional

import numpy as np

from .shapes import Color


EMPTY = 0


class OutOfBoundsError(IndexError):
    """Raised when a grid coordinate lies outside [0, width) x [0, height)."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"cell ({x}, {y}) is outside a {width}x{height} grid")
        self.x = x
        self.y = y


class GameGrid:
    """Fixed-size board of locked cells.

    The grid uses 0 for empty cells and positive `Color` codes for locked
    cells. Row 0 is the top; cells are addressed as (x, y) = (column, row).
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.is_inside(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def cell_at(self, x: int, y: int) -> Optional[Color]:
        self._check(x, y)
        value = int(self.grid[y, x])
        return None if value == EMPTY else Color(value)

    def is_occupied(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self.grid[y, x] != EMPTY

    def set_cell(self, x: int, y: int, color: Color) -> None:
        self._check(x, y)
        self.grid[y, x] = int(color)

    def is_row_full(self, row: int) -> bool:
        self._check(0, row)
        return bool(np.all(self.grid[row] != EMPTY))

    def full_rows(self) -> List[int]:
        return [int(r) for r in np.where(np.all(self.grid != EMPTY, axis=1))[0]]

    def clear_row(self, row: int) -> None:
        """Remove `row` and insert an empty row at the top.

        Rows above the cleared one shift down by one; rows below keep their
        index. The row count never changes.
        """
        self._check(0, row)
        remaining = np.delete(self.grid, row, axis=0)
        empty = np.zeros((1, self.width), dtype=np.int8)
        self.grid = np.vstack((empty, remaining))

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
