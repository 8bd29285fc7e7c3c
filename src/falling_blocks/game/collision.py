from __future__ import annotations

from .grid import GameGrid
from .shapes import Shape


def collides(grid: GameGrid, shape: Shape, anchor_x: int, anchor_y: int) -> bool:
    """Return True if `shape` anchored at (anchor_x, anchor_y) is illegal.

    A cell collides when it lies left or right of the grid, at or below the
    bottom row, or on an occupied cell. There is no top bound: cells above
    row 0 are never tested against the grid.
    """
    rows, cols = shape.shape
    for dy in range(rows):
        for dx in range(cols):
            if not shape[dy, dx]:
                continue
            x, y = anchor_x + dx, anchor_y + dy
            if x < 0 or x >= grid.width or y >= grid.height:
                return True
            if y >= 0 and grid.is_occupied(x, y):
                return True
    return False
