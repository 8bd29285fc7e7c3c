from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .shapes import Color, Shape, TetrominoType


Coordinate = Tuple[int, int]


def rotate_cw(shape: Shape) -> Shape:
    """Clockwise quarter turn: new[r][c] = old[h - 1 - c][r]."""
    return np.ascontiguousarray(np.rot90(shape, 1, axes=(1, 0)))


@dataclass
class ActivePiece:
    kind: TetrominoType
    color: Color
    shape: Shape
    x: int
    y: int

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    def cells_at(self, origin_x: int, origin_y: int) -> List[Coordinate]:
        cells: List[Coordinate] = []
        for dy in range(self.height):
            for dx in range(self.width):
                if self.shape[dy, dx]:
                    cells.append((origin_x + dx, origin_y + dy))
        return cells

    def cells(self) -> List[Coordinate]:
        """Absolute grid cells covered at the current anchor."""
        return self.cells_at(self.x, self.y)
