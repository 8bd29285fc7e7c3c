from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


class Color(IntEnum):
    """Cell color codes stored in the grid. 0 is reserved for empty cells."""

    CYAN = 1
    YELLOW = 2
    PURPLE = 3
    GREEN = 4
    RED = 5
    BLUE = 6
    ORANGE = 7


Shape = np.ndarray


def _frozen(rows) -> Shape:
    shape = np.array(rows, dtype=np.int8)
    shape.flags.writeable = False
    return shape


BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: _frozen([[1, 1, 1, 1]]),
    TetrominoType.O: _frozen([[1, 1], [1, 1]]),
    TetrominoType.T: _frozen([[0, 1, 0], [1, 1, 1]]),
    TetrominoType.S: _frozen([[0, 1, 1], [1, 1, 0]]),
    TetrominoType.Z: _frozen([[1, 1, 0], [0, 1, 1]]),
    TetrominoType.J: _frozen([[1, 0, 0], [1, 1, 1]]),
    TetrominoType.L: _frozen([[0, 0, 1], [1, 1, 1]]),
}

COLORS: Dict[TetrominoType, Color] = {
    TetrominoType.I: Color.CYAN,
    TetrominoType.O: Color.YELLOW,
    TetrominoType.T: Color.PURPLE,
    TetrominoType.S: Color.GREEN,
    TetrominoType.Z: Color.RED,
    TetrominoType.J: Color.BLUE,
    TetrominoType.L: Color.ORANGE,
}


def shape_for(kind: TetrominoType) -> Shape:
    """Read-only occupancy matrix of `kind` in its spawn orientation."""
    return BASE_SHAPES[kind]


def color_for(kind: TetrominoType) -> Color:
    return COLORS[kind]


RGB: Dict[int, Tuple[int, int, int]] = {
    0: (34, 34, 34),
    Color.CYAN: (0, 255, 255),
    Color.YELLOW: (255, 255, 0),
    Color.PURPLE: (128, 0, 128),
    Color.GREEN: (0, 200, 0),
    Color.RED: (255, 0, 0),
    Color.BLUE: (0, 0, 255),
    Color.ORANGE: (255, 165, 0),
}


def color_for_value(v: int) -> Tuple[int, int, int]:
    """RGB for a state-array value; active piece cells are negative."""
    return RGB.get(abs(int(v)), (200, 200, 200))
