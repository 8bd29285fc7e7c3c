"""Translation and rotation of the active piece.

Every operation builds the candidate state first, asks `collides` about it,
and only then writes it into the piece. A rejected move leaves the piece
exactly as it was.
"""

from __future__ import annotations

from enum import Enum

from .collision import collides
from .grid import GameGrid
from .pieces import ActivePiece, rotate_cw


class MoveResult(Enum):
    MOVED = "moved"
    LOCKED = "locked"


def _shift(piece: ActivePiece, grid: GameGrid, dx: int, dy: int) -> bool:
    new_x = piece.x + dx
    new_y = piece.y + dy
    if collides(grid, piece.shape, new_x, new_y):
        return False
    piece.x = new_x
    piece.y = new_y
    return True


def move_down(piece: ActivePiece, grid: GameGrid) -> MoveResult:
    """Drop one row, or report LOCKED if the piece has landed."""
    if _shift(piece, grid, 0, 1):
        return MoveResult.MOVED
    return MoveResult.LOCKED


def move_left(piece: ActivePiece, grid: GameGrid) -> bool:
    return _shift(piece, grid, -1, 0)


def move_right(piece: ActivePiece, grid: GameGrid) -> bool:
    return _shift(piece, grid, 1, 0)


def rotate(piece: ActivePiece, grid: GameGrid) -> bool:
    """Turn the piece clockwise in place around its anchor; no kicks."""
    rotated = rotate_cw(piece.shape)
    if collides(grid, rotated, piece.x, piece.y):
        return False
    piece.shape = rotated
    return True
