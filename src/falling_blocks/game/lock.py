from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .collision import collides
from .generator import PieceGenerator
from .grid import GameGrid
from .pieces import ActivePiece
from .rules import ScoringRules


@dataclass
class LockResult:
    score_delta: int
    cleared_rows: Tuple[int, ...]
    next_piece: ActivePiece
    game_over: bool


def clear_full_rows(grid: GameGrid) -> Tuple[int, ...]:
    """Clear every full row and return their pre-clear indices, bottom first.

    Rows are cleared top-down: clearing a row only shifts the rows above it,
    so the indices of the full rows still to be cleared stay valid.
    """
    full = grid.full_rows()
    for row in full:
        grid.clear_row(row)
    return tuple(reversed(full))


def lock(piece: ActivePiece, grid: GameGrid, generator: PieceGenerator,
         rules: ScoringRules) -> LockResult:
    """Write `piece` into the grid, clear lines and spawn the next piece.

    The piece must be at a non-colliding position, which holds whenever it got
    here through a rejected `move_down`.
    """
    for x, y in piece.cells():
        grid.set_cell(x, y, piece.color)

    cleared = clear_full_rows(grid)
    next_piece = generator.generate()
    game_over = collides(grid, next_piece.shape, next_piece.x, next_piece.y)
    return LockResult(
        score_delta=rules.score_for_lines(len(cleared)),
        cleared_rows=cleared,
        next_piece=next_piece,
        game_over=game_over,
    )
