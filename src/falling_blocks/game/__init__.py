"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- GameGrid: Grid representation and line clearing
- ActivePiece: The falling piece and its orientation
- TetrominoType / Color: Shape catalog enumerations
- ScoringRules: Flat per-line scoring
- FallingBlocksGame: Game controller and state management
"""

from .shapes import BASE_SHAPES, COLORS, RGB, Color, TetrominoType, color_for, color_for_value, shape_for
from .grid import EMPTY, GameGrid, OutOfBoundsError
from .pieces import ActivePiece, rotate_cw
from .collision import collides
from .movement import MoveResult, move_down, move_left, move_right, rotate
from .rules import ScoringRules
from .generator import PieceGenerator
from .lock import LockResult, clear_full_rows, lock
from .core import Action, FallingBlocksGame, GameConfig, LockEvent

__all__ = [
    "BASE_SHAPES",
    "COLORS",
    "Color",
    "TetrominoType",
    "color_for",
    "RGB",
    "color_for_value",
    "shape_for",
    "EMPTY",
    "GameGrid",
    "OutOfBoundsError",
    "ActivePiece",
    "rotate_cw",
    "collides",
    "MoveResult",
    "move_down",
    "move_left",
    "move_right",
    "rotate",
    "ScoringRules",
    "PieceGenerator",
    "LockResult",
    "clear_full_rows",
    "lock",
    "Action",
    "FallingBlocksGame",
    "GameConfig",
    "LockEvent",
]
