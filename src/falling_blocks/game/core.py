from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, List, Optional, Tuple

import numpy as np

from .collision import collides
from .generator import PieceGenerator
from .grid import GameGrid
from .lock import LockResult, lock
from .movement import MoveResult, move_down, move_left, move_right, rotate
from .pieces import ActivePiece
from .rules import ScoringRules


logger = logging.getLogger(__name__)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    DOWN = 3
    NONE = 4


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_y: int = 0

    def __post_init__(self) -> None:
        # The widest piece is four cells and the spawn column is width // 2 - 1
        if self.width < 5:
            raise ValueError(f"width must be at least 5, got {self.width}")
        if self.height < 2:
            raise ValueError(f"height must be at least 2, got {self.height}")
        # Cells above row 0 are never collision-checked, so they could lock off the grid
        if self.spawn_y < 0:
            raise ValueError(f"spawn_y must not be negative, got {self.spawn_y}")


@dataclass
class LockEvent:
    piece: ActivePiece
    cleared_rows: Tuple[int, ...]
    score_delta: int


LockListener = Callable[[LockEvent], None]
GameOverListener = Callable[[int], None]


class FallingBlocksGame:
    """Owns the grid, the active piece and the score.

    Drivers call `tick`, `move_left`, `move_right` and `rotate` one at a time
    from a single loop, and read `grid`, `current_piece` and `score` to draw.
    Once the game is over every command is a no-op until `reset`.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None,
                 rng: Optional[random.Random] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = rng if rng is not None else random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.generator = PieceGenerator(self.config.width, self.rng, spawn_y=self.config.spawn_y)
        self.score = 0
        self.lines_cleared_total = 0
        self.game_over = False
        self.current_piece: Optional[ActivePiece] = None
        self._lock_listeners: List[LockListener] = []
        self._game_over_listeners: List[GameOverListener] = []
        self.reset()

    # Events

    def on_piece_locked(self, callback: LockListener) -> None:
        self._lock_listeners.append(callback)

    def on_game_over(self, callback: GameOverListener) -> None:
        self._game_over_listeners.append(callback)

    # Lifecycle

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.grid.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.game_over = False
        self.current_piece = None
        self._accept(self.generator.generate())

    def _accept(self, piece: ActivePiece) -> None:
        """Make `piece` the active piece, or end the game if it cannot spawn."""
        if collides(self.grid, piece.shape, piece.x, piece.y):
            self._end(piece)
            return
        self.current_piece = piece
        logger.debug("spawned %s at (%d, %d)", piece.kind.name, piece.x, piece.y)

    def _end(self, blocked: ActivePiece) -> None:
        self.current_piece = None
        self.game_over = True
        logger.info("game over: %s blocked at spawn, final score %d", blocked.kind.name, self.score)
        for callback in list(self._game_over_listeners):
            callback(self.score)

    # Commands

    def tick(self) -> Optional[LockResult]:
        """Gravity step. Returns the lock result when the piece landed."""
        if self.game_over or self.current_piece is None:
            return None
        if move_down(self.current_piece, self.grid) is MoveResult.MOVED:
            return None
        return self._lock_current()

    def move_left(self) -> bool:
        if self.game_over or self.current_piece is None:
            return False
        return move_left(self.current_piece, self.grid)

    def move_right(self) -> bool:
        if self.game_over or self.current_piece is None:
            return False
        return move_right(self.current_piece, self.grid)

    def rotate(self) -> bool:
        if self.game_over or self.current_piece is None:
            return False
        return rotate(self.current_piece, self.grid)

    def _lock_current(self) -> LockResult:
        assert self.current_piece is not None
        piece = self.current_piece
        result = lock(piece, self.grid, self.generator, self.rules)
        self.score += result.score_delta
        self.lines_cleared_total += len(result.cleared_rows)
        logger.debug("locked %s at (%d, %d), cleared rows %s",
                     piece.kind.name, piece.x, piece.y, list(result.cleared_rows))

        event = LockEvent(piece=piece, cleared_rows=result.cleared_rows, score_delta=result.score_delta)
        for callback in list(self._lock_listeners):
            callback(event)

        if result.game_over:
            self._end(result.next_piece)
        else:
            self._accept(result.next_piece)
        return result

    def step(self, action: Action) -> Tuple[np.ndarray, int, bool, dict]:
        if self.game_over:
            return self.get_state(), 0, True, {"score": self.score}

        score_before = self.score
        cleared: Tuple[int, ...] = ()
        if action == Action.LEFT:
            self.move_left()
        elif action == Action.RIGHT:
            self.move_right()
        elif action == Action.ROTATE:
            self.rotate()
        elif action == Action.DOWN:
            result = self.tick()
            if result is not None:
                cleared = result.cleared_rows
        elif action == Action.NONE:
            pass

        info = {
            "score": self.score,
            "lines_cleared_total": self.lines_cleared_total,
            "cleared_rows": cleared,
        }
        return self.get_state(), self.score - score_before, self.game_over, info

    # Queries

    def get_grid(self) -> np.ndarray:
        return self.grid.clone_state()

    def get_state(self) -> np.ndarray:
        # Overlay the active piece on a copy of the grid as negative color codes
        state = self.grid.clone_state()
        if self.current_piece is not None and not self.game_over:
            for x, y in self.current_piece.cells():
                if self.grid.is_inside(x, y):
                    state[y, x] = -int(self.current_piece.color)
        return state
