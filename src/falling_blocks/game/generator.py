from __future__ import annotations

import random
from typing import Optional

from .pieces import ActivePiece
from .shapes import TetrominoType, color_for, shape_for


class PieceGenerator:
    """Produces new active pieces from an injected random source.

    Pass a seeded `random.Random` for reproducible sequences; the default is
    an unseeded one.
    """

    def __init__(self, width: int, rng: Optional[random.Random] = None, spawn_y: int = 0) -> None:
        self.width = int(width)
        self.spawn_y = int(spawn_y)
        self.rng = rng if rng is not None else random.Random()

    def spawn_x(self) -> int:
        return self.width // 2 - 1

    def spawn(self, kind: TetrominoType) -> ActivePiece:
        return ActivePiece(
            kind=kind,
            color=color_for(kind),
            shape=shape_for(kind).copy(),
            x=self.spawn_x(),
            y=self.spawn_y,
        )

    def generate(self) -> ActivePiece:
        kind = self.rng.choice(list(TetrominoType))
        return self.spawn(kind)
