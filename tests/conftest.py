from __future__ import annotations

import random
from typing import Iterable

import pytest

from falling_blocks.game import FallingBlocksGame, GameConfig, GameGrid, PieceGenerator, TetrominoType


class ScriptedRandom(random.Random):
    """Random source that deals the given piece kinds in order, then I pieces."""

    def __init__(self, kinds: Iterable[TetrominoType]) -> None:
        super().__init__(0)
        self.kinds = list(kinds)

    def choice(self, seq):
        if self.kinds:
            return self.kinds.pop(0)
        return seq[0]


@pytest.fixture
def grid() -> GameGrid:
    return GameGrid(10, 20)


@pytest.fixture
def generator() -> PieceGenerator:
    return PieceGenerator(10, random.Random(1234))


@pytest.fixture
def scripted_game():
    def _make(*kinds: TetrominoType, width: int = 10, height: int = 20) -> FallingBlocksGame:
        return FallingBlocksGame(GameConfig(width=width, height=height), rng=ScriptedRandom(kinds))

    return _make
