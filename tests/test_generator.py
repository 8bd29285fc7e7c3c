import random

import numpy as np
import pytest

from falling_blocks.game import BASE_SHAPES, COLORS, Color, PieceGenerator, TetrominoType, shape_for


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_catalog_shapes_have_four_cells_and_are_read_only(kind):
    shape = shape_for(kind)
    assert int(shape.sum()) == 4
    with pytest.raises(ValueError):
        shape[0, 0] = 1


def test_every_kind_has_its_own_color():
    assert set(BASE_SHAPES) == set(TetrominoType)
    assert len(set(COLORS.values())) == len(TetrominoType)
    assert COLORS[TetrominoType.I] is Color.CYAN
    assert COLORS[TetrominoType.O] is Color.YELLOW


def test_spawn_is_centered_at_top(generator):
    piece = generator.spawn(TetrominoType.I)
    assert (piece.x, piece.y) == (4, 0)
    assert piece.color is Color.CYAN
    assert PieceGenerator(7).spawn(TetrominoType.O).x == 2


def test_spawned_matrix_is_a_private_copy(generator):
    piece = generator.spawn(TetrominoType.T)
    assert np.array_equal(piece.shape, shape_for(TetrominoType.T))
    assert piece.shape is not shape_for(TetrominoType.T)
    piece.shape[0, 0] = 1
    assert shape_for(TetrominoType.T)[0, 0] == 0


def test_same_seed_same_sequence():
    a = PieceGenerator(10, random.Random(7))
    b = PieceGenerator(10, random.Random(7))
    assert [a.generate().kind for _ in range(50)] == [b.generate().kind for _ in range(50)]


def test_generate_draws_every_kind(generator):
    kinds = {generator.generate().kind for _ in range(500)}
    assert kinds == set(TetrominoType)
