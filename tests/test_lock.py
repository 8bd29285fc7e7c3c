import numpy as np

from falling_blocks.game import (
    Color,
    PieceGenerator,
    ScoringRules,
    TetrominoType,
    clear_full_rows,
    lock,
    move_down,
    MoveResult,
)

from conftest import ScriptedRandom


def _fill_row(grid, row, skip=(), color=Color.BLUE):
    for x in range(grid.width):
        if x not in skip:
            grid.set_cell(x, row, color)


def test_lock_writes_piece_color(grid):
    generator = PieceGenerator(10, ScriptedRandom([TetrominoType.T]))
    piece = generator.spawn(TetrominoType.O)
    piece.y = 18

    result = lock(piece, grid, generator, ScoringRules())

    assert result.score_delta == 0
    assert result.cleared_rows == ()
    assert not result.game_over
    assert result.next_piece.kind is TetrominoType.T
    for x, y in [(4, 18), (5, 18), (4, 19), (5, 19)]:
        assert grid.cell_at(x, y) is Color.YELLOW
    assert int(np.count_nonzero(grid.grid)) == 4


def test_landing_never_overwrites_locked_cells(grid, generator):
    grid.set_cell(4, 19, Color.RED)
    piece = generator.spawn(TetrominoType.O)
    while move_down(piece, grid) is MoveResult.MOVED:
        pass
    assert piece.y == 17

    lock(piece, grid, generator, ScoringRules())

    assert grid.cell_at(4, 19) is Color.RED
    assert grid.cell_at(4, 18) is Color.YELLOW


def test_clear_full_rows_reports_pre_clear_indices_bottom_first(grid):
    _fill_row(grid, 19)
    _fill_row(grid, 17)
    _fill_row(grid, 18, skip=(0,))
    grid.set_cell(5, 16, Color.RED)

    cleared = clear_full_rows(grid)

    assert cleared == (19, 17)
    # the partial row 18 drops to 19, row 16 drops two rows to 18
    assert grid.cell_at(0, 19) is None
    assert grid.cell_at(1, 19) is Color.BLUE
    assert grid.cell_at(5, 18) is Color.RED
    assert grid.full_rows() == []


def test_spawn_collision_is_reported_as_game_over(grid):
    generator = PieceGenerator(10, ScriptedRandom([TetrominoType.I]))
    grid.set_cell(7, 0, Color.GREEN)
    piece = generator.spawn(TetrominoType.O)
    piece.y = 18

    result = lock(piece, grid, generator, ScoringRules())

    assert result.game_over
    assert result.next_piece.kind is TetrominoType.I
    # only the locked O and the pre-existing cell are on the grid
    assert int(np.count_nonzero(grid.grid)) == 5


def test_custom_points_per_line(grid):
    generator = PieceGenerator(10, ScriptedRandom([TetrominoType.O]))
    _fill_row(grid, 19, skip=(4, 5))
    _fill_row(grid, 18, skip=(4, 5))
    piece = generator.spawn(TetrominoType.O)
    piece.y = 18

    result = lock(piece, grid, generator, ScoringRules(points_per_line=40))

    assert result.cleared_rows == (19, 18)
    assert result.score_delta == 80
    assert not np.any(grid.grid)
