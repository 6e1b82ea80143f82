from __future__ import annotations

import random

import numpy as np

from block_duel.game.grid import GameGrid, lock_and_clear
from block_duel.game.pieces import ROTATIONS, Piece, TetrominoType

from conftest import grid_with_rows

I_FLAT, I_TALL = ROTATIONS[TetrominoType.I]
O = ROTATIONS[TetrominoType.O][0]


def test_bounds():
    grid = GameGrid()
    assert grid.is_valid_placement(I_FLAT, 0, 0)
    assert grid.is_valid_placement(I_FLAT, 6, 0)
    assert not grid.is_valid_placement(I_FLAT, 7, 0)
    assert not grid.is_valid_placement(I_FLAT, -1, 0)
    assert grid.is_valid_placement(I_TALL, 9, 16)
    assert not grid.is_valid_placement(I_TALL, 9, 17)


def test_cells_above_top_are_tolerated():
    grid = grid_with_rows(0)
    assert grid.is_valid_placement(I_TALL, 3, -4)
    assert not grid.is_valid_placement(I_TALL, 3, -3)
    assert not grid.is_valid_placement(I_TALL, 10, -4)


def test_collision():
    grid = grid_with_rows((19, [0]))
    assert not grid.is_valid_placement(O, 0, 18)
    assert grid.is_valid_placement(O, 1, 18)
    assert grid.is_valid_placement(O, 0, 17)


def test_valid_placement_only_covers_free_cells():
    rng = random.Random(0)
    shapes = [shape for states in ROTATIONS.values() for shape in states]
    for _ in range(300):
        cells = (np.array([[rng.random() < 0.3 for _ in range(10)] for _ in range(20)])).astype(np.int8)
        grid = GameGrid.from_array(cells)
        shape = rng.choice(shapes)
        x, y = rng.randint(-3, 11), rng.randint(-4, 21)
        if not grid.is_valid_placement(shape, x, y):
            continue
        for dy, dx in zip(*np.nonzero(shape)):
            bx, by = x + int(dx), y + int(dy)
            assert 0 <= bx < 10
            assert by < 20
            assert by < 0 or cells[by, bx] == 0


def test_drop_row():
    grid = grid_with_rows((19, [0]))
    assert grid.drop_row(O, 0, 0) == 17
    assert grid.drop_row(O, 4, 0) == 18


def test_locked_returns_copy_tagged_with_kind():
    grid = GameGrid()
    new_grid = grid.locked(O, 3, 18, int(TetrominoType.O))
    assert np.count_nonzero(grid.grid) == 0
    assert new_grid.grid[18, 3] == TetrominoType.O
    assert new_grid.grid[19, 4] == TetrominoType.O
    assert np.count_nonzero(new_grid.grid) == 4


def test_locking_an_empty_shape_changes_nothing():
    grid = grid_with_rows((19, [1, 2, 3]))
    assert grid.locked(np.zeros((2, 2), dtype=np.int8), 0, 18, 3) == grid


def test_cells_outside_the_grid_are_dropped_on_lock():
    grid = GameGrid().locked(I_TALL, 0, -2, int(TetrominoType.I))
    assert np.count_nonzero(grid.grid) == 2
    assert grid.grid[0, 0] == grid.grid[1, 0] == TetrominoType.I


def test_clear_keeps_row_count_and_shifts_down():
    grid = grid_with_rows(17, 19)
    grid.grid[18, 3] = 5
    lines = grid.clear_full_lines()
    assert lines == 2
    assert grid.grid.shape == (20, 10)
    assert grid.grid[19, 3] == 5
    assert np.count_nonzero(grid.grid) == 1


def test_clear_without_full_rows_is_identity():
    grid = grid_with_rows((19, range(9)), (18, [4]))
    before = grid.copy()
    assert grid.clear_full_lines() == 0
    assert grid == before


def test_lock_and_clear_leaves_input_untouched():
    grid = grid_with_rows((19, range(4, 10)))
    piece = Piece(TetrominoType.I, rotation=0, x=0, y=19)
    new_grid, lines = lock_and_clear(grid, piece)
    assert lines == 1
    assert np.count_nonzero(new_grid.grid) == 0
    assert np.count_nonzero(grid.grid) == 6


def test_copy_into_reuses_target():
    grid = grid_with_rows(19)
    scratch = GameGrid()
    target = scratch.grid
    grid.copy_into(scratch)
    assert scratch.grid is target
    assert scratch == grid
