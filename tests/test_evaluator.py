from __future__ import annotations

import numpy as np

from block_duel.ai.evaluator import BoardStats, column_heights, evaluate_board
from block_duel.game.grid import GameGrid

from conftest import grid_with_rows


def test_empty_grid():
    assert evaluate_board(GameGrid()) == BoardStats(0, 0, 0, 0)


def test_single_full_row():
    stats = evaluate_board(grid_with_rows(19))
    assert stats.complete_lines == 1
    assert stats.aggregate_height == 10
    assert stats.holes == 0
    assert stats.bumpiness == 0


def test_heights_holes_and_bumpiness():
    grid = grid_with_rows((17, [0]), (19, [0, 1]))
    assert list(column_heights(grid)[:3]) == [3, 1, 0]
    stats = evaluate_board(grid)
    assert stats == BoardStats(aggregate_height=4, complete_lines=0, holes=1, bumpiness=3)


def test_holes_count_every_empty_cell_below_the_top():
    grid = grid_with_rows((10, [5]))
    assert evaluate_board(grid).holes == 9


def test_accepts_raw_arrays_without_mutation():
    cells = grid_with_rows((18, [2]), 19).grid
    before = cells.copy()
    stats = evaluate_board(cells)
    assert stats.complete_lines == 1
    assert stats.aggregate_height == 11
    assert np.array_equal(cells, before)
