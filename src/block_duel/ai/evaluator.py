from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np

from block_duel.game.grid import GameGrid


GridLike = Union[GameGrid, np.ndarray]


@dataclass(frozen=True)
class BoardStats:
    aggregate_height: int
    complete_lines: int
    holes: int
    bumpiness: int


def _cells(grid: GridLike) -> np.ndarray:
    return grid.grid if isinstance(grid, GameGrid) else grid


def column_heights(grid: GridLike) -> np.ndarray:
    """Height of each column: rows from the topmost filled cell to the floor."""
    occupied = _cells(grid) != 0
    height = occupied.shape[0]
    top = np.argmax(occupied, axis=0)
    return np.where(occupied.any(axis=0), height - top, 0)


def evaluate_board(grid: GridLike) -> BoardStats:
    occupied = _cells(grid) != 0
    heights = column_heights(occupied)
    # A cell is covered once any filled cell has appeared above it in the column.
    covered = np.logical_or.accumulate(occupied, axis=0)
    holes = np.count_nonzero(covered & ~occupied)
    return BoardStats(
        aggregate_height=int(heights.sum()),
        complete_lines=int(np.count_nonzero(occupied.all(axis=1))),
        holes=int(holes),
        bumpiness=int(np.abs(np.diff(heights)).sum()),
    )
