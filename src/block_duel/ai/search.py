from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from block_duel.game.grid import GameGrid
from block_duel.game.pieces import TetrominoType, column_range, rotations

from .evaluator import BoardStats, evaluate_board
from .strategy import Strategy


@dataclass(frozen=True)
class Move:
    rotation: int
    x: int
    y: int
    score: float
    stats: BoardStats


def enumerate_moves(grid: GameGrid, kind: TetrominoType, strategy: Strategy,
                    start_y: int = 0) -> Iterator[Move]:
    """Yield every hard-drop placement of `kind`, in rotation then column order.

    Each candidate is locked into one scratch grid that is refilled from `grid`
    per candidate; `grid` itself is never written. Statistics are taken before
    full rows are cleared so that completed lines still count.
    """
    scratch = grid.copy()
    value = int(kind)
    for rotation, shape in enumerate(rotations(kind)):
        for x in column_range(shape, grid.width):
            if not grid.is_valid_placement(shape, x, start_y):
                continue
            y = grid.drop_row(shape, x, start_y)
            grid.copy_into(scratch)
            scratch.lock_in_place(shape, x, y, value)
            stats = evaluate_board(scratch)
            yield Move(rotation=rotation, x=x, y=y, score=strategy.score(stats), stats=stats)


def find_best_move(grid: GameGrid, kind: TetrominoType, strategy: Strategy,
                   start_y: int = 0) -> Optional[Move]:
    """Best-scoring placement for `kind`, or None if nothing fits at `start_y`.

    Ties keep the first candidate found: lowest rotation, then leftmost column.
    """
    best: Optional[Move] = None
    for move in enumerate_moves(grid, kind, strategy, start_y):
        if best is None or move.score > best.score:
            best = move
    return best
