"""Game module for Block Duel.

Exports the board-level building blocks:
- GameGrid: Grid representation, placement checks, locking and line clearing
- Piece: Tetromino piece positioned on the grid
- TetrominoType: Enum of available piece types
- ROTATIONS: Static catalog of rotation states per piece type
- ScoringRules: Line-clear scoring table and level progression
"""

from .grid import BOARD_HEIGHT, BOARD_WIDTH, GameGrid, lock_and_clear
from .pieces import ROTATIONS, Piece, TetrominoType, column_range, rotations, shape_for
from .rules import ScoringRules

__all__ = [
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "GameGrid",
    "lock_and_clear",
    "ROTATIONS",
    "Piece",
    "TetrominoType",
    "column_range",
    "rotations",
    "shape_for",
    "ScoringRules",
]
