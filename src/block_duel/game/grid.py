from __future__ import annotations

from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .pieces import Piece


BOARD_WIDTH = 10
BOARD_HEIGHT = 20


class GameGrid:
    """Discrete 2D grid for block placement.

    The grid uses 0 for empty cells and positive integers for filled cells.
    Integer values are the tetromino kind that filled the cell. Row 0 is the
    top; the dimensions never change, only the cell contents.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT,
                 cells: Optional[np.ndarray] = None) -> None:
        self.width = int(width)
        self.height = int(height)
        if cells is None:
            self.grid = np.zeros((self.height, self.width), dtype=np.int8)
        else:
            assert cells.shape == (self.height, self.width), "cell array does not match grid size"
            self.grid = cells.astype(np.int8, copy=True)

    @classmethod
    def from_array(cls, cells: np.ndarray) -> "GameGrid":
        h, w = cells.shape
        return cls(w, h, cells)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_valid_placement(self, shape: np.ndarray, x: int, y: int) -> bool:
        """Check whether `shape` fits with its top-left corner at (x, y).

        Occupied cells above the top edge are tolerated; anything left, right or
        below the grid, or on a filled cell, is not.
        """
        h, w = shape.shape
        for dy in range(h):
            by = y + dy
            if by >= self.height:
                if np.any(shape[dy]):
                    return False
                continue
            for dx in range(w):
                if not shape[dy, dx]:
                    continue
                bx = x + dx
                if bx < 0 or bx >= self.width:
                    return False
                if by >= 0 and self.grid[by, bx] != 0:
                    return False
        return True

    def drop_row(self, shape: np.ndarray, x: int, y: int) -> int:
        """Lowest row reachable from `y` by moving straight down (hard drop)."""
        while self.is_valid_placement(shape, x, y + 1):
            y += 1
        return y

    def lock_in_place(self, shape: np.ndarray, x: int, y: int, value: int) -> None:
        h, w = shape.shape
        for dy in range(h):
            by = y + dy
            if by < 0 or by >= self.height:
                continue
            for dx in range(w):
                if shape[dy, dx]:
                    bx = x + dx
                    if 0 <= bx < self.width:
                        self.grid[by, bx] = value

    def locked(self, shape: np.ndarray, x: int, y: int, value: int) -> "GameGrid":
        new_grid = self.copy()
        new_grid.lock_in_place(shape, x, y, value)
        return new_grid

    def full_rows(self) -> np.ndarray:
        return np.flatnonzero(np.all(self.grid != 0, axis=1))

    def clear_full_lines(self) -> int:
        full_rows = self.full_rows()
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        # Remove full rows and add empty rows at the top
        kept = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, kept))
        return num

    def copy(self) -> "GameGrid":
        return GameGrid(self.width, self.height, self.grid)

    def copy_into(self, other: "GameGrid") -> "GameGrid":
        np.copyto(other.grid, self.grid)
        return other

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameGrid):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        return f"GameGrid(width={self.width}, height={self.height}, filled={int(np.count_nonzero(self.grid))})"


def lock_and_clear(grid: GameGrid, piece: "Piece") -> Tuple[GameGrid, int]:
    """Lock `piece` at its final position, clear full rows, return (grid, lines).

    The input grid is left untouched.
    """
    new_grid = grid.locked(piece.shape(), piece.x, piece.y, int(piece.kind))
    lines = new_grid.clear_full_lines()
    return new_grid, lines

