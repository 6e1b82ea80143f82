from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


def _frozen(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.setflags(write=False)
    return arr


# Rotation states in play order. Shared by every session, never mutated.
ROTATIONS: Dict[TetrominoType, Tuple[Shape, ...]] = {
    TetrominoType.I: (
        _frozen([[1, 1, 1, 1]]),
        _frozen([[1], [1], [1], [1]]),
    ),
    TetrominoType.O: (
        _frozen([[1, 1], [1, 1]]),
    ),
    TetrominoType.T: (
        _frozen([[0, 1, 0], [1, 1, 1]]),
        _frozen([[1, 0], [1, 1], [1, 0]]),
        _frozen([[1, 1, 1], [0, 1, 0]]),
        _frozen([[0, 1], [1, 1], [0, 1]]),
    ),
    TetrominoType.S: (
        _frozen([[0, 1, 1], [1, 1, 0]]),
        _frozen([[1, 0], [1, 1], [0, 1]]),
    ),
    TetrominoType.Z: (
        _frozen([[1, 1, 0], [0, 1, 1]]),
        _frozen([[0, 1], [1, 1], [1, 0]]),
    ),
    TetrominoType.J: (
        _frozen([[1, 0, 0], [1, 1, 1]]),
        _frozen([[1, 1], [1, 0], [1, 0]]),
        _frozen([[1, 1, 1], [0, 0, 1]]),
        _frozen([[0, 1], [0, 1], [1, 1]]),
    ),
    TetrominoType.L: (
        _frozen([[0, 0, 1], [1, 1, 1]]),
        _frozen([[1, 0], [1, 0], [1, 1]]),
        _frozen([[1, 1, 1], [1, 0, 0]]),
        _frozen([[1, 1], [0, 1], [0, 1]]),
    ),
}


def rotations(kind: TetrominoType) -> Tuple[Shape, ...]:
    assert kind in ROTATIONS, f"unknown piece kind: {kind!r}"
    return ROTATIONS[kind]


def shape_for(kind: TetrominoType, rotation: int) -> Shape:
    states = rotations(kind)
    return states[rotation % len(states)]


def column_range(shape: Shape, width: int) -> range:
    """Every x offset that keeps the shape's occupied columns inside the grid.

    Derived from the occupied-cell bounds rather than the bounding box, so a
    matrix with empty leading columns may start at a negative offset.
    """
    occupied_cols = np.flatnonzero(np.any(shape != 0, axis=0))
    if occupied_cols.size == 0:
        return range(0)
    left = int(occupied_cols[0])
    right = int(occupied_cols[-1])
    return range(-left, width - right)


@dataclass
class Piece:
    kind: TetrominoType
    rotation: int = 0
    x: int = 0
    y: int = 0

    def shape(self) -> Shape:
        return shape_for(self.kind, self.rotation)

    def moved_to(self, rotation: int, x: int, y: int) -> "Piece":
        return Piece(self.kind, rotation, x, y)

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        s = self.shape()
        h, w = s.shape
        cells: List[Tuple[int, int]] = []
        for dy in range(h):
            for dx in range(w):
                if s[dy, dx]:
                    cells.append((origin_x + dx, origin_y + dy))
        return cells

    def cells(self) -> List[Tuple[int, int]]:
        return self.cells_at(self.x, self.y)
