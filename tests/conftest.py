from __future__ import annotations

import numpy as np
import pytest

from block_duel.ai.strategy import Strategy, StrategyWeights, get_strategy
from block_duel.game.grid import GameGrid


def grid_with_rows(*filled, width: int = 10, height: int = 20, value: int = 1) -> GameGrid:
    """Grid whose listed rows are filled; a row may be given as (row, cols)."""
    cells = np.zeros((height, width), dtype=np.int8)
    for row_spec in filled:
        if isinstance(row_spec, tuple):
            row, cols = row_spec
            cells[row, list(cols)] = value
        else:
            cells[row_spec, :] = value
    return GameGrid.from_array(cells)


@pytest.fixture
def architect() -> Strategy:
    return get_strategy("architect")


@pytest.fixture
def line_hunter() -> Strategy:
    return Strategy(
        id="line_hunter",
        name="Line Hunter",
        description="Clears rows above all else.",
        speed_ms=100,
        weights=StrategyWeights(aggregate_height=-0.1, complete_lines=10.0, holes=-0.5, bumpiness=-0.1),
    )


@pytest.fixture
def indifferent() -> Strategy:
    return Strategy(
        id="flat",
        name="Indifferent",
        description="Every board scores zero.",
        speed_ms=100,
        weights=StrategyWeights(aggregate_height=0.0, complete_lines=0.0, holes=0.0, bumpiness=0.0),
    )
