from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from block_duel.ai.search import Move, find_best_move
from block_duel.ai.strategy import Strategy
from block_duel.game.grid import BOARD_HEIGHT, BOARD_WIDTH, GameGrid, lock_and_clear
from block_duel.game.pieces import Piece, TetrominoType
from block_duel.game.rules import ScoringRules

logger = logging.getLogger(__name__)


class SessionPhase(Enum):
    EMPTY = "empty"
    ACTIVE = "active"
    GAME_OVER = "game_over"


class GameOverReason(Enum):
    SPAWN_BLOCKED = "spawn_blocked"
    NO_LEGAL_MOVE = "no_legal_move"


@dataclass
class GameConfig:
    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    random_seed: Optional[int] = None
    spawn_y: int = 0

    @property
    def spawn_x(self) -> int:
        return self.width // 2 - 1


@dataclass(frozen=True)
class PlacementOutcome:
    move: Move
    lines_cleared: int
    points: int


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view handed to renderers once per tick."""

    name: str
    grid: np.ndarray
    active_piece: Optional[Piece]
    score: int
    lines: int
    level: int
    game_over: bool
    next_kind: TetrominoType


class GameSession:
    """One scripted player: a grid, its session state, and a strategy.

    Each call to `step` performs one cycle step, either spawning the pending
    piece or resolving the active one with a hard drop at the best-scoring
    placement. Steps run to completion; callers must not interleave them.
    """

    def __init__(self, strategy: Strategy, config: Optional[GameConfig] = None,
                 rules: Optional[ScoringRules] = None, rng: Optional[random.Random] = None) -> None:
        self.strategy = strategy
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = rng or random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.active_piece: Optional[Piece] = None
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_placed = 0
        self.level = 1
        self.game_over = False
        self.game_over_reason: Optional[GameOverReason] = None
        self.next_kind = self._random_kind()

    def reset(self) -> None:
        self.grid.reset()
        self.active_piece = None
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_placed = 0
        self.level = 1
        self.game_over = False
        self.game_over_reason = None
        self.next_kind = self._random_kind()

    @property
    def phase(self) -> SessionPhase:
        if self.game_over:
            return SessionPhase.GAME_OVER
        if self.active_piece is None:
            return SessionPhase.EMPTY
        return SessionPhase.ACTIVE

    def _random_kind(self) -> TetrominoType:
        return self.rng.choice(list(TetrominoType))

    def _end(self, reason: GameOverReason) -> None:
        self.game_over = True
        self.game_over_reason = reason
        self.active_piece = None
        logger.info("%s: game over (%s) score=%d lines=%d",
                    self.strategy.name, reason.value, self.score, self.lines_cleared_total)

    def spawn(self) -> bool:
        if self.game_over or self.active_piece is not None:
            return False
        piece = Piece(kind=self.next_kind, rotation=0, x=self.config.spawn_x, y=self.config.spawn_y)
        # Immediate collision check: if overlaps, game over
        if not self.grid.is_valid_placement(piece.shape(), piece.x, piece.y):
            self._end(GameOverReason.SPAWN_BLOCKED)
            return False
        self.active_piece = piece
        self.next_kind = self._random_kind()
        logger.debug("%s: spawned %s, next %s", self.strategy.name, piece.kind.name, self.next_kind.name)
        return True

    def resolve(self) -> Optional[PlacementOutcome]:
        if self.game_over or self.active_piece is None:
            return None
        piece = self.active_piece
        move = find_best_move(self.grid, piece.kind, self.strategy, start_y=piece.y)
        if move is None:
            self._end(GameOverReason.NO_LEGAL_MOVE)
            return None

        final = piece.moved_to(move.rotation, move.x, move.y)
        self.grid, lines = lock_and_clear(self.grid, final)
        points = self.rules.score_for_lines(lines, self.level)
        self.score += points
        self.lines_cleared_total += lines
        self.pieces_placed += 1
        self.level = self.rules.level_for(self.lines_cleared_total)
        self.active_piece = None
        logger.debug("%s: placed %s rot=%d x=%d y=%d lines=%d points=%d",
                     self.strategy.name, piece.kind.name, move.rotation, move.x, move.y, lines, points)
        return PlacementOutcome(move=move, lines_cleared=lines, points=points)

    def step(self) -> SessionPhase:
        if self.game_over:
            return SessionPhase.GAME_OVER
        if self.active_piece is None:
            self.spawn()
        else:
            self.resolve()
        return self.phase

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for display
        state = self.grid.clone_state()
        if self.active_piece is not None and not self.game_over:
            for x, y in self.active_piece.cells():
                if self.grid.is_inside(x, y):
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -int(self.active_piece.kind)
        return state

    def snapshot(self) -> SessionSnapshot:
        active = self.active_piece
        grid = self.get_state()
        grid.setflags(write=False)
        return SessionSnapshot(
            name=self.strategy.name,
            grid=grid,
            active_piece=None if active is None else active.moved_to(active.rotation, active.x, active.y),
            score=self.score,
            lines=self.lines_cleared_total,
            level=self.level,
            game_over=self.game_over,
            next_kind=self.next_kind,
        )
