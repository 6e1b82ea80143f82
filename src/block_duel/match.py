"""Two sessions side by side, each stepped on its own strategy's cadence."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from block_duel.ai.strategy import Strategy
from block_duel.game.rules import ScoringRules
from block_duel.session import GameConfig, GameSession, SessionSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchSummary:
    left_name: str
    left_score: int
    right_name: str
    right_score: int
    elapsed_seconds: int
    finished: bool

    def leader(self) -> Optional[str]:
        if self.left_score == self.right_score:
            return None
        return self.left_name if self.left_score > self.right_score else self.right_name


class Match:
    """Advances two independent sessions on a virtual millisecond clock.

    Each session is stepped every `strategy.speed_ms`; due steps are processed
    in time order, the left session first on equal times. A paused match
    ignores `advance`. `reset` is only ever applied between steps.
    """

    def __init__(self, left: Strategy, right: Strategy, config: Optional[GameConfig] = None,
                 rules: Optional[ScoringRules] = None, seed: Optional[int] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        left_rng = random.Random(seed)
        right_rng = random.Random(None if seed is None else seed + 1)
        self.sessions: Tuple[GameSession, GameSession] = (
            GameSession(left, self.config, self.rules, rng=left_rng),
            GameSession(right, self.config, self.rules, rng=right_rng),
        )
        self.elapsed_ms = 0
        self.paused = False
        self._next_due: List[int] = [s.strategy.speed_ms for s in self.sessions]

    @property
    def left(self) -> GameSession:
        return self.sessions[0]

    @property
    def right(self) -> GameSession:
        return self.sessions[1]

    @property
    def finished(self) -> bool:
        return all(s.game_over for s in self.sessions)

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused

    def advance(self, ms: int) -> int:
        """Move the clock forward by `ms`; return how many session steps ran."""
        if self.paused or ms <= 0:
            return 0
        target = self.elapsed_ms + int(ms)
        steps = 0
        while True:
            idx = min(range(len(self.sessions)), key=lambda i: self._next_due[i])
            due = self._next_due[idx]
            if due > target:
                break
            self.elapsed_ms = due
            session = self.sessions[idx]
            if not session.game_over:
                session.step()
                steps += 1
            self._next_due[idx] = due + session.strategy.speed_ms
        self.elapsed_ms = target
        return steps

    def reset(self) -> None:
        for session in self.sessions:
            session.reset()
        self.elapsed_ms = 0
        self._next_due = [s.strategy.speed_ms for s in self.sessions]
        logger.info("match reset: %s vs %s", self.left.strategy.name, self.right.strategy.name)

    def snapshots(self) -> Tuple[SessionSnapshot, SessionSnapshot]:
        return self.left.snapshot(), self.right.snapshot()

    def summary(self) -> MatchSummary:
        return MatchSummary(
            left_name=self.left.strategy.name,
            left_score=self.left.score,
            right_name=self.right.strategy.name,
            right_score=self.right.score,
            elapsed_seconds=self.elapsed_ms // 1000,
            finished=self.finished,
        )
