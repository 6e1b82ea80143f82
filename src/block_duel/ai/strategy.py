"""Named weightings of board statistics, plus how often each one moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .evaluator import BoardStats


@dataclass(frozen=True)
class StrategyWeights:
    aggregate_height: float
    complete_lines: float
    holes: float
    bumpiness: float


@dataclass(frozen=True)
class Strategy:
    id: str
    name: str
    description: str
    speed_ms: int
    weights: StrategyWeights

    def __post_init__(self) -> None:
        assert self.speed_ms > 0, f"strategy {self.id!r} needs a positive speed_ms"

    def score(self, stats: BoardStats) -> float:
        w = self.weights
        return (
            stats.aggregate_height * w.aggregate_height
            + stats.complete_lines * w.complete_lines
            + stats.holes * w.holes
            + stats.bumpiness * w.bumpiness
        )


STRATEGIES: Tuple[Strategy, ...] = (
    Strategy(
        id="architect",
        name="The Architect",
        description="Balanced. Prioritizes a clean board structure.",
        speed_ms=300,
        weights=StrategyWeights(aggregate_height=-0.5, complete_lines=0.76, holes=-0.36, bumpiness=-0.18),
    ),
    Strategy(
        id="smith",
        name="Agent Smith",
        description="Aggressive. Extremely fast, hates holes, ignores height.",
        speed_ms=100,
        weights=StrategyWeights(aggregate_height=-0.1, complete_lines=0.5, holes=-0.9, bumpiness=-0.3),
    ),
    Strategy(
        id="neo",
        name="The One",
        description="High Risk. Stacks high to get multi-line clears.",
        speed_ms=400,
        weights=StrategyWeights(aggregate_height=-0.2, complete_lines=1.5, holes=-0.4, bumpiness=-0.1),
    ),
    Strategy(
        id="oracle",
        name="The Oracle",
        description="Predictive. Calculates optimal bumpiness.",
        speed_ms=200,
        weights=StrategyWeights(aggregate_height=-0.5, complete_lines=0.8, holes=-0.5, bumpiness=-0.8),
    ),
)

_BY_ID: Dict[str, Strategy] = {s.id: s for s in STRATEGIES}


def strategy_ids() -> Tuple[str, ...]:
    return tuple(_BY_ID)


def get_strategy(strategy_id: str) -> Strategy:
    try:
        return _BY_ID[strategy_id]
    except KeyError:
        raise KeyError(f"unknown strategy {strategy_id!r}; expected one of {', '.join(_BY_ID)}") from None
