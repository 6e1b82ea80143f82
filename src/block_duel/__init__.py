"""Block Duel: two scripted falling-block players competing side by side.

Exports the session-level API:
- GameSession: One player's grid, score and spawn/resolve cycle
- Match: Two sessions driven on their own strategy cadences
- STRATEGIES / get_strategy: Built-in heuristic weightings
"""

from .ai.strategy import STRATEGIES, Strategy, StrategyWeights, get_strategy
from .session import GameConfig, GameOverReason, GameSession, SessionPhase, SessionSnapshot
from .match import Match, MatchSummary

__all__ = [
    "STRATEGIES",
    "Strategy",
    "StrategyWeights",
    "get_strategy",
    "GameConfig",
    "GameOverReason",
    "GameSession",
    "SessionPhase",
    "SessionSnapshot",
    "Match",
    "MatchSummary",
]
