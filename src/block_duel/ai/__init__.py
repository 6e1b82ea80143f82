"""Heuristic move selection: board statistics, strategies and placement search."""

from .evaluator import BoardStats, column_heights, evaluate_board
from .strategy import STRATEGIES, Strategy, StrategyWeights, get_strategy, strategy_ids
from .search import Move, enumerate_moves, find_best_move

__all__ = [
    "BoardStats",
    "column_heights",
    "evaluate_board",
    "STRATEGIES",
    "Strategy",
    "StrategyWeights",
    "get_strategy",
    "strategy_ids",
    "Move",
    "enumerate_moves",
    "find_best_move",
]
