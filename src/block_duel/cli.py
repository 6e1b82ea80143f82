from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from block_duel.ai.strategy import STRATEGIES, get_strategy, strategy_ids
from block_duel.commentary import CommentaryFeed, LocalCommentator
from block_duel.game.rules import ScoringRules
from block_duel.match import Match
from block_duel.session import GameConfig


def _print_progress(second: int, total: int, match: Match) -> None:
    width = 30
    filled = int(width * second / max(1, total))
    bar = "=" * filled + "." * (width - filled)
    left, right = match.left, match.right
    msg = (f"\r[{bar}] {second}/{total}s  "
           f"{left.strategy.id}={left.score}  {right.strategy.id}={right.score}")
    print(msg, end="", file=sys.stdout, flush=True)


def _print_results(match: Match) -> None:
    print(f"{'strategy':<16}{'score':>8}{'lines':>8}{'pieces':>8}  status")
    for session in match.sessions:
        status = session.game_over_reason.value if session.game_over_reason else "playing"
        print(f"{session.strategy.name:<16}{session.score:>8}{session.lines_cleared_total:>8}"
              f"{session.pieces_placed:>8}  {status}")
    leader = match.summary().leader()
    print(f"leader: {leader or 'tie'}")


def run_headless(match: Match, seconds: int, progress: bool = True) -> Match:
    for second in range(1, seconds + 1):
        match.advance(1000)
        if progress:
            _print_progress(second, seconds, match)
        if match.finished:
            break
    if progress:
        print()
    return match


def build_parser() -> argparse.ArgumentParser:
    ids = list(strategy_ids())
    p = argparse.ArgumentParser(prog="block-duel", description="Two scripted block stackers, side by side.")
    p.add_argument("--left", choices=ids, default=ids[0])
    p.add_argument("--right", choices=ids, default=ids[1])
    p.add_argument("--seconds", type=int, default=60, help="virtual match length for headless runs")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--lines-per-level", type=int, default=None)
    p.add_argument("--view", action="store_true", help="open the pygame viewer")
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--list-strategies", action="store_true")
    p.add_argument("--no-progress", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="[BLOCK_DUEL] %(asctime)s - %(levelname)s - %(message)s")

    if args.list_strategies:
        for s in STRATEGIES:
            print(f"{s.id:<10} {s.name:<16} {s.speed_ms:>4}ms  {s.description}")
        return

    match = Match(
        get_strategy(args.left),
        get_strategy(args.right),
        config=GameConfig(),
        rules=ScoringRules(lines_per_level=args.lines_per_level),
        seed=args.seed,
    )

    if args.view:
        from block_duel.visualization.duel_view import run

        run(match, fps=args.fps, feed=CommentaryFeed(LocalCommentator()))
        return

    run_headless(match, args.seconds, progress=not args.no_progress)
    _print_results(match)


if __name__ == "__main__":  # pragma: no cover
    main()
