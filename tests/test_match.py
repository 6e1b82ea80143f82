from __future__ import annotations

import numpy as np

from block_duel.ai.strategy import get_strategy
from block_duel.match import Match, MatchSummary


def _match(seed: int = 3) -> Match:
    return Match(get_strategy("smith"), get_strategy("neo"), seed=seed)


def test_each_session_steps_on_its_own_cadence():
    match = _match()
    assert match.advance(1200) == 12 + 3
    assert match.left.pieces_placed == 6
    assert match.right.pieces_placed == 1
    assert match.right.active_piece is not None
    assert match.elapsed_ms == 1200


def test_split_advance_matches_single_advance():
    a, b = _match(), _match()
    a.advance(2000)
    b.advance(700)
    b.advance(1300)
    assert a.left.grid == b.left.grid
    assert a.right.grid == b.right.grid
    assert a.elapsed_ms == b.elapsed_ms


def test_sessions_share_no_state():
    match = _match()
    match.advance(3000)
    assert match.left.grid is not match.right.grid
    assert match.left.rng is not match.right.rng


def test_pause_freezes_the_clock():
    match = _match()
    match.pause()
    assert match.advance(5000) == 0
    assert match.elapsed_ms == 0
    assert not match.toggle_pause()
    assert match.advance(100) == 1


def test_reset_clears_sessions_and_clock():
    match = _match()
    match.advance(4000)
    match.reset()
    assert match.elapsed_ms == 0
    for session in match.sessions:
        assert session.score == 0
        assert np.count_nonzero(session.grid.grid) == 0
    assert match.advance(100) == 1


def test_summary():
    match = _match()
    match.left.score = 300
    match.right.score = 40
    match.advance(2500)
    summary = match.summary()
    assert summary.elapsed_seconds == 2
    assert summary.left_name == "Agent Smith"
    assert not summary.finished

    for session in match.sessions:
        session.game_over = True
    assert match.finished
    assert match.summary().finished


def test_leader():
    assert MatchSummary("A", 10, "B", 10, 0, False).leader() is None
    assert MatchSummary("A", 10, "B", 50, 0, False).leader() == "B"
