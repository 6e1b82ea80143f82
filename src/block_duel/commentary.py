"""Optional match commentary, kept away from simulation state.

A commentator is any callable taking a `MatchSummary` and returning one line of
text. `CommentaryFeed` runs it off the simulation thread and swaps in
`FALLBACK_COMMENTARY` when it raises or takes too long. Each request runs on
its own daemon thread, so a hung commentator never blocks later requests or
interpreter exit.
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Future
from typing import Callable, Optional

from block_duel.match import MatchSummary

logger = logging.getLogger(__name__)

Commentator = Callable[[MatchSummary], str]

FALLBACK_COMMENTARY = "connection lost"
TERMINATED_COMMENTARY = "Simulation terminated. Both subjects failed."
INITIAL_COMMENTARY = "Initializing simulation parameters..."

_SYMMETRY = (
    "Symmetry detected. {left} and {right} stack data within {diff} points of each other.",
    "{elapsed} seconds in, the two programs mirror each other. The margin is only {diff}.",
)
_SUPERIORITY = (
    "{leader} demonstrates a superior algorithm. {trailer} trails by {diff} points.",
    "The calculation is inevitable: {leader} outpaces {trailer} in block alignment by {diff}.",
)
_CONTESTED = (
    "{leader} holds a {diff} point edge. The outcome is not yet computed.",
    "An anomaly persists. {trailer} has not conceded {diff} points to {leader}.",
)


class LocalCommentator:
    """Deterministic phrasing driven by the score gap.

    Close scores get a symmetry line, a wide lead gets a superiority line and
    anything in between is "contested". Phrases rotate with the elapsed time.
    """

    def __init__(self, close_margin: int = 100, wide_margin: int = 500) -> None:
        self.close_margin = close_margin
        self.wide_margin = wide_margin

    def __call__(self, summary: MatchSummary) -> str:
        if summary.finished:
            return TERMINATED_COMMENTARY
        diff = abs(summary.left_score - summary.right_score)
        if summary.left_score >= summary.right_score:
            leader, trailer = summary.left_name, summary.right_name
        else:
            leader, trailer = summary.right_name, summary.left_name

        if diff <= self.close_margin:
            templates = _SYMMETRY
        elif diff >= self.wide_margin:
            templates = _SUPERIORITY
        else:
            templates = _CONTESTED
        template = templates[(summary.elapsed_seconds // 12) % len(templates)]
        return template.format(
            left=summary.left_name,
            right=summary.right_name,
            leader=leader,
            trailer=trailer,
            diff=diff,
            elapsed=summary.elapsed_seconds,
        )


class CommentaryFeed:
    def __init__(self, commentator: Commentator, interval_s: float = 12.0, timeout_s: float = 5.0) -> None:
        self.commentator = commentator
        self.interval_s = float(interval_s)
        self.timeout_s = float(timeout_s)
        self.text = INITIAL_COMMENTARY
        self._pending: Optional[Future] = None
        self._submitted_at = 0.0
        self._last_request: Optional[float] = None

    def due(self, now: Optional[float] = None) -> bool:
        now = time.monotonic() if now is None else now
        if self._pending is not None:
            return False
        return self._last_request is None or now - self._last_request >= self.interval_s

    def _safe_call(self, summary: MatchSummary) -> str:
        try:
            text = self.commentator(summary)
        except Exception:
            logger.warning("commentary generator failed", exc_info=True)
            return FALLBACK_COMMENTARY
        if not text or not text.strip():
            return FALLBACK_COMMENTARY
        return text.strip()

    def _start(self, summary: MatchSummary) -> Future:
        future: Future = Future()

        def run() -> None:
            if future.set_running_or_notify_cancel():
                future.set_result(self._safe_call(summary))

        threading.Thread(target=run, name="commentary", daemon=True).start()
        return future

    def request(self, summary: MatchSummary, now: Optional[float] = None) -> Optional[Future]:
        now = time.monotonic() if now is None else now
        self._last_request = now
        if summary.finished:
            self.text = TERMINATED_COMMENTARY
            return None
        if self._pending is None:
            self._pending = self._start(summary)
            self._submitted_at = now
        return self._pending

    def poll(self, now: Optional[float] = None) -> str:
        now = time.monotonic() if now is None else now
        pending = self._pending
        if pending is None:
            return self.text
        if pending.done():
            self.text = pending.result()
            self._pending = None
        elif now - self._submitted_at >= self.timeout_s:
            # The thread is abandoned; its late result lands on a dropped future.
            logger.warning("commentary timed out after %.1fs", self.timeout_s)
            self.text = FALLBACK_COMMENTARY
            self._pending = None
        return self.text

    def update(self, summary: MatchSummary, now: Optional[float] = None) -> str:
        now = time.monotonic() if now is None else now
        if self.due(now):
            self.request(summary, now)
        return self.poll(now)

    def reset(self, text: str = "System ready.") -> None:
        self._pending = None
        self._last_request = None
        self.text = text

    def close(self) -> None:
        self._pending = None
