from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ScoringRules:
    # Indexed by lines cleared, multiplied by the current level.
    line_clear_scores: tuple[int, int, int, int, int] = (0, 40, 100, 300, 1200)
    lines_per_level: Optional[int] = None

    def score_for_lines(self, lines: int, level: int = 1) -> int:
        if lines <= 0:
            return 0
        lines = min(lines, len(self.line_clear_scores) - 1)
        return self.line_clear_scores[lines] * level

    def level_for(self, lines_total: int) -> int:
        if not self.lines_per_level:
            return 1
        return 1 + lines_total // self.lines_per_level
