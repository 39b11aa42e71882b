from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    level_threshold: int = 10
    score_digits: int = 8

    def score_for_lines(self, lines: int) -> int:
        # Simultaneous clears pay quadratically
        if lines <= 0:
            return 0
        return lines * lines

    def level(self, score: int) -> int:
        return score // self.level_threshold

    def display_score(self, score: int) -> str:
        return f"{score:0{self.score_digits}d}"
