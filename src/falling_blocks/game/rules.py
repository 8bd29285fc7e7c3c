from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    points_per_line: int = 100

    def score_for_lines(self, lines: int) -> int:
        # Flat award per row, no multi-line bonus
        if lines <= 0:
            return 0
        return lines * self.points_per_line
