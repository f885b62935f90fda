from __future__ import annotations

from dataclasses import dataclass

from .observable import Observable


@dataclass
class ScoringRules:
    score_per_line: int = 50
    manual_down_score: int = 1

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        # Quadratic: clearing several rows at once pays more than one at a time.
        return self.score_per_line * lines * lines


class Score:
    def __init__(self) -> None:
        self.property: Observable[int] = Observable(0)

    @property
    def value(self) -> int:
        return self.property.value

    def add(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"score only grows, got {points}")
        if points:
            self.property.set(self.property.value + points)

    def reset(self) -> None:
        self.property.set(0)
