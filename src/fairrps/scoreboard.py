from __future__ import annotations

from dataclasses import dataclass

from fairrps.protocol import DRAW, LOSE, WIN, Outcome


@dataclass
class ScoreBoard:
    """Tally for the current session only; nothing is written to disk."""

    wins: int = 0
    losses: int = 0
    draws: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome == WIN:
            self.wins += 1
        elif outcome == LOSE:
            self.losses += 1
        elif outcome == DRAW:
            self.draws += 1
        else:
            raise ValueError(f"unknown outcome: {outcome!r}")

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.draws

    def format_table(self) -> str:
        if not self.total:
            return "(no games yet)"

        header = f"{'wins':>4}  {'losses':>6}  {'draws':>5}"
        lines = [header, "-" * len(header), f"{self.wins:>4}  {self.losses:>6}  {self.draws:>5}"]
        return "\n".join(lines)
