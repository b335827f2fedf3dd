from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

from fairrps.commit_reveal import verify_commitment

Outcome = Literal["Win", "Lose", "Draw"]

WIN: Final[Outcome] = "Win"
LOSE: Final[Outcome] = "Lose"
DRAW: Final[Outcome] = "Draw"

OUTCOME_MESSAGES: Final[dict[str, str]] = {
    WIN: "You win!",
    LOSE: "You lose!",
    DRAW: "It's a draw!",
}


@dataclass(frozen=True)
class Challenge:
    """What the user sees before choosing a move."""

    round_no: int
    commitment: str


@dataclass(frozen=True)
class RoundResult:
    round_no: int
    user_move: str
    computer_move: str
    outcome: Outcome
    commitment: str
    revealed_key: str

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self.outcome]

    def verify(self) -> bool:
        """Recompute the commitment from the revealed key and computer move."""
        return verify_commitment(
            expected_commitment=self.commitment,
            key=self.revealed_key,
            move=self.computer_move,
        )
