from __future__ import annotations

from typing import Iterable

from fairrps.commit_reveal import MIN_KEY_BITS, TokenSource
from fairrps.engine import GameEngine
from fairrps.move_selector import MoveSelector
from fairrps.protocol import Challenge, RoundResult
from fairrps.scoreboard import ScoreBoard


class GameSession:
    """One player's game: a single engine plus the running tally.

    The caller owns the session; nothing here is shared between sessions.
    """

    def __init__(
        self,
        moves: Iterable[str],
        *,
        selector: MoveSelector | None = None,
        token_bytes: TokenSource | None = None,
        key_bits: int = MIN_KEY_BITS,
    ) -> None:
        self.engine = GameEngine(moves, selector=selector, token_bytes=token_bytes, key_bits=key_bits)
        self.scoreboard = ScoreBoard()

    @property
    def moves(self) -> tuple[str, ...]:
        return self.engine.moves

    def begin(self) -> Challenge:
        return self.engine.start_round()

    def submit(self, user_move: str) -> RoundResult:
        result = self.engine.submit_move(user_move)
        self.scoreboard.record(result.outcome)
        return result

    def help_table(self) -> str:
        return self.engine.help_table()

    def close(self) -> None:
        self.engine.terminate()

    def resolve_input(self, text: str) -> str | None:
        """Map a menu number (1..N) or an exact move name to a move.

        A string of digits is always a menu number, so a move whose name is a
        number can only be chosen by its position.
        """
        choice = text.strip()
        if choice.isdecimal():
            n = int(choice)
            if 1 <= n <= len(self.moves):
                return self.moves[n - 1]
            return None
        if choice in self.moves:
            return choice
        return None
