from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable

from fairrps.commit_reveal import MIN_KEY_BITS, TokenSource, compute_commitment, generate_key
from fairrps.errors import (
    EngineTerminatedError,
    InvalidMoveError,
    NoRoundInProgressError,
    RoundInProgressError,
)
from fairrps.move_selector import MoveSelector
from fairrps.outcome_table import OutcomeTable
from fairrps.protocol import Challenge, RoundResult

logger = logging.getLogger(__name__)


class EngineState(enum.Enum):
    IDLE = "idle"
    AWAITING_MOVE = "awaiting_move"
    RESOLVED = "resolved"
    TERMINATED = "terminated"


@dataclass
class _OpenRound:
    round_no: int
    key: str
    computer_move: str
    commitment: str


class GameEngine:
    """Runs one commit/reveal round at a time against a fixed move list.

    ``start_round`` commits to the computer's move and publishes only the
    commitment. ``submit_move`` resolves the round and reveals the key and the
    computer's move. Rounds never share a key or a move.

    Not safe for concurrent use; give each session its own engine.
    """

    def __init__(
        self,
        moves: Iterable[str],
        *,
        selector: MoveSelector | None = None,
        token_bytes: TokenSource | None = None,
        key_bits: int = MIN_KEY_BITS,
    ) -> None:
        self._table = OutcomeTable.build(moves)
        self._selector = selector if selector is not None else MoveSelector()
        self._token_bytes = token_bytes
        self._key_bits = key_bits
        self._state = EngineState.IDLE
        self._round: _OpenRound | None = None
        self._round_no = 0

        logger.debug("Engine ready with %d moves", len(self._table.moves))

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def moves(self) -> tuple[str, ...]:
        return self._table.moves

    @property
    def table(self) -> OutcomeTable:
        return self._table

    @property
    def round_no(self) -> int:
        return self._round_no

    def start_round(self) -> Challenge:
        self._ensure_running()
        if self._round is not None:
            raise RoundInProgressError(self._round.round_no)

        key = generate_key(self._key_bits, token_bytes=self._token_bytes)
        computer_move = self._selector.select(self._table.moves)
        commitment = compute_commitment(key=key, move=computer_move)

        self._round_no += 1
        self._round = _OpenRound(
            round_no=self._round_no,
            key=key,
            computer_move=computer_move,
            commitment=commitment,
        )
        self._state = EngineState.AWAITING_MOVE
        logger.info("Round %d started, commitment %s", self._round_no, commitment)
        return Challenge(round_no=self._round_no, commitment=commitment)

    def submit_move(self, user_move: str) -> RoundResult:
        self._ensure_running()
        current = self._round
        if current is None:
            raise NoRoundInProgressError()
        if user_move not in self._table.moves:
            logger.debug("Round %d: rejected move %r", current.round_no, user_move)
            raise InvalidMoveError(user_move)

        outcome = self._table.resolve(user_move, current.computer_move)
        result = RoundResult(
            round_no=current.round_no,
            user_move=user_move,
            computer_move=current.computer_move,
            outcome=outcome,
            commitment=current.commitment,
            revealed_key=current.key,
        )

        self._round = None
        self._state = EngineState.RESOLVED
        logger.info("Round %d resolved: %s vs %s -> %s", result.round_no, user_move, result.computer_move, outcome)
        return result

    def help_table(self) -> str:
        self._ensure_running()
        return self._table.format_table()

    def terminate(self) -> None:
        self._ensure_running()
        if self._round is not None:
            logger.info("Round %d abandoned on terminate", self._round.round_no)
        self._round = None
        self._state = EngineState.TERMINATED

    def _ensure_running(self) -> None:
        if self._state is EngineState.TERMINATED:
            raise EngineTerminatedError()
