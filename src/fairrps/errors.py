"""Error taxonomy for the game core.

Every failure the engine can report has its own class so callers can tell them
apart. Construction errors are fatal; move and protocol errors leave the engine
untouched and the caller may retry.
"""
from __future__ import annotations


class GameError(Exception):
    """Base class for every error raised by fairrps."""


class InvalidMoveSetError(GameError, ValueError):
    """The move list is too short, has an even length, or repeats a move.

    Blank or whitespace-only move names are rejected as well, which is stricter
    than the plain odd-length-and-unique rule.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid move set: {reason}")
        self.reason = reason


class EntropySourceError(GameError):
    """The secure random source could not produce a key."""


class EmptyMoveListError(GameError):
    """A move was requested from an empty list."""

    def __init__(self) -> None:
        super().__init__("cannot select a move from an empty list")


class MoveError(GameError, ValueError):
    """Base for errors about a single move token."""

    def __init__(self, move: str, message: str) -> None:
        super().__init__(message)
        self.move = move


class InvalidMoveError(MoveError):
    """The user submitted a move that is not part of the game."""

    def __init__(self, move: str) -> None:
        super().__init__(move, f"invalid move: {move!r}")


class UnknownMoveError(MoveError):
    """A lookup was made for a move the outcome table does not know."""

    def __init__(self, move: str) -> None:
        super().__init__(move, f"unknown move: {move!r}")


class ProtocolError(GameError):
    """Engine calls were made in the wrong order."""


class RoundInProgressError(ProtocolError):
    def __init__(self, round_no: int) -> None:
        super().__init__(f"round {round_no} is still waiting for a move")
        self.round_no = round_no


class NoRoundInProgressError(ProtocolError):
    def __init__(self) -> None:
        super().__init__("no round in progress; call start_round() first")


class EngineTerminatedError(ProtocolError):
    def __init__(self) -> None:
        super().__init__("engine has been terminated")
