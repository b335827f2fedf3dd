from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from fairrps.move_selector import MoveSelector  # noqa: E402

RPS = ["Rock", "Paper", "Scissors"]


class ScriptedChoice:
    """Stands in for ``random.Random``; returns the scripted moves in order."""

    def __init__(self, *moves: str) -> None:
        self._moves = list(moves)

    def choice(self, seq: Sequence[str]) -> str:
        move = self._moves.pop(0)
        assert move in seq
        return move


def counting_token_bytes():
    calls = {"n": 0}

    def token_bytes(num_bytes: int) -> bytes:
        calls["n"] += 1
        return bytes([calls["n"]]) * num_bytes

    return token_bytes


def expected_outcome(i: int, j: int, size: int) -> str:
    """1-based table rule, written out independently of the implementation."""
    if i == j:
        return "Draw"
    if j >= i + size // 2:
        return "Win"
    return "Lose"


@pytest.fixture
def rps_moves() -> list[str]:
    return list(RPS)


@pytest.fixture
def forced_selector():
    def make(*moves: str) -> MoveSelector:
        return MoveSelector(ScriptedChoice(*moves))

    return make
