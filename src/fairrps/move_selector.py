from __future__ import annotations

import random
from typing import Protocol, Sequence

from fairrps.errors import EmptyMoveListError


class ChoiceSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


class MoveSelector:
    """Picks the computer's move uniformly at random.

    The random source only needs a ``choice`` method, so tests can pass a
    seeded ``random.Random`` or a scripted stand-in.
    """

    def __init__(self, rng: ChoiceSource | None = None) -> None:
        self._rng: ChoiceSource = rng if rng is not None else random.Random()

    def select(self, moves: Sequence[str]) -> str:
        if not moves:
            raise EmptyMoveListError()
        return self._rng.choice(moves)
