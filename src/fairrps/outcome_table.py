"""Win/lose/draw relation for an odd-sized list of moves.

Moves are numbered 1..N in the order given. With ``half = N // 2``, move ``i``
wins against move ``j`` when ``j >= i + half``, draws against itself and loses
otherwise. The comparison is on raw indices and does not wrap around, so the
relation is only as fair as the order the caller supplies: moves should be
listed so that each one beats the next ``half`` moves in cyclic order. The
table is built as given and never reordered.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from fairrps.errors import InvalidMoveSetError, UnknownMoveError
from fairrps.protocol import DRAW, LOSE, WIN, Outcome

CORNER_LABEL = "v User | PC >"


def validate_moves(moves: Iterable[str]) -> tuple[str, ...]:
    result = tuple(moves)
    if len(result) < 3:
        raise InvalidMoveSetError(f"need at least 3 moves, got {len(result)}")
    if len(result) % 2 == 0:
        raise InvalidMoveSetError(f"need an odd number of moves, got {len(result)}")
    if any(not m.strip() for m in result):
        raise InvalidMoveSetError("moves must not be blank")

    seen: set[str] = set()
    duplicates: set[str] = set()
    for move in result:
        if move in seen:
            duplicates.add(move)
        seen.add(move)
    if duplicates:
        raise InvalidMoveSetError(f"duplicate move(s): {', '.join(sorted(duplicates))}")
    return result


class OutcomeTable:
    def __init__(self, moves: Sequence[str], grid: dict[tuple[int, int], Outcome]) -> None:
        self._moves = tuple(moves)
        self._index = {move: i for i, move in enumerate(self._moves, start=1)}
        self._grid = grid

    @classmethod
    def build(cls, moves: Iterable[str]) -> "OutcomeTable":
        valid = validate_moves(moves)
        size = len(valid)
        half = size // 2

        grid: dict[tuple[int, int], Outcome] = {}
        for i in range(1, size + 1):
            for j in range(1, size + 1):
                if i == j:
                    grid[(i, j)] = DRAW
                elif j >= i + half:
                    grid[(i, j)] = WIN
                else:
                    grid[(i, j)] = LOSE
        return cls(valid, grid)

    @property
    def moves(self) -> tuple[str, ...]:
        return self._moves

    def index_of(self, move: str) -> int:
        """1-based position of ``move``."""
        try:
            return self._index[move]
        except KeyError:
            raise UnknownMoveError(move) from None

    def resolve(self, move_a: str, move_b: str) -> Outcome:
        """Outcome for ``move_a`` played against ``move_b``."""
        return self._grid[(self.index_of(move_a), self.index_of(move_b))]

    def rows(self) -> list[list[str]]:
        """The relation as an (N+1)x(N+1) grid; row and column 0 hold the moves.

        Cell ``[i][j]`` is the outcome for the move in row ``i`` against the
        move in column ``j``.
        """
        size = len(self._moves)
        header = [CORNER_LABEL, *self._moves]
        table = [header]
        for i in range(1, size + 1):
            table.append([self._moves[i - 1], *(self._grid[(i, j)] for j in range(1, size + 1))])
        return table

    def format_table(self) -> str:
        table = self.rows()
        widths = [max(len(row[col]) for row in table) for col in range(len(table[0]))]

        lines: list[str] = []
        for n, row in enumerate(table):
            lines.append("  ".join(cell.ljust(widths[col]) for col, cell in enumerate(row)).rstrip())
            if n == 0:
                lines.append("-" * len(lines[0]))
        return "\n".join(lines)
