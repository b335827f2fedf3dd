from __future__ import annotations

import pytest

from fairrps.errors import EngineTerminatedError, InvalidMoveError
from fairrps.scoreboard import ScoreBoard
from fairrps.session import GameSession


def test_scoreboard_tally() -> None:
    sb = ScoreBoard()
    assert sb.format_table() == "(no games yet)"

    for outcome in ("Win", "Win", "Lose", "Draw"):
        sb.record(outcome)  # type: ignore[arg-type]
    assert (sb.wins, sb.losses, sb.draws, sb.total) == (2, 1, 1, 4)

    lines = sb.format_table().splitlines()
    assert lines[0].split() == ["wins", "losses", "draws"]
    assert lines[2].split() == ["2", "1", "1"]


def test_scoreboard_rejects_unknown_outcome() -> None:
    with pytest.raises(ValueError):
        ScoreBoard().record("Tie")  # type: ignore[arg-type]


def test_session_records_each_round(rps_moves, forced_selector) -> None:
    session = GameSession(rps_moves, selector=forced_selector("Rock", "Paper"))

    session.begin()
    first = session.submit("Rock")
    session.begin()
    second = session.submit("Rock")

    assert first.outcome == "Draw"
    assert session.scoreboard.total == 2
    assert session.scoreboard.draws == 1
    assert second.computer_move == "Paper"


def test_session_invalid_move_is_not_counted(rps_moves) -> None:
    session = GameSession(rps_moves)
    session.begin()
    with pytest.raises(InvalidMoveError):
        session.submit("Lizard")
    assert session.scoreboard.total == 0
    session.submit("Paper")
    assert session.scoreboard.total == 1


def test_sessions_are_independent(rps_moves) -> None:
    a = GameSession(rps_moves)
    b = GameSession(rps_moves)
    a.begin()
    b.begin()
    a.close()
    with pytest.raises(EngineTerminatedError):
        a.begin()
    b.submit("Rock")
    assert b.scoreboard.total == 1


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1", "Rock"),
        (" 3 ", "Scissors"),
        ("Paper", "Paper"),
        ("0", None),
        ("4", None),
        ("paper", None),
        ("", None),
        ("-1", None),
    ],
)
def test_resolve_input(rps_moves, text: str, expected: str | None) -> None:
    assert GameSession(rps_moves).resolve_input(text) == expected


def test_numbers_always_pick_by_menu_position() -> None:
    session = GameSession(["3", "2", "1"])
    assert session.resolve_input("1") == "3"
    assert session.resolve_input("2") == "2"
    assert session.resolve_input("3") == "1"
    assert session.resolve_input("0") is None
    assert session.resolve_input("4") is None


def test_move_names_that_look_like_commands() -> None:
    session = GameSession(["Help", "Exit", "Rock"])
    assert session.resolve_input("Help") == "Help"
    assert session.resolve_input("Exit") == "Exit"
    assert session.resolve_input("help") is None
