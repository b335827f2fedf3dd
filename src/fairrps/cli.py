from __future__ import annotations

import argparse
import logging
import os

from fairrps.commit_reveal import MIN_KEY_BITS, verify_commitment
from fairrps.errors import EntropySourceError, InvalidMoveSetError
from fairrps.logs import setup_logging
from fairrps.outcome_table import OutcomeTable
from fairrps.protocol import RoundResult
from fairrps.session import GameSession

logger = logging.getLogger(__name__)

EXAMPLE = "Example: fairrps play Rock Paper Scissors"
EXIT_WORDS = ("0", "exit")
HELP_WORDS = ("?", "help")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fairrps", description="Provably fair N-move Rock-Paper-Scissors.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log verbosity (default: env FAIRRPS_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    play = sub.add_parser("play", help="Play against the computer")
    play.add_argument("moves", nargs="*", help="Odd number (>=3) of unique moves, in cyclic order")
    play.add_argument(
        "--key-bits",
        type=_key_bits,
        default=_default_key_bits(),
        help=f"HMAC key size in bits, at least {MIN_KEY_BITS} (env FAIRRPS_KEY_BITS)",
    )

    table = sub.add_parser("table", help="Print the win/lose/draw table for a move list")
    table.add_argument("moves", nargs="*")

    verify = sub.add_parser("verify", help="Check a revealed key against a published commitment")
    verify.add_argument(
        "--key",
        required=True,
        help="Revealed key as hex; it is decoded from hex and the raw bytes are the HMAC key",
    )
    verify.add_argument("--move", required=True, help="Computer move that was revealed")
    verify.add_argument("--commitment", required=True, help="HMAC published before your move")

    args = parser.parse_args(argv)
    setup_logging(args.log_level or _default_log_level())

    if args.cmd == "verify":
        if verify_commitment(expected_commitment=args.commitment, key=args.key, move=args.move):
            print("OK: commitment matches the revealed key and move")
            return 0
        print("MISMATCH: commitment does not match the revealed key and move")
        return 1

    if args.cmd == "table":
        print(_build_table(args.moves).format_table())
        return 0

    if args.cmd == "play":
        try:
            session = GameSession(args.moves, key_bits=args.key_bits)
        except InvalidMoveSetError as exc:
            raise SystemExit(_usage_error(exc))
        try:
            _run_game(session)
        except EntropySourceError as exc:
            logger.error("Aborting: %s", exc)
            raise SystemExit(f"Error: {exc}")
        return 0

    raise SystemExit("unhandled command")


def _run_game(session: GameSession) -> None:
    print("Welcome to provably fair Rock-Paper-Scissors!")
    print("Enter '?' or 'help' to see the game rules.")

    while True:
        challenge = session.begin()
        print(f"\nRound {challenge.round_no}")
        print(f"HMAC: {challenge.commitment}")

        while True:
            _print_menu(session.moves)
            try:
                choice = input("Enter your move: ").strip()
            except EOFError:
                choice = "0"

            # "0" is never a menu number and "?" always asks for help; other
            # words only act as commands when no move has that exact name.
            move = None if choice == "?" else session.resolve_input(choice)

            if move is None and choice.lower() in EXIT_WORDS:
                session.close()
                print("\nFinal score:")
                print(session.scoreboard.format_table())
                print("Thanks for playing! Goodbye!")
                return
            if move is None and choice.lower() in HELP_WORDS:
                print("Help:")
                print(session.help_table())
                continue

            if move is None:
                print("Invalid input. Please enter a move number, '?' for help or 0 to exit.")
                continue

            _show_result(session.submit(move))
            break


def _print_menu(moves: tuple[str, ...]) -> None:
    print("Available moves:")
    for n, move in enumerate(moves, start=1):
        print(f"{n} - {move}")
    print("0 - exit")
    print("? - help")


def _show_result(result: RoundResult) -> None:
    print(f"Your move: {result.user_move}")
    print(f"Computer move: {result.computer_move}")
    print(result.message)
    print(f"HMAC key: {result.revealed_key}")


def _build_table(moves: list[str]) -> OutcomeTable:
    try:
        return OutcomeTable.build(moves)
    except InvalidMoveSetError as exc:
        raise SystemExit(_usage_error(exc))


def _usage_error(exc: InvalidMoveSetError) -> str:
    return f"Error: {exc.reason}. Please provide an odd number (>=3) of unique moves.\n{EXAMPLE}"


def _key_bits(value: str) -> int:
    try:
        bits = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if bits < MIN_KEY_BITS or bits % 8:
        raise argparse.ArgumentTypeError(f"must be a multiple of 8 and at least {MIN_KEY_BITS}")
    return bits


def _default_key_bits() -> int:
    value = os.environ.get("FAIRRPS_KEY_BITS")
    if not value:
        return MIN_KEY_BITS
    try:
        return _key_bits(value)
    except argparse.ArgumentTypeError as exc:
        raise SystemExit(f"FAIRRPS_KEY_BITS {exc}")


def _default_log_level() -> str:
    level = (os.environ.get("FAIRRPS_LOG_LEVEL") or "WARNING").upper()
    if level not in LOG_LEVELS:
        raise SystemExit(f"FAIRRPS_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


if __name__ == "__main__":
    raise SystemExit(main())
