# ruff: noqa: T201

import argparse
import logging

from tic_tac_toe_engine.board import Position
from tic_tac_toe_engine.game import Draw, Game, MoveOutcome, NoChange, Switch, Win


def main(argv: list[str] | None = None) -> None:
    parser, args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    positions: list[Position] = []
    for token in args.moves:
        try:
            positions.append(_parse_position(token))
        except ValueError as e:
            parser.error(str(e))

    game = Game()
    for position in positions:
        outcome = game.play(position)
        col, row = position
        print(f"{col},{row} -> {describe_outcome(outcome)}")
        if args.reset_after_end and not game.ongoing:
            game.reset()

    record = game.record
    print(f"X wins: {record.x_wins}, O wins: {record.o_wins}, draws: {record.draws}")


def describe_outcome(outcome: MoveOutcome) -> str:
    match outcome:
        case Win(player):
            return f"Win({player.value})"
        case Draw():
            return "Draw"
        case Switch():
            return "Switch"
        case NoChange():
            return "NoChange"


def _parse_position(token: str) -> Position:
    parts = token.split(",")
    if len(parts) != 2:  # noqa: PLR2004
        msg = f"Invalid move {token!r}: expected COL,ROW"
        raise ValueError(msg)
    try:
        col, row = (int(part) for part in parts)
    except ValueError:
        msg = f"Invalid move {token!r}: coordinates must be integers"
        raise ValueError(msg) from None
    return col, row


def _parse_args(argv: list[str] | None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(
        prog="tic-tac-toe-engine",
        description="Replay a sequence of moves and print the outcome of each one.",
    )

    parser.add_argument("moves", nargs="*", metavar="COL,ROW", help="0-indexed column and row of each move")
    parser.add_argument(
        "--reset-after-end",
        action="store_true",
        help="start a new round after each win or draw, keeping the record",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")

    args = parser.parse_args(argv)
    return parser, args


if __name__ == "__main__":
    main()
