"""Command-line utilities for the move legality rules."""

from __future__ import annotations

import argparse
import logging
import sys

from chessrules.board import Board
from chessrules.constants import START_PLACEMENT
from chessrules.game import GameSession
from chessrules.move import Square, parse_uci
from chessrules.movegen import legal_destinations


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Chess movement rules utilities")
    parser.add_argument("--placement", default=START_PLACEMENT, help="Board placement (FEN piece field)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=False)

    moves_parser = subparsers.add_parser("moves", help="List legal destinations of a piece")
    moves_parser.add_argument("square", help="Square of the piece, e.g. e2")

    play_parser = subparsers.add_parser("play", help="Play moves from the placement, White first")
    play_parser.add_argument("moves", nargs="+", help="Moves such as e2e4")

    return parser


def run(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        board = Board(args.placement)
    except ValueError as exc:
        parser.error(str(exc))

    if args.command == "moves":
        try:
            source = Square.parse(args.square)
        except ValueError as exc:
            parser.error(str(exc))
        print(" ".join(square.name for square in sorted(legal_destinations(board, source))))
        return 0

    if args.command == "play":
        session = GameSession(board=board)
        for text in args.moves:
            try:
                source, destination = parse_uci(text)
            except ValueError as exc:
                parser.error(str(exc))
            if session.play(source, destination) is None:
                print(f"Illegal move: {text}", file=sys.stderr)
                print(session.board)
                return 1
        print(session.board)
        print(f"{session.current_turn().value} to move")
        return 0

    print(board)
    return 0


if __name__ == "__main__":
    sys.exit(run())
