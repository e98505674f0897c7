"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.board import Board
from chessrules.move import Square
from chessrules.piece import Piece


def _make_board(pieces: dict[str, str]) -> Board:
    board = Board.empty()
    for name, letter in pieces.items():
        board.place(Square.parse(name), Piece.from_letter(letter))
    return board


@pytest.fixture
def make_board() -> Callable[[dict[str, str]], Board]:
    """Build a position from square names mapped to piece letters."""
    return _make_board
