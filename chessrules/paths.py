"""Obstruction checks along ranks, files and diagonals."""

from __future__ import annotations

from collections.abc import Iterator

from .board import Board
from .move import Square


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_colinear(source: Square, destination: Square) -> bool:
    d_row = destination.row - source.row
    d_col = destination.col - source.col
    return d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)


def step_toward(source: Square, destination: Square) -> tuple[int, int]:
    return _sign(destination.row - source.row), _sign(destination.col - source.col)


def squares_between(source: Square, destination: Square) -> Iterator[Square]:
    """Yield the squares strictly between two colinear squares, nearest first."""
    d_row, d_col = step_toward(source, destination)
    row, col = source.row + d_row, source.col + d_col
    while (row, col) != (destination.row, destination.col):
        yield Square(row, col)
        row += d_row
        col += d_col


def is_path_clear(board: Board, source: Square, destination: Square) -> bool:
    # Callers check colinearity first; an off-line pair walks off the board and raises.
    for square in squares_between(source, destination):
        if not board.is_empty(square):
            return False
    return True


def is_vertical_step_clear(board: Board, source: Square, destination: Square) -> bool:
    """Clear-path check restricted to a straight move along one file."""
    if source.col != destination.col:
        return False
    return is_path_clear(board, source, destination)
