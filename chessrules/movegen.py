"""Move legality and legal-destination enumeration."""

from __future__ import annotations

from collections.abc import Callable

from .board import Board
from .constants import BLACK_PAWN_ROW, BOARD_SIZE, WHITE_PAWN_ROW
from .move import Move, Square
from .paths import is_colinear, is_path_clear, is_vertical_step_clear
from .piece import Color, Piece, PieceKind

KNIGHT_DELTAS = frozenset({(1, 2), (2, 1)})

ALL_SQUARES = tuple(Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE))


def _deltas(source: Square, destination: Square) -> tuple[int, int]:
    return destination.row - source.row, destination.col - source.col


def _pawn_start_row(color: Color) -> int:
    return WHITE_PAWN_ROW if color is Color.WHITE else BLACK_PAWN_ROW


def _is_legal_pawn(board: Board, piece: Piece, source: Square, destination: Square) -> bool:
    d_row, d_col = _deltas(source, destination)
    forward = piece.color.forward
    target = board.occupant(destination)

    if d_col == 0 and target is None:
        if d_row == forward:
            return True
        if (
            d_row == 2 * forward
            and source.row == _pawn_start_row(piece.color)
            and is_vertical_step_clear(board, source, destination)
        ):
            return True
        return False

    # Diagonal steps only capture; there is no en passant.
    return abs(d_col) == 1 and d_row == forward and target is not None


def _is_legal_rook(board: Board, piece: Piece, source: Square, destination: Square) -> bool:
    if source.row != destination.row and source.col != destination.col:
        return False
    return is_path_clear(board, source, destination)


def _is_legal_knight(board: Board, piece: Piece, source: Square, destination: Square) -> bool:
    d_row, d_col = _deltas(source, destination)
    return (abs(d_row), abs(d_col)) in KNIGHT_DELTAS


def _is_legal_bishop(board: Board, piece: Piece, source: Square, destination: Square) -> bool:
    d_row, d_col = _deltas(source, destination)
    if abs(d_row) != abs(d_col):
        return False
    return is_path_clear(board, source, destination)


def _is_legal_queen(board: Board, piece: Piece, source: Square, destination: Square) -> bool:
    if not is_colinear(source, destination):
        return False
    return is_path_clear(board, source, destination)


def _is_legal_king(board: Board, piece: Piece, source: Square, destination: Square) -> bool:
    # Squares attacked by the opponent are allowed; check is not modelled.
    d_row, d_col = _deltas(source, destination)
    return abs(d_row) <= 1 and abs(d_col) <= 1


RuleFn = Callable[[Board, Piece, Square, Square], bool]

RULES: dict[PieceKind, RuleFn] = {
    PieceKind.PAWN: _is_legal_pawn,
    PieceKind.ROOK: _is_legal_rook,
    PieceKind.KNIGHT: _is_legal_knight,
    PieceKind.BISHOP: _is_legal_bishop,
    PieceKind.QUEEN: _is_legal_queen,
    PieceKind.KING: _is_legal_king,
}


def is_legal(board: Board, source: Square, destination: Square) -> bool:
    """Return whether the piece on ``source`` may move to ``destination``.

    Pure geometry plus occupancy: no check, castling, en passant or promotion.
    An empty source or a zero-length move is never legal.
    """
    piece = board.occupant(source)
    if piece is None or source == destination:
        return False

    target = board.occupant(destination)
    if target is not None and target.color is piece.color:
        return False

    return RULES[piece.kind](board, piece, source, destination)


def legal_destinations(board: Board, source: Square) -> set[Square]:
    return {square for square in ALL_SQUARES if is_legal(board, source, square)}


def generate_moves(board: Board, color: Color) -> list[Move]:
    moves: list[Move] = []
    for source, piece in board.pieces():
        if piece.color is not color:
            continue
        for destination in sorted(legal_destinations(board, source)):
            moves.append(
                Move(
                    source=source,
                    destination=destination,
                    piece=piece,
                    captured=board.occupant(destination),
                )
            )
    return moves
