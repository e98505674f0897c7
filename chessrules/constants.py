"""Board-wide constants and square helpers."""

from __future__ import annotations

BOARD_SIZE = 8

WHITE_PAWN_ROW = 6
BLACK_PAWN_ROW = 1

START_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

PIECE_LETTERS = {
    "pawn": "p",
    "knight": "n",
    "bishop": "b",
    "rook": "r",
    "queen": "q",
    "king": "k",
}

LETTER_TO_KIND = {v: k for k, v in PIECE_LETTERS.items()}

PIECE_GLYPHS = {
    ("white", "pawn"): "♙",
    ("white", "knight"): "♘",
    ("white", "bishop"): "♗",
    ("white", "rook"): "♖",
    ("white", "queen"): "♕",
    ("white", "king"): "♔",
    ("black", "pawn"): "♟",
    ("black", "knight"): "♞",
    ("black", "bishop"): "♝",
    ("black", "rook"): "♜",
    ("black", "queen"): "♛",
    ("black", "king"): "♚",
}

FILES = "abcdefgh"
RANKS = "87654321"

# Row 0 is rank 8, so names run a8..h8 then a7..h7 and so on.
SQUARES = [f"{f}{r}" for r in RANKS for f in FILES]
SQUARE_TO_INDEX = {sq: idx for idx, sq in enumerate(SQUARES)}


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(row: int, col: int) -> str:
    if not in_bounds(row, col):
        raise ValueError(f"Square out of range: ({row}, {col})")
    return SQUARES[row * BOARD_SIZE + col]


def square_index(square: str) -> tuple[int, int]:
    try:
        index = SQUARE_TO_INDEX[square.strip().lower()]
    except KeyError as exc:
        raise ValueError(f"Invalid square: {square}") from exc
    return divmod(index, BOARD_SIZE)
