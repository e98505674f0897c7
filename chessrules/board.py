"""Board state: an 8x8 occupancy grid with no rules of its own."""

from __future__ import annotations

from collections.abc import Iterator

from .constants import BOARD_SIZE, START_PLACEMENT
from .move import Move, Square
from .piece import Piece


class Board:
    __slots__ = ("grid",)

    def __init__(self, placement: str = START_PLACEMENT):
        self.grid: list[list[Piece | None]] = []
        self.set_placement(placement)

    @classmethod
    def empty(cls) -> Board:
        return cls("8/8/8/8/8/8/8/8")

    @classmethod
    def from_placement(cls, placement: str) -> Board:
        return cls(placement)

    def reset(self) -> None:
        self.grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def set_placement(self, placement: str) -> None:
        self.reset()
        ranks = placement.strip().split("/")
        if len(ranks) != BOARD_SIZE:
            raise ValueError(f"Invalid board placement: {placement}")

        for row_idx, rank in enumerate(ranks):
            col_idx = 0
            for ch in rank:
                if ch.isdigit():
                    col_idx += int(ch)
                    continue
                if col_idx >= BOARD_SIZE:
                    raise ValueError(f"Invalid rank in placement: {rank}")
                self.grid[row_idx][col_idx] = Piece.from_letter(ch)
                col_idx += 1
            if col_idx != BOARD_SIZE:
                raise ValueError(f"Invalid rank in placement: {rank}")

    def to_placement(self) -> str:
        ranks = []
        for row in self.grid:
            text = ""
            empty = 0
            for piece in row:
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    text += str(empty)
                    empty = 0
                text += piece.letter
            if empty:
                text += str(empty)
            ranks.append(text)
        return "/".join(ranks)

    def occupant(self, square: Square) -> Piece | None:
        return self.grid[square.row][square.col]

    def is_empty(self, square: Square) -> bool:
        return self.grid[square.row][square.col] is None

    def place(self, square: Square, piece: Piece) -> None:
        self.grid[square.row][square.col] = piece

    def clear(self, square: Square) -> None:
        self.grid[square.row][square.col] = None

    def apply_move(self, source: Square, destination: Square) -> Move:
        """Relocate the piece on ``source``; whatever stood on ``destination`` is gone.

        Legality is the caller's business and is not checked here.
        """
        piece = self.occupant(source)
        if piece is None:
            raise ValueError(f"No piece on {source.name}")

        captured = self.occupant(destination)
        self.clear(source)
        self.place(destination, piece)
        return Move(source=source, destination=destination, piece=piece, captured=captured)

    def pieces(self) -> Iterator[tuple[Square, Piece]]:
        for row_idx, row in enumerate(self.grid):
            for col_idx, piece in enumerate(row):
                if piece is not None:
                    yield Square(row_idx, col_idx), piece

    def copy(self) -> Board:
        clone = Board.empty()
        clone.grid = [list(row) for row in self.grid]
        return clone

    def debug_state(self) -> tuple:
        return tuple(tuple(row) for row in self.grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __str__(self) -> str:
        rows = []
        for row in self.grid:
            rows.append(" ".join("." if piece is None else piece.letter for piece in row))
        return "\n".join(rows)


def initial_board() -> Board:
    return Board(START_PLACEMENT)
