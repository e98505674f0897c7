"""Square coordinates and the transient move record."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import in_bounds, square_index, square_name
from .piece import Piece


@dataclass(frozen=True, slots=True, order=True)
class Square:
    row: int
    col: int

    def __post_init__(self) -> None:
        if not in_bounds(self.row, self.col):
            raise ValueError(f"Square out of range: ({self.row}, {self.col})")

    @classmethod
    def parse(cls, name: str) -> Square:
        row, col = square_index(name)
        return cls(row, col)

    @property
    def name(self) -> str:
        return square_name(self.row, self.col)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Move:
    source: Square
    destination: Square
    piece: Piece
    captured: Piece | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def uci(self) -> str:
        return f"{self.source.name}{self.destination.name}"

    def __str__(self) -> str:
        return self.uci()


def parse_uci(text: str) -> tuple[Square, Square]:
    move = text.strip().lower()
    if len(move) != 4:
        raise ValueError(f"Invalid move: {text}")
    return Square.parse(move[:2]), Square.parse(move[2:])
