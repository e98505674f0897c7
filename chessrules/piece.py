"""Piece kinds, colors and the immutable piece value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import LETTER_TO_KIND, PIECE_GLYPHS, PIECE_LETTERS


class Color(Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """Row delta of a pawn step; White advances toward row 0."""
        return -1 if self is Color.WHITE else 1


class PieceKind(Enum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


@dataclass(frozen=True, slots=True)
class Piece:
    kind: PieceKind
    color: Color

    @classmethod
    def from_letter(cls, letter: str) -> Piece:
        kind = LETTER_TO_KIND.get(letter.lower())
        if kind is None:
            raise ValueError(f"Invalid piece symbol: {letter}")
        color = Color.WHITE if letter.isupper() else Color.BLACK
        return cls(PieceKind(kind), color)

    @property
    def letter(self) -> str:
        letter = PIECE_LETTERS[self.kind.value]
        return letter.upper() if self.color is Color.WHITE else letter

    @property
    def glyph(self) -> str:
        return PIECE_GLYPHS[(self.color.value, self.kind.value)]

    def __str__(self) -> str:
        return self.letter
