"""Move legality rules for a two-player chess-geometry board game."""

from .board import Board, initial_board
from .game import GameSession, Selection, SelectionAction, TurnController
from .move import Move, Square
from .movegen import generate_moves, is_legal, legal_destinations
from .piece import Color, Piece, PieceKind

__all__ = [
    "Board",
    "Color",
    "GameSession",
    "Move",
    "Piece",
    "PieceKind",
    "Selection",
    "SelectionAction",
    "Square",
    "TurnController",
    "generate_moves",
    "initial_board",
    "is_legal",
    "legal_destinations",
]
