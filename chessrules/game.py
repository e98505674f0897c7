"""Turn control and the per-game session that owns board, turn and selection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .board import Board
from .constants import START_PLACEMENT
from .move import Move, Square
from .movegen import generate_moves, is_legal, legal_destinations
from .piece import Color

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class TurnController:
    current: Color = Color.WHITE

    def advance(self) -> Color:
        self.current = self.current.opposite
        return self.current


class SelectionAction(Enum):
    SELECTED = "selected"
    DESELECTED = "deselected"
    MOVED = "moved"
    IGNORED = "ignored"


@dataclass(frozen=True, slots=True)
class Selection:
    action: SelectionAction
    selected: Square | None = None
    destinations: frozenset[Square] = frozenset()
    move: Move | None = None


@dataclass(slots=True)
class GameSession:
    """One game: its board, whose turn it is and the square currently picked.

    Sessions share nothing, so any number of games can run side by side.
    """

    board: Board = field(default_factory=Board)
    turn: TurnController = field(default_factory=TurnController)
    selected: Square | None = None

    @classmethod
    def from_placement(cls, placement: str = START_PLACEMENT, turn: Color = Color.WHITE) -> GameSession:
        return cls(board=Board(placement), turn=TurnController(turn))

    def current_turn(self) -> Color:
        return self.turn.current

    def advance_turn(self) -> Color:
        return self.turn.advance()

    def reset(self) -> None:
        self.board = Board(START_PLACEMENT)
        self.turn = TurnController()
        self.selected = None

    def is_legal(self, source: Square, destination: Square) -> bool:
        return is_legal(self.board, source, destination)

    def legal_destinations(self, source: Square) -> set[Square]:
        return legal_destinations(self.board, source)

    def generate_moves(self) -> list[Move]:
        return generate_moves(self.board, self.turn.current)

    def highlights(self) -> set[Square]:
        if self.selected is None:
            return set()
        return self.legal_destinations(self.selected)

    def play(self, source: Square, destination: Square) -> Move | None:
        piece = self.board.occupant(source)
        if piece is None or piece.color is not self.turn.current:
            _LOGGER.debug("Rejected %s%s: no %s piece on source", source, destination, self.turn.current.value)
            return None
        if not is_legal(self.board, source, destination):
            _LOGGER.debug("Rejected %s%s: illegal for %s", source, destination, piece.kind.value)
            return None

        move = self.board.apply_move(source, destination)
        self.advance_turn()
        self.selected = None
        _LOGGER.debug("Played %s (%s), %s to move", move, piece.kind.value, self.turn.current.value)
        return move

    def select(self, square: Square) -> Selection:
        piece = self.board.occupant(square)
        owns_square = piece is not None and piece.color is self.turn.current

        if self.selected is None:
            if not owns_square:
                return Selection(SelectionAction.IGNORED)
            return self._select(square)

        if square == self.selected:
            self.selected = None
            return Selection(SelectionAction.DESELECTED)

        move = self.play(self.selected, square)
        if move is not None:
            return Selection(SelectionAction.MOVED, move=move)

        if owns_square:
            return self._select(square)

        self.selected = None
        return Selection(SelectionAction.DESELECTED)

    def _select(self, square: Square) -> Selection:
        self.selected = square
        return Selection(
            SelectionAction.SELECTED,
            selected=square,
            destinations=frozenset(self.legal_destinations(square)),
        )
