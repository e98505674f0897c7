"""FastAPI server exposing game sessions and legality queries."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from chessrules.board import Board
from chessrules.constants import START_PLACEMENT
from chessrules.game import GameSession, Selection, TurnController
from chessrules.move import Square
from chessrules.movegen import legal_destinations
from chessrules.piece import Color, Piece

from .sessions import SessionNotFound, SessionStore

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class NewGameRequest(BaseModel):
    placement: str = Field(default=START_PLACEMENT)
    turn: Color = Field(default=Color.WHITE)


class SquareRequest(BaseModel):
    square: str = Field(min_length=2, max_length=2)


class MoveRequest(BaseModel):
    source: str = Field(min_length=2, max_length=2)
    destination: str = Field(min_length=2, max_length=2)


class PositionRequest(BaseModel):
    placement: str = Field(default=START_PLACEMENT)
    square: str = Field(min_length=2, max_length=2)


app = FastAPI(title="Chess Rules API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

sessions = SessionStore()


def _square(name: str) -> Square:
    try:
        return Square.parse(name)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _board_from_placement(placement: str) -> Board:
    try:
        return Board(placement)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _run(game_id: str, action: Callable[[GameSession], T]) -> T:
    try:
        return sessions.run(game_id, action)
    except SessionNotFound as exc:
        raise HTTPException(status_code=404, detail=f"Unknown game: {game_id}") from exc


def _square_names(squares: Iterable[Square]) -> list[str]:
    return [square.name for square in sorted(squares)]


def _piece_payload(piece: Piece | None) -> dict | None:
    if piece is None:
        return None
    return {"kind": piece.kind.value, "color": piece.color.value, "glyph": piece.glyph}


def _game_payload(game_id: str, session: GameSession) -> dict:
    return {
        "id": game_id,
        "placement": session.board.to_placement(),
        "turn": session.current_turn().value,
        "board": [[_piece_payload(piece) for piece in row] for row in session.board.grid],
        "selected": session.selected.name if session.selected else None,
        "highlights": _square_names(session.highlights()),
    }


def _selection_payload(selection: Selection) -> dict:
    return {
        "action": selection.action.value,
        "selected": selection.selected.name if selection.selected else None,
        "destinations": _square_names(selection.destinations),
        "move": selection.move.uci() if selection.move else None,
    }


@app.get("/")
def root() -> dict[str, str]:
    return {"status": "ok", "service": "chess-rules"}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/games")
def create_game(payload: NewGameRequest | None = None) -> dict:
    payload = payload or NewGameRequest()
    session = GameSession(board=_board_from_placement(payload.placement), turn=TurnController(payload.turn))
    game_id = sessions.create(session)
    return _game_payload(game_id, session)


@app.get("/games/{game_id}")
def get_game(game_id: str) -> dict:
    return _run(game_id, lambda session: _game_payload(game_id, session))


@app.delete("/games/{game_id}")
def delete_game(game_id: str) -> dict[str, str]:
    try:
        sessions.delete(game_id)
    except SessionNotFound as exc:
        raise HTTPException(status_code=404, detail=f"Unknown game: {game_id}") from exc
    return {"status": "deleted"}


@app.post("/games/{game_id}/legal-moves")
def game_legal_moves(game_id: str, payload: SquareRequest) -> dict:
    source = _square(payload.square)
    destinations = _run(game_id, lambda session: session.legal_destinations(source))
    return {"square": source.name, "destinations": _square_names(destinations)}


@app.post("/games/{game_id}/move")
def move(game_id: str, payload: MoveRequest) -> dict:
    source = _square(payload.source)
    destination = _square(payload.destination)

    def play(session: GameSession) -> dict:
        played = session.play(source, destination)
        if played is None:
            _LOGGER.info("Game %s rejected %s%s", game_id, source, destination)
            raise HTTPException(status_code=400, detail=f"Illegal move: {source}{destination}")
        response = _game_payload(game_id, session)
        response["last_move"] = played.uci()
        response["captured"] = _piece_payload(played.captured)
        return response

    return _run(game_id, play)


@app.post("/games/{game_id}/select")
def select(game_id: str, payload: SquareRequest) -> dict:
    square = _square(payload.square)

    def click(session: GameSession) -> dict:
        response = _selection_payload(session.select(square))
        response["game"] = _game_payload(game_id, session)
        return response

    return _run(game_id, click)


@app.post("/games/{game_id}/reset")
def reset(game_id: str) -> dict:
    def restart(session: GameSession) -> dict:
        session.reset()
        return _game_payload(game_id, session)

    return _run(game_id, restart)


@app.post("/legal-moves")
def legal_moves(payload: PositionRequest) -> dict:
    board = _board_from_placement(payload.placement)
    source = _square(payload.square)
    return {"square": source.name, "destinations": _square_names(legal_destinations(board, source))}
