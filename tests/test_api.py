"""API smoke tests for the game session endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.server import app, sessions
from chessrules.constants import START_PLACEMENT


client = TestClient(app)


@pytest.fixture(autouse=True)
def _fresh_sessions():
    sessions.clear()
    yield
    sessions.clear()


def _new_game(**payload) -> dict:
    response = client.post("/games", json=payload)
    assert response.status_code == 200
    return response.json()


def test_root_and_health() -> None:
    root = client.get("/")
    assert root.status_code == 200
    assert root.json()["status"] == "ok"

    health = client.get("/health")
    assert health.status_code == 200
    assert health.json() == {"status": "ok"}


def test_create_and_fetch_game() -> None:
    game = _new_game()
    assert game["placement"] == START_PLACEMENT
    assert game["turn"] == "white"
    assert game["selected"] is None
    assert game["board"][7][4] == {"kind": "king", "color": "white", "glyph": "♔"}
    assert game["board"][4][4] is None

    fetched = client.get(f"/games/{game['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["placement"] == START_PLACEMENT


def test_legal_moves_for_square() -> None:
    game = _new_game()
    response = client.post(f"/games/{game['id']}/legal-moves", json={"square": "b1"})
    assert response.status_code == 200
    assert set(response.json()["destinations"]) == {"a3", "c3"}


def test_move_then_illegal_move() -> None:
    game = _new_game()

    played = client.post(f"/games/{game['id']}/move", json={"source": "e2", "destination": "e4"})
    assert played.status_code == 200
    body = played.json()
    assert body["turn"] == "black"
    assert body["last_move"] == "e2e4"
    assert body["captured"] is None

    rejected = client.post(f"/games/{game['id']}/move", json={"source": "e7", "destination": "e4"})
    assert rejected.status_code == 400
    assert rejected.json()["detail"] == "Illegal move: e7e4"
    assert client.get(f"/games/{game['id']}").json()["turn"] == "black"


def test_select_flow() -> None:
    game = _new_game()
    url = f"/games/{game['id']}/select"

    picked = client.post(url, json={"square": "e2"}).json()
    assert picked["action"] == "selected"
    assert set(picked["destinations"]) == {"e3", "e4"}
    assert picked["game"]["selected"] == "e2"

    moved = client.post(url, json={"square": "e4"}).json()
    assert moved["action"] == "moved"
    assert moved["move"] == "e2e4"
    assert moved["game"]["turn"] == "black"
    assert moved["game"]["highlights"] == []


def test_custom_start_and_reset() -> None:
    game = _new_game(placement="4k3/8/8/8/8/8/8/4K3", turn="black")
    assert game["turn"] == "black"

    reset = client.post(f"/games/{game['id']}/reset")
    assert reset.status_code == 200
    assert reset.json()["placement"] == START_PLACEMENT
    assert reset.json()["turn"] == "white"


def test_delete_game() -> None:
    game = _new_game()
    assert client.delete(f"/games/{game['id']}").status_code == 200
    assert client.get(f"/games/{game['id']}").status_code == 404
    assert client.delete(f"/games/{game['id']}").status_code == 404


def test_unknown_game_is_404() -> None:
    response = client.post("/games/nope/move", json={"source": "e2", "destination": "e4"})
    assert response.status_code == 404


def test_bad_input_is_rejected() -> None:
    game = _new_game()
    assert client.post(f"/games/{game['id']}/legal-moves", json={"square": "z9"}).status_code == 400
    assert client.post(f"/games/{game['id']}/legal-moves", json={}).status_code == 422
    assert client.post("/games", json={"placement": "8/8/8"}).status_code == 400
    assert client.post("/games", json={"turn": "green"}).status_code == 422


def test_stateless_legal_moves() -> None:
    response = client.post("/legal-moves", json={"placement": "8/8/8/8/8/8/8/R7", "square": "a1"})
    assert response.status_code == 200
    destinations = response.json()["destinations"]
    assert len(destinations) == 14
    assert "h1" in destinations and "a8" in destinations


def test_games_are_tracked_in_the_store() -> None:
    assert len(sessions) == 0
    _new_game()
    game = _new_game()
    assert len(sessions) == 2

    client.delete(f"/games/{game['id']}")
    assert len(sessions) == 1
