"""In-memory store of running game sessions."""

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable
from typing import TypeVar

from chessrules.game import GameSession

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

MAX_SESSIONS = 1000


class SessionNotFound(KeyError):
    pass


class SessionStore:
    """Holds one GameSession per game id; calls on a session run one at a time.

    Once ``max_sessions`` games exist, creating another drops the oldest.
    """

    def __init__(self, max_sessions: int = MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1")
        self.max_sessions = max_sessions
        self._sessions: dict[str, GameSession] = {}
        self._lock = threading.Lock()

    def create(self, session: GameSession) -> str:
        game_id = uuid.uuid4().hex
        evicted: list[str] = []
        with self._lock:
            while len(self._sessions) >= self.max_sessions:
                oldest = next(iter(self._sessions))
                del self._sessions[oldest]
                evicted.append(oldest)
            self._sessions[game_id] = session
        for old_id in evicted:
            _LOGGER.info("Evicted game %s", old_id)
        _LOGGER.info("Created game %s", game_id)
        return game_id

    def run(self, game_id: str, action: Callable[[GameSession], T]) -> T:
        with self._lock:
            session = self._sessions.get(game_id)
            if session is None:
                raise SessionNotFound(game_id)
            return action(session)

    def delete(self, game_id: str) -> None:
        with self._lock:
            if self._sessions.pop(game_id, None) is None:
                raise SessionNotFound(game_id)
        _LOGGER.info("Deleted game %s", game_id)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
