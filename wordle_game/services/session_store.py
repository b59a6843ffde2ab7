"""
Session Store

In-memory registry of live game sessions with lazy time-to-live eviction.
"""

import random
import secrets
import threading
import time
from typing import Callable, Dict, List, Optional

from ..config.game_settings import HARD_MODE_POOL_SIZE, SESSION_TTL_SECONDS
from ..errors import NotFoundError
from ..models.game import GameConfig, GameMode
from ..utils.game_logger import game_logger
from .game_session import GameSession


class SessionStore:
    """
    Owns the mapping from session id to GameSession.

    Expired sessions are purged whenever a new session is created; there
    is no background timer. A session expires TTL seconds after it was
    created or last reset.
    """

    def __init__(self,
                 ttl_seconds: int = SESSION_TTL_SECONDS,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.time,
                 pool_size: int = HARD_MODE_POOL_SIZE,
                 id_factory: Callable[[], str] = lambda: secrets.token_urlsafe(16)):
        self.ttl_seconds = ttl_seconds
        self.rng = rng or random.Random()
        self.clock = clock
        self.pool_size = pool_size
        self.id_factory = id_factory
        self._sessions: Dict[str, GameSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def create(self, config: GameConfig, mode: GameMode) -> str:
        """
        Creates a new session and stores it.

        Returns:
            str: Opaque session id

        Raises:
            ConfigError: If the config is invalid
        """
        session = GameSession(
            None, mode, config,
            rng=self.rng, clock=self.clock, pool_size=self.pool_size
        )

        # Id choice and insert share one critical section
        with self._lock:
            session_id = self.id_factory()
            while session_id in self._sessions:
                session_id = self.id_factory()
            session.session_id = session_id
            self._sessions[session_id] = session
        self.purge_expired()
        return session_id

    def get(self, session_id: str) -> GameSession:
        """
        Raises:
            NotFoundError: If the session is unknown or was evicted
        """
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise NotFoundError(session_id)
        return session

    def reset(self, session_id: str, config: GameConfig) -> GameSession:
        """
        Raises:
            NotFoundError: If the session is unknown or was evicted mid-reset
        """
        session = self.get(session_id)
        with session.lock:
            session.reset(config)
        with self._lock:
            if self._sessions.get(session_id) is not session:
                raise NotFoundError(session_id)
        return session

    def remove(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def purge_expired(self) -> List[str]:
        """
        Removes every session older than the TTL.

        Returns:
            List of evicted session ids
        """
        cutoff = self.clock() - self.ttl_seconds
        with self._lock:
            expired = [sid for sid, session in self._sessions.items() if session.created_at < cutoff]
            for session_id in expired:
                del self._sessions[session_id]

        if expired:
            game_logger.log_game_event(None, 'sessions_evicted', evicted_count=len(expired))
        return expired
