"""
Game Service

Core operations exposed to the transport layer: create, guess, read,
reset and delete game sessions.
"""

from typing import Tuple

from ..models.game import FeedbackRow, GameConfig, GameMode, GameState
from ..utils.game_logger import game_logger
from .session_store import SessionStore


class GameService:
    """
    Facade over a SessionStore.

    This class handles:
    - Session creation for normal and hard mode
    - Guess submission under the session's lock
    - Public state retrieval without exposing answers to clients
    - Game event logging (wins, losses, answer finalization)
    """

    def __init__(self, store: SessionStore):
        self.store = store

    def create_session(self, mode: GameMode, config: GameConfig, source: str = 'system') -> Tuple[str, GameState]:
        """
        Creates a new game session.

        Raises:
            ConfigError: If the config is invalid
        """
        mode = GameMode(mode)
        session_id = self.store.create(config, mode)
        state = self.get_public_state(session_id)

        game_logger.log_game_event(
            session_id, 'session_created', source,
            mode=mode.value, max_rounds=state.max_rounds, word_count=len(config.word_list)
        )
        return session_id, state

    def submit_guess(self, session_id: str, guess: str, source: str = 'system') -> Tuple[FeedbackRow, GameState]:
        """
        Processes a guess and updates game state.

        Raises:
            NotFoundError: If the session does not exist
            TerminalStateError: If the game is already over
            ValidationError: If the guess is malformed
        """
        session = self.store.get(session_id)
        with session.lock:
            was_finalized = session.answer_finalized
            feedback, state = session.submit_guess(guess)
            now_finalized = session.answer_finalized

        if session.mode == GameMode.HARD and now_finalized and not was_finalized:
            game_logger.log_game_event(session_id, 'answer_finalized', source, round=state.current_round)

        if state.game_over:
            game_logger.log_game_event(
                session_id, 'game_won' if state.won else 'game_lost', source,
                mode=state.mode, rounds_used=state.current_round, answer=state.answer
            )
        return feedback, state

    def get_public_state(self, session_id: str) -> GameState:
        """
        Raises:
            NotFoundError: If the session does not exist
        """
        session = self.store.get(session_id)
        with session.lock:
            return session.public_state()

    def reset_session(self, session_id: str, config: GameConfig, source: str = 'system') -> GameState:
        """
        Raises:
            NotFoundError: If the session does not exist
            ConfigError: If the config is invalid
        """
        config.validate()
        session = self.store.reset(session_id, config)
        with session.lock:
            state = session.public_state()

        game_logger.log_game_event(session_id, 'session_reset', source, mode=state.mode, max_rounds=state.max_rounds)
        return state

    def delete_session(self, session_id: str, source: str = 'system') -> bool:
        deleted = self.store.remove(session_id)
        if deleted:
            game_logger.log_game_event(session_id, 'session_deleted', source)
        return deleted

    @property
    def active_sessions(self) -> int:
        return len(self.store)

    def get_session_config(self, session_id: str) -> GameConfig:
        """Config the session is currently bound to."""
        return self.store.get(session_id).config
