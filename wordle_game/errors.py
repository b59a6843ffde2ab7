"""
Game Errors

Expected failure outcomes of the game core. Each carries the HTTP status
the transport layer answers with.
"""

from typing import Dict


class GameError(Exception):
    """Base class for all user-facing game errors."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict:
        return {
            'success': False,
            'error': self.message,
            'error_type': type(self).__name__
        }


class ValidationError(GameError):
    """Malformed guess or configuration."""
    status_code = 400


class ConfigError(ValidationError):
    """Invalid game configuration (word list or round limit)."""
    status_code = 400


class NotFoundError(GameError):
    """Unknown or evicted session id."""
    status_code = 404

    def __init__(self, session_id: str):
        super().__init__("Game not found")
        self.session_id = session_id


class TerminalStateError(GameError):
    """Guess submitted after the game ended."""
    status_code = 409

    def __init__(self, message: str = "Game is already over"):
        super().__init__(message)
