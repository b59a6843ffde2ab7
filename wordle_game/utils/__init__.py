"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import handle_game_errors
from .helpers import get_user_identity, get_json_body
from .game_logger import game_logger

__all__ = ['handle_game_errors', 'get_user_identity', 'get_json_body', 'game_logger']
