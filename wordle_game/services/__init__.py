"""
Services Package

Contains all business logic and service classes.
"""

from .config_manager import AddWordsResult, ConfigManager
from .game_service import GameService
from .game_session import GameSession
from .narrower import CandidateNarrower, NarrowResult, Partition, narrow
from .scoring import score
from .session_store import SessionStore
from .word_validation import WordValidationResult, WordValidationService

__all__ = [
    'AddWordsResult', 'ConfigManager',
    'GameService', 'GameSession', 'SessionStore',
    'CandidateNarrower', 'NarrowResult', 'Partition', 'narrow', 'score',
    'WordValidationResult', 'WordValidationService'
]
