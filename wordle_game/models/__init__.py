"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    FeedbackRow, GameConfig, GameMode, GameState, GameStatus, LetterStatus,
    feedback_to_dict, is_valid_word_format, normalize_word
)

__all__ = [
    'FeedbackRow', 'GameConfig', 'GameMode', 'GameState', 'GameStatus', 'LetterStatus',
    'feedback_to_dict', 'is_valid_word_format', 'normalize_word'
]
