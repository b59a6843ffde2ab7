"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LIST, WORD_LENGTH, MAX_ROUNDS, MIN_ROUNDS_LIMIT, MAX_ROUNDS_LIMIT,
    MAX_ROUNDS_OPTIONS, HARD_MODE_POOL_SIZE, SESSION_TTL_SECONDS,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LIST', 'WORD_LENGTH', 'MAX_ROUNDS', 'MIN_ROUNDS_LIMIT', 'MAX_ROUNDS_LIMIT',
    'MAX_ROUNDS_OPTIONS', 'HARD_MODE_POOL_SIZE', 'SESSION_TTL_SECONDS',
    'validate_word_list_integrity', 'get_word_statistics'
]
