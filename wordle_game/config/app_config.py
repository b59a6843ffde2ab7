"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from . import game_settings

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""
    
    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    
    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    
    # Game Settings
    MAX_ROUNDS = int(os.getenv('MAX_ROUNDS', game_settings.MAX_ROUNDS))
    SESSION_TTL_SECONDS = int(os.getenv('SESSION_TTL_SECONDS', game_settings.SESSION_TTL_SECONDS))
    HARD_MODE_POOL_SIZE = int(os.getenv('HARD_MODE_POOL_SIZE', game_settings.HARD_MODE_POOL_SIZE))
    
    # Dictionary Lookup Settings
    DICTIONARY_API_URL = os.getenv('DICTIONARY_API_URL', 'https://api.dictionaryapi.dev/api/v2/entries/en/')
    DICTIONARY_TIMEOUT_SECONDS = float(os.getenv('DICTIONARY_TIMEOUT_SECONDS', 5))
    DICTIONARY_MAX_WORKERS = int(os.getenv('DICTIONARY_MAX_WORKERS', 8))
    
    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    LOG_DIR = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
