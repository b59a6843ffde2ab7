"""
Wordle Game Server Application Package

Guess-the-word engine with a normal mode and an adversarial hard mode,
served over a small Flask JSON API.
"""

from typing import Optional

from flask import Flask
from flask_cors import CORS
from .config import Config, WORD_LIST, validate_word_list_integrity
from .models.game import GameConfig
from .services.config_manager import ConfigManager
from .services.game_service import GameService
from .services.session_store import SessionStore
from .services.word_validation import WordValidationService
from .utils.game_logger import game_logger


def create_app(config_class=Config,
               session_store: Optional[SessionStore] = None,
               word_validator: Optional[WordValidationService] = None):
    """
    Application factory pattern for creating Flask app instances.
    
    Args:
        config_class: Configuration class to use
        session_store: Store to serve sessions from; built from config if omitted
        word_validator: Dictionary client; built from config if omitted
        
    Returns:
        Flask application instance with all services attached
        
    Raises:
        ValueError: If the built-in word list fails its integrity check
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    # Fail fast on a broken built-in word list
    validate_word_list_integrity(WORD_LIST)
    
    game_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))
    
    # Initialize extensions
    CORS(app)
    
    # Services live on the app instance rather than in module globals
    if session_store is None:
        session_store = SessionStore(
            ttl_seconds=app.config['SESSION_TTL_SECONDS'],
            pool_size=app.config['HARD_MODE_POOL_SIZE']
        )
    if word_validator is None:
        word_validator = WordValidationService(
            api_url=app.config['DICTIONARY_API_URL'],
            timeout=app.config['DICTIONARY_TIMEOUT_SECONDS'],
            max_workers=app.config['DICTIONARY_MAX_WORKERS']
        )
    app.game_service = GameService(session_store)
    app.config_manager = ConfigManager(
        word_validator,
        GameConfig(word_list=tuple(WORD_LIST), max_rounds=app.config['MAX_ROUNDS'])
    )
    
    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.config_controller import config_bp
    
    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(config_bp, url_prefix='/api')
    
    return app
