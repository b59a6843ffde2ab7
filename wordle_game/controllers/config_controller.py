"""
Config Controller

Handles HTTP endpoints for the default word list and round limit.
"""

from flask import Blueprint, current_app, request, jsonify

from ..config.game_settings import MAX_ROUNDS_OPTIONS, get_word_statistics
from ..errors import ValidationError
from ..utils.decorators import handle_game_errors
from ..utils.game_logger import game_logger
from ..utils.helpers import get_json_body

config_bp = Blueprint('config', __name__)


def _words_from_body():
    words = get_json_body(request).get('words')
    if not isinstance(words, list) or not words:
        raise ValidationError('Words must be a non-empty list')
    return words


def _config_response(config):
    return {
        'success': True,
        'config': config.to_dict(),
        'word_count': len(config.word_list),
        'max_rounds_options': MAX_ROUNDS_OPTIONS
    }


@config_bp.route('/config', methods=['GET'])
@handle_game_errors('get_config')
def get_config():
    """Current default configuration with word statistics."""
    config = current_app.config_manager.get_config()
    response_data = _config_response(config)
    response_data['statistics'] = get_word_statistics(config.word_list)
    return jsonify(response_data)


@config_bp.route('/config/words', methods=['POST'])
@handle_game_errors('add_words')
def add_words():
    """Extend the word list with dictionary-checked words."""
    words = _words_from_body()
    game_logger.log_user_action(request, 'add_words', word_count=len(words))

    result = current_app.config_manager.add_words(words)
    response_data = result.to_dict()

    game_logger.log_server_response(request, 'add_words', True, response_data)
    return jsonify(response_data)


@config_bp.route('/config/words', methods=['DELETE'])
@handle_game_errors('remove_words')
def remove_words():
    words = _words_from_body()
    game_logger.log_user_action(request, 'remove_words', word_count=len(words))

    config_manager = current_app.config_manager
    removed = config_manager.remove_words(words)
    response_data = {
        'success': True,
        'removed': removed,
        'word_count': config_manager.word_count()
    }

    game_logger.log_server_response(request, 'remove_words', True, response_data)
    return jsonify(response_data)


@config_bp.route('/config/max_rounds', methods=['PUT'])
@handle_game_errors('update_max_rounds')
def update_max_rounds():
    max_rounds = get_json_body(request).get('max_rounds')
    game_logger.log_user_action(request, 'update_max_rounds', max_rounds=max_rounds)

    config = current_app.config_manager.update_max_rounds(max_rounds)
    response_data = _config_response(config)

    game_logger.log_server_response(request, 'update_max_rounds', True, response_data)
    return jsonify(response_data)


@config_bp.route('/config/reset', methods=['POST'])
@handle_game_errors('reset_config')
def reset_config():
    """Restore the built-in word list and round limit."""
    game_logger.log_user_action(request, 'reset_config')

    config = current_app.config_manager.reset_to_default()
    response_data = _config_response(config)

    game_logger.log_server_response(request, 'reset_config', True, response_data)
    return jsonify(response_data)
