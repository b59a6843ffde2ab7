"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, current_app, request, jsonify

from ..errors import ValidationError
from ..models.game import GameConfig, GameMode, feedback_to_dict
from ..utils.decorators import handle_game_errors
from ..utils.game_logger import game_logger
from ..utils.helpers import get_json_body

game_bp = Blueprint('game', __name__)


def _parse_mode(raw) -> GameMode:
    try:
        return GameMode(raw)
    except ValueError:
        raise ValidationError('Invalid game mode. Must be "normal" or "hard"') from None


@game_bp.route('/game', methods=['POST'])
@handle_game_errors('create_session')
def create_session():
    """Create a new game session."""
    data = get_json_body(request)
    mode = _parse_mode(data.get('mode', GameMode.NORMAL.value))

    # Log user action
    game_logger.log_user_action(request, 'create_session', mode=mode.value)

    config = GameConfig.from_dict(data.get('config'), default=current_app.config_manager.get_config())
    session_id, state = current_app.game_service.create_session(mode, config, request.remote_addr or 'unknown')

    response_data = {
        'success': True,
        'session_id': session_id,
        'state': state.to_dict()
    }

    game_logger.log_server_response(
        request, 'create_session', True, response_data, session_id,
        max_rounds=state.max_rounds
    )
    return jsonify(response_data), 201


@game_bp.route('/game/<session_id>/state', methods=['GET'])
@handle_game_errors('get_state')
def get_state(session_id):
    """Get current game state."""
    game_logger.log_user_action(request, 'get_state', session_id)

    state = current_app.game_service.get_public_state(session_id)
    response_data = {
        'success': True,
        'state': state.to_dict()
    }

    game_logger.log_server_response(
        request, 'get_state', True, response_data, session_id,
        current_round=state.current_round, game_over=state.game_over
    )
    return jsonify(response_data)


@game_bp.route('/game/<session_id>/guess', methods=['POST'])
@handle_game_errors('submit_guess')
def submit_guess(session_id):
    """Submit a guess for validation and evaluation."""
    data = get_json_body(request)
    guess = data.get('guess')
    if not guess or not isinstance(guess, str):
        raise ValidationError('Guess is required')

    game_logger.log_user_action(
        request, 'submit_guess', session_id,
        guess=guess, guess_length=len(guess)
    )

    feedback, state = current_app.game_service.submit_guess(session_id, guess, request.remote_addr or 'unknown')
    response_data = {
        'success': True,
        'result': feedback_to_dict(feedback),
        'state': state.to_dict()
    }

    game_logger.log_server_response(
        request, 'submit_guess', True, response_data, session_id,
        round=state.current_round, game_over=state.game_over
    )
    return jsonify(response_data)


@game_bp.route('/game/<session_id>', methods=['PUT'])
@handle_game_errors('reset_session')
def reset_session(session_id):
    """Reset a session with a new (or the current) configuration."""
    data = get_json_body(request)
    game_logger.log_user_action(request, 'reset_session', session_id)

    game_service = current_app.game_service
    config = GameConfig.from_dict(data.get('config'), default=game_service.get_session_config(session_id))
    state = game_service.reset_session(session_id, config, request.remote_addr or 'unknown')

    response_data = {
        'success': True,
        'state': state.to_dict()
    }
    game_logger.log_server_response(request, 'reset_session', True, response_data, session_id)
    return jsonify(response_data)


@game_bp.route('/game/<session_id>', methods=['DELETE'])
@handle_game_errors('delete_session')
def delete_session(session_id):
    """Delete a game session."""
    game_logger.log_user_action(request, 'delete_session', session_id)

    success = current_app.game_service.delete_session(session_id, request.remote_addr or 'unknown')
    response_data = {'success': success}

    game_logger.log_server_response(request, 'delete_session', success, response_data, session_id)
    return jsonify(response_data), 200 if success else 404


@game_bp.route('/health', methods=['GET'])
@handle_game_errors('health_check')
def health_check():
    """Health check endpoint."""
    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'active_sessions': current_app.game_service.active_sessions,
        'word_count': current_app.config_manager.word_count(),
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
