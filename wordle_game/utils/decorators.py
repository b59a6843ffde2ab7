"""
Endpoint Decorators

Contains decorators shared by the HTTP controllers.
"""

from functools import wraps
from flask import request, jsonify

from ..errors import GameError
from .game_logger import game_logger


def handle_game_errors(action: str):
    """
    Decorator turning game errors raised by an endpoint into JSON responses.

    GameError subclasses map to their own status code; anything else is
    logged and answered with a 500.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            session_id = kwargs.get('session_id')
            try:
                return f(*args, **kwargs)
            except GameError as e:
                error_response = e.to_dict()
                game_logger.log_server_response(request, action, False, error_response, session_id)
                return jsonify(error_response), e.status_code
            except Exception as e:
                game_logger.log_error(request, e, action, session_id)
                error_response = {
                    'success': False,
                    'error': f'Failed to {action.replace("_", " ")}'
                }
                game_logger.log_server_response(request, action, False, error_response, session_id)
                return jsonify(error_response), 500

        return decorated_function
    return decorator
