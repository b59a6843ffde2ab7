"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': None
    }


def get_json_body(request_obj) -> Dict[str, Any]:
    """Request JSON body, or an empty dict when absent or not an object."""
    data = request_obj.get_json(silent=True)
    return data if isinstance(data, dict) else {}
