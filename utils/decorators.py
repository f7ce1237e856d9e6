"""
Decorators Module - Authentication and authorization decorators
"""

from functools import wraps
from flask import current_app, jsonify

from .session import AUTHENTICATED_ADMIN, get_session_state


def admin_required(f):
    """Decorator to require an admin session on API writes

    Only enforced when REQUIRE_ADMIN_FOR_WRITES is set, so the public
    content API keeps working unauthenticated in development.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if current_app.config.get('REQUIRE_ADMIN_FOR_WRITES'):
            if get_session_state() != AUTHENTICATED_ADMIN:
                current_app.logger.info(f"Blocked unauthenticated write to {f.__name__}")
                return jsonify({'success': False, 'message': 'Authentication required'}), 401
        return f(*args, **kwargs)
    return decorated_function
