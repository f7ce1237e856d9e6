"""
Security Module - Admin credentials and login verification
"""

import hmac

from flask import request, current_app
from werkzeug.security import generate_password_hash, check_password_hash


def get_client_ip():
    """Get real client IP address"""
    return request.environ.get('HTTP_X_FORWARDED_FOR',
                               request.environ.get('REMOTE_ADDR', 'unknown'))


def get_admin_credentials():
    """Load admin credentials from app config safely"""
    email = current_app.config.get('ADMIN_EMAIL')
    password = current_app.config.get('ADMIN_PASSWORD')
    if not email or not password:
        return {'email': None, 'password_hash': None}
    return {
        'email': email,
        'password_hash': generate_password_hash(password)
    }


def verify_admin_login(email, password):
    """Check submitted credentials against the configured admin identity"""
    credentials = get_admin_credentials()
    if not credentials['email']:
        current_app.logger.warning("Login attempted but ADMIN_EMAIL / ADMIN_PASSWORD are not configured")
        return False
    if not isinstance(email, str) or not isinstance(password, str):
        return False
    email_matches = hmac.compare_digest(email.encode('utf-8'), credentials['email'].encode('utf-8'))
    return email_matches and check_password_hash(credentials['password_hash'], password)


__all__ = [
    'get_client_ip',
    'get_admin_credentials',
    'verify_admin_login'
]
