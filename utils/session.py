"""
Session Module - Cookie-based admin session and route protection
The guard runs before every request and resolves to either "continue"
or "redirect"; it never raises.
"""

import logging
from collections import namedtuple

from flask import current_app, g, redirect, request

from .tokens import TokenError, TokenExpired, verify_token


UNAUTHENTICATED = 'unauthenticated'
AUTHENTICATED_NON_ADMIN = 'authenticated_non_admin'
AUTHENTICATED_ADMIN = 'authenticated_admin'

CONTINUE = 'continue'
REDIRECT = 'redirect'

ROOT_PATH = '/'
ADMIN_PREFIX = '/admin'
LOGIN_PATH = '/admin/login'
DASHBOARD_PATH = '/admin/dashboard'

logger = logging.getLogger(__name__)

GuardDecision = namedtuple('GuardDecision', ['action', 'location', 'clear_cookie', 'state'])


def resolve_session(token, admin_email, secret):
    """
    Classify a session token

    Returns:
        tuple: (state, error) where error is the TokenError raised while
        verifying, or None
    """
    if not token:
        return UNAUTHENTICATED, None
    try:
        payload = verify_token(token, secret)
    except TokenError as e:
        return UNAUTHENTICATED, e

    email = payload.get('email') if isinstance(payload, dict) else None
    if not email:
        return UNAUTHENTICATED, None
    if admin_email and email == admin_email:
        return AUTHENTICATED_ADMIN, None
    return AUTHENTICATED_NON_ADMIN, None


def is_protected_path(path):
    """Admin paths other than the login page require an admin session"""
    if path == LOGIN_PATH or path.startswith(LOGIN_PATH + '/'):
        return False
    return path == ADMIN_PREFIX or path.startswith(ADMIN_PREFIX + '/')


def evaluate_request(path, token, admin_email, secret):
    """Decide what the guard does with a request to path"""
    if path == ROOT_PATH:
        if not token:
            return GuardDecision(CONTINUE, None, False, UNAUTHENTICATED)
        state, error = resolve_session(token, admin_email, secret)
        if state == AUTHENTICATED_ADMIN:
            return GuardDecision(REDIRECT, DASHBOARD_PATH, False, state)
        # Stale or foreign token on the home page: drop it and carry on
        return GuardDecision(CONTINUE, None, error is not None, state)

    if not is_protected_path(path):
        return GuardDecision(CONTINUE, None, False, None)

    state, error = resolve_session(token, admin_email, secret)
    if state == AUTHENTICATED_ADMIN:
        return GuardDecision(CONTINUE, None, False, state)
    if state == AUTHENTICATED_NON_ADMIN:
        logger.info("Rejected admin request for a non-admin identity")
    return GuardDecision(REDIRECT, LOGIN_PATH, isinstance(error, TokenExpired), state)


def get_session_state():
    """Session state of the current request (computed on demand outside the guard)"""
    state = g.get('session_state')
    if state is None:
        token = request.cookies.get(current_app.config['ADMIN_COOKIE_NAME'])
        state, _ = resolve_session(
            token,
            current_app.config.get('ADMIN_EMAIL'),
            current_app.config.get('JWT_SECRET'))
        g.session_state = state
    return state


def set_session_cookie(response, token):
    config = current_app.config
    response.set_cookie(
        config['ADMIN_COOKIE_NAME'],
        token,
        max_age=config['SESSION_TOKEN_LIFETIME'],
        path='/',
        httponly=True,
        secure=config.get('SESSION_COOKIE_SECURE', False),
        samesite='Lax'
    )
    return response


def clear_session_cookie(response):
    response.delete_cookie(current_app.config['ADMIN_COOKIE_NAME'], path='/')
    return response


def guard_request():
    """before_request hook enforcing admin route protection"""
    config = current_app.config
    token = request.cookies.get(config['ADMIN_COOKIE_NAME'])
    decision = evaluate_request(
        request.path, token, config.get('ADMIN_EMAIL'), config.get('JWT_SECRET'))

    if decision.state is not None:
        g.session_state = decision.state
    g.clear_session_cookie = decision.clear_cookie

    # finalize_response also runs for the redirect and clears the cookie there
    if decision.action == REDIRECT:
        current_app.logger.info(f"Guard redirect {request.path} -> {decision.location}")
        return redirect(decision.location)
    return None


def finalize_response(response):
    """after_request hook: drop the session cookie when the guard flagged it"""
    if g.get('clear_session_cookie'):
        clear_session_cookie(response)
    return response


__all__ = [
    'UNAUTHENTICATED',
    'AUTHENTICATED_NON_ADMIN',
    'AUTHENTICATED_ADMIN',
    'CONTINUE',
    'REDIRECT',
    'LOGIN_PATH',
    'DASHBOARD_PATH',
    'GuardDecision',
    'resolve_session',
    'is_protected_path',
    'evaluate_request',
    'get_session_state',
    'set_session_cookie',
    'clear_session_cookie',
    'guard_request',
    'finalize_response'
]
