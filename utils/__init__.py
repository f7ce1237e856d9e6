"""
Utils Package - Centralized utility modules initialization
"""

from .tokens import (
    TokenError,
    TokenInvalidSignature,
    TokenExpired,
    TokenMalformed,
    issue_token,
    verify_token
)
from .errors import (
    ConfigurationError,
    PersistenceUnavailable,
    ApiError,
    ValidationError,
    NotFound,
    AuthInvalid
)
from .storage import ContentStore, WriteResult
from .cache import SectionCache
from .kv import KVClient
from .data import load_section, save_section, with_persistence
from .session import evaluate_request, guard_request, finalize_response
from .decorators import admin_required
from .security import get_client_ip, verify_admin_login
from .helpers import validate_upload, build_upload_filename, parse_index

__all__ = [
    # Tokens
    'TokenError',
    'TokenInvalidSignature',
    'TokenExpired',
    'TokenMalformed',
    'issue_token',
    'verify_token',

    # Errors
    'ConfigurationError',
    'PersistenceUnavailable',
    'ApiError',
    'ValidationError',
    'NotFound',
    'AuthInvalid',

    # Storage
    'ContentStore',
    'WriteResult',
    'SectionCache',
    'KVClient',

    # Data
    'load_section',
    'save_section',
    'with_persistence',

    # Session
    'evaluate_request',
    'guard_request',
    'finalize_response',
    'admin_required',

    # Security
    'get_client_ip',
    'verify_admin_login',

    # Helpers
    'validate_upload',
    'build_upload_filename',
    'parse_index'
]
