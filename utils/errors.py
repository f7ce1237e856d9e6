"""
Errors Module - Application exceptions and their JSON representation
"""


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing"""


class PersistenceUnavailable(Exception):
    """A durable storage layer (file or external store) rejected a read or write"""


class ApiError(Exception):
    """Error surfaced to API callers as a JSON body with an HTTP status"""

    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None, details=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.details = details

    def to_dict(self):
        body = {'error': self.message}
        if self.details:
            body['details'] = self.details
        return body


class ValidationError(ApiError):
    status_code = 400
    default_message = 'Invalid request'


class NotFound(ApiError):
    status_code = 404
    default_message = 'Not found'


class AuthInvalid(ApiError):
    status_code = 401
    default_message = 'Invalid credentials'

    def to_dict(self):
        return {'success': False, 'message': self.message}


__all__ = [
    'ConfigurationError',
    'PersistenceUnavailable',
    'ApiError',
    'ValidationError',
    'NotFound',
    'AuthInvalid'
]
