"""
Tokens Module - Issuing and verifying admin session tokens
Tokens are HS256 JWTs carrying the admin identity and a one hour expiry.
"""

from datetime import datetime, timedelta, timezone

import jwt


TOKEN_ALGORITHM = 'HS256'
TOKEN_LIFETIME = timedelta(hours=1)


class TokenError(Exception):
    """Base class for session token verification failures"""


class TokenInvalidSignature(TokenError):
    """Signature does not match the configured secret"""


class TokenExpired(TokenError):
    """Expiration claim is in the past"""


class TokenMalformed(TokenError):
    """Token cannot be parsed or is missing required claims"""


def issue_token(payload, secret, issued_at=None):
    """
    Sign a session token for the given identity payload

    Args:
        payload (dict): Identity claims, e.g. {'email': ...}
        secret (str): Symmetric signing secret
        issued_at (datetime, optional): Issue time, defaults to now (UTC)

    Returns:
        str: Encoded token
    """
    if not secret:
        raise ValueError('A signing secret is required to issue tokens')

    issued_at = issued_at or datetime.now(timezone.utc)
    claims = dict(payload)
    claims['iat'] = issued_at
    claims['exp'] = issued_at + TOKEN_LIFETIME
    return jwt.encode(claims, secret, algorithm=TOKEN_ALGORITHM)


def verify_token(token, secret):
    """
    Decode and validate a session token

    Returns:
        dict: Decoded claims

    Raises:
        TokenExpired: the token is past its expiration
        TokenInvalidSignature: the signature check failed
        TokenMalformed: anything else that makes the token unusable
    """
    if not token:
        raise TokenMalformed('Empty token')

    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[TOKEN_ALGORITHM],
            options={'require': ['exp', 'iat']},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpired(str(e)) from e
    # InvalidSignatureError is a DecodeError subclass, so it goes first
    except jwt.InvalidSignatureError as e:
        raise TokenInvalidSignature(str(e)) from e
    except jwt.InvalidTokenError as e:
        raise TokenMalformed(str(e)) from e


__all__ = [
    'TOKEN_LIFETIME',
    'TokenError',
    'TokenInvalidSignature',
    'TokenExpired',
    'TokenMalformed',
    'issue_token',
    'verify_token'
]
