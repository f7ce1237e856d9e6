"""
Tests for session token issuing and verification
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from utils.tokens import (
    TOKEN_LIFETIME,
    TokenError,
    TokenExpired,
    TokenInvalidSignature,
    TokenMalformed,
    issue_token,
    verify_token
)

SECRET = 'unit-test-secret-with-enough-length!'


class TestIssueToken:

    def test_round_trip_keeps_identity(self):
        token = issue_token({'email': 'admin@example.com'}, SECRET)
        payload = verify_token(token, SECRET)
        assert payload['email'] == 'admin@example.com'

    def test_expires_exactly_one_hour_after_issue(self):
        issued_at = datetime.now(timezone.utc).replace(microsecond=0)
        token = issue_token({'email': 'a@b.c'}, SECRET, issued_at=issued_at)
        payload = verify_token(token, SECRET)
        assert payload['exp'] - payload['iat'] == int(TOKEN_LIFETIME.total_seconds()) == 3600
        assert payload['iat'] == int(issued_at.timestamp())

    def test_requires_secret(self):
        with pytest.raises(ValueError):
            issue_token({'email': 'a@b.c'}, '')


class TestVerifyToken:

    def test_expired_token(self):
        issued_at = datetime.now(timezone.utc) - timedelta(hours=1, seconds=5)
        token = issue_token({'email': 'a@b.c'}, SECRET, issued_at=issued_at)
        with pytest.raises(TokenExpired):
            verify_token(token, SECRET)

    def test_wrong_secret_is_invalid_signature(self):
        token = issue_token({'email': 'a@b.c'}, SECRET)
        with pytest.raises(TokenInvalidSignature):
            verify_token(token, 'another-secret-of-sufficient-length')

    def test_tampered_payload_is_invalid_signature(self):
        token = issue_token({'email': 'a@b.c'}, SECRET)
        header, payload, signature = token.split('.')
        forged = issue_token({'email': 'evil@b.c'}, SECRET).split('.')[1]
        with pytest.raises(TokenInvalidSignature):
            verify_token('.'.join([header, forged, signature]), SECRET)

    @pytest.mark.parametrize('token', ['', 'not-a-token', 'a.b.c', 'abc.def'])
    def test_garbage_is_malformed(self, token):
        with pytest.raises(TokenMalformed):
            verify_token(token, SECRET)

    def test_missing_expiry_is_malformed(self):
        token = jwt.encode({'email': 'a@b.c', 'iat': 1}, SECRET, algorithm='HS256')
        with pytest.raises(TokenMalformed):
            verify_token(token, SECRET)

    def test_all_failures_share_a_base_class(self):
        for error in (TokenExpired, TokenInvalidSignature, TokenMalformed):
            assert issubclass(error, TokenError)
        assert not issubclass(TokenExpired, TokenInvalidSignature)
