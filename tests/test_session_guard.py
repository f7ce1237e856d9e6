"""
Tests for admin route protection
"""

from datetime import datetime, timedelta, timezone

import pytest

from utils.session import (
    AUTHENTICATED_ADMIN,
    AUTHENTICATED_NON_ADMIN,
    CONTINUE,
    REDIRECT,
    UNAUTHENTICATED,
    evaluate_request,
    is_protected_path
)
from utils.tokens import issue_token

SECRET = 'guard-test-secret-with-enough-length'
ADMIN = 'admin@example.com'


def token_for(email=ADMIN, secret=SECRET, age=timedelta(0)):
    return issue_token({'email': email}, secret, issued_at=datetime.now(timezone.utc) - age)


def cookie_cleared(response):
    return any(h.startswith('admin-token=;') and 'Max-Age=0' in h
               for h in response.headers.getlist('Set-Cookie'))


class TestEvaluateRequest:

    @pytest.mark.parametrize('path,protected', [
        ('/admin', True),
        ('/admin/', True),
        ('/admin/dashboard', True),
        ('/admin/photos', True),
        ('/admin/login', False),
        ('/administrator', False),
        ('/api/photos', False),
        ('/', False),
    ])
    def test_protected_paths(self, path, protected):
        assert is_protected_path(path) is protected

    def test_admin_path_without_token_redirects_to_login(self):
        decision = evaluate_request('/admin/dashboard', None, ADMIN, SECRET)
        assert decision.action == REDIRECT
        assert decision.location == '/admin/login'
        assert decision.clear_cookie is False
        assert decision.state == UNAUTHENTICATED

    def test_admin_path_with_admin_token_continues(self):
        decision = evaluate_request('/admin/dashboard', token_for(), ADMIN, SECRET)
        assert decision.action == CONTINUE
        assert decision.state == AUTHENTICATED_ADMIN

    def test_non_admin_identity_redirects_without_clearing(self):
        decision = evaluate_request('/admin/dashboard', token_for('someone@else.com'), ADMIN, SECRET)
        assert decision.action == REDIRECT
        assert decision.location == '/admin/login'
        assert decision.clear_cookie is False
        assert decision.state == AUTHENTICATED_NON_ADMIN

    def test_expired_token_redirects_and_clears(self):
        decision = evaluate_request('/admin/dashboard', token_for(age=timedelta(hours=2)), ADMIN, SECRET)
        assert decision.action == REDIRECT
        assert decision.clear_cookie is True

    def test_bad_signature_redirects_without_clearing(self):
        decision = evaluate_request('/admin/dashboard', token_for(secret='x' * 40), ADMIN, SECRET)
        assert decision.action == REDIRECT
        assert decision.clear_cookie is False

    def test_malformed_token_redirects_without_clearing(self):
        decision = evaluate_request('/admin/settings', 'garbage', ADMIN, SECRET)
        assert decision.action == REDIRECT
        assert decision.clear_cookie is False

    def test_login_page_always_reachable(self):
        for token in (None, 'garbage', token_for(age=timedelta(hours=2)), token_for()):
            assert evaluate_request('/admin/login', token, ADMIN, SECRET).action == CONTINUE

    def test_root_redirects_admin_to_dashboard(self):
        decision = evaluate_request('/', token_for(), ADMIN, SECRET)
        assert decision.action == REDIRECT
        assert decision.location == '/admin/dashboard'

    def test_root_with_invalid_token_clears_and_continues(self):
        for token in ('garbage', token_for(age=timedelta(hours=2))):
            decision = evaluate_request('/', token, ADMIN, SECRET)
            assert decision.action == CONTINUE
            assert decision.clear_cookie is True

    def test_root_with_non_admin_token_continues(self):
        decision = evaluate_request('/', token_for('someone@else.com'), ADMIN, SECRET)
        assert decision.action == CONTINUE
        assert decision.clear_cookie is False

    def test_root_without_token_continues(self):
        decision = evaluate_request('/', None, ADMIN, SECRET)
        assert decision == (CONTINUE, None, False, UNAUTHENTICATED)

    def test_unrelated_paths_pass_through(self):
        assert evaluate_request('/api/hero', 'garbage', ADMIN, SECRET).action == CONTINUE


class TestGuardIntegration:

    @pytest.mark.parametrize('path', ['/admin/dashboard', '/admin/', '/admin/anything'])
    def test_admin_pages_redirect_without_cookie(self, client, path):
        response = client.get(path)
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/admin/login')

    def test_login_page_renders(self, client):
        response = client.get('/admin/login')
        assert response.status_code == 200
        assert b'Admin Login' in response.data

    def test_expired_cookie_is_cleared_on_admin_page(self, client, make_token):
        expired = make_token(issued_at=datetime.now(timezone.utc) - timedelta(hours=1, minutes=1))
        client.set_cookie('admin-token', expired)
        response = client.get('/admin/dashboard')
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/admin/login')
        assert cookie_cleared(response)

    def test_expired_cookie_is_cleared_on_home_page(self, client, make_token):
        expired = make_token(issued_at=datetime.now(timezone.utc) - timedelta(hours=3))
        client.set_cookie('admin-token', expired)
        response = client.get('/')
        assert response.status_code == 200
        assert cookie_cleared(response)

    def test_admin_cookie_on_home_redirects_to_dashboard(self, admin_client):
        response = admin_client.get('/')
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/admin/dashboard')

    def test_admin_root_leads_to_dashboard(self, admin_client):
        response = admin_client.get('/admin/', follow_redirects=True)
        assert response.status_code == 200
        assert response.request.path == '/admin/dashboard'
        assert b'<h1>Dashboard</h1>' in response.data

    def test_non_admin_cookie_cannot_reach_dashboard(self, client, make_token):
        client.set_cookie('admin-token', make_token(email='visitor@example.com'))
        response = client.get('/admin/dashboard')
        assert response.status_code == 302
        assert not cookie_cleared(response)
