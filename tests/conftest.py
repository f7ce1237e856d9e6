"""
Global test configuration and fixtures

Every test gets its own app with a temporary data file and uploads
folder, so tests never share content state.
"""

import pytest

from app import create_app
from utils.errors import PersistenceUnavailable
from utils.storage import ContentStore
from utils.tokens import issue_token


ADMIN_EMAIL = 'admin@example.com'
ADMIN_PASSWORD = 'correct-horse'
TEST_SECRET = 'test-secret-key-for-testing-only'


class FakeKV:
    """In-memory stand-in for KVClient"""

    def __init__(self, initial=None):
        self.values = dict(initial or {})
        self.fail = False
        self.set_calls = 0

    def get(self, key):
        if self.fail:
            raise PersistenceUnavailable('kv down')
        return self.values.get(key)

    def set(self, key, value):
        if self.fail:
            raise PersistenceUnavailable('kv down')
        self.set_calls += 1
        self.values[key] = value
        return True


# ============================================================================
# Application Fixtures
# ============================================================================

@pytest.fixture
def app_overrides(tmp_path):
    return {
        'DATA_FILE': str(tmp_path / 'data.json'),
        'UPLOAD_FOLDER': str(tmp_path / 'uploads'),
        'JWT_SECRET': TEST_SECRET,
        'ADMIN_EMAIL': ADMIN_EMAIL,
        'ADMIN_PASSWORD': ADMIN_PASSWORD,
    }


@pytest.fixture
def app(app_overrides):
    """Flask app built with the testing configuration"""
    return create_app('testing', overrides=app_overrides)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions['content_store']


@pytest.fixture
def admin_client(client):
    """Test client holding a valid admin session cookie"""
    response = client.post('/api/auth/login', json={'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def make_token():
    def _make(email=ADMIN_EMAIL, secret=TEST_SECRET, issued_at=None):
        return issue_token({'email': email}, secret, issued_at=issued_at)
    return _make


@pytest.fixture
def fake_kv():
    return FakeKV()


@pytest.fixture
def file_store(tmp_path):
    return ContentStore(str(tmp_path / 'data.json'))
