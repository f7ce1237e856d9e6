"""
KV Module - Client for a REST key-value store (Upstash / Vercel KV protocol)
Used as the durable mirror of the content document when the local
filesystem does not survive restarts.
"""

import json

import requests

from .errors import PersistenceUnavailable


class KVClient:
    """Minimal client for the Redis-over-HTTP command endpoint"""

    def __init__(self, url, token, timeout=5.0, session=None):
        self.url = url.rstrip('/')
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config):
        """Build a client from app config, or return None when KV is not configured"""
        url = config.get('KV_REST_API_URL')
        token = config.get('KV_REST_API_TOKEN')
        if not url or not token:
            return None
        return cls(url, token, timeout=config.get('KV_TIMEOUT', 5.0))

    def _command(self, *args):
        try:
            response = self.session.post(
                self.url,
                json=list(args),
                headers={'Authorization': f'Bearer {self.token}'},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise PersistenceUnavailable(f'KV request failed: {str(e)}') from e

        if response.status_code != 200:
            raise PersistenceUnavailable(
                f'KV returned HTTP {response.status_code}: {response.text[:200]}')

        try:
            body = response.json()
        except ValueError as e:
            raise PersistenceUnavailable('KV returned a non-JSON response') from e

        if 'error' in body:
            raise PersistenceUnavailable(f"KV error: {body['error']}")
        return body.get('result')

    def get(self, key):
        """Return the JSON value stored under key, or None when the key is unset"""
        raw = self._command('GET', key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            raise PersistenceUnavailable(f'KV value for {key} is not valid JSON') from e

    def set(self, key, value):
        """Store value under key as JSON"""
        result = self._command('SET', key, json.dumps(value, ensure_ascii=False))
        if result != 'OK':
            raise PersistenceUnavailable(f'KV SET for {key} returned {result!r}')
        return True


__all__ = ['KVClient']
