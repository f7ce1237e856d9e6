"""
Tests for content store wiring in the app factory
"""

from app import create_app
from utils.kv import KVClient


def test_kv_client_wired_when_configured(app_overrides):
    app = create_app('testing', overrides=dict(
        app_overrides,
        KV_REST_API_URL='https://kv.example.com/',
        KV_REST_API_TOKEN='token',
        KV_DATA_KEY='site-content',
    ))
    store = app.extensions['content_store']
    assert isinstance(store.kv_client, KVClient)
    assert store.kv_client.url == 'https://kv.example.com'
    assert store.kv_key == 'site-content'
    assert app.extensions['section_cache'].store is store


def test_file_only_store_without_kv(app):
    store = app.extensions['content_store']
    assert store.kv_client is None
    assert store.data_file == app.config['DATA_FILE']


def test_prebuilt_store_is_used(app_overrides, file_store):
    app = create_app('testing', overrides=app_overrides, store=file_store)
    assert app.extensions['content_store'] is file_store
    assert app.extensions['section_cache'].store is file_store


def test_section_cache_ttl_from_config(app_overrides):
    app = create_app('testing', overrides=dict(app_overrides, SECTION_CACHE_TTL=7))
    assert app.extensions['section_cache'].ttl == 7
