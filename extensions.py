"""
Extensions Module - Centralized initialization of app-bound services
The content store and its section cache are built once per app and
reached through current_app.extensions, so tests get a fresh store per app.
"""

from utils.cache import SectionCache
from utils.kv import KVClient
from utils.storage import ContentStore


def init_content_store(app, store=None):
    """Attach the content store and section cache to the app"""
    if store is None:
        kv_client = KVClient.from_config(app.config)
        store = ContentStore(
            app.config['DATA_FILE'],
            kv_client=kv_client,
            kv_key=app.config.get('KV_DATA_KEY', 'portfolio-data'),
            logger=app.logger
        )
        if kv_client:
            app.logger.info("✓ KV store configured as durable content mirror")
        else:
            app.logger.info(f"KV store not configured, content persists to {app.config['DATA_FILE']} only")

    cache = SectionCache(store, ttl=app.config.get('SECTION_CACHE_TTL', 300), logger=app.logger)
    app.extensions['content_store'] = store
    app.extensions['section_cache'] = cache
    return store


__all__ = ['init_content_store']
