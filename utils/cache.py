"""
Cache Module - Short-lived section cache over the content store
Sections are addressed by dotted path, e.g. 'hero' or 'resume.skills'.
"""

import copy
import logging
import time


def get_nested_value(document, path):
    current = document
    for key in path.split('.'):
        if not isinstance(current, dict) or current.get(key) is None:
            return None
        current = current[key]
    return current


def set_nested_value(document, path, value):
    keys = path.split('.')
    target = document
    for key in keys[:-1]:
        if not isinstance(target.get(key), dict):
            target[key] = {}
        target = target[key]
    target[keys[-1]] = value


class SectionCache:
    """
    Caches section values read from a ContentStore for ttl seconds

    get() never raises: storage errors come back as None.
    """

    def __init__(self, store, ttl=300, clock=time.monotonic, logger=None):
        self.store = store
        self.ttl = ttl
        self.clock = clock
        self.logger = logger or logging.getLogger(__name__)
        self._entries = {}

    def get(self, key):
        try:
            entry = self._entries.get(key)
            if entry is not None:
                stored_at, value = entry
                if self.clock() - stored_at < self.ttl:
                    self.logger.debug(f"Section cache hit: {key}")
                    return copy.deepcopy(value)
                self._entries.pop(key, None)

            value = get_nested_value(self.store.read(), key)
            self._entries[key] = (self.clock(), copy.deepcopy(value))
            return value
        except Exception as e:
            self.logger.error(f"Error reading section {key}: {str(e)}")
            return None

    def set(self, key, value):
        """
        Write one section through to the store

        Returns:
            WriteResult or None when the write could not be applied
        """
        try:
            document = self.store.read()
            set_nested_value(document, key, copy.deepcopy(value))
            result = self.store.write(document)
        except Exception as e:
            self.logger.error(f"Error writing section {key}: {str(e)}")
            return None

        self._invalidate_related(key)
        self._entries[key] = (self.clock(), copy.deepcopy(value))
        self.logger.info(f"Saved section {key} ({result.status})")
        return result

    def clear(self):
        self._entries.clear()

    def _invalidate_related(self, key):
        # Parents and children of key hold stale copies of the written value
        for cached in list(self._entries):
            if cached.startswith(key + '.') or key.startswith(cached + '.'):
                self._entries.pop(cached, None)


__all__ = ['SectionCache', 'get_nested_value', 'set_nested_value']
