"""
Storage Module - Layered persistence for the site content document
Memory copy in front of a local JSON snapshot, optionally mirrored to an
external key-value store so content survives an ephemeral filesystem.

Writes replace the whole document. There is no locking or versioning:
the last writer wins, which is acceptable for a single admin operator.
"""

import copy
import json
import logging
import os
from collections import namedtuple

from .defaults import get_default_document
from .errors import PersistenceUnavailable


PERSISTED = 'persisted'
CACHED_ONLY = 'cached_only'


class WriteResult(namedtuple('WriteResult', ['file_saved', 'kv_saved'])):
    """Outcome of ContentStore.write, one flag per durable layer"""

    __slots__ = ()

    @property
    def status(self):
        return PERSISTED if (self.file_saved or self.kv_saved) else CACHED_ONLY

    @property
    def persisted(self):
        return self.status == PERSISTED


class ContentStore:
    """
    Read/write access to the site content document

    Args:
        data_file (str): Path of the local JSON snapshot
        kv_client (KVClient, optional): Durable external mirror
        kv_key (str): Key the document is stored under in the KV store
        logger (logging.Logger, optional): Defaults to this module's logger
    """

    def __init__(self, data_file, kv_client=None, kv_key='portfolio-data', logger=None):
        self.data_file = data_file
        self.kv_client = kv_client
        self.kv_key = kv_key
        self.logger = logger or logging.getLogger(__name__)
        self._document = None
        self.source = None

    def read(self):
        """Return a copy of the current document, loading it on first use"""
        if self._document is None:
            self._document, self.source = self._load()
        return copy.deepcopy(self._document)

    def write(self, document):
        """
        Replace the document and persist it best-effort

        Returns:
            WriteResult: which durable layers accepted the write
        """
        self._document = copy.deepcopy(document)
        file_saved = self._save_file(self._document)
        kv_saved = self._save_kv(self._document)
        result = WriteResult(file_saved=file_saved, kv_saved=kv_saved)
        if not result.persisted:
            self.logger.warning("Content stored in memory only, no durable layer accepted the write")
        return result

    def refresh(self):
        """Drop the in-memory copy so the next read reloads from storage"""
        self._document = None
        self.source = None

    def _load(self):
        if self.kv_client is not None:
            try:
                data = self.kv_client.get(self.kv_key)
                if isinstance(data, dict):
                    self.logger.info("Loaded content document from KV store")
                    return data, 'kv'
                self.logger.info("No content document in KV store yet")
            except PersistenceUnavailable as e:
                self.logger.warning(f"Could not load content from KV store: {str(e)}")

        try:
            with open(self.data_file, 'r', encoding='utf-8') as file:
                data = json.load(file)
            if isinstance(data, dict):
                self.logger.info(f"Loaded content document from {self.data_file}")
                return data, 'file'
            self.logger.warning(f"{self.data_file} does not hold a JSON object, ignoring it")
        except FileNotFoundError:
            self.logger.info(f"No snapshot at {self.data_file}, using default content")
        except (OSError, ValueError) as e:
            self.logger.warning(f"Could not read {self.data_file}: {str(e)}")

        return get_default_document(), 'default'

    def _save_file(self, document):
        try:
            directory = os.path.dirname(self.data_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.data_file, 'w', encoding='utf-8') as file:
                json.dump(document, file, ensure_ascii=False, indent=2)
            return True
        except (OSError, TypeError, ValueError) as e:
            self.logger.warning(f"Could not persist content to {self.data_file}: {str(e)}")
            return False

    def _save_kv(self, document):
        if self.kv_client is None:
            return False
        try:
            self.kv_client.set(self.kv_key, document)
            return True
        except PersistenceUnavailable as e:
            self.logger.warning(f"Could not mirror content to KV store: {str(e)}")
            return False


__all__ = ['ContentStore', 'WriteResult', 'PERSISTED', 'CACHED_ONLY']
