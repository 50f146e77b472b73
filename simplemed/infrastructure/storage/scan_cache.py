"""
Persistent cache of the last successfully fetched radiology JSON.

One fixed key in a durable key-value store. No expiry, size bound or
versioning: each save overwrites the previous payload whole.
"""

from __future__ import annotations

from typing import Any

from simplemed.infrastructure.storage.key_value_store import JsonFileStore
from simplemed.utils.config import cache_key
from simplemed.utils.logger import get_logger

logger = get_logger()


class ScanCache:
    """
    Save/load the raw document text. Store failures are reported as
    "unavailable" (False / None) and logged, never raised.
    """

    def __init__(self, store: Any | None = None, key: str | None = None) -> None:
        self._store = store if store is not None else JsonFileStore()
        self._key = key or cache_key()

    @property
    def key(self) -> str:
        return self._key

    def save(self, text: str) -> bool:
        try:
            self._store.set_string(self._key, text)
        except Exception as e:
            logger.warning("Cache write failed for %s: %s", self._key, e)
            return False
        logger.debug("Cached %d chars under %s", len(text), self._key)
        return True

    def load(self) -> str | None:
        try:
            text = self._store.get_string(self._key)
        except Exception as e:
            logger.warning("Cache read failed for %s: %s", self._key, e)
            return None
        return text if isinstance(text, str) else None
