"""
Offline-first acquisition of the radiology document.

Tiers are tried strictly in order, each only if the previous one failed:
network, then the local cache, then the bundled asset, and finally an empty
document. `acquire()` never raises.
"""

from __future__ import annotations

from typing import Any

from simplemed.domains.models import Document, empty_document, parse_document_text
from simplemed.infrastructure.sources.bundled_source import BundledSource
from simplemed.infrastructure.sources.remote_source import RemoteScanSource
from simplemed.infrastructure.storage.scan_cache import ScanCache
from simplemed.utils.logger import get_logger

logger = get_logger()

TIER_NETWORK = "network"
TIER_CACHE = "cache"
TIER_BUNDLED = "bundled"
TIER_EMPTY = "empty"


class DataService:
    """
    Fetch pipeline over injected collaborators.

    Args:
        remote: Object with `fetch() -> str`. Default RemoteScanSource().
        cache: Object with `save(text) -> bool` and `load() -> str | None`. Default ScanCache().
        bundled: Object with `load_text() -> str`. Default BundledSource().
    """

    def __init__(
        self,
        remote: Any | None = None,
        cache: Any | None = None,
        bundled: Any | None = None,
    ) -> None:
        self._remote = remote if remote is not None else RemoteScanSource()
        self._cache = cache if cache is not None else ScanCache()
        self._bundled = bundled if bundled is not None else BundledSource()
        self.last_tier: str | None = None

    def acquire(self) -> Document:
        """Return the freshest usable Document; fall back tier by tier, never raise."""
        doc = self._from_network()
        if doc is None:
            doc = self._from_cache()
        if doc is None:
            doc = self._from_bundled()
        if doc is None:
            logger.error("All data tiers failed; using empty document")
            self.last_tier = TIER_EMPTY
            return empty_document()
        return doc

    def _from_network(self) -> Document | None:
        logger.info("Attempting to fetch from network...")
        try:
            text = self._remote.fetch()
        except Exception as e:
            logger.warning("Network tier failed: %s", e)
            return None
        # Any 200 body replaces the cached payload before it is decoded
        if not self._cache.save(text):
            logger.warning("Fetched data could not be cached; continuing")
        try:
            doc = parse_document_text(text)
        except Exception as e:
            logger.warning("Network payload could not be decoded: %s", e)
            return None
        self.last_tier = TIER_NETWORK
        logger.info("Loaded %d sections from network", len(doc.sections))
        return doc

    def _from_cache(self) -> Document | None:
        logger.info("Attempting to load from cache...")
        try:
            text = self._cache.load()
            if not text:
                logger.info("Cache empty")
                return None
            doc = parse_document_text(text)
        except Exception as e:
            logger.warning("Cache tier failed: %s", e)
            return None
        self.last_tier = TIER_CACHE
        logger.info("Loaded %d sections from cache", len(doc.sections))
        return doc

    def _from_bundled(self) -> Document | None:
        logger.info("Loading bundled fallback data...")
        try:
            doc = parse_document_text(self._bundled.load_text())
        except Exception as e:
            logger.error("Fallback load failed: %s", e)
            return None
        self.last_tier = TIER_BUNDLED
        return doc
