"""Durable key-value storage and the scan payload cache."""

from simplemed.infrastructure.storage.key_value_store import (
    CacheUnavailable,
    JsonFileStore,
    MemoryStore,
)
from simplemed.infrastructure.storage.scan_cache import ScanCache

__all__ = ["CacheUnavailable", "JsonFileStore", "MemoryStore", "ScanCache"]
