"""Data sources: remote radiology API and the bundled fallback asset."""

from simplemed.infrastructure.sources.bundled_source import BundledSource, FallbackCorrupt
from simplemed.infrastructure.sources.remote_source import RemoteScanSource, TransportFailure

__all__ = ["BundledSource", "FallbackCorrupt", "RemoteScanSource", "TransportFailure"]
