"""
Application state for the scan data: current document, loading/error flags,
favourites and search. Observers subscribe to be told when anything changes.
"""

from __future__ import annotations

import threading
from typing import Any, Callable

from simplemed.domains.models import Document, Scan, SearchResult
from simplemed.services.data_service import DataService
from simplemed.utils.logger import get_logger

logger = get_logger()

Listener = Callable[[], None]


class ScanStore:
    """
    Single writer of the loaded Document and the favourites set.

    Listeners are notified synchronously, in subscription order, at the start
    and end of every load and on every favourite toggle. Loads are serialized,
    so overlapping refreshes run one after another.
    """

    def __init__(self, service: Any | None = None) -> None:
        self._service = service if service is not None else DataService()
        self._document: Document | None = None
        self._is_loading = False
        self._error_message: str | None = None
        self._favourites: set[str] = set()
        self._listeners: list[Listener] = []
        self._load_lock = threading.RLock()

    # --- Observers ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a zero-argument listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Store listener %r failed", listener)

    # --- Read API ---

    @property
    def document(self) -> Document | None:
        return self._document

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def has_error(self) -> bool:
        return self._error_message is not None

    @property
    def has_data(self) -> bool:
        return self._document is not None and len(self._document.sections) > 0

    @property
    def all_scans(self) -> list[Scan]:
        if self._document is None:
            return []
        return self._document.all_scans()

    def find_scan(self, scan_id: str) -> Scan | None:
        if self._document is None:
            return None
        return self._document.find_scan(scan_id)

    def _results(self, keep: Callable[[Scan], bool]) -> list[SearchResult]:
        if self._document is None:
            return []
        return [
            SearchResult(scan=scan, category_name=section.category_name, category_color=section.color_hex)
            for section in self._document.sections
            for scan in section.scans
            if keep(scan)
        ]

    def search_scans(self, query: str) -> list[SearchResult]:
        """
        Case-insensitive substring match on title or short summary, in document order.
        An empty query returns no results.
        """
        if not query:
            return []
        q = query.lower()
        return self._results(
            lambda scan: q in scan.title.lower() or q in scan.short_summary.lower()
        )

    # --- Favourites ---

    @property
    def favourite_ids(self) -> frozenset[str]:
        return frozenset(self._favourites)

    def is_favourite(self, scan_id: str) -> bool:
        return scan_id in self._favourites

    def toggle_favourite(self, scan_id: str) -> bool:
        """Flip membership of scan_id and notify. Returns the new membership."""
        if scan_id in self._favourites:
            self._favourites.discard(scan_id)
            now = False
        else:
            self._favourites.add(scan_id)
            now = True
        self._notify()
        return now

    @property
    def favourite_scans(self) -> list[SearchResult]:
        return self._results(lambda scan: scan.id in self._favourites)

    # --- Loading ---

    def load_data(self) -> None:
        """Run the fetch pipeline and publish its Document. Notifies at start and end."""
        with self._load_lock:
            self._is_loading = True
            self._error_message = None
            self._notify()
            try:
                self._document = self._service.acquire()
            except Exception as e:
                self._error_message = f"Failed to load data: {e}"
                logger.exception("Error: %s", self._error_message)
            finally:
                self._is_loading = False
                self._notify()

    def refresh_data(self) -> None:
        """Pull-to-refresh. Same tiers and fallback as load_data."""
        self.load_data()
