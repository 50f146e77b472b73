"""
Network tier: fetch the radiology JSON over HTTP with a bounded timeout.
"""

from __future__ import annotations

import requests

from simplemed.utils.config import fetch_timeout, remote_url
from simplemed.utils.logger import get_logger

logger = get_logger()


class TransportFailure(RuntimeError):
    """Raised on a non-200 status, connection error or timeout."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteScanSource:
    """
    Single-attempt GET of the document URL. No retries; the caller decides
    what to fall back to.
    """

    def __init__(self, url: str | None = None, timeout: float | None = None) -> None:
        self.url = url or remote_url()
        self.timeout = timeout if timeout is not None else fetch_timeout()

    def fetch(self) -> str:
        """
        Return the response body text.

        Raises:
            TransportFailure: If the request fails or the status is not exactly 200.
        """
        try:
            r = requests.get(
                self.url,
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )
        except requests.RequestException as e:
            raise TransportFailure(f"Request to {self.url} failed: {e}") from e

        if r.status_code != 200:
            raise TransportFailure(
                f"Failed to load data: HTTP {r.status_code}",
                status_code=r.status_code,
            )
        logger.info("Fetched %d chars from %s", len(r.text), self.url)
        return r.text
