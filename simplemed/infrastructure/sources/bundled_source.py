"""
Bundled fallback: the radiology JSON shipped inside the package.
"""

from __future__ import annotations

from pathlib import Path

from simplemed.utils.config import fallback_path


class FallbackCorrupt(RuntimeError):
    """Raised when the bundled asset is missing or unreadable."""


class BundledSource:
    """Read-only access to the default payload embedded at build time."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = Path(path) if path is not None else fallback_path()

    @property
    def path(self) -> Path:
        return self._path

    def load_text(self) -> str:
        try:
            return self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FallbackCorrupt(f"Bundled data unavailable at {self._path}: {e}") from e
