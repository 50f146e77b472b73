"""
Durable key-value stores holding string values by key.

`JsonFileStore` keeps every key in one JSON object on disk, much like a
preferences file. `MemoryStore` offers the same API without persistence.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from simplemed.utils.config import store_path


class CacheUnavailable(RuntimeError):
    """Raised when the durable store cannot be read or written."""


class MemoryStore:
    """In-process key-value store. Contents last for the lifetime of the object."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get_string(self, key: str) -> str | None:
        return self._data.get(key)

    def set_string(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    Key-value store persisted as a single JSON object file.

    A missing file reads as an empty store. Writes replace the file atomically
    so a crash mid-write leaves the previous contents intact.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = Path(path) if path is not None else store_path()

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.is_file():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise CacheUnavailable(f"Store read failed for {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise CacheUnavailable(f"Store file {self._path} does not hold a JSON object")
        return data

    def get_string(self, key: str) -> str | None:
        val = self._read_all().get(key)
        return val if isinstance(val, str) else None

    def set_string(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except CacheUnavailable:
            # An unreadable file is replaced rather than blocking every future write.
            data = {}
        data[key] = value
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False)
                os.replace(tmp, self._path)
            except BaseException:
                if os.path.exists(tmp):
                    os.unlink(tmp)
                raise
        except OSError as e:
            raise CacheUnavailable(f"Store write failed for {self._path}: {e}") from e
