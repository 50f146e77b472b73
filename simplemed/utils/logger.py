"""Logging for the SimpleMed data layer.

Every module logs through the shared "simplemed" logger. `setup_logger` is
called once by the entry point; level and optional log file default to the
SIMPLEMED_LOG_LEVEL / SIMPLEMED_LOG_FILE settings.
"""

import logging
import sys
from pathlib import Path

from simplemed.utils.config import log_file as configured_log_file
from simplemed.utils.config import log_level as configured_log_level

LOGGER_NAME = "simplemed"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = configured_log_level()
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(
    name: str = LOGGER_NAME,
    level: int | str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """
    Attach stderr (and optionally file) handlers to the named logger.

    Idempotent: a logger that already has handlers is returned untouched, so
    Streamlit reruns do not stack duplicate handlers.

    Args:
        name: Logger name. Default "simplemed".
        level: Level as int or name; None reads SIMPLEMED_LOG_LEVEL. Unknown names mean INFO.
        log_file: Extra file destination; None reads SIMPLEMED_LOG_FILE (unset means stderr only).
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    log.setLevel(_resolve_level(level))
    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(fmt)
    log.addHandler(stream)

    target = Path(log_file) if log_file is not None else configured_log_file()
    if target is not None:
        target.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(target, encoding="utf-8")
        fh.setFormatter(fmt)
        log.addHandler(fh)

    return log


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Shared logger used by every simplemed module."""
    return logging.getLogger(name)
