"""Load and validate environment variables. Uses python-dotenv.

This module is intentionally thin and side-effect free except for loading `.env`.
Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent.
"""

from pathlib import Path

from dotenv import load_dotenv
import os

DEFAULT_REMOTE_URL = "https://simplemed.co.uk/api/radiology_data.json"
DEFAULT_CACHE_KEY = "cached_radiology_json"
DEFAULT_FETCH_TIMEOUT = 10


def _project_root() -> Path:
    """Resolve project root (the directory holding the simplemed package)."""
    return Path(__file__).resolve().parent.parent.parent


def _package_dir() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Uses override=True to ensure .env values take precedence over existing env vars.
    """
    env_path = _project_root() / ".env"
    load_dotenv(env_path, override=True)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_int(key: str, default: int) -> int:
    """Get optional env var as int; return default if missing or invalid."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# --- Public config accessors ---

def remote_url() -> str:
    """Optional: URL of the radiology data JSON. Default is the SimpleMed API."""
    return get_optional("SIMPLEMED_REMOTE_URL", DEFAULT_REMOTE_URL)


def fetch_timeout() -> int:
    """Optional: network timeout in seconds. Default 10; non-positive values use the default."""
    val = get_optional_int("SIMPLEMED_FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT)
    return val if val > 0 else DEFAULT_FETCH_TIMEOUT


def cache_key() -> str:
    """Optional: key under which the last good payload is stored."""
    return get_optional("SIMPLEMED_CACHE_KEY", DEFAULT_CACHE_KEY)


def store_path() -> Path:
    """Optional: file backing the durable key-value store. Default data/cache/preferences.json."""
    val = get_optional("SIMPLEMED_STORE_PATH", "")
    if val:
        return Path(val)
    return _project_root() / "data" / "cache" / "preferences.json"


def fallback_path() -> Path:
    """Optional: bundled fallback JSON. Default is the asset shipped in the package."""
    val = get_optional("SIMPLEMED_FALLBACK_PATH", "")
    if val:
        return Path(val)
    return _package_dir() / "assets" / "radiology_data.json"


def log_level() -> str:
    """Optional: log level name. Default INFO."""
    return get_optional("SIMPLEMED_LOG_LEVEL", "INFO").upper()


def log_file() -> Path | None:
    """Optional: file that receives log records in addition to stderr."""
    val = get_optional("SIMPLEMED_LOG_FILE", "")
    return Path(val) if val else None


def project_root() -> Path:
    """Project root directory."""
    return _project_root()
