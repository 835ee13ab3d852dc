"""Global configuration for the panchangam viewer.

This module exposes configuration constants via the `Config` class. All values
are read from environment variables with defaults suited to serving a local
`panchangam.txt` next to the app.
"""

import os  # Standard library for environment and filesystem helpers
import re  # Robust parsing of numeric envs with comments/ranges


def _env_int(name: str, default: int) -> int:
    """Parse an integer from an environment variable robustly.

    Accepts values like "60", "60 # seconds", or " 60 " and returns the first
    integer found. Falls back to default if parsing fails.
    """
    val = os.getenv(name)
    if val is None:
        return default
    s = str(val).strip().strip('"').strip("'")
    m = re.search(r"-?\d+", s)
    if not m:
        return default
    return int(m.group(0))


def _env_path_or_url(name: str, default: str) -> str:
    """Normalize a source location: strip quotes, expand ~ and $VARS for paths."""
    raw = str(os.getenv(name, default)).strip().strip('"').strip("'")
    if raw.lower().startswith(("http://", "https://")):
        return raw
    return os.path.expanduser(os.path.expandvars(raw))


class Config:
    """Application configuration sourced from environment variables.

    This class provides class attributes so other modules can import settings as
    constants (e.g., `from panchangam_view.config import Config`). To override a
    setting, define the corresponding environment variable before launching the
    application.
    """
    # Source text
    SOURCE = _env_path_or_url("PG_SOURCE", "panchangam.txt")  # File path or http(s) URL
    ENCODING = os.getenv("PG_ENCODING", "utf-8")  # Text encoding for file and URL sources
    FETCH_TIMEOUT_SEC = float(os.getenv("PG_FETCH_TIMEOUT_SEC", 10.0))  # HTTP timeout for URL sources

    # Dashboard
    HOST = os.getenv("PG_HOST", "0.0.0.0")  # Flask bind host
    PORT = _env_int("PG_PORT", 8000)  # Flask bind port
    DEBUG = os.getenv("PG_DEBUG", "0") == "1"  # Flask debug switch
    # Page auto-refresh so remaining times stay current; 0 disables
    REFRESH_SEC = _env_int("PG_REFRESH_SEC", 60)
