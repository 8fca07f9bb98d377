"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Parser settings
DEFAULT_PARSER_TYPE = "extra"
DEFAULT_ALLOW_UNSAFE_HTML = True  # trust the author
DEFAULT_CONTAINER_CLASS = "markdown-body"

# Cache settings
DEFAULT_CACHE_EXPIRATION = 86400  # 1 day
DEFAULT_CACHE_DISABLED = False
DEFAULT_CACHE_BACKEND = "sqlite"
DEFAULT_CACHE_MEMORY_MB = 64.0
DEFAULT_CACHE_DISK_MB = 500.0

# Excerpt and feed settings
DEFAULT_EXCERPT_LENGTH = 55
DEFAULT_EXCERPT_MORE = "…"
DEFAULT_FEED_MODE = "full"

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "parser_type": DEFAULT_PARSER_TYPE,
        "allow_unsafe_html": DEFAULT_ALLOW_UNSAFE_HTML,
        "container_class": DEFAULT_CONTAINER_CLASS,
        "cache_expiration": DEFAULT_CACHE_EXPIRATION,
        "cache_disabled": DEFAULT_CACHE_DISABLED,
        "cache_backend": DEFAULT_CACHE_BACKEND,
        "cache_db_path": None,
        "cache_memory_mb": DEFAULT_CACHE_MEMORY_MB,
        "cache_disk_mb": DEFAULT_CACHE_DISK_MB,
        "excerpt_length": DEFAULT_EXCERPT_LENGTH,
        "excerpt_more": DEFAULT_EXCERPT_MORE,
        "feed_mode": DEFAULT_FEED_MODE,
        "log_level": DEFAULT_LOG_LEVEL,
    }
