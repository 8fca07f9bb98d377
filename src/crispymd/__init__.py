"""crispymd — cached Markdown rendering for Markdown-first content systems."""

from crispymd.cache import CacheStats, KeyValueStore, MemoryStore, SQLiteStore
from crispymd.content import ExcerptGenerator, FeedFormatter, MarkdownRenderer
from crispymd.core import create_renderer, load_settings
from crispymd.errors import ConfigurationError, CrispyMdError, StoreError
from crispymd.parser import create_parser

__all__ = [
    "CacheStats",
    "ConfigurationError",
    "CrispyMdError",
    "ExcerptGenerator",
    "FeedFormatter",
    "KeyValueStore",
    "MarkdownRenderer",
    "MemoryStore",
    "SQLiteStore",
    "StoreError",
    "create_parser",
    "create_renderer",
    "load_settings",
]
