"""Cache subsystem — fingerprinted keys over a pluggable key-value store."""

from crispymd.cache.disk import SQLiteStore
from crispymd.cache.keys import KEY_PREFIX, content_prefix, generate_cache_key, hash_content
from crispymd.cache.manager import CacheManager
from crispymd.cache.memory import MemoryStore
from crispymd.cache.stats import CacheEntry, CacheStats
from crispymd.cache.store import KeyValueStore

__all__ = [
    "KEY_PREFIX",
    "CacheEntry",
    "CacheManager",
    "CacheStats",
    "KeyValueStore",
    "MemoryStore",
    "SQLiteStore",
    "content_prefix",
    "generate_cache_key",
    "hash_content",
]
