"""Cache manager — key format, TTL and bulk purges over a key-value store."""

from __future__ import annotations

import logging

from crispymd.cache.keys import KEY_PREFIX, content_prefix, generate_cache_key, is_content_key
from crispymd.cache.stats import DEFAULT_TTL_SECONDS, CacheStats
from crispymd.cache.store import KeyValueStore
from crispymd.errors.exceptions import ConfigurationError
from crispymd.types import ContentId

logger = logging.getLogger(__name__)


class CacheManager:
    """Owns the fingerprint key layout on top of an injected store.

    Store errors propagate; callers that must not fail (the renderer)
    decide how to degrade.
    """

    def __init__(
        self,
        store: KeyValueStore,
        expiration: int = DEFAULT_TTL_SECONDS,
    ) -> None:
        self._store = store
        self._expiration = _check_expiration(expiration)
        self._stats = CacheStats()

    @property
    def backend(self) -> KeyValueStore:
        return self._store

    @property
    def expiration(self) -> int:
        return self._expiration

    @staticmethod
    def generate_key(content_id: ContentId, markdown: str) -> str:
        return generate_cache_key(content_id, markdown)

    def lookup(self, key: str) -> str | None:
        """Return the cached HTML for ``key``, or None on a miss."""
        value = self._store.get(key)
        if value is None:
            self._stats.misses += 1
            return None
        self._stats.hits += 1
        return value

    def store(self, key: str, html: str, expiration: int | None = None) -> bool:
        """Store ``html`` under ``key`` for ``expiration`` seconds (default TTL)."""
        ttl = self._expiration if expiration is None else _check_expiration(expiration)
        return self._store.set(key, html, ttl)

    def delete(self, key: str) -> bool:
        return self._store.delete(key)

    def delete_for_content(self, content_id: ContentId) -> int:
        """Delete every entry generated for ``content_id``. Returns count deleted."""
        keys = [
            key
            for key in self._store.find_keys_by_prefix(content_prefix(content_id))
            if is_content_key(key, content_id)
        ]
        return self._delete_keys(keys)

    def clear_all(self) -> int:
        """Delete every entry under the global key prefix."""
        count = self._delete_keys(self._store.find_keys_by_prefix(KEY_PREFIX))
        self._stats = CacheStats()
        return count

    def stats(self) -> CacheStats:
        """Return entry count, total HTML size and hit/miss counters."""
        count, total_size = self._store.measure_prefix(KEY_PREFIX)
        return CacheStats(
            count=count,
            total_size_bytes=total_size,
            hits=self._stats.hits,
            misses=self._stats.misses,
        )

    def _delete_keys(self, keys: list[str]) -> int:
        count = 0
        for key in keys:
            if self._store.delete(key):
                count += 1
        return count


def _check_expiration(expiration: object) -> int:
    if isinstance(expiration, bool) or not isinstance(expiration, int) or expiration <= 0:
        raise ConfigurationError(
            f"Cache expiration must be a positive number of seconds, got {expiration!r}",
            field="cache_expiration",
        )
    return expiration
