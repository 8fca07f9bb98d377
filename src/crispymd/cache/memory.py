"""In-process key-value store with TTL and LRU eviction."""

from __future__ import annotations

from collections import OrderedDict

from crispymd.cache.stats import CacheEntry

_DEFAULT_MAX_SIZE_MB = 64


class MemoryStore:
    """In-memory LRU store with size-based eviction.

    Suitable for a single process (tests, previews, short-lived workers).
    """

    def __init__(self, max_size_mb: float = _DEFAULT_MAX_SIZE_MB) -> None:
        self._store: OrderedDict[str, CacheEntry] = OrderedDict()
        self._max_size_bytes = int(max_size_mb * 1024 * 1024)
        self._current_size_bytes = 0

    def get(self, key: str) -> str | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        if entry.is_expired:
            self._remove(key)
            return None
        # Move to end (most recently used)
        self._store.move_to_end(key)
        return entry.value

    def set(self, key: str, value: str, ttl_seconds: int) -> bool:
        entry = CacheEntry(key=key, value=value, ttl_seconds=ttl_seconds)
        entry_size = entry.size_bytes
        if entry_size > self._max_size_bytes:
            return False
        self._remove(key)
        # Evict until there's room
        while self._current_size_bytes + entry_size > self._max_size_bytes and self._store:
            self._evict_oldest()
        self._store[key] = entry
        self._current_size_bytes += entry_size
        return True

    def delete(self, key: str) -> bool:
        return self._remove(key)

    def find_keys_by_prefix(self, prefix: str) -> list[str]:
        expired = [key for key, entry in self._store.items() if entry.is_expired]
        for key in expired:
            self._remove(key)
        return [key for key in self._store if key.startswith(prefix)]

    def measure_prefix(self, prefix: str) -> tuple[int, int]:
        """Count and total size of live entries under ``prefix``; recency is untouched."""
        live = [
            entry
            for key, entry in self._store.items()
            if key.startswith(prefix) and not entry.is_expired
        ]
        return len(live), sum(entry.size_bytes for entry in live)

    def clear(self) -> None:
        self._store.clear()
        self._current_size_bytes = 0

    @property
    def size_mb(self) -> float:
        return self._current_size_bytes / (1024 * 1024)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def _remove(self, key: str) -> bool:
        entry = self._store.pop(key, None)
        if entry is None:
            return False
        self._current_size_bytes -= entry.size_bytes
        return True

    def _evict_oldest(self) -> None:
        _, entry = self._store.popitem(last=False)
        self._current_size_bytes -= entry.size_bytes
