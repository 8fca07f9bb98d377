"""Cache entry and statistics models."""

from __future__ import annotations

import time

from pydantic import BaseModel, Field

DEFAULT_TTL_SECONDS = 24 * 3600  # 1 day


class CacheEntry(BaseModel):
    """A rendered HTML fragment stored under a fingerprint key."""

    key: str
    value: str = ""
    created_at: float = Field(default_factory=time.time)
    ttl_seconds: float = DEFAULT_TTL_SECONDS

    @property
    def is_expired(self) -> bool:
        return time.time() > self.created_at + self.ttl_seconds

    @property
    def size_bytes(self) -> int:
        return len(self.value.encode("utf-8"))


class CacheStats(BaseModel):
    """Aggregate cache statistics."""

    count: int = 0
    total_size_bytes: int = 0
    hits: int = 0
    misses: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    @property
    def size_mb(self) -> float:
        return self.total_size_bytes / (1024 * 1024)
