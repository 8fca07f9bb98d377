"""Key-value store contract consumed by the cache manager."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Single-key atomic get/set/delete plus prefix discovery.

    ``get`` returns None on a miss, including for expired entries.
    ``find_keys_by_prefix`` lists live keys only.
    ``measure_prefix`` returns (count, total UTF-8 bytes) of live entries
    without affecting eviction order.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str, ttl_seconds: int) -> bool: ...

    def delete(self, key: str) -> bool: ...

    def find_keys_by_prefix(self, prefix: str) -> list[str]: ...

    def measure_prefix(self, prefix: str) -> tuple[int, int]: ...
