"""Tests for the in-memory store."""

import time
from unittest.mock import patch

from crispymd.cache.memory import MemoryStore


class TestMemoryStore:
    def test_get_set(self):
        store = MemoryStore()
        assert store.set("k1", "<p>Hello</p>", 60) is True
        assert store.get("k1") == "<p>Hello</p>"

    def test_get_miss(self):
        assert MemoryStore().get("nonexistent") is None

    def test_expired_entry_is_a_miss(self):
        store = MemoryStore()
        store.set("k1", "value", 10)
        with patch("crispymd.cache.stats.time.time", return_value=time.time() + 11):
            assert store.get("k1") is None
        assert len(store) == 0

    def test_delete(self):
        store = MemoryStore()
        store.set("k1", "value", 60)
        assert store.delete("k1") is True
        assert store.get("k1") is None
        assert store.delete("k1") is False

    def test_find_keys_by_prefix(self):
        store = MemoryStore()
        store.set("crispy_md_1_aaa", "a", 60)
        store.set("crispy_md_1_bbb", "b", 60)
        store.set("crispy_md_2_ccc", "c", 60)
        assert sorted(store.find_keys_by_prefix("crispy_md_1_")) == [
            "crispy_md_1_aaa",
            "crispy_md_1_bbb",
        ]
        assert store.find_keys_by_prefix("nothing_") == []

    def test_find_keys_skips_expired(self):
        store = MemoryStore()
        store.set("p_short", "a", 5)
        store.set("p_long", "b", 500)
        with patch("crispymd.cache.stats.time.time", return_value=time.time() + 10):
            assert store.find_keys_by_prefix("p_") == ["p_long"]

    def test_lru_eviction(self):
        # 0.0003 MB ≈ 314 bytes: fits one 200-byte value, not two
        store = MemoryStore(max_size_mb=0.0003)
        store.set("k1", "a" * 200, 60)
        store.set("k2", "b" * 200, 60)
        assert store.get("k1") is None
        assert store.get("k2") is not None

    def test_lru_order_preserved(self):
        store = MemoryStore(max_size_mb=0.001)  # ≈ 1048 bytes
        store.set("k1", "a" * 500, 60)
        store.set("k2", "b" * 500, 60)
        store.get("k1")
        store.set("k3", "c" * 500, 60)
        assert store.get("k1") is not None
        assert store.get("k2") is None

    def test_oversized_value_rejected(self):
        store = MemoryStore(max_size_mb=0.0001)
        assert store.set("k1", "x" * 1000, 60) is False
        assert store.get("k1") is None

    def test_oversized_replacement_keeps_existing_entry(self):
        store = MemoryStore(max_size_mb=0.0003)
        store.set("k1", "small", 60)
        assert store.set("k1", "x" * 1000, 60) is False
        assert store.get("k1") == "small"
        assert store.size_mb > 0

    def test_measure_prefix(self):
        store = MemoryStore()
        store.set("p_a", "abcd", 500)
        store.set("p_b", "é", 500)
        store.set("p_old", "gone", 5)
        store.set("other", "zzzz", 500)
        with patch("crispymd.cache.stats.time.time", return_value=time.time() + 10):
            assert store.measure_prefix("p_") == (2, 6)
        assert store.measure_prefix("none_") == (0, 0)

    def test_measure_prefix_keeps_lru_order(self):
        store = MemoryStore(max_size_mb=0.001)
        store.set("k1", "a" * 500, 60)
        store.set("k2", "b" * 500, 60)
        store.get("k1")
        assert store.measure_prefix("k") == (2, 1000)
        store.set("k3", "c" * 500, 60)
        assert "k1" in store
        assert "k2" not in store

    def test_overwrite_existing_key(self):
        store = MemoryStore()
        store.set("k1", "first", 60)
        store.set("k1", "second", 60)
        assert store.get("k1") == "second"
        assert len(store) == 1

    def test_clear_and_size(self):
        store = MemoryStore()
        store.set("k1", "x" * 1000, 60)
        assert store.size_mb > 0
        store.clear()
        assert len(store) == 0
        assert store.size_mb == 0
