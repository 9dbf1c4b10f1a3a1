"""Tests for the TTL response cache repository."""

from fishcast.storage.cache_repo import (
    cache_get,
    cache_set,
    clear_cache,
    count_entries,
    purge_expired,
)

NOW = 1_750_000_000.0


class TestCacheGetSet:
    def test_round_trip(self, tmp_db):
        payload = {"hourly": {"time": ["2026-06-15T00:00"]}, "n": [1, 2.5, None]}
        cache_set(tmp_db, "wx:1", payload, 3600, now=NOW)
        assert cache_get(tmp_db, "wx:1", now=NOW + 10) == payload

    def test_missing_key(self, tmp_db):
        assert cache_get(tmp_db, "nope") is None

    def test_expired(self, tmp_db):
        cache_set(tmp_db, "k", [1], 60, now=NOW)
        assert cache_get(tmp_db, "k", now=NOW + 60) == [1]
        assert cache_get(tmp_db, "k", now=NOW + 61) is None

    def test_overwrite_resets_expiry(self, tmp_db):
        cache_set(tmp_db, "k", "old", 60, now=NOW)
        cache_set(tmp_db, "k", "new", 60, now=NOW + 100)
        assert cache_get(tmp_db, "k", now=NOW + 120) == "new"
        assert count_entries(tmp_db) == 1

    def test_default_now_is_wall_clock(self, tmp_db):
        cache_set(tmp_db, "k", {"a": 1}, 300)
        assert cache_get(tmp_db, "k") == {"a": 1}


class TestPurgeAndClear:
    def test_purge_expired(self, tmp_db):
        cache_set(tmp_db, "old", 1, 10, now=NOW)
        cache_set(tmp_db, "fresh", 2, 1000, now=NOW)
        removed = purge_expired(tmp_db, now=NOW + 100)
        assert removed == 1
        assert cache_get(tmp_db, "fresh", now=NOW + 100) == 2
        assert count_entries(tmp_db) == 1

    def test_clear(self, tmp_db):
        cache_set(tmp_db, "a", 1, 10, now=NOW)
        cache_set(tmp_db, "b", 2, 10, now=NOW)
        assert clear_cache(tmp_db) == 2
        assert count_entries(tmp_db) == 0

    def test_clear_empty(self, tmp_db):
        assert clear_cache(tmp_db) == 0
