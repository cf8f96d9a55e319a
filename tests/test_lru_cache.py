import time
from datetime import timedelta

from shulzcache.lru_cache import CacheEntry, LRUCache


def test_put_then_get():
    cache = LRUCache(10, 60)
    cache.put(1, "one")
    assert cache.get(1) == "one"
    assert 1 in cache
    assert len(cache) == 1


def test_get_missing_is_none():
    cache = LRUCache(10, 60)
    assert cache.get(42) is None
    assert 42 not in cache


def test_put_overwrites():
    cache = LRUCache(10, 60)
    cache.put(1, "a")
    cache.put(1, "b")
    assert cache.get(1) == "b"
    assert len(cache) == 1


def test_entry_expires_after_ttl():
    cache = LRUCache(10, 0.01)
    cache.put(1, "one")
    time.sleep(0.02)
    assert cache.get(1) is None
    # Expired entries stay stored until evicted.
    assert 1 in cache


def test_timedelta_ttl_accepted():
    cache = LRUCache(10, timedelta(minutes=5))
    assert cache.ttl == 300.0
    cache.put(3, "three")
    assert cache.get(3) == "three"


def test_evicts_least_recently_used():
    cache = LRUCache(3, 60)
    for key in range(3):
        cache.put(key, str(key))
    assert cache.get(0) == "0"
    cache.put(3, "3")
    assert len(cache) == 3
    assert 1 not in cache
    assert 0 in cache and 2 in cache and 3 in cache


def test_size_never_exceeds_max():
    cache = LRUCache(5, 60)
    for key in range(50):
        cache.put(key, str(key))
        assert len(cache) <= 5
    assert list(k for k in range(50) if k in cache) == [45, 46, 47, 48, 49]


def test_cache_entry_fields():
    entry = CacheEntry("v", 1.5)
    assert entry.value == "v"
    assert entry.created_at == 1.5