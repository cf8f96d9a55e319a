"""Thread-safe memoizing wrapper with LRU eviction, TTL expiry and per-key call deduplication."""

__version__ = "0.1.0"
__all__ = ["cache", "demo", "lru", "lru_cache", "mutex_with_counter"]