"""Memoisation of int-keyed functions with per-key single-flight execution."""

from __future__ import annotations

import functools
import threading
from datetime import timedelta
from typing import Callable, Protocol

from .lru_cache import LRUCache
from .mutex_with_counter import MutexWithCounter

MAX_ENTRIES = 1000
TTL = timedelta(minutes=5)

CachedFunction = Callable[[int], str]


class Cache(Protocol):
    """Storage used by a cached function."""

    def get(self, param: int) -> str | None: ...

    def put(self, param: int, value: str) -> None: ...


def new_cached_function(func: CachedFunction) -> CachedFunction:
    """Wrap func with an LRU cache of 1000 entries and a five-minute TTL."""
    return new_cached_function_with_options(func, MAX_ENTRIES, TTL)


def new_cached_function_with_options(
    func: CachedFunction, max_entries: int, ttl: float | timedelta
) -> CachedFunction:
    """Wrap func with an LRU cache of the given size and TTL (seconds or timedelta)."""
    return new_cached_function_with_cache(func, LRUCache(max_entries, ttl))


def new_cached_function_with_cache(func: CachedFunction, cache: Cache) -> CachedFunction:
    """Wrap func with the given cache.

    Concurrent calls for the same key run func at most once; the others wait
    and take the cached result. Exceptions from func propagate and are not cached.
    """
    running: dict[int, MutexWithCounter] = {}
    running_lock = threading.Lock()

    @functools.wraps(func)
    def cached(param: int) -> str:
        value = cache.get(param)
        if value is not None:
            return value

        with running_lock:
            lock = running.setdefault(param, MutexWithCounter())
            lock.inc()
        try:
            with lock:
                value = cache.get(param)
                if value is not None:
                    return value
                value = func(param)
                cache.put(param, value)
                return value
        finally:
            with running_lock:
                if lock.dec() == 0 and running.get(param) is lock:
                    del running[param]

    return cached