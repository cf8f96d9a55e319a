"""A size-bounded, time-limited cache with least-recently-used eviction."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import timedelta

from .lru import LinkedListLRU


@dataclass(frozen=True)
class CacheEntry:
    """A cached value and the monotonic time it was stored."""

    value: str
    created_at: float


def _seconds(ttl: float | timedelta) -> float:
    if isinstance(ttl, timedelta):
        return ttl.total_seconds()
    return float(ttl)


class LRUCache:
    """Maps int keys to values, expiring them after ttl and capping their number."""

    def __init__(self, max_entries: int, ttl: float | timedelta) -> None:
        self._entries: dict[int, CacheEntry] = {}
        self._lock = threading.Lock()
        self._lru = LinkedListLRU()
        self.max_entries = max_entries
        self.ttl = _seconds(ttl)

    def get(self, param: int) -> str | None:
        """Return the fresh value for param, or None if absent or expired."""
        with self._lock:
            entry = self._entries.get(param)
            if entry is None or time.monotonic() - entry.created_at >= self.ttl:
                return None
            self._lru.hit(param)
            return entry.value

    def put(self, param: int, value: str) -> None:
        """Store value for param, evicting the least recently used entries over the limit."""
        with self._lock:
            self._entries[param] = CacheEntry(value, time.monotonic())
            self._lru.hit_or_add(param)
            for key in self._lru.size_to(self.max_entries):
                self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, param: object) -> bool:
        with self._lock:
            return param in self._entries