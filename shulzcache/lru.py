"""Thread-safe tracking of least-recently-used keys."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Protocol


class LRU(Protocol):
    """Tracks key recency and evicts the oldest keys."""

    def hit(self, key: int) -> bool: ...

    def hit_or_add(self, key: int) -> None: ...

    def size_to(self, max_size: int) -> list[int]: ...


class LinkedListLRU:
    """LRU bookkeeping with O(1) hit, add and evict."""

    def __init__(self) -> None:
        # Oldest first, most recently used last.
        self._order: OrderedDict[int, None] = OrderedDict()
        self._lock = threading.Lock()

    def _hit(self, key: int) -> bool:
        if key in self._order:
            self._order.move_to_end(key)
            return True
        return False

    def hit(self, key: int) -> bool:
        """Mark the key as recently used; return whether it was present."""
        with self._lock:
            return self._hit(key)

    def hit_or_add(self, key: int) -> None:
        """Mark the key as recently used, adding it if absent."""
        with self._lock:
            if not self._hit(key):
                self._order[key] = None

    def size_to(self, max_size: int) -> list[int]:
        """Evict the oldest keys until at most max_size remain; return them oldest first."""
        with self._lock:
            evicted: list[int] = []
            while len(self._order) > max_size and self._order:
                key, _ = self._order.popitem(last=False)
                evicted.append(key)
            return evicted

    def __len__(self) -> int:
        with self._lock:
            return len(self._order)