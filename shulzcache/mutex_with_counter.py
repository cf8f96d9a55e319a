"""A mutex that also counts how many callers are interested in it."""

from __future__ import annotations

import threading
from types import TracebackType


class MutexWithCounter:
    """A non-reentrant lock paired with a thread-safe counter.

    The counter is independent of the lock: callers use it to track how many
    threads are waiting for or holding the lock, so the last one out can
    discard it.
    """

    def __init__(self) -> None:
        self._mutex = threading.Lock()
        self._counter_lock = threading.Lock()
        self._counter = 0

    def acquire(self) -> None:
        """Block until the lock is held."""
        self._mutex.acquire()

    def release(self) -> None:
        """Release the lock."""
        self._mutex.release()

    def inc(self) -> int:
        """Atomically add one to the counter and return the new value."""
        with self._counter_lock:
            self._counter += 1
            return self._counter

    def dec(self) -> int:
        """Atomically subtract one from the counter and return the new value."""
        with self._counter_lock:
            self._counter -= 1
            return self._counter

    def __enter__(self) -> MutexWithCounter:
        self.acquire()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()