"""A mutual-exclusion lock with try and timed acquisition."""

from __future__ import annotations

import threading
from types import TracebackType


class Mutex:
    """A non-reentrant lock.

    It can be used as a context manager, which locks on entry and unlocks on exit.
    """

    __slots__ = ("_lock",)

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def lock(self) -> None:
        """Block until the lock is held."""
        self._lock.acquire()

    def unlock(self) -> None:
        """Release the lock; raises RuntimeError if it is not held."""
        self._lock.release()

    def try_lock(self) -> bool:
        """Take the lock if it is free; return False at once if it is busy."""
        return self._lock.acquire(blocking=False)

    def timed_lock(self, seconds: float) -> bool:
        """Wait at most ``seconds`` for the lock; return whether it was taken."""
        if seconds < 0:
            raise ValueError("seconds must not be negative")
        return self._lock.acquire(timeout=seconds)

    def locked(self) -> bool:
        """Return True if the lock is currently held by anyone."""
        return self._lock.locked()

    def __enter__(self) -> Mutex:
        self.lock()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unlock()