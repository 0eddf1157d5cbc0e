"""
Exclusive locks guarding the in-memory store.

A GuardedLock is a reentrant lock with two extra rules:

- Poisoning: if an exception escapes the critical section, the lock is
  marked poisoned and every later acquisition raises StorePoisonedError.
- Ordering: each lock has a rank. A thread holding a lock may only acquire
  locks of equal or higher rank (entries before visits), otherwise
  LockOrderViolation is raised instead of risking a deadlock.
"""

import threading
from typing import List

from loguru import logger

from redirect_app.exceptions import FatalInvariantViolation, StorePoisonedError

ENTRIES_RANK = 0
VISITS_RANK = 1

_held = threading.local()


def _held_locks() -> List["GuardedLock"]:
    if not hasattr(_held, "stack"):
        _held.stack = []
    return _held.stack


class LockOrderViolation(FatalInvariantViolation):
    """A lock was requested out of the fixed acquisition order."""
    pass


class GuardedLock:
    """Reentrant, rank-ordered lock that poisons itself on failure."""

    def __init__(self, name: str, rank: int = 0):
        self.name = name
        self.rank = rank
        self._lock = threading.RLock()
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    def __enter__(self) -> "GuardedLock":
        stack = _held_locks()
        for held in stack:
            if held is not self and held.rank > self.rank:
                raise LockOrderViolation(
                    f"Cannot acquire '{self.name}' while holding '{held.name}'"
                )

        # Blocks until available; no timeout
        self._lock.acquire()
        if self._poisoned:
            self._lock.release()
            raise StorePoisonedError(self.name)

        stack.append(self)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is not None and not self._poisoned:
                self._poisoned = True
                logger.opt(exception=(exc_type, exc, tb)).critical(
                    "Lock '{}' poisoned by failure inside critical section", self.name
                )
        finally:
            _held_locks().pop()
            self._lock.release()
        return False

    def __repr__(self) -> str:
        state = "poisoned" if self._poisoned else "ok"
        return f"<GuardedLock {self.name} rank={self.rank} {state}>"
