"""
In-memory store for entries and visits.

Nothing here is durable: all data is lost when the process exits.
"""

from .entry_store import EntryStore
from .factory import LockMode, StoreFactory
from .locks import GuardedLock, LockOrderViolation
from .store import Store
from .visit_log import VisitLog

__all__ = [
    "EntryStore",
    "VisitLog",
    "Store",
    "StoreFactory",
    "LockMode",
    "GuardedLock",
    "LockOrderViolation",
]
