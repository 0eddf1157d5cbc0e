from .entry_store import EntryStore
from .visit_log import VisitLog


class Store:
    """
    Process-wide store: one EntryStore and one VisitLog.
    
    Built once at startup and passed by reference to every request.
    Any operation that needs both components must take the entry lock
    before the visit lock.
    """

    def __init__(self, entries: EntryStore = None, visits: VisitLog = None):
        self.entries = entries or EntryStore()
        self.visits = visits or VisitLog()

    @property
    def poisoned(self) -> bool:
        """True once either component's lock is unusable"""
        return self.entries.lock.poisoned or self.visits.lock.poisoned
