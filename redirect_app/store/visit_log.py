"""
Visit log: append-only record of redirect events.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import IPvAnyAddress

from redirect_app.models import Visit, utc_now
from .locks import VISITS_RANK, GuardedLock


class VisitLog:
    """
    Append-only, insertion-ordered visit collection behind one exclusive lock.
    
    The log is unbounded: nothing is ever evicted.
    Timestamps never decrease in append order; if the wall clock steps
    backwards the previous timestamp is reused.
    """

    def __init__(self, lock: Optional[GuardedLock] = None):
        self.lock = lock or GuardedLock("visits", rank=VISITS_RANK)
        self._visits: List[Visit] = []

    def append(self, entry_id: UUID, ip: IPvAnyAddress) -> Visit:
        """
        Record a visit to an entry.
        
        Callers must make sure entry_id refers to an existing entry.
        The record is validated before the lock is taken, so a bad address
        is rejected without touching the log.
        """
        visit = Visit(entry_id=entry_id, ip=ip)
        with self.lock:
            timestamp = utc_now()
            if self._visits and timestamp < self._visits[-1].timestamp:
                timestamp = self._visits[-1].timestamp
            visit = visit.model_copy(update={"timestamp": timestamp})
            self._visits.append(visit)
            return visit

    def list_all(self) -> List[Visit]:
        """Snapshot of all visits in insertion order"""
        with self.lock:
            return list(self._visits)

    def list_by_entry(self, entry_id: UUID) -> List[Visit]:
        """Visits for one entry, insertion order preserved"""
        with self.lock:
            return [visit for visit in self._visits if visit.entry_id == entry_id]

    def count(self) -> int:
        with self.lock:
            return len(self._visits)
