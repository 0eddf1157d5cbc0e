from typing import List
from uuid import UUID

from loguru import logger

from redirect_app.exceptions import EntryNotFoundError
from redirect_app.models import Entry, Visit
from redirect_app.store import Store


class QueryService:
    """
    Read-only listings used by the API layer.
    
    All results are snapshots in insertion order. There is no pagination.
    """

    def __init__(self, store: Store):
        self.store = store

    def list_entries(self) -> List[Entry]:
        return self.store.entries.list_all()

    def list_all_visits(self) -> List[Visit]:
        return self.store.visits.list_all()

    def list_visits_for_entry(self, entry_id: UUID) -> List[Visit]:
        """Visits recorded for one entry
        
        An existing entry with no visits yields an empty list; an unknown
        id is an error so the caller can tell the two apart.
        
        Raises:
            EntryNotFoundError: No entry has this id
        """
        with self.store.entries.lock:
            entry = self.store.entries.lookup_by_id(entry_id)
            visits = self.store.visits.list_by_entry(entry_id) if entry else None

        if entry is None:
            logger.info("Visit listing requested for unknown entry {}", entry_id)
            raise EntryNotFoundError(f"Entry not found by that ID: {entry_id}")

        return visits
