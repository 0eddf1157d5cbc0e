"""
Entry store: the registered code -> destination mappings.
"""

from typing import Dict, List, Optional
from uuid import UUID

from loguru import logger

from redirect_app.models import Entry
from .locks import ENTRIES_RANK, GuardedLock


class EntryStore:
    """
    Insertion-ordered collection of entries behind one exclusive lock.
    
    Besides the ordered list, two indexes are kept:
    - code -> first entry registered with that code (first-match tie-break)
    - id -> entry
    
    Entries are frozen models, so the stored instance is returned directly.
    """

    def __init__(self, lock: Optional[GuardedLock] = None):
        """
        Initialize an empty store.
        
        Args:
            lock: Lock to guard the collection. A shared lock may be passed
                  to coordinate with other components.
        """
        self.lock = lock or GuardedLock("entries", rank=ENTRIES_RANK)
        self._entries: List[Entry] = []
        self._by_code: Dict[str, Entry] = {}
        self._by_id: Dict[UUID, Entry] = {}

    def insert(self, code: str, url: str) -> Entry:
        """Register a new entry. Always succeeds; duplicate codes are accepted."""
        entry = Entry(code=code, url=url)
        with self.lock:
            self._entries.append(entry)
            self._by_id[entry.id] = entry
            if code in self._by_code:
                logger.debug("Code '{}' already registered; earlier entry keeps precedence", code)
            else:
                self._by_code[code] = entry
        return entry

    def lookup_by_code(self, code: str) -> Optional[Entry]:
        """First entry (in insertion order) with this code, or None"""
        with self.lock:
            return self._by_code.get(code)

    def lookup_by_id(self, entry_id: UUID) -> Optional[Entry]:
        with self.lock:
            return self._by_id.get(entry_id)

    def list_all(self) -> List[Entry]:
        """Snapshot of all entries in insertion order"""
        with self.lock:
            return list(self._entries)

    def count(self) -> int:
        with self.lock:
            return len(self._entries)
