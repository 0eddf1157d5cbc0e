from loguru import logger

from redirect_app.models import Entry
from redirect_app.store import Store


class RegistrationService:
    """Registers new code -> destination mappings."""

    def __init__(self, store: Store):
        self.store = store

    def register(self, code: str, url: str) -> Entry:
        """Create a new entry
        
        Any strings are accepted, including empty ones, and a code may be
        registered more than once. Lookups by code always return the first
        entry registered with it.
        """
        entry = self.store.entries.insert(code, url)
        logger.info("Registered entry {} (code='{}')", entry.id, entry.code)
        return entry
