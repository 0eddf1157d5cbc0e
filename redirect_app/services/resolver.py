from pydantic import IPvAnyAddress, TypeAdapter
from loguru import logger

from redirect_app.exceptions import EntryNotFoundError
from redirect_app.store import Store

_ip_adapter = TypeAdapter(IPvAnyAddress)


class Resolver:
    """
    Resolve-and-record transaction for the redirect path.
    
    Couples the code lookup with appending a visit, so every successful
    resolve leaves exactly one visit behind and unknown codes leave none.
    """

    def __init__(self, store: Store):
        self.store = store

    def resolve(self, code: str, ip: IPvAnyAddress) -> str:
        """
        Look up a code and record the visit.
        
        Flow:
        1. Validate the visitor address, before any lock is held
        2. Take the entry lock and find the first entry with this code
        3. If found, take the visit lock (always second) and append a visit
        4. Release both, then return the destination URL
        
        Raises:
            ValidationError: ip is not an IPv4 or IPv6 address
            EntryNotFoundError: No entry is registered for the code
        """
        ip = _ip_adapter.validate_python(ip)

        with self.store.entries.lock:
            entry = self.store.entries.lookup_by_code(code)
            visit = self.store.visits.append(entry.id, ip) if entry else None

        if entry is None:
            logger.info("Resolve miss for code '{}' from {}", code, ip)
            raise EntryNotFoundError(f"No entry registered for code '{code}'")

        logger.debug("Resolved '{}' -> {} (visit {} from {})", code, entry.url, visit.id, ip)
        return entry.url
