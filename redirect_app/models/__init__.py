"""
In-memory records for the redirect service.

Entries and visits live only for the lifetime of the process.
"""

from .entry import Entry
from .visit import Visit, utc_now

__all__ = ["Entry", "Visit", "utc_now"]
