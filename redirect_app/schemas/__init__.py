from .entry import EntryCreate, EntryResponse
from .visit import VisitResponse

__all__ = ["EntryCreate", "EntryResponse", "VisitResponse"]
