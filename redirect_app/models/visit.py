from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress


def utc_now() -> datetime:
    """Current UTC time without tzinfo attached."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Visit(BaseModel):
    """
    Immutable record of one redirect event.
    
    entry_id always refers to an entry that existed when the visit was
    recorded; entries are never removed so it cannot dangle.
    """

    id: UUID = Field(default_factory=uuid4)
    entry_id: UUID = Field(..., description="Entry that was matched")
    ip: IPvAnyAddress = Field(..., description="Visitor address (IPv4 or IPv6)")
    timestamp: datetime = Field(default_factory=utc_now, description="UTC, no offset")

    model_config = ConfigDict(frozen=True)
