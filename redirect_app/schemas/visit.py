from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, IPvAnyAddress


class VisitResponse(BaseModel):
    """Visit as returned by the API. Timestamps are UTC with no offset marker."""
    id: UUID
    entry_id: UUID
    ip: IPvAnyAddress
    timestamp: datetime

    # Pydantic V2 style configuration
    model_config = ConfigDict(from_attributes=True)
