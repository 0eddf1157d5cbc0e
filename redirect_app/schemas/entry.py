from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class EntryCreate(BaseModel):
    code: str = Field(..., description="Short code to register")
    url: str = Field(..., description="Redirect destination")


class EntryResponse(BaseModel):
    """Entry as returned by the API"""
    id: UUID
    code: str
    url: str

    # Pydantic V2 style configuration
    model_config = ConfigDict(from_attributes=True)
