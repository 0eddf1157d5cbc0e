from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    """
    A registered short-code mapping.
    
    Created once on registration, never mutated or removed. Codes are not
    unique: when several entries share a code, the first one registered wins.
    """

    id: UUID = Field(default_factory=uuid4, description="Stable reference used by visits")
    code: str = Field(..., description="Short code clients request")
    url: str = Field(..., description="Redirect destination (not validated)")

    model_config = ConfigDict(frozen=True)
