from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class CardStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Card(BaseModel):
    """A task card as persisted in the key-value store"""
    id: str = Field(..., description="Unique card identifier")
    name: str = Field(..., min_length=1, description="Card name")
    description: Optional[str] = Field(None, description="Free-form card description")
    status: Optional[CardStatus] = Field(None, description="Workflow status")
    created: int = Field(..., description="Creation time (ms since epoch)")
    last_updated: int = Field(..., alias="lastUpdated", description="Last mutation time (ms since epoch)")

    class Config:
        use_enum_values = True
        populate_by_name = True

    def to_storage(self) -> str:
        """Serialize to the JSON text written to the store."""
        return self.model_dump_json(by_alias=True)


class CardInput(BaseModel):
    """Payload for creating a card. Validation happens in the card validator."""
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class CardPatch(BaseModel):
    """
    Partial update for a card.

    Only fields that were explicitly set are merged, so passing
    ``description=None`` clears the description while omitting it keeps it.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
