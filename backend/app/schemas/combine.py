"""Combine Schemas — Pydantic response models for the element endpoints.

Invariants:
    - CombineResponse.message is always present; element is omitted on errors
    - ElementPayload.discovered is true only when the request created a record

Design Decisions:
    - Response models mirror the wire contract the game client already reads
      ({message, element: {emoji, text, discovered}})
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ElementPayload(BaseModel):
    """Element as shown to the player."""
    emoji: str
    text: str
    discovered: bool


class CombineResponse(BaseModel):
    """Result of combining two elements."""
    message: str
    element: ElementPayload | None = None


class StartingElement(BaseModel):
    """One of the elements every fresh board starts with."""
    emoji: str
    text: str


class DiscoveredElement(BaseModel):
    """Stored combination, as listed for browsing."""
    word1: str
    word2: str
    emoji: str
    text: str
    created_at: datetime | None = None


class ElementListResponse(BaseModel):
    elements: list[DiscoveredElement]
    total: int = Field(ge=0)
    limit: int
    offset: int
