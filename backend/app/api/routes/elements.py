"""Element Routes — browse discovered elements and fetch the starting set.

Invariants:
    - Listing is read-only and paginated (limit 1–100)
    - /defaults never touches the database
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.vocabulary import STARTING_ELEMENTS
from app.infrastructure.database import get_db
from app.infrastructure.element_repository import SqlElementRepository
from app.schemas.combine import (
    DiscoveredElement, ElementListResponse, StartingElement,
)

router = APIRouter(prefix="/api/v1/elements", tags=["elements"])


@router.get("", response_model=ElementListResponse)
async def list_elements(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """List discovered elements, newest first."""
    repository = SqlElementRepository(db)
    rows = await repository.list_recent(limit, offset)
    return ElementListResponse(
        elements=[
            DiscoveredElement(
                word1=r.word1, word2=r.word2, emoji=r.emoji,
                text=r.text, created_at=r.created_at,
            )
            for r in rows
        ],
        total=await repository.count(),
        limit=limit,
        offset=offset,
    )


@router.get("/defaults", response_model=list[StartingElement])
async def starting_elements():
    """Elements a fresh (or reset) board starts with."""
    return [StartingElement(emoji=e.emoji, text=e.text) for e in STARTING_ELEMENTS]
