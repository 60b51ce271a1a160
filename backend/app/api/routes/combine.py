"""Combine Route — GET /api/v1/combine?word1=..&word2=..

Invariants:
    - Missing or blank words -> 400 via MissingParametersError (no DB writes)
    - Raw words are length-capped here; the service re-checks after lower-casing
    - Model failures never surface here; the service falls back
    - Always 200 with {message, element} on success, pair or label hit included

Design Decisions:
    - Query params, not a JSON body: the game client issues a plain GET per drop
    - Text generator read from app.state (one httpx client per process),
      exposed as a dependency so tests can override it
"""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.normalize_pair import MAX_WORD_LENGTH
from app.core.repository_protocols import TextGenerator
from app.infrastructure.database import get_db
from app.infrastructure.element_repository import SqlElementRepository
from app.schemas.combine import CombineResponse, ElementPayload
from app.services.combine_elements import CombinationService

router = APIRouter(prefix="/api/v1", tags=["combine"])


def get_text_generator(request: Request) -> TextGenerator:
    """FastAPI dependency for the model client created in the lifespan."""
    generator = getattr(request.app.state, "text_generator", None)
    if generator is None:
        raise RuntimeError("Text generator not initialized")
    return generator


@router.get("/combine", response_model=CombineResponse)
async def combine_elements(
    word1: str | None = Query(None, max_length=MAX_WORD_LENGTH),
    word2: str | None = Query(None, max_length=MAX_WORD_LENGTH),
    db: AsyncSession = Depends(get_db),
    generator: TextGenerator = Depends(get_text_generator),
):
    """Combine two elements into a (possibly new) element."""
    service = CombinationService(
        SqlElementRepository(db), generator,
        max_attempts=get_settings().generation_max_attempts,
    )
    result = await service.combine(word1, word2)
    return CombineResponse(
        message=result.message,
        element=ElementPayload(
            emoji=result.emoji, text=result.text, discovered=result.discovered,
        ),
    )
