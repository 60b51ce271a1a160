"""Element Repository — SQLAlchemy implementation of the ElementRepository protocol.

Invariants:
    - find_one accepts only exact-match filters on word1, word2, text
    - create commits immediately; the returned record mirrors the stored row
    - ORM rows never leave this module (callers get ElementRecord)

Design Decisions:
    - Filter keys whitelisted: no arbitrary column access from callers (ADR: security)
"""

from typing import Mapping

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ElementRecord
from app.models.element import Element

FILTERABLE_COLUMNS = frozenset({"word1", "word2", "text"})


def _to_record(row: Element) -> ElementRecord:
    return ElementRecord(
        word1=row.word1, word2=row.word2, emoji=row.emoji, text=row.text,
    )


class SqlElementRepository:
    """Element persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_one(self, filters: Mapping[str, str]) -> ElementRecord | None:
        unknown = set(filters) - FILTERABLE_COLUMNS
        if not filters or unknown:
            raise ValueError(f"Unsupported element filter: {sorted(unknown) or '{}'}")
        query = select(Element)
        for column, value in filters.items():
            query = query.where(getattr(Element, column) == value)
        result = await self.db.execute(query.limit(1))
        row = result.scalar_one_or_none()
        return _to_record(row) if row else None

    async def create(self, record: ElementRecord) -> ElementRecord:
        row = Element(
            word1=record.word1, word2=record.word2,
            emoji=record.emoji, text=record.text,
        )
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        return _to_record(row)

    async def list_recent(self, limit: int, offset: int) -> list[Element]:
        """Stored elements, newest first (for browsing)."""
        result = await self.db.execute(
            select(Element)
            .order_by(Element.created_at.desc(), Element.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.db.execute(select(func.count(Element.id)))
        return result.scalar_one()
