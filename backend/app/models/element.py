"""Element ORM — persists one discovered combination.

Invariants:
    - (word1, word2) is unique and stored lower-cased, word1 <= word2
    - text is unique and stored lower-cased
    - Rows are never updated or deleted by the application

Design Decisions:
    - Integer surrogate key: rows are addressed by pair or text, never by id
      from the client
    - Uniqueness enforced in the schema as well as in the service, so a race
      between two creates fails loudly instead of duplicating a label
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.core.normalize_pair import MAX_WORD_LENGTH
from app.db.base import Base


class Element(Base):
    """Discovered element — ordered word pair mapped to (emoji, text)."""
    __tablename__ = "elements"
    __table_args__ = (
        UniqueConstraint("word1", "word2", name="uq_elements_word_pair"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    word1: Mapped[str] = mapped_column(String(MAX_WORD_LENGTH), nullable=False)
    word2: Mapped[str] = mapped_column(String(MAX_WORD_LENGTH), nullable=False)
    emoji: Mapped[str] = mapped_column(String(16), nullable=False)
    text: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
