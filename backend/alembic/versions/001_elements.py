"""Elements table — discovered word-pair combinations.

Revision ID: 001_elements
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_elements"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "elements",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("word1", sa.String(100), nullable=False),
        sa.Column("word2", sa.String(100), nullable=False),
        sa.Column("emoji", sa.String(16), nullable=False),
        sa.Column("text", sa.String(50), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
        sa.UniqueConstraint("word1", "word2", name="uq_elements_word_pair"),
    )
    op.create_index("ix_elements_text", "elements", ["text"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_elements_text", table_name="elements")
    op.drop_table("elements")
