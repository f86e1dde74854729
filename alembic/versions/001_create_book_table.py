"""Create book table

Revision ID: 001
Revises: None
Create Date: 2024-03-01 00:00:00.000000+00:00

What:  Creates the `book` table for the catalog.
How:   PostgreSQL UUID primary key, TIMESTAMP WITH TIME ZONE columns, soft-delete flag.

ISBN gets a plain index, not a unique one: uniqueness only applies among
non-deleted rows and is checked by the service before insert.

Rollback: downgrade() drops the table entirely (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "book",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
            comment="Unique book identifier",
        ),
        sa.Column(
            "title",
            sa.Text(),
            nullable=False,
            comment="Book title (mutable)",
        ),
        sa.Column(
            "ISBN",
            sa.String(13),
            nullable=False,
            comment="Normalized ISBN-13, immutable after creation",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this book was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this book was last modified (UTC)",
        ),
        sa.Column(
            "is_deleted",
            sa.Boolean(),
            server_default=sa.text("false"),
            nullable=False,
            comment="Soft-delete marker",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("idx_book_isbn", "book", ["ISBN"])


def downgrade() -> None:
    op.drop_index("idx_book_isbn", table_name="book")
    op.drop_table("book")
