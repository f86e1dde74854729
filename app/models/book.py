"""
Book Catalog Backend — Book SQLAlchemy Model
=============================================

What:  ORM model representing the `book` table.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by BookService for CRUD operations and by Alembic for schema management.

Table Design:
    - id: UUID primary key generated at insert time
    - title: free text, the only field the update endpoint touches
    - ISBN: normalized 13-digit string (hyphens stripped before insert)
    - created_at / updated_at: UTC with timezone
    - is_deleted: soft-delete flag; rows are never physically removed

    ISBN is indexed but NOT unique: uniqueness only applies among
    non-deleted rows and is checked by BookService before insert.

Column types are the generic SQLAlchemy ones (Uuid, DateTime) so the same
model maps onto PostgreSQL in deployment and SQLite in the test suite. The
PostgreSQL server defaults live in the Alembic migration.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Book(Base):
    """
    Represents a catalog entry.

    Lifecycle:
        1. Created by POST /books/create after checksum and uniqueness checks
        2. Title updated by PATCH /books/update (updated_at refreshed)
        3. Soft-deleted by DELETE /books/delete (is_deleted: false → true, never reversed)

    Query Patterns:
        - List: SELECT title, ISBN ... WHERE is_deleted = false
        - Fetch: SELECT ... WHERE id = :uuid AND is_deleted = false
        - Uniqueness check: SELECT ... WHERE ISBN = :isbn AND is_deleted = false
          → Uses idx_book_isbn
    """

    __tablename__ = "book"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique book identifier",
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Book title (mutable)",
    )

    # Attribute is `isbn`; the column keeps its wire name.
    isbn: Mapped[str] = mapped_column(
        "ISBN",
        String(13),
        nullable=False,
        comment="Normalized ISBN-13, immutable after creation",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        comment="When this book was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        comment="When this book was last modified (UTC)",
    )

    is_deleted: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Soft-delete marker",
    )

    __table_args__ = (
        Index("idx_book_isbn", isbn),
    )

    def __repr__(self) -> str:
        return (
            f"<Book(id={self.id}, isbn='{self.isbn}', "
            f"is_deleted={self.is_deleted})>"
        )
