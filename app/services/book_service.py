"""
Book Catalog Backend — Book Service (Business Rules)
=====================================================

What:  Create, list, fetch, retitle, and soft-delete catalog entries.
How:   Each method runs one check-then-write or single-statement round-trip
       against the request's AsyncSession.
Who:   Called by the /books route handlers.

Rules enforced here:
    - ISBN must pass the ISBN-13 checksum (→ ValidationError, 400)
    - ISBN must be unused among non-deleted books (→ ConflictError, 409)
    - Soft-deleted books are invisible to list/get/update/delete (→ NotFoundError, 404)
    - Any other failure surfaces as DatabaseError (500) with a generic message

Known race:
    create_book checks for an existing ISBN and then inserts, with no unique
    constraint behind it. Two concurrent creates with the same ISBN can both
    pass the check. The table has no partial unique index to fall back on.
"""

import logging
from typing import List, Union
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import (
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from app.models.book import Book
from app.schemas.book import BookDetail, BookSummary
from app.services.isbn import validate_isbn13

logger = logging.getLogger(__name__)

BookId = Union[UUID, str]


def _parse_book_id(book_id: BookId) -> UUID:
    """Coerce a route-supplied id; anything that is not a UUID matches no book."""
    if isinstance(book_id, UUID):
        return book_id
    try:
        return UUID(str(book_id))
    except ValueError:
        raise NotFoundError(resource="book", resource_id=str(book_id))


class BookService:
    """
    Business logic layer for book operations.

    Stateless: the database session is passed to every call, so a single
    module-level instance serves all requests.
    """

    async def create_book(self, db: AsyncSession, title: str, isbn: str) -> BookSummary:
        """
        Validate the ISBN, enforce uniqueness, and insert a new book.

        Args:
            db: Async database session
            title: Free-text title
            isbn: ISBN-13, hyphens allowed; stored without hyphens

        Returns:
            BookSummary with the stored title and normalized ISBN

        Raises:
            ValidationError: ISBN fails format or checksum
            ConflictError: A non-deleted book already uses this ISBN
            DatabaseError: Anything else went wrong
        """
        try:
            normalized = validate_isbn13(isbn)

            result = await db.execute(
                select(Book.id)
                .where(Book.isbn == normalized, Book.is_deleted.is_(False))
                .limit(1)
            )
            if result.scalar_one_or_none() is not None:
                raise ConflictError(
                    message="already exist ISBN",
                    context={"isbn": normalized},
                )

            book = Book(title=title, isbn=normalized)
            db.add(book)
            await db.flush()
            logger.info("Book created: %s (ISBN %s)", book.id, book.isbn)

            return BookSummary(title=book.title, isbn=book.isbn)

        except (ValidationError, ConflictError):
            raise
        except Exception as e:
            logger.error("Unexpected error creating book: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="sorry something went wrong",
                context={"error_type": type(e).__name__},
            )

    async def list_books(self, db: AsyncSession) -> List[BookSummary]:
        """All non-deleted books as title/ISBN pairs, oldest first."""
        try:
            result = await db.execute(
                select(Book.title, Book.isbn)
                .where(Book.is_deleted.is_(False))
                .order_by(Book.created_at)
            )
            return [BookSummary(title=row.title, isbn=row.isbn) for row in result.all()]

        except Exception as e:
            logger.error("Database error listing books: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve books. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_book(self, db: AsyncSession, book_id: BookId) -> BookDetail:
        """
        Retrieve a single non-deleted book.

        Raises:
            NotFoundError: Unknown id, non-UUID id, or soft-deleted book (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        book_uuid = _parse_book_id(book_id)
        try:
            result = await db.execute(
                select(Book).where(Book.id == book_uuid, Book.is_deleted.is_(False))
            )
            book = result.scalar_one_or_none()

            if book is None:
                raise NotFoundError(resource="book", resource_id=str(book_uuid))

            return BookDetail(
                id=book.id,
                title=book.title,
                isbn=book.isbn,
                created_at=book.created_at,
                updated_at=book.updated_at,
                is_deleted=book.is_deleted,
            )

        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error fetching book %s: %s", book_uuid, str(e))
            raise DatabaseError(
                message="Could not retrieve the book. Please try again.",
                context={"book_id": str(book_uuid)},
            )

    async def update_book(self, db: AsyncSession, book_id: BookId, title: str) -> None:
        """
        Change the title of a non-deleted book. ISBN is never touched here.

        Raises:
            NotFoundError: No non-deleted row matched (→ 404)
        """
        book_uuid = _parse_book_id(book_id)
        rowcount = await self._update_live_book(db, book_uuid, title=title)
        if rowcount == 0:
            raise NotFoundError(resource="book", resource_id=str(book_uuid))
        logger.info("Book %s retitled", book_uuid)

    async def delete_book(self, db: AsyncSession, book_id: BookId) -> None:
        """
        Soft-delete a book by flipping is_deleted to true.

        Raises:
            NotFoundError: No non-deleted row matched, including a second delete (→ 404)
        """
        book_uuid = _parse_book_id(book_id)
        rowcount = await self._update_live_book(db, book_uuid, is_deleted=True)
        if rowcount == 0:
            raise NotFoundError(resource="book", resource_id=str(book_uuid))
        logger.info("Book %s soft-deleted", book_uuid)

    async def _update_live_book(self, db: AsyncSession, book_uuid: UUID, **values) -> int:
        """UPDATE book SET ... WHERE id = :id AND is_deleted = false; returns affected rows."""
        try:
            result = await db.execute(
                update(Book)
                .where(Book.id == book_uuid, Book.is_deleted.is_(False))
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount
        except Exception as e:
            logger.error("Database error updating book %s: %s", book_uuid, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the book. Please try again.",
                context={"book_id": str(book_uuid), "fields": sorted(values)},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
book_service = BookService()
