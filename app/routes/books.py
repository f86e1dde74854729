"""
Book Catalog Backend — Books Route Handlers
============================================

What:  The five /books endpoints: create, list, fetch, update title, soft-delete.
How:   Validate request format, delegate to BookService, wrap the result in a
       {data, message} or {message} envelope.
Who:   Called by API clients.

Update and delete reject query parameters other than bookId.

Route Inventory:
    POST   /books/create              body {title, ISBN}            → 201
    GET    /books/                                                  → 200
    GET    /books/{bookId}                                          → 200 | 404
    PATCH  /books/update?bookId=UUID  body {title}                  → 200 | 404
    DELETE /books/delete?bookId=UUID                                → 200 | 404
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.exceptions import RequestValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.book import (
    BookCreatedResponse,
    BookDetailResponse,
    BookListResponse,
    CreateBookRequest,
    ErrorResponse,
    MessageResponse,
    UpdateBookRequest,
)
from app.services.book_service import book_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/books", tags=["Books"])

_validation_error = {"description": "Malformed request", "model": ErrorResponse}
_not_found = {"description": "Book not found or deleted", "model": ErrorResponse}
_server_error = {"description": "Server error", "model": ErrorResponse}


def _only_query_params(*allowed: str):
    """Dependency rejecting query parameters outside `allowed` (→ 400 validation_error)."""

    async def check(request: Request) -> None:
        unknown = sorted(set(request.query_params) - set(allowed))
        if unknown:
            raise RequestValidationError(
                [
                    {
                        "type": "extra_forbidden",
                        "loc": ("query", name),
                        "msg": "Extra inputs are not permitted",
                        "input": request.query_params[name],
                    }
                    for name in unknown
                ]
            )

    return check


@router.post(
    "/create",
    response_model=BookCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Malformed request or invalid ISBN", "model": ErrorResponse},
        409: {"description": "ISBN already used by a non-deleted book", "model": ErrorResponse},
        500: _server_error,
    },
    summary="Add a book to the catalog",
)
async def create_book(
    body: CreateBookRequest,
    db: AsyncSession = Depends(get_db_session),
) -> BookCreatedResponse:
    data = await book_service.create_book(db, title=body.title, isbn=body.isbn)
    return BookCreatedResponse(data=data, message="Book added successfully")


@router.get(
    "/",
    response_model=BookListResponse,
    responses={500: _server_error},
    summary="List all non-deleted books",
)
async def list_books(
    db: AsyncSession = Depends(get_db_session),
) -> BookListResponse:
    data = await book_service.list_books(db)
    return BookListResponse(data=data, message="success")


@router.get(
    "/{book_id}",
    response_model=BookDetailResponse,
    responses={404: _not_found, 500: _server_error},
    summary="Get a single book by ID",
)
async def get_book(
    book_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> BookDetailResponse:
    """
    Full record of a non-deleted book.

    The path segment is accepted as any string; a value that is not a UUID
    simply matches nothing and returns 404.
    """
    data = await book_service.get_book(db, book_id)
    return BookDetailResponse(data=data, message="success")


@router.patch(
    "/update",
    response_model=MessageResponse,
    responses={400: _validation_error, 404: _not_found, 500: _server_error},
    summary="Change a book's title",
    dependencies=[Depends(_only_query_params("bookId"))],
)
async def update_book(
    body: UpdateBookRequest,
    book_id: UUID = Query(alias="bookId", description="UUID of the book to update"),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await book_service.update_book(db, book_id, body.title)
    return MessageResponse(message="updated successfully")


@router.delete(
    "/delete",
    response_model=MessageResponse,
    responses={400: _validation_error, 404: _not_found, 500: _server_error},
    summary="Soft-delete a book",
    dependencies=[Depends(_only_query_params("bookId"))],
)
async def delete_book(
    book_id: UUID = Query(alias="bookId", description="UUID of the book to delete"),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await book_service.delete_book(db, book_id)
    return MessageResponse(message="book deleted successfully")
