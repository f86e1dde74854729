"""
Book Catalog Backend — Pydantic Request/Response Schemas
=========================================================

What:  Pydantic models defining the API contract for the books endpoints.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate OpenAPI documentation.
Who:   Used by route handlers as body types and response models.

Request validation rules:
    - Strict strings: a JSON number is not accepted where a string is expected
    - extra="forbid": unknown properties are rejected
    - Violations surface as RequestValidationError → 400 (see main.py)

The ISBN field is exposed on the wire as "ISBN"; the Python attribute is
`isbn`. FastAPI serializes response models by alias.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class CreateBookRequest(BaseModel):
    """
    What:  Body of POST /books/create.

    Format checks only. ISBN checksum and uniqueness are business rules
    enforced by BookService.
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: StrictStr = Field(description="Book title")
    isbn: StrictStr = Field(
        alias="ISBN",
        description="ISBN-13, hyphens allowed (e.g. 978-0-13-235088-4)",
    )


class UpdateBookRequest(BaseModel):
    """Body of PATCH /books/update. Only the title is mutable."""
    model_config = ConfigDict(extra="forbid")

    title: StrictStr = Field(description="New book title")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class BookSummary(BaseModel):
    """Title and ISBN pair returned by create and list."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(description="Book title")
    isbn: str = Field(alias="ISBN", description="Normalized ISBN-13")


class BookDetail(BaseModel):
    """Full book record returned by GET /books/{bookId}."""
    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID = Field(description="Unique book identifier (UUID)")
    title: str = Field(description="Book title")
    isbn: str = Field(alias="ISBN", description="Normalized ISBN-13")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last modification timestamp (UTC)")
    is_deleted: bool = Field(description="Soft-delete marker (always false here)")


class MessageResponse(BaseModel):
    """Envelope for operations that return no data (update, delete)."""
    message: str = Field(description="Human-readable result message")


class BookCreatedResponse(MessageResponse):
    """Envelope for POST /books/create."""
    data: BookSummary


class BookListResponse(MessageResponse):
    """Envelope for GET /books/."""
    data: List[BookSummary]


class BookDetailResponse(MessageResponse):
    """Envelope for GET /books/{bookId}."""
    data: BookDetail


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g. "conflict", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g. which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "conflict",
            "message": "already exist ISBN",
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
