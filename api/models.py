"""Shared request and response models for API endpoints.

Entity records (profiles, posts, comments, ...) are returned as the store's
own pydantic models; this module holds the envelopes around them.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

ItemT = TypeVar("ItemT")


class PageResponse(BaseModel, Generic[ItemT]):
    """One page of a listing.

    Attributes:
        page: Zero-indexed page number that was requested.
        page_size: Page size that was applied.
        items: Items on this page (empty when past the end).
        returned_count: Number of items on this page.
    """

    page: int
    page_size: int
    items: list[ItemT]
    returned_count: int

    @classmethod
    def build(cls, items: list[ItemT], page: int, page_size: int) -> "PageResponse[ItemT]":
        return cls(page=page, page_size=page_size, items=items, returned_count=len(items))


class ActionResponse(BaseModel):
    """Result of a mutating call that has no entity to return.

    Attributes:
        status: Always "ok" for accepted calls.
        message: Human-readable description of what happened.
        id: Id of the created entity, when one was created.
    """

    status: str = "ok"
    message: str
    id: int | None = None


class FlagResponse(BaseModel):
    """A single boolean answer (is_liked, is_following, is_viral, ...)."""

    value: bool


class ErrorResponse(BaseModel):
    """Standard error response body.

    Attributes:
        error: Error class ("Unauthorized", "Not Found", "Conflict", ...).
        detail: Human-readable reason.
        condition: Store condition name, for store errors.
    """

    error: str
    detail: str
    condition: str | None = None


class HealthResponse(BaseModel):
    status: str
    version: str


class StoreStateResponse(BaseModel):
    """Full store dump plus per-table summaries.

    Attributes:
        tables: Snapshot of every table (can be large).
        summary: Brief summary per table.
    """

    tables: dict[str, Any] = Field(description="Snapshot of every table")
    summary: dict[str, str]


class ValidationReportResponse(BaseModel):
    valid: bool
    issues: list[str]
