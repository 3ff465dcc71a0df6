"""Common response wrapper schemas for API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from lexiflow.application.common.pagination import PaginatedResult

T = TypeVar("T")


class SuccessResponse(BaseModel):
    """Generic success response wrapper."""

    success: bool
    message: str


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic pagination wrapper."""

    items: list[T]
    total: int = Field(..., ge=0, description="Total items across all pages")
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
    has_next: bool
    has_previous: bool

    @classmethod
    def from_result(cls, result: PaginatedResult, items: list[T]) -> "PaginatedResponse[T]":
        return cls(
            items=items,
            total=result.total,
            page=result.page,
            page_size=result.page_size,
            total_pages=result.total_pages,
            has_next=result.has_next,
            has_previous=result.has_previous,
        )
