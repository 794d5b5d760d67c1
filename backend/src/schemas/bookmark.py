"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookmarkCreate(BaseModel):
    """Schema for creating a new bookmark. The owner comes from the auth layer."""

    title: str = Field(min_length=1, max_length=500)
    link: str = Field(min_length=1)
    description: str | None = None


class BookmarkUpdate(BaseModel):
    """
    Schema for partially updating a bookmark.

    Only fields present in the request body are applied. The owner is not
    editable, so user_id is deliberately absent.
    """

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    link: str | None = Field(default=None, min_length=1)

    @field_validator("title", "link")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        """title and link are required columns; explicit null is not a valid patch."""
        if v is None:
            raise ValueError("field cannot be null")
        return v


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str | None
    link: str
    created_at: datetime
    updated_at: datetime
