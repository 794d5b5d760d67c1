"""Pydantic schemas for user profile endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserResponse(BaseModel):
    """Response model for user info. The password hash is never exposed."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime


class UserUpdate(BaseModel):
    """Schema for partially updating the current user's profile."""

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)

    @field_validator("email")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        """email is a required column; explicit null is not a valid patch."""
        if v is None:
            raise ValueError("field cannot be null")
        return v
